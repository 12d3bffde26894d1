"""Command line entry-point for rendering loop Promise diagnostics."""

from __future__ import annotations

import json
import logging
from typing import TextIO

import click

from .errors import loop_promise_caught_error
from .report import CaughtErrorReport
from .utils.logging import setup_logging

logger = logging.getLogger("loop_errors.cli")


def _read_error_text(input: TextIO) -> str:
    """Read the caught error text, dropping one trailing newline."""
    try:
        text = input.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Could not read error text: {exc}") from exc

    if text.endswith("\n"):
        text = text[:-1]
    return text


@click.command()
@click.argument("action_type")
@click.option("--input", "-i", type=click.File("r"), default="-", help="Error text file path (defaults to stdin)")
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON report instead of the plain message")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(
    action_type: str,
    input: TextIO,
    output: TextIO,
    as_json: bool,
    verbose: bool,
) -> None:
    """Explain an error thrown by the loop Promise of ACTION_TYPE."""

    setup_logging(verbose=verbose)

    error_text = _read_error_text(input)
    logger.debug(f"Read {len(error_text)} characters of error text for {action_type}")

    if as_json:
        report = CaughtErrorReport.from_caught(action_type, error_text)
        json.dump(report.to_dict(), output, indent=2)
        output.write("\n")
    else:
        output.write(loop_promise_caught_error(action_type, error_text))

    logger.debug(f"Rendered {'JSON' if as_json else 'text'} diagnostic")


if __name__ == "__main__":  # pragma: no cover
    main()
