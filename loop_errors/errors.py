"""Messages describing errors caught from loop Promises."""

from __future__ import annotations

from typing import Any

UNPRINTABLE = "<unprintable value>"


def safe_text(value: Any) -> str:
    """Return ``str(value)``, or ``UNPRINTABLE`` if conversion fails."""
    try:
        text = str(value)
    except Exception:
        return UNPRINTABLE
    if not isinstance(text, str):
        return UNPRINTABLE
    return text


def loop_promise_caught_error(original_action_type: Any, error: Any) -> str:
    """
    Describe a loop Promise that rejected after being returned from an action.

    Args:
        original_action_type: Type of the action whose handler returned the Promise
        error: The value the Promise rejected with

    Returns:
        Multi-line diagnostic message. Never raises.
    """
    return (
        "\n"
        f"loop Promise caught when returned from action of type {safe_text(original_action_type)}.\n"
        "loop Promises must not throw!\n"
        "\n"
        "Thrown exception: \n"
        f"{safe_text(error)}\n"
    )
