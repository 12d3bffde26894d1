"""Structured report for a caught loop Promise error."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .errors import loop_promise_caught_error, safe_text


@dataclass(frozen=True)
class CaughtErrorReport:
    """
    Machine-readable form of a loop Promise diagnostic.

    error_type is the class name of the caught value, so a rejection with
    None reports "NoneType".
    """

    action_type: str
    error_type: str
    error: str
    message: str

    @classmethod
    def from_caught(cls, original_action_type: Any, error: Any) -> "CaughtErrorReport":
        return cls(
            action_type=safe_text(original_action_type),
            error_type=type(error).__name__,
            error=safe_text(error),
            message=loop_promise_caught_error(original_action_type, error),
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
