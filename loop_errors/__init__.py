"""Diagnostics for rejected loop Promises returned from action handlers."""

__version__ = "0.1.0"
__author__ = "loop-errors"

from .errors import UNPRINTABLE, loop_promise_caught_error, safe_text
from .report import CaughtErrorReport

__all__ = [
    "UNPRINTABLE",
    "loop_promise_caught_error",
    "safe_text",
    "CaughtErrorReport",
]
