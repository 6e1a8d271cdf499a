"""Utility helpers for the live score display."""

from .cancellation import CancellationToken, SignalHandlerError, WaitOutcome
from .logging import debug, log, set_log_file

__all__ = [
    "CancellationToken",
    "SignalHandlerError",
    "WaitOutcome",
    "debug",
    "log",
    "set_log_file",
]
