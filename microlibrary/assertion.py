"""Assertion failure handling and precondition/postcondition checks."""

from __future__ import annotations

import inspect
from typing import Any, Optional

from microlibrary.error import MicrolibraryError

__all__ = ["AssertionFailure", "handle_assertion_failure", "expect", "ensure"]


class AssertionFailure(MicrolibraryError):
    """Raised when a precondition or postcondition does not hold."""

    def __init__(self, error: Any, file: Optional[str] = None, line: Optional[int] = None) -> None:
        super().__init__(error)
        self.file = file
        self.line = line
        if file is not None and line is not None:
            self.args = (f"{file}:{line}: {self.error}",)


def handle_assertion_failure(error: Any, file: Optional[str] = None, line: Optional[int] = None) -> None:
    """Report an assertion failure by raising :class:`AssertionFailure`."""
    raise AssertionFailure(error, file, line)


def _check(condition: Any, error: Any) -> None:
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
    try:
        if caller is None:
            handle_assertion_failure(error)
        else:
            handle_assertion_failure(error, caller.f_code.co_filename, caller.f_lineno)
    finally:
        del frame, caller


def expect(condition: Any, error: Any) -> None:
    """Check a precondition; raise :class:`AssertionFailure` if it does not hold."""
    _check(condition, error)


def ensure(condition: Any, error: Any) -> None:
    """Check a postcondition; raise :class:`AssertionFailure` if it does not hold."""
    _check(condition, error)