"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TextppUserError.

Programming errors and bugs should NOT inherit from TextppUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class TextppUserError(Exception):
    """
    Base class for all user-facing errors in textpp.

    These errors indicate problems that the user can fix:
    broken directive structure, invalid expressions, bad definitions, etc.
    """
    pass


class ConfigError(TextppUserError):
    """Invalid -D flag or definitions file."""
    pass


class DirectiveError(TextppUserError):
    """
    Fatal error in the directive structure of a document.

    Carries the file, the 1-based line number and the name of the rule
    that failed, so the caller can print a precise diagnostic.
    """

    rule: str = "DirectiveError"
    prefix: str = "invalid directive structure"

    def __init__(self, message: str, path: Union[str, Path, None] = None, line: Optional[int] = None):
        self.message = message
        self.path = str(path) if path is not None else "<string>"
        self.line = line
        location = self.path if line is None else f"{self.path}:{line}"
        super().__init__(f"{location}: {self.prefix}: {message} [{self.rule}]")


class MismatchedElse(DirectiveError):
    rule = "MismatchedElse"


class MismatchedEndif(DirectiveError):
    rule = "MismatchedEndif"


class UnterminatedConditional(DirectiveError):
    rule = "UnterminatedConditional"


class InvalidExpression(DirectiveError):
    rule = "InvalidExpression"
    prefix = "invalid expression"


class IncludeCycle(DirectiveError):
    rule = "IncludeCycle"
    prefix = "invalid include"


__all__ = [
    "TextppUserError",
    "ConfigError",
    "DirectiveError",
    "MismatchedElse",
    "MismatchedEndif",
    "UnterminatedConditional",
    "InvalidExpression",
    "IncludeCycle",
]
