"""
Fatal errors raised while checking a project.
"""
from typing import Optional


class CheckDocError(Exception):
    """Base class for errors that abort a check run."""


class TraversalError(CheckDocError):
    """A filesystem failure while walking the tree or reading a file."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot access {path}: {reason}")


class ParseError(CheckDocError):
    """A source file that does not parse."""

    def __init__(self, path: str, line: int, column: int, detail: Optional[str] = None):
        self.path = path
        self.line = line
        self.column = column
        message = f"{path}:{line}:{column}: syntax error"
        if detail:
            message += f" near {detail!r}"
        super().__init__(message)
