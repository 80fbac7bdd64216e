"""
Data models for controller documentation checks.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Declaration:
    """A top-level function declaration and its leading doc comment."""
    name: str
    doc: Optional[str]  # None when no comment group is attached
    source_file: str
    line: int
    column: int


@dataclass
class CheckResult:
    """
    Outcome of checking one function's doc comment.
    `missing` keeps the required-tag order, so it is empty iff `has_all`.
    """
    name: str
    has_all: bool
    missing: List[str] = field(default_factory=list)
    source_file: str = ""
    line: int = 0
