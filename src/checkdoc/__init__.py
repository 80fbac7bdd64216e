"""
check-doc: Swaggo annotation checker for Go controller functions.
"""

__version__ = "0.0.1"

from .config import CheckConfig
from .engine import check_file, check_project
from .errors import CheckDocError, ParseError, TraversalError
from .models import CheckResult, Declaration

__all__ = [
    'CheckConfig',
    'CheckResult',
    'Declaration',
    'check_file',
    'check_project',
    'CheckDocError',
    'ParseError',
    'TraversalError',
]
