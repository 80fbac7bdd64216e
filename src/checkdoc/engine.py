"""
Project-level check pipeline.
Composes discovery, extraction and validation into one result map.
"""
import logging
from typing import Dict, Optional

from .config import CheckConfig
from .discovery import find_entry_points
from .extractor import extract_declarations
from .models import CheckResult
from .validator import validate

logger = logging.getLogger(__name__)


def check_file(file_path: str, config: Optional[CheckConfig] = None) -> Dict[str, CheckResult]:
    """
    Checks every top-level function of one Go file.
    Returns a map of function name to CheckResult; exempt functions are absent.
    """
    config = config or CheckConfig()
    results: Dict[str, CheckResult] = {}

    for decl in extract_declarations(file_path):
        result = validate(decl.name, decl.doc, decl.source_file, decl.line, config)
        if result is None:
            continue
        _merge(results, result)

    return results


def _merge(results: Dict[str, CheckResult], result: CheckResult):
    """Stores `result` under its name; a later result with the same name wins."""
    previous = results.get(result.name)
    if previous is not None:
        logger.warning(
            f"Function {result.name} at {result.source_file}:{result.line} "
            f"replaces the one at {previous.source_file}:{previous.line}"
        )
    results[result.name] = result


def check_project(project_root: str, config: Optional[CheckConfig] = None) -> Dict[str, CheckResult]:
    """
    Checks the controller entry point of every eligible directory under project_root.

    Results are keyed by function name. When two files declare the same
    name, the one visited later wins and a warning is logged.

    Raises:
        TraversalError: If the tree or a file cannot be read
        ParseError: If an entry-point file is not valid Go
    """
    config = config or CheckConfig()
    results: Dict[str, CheckResult] = {}

    for entry_point in find_entry_points(project_root, config):
        for result in check_file(entry_point, config).values():
            _merge(results, result)

    logger.debug(f"Checked {len(results)} functions under {project_root}")
    return results
