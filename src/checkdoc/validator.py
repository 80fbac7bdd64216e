"""
Annotation presence checks for controller doc comments.
"""
import logging
from typing import List, Optional, Sequence

from .config import CheckConfig
from .models import CheckResult

logger = logging.getLogger(__name__)


def find_missing_tags(doc: Optional[str], tags: Sequence[str]) -> List[str]:
    """
    Returns the tags that do not occur anywhere in `doc`, in `tags` order.
    Matching is plain case-sensitive substring containment.
    """
    if doc is None:
        return list(tags)
    return [tag for tag in tags if tag not in doc]


def validate(name: str, doc: Optional[str], source_file: str = "", line: int = 0,
             config: Optional[CheckConfig] = None) -> Optional[CheckResult]:
    """
    Checks one function's doc comment against the required tags.

    Args:
        name: Function name
        doc: Comment group text, or None if the function has no doc comment
        source_file: File the function was declared in
        line: Declaration line
        config: Conventions to check against (defaults if omitted)

    Returns:
        A CheckResult, or None when `name` is the exempt identifier
    """
    config = config or CheckConfig()

    if name == config.exempt_name:
        logger.debug(f"Skipping exempt function {name}")
        return None

    missing = find_missing_tags(doc, config.required_tags)
    for tag in missing:
        logger.debug(f"{name}: missing {tag}")

    return CheckResult(
        name=name,
        has_all=not missing,
        missing=missing,
        source_file=source_file,
        line=line,
    )
