"""
Controller directory discovery.
"""
import os
import logging
from typing import Iterator, Optional

from .config import CheckConfig
from .errors import TraversalError

logger = logging.getLogger(__name__)


def is_eligible_dir(path: str, config: CheckConfig) -> bool:
    """A directory is eligible when its base name matches the controller convention."""
    return os.path.basename(os.path.normpath(path)) == config.directory_name


def find_entry_points(project_root: str, config: Optional[CheckConfig] = None) -> Iterator[str]:
    """
    Walks project_root and yields the entry-point file of every eligible
    directory, in sorted traversal order.

    Only the single entry-point file is ever yielded for a directory; other
    files next to it are not inspected. Symlinked directories are not followed.

    Raises:
        TraversalError: On any filesystem error during the walk
    """
    config = config or CheckConfig()

    def on_walk_error(error: OSError):
        """os.walk swallows errors unless onerror raises."""
        raise TraversalError(error.filename or project_root, error)

    for current_root, dirs, _files in os.walk(project_root, onerror=on_walk_error):
        # Sorting in place fixes the order os.walk descends in.
        dirs.sort()

        if not is_eligible_dir(current_root, config):
            continue

        entry_point = os.path.normpath(os.path.join(current_root, config.entry_point))
        if os.path.exists(entry_point):
            logger.debug(f"Found entry point: {entry_point}")
            yield entry_point
        else:
            logger.debug(f"No {config.entry_point} in {current_root}, skipping")
