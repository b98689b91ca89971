"""Enumeration of font package directories."""

import logging
import os
from collections.abc import Iterable

from gfont2ts.core.models import FontDir

logger = logging.getLogger(__name__)


def list_font_dirs(roots: Iterable[str]) -> list[FontDir]:
    """List the immediate child directories of each root.

    Order is the platform's directory-listing order within a root, and roots
    are visited in the order given. Symbolic links are not followed.

    Args:
        roots: Directories holding one font package per child directory.

    Returns:
        One FontDir per child directory.

    Raises:
        FileNotFoundError: If a root does not exist.
    """
    font_dirs = []
    for root in roots:
        with os.scandir(root) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_dir(follow_symlinks=False)
            ]
        logger.debug(f"Found {len(names)} package director(ies) in {root}")
        font_dirs.extend(FontDir(root=root, name=name) for name in names)
    return font_dirs
