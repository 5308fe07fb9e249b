"""Find which source language a symlink points into."""

import os
from pathlib import Path

from ...utils.canonicalize_path import canonicalize_path
from ..config.CategoryConfig import CategoryConfig


def link_language(link: Path, source_dir: Path, category: CategoryConfig, canonicalize: bool = True) -> str | None:
    """Return the language code a symlink points into, or None if it points elsewhere.

    A link is considered to belong to the toolkit when its target lies under
    ``source_dir/<subdir>/<language>/``.
    """
    current = Path(os.readlink(link))
    if not current.is_absolute():
        current = link.parent / current
    root = source_dir / category.subdir
    if canonicalize:
        current = canonicalize_path(current)
        root = canonicalize_path(root)
    else:
        current = Path(os.path.normpath(current))
        root = Path(os.path.normpath(root))

    try:
        relative = current.relative_to(root)
    except ValueError:
        return None
    if len(relative.parts) < 2:
        return None
    return relative.parts[0]
