"""Check whether an existing symlink already points at a source path."""

import os
from pathlib import Path

from ...utils.canonicalize_path import canonicalize_path


def points_at(link: Path, source: Path, canonicalize: bool = True) -> bool:
    """Return True if symlink ``link`` points at ``source``.

    The literal link text is compared with the absolute source first. With
    ``canonicalize``, relative link text is read against the link's parent and
    both sides are resolved before comparing. One trailing separator on the
    link text is ignored, so ``skills/en/alpha/`` matches ``skills/en/alpha``.
    """
    current = os.readlink(link)
    if current.endswith(os.sep) and current != os.sep:
        current = current[: -len(os.sep)]
    if current == str(source):
        return True
    if not canonicalize:
        return False

    current_path = Path(current)
    if not current_path.is_absolute():
        current_path = link.parent / current_path
    return canonicalize_path(current_path) == canonicalize_path(source)
