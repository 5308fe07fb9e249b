"""List language directories present for a category."""

from pathlib import Path

from ..config.CategoryConfig import CategoryConfig


def available_languages(source_dir: Path, category: CategoryConfig) -> list[str]:
    """Return sorted language codes that have a directory under the category root."""
    root = source_dir / category.subdir
    if not root.is_dir():
        return []
    return sorted(child.name for child in root.iterdir() if child.is_dir() and not child.name.startswith("."))
