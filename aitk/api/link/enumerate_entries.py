"""Enumerate the entries of one category for one language."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config.CategoryConfig import CategoryConfig
from ..config.ConfigurationError import ConfigurationError
from .available_languages import available_languages
from .SourceEntry import SourceEntry


def _matches(child: Path, category: CategoryConfig) -> bool:
    if child.name.startswith("."):
        return False
    if category.kind == "directory":
        return child.is_dir()
    if not child.is_file():
        return False
    return category.suffix is None or child.name.endswith(category.suffix)


def _label(name: str, category: CategoryConfig) -> str:
    if category.kind == "file" and category.suffix and name.endswith(category.suffix):
        return name[: -len(category.suffix)]
    return name


def _iter_entries(root: Path, category: CategoryConfig) -> Iterator[SourceEntry]:
    for child in sorted(root.iterdir(), key=lambda p: p.name):
        if _matches(child, category):
            yield SourceEntry(name=child.name, label=_label(child.name, category), path=child)


def enumerate_entries(
    source_dir: Path,
    language: str,
    category: CategoryConfig,
    languages: Iterable[str],
) -> Iterator[SourceEntry]:
    """Enumerate agent files or skill directories for a language.

    Validation happens when this function is called; the returned iterator
    is lazy. An existing but empty category root yields nothing.

    Args:
        source_dir: Toolkit checkout
        language: Requested language code
        category: Category layout
        languages: Allow-list of supported language codes

    Raises:
        ConfigurationError: If the language is not supported or the
            category root ``source_dir/<subdir>/<language>`` does not exist
    """
    supported = list(languages)
    if language not in supported:
        raise ConfigurationError(
            f"Unsupported language '{language}'. Supported languages: {', '.join(supported)}"
        )

    root = source_dir / category.subdir / language
    if not root.is_dir():
        present = available_languages(source_dir, category)
        hint = ", ".join(present) if present else "none"
        raise ConfigurationError(
            f"{category.subdir.capitalize()} directory not found: {root} (available languages: {hint})"
        )

    return _iter_entries(root, category)
