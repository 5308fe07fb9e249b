"""Remove toolkit symlinks from the target directory."""

import logging
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkRemoveOutput
from ..config.AitkConfig import AitkConfig
from ..config.ConfigurationError import ConfigurationError
from ..StageResult import StageResult
from .link_language import link_language

logger = logging.getLogger(__name__)


def cmd_remove() -> StageResult:
    """Remove symlinks that point into the toolkit, for any language.

    Regular files, directories and symlinks pointing elsewhere are left in
    place and reported as skipped.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = AitkConfig.load()
        except ConfigurationError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = LinkRemoveOutput(
                errors=[str(e)],
                warnings=[],
                source_dir="",
                target_dir="",
                removed=[],
                skipped=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        source_dir = Path(config.source_dir)
        target_dir = Path(config.target_dir)
        removed: list[str] = []
        skipped: list[str] = []
        errors: list[str] = []
        warnings: list[str] = []

        for name, category in config.categories().items():
            root = target_dir / name
            if not root.is_dir():
                warnings.append(f"No {name} directory: {root}")
                continue
            try:
                entries = sorted(root.iterdir(), key=lambda p: p.name)
            except OSError as e:
                logger.error(f"Cannot list {root}: {e}")
                errors.append(f"{name}: {e}")
                continue
            for entry in entries:
                display_name = f"{name}/{entry.name}"
                if not entry.is_symlink():
                    skipped.append(f"{display_name} (not a symlink)")
                    continue
                try:
                    if link_language(entry, source_dir, category, canonicalize=config.canonicalize_paths) is None:
                        skipped.append(f"{display_name} (points outside {source_dir})")
                        continue
                    entry.unlink()
                except OSError as e:
                    logger.error(f"Failed to remove {entry}: {e}")
                    errors.append(f"{display_name}: {e}")
                    continue
                logger.info(f"removed: {entry}")
                removed.append(display_name)
                yield (0.5, f"{display_name}: removed")

        yield (1.0, "Complete")
        result_obj.result = f"Removed {len(removed)} link(s), skipped {len(skipped)}"
        if errors:
            result_obj.result += f", {len(errors)} error(s)"
        result_obj.output = LinkRemoveOutput(
            errors=errors,
            warnings=warnings,
            source_dir=str(source_dir),
            target_dir=str(target_dir),
            removed=removed,
            skipped=skipped,
            count=len(removed),
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(announce="Removing linked agents and skills...", progress_callback=do_work)
