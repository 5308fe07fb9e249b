"""Link the agents and skills of one language into the target directory."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.normalize_path import normalize_path
from .._output_schemas.link import LinkRunOutput
from ..config.AitkConfig import AitkConfig
from ..config.ConfigurationError import ConfigurationError
from ..StageResult import StageResult
from ._render_summary import _render_summary, count_statuses
from .enumerate_entries import enumerate_entries
from .LinkSpec import LinkSpec
from .reconcile_link import reconcile_link
from .ReconcileResult import ReconcileResult


def _plan(config: AitkConfig, language: str, source_dir: Path, target_dir: Path) -> tuple[list[LinkSpec], list[str]]:
    """Build link specs for every category before anything is touched."""
    specs: list[LinkSpec] = []
    warnings: list[str] = []
    for name, category in config.categories().items():
        entries = list(enumerate_entries(source_dir, language, category, config.languages))
        if not entries:
            noun = "files" if category.kind == "file" else "directories"
            root = source_dir / category.subdir / language
            warnings.append(f"No {name.rstrip('s')} {noun} found in {root}")
            continue
        for entry in entries:
            specs.append(
                LinkSpec(
                    category=name,
                    name=entry.name,
                    label=entry.label,
                    source=entry.path,
                    target=target_dir / name / entry.name,
                )
            )
    return specs, warnings


def cmd_run(lang: str | None = None, source_dir: str | None = None, target_dir: str | None = None) -> StageResult:
    """Create or repair symlinks for every agent and skill of a language.

    Configuration problems (unsupported language, missing category root,
    invalid config file) fail the command before any filesystem change.
    Conflicts and IO errors are reported per entry and do not stop the run.

    Args:
        lang: Language code; defaults to the configured default language
        source_dir: Toolkit checkout; overrides the configured one
        target_dir: Assistant directory; overrides the configured one

    Returns:
        StageResult with per-entry results; success only without conflicts or errors
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        language = lang or ""
        source_path = normalize_path(source_dir) if source_dir else None
        target_path = normalize_path(target_dir) if target_dir else None

        yield (0.05, "Loading configuration...")
        try:
            config = AitkConfig.load()
            language = lang or config.default_language
            source_path = source_path or Path(config.source_dir)
            target_path = target_path or Path(config.target_dir)

            yield (0.1, f"Discovering agents and skills for '{language}'...")
            specs, warnings = _plan(config, language, source_path, target_path)
        except (ConfigurationError, OSError) as e:
            # Nothing has been touched yet
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = LinkRunOutput(
                errors=[str(e)],
                warnings=[],
                language=language,
                source_dir=str(source_path or ""),
                target_dir=str(target_path or ""),
                entries=[],
                counts={},
                linked=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        results: list[ReconcileResult] = []
        total = len(specs)
        for index, spec in enumerate(specs, start=1):
            result = reconcile_link(spec, canonicalize=config.canonicalize_paths)
            results.append(result)
            yield (0.1 + 0.9 * index / total, f"{spec.display_name}: {result.status.value}")

        if not specs:
            yield (1.0, "Nothing to link")

        problems = [f"{r.spec.display_name}: {r.reason}" for r in results if not r.ok]
        result_obj.result = _render_summary(language, results)
        result_obj.output = LinkRunOutput(
            errors=problems,
            warnings=warnings,
            language=language,
            source_dir=str(source_path),
            target_dir=str(target_path),
            entries=[r.to_dict() for r in results],
            counts=count_statuses(results),
            linked=sum(1 for r in results if r.ok),
        ).model_dump(mode="python")
        result_obj.success = not problems

    announce = f"Linking agents and skills ({lang})..." if lang else "Linking agents and skills..."
    return StageResult(announce=announce, progress_callback=do_work)
