"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .AitkConfig import AitkConfig
from .get_config_path import get_config_path


def cmd_show(section: str = "") -> StageResult:
    """Show the effective configuration or one section of it.

    Args:
        section: Section name. Empty string shows the whole configuration.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(get_config_path())
        yield (0.3, "Loading configuration...")
        try:
            config = AitkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "section": section,
                "content": {},
                "config_path": config_path,
            }
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()

        if section == "":
            yield (1.0, "Complete")
            result_obj.result = f"Found {len(config_dict)} setting(s)"
            result_obj.output = {
                "errors": [],
                "warnings": [],
                "section": "",
                "content": config_dict,
                "config_path": config_path,
            }
            result_obj.success = True
            return

        if section not in config_dict:
            yield (1.0, "Complete")
            result_obj.result = f"Section '{section}' not found"
            result_obj.output = {
                "errors": [f"Unknown section: {section}"],
                "warnings": [],
                "section": section,
                "content": {},
                "config_path": config_path,
            }
            result_obj.success = False
            return

        value = config_dict[section]
        yield (1.0, "Complete")
        result_obj.result = f"Retrieved configuration for '{section}'"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "section": section,
            "content": value if isinstance(value, dict) else {section: value},
            "config_path": config_path,
        }
        result_obj.success = True

    announce = "Showing configuration..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
