"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "link", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Toolkit Helpers
# =============================================================================


def make_toolkit(
    root: Path,
    agents: dict[str, list[str]] | None = None,
    skills: dict[str, list[str]] | None = None,
) -> Path:
    """Create a toolkit checkout with agents/<lang>/*.md files and skills/<lang>/<name>/ dirs.

    Args:
        root: Directory to create the toolkit in
        agents: Mapping of language code to agent file names
        skills: Mapping of language code to skill directory names

    Returns:
        The toolkit root
    """
    for lang, names in (agents or {}).items():
        lang_dir = root / "agents" / lang
        lang_dir.mkdir(parents=True, exist_ok=True)
        for name in names:
            (lang_dir / name).write_text(f"# {name} ({lang})\n")
    for lang, names in (skills or {}).items():
        lang_dir = root / "skills" / lang
        lang_dir.mkdir(parents=True, exist_ok=True)
        for name in names:
            (lang_dir / name).mkdir()
            (lang_dir / name / "SKILL.md").write_text(f"# {name} ({lang})\n")
    return root


def write_config(home: Path, **settings) -> Path:
    """Write ``<home>/.aitk/config.json`` with the given settings."""
    config_path = home / ".aitk" / "config.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(settings, indent=2))
    return config_path


def snapshot(root: Path) -> dict[str, str]:
    """Map every path under root to a description of what is there."""
    state: dict[str, str] = {}
    if not root.exists():
        return state
    for path in sorted(root.rglob("*")):
        rel = str(path.relative_to(root))
        if path.is_symlink():
            state[rel] = f"link:{path.readlink()}"
        elif path.is_dir():
            state[rel] = "dir"
        else:
            state[rel] = f"file:{path.read_text()}"
    return state


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def home(tmp_path: Path, monkeypatch) -> Path:
    """Isolate every test in its own home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("AITK_HOME", raising=False)
    monkeypatch.chdir(tmp_path)
    yield home_dir
    for handler in list(logging.getLogger("aitk").handlers):
        handler.flush()


@pytest.fixture
def toolkit(tmp_path: Path) -> Path:
    """Toolkit with two English agents and skills, one Chinese agent and no Chinese skills."""
    root = make_toolkit(
        tmp_path / "toolkit",
        agents={"en": ["a.md", "b.md"], "zh-cn": ["a.md"]},
        skills={"en": ["alpha", "beta"], "zh-cn": []},
    )
    return root


@pytest.fixture
def aitk_home(home: Path, toolkit: Path) -> Path:
    """Home directory whose config points at the toolkit fixture."""
    write_config(home, source_dir=str(toolkit))
    return home


@pytest.fixture
def claude_dir(home: Path) -> Path:
    """Default target directory (not created)."""
    return home / ".claude"
