"""Unit tests for aitk.api.link.cmd_remove module."""

from pathlib import Path

import pytest

from aitk.api.link.cmd_remove import cmd_remove
from aitk.api.link.cmd_run import cmd_run
from tests.conftest import run_cmd

pytestmark = pytest.mark.link


class TestCmdRemove:
    def test_removes_toolkit_links(self, aitk_home, claude_dir):
        run_cmd(cmd_run)

        result = run_cmd(cmd_remove)

        assert result.success is True
        assert result.output["count"] == 4
        assert result.output["removed"] == ["agents/a.md", "agents/b.md", "skills/alpha", "skills/beta"]
        assert list((claude_dir / "agents").iterdir()) == []
        assert list((claude_dir / "skills").iterdir()) == []

    def test_removes_links_of_every_language(self, aitk_home, claude_dir):
        run_cmd(cmd_run, "en")
        run_cmd(cmd_run, "zh-cn")

        result = run_cmd(cmd_remove)

        assert result.success is True
        assert "agents/a.md" in result.output["removed"]
        assert "agents/b.md" in result.output["removed"]

    def test_keeps_user_files_and_foreign_links(self, aitk_home, claude_dir, tmp_path):
        run_cmd(cmd_run)
        user_file = claude_dir / "agents" / "mine.md"
        user_file.write_text("hello")
        elsewhere = tmp_path / "elsewhere.md"
        elsewhere.write_text("foreign")
        foreign = claude_dir / "agents" / "foreign.md"
        foreign.symlink_to(elsewhere)

        result = run_cmd(cmd_remove)

        assert result.success is True
        assert user_file.read_text() == "hello"
        assert foreign.is_symlink()
        assert "agents/mine.md (not a symlink)" in result.output["skipped"]
        assert any(s.startswith("agents/foreign.md (points outside") for s in result.output["skipped"])

    def test_removes_dangling_toolkit_link(self, aitk_home, claude_dir, toolkit):
        run_cmd(cmd_run)
        (toolkit / "agents" / "en" / "a.md").unlink()

        result = run_cmd(cmd_remove)

        assert "agents/a.md" in result.output["removed"]
        assert not (claude_dir / "agents" / "a.md").is_symlink()

    def test_missing_target_directories(self, aitk_home):
        result = run_cmd(cmd_remove)

        assert result.success is True
        assert result.output["count"] == 0
        assert len(result.output["warnings"]) == 2

    def test_unreadable_target_directory_is_reported(self, aitk_home, claude_dir, monkeypatch):
        run_cmd(cmd_run)
        real_iterdir = Path.iterdir

        def denied(self):
            if self == claude_dir / "agents":
                raise PermissionError(13, "Permission denied", str(self))
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", denied)

        result = run_cmd(cmd_remove)

        assert result.success is False
        assert result.output["errors"][0].startswith("agents: ")
        assert "Permission denied" in result.output["errors"][0]
        assert result.output["removed"] == ["skills/alpha", "skills/beta"]
        assert (claude_dir / "agents" / "a.md").is_symlink()
