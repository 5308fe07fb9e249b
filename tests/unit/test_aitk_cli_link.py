"""Unit tests for the link CLI commands."""

import os

import pytest
from typer.testing import CliRunner

from aitk.cli._create_app import _create_app
from tests.conftest import snapshot

pytestmark = pytest.mark.cli

runner = CliRunner()


def test_run_links_entries(aitk_home, toolkit, claude_dir):
    result = runner.invoke(_create_app(), ["link", "run"])

    assert result.exit_code == 0, result.output
    assert "agents/a: created" in result.output
    assert "skills/alpha: created" in result.output
    assert "4 created" in result.output
    assert os.readlink(claude_dir / "agents" / "a.md") == str(toolkit / "agents" / "en" / "a.md")


@pytest.mark.parametrize("args", [["--lang=zh-cn"], ["--lang", "zh-cn"]])
def test_run_lang_forms(aitk_home, toolkit, claude_dir, args):
    result = runner.invoke(_create_app(), ["link", "run", *args])

    assert result.exit_code == 0, result.output
    assert os.readlink(claude_dir / "agents" / "a.md") == str(toolkit / "agents" / "zh-cn" / "a.md")


def test_run_twice_reports_already_linked(aitk_home):
    runner.invoke(_create_app(), ["link", "run"])

    result = runner.invoke(_create_app(), ["link", "run"])

    assert result.exit_code == 0
    assert "agents/b: already-linked" in result.output
    assert "4 already linked" in result.output


def test_run_conflict_exits_nonzero(aitk_home, claude_dir):
    user_file = claude_dir / "agents" / "a.md"
    user_file.parent.mkdir(parents=True)
    user_file.write_text("hello")

    result = runner.invoke(_create_app(), ["link", "run"])

    assert result.exit_code == 1
    assert "agents/a: conflict" in result.output
    assert "1 conflict," in result.output
    assert "Please manually remove or back up" in result.output
    assert user_file.read_text() == "hello"


def test_run_unsupported_language(aitk_home, toolkit, claude_dir):
    before = snapshot(toolkit)

    result = runner.invoke(_create_app(), ["link", "run", "--lang", "fr"])

    assert result.exit_code == 1
    assert "Supported languages: en, zh-cn" in result.output
    assert not claude_dir.exists()
    assert snapshot(toolkit) == before


def test_run_unknown_flag_changes_nothing(aitk_home, claude_dir):
    result = runner.invoke(_create_app(), ["link", "run", "--force"])

    assert result.exit_code == 2
    assert "--force" in result.output
    assert not claude_dir.exists()


def test_run_help_does_nothing(aitk_home, claude_dir):
    result = runner.invoke(_create_app(), ["link", "run", "-h"])

    assert result.exit_code == 0
    assert "--lang" in result.output
    assert not claude_dir.exists()


def test_run_json_display(aitk_home):
    result = runner.invoke(_create_app(), ["--display", "json", "link", "run"])

    assert result.exit_code == 0
    assert '"language": "en"' in result.output
    assert '"created": 4' in result.output


def test_run_yaml_display_is_default(aitk_home):
    result = runner.invoke(_create_app(), ["link", "run"])

    assert "language: en" in result.output
    assert "linked: 4" in result.output


def test_invalid_display(aitk_home):
    result = runner.invoke(_create_app(), ["--display", "xml", "link", "run"])

    assert result.exit_code == 1
    assert "--display must be 'json' or 'yaml'" in result.output


def test_status_and_remove(aitk_home, claude_dir):
    runner.invoke(_create_app(), ["link", "run"])

    status = runner.invoke(_create_app(), ["link", "status"])
    assert status.exit_code == 0
    assert "Found 4 link(s)" in status.output

    removed = runner.invoke(_create_app(), ["link", "remove"])
    assert removed.exit_code == 0
    assert "Removed 4 link(s), skipped 0" in removed.output
    assert list((claude_dir / "agents").iterdir()) == []


def test_run_writes_log(aitk_home):
    runner.invoke(_create_app(), ["link", "run"])

    log_text = (aitk_home / ".aitk" / "aitk.log").read_text()
    assert "created:" in log_text


def test_link_without_subcommand_shows_help(aitk_home):
    result = runner.invoke(_create_app(), ["link"])

    assert result.exit_code == 0
    assert "run" in result.output
