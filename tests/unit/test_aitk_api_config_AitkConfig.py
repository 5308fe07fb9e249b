"""Unit tests for aitk.api.config.AitkConfig module."""

import json

import pytest
from pydantic import ValidationError

from aitk.api.config.AitkConfig import AitkConfig
from aitk.api.config.CategoryConfig import CategoryConfig
from aitk.api.config.ConfigurationError import ConfigurationError
from tests.conftest import write_config

pytestmark = pytest.mark.config


class TestAitkConfigLoad:
    def test_defaults_without_config_file(self, home, tmp_path):
        config = AitkConfig.load()

        assert config.source_dir == str(tmp_path)
        assert config.target_dir == str(home / ".claude")
        assert config.languages == ["en", "zh-cn"]
        assert config.default_language == "en"
        assert config.canonicalize_paths is True
        assert config.agents == CategoryConfig(subdir="agents", kind="file", suffix=".md")
        assert config.skills == CategoryConfig(subdir="skills", kind="directory")
        assert config.log.level == "INFO"

    def test_explicit_home_is_used_for_defaults(self, tmp_path):
        other_home = tmp_path / "other-home"

        config = AitkConfig.load(home=other_home)

        assert config.target_dir == str(other_home / ".claude")

    def test_tilde_expands_against_injected_home(self, home):
        write_config(home, source_dir="~/toolkit", target_dir="~/assistant")

        config = AitkConfig.load()

        assert config.source_dir == str(home / "toolkit")
        assert config.target_dir == str(home / "assistant")

    def test_aitk_home_env_locates_config(self, tmp_path, monkeypatch):
        state = tmp_path / "state"
        state.mkdir()
        (state / "config.json").write_text(json.dumps({"languages": ["en"], "default_language": "en"}))
        monkeypatch.setenv("AITK_HOME", str(state))

        config = AitkConfig.load()

        assert config.languages == ["en"]

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"canonicalize_paths": False}))

        config = AitkConfig.load(path=path)

        assert config.canonicalize_paths is False

    def test_invalid_json(self, home):
        path = home / ".aitk" / "config.json"
        path.parent.mkdir()
        path.write_text("{invalid json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            AitkConfig.load()

    def test_non_object_json(self, home):
        path = home / ".aitk" / "config.json"
        path.parent.mkdir()
        path.write_text("[]")

        with pytest.raises(ConfigurationError, match="must contain a JSON object"):
            AitkConfig.load()

    def test_unknown_field_is_rejected(self, home):
        write_config(home, colour="blue")

        with pytest.raises(ConfigurationError, match="colour"):
            AitkConfig.load()

    def test_default_language_must_be_supported(self, home):
        write_config(home, languages=["en"], default_language="zh-cn")

        with pytest.raises(ConfigurationError, match="default_language 'zh-cn' is not one of en"):
            AitkConfig.load()

    def test_configuration_error_is_value_error(self, home):
        write_config(home, languages=[])

        with pytest.raises(ValueError):
            AitkConfig.load()


class TestCategoryConfig:
    def test_suffix_rejected_for_directories(self):
        with pytest.raises(ValidationError):
            CategoryConfig(subdir="skills", kind="directory", suffix=".md")

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            CategoryConfig(subdir="skills", kind="symlink")


def test_to_dict_round_trips(home):
    config = AitkConfig.load()

    assert AitkConfig(**config.to_dict()) == config
    assert list(config.categories()) == ["agents", "skills"]
