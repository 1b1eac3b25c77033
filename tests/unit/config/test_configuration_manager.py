"""Tests for configuration loading and validation."""

import json

import pytest
from pydantic import ValidationError

from patternbook.config.manager import ConfigurationManager
from patternbook.config.schemas import AppConfig, DemoConfig, LogDestination, LoggingConfig, LogLevel
from patternbook.domain.base.exceptions import ConfigurationError


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return str(path)


class TestSchemas:
    def test_defaults(self):
        config = AppConfig()

        assert config.logging.level == LogLevel.WARNING
        assert config.logging.destination == LogDestination.STDOUT
        assert config.demo.separator == "-" * 50

    def test_level_is_case_insensitive(self):
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_negative_rotation_rejected(self):
        with pytest.raises(ValidationError, match="must be zero or greater"):
            LoggingConfig(backup_count=-1)

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"logging": {"colour": "red"}})

    def test_custom_separator(self):
        assert DemoConfig(separator_char="=", separator_width=3).separator == "==="

    def test_separator_char_is_single_character(self):
        with pytest.raises(ValidationError):
            DemoConfig(separator_char="--")


@pytest.mark.usefixtures("clean_environment")
class TestConfigurationManager:
    def test_no_file_gives_defaults(self):
        assert ConfigurationManager().app_config == AppConfig()

    def test_loads_file(self, tmp_path):
        path = write_config(tmp_path, {"logging": {"level": "info"}, "demo": {"separator_width": 10}})

        config = ConfigurationManager(path).app_config

        assert config.logging.level == LogLevel.INFO
        assert config.demo.separator == "-" * 10

    def test_app_config_is_cached(self, tmp_path):
        manager = ConfigurationManager(write_config(tmp_path, {}))
        assert manager.app_config is manager.app_config

    def test_reload_rereads_file(self, tmp_path):
        path = write_config(tmp_path, {"demo": {"separator_width": 10}})
        manager = ConfigurationManager(path)
        assert manager.app_config.demo.separator_width == 10

        write_config(tmp_path, {"demo": {"separator_width": 20}})
        manager.reload()

        assert manager.app_config.demo.separator_width == 20

    def test_missing_file(self, tmp_path):
        manager = ConfigurationManager(str(tmp_path / "absent.json"))

        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            manager.app_config

    def test_invalid_json(self, tmp_path):
        manager = ConfigurationManager(write_config(tmp_path, "{not json"))

        with pytest.raises(ConfigurationError, match="not valid JSON"):
            manager.app_config

    def test_non_object_json(self, tmp_path):
        manager = ConfigurationManager(write_config(tmp_path, [1, 2]))

        with pytest.raises(ConfigurationError, match="must contain a JSON object"):
            manager.app_config

    def test_file_not_utf8(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"demo": "\xff"}')

        with pytest.raises(ConfigurationError, match="could not be read"):
            ConfigurationManager(str(path)).app_config

    def test_path_is_directory(self, tmp_path):
        with pytest.raises(ConfigurationError, match="could not be read"):
            ConfigurationManager(str(tmp_path)).app_config

    def test_environment_override_on_non_object_section(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "DEBUG")
        manager = ConfigurationManager(write_config(tmp_path, {"logging": None}))

        with pytest.raises(ConfigurationError, match="section 'logging' must be an object"):
            manager.app_config

    def test_invalid_values(self, tmp_path):
        manager = ConfigurationManager(write_config(tmp_path, {"logging": {"destination": "syslog"}}))

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            manager.app_config

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, {"logging": {"level": "INFO", "destination": "stdout"}})
        monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "error")
        monkeypatch.setenv("PATTERNBOOK_LOG_DESTINATION", "file")
        monkeypatch.setenv("PATTERNBOOK_LOG_FILE", "/tmp/elsewhere.log")

        config = ConfigurationManager(path).app_config

        assert config.logging.level == LogLevel.ERROR
        assert config.logging.destination == LogDestination.FILE
        assert config.logging.file_path == "/tmp/elsewhere.log"

    def test_apply_environment_overrides_copies(self, monkeypatch):
        monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "DEBUG")
        original = {"logging": {"level": "INFO"}}

        result = ConfigurationManager.apply_environment_overrides(original)

        assert result == {"logging": {"level": "DEBUG"}}
        assert original == {"logging": {"level": "INFO"}}

    def test_empty_environment_value_ignored(self, monkeypatch):
        monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "")
        assert ConfigurationManager.apply_environment_overrides({}) == {}
