"""
Unit tests for configuration management.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from pr_ai_teammate.config import (
    AppConfig,
    AnalysisConfig,
    ConfigManager,
    ConfigurationError,
    LoggingConfig,
    RulesConfig,
)


class TestAppConfig:
    """Unit tests for AppConfig class."""

    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()

        assert config.rules.large_diff_threshold == 200
        assert config.rules.todo_markers == ["TODO", "FIXME"]
        assert config.rules.secret_markers == ["password", "secret", "api_key"]
        assert config.analysis.max_function_lines == 50
        assert config.analysis.languages == ["python"]
        assert config.logging.level == "INFO"
        assert config.debug is False

    def test_from_env(self, monkeypatch):
        """Test loading configuration from environment variables."""
        monkeypatch.setenv("LARGE_DIFF_THRESHOLD", "25")
        monkeypatch.setenv("MAX_FUNCTION_LINES", "80")
        monkeypatch.setenv("SECRET_MARKERS", "token, private_key")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.delenv("TODO_MARKERS", raising=False)
        monkeypatch.delenv("ANALYZER_LANGUAGES", raising=False)

        config = AppConfig.from_env()

        assert config.rules.large_diff_threshold == 25
        assert config.rules.secret_markers == ["token", "private_key"]
        assert config.rules.todo_markers == ["TODO", "FIXME"]
        assert config.analysis.max_function_lines == 80
        assert config.analysis.languages == ["python"]
        assert config.logging.level == "DEBUG"

    def test_from_yaml(self, tmp_path):
        """Test loading configuration from a YAML file."""
        config_file = tmp_path / "teammate.yml"
        config_file.write_text(
            "rules:\n"
            "  large_diff_threshold: 0\n"
            "analysis:\n"
            "  max_function_lines: 30\n"
            "debug: true\n",
            encoding="utf-8",
        )
        config = AppConfig.from_yaml(str(config_file))

        assert config.rules.large_diff_threshold == 0
        assert config.rules.todo_markers == ["TODO", "FIXME"]
        assert config.analysis.max_function_lines == 30
        assert config.debug is True

    def test_from_yaml_empty_file(self, tmp_path):
        """Test that an empty YAML file yields defaults."""
        config_file = tmp_path / "empty.yml"
        config_file.write_text("", encoding="utf-8")

        assert AppConfig.from_yaml(str(config_file)).to_dict() == AppConfig().to_dict()

    def test_from_yaml_missing_file(self, tmp_path):
        """Test a missing configuration file."""
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(str(tmp_path / "nope.yml"))

    def test_unknown_key(self):
        """Test that unknown keys are configuration errors."""
        with pytest.raises(ConfigurationError):
            AppConfig.from_dict({"rules": {"no_such_option": 1}})

    def test_validate_rejects_bad_values(self):
        """Test values that cannot degrade gracefully."""
        with pytest.raises(ConfigurationError):
            AppConfig(logging=LoggingConfig(level="LOUD")).validate()

        with pytest.raises(ConfigurationError):
            AppConfig(analysis=AnalysisConfig(languages=["cobol"])).validate()

    def test_validate_accepts_disabled_checks(self):
        """Test that non-positive thresholds only disable checks."""
        config = AppConfig(
            rules=RulesConfig(large_diff_threshold=0),
            analysis=AnalysisConfig(max_function_lines=-1),
        )
        config.validate()

    def test_to_dict_round_trip(self):
        """Test to_dict/from_dict symmetry."""
        config = AppConfig(rules=RulesConfig(large_diff_threshold=7))

        assert AppConfig.from_dict(config.to_dict()) == config


class TestConfigManager:
    """Unit tests for ConfigManager class."""

    def test_update_nested_value(self):
        """Test dotted-key updates."""
        manager = ConfigManager(AppConfig())
        manager.update_config(**{"rules.large_diff_threshold": 10, "debug": True})

        assert manager.config.rules.large_diff_threshold == 10
        assert manager.config.debug is True

    def test_update_rejects_unknown_section(self):
        """Test updates to unknown sections."""
        manager = ConfigManager(AppConfig())

        with pytest.raises(ConfigurationError):
            manager.update_config(**{"storage.dsn": "x"})

    def test_invalid_config_is_rejected(self):
        """Test that the manager validates its configuration."""
        with pytest.raises(ConfigurationError):
            ConfigManager(AppConfig(logging=LoggingConfig(level="LOUD")))

    def test_file_logging(self, tmp_path):
        """Test that a rotating file handler is attached."""
        log_file = tmp_path / "teammate.log"
        root_logger = logging.getLogger()
        before = list(root_logger.handlers)

        ConfigManager(AppConfig(logging=LoggingConfig(file_path=str(log_file))))
        added = [h for h in root_logger.handlers if h not in before]
        file_handlers = [h for h in added if isinstance(h, RotatingFileHandler)]
        try:
            assert len(file_handlers) == 1
            assert file_handlers[0].baseFilename == str(log_file)
        finally:
            for handler in added:
                root_logger.removeHandler(handler)
                handler.close()
