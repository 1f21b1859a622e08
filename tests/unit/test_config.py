"""
Unit tests for settings loading and logging setup.
"""

import logging
import pytest

from recordquery.config.settings import (
    CONFIG_ENV_VAR,
    QuerySettings,
    get_default_config_path,
    load_config,
)
from recordquery.core.exceptions import ConfigError
import recordquery.utils
from recordquery.utils.logging import PACKAGE_LOGGER, get_logger, setup_logger


class TestQuerySettings:
    """Tests for QuerySettings."""

    def test_defaults(self):
        settings = QuerySettings()
        assert settings.ignore_non_populated_fields is False
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_from_dict_normalises_level(self):
        settings = QuerySettings.from_dict({"log_level": "debug"})
        assert settings.log_level == "DEBUG"

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigError, match="bogus"):
            QuerySettings.from_dict({"bogus": 1})

    def test_from_dict_bad_level(self):
        with pytest.raises(ConfigError):
            QuerySettings.from_dict({"log_level": "LOUD"})

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_from_dict_ignore_flag_must_be_bool(self, value):
        """Test quoted or numeric flags are rejected instead of read as truthy."""
        with pytest.raises(ConfigError, match="ignore_non_populated_fields"):
            QuerySettings.from_dict({"ignore_non_populated_fields": value})

    def test_from_dict_log_file_must_be_str(self):
        with pytest.raises(ConfigError, match="log_file"):
            QuerySettings.from_dict({"log_file": 42})

    def test_quoted_yaml_flag_rejected(self, tmp_path):
        path = tmp_path / "recordquery.yaml"
        path.write_text('ignore_non_populated_fields: "false"\n')
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_round_trip(self):
        settings = QuerySettings(ignore_non_populated_fields=True)
        assert QuerySettings.from_dict(settings.to_dict()) == settings


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "absent.yaml")) == QuerySettings()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == QuerySettings()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "recordquery.yaml"
        path.write_text("ignore_non_populated_fields: true\nlog_level: info\n")
        settings = load_config(str(path))
        assert settings.ignore_non_populated_fields is True
        assert settings.log_level == "INFO"

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_env_var_lookup(self, tmp_path, monkeypatch):
        path = tmp_path / "from_env.yaml"
        path.write_text("ignore_non_populated_fields: true\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert get_default_config_path() == path
        assert load_config().ignore_non_populated_fields is True

    def test_local_file_wins(self, tmp_path, monkeypatch):
        (tmp_path / "recordquery.yaml").write_text("log_level: ERROR\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "other.yaml"))
        assert load_config().log_level == "ERROR"


class TestLogging:
    """Tests for logging utilities."""

    def test_module_loggers_are_children(self):
        logger = get_logger("recordquery.query.collection")
        assert logger.name == "recordquery.query.collection"
        assert logging.getLogger(PACKAGE_LOGGER).handlers

    def test_setup_logger_replaces_handlers(self, tmp_path):
        log_file = tmp_path / "rq.log"
        logger = setup_logger("recordquery.test", level="INFO", log_file=str(log_file))
        assert len(logger.handlers) == 2
        logger = setup_logger("recordquery.test", level="INFO")
        assert len(logger.handlers) == 1

    def test_public_exports(self):
        assert recordquery.utils.__all__ == ["setup_logger", "get_logger"]

    def test_configure_logging(self):
        QuerySettings(log_level="ERROR").configure_logging()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR
        QuerySettings().configure_logging()
