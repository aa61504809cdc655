"""Tests for configuration loading and logging setup."""

import logging

import pytest

from unitranslit import ConfigurationError
from unitranslit.utils.config import (
    EngineConfig,
    LoggingConfig,
    TranslitConfig,
    get_config,
    load_config,
)
from unitranslit.utils.logger import get_logger, setup_logging


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()

        assert config.charset == "ASCII"
        assert config.on_unknown == "sentinel"
        assert config.extra_table_dirs == []
        assert config.preload_blocks == []

    def test_policy_is_normalized(self):
        assert EngineConfig(on_unknown=" DROP ").on_unknown == "drop"

    def test_invalid_policy(self):
        with pytest.raises(ConfigurationError):
            EngineConfig(on_unknown="ignore")

    def test_empty_charset(self):
        with pytest.raises(ConfigurationError):
            EngineConfig(charset="  ")

    def test_preload_range(self):
        with pytest.raises(ConfigurationError):
            EngineConfig(preload_blocks=[0, 256])

    def test_missing_table_dir(self, tmp_path):
        with pytest.raises(ConfigurationError):
            EngineConfig(extra_table_dirs=[str(tmp_path / "missing")])


class TestTranslitConfig:

    def test_from_toml(self, tmp_path):
        path = tmp_path / "unitranslit.toml"
        path.write_text(
            '[engine]\ncharset = "LATIN-2"\non_unknown = "drop"\npreload_blocks = [0, 1]\n\n'
            '[logging]\nlevel = "debug"\n',
            encoding="utf-8",
        )

        config = TranslitConfig.from_toml(path)

        assert config.engine.charset == "LATIN-2"
        assert config.engine.on_unknown == "drop"
        assert config.engine.preload_blocks == [0, 1]
        assert config.logging.level == "DEBUG"

    def test_from_toml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TranslitConfig.from_toml(tmp_path / "nope.toml")

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("UNITRANSLIT_ENGINE__CHARSET", "ISO-8859-2")

        assert TranslitConfig().engine.charset == "ISO-8859-2"

    def test_load_config_is_cached(self, tmp_path):
        path = tmp_path / "unitranslit.toml"
        path.write_text('[engine]\non_unknown = "drop"\n', encoding="utf-8")

        config = load_config(path)

        assert config.engine.on_unknown == "drop"
        assert get_config() is config
        assert load_config(tmp_path / "other.toml") is config

    def test_load_config_from_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.toml"
        path.write_text('[engine]\ncharset = "latin2"\n', encoding="utf-8")
        monkeypatch.setenv("UNITRANSLIT_CONFIG", str(path))

        assert get_config().engine.charset == "latin2"

    def test_load_config_without_file(self, tmp_path):
        assert load_config(tmp_path / "absent.toml").engine.charset == "ASCII"


class TestLogging:

    def test_get_logger_namespace(self):
        assert get_logger("engine").name == "unitranslit.engine"

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "unitranslit.log"
        logger = setup_logging(LoggingConfig(level="info", file_path=str(log_file)))

        try:
            get_logger("test").info("hello from test")
            for handler in logger.handlers:
                handler.flush()

            assert logger.level == logging.INFO
            assert len(logger.handlers) == 2
            assert "hello from test" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)

    def test_invalid_level(self):
        with pytest.raises(ConfigurationError):
            LoggingConfig(level="loud")
