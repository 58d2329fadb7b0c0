"""Tests for logging configuration."""

import logging
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

import phpdoc_tree.logging.logging_config as logging_config
from phpdoc_tree.docs_generator.cli import main
from phpdoc_tree.logging import get_pipeline_logger, setup_logging
from phpdoc_tree.logging.logging_config import LoggingConfig, package_logger_name
from phpdoc_tree.settings import Settings
from phpdoc_tree.source_tree import load_source_tree


@pytest.fixture
def package_logger(monkeypatch):
    """Restore the package logger and the module-level config after the test."""
    monkeypatch.delenv("PHPDOC_TREE_LOGGING_CONFIG", raising=False)
    monkeypatch.delenv("PHPDOC_TREE_LOG_LEVEL", raising=False)
    monkeypatch.setattr(logging_config, "_logging_config", logging_config._logging_config)
    logger = logging.getLogger(package_logger_name())
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate


class TestPackageLoggerName:
    """Test the names Prefect gives package loggers."""

    def test_package_root(self):
        assert package_logger_name() == "prefect.phpdoc_tree"

    def test_module_logger(self):
        assert package_logger_name("phpdoc_tree.source_tree.php_parser_json") == "prefect.phpdoc_tree.source_tree.php_parser_json"


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_config_path_from_settings(self):
        """Test PHPDOC_TREE_LOGGING_CONFIG is picked up through Settings."""
        config = LoggingConfig(settings=Settings(logging_config=Path("/path/to/config.yml")))
        assert config.config_path == Path("/path/to/config.yml")

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        explicit = tmp_path / "explicit.yml"
        config = LoggingConfig(explicit, settings=Settings(logging_config=Path("/elsewhere.yml")))
        assert config.config_path == explicit

    def test_default_config_keys_real_package_logger(self):
        """Test the defaults configure the logger module loggers actually inherit from."""
        loaded = LoggingConfig(settings=Settings(log_level="debug")).load_config()

        assert loaded["handlers"]["console"]["stream"] == "ext://sys.stderr"
        assert list(loaded["loggers"]) == ["prefect.phpdoc_tree"]
        assert loaded["loggers"]["prefect.phpdoc_tree"]["level"] == "DEBUG"
        assert loaded["loggers"]["prefect.phpdoc_tree"]["propagate"] is False

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        loaded = LoggingConfig(tmp_path / "absent.yml", settings=Settings()).load_config()
        assert loaded["loggers"]["prefect.phpdoc_tree"]["level"] == "INFO"

    def test_yaml_short_names_are_qualified(self, tmp_path: Path) -> None:
        """Test package logger sections in a file are renamed; other loggers are left alone."""
        config_file = tmp_path / "logging.yml"
        config_file.write_text("""
version: 1
disable_existing_loggers: false
loggers:
  phpdoc_tree:
    level: WARNING
  phpdoc_tree.source_tree:
    level: DEBUG
  httpx:
    level: ERROR
""")

        loaded = LoggingConfig(config_file).load_config()

        assert loaded["loggers"] == {
            "prefect.phpdoc_tree": {"level": "WARNING"},
            "prefect.phpdoc_tree.source_tree": {"level": "DEBUG"},
            "httpx": {"level": "ERROR"},
        }

    def test_load_config_is_cached(self, tmp_path: Path) -> None:
        """Test the configuration is read from disk only once."""
        config_file = tmp_path / "logging.yml"
        config_file.write_text("version: 1\n")
        config = LoggingConfig(config_file)
        first = config.load_config()
        config_file.write_text("version: 2\n")
        assert config.load_config() is first

    @patch("logging.config.dictConfig")
    def test_apply_passes_loaded_config(self, mock_dict_config: Mock) -> None:
        config = LoggingConfig(settings=Settings())
        config.apply()
        mock_dict_config.assert_called_once_with(config.load_config())


@pytest.mark.usefixtures("package_logger")
class TestPackageLoggerLevels:
    """Test the levels the loader and CLI loggers end up with."""

    def test_env_level_reaches_loader_logger(self, monkeypatch):
        monkeypatch.setenv("PHPDOC_TREE_LOG_LEVEL", "DEBUG")
        setup_logging()

        loader = get_pipeline_logger("phpdoc_tree.source_tree.php_parser_json")

        assert loader.name == "prefect.phpdoc_tree.source_tree.php_parser_json"
        assert loader.getEffectiveLevel() == logging.DEBUG

    def test_level_argument_overrides_config(self, monkeypatch):
        monkeypatch.setenv("PHPDOC_TREE_LOG_LEVEL", "ERROR")
        setup_logging(level="warning")

        cli = get_pipeline_logger("phpdoc_tree.docs_generator.cli")
        assert cli.getEffectiveLevel() == logging.WARNING

    def test_loader_debug_output_shown_at_debug(self, write_dump, capsys):
        setup_logging(level="DEBUG")
        load_source_tree(write_dump([]))
        assert "Loaded 0 top-level statements" in capsys.readouterr().err

    def test_cli_reports_written_file_at_info(self, write_dump, tmp_path, capsys):
        setup_logging()
        output = tmp_path / "out.json"

        assert main(["build", str(write_dump([])), "-o", str(output)]) == 0

        err = capsys.readouterr().err
        assert f"Wrote 1 declarations to {output}" in err
        assert "prefect.phpdoc_tree.docs_generator.cli" in err

    def test_cli_quiet_at_warning(self, monkeypatch, write_dump, tmp_path, capsys):
        monkeypatch.setenv("PHPDOC_TREE_LOG_LEVEL", "WARNING")
        setup_logging()

        assert main(["build", str(write_dump([])), "-o", str(tmp_path / "out.json")]) == 0
        assert "Wrote" not in capsys.readouterr().err


@pytest.mark.usefixtures("package_logger")
class TestGetPipelineLogger:
    """Test get_pipeline_logger function."""

    @patch("phpdoc_tree.logging.logging_config.setup_logging")
    def test_first_use_configures_logging(self, mock_setup: Mock) -> None:
        logging_config._logging_config = None

        logger = get_pipeline_logger("phpdoc_tree.docs_generator.cli")

        mock_setup.assert_called_once_with()
        assert logger.name == "prefect.phpdoc_tree.docs_generator.cli"

    @patch("phpdoc_tree.logging.logging_config.setup_logging")
    def test_configured_logging_is_reused(self, mock_setup: Mock) -> None:
        logging_config._logging_config = LoggingConfig(settings=Settings())

        get_pipeline_logger("phpdoc_tree.a")
        get_pipeline_logger("phpdoc_tree.b")

        mock_setup.assert_not_called()
