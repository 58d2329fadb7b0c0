"""Logging configuration for phpdoc-tree.

@public

Package loggers come from Prefect's `get_logger`, which parents them under
the "prefect" logger: the JSON dump loader logs as
"prefect.phpdoc_tree.source_tree.php_parser_json" and the CLI as
"prefect.phpdoc_tree.docs_generator.cli". Configuration is applied to the
package root logger under that qualified name, so levels and handlers reach
every module logger. YAML files may name the package loggers by their short
names ("phpdoc_tree", "phpdoc_tree.source_tree", ...).

Usage:
    >>> from phpdoc_tree.logging import get_pipeline_logger
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Loading tree")

Environment variables (read through phpdoc_tree.settings.Settings):
    PHPDOC_TREE_LOGGING_CONFIG: Path to a dictConfig-style logging.yml
    PHPDOC_TREE_LOG_LEVEL: Level of the package loggers (default INFO)
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

from phpdoc_tree.settings import Settings

PACKAGE_LOGGER = "phpdoc_tree"


def package_logger_name(name: str = PACKAGE_LOGGER) -> str:
    """Name of the logger Prefect hands out for a package module.

    >>> package_logger_name("phpdoc_tree.docs_generator.cli")
    'prefect.phpdoc_tree.docs_generator.cli'
    """
    return get_logger(name).name


def _is_package_logger(name: str) -> bool:
    return name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")


class LoggingConfig:
    """Logging configuration for the package loggers.

    @public

    Configuration source, first match wins:
        1. Explicit config_path parameter
        2. PHPDOC_TREE_LOGGING_CONFIG
        3. Built-in defaults: one stderr handler on the package logger at
           PHPDOC_TREE_LOG_LEVEL

    A configured path that does not exist falls back to the defaults.

    Example:
        >>> LoggingConfig().apply()
        >>> LoggingConfig(Path("custom_logging.yml")).apply()
    """

    def __init__(self, config_path: Optional[Path] = None, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.config_path = config_path or self.settings.logging_config
        self._config: Optional[Dict[str, Any]] = None

    def load_config(self) -> Dict[str, Any]:
        """Return the dictConfig mapping, read once and cached.

        Package logger sections in a YAML file are renamed to their
        Prefect-qualified names.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                self._config = self._read_file(self.config_path)
            else:
                self._config = self._get_default_config()
        return self._config

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
        loggers = config.get("loggers") or {}
        config["loggers"] = {(package_logger_name(name) if _is_package_logger(name) else name): section for name, section in loggers.items()}
        return config

    def _get_default_config(self) -> Dict[str, Any]:
        """Console handler on stderr, so JSON the CLI prints on stdout stays clean.

        Format: "HH:MM:SS.mmm | LEVEL | logger.name - message". The package
        logger does not propagate, keeping its records out of Prefect's
        own handlers.
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                package_logger_name(): {
                    "level": self.settings.log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    def apply(self) -> None:
        """Apply the configuration to Python's logging system."""
        logging.config.dictConfig(self.load_config())


# Configuration applied by the last setup_logging() call
_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> None:
    """Configure the package loggers.

    @public

    Args:
        config_path: Optional YAML logging configuration. If None,
                    PHPDOC_TREE_LOGGING_CONFIG or the defaults are used.
        level: Optional level for every package logger, overriding the
               configuration (DEBUG, INFO, WARNING, ...).
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        get_logger(PACKAGE_LOGGER).setLevel(level.upper())


def get_pipeline_logger(name: str) -> logging.Logger:
    """Get the Prefect logger for a package module, configuring logging on first use.

    @public
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
