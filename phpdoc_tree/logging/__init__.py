"""Logging infrastructure for phpdoc-tree.

@public

Key components:
    get_pipeline_logger: Factory function for creating package loggers
    setup_logging: Configure the package loggers from YAML or defaults
    package_logger_name: Prefect-qualified name of a package logger
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from phpdoc_tree.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Loading tree")

Note:
    Package modules take their loggers from get_pipeline_logger() so that
    they sit under the configured "prefect.phpdoc_tree" logger.
"""

from .logging_config import LoggingConfig, get_pipeline_logger, package_logger_name, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_pipeline_logger",
    "package_logger_name",
]
