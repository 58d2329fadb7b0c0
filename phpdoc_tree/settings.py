"""Configuration settings for documentation tree generation.

@public

Settings are loaded from environment variables with .env file support via
pydantic-settings. Every variable carries the PHPDOC_TREE_ prefix.

Environment variables:
    PHPDOC_TREE_COMMENT_SELECTION: "last" (default) or "first" attached comment
    PHPDOC_TREE_IGNORED_LINE_PATTERNS: JSON list of regexes for directive lines
    PHPDOC_TREE_DROPPED_NOTE_PATTERNS: JSON list of regexes for maintainer notes
    PHPDOC_TREE_LOG_LEVEL: level of the package loggers (default INFO)
    PHPDOC_TREE_LOGGING_CONFIG: dictConfig-style YAML file replacing the defaults

Example:
    >>> from phpdoc_tree.settings import settings
    >>> settings.comment_selection
    'last'

Note:
    Settings are loaded once at module import and frozen. Pass an explicit
    Settings instance to the documenter to use a different configuration.
"""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Behaviour switches for comment lookup and comment parsing, plus logging.

    @public

    Attributes:
        comment_selection: Which attached comment counts as the declaration's
                           comment when several precede it.

        ignored_line_patterns: Regexes matched (after leading whitespace)
                               against comment body lines. Matching lines are
                               removed before the summary is taken.

        dropped_note_patterns: Regexes for free-text lines removed from the
                               description while tags are extracted.

        log_level: Level applied to the package loggers by the default
                   logging configuration.

        logging_config: YAML logging configuration used instead of the
                        defaults when the file exists.
    """

    model_config = SettingsConfigDict(
        env_prefix="PHPDOC_TREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    comment_selection: Literal["first", "last"] = "last"
    ignored_line_patterns: tuple[str, ...] = ("#pw-",)
    dropped_note_patterns: tuple[str, ...] = (r"FIXED\s",)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logging_config: Path | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


settings = Settings()
"""Global settings instance used when callers do not pass their own."""

__all__ = ["Settings", "settings"]
