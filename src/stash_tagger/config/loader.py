"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (STASH_TAGGER_*)
3. Config file (~/.stash-tagger/config.toml)
4. Default values

Environment variables:
- STASH_TAGGER_CONFIG_PATH: Path to config file (overrides default location)
- STASH_TAGGER_DATA_DIR: Data directory (overrides ~/.stash-tagger/)
- STASH_TAGGER_CLOSE_MATCH_SECONDS: Close match threshold in seconds
- STASH_TAGGER_DEFAULT_GENDER: Gender for performers without one
- STASH_TAGGER_EXCLUDED_FIELDS: Comma-separated performer fields to exclude
- STASH_TAGGER_LOG_LEVEL: debug, info, warning or error
- STASH_TAGGER_LOG_FILE: Log file path
- STASH_TAGGER_LOG_FORMAT: text or json
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from stash_tagger.config.env import EnvReader
from stash_tagger.config.models import (
    LoggingConfig,
    MatchingConfig,
    PerformerConfig,
    TaggerConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".stash-tagger"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


class ConfigError(Exception):
    """Error loading or validating configuration."""


def get_data_dir(env_reader: EnvReader | None = None) -> Path:
    """Get the tagger data directory.

    Holds config.toml and the profiles/ directory. Can be overridden by the
    STASH_TAGGER_DATA_DIR environment variable.
    """
    reader = env_reader or EnvReader()
    return reader.get_path("STASH_TAGGER_DATA_DIR") or DEFAULT_CONFIG_DIR


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the config file path.

    Precedence: STASH_TAGGER_CONFIG_PATH, then <data dir>/config.toml.
    """
    reader = env_reader or EnvReader()
    env_path = reader.get_path("STASH_TAGGER_CONFIG_PATH")
    if env_path is not None:
        return env_path
    return get_data_dir(reader) / "config.toml"


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file. If None, uses the default location.
        strict: If True, raise ConfigError on parse failures.
                If False (default), log a warning and return an empty dict.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist.

    Raises:
        ConfigError: When strict=True and the file cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, OSError) as e:
        if strict:
            raise ConfigError(f"Cannot parse config file {path}: {e}") from e
        logger.warning("Ignoring unparseable config file %s: %s", path, e)
        return {}


def _first(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    close_match_seconds: float | None = None,
    excluded_fields: Sequence[str] | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> TaggerConfig:
    """Get tagger configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides STASH_TAGGER_CONFIG_PATH).
        close_match_seconds: CLI override for the close match threshold.
        excluded_fields: CLI override for excluded performer fields.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise ConfigError on config file parse failures.

    Returns:
        TaggerConfig with merged configuration.

    Raises:
        ConfigError: If a configured value is invalid, or when strict=True
            and the config file cannot be parsed.
    """
    reader = env_reader or EnvReader()
    if config_path is None:
        config_path = get_default_config_path(reader)
    file_config = load_config_file(config_path, strict=strict)

    file_matching = file_config.get("matching", {})
    file_performer = file_config.get("performer", {})
    file_logging = file_config.get("logging", {})

    env_excluded = reader.get_list("STASH_TAGGER_EXCLUDED_FIELDS")
    file_excluded = file_performer.get("excluded_fields")
    excluded = _first(excluded_fields, env_excluded, file_excluded)

    log_file = _first(
        reader.get_path("STASH_TAGGER_LOG_FILE"),
        Path(file_logging["file"]).expanduser() if file_logging.get("file") else None,
    )

    try:
        return TaggerConfig(
            matching=MatchingConfig(
                close_match_seconds=_first(
                    close_match_seconds,
                    reader.get_float("STASH_TAGGER_CLOSE_MATCH_SECONDS"),
                    file_matching.get("close_match_seconds"),
                    MatchingConfig.close_match_seconds,
                ),
            ),
            performer=PerformerConfig(
                default_gender=_first(
                    reader.get_str("STASH_TAGGER_DEFAULT_GENDER"),
                    file_performer.get("default_gender"),
                    PerformerConfig.default_gender,
                ),
                excluded_fields=tuple(excluded or ()),
            ),
            logging=LoggingConfig(
                level=_first(
                    reader.get_str("STASH_TAGGER_LOG_LEVEL"),
                    file_logging.get("level"),
                    LoggingConfig.level,
                ),
                file=log_file,
                format=_first(
                    reader.get_str("STASH_TAGGER_LOG_FORMAT"),
                    file_logging.get("format"),
                    LoggingConfig.format,
                ),
                include_stderr=_first(
                    file_logging.get("include_stderr"),
                    LoggingConfig.include_stderr,
                ),
            ),
        )
    except ValueError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
