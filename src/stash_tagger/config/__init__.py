"""Configuration management for the scene tagger.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (STASH_TAGGER_*)
3. Config file (~/.stash-tagger/config.toml)
4. Default values (lowest priority)

Named profiles (~/.stash-tagger/profiles/*.yaml) are merged over the loaded
configuration before CLI flags are applied.
"""

from stash_tagger.config.env import EnvReader
from stash_tagger.config.loader import (
    ConfigError,
    get_config,
    get_data_dir,
    get_default_config_path,
    load_config_file,
)
from stash_tagger.config.models import (
    LoggingConfig,
    MatchingConfig,
    PerformerConfig,
    Profile,
    TaggerConfig,
)
from stash_tagger.config.profiles import (
    ProfileError,
    ProfileNotFoundError,
    list_profiles,
    load_profile,
    merge_profile_with_config,
)

__all__ = [
    # Models
    "LoggingConfig",
    "MatchingConfig",
    "PerformerConfig",
    "Profile",
    "TaggerConfig",
    # Loader
    "ConfigError",
    "EnvReader",
    "get_config",
    "get_data_dir",
    "get_default_config_path",
    "load_config_file",
    # Profiles
    "ProfileError",
    "ProfileNotFoundError",
    "list_profiles",
    "load_profile",
    "merge_profile_with_config",
]
