"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    10-19: Validation errors (config, profile)
    20-29: Target/file errors
    50-59: Parse errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for stash-tagger CLI commands."""

    # Success (0)
    SUCCESS = 0

    # Validation errors (10-19)
    CONFIG_ERROR = 11
    PROFILE_NOT_FOUND = 12

    # Target/file errors (20-29)
    TARGET_NOT_FOUND = 20

    # Parse errors (50-59)
    PARSE_ERROR = 51
