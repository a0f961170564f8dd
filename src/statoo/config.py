"""
Process settings for statoo.

Only logging and build information come from the environment; check
parameters always come from command-line flags.
"""

import os
from dataclasses import dataclass

from statoo import __commit_hash__


@dataclass(frozen=True)
class Settings:
    """Settings read from environment variables."""

    log_level: str = "WARNING"
    log_file: str | None = None
    commit_hash: str = __commit_hash__

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            log_level=os.getenv("STATOO_LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("STATOO_LOG_FILE") or None,
            commit_hash=os.getenv("STATOO_COMMIT_HASH") or __commit_hash__,
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Set (or with None, reset) the global settings instance."""
    global _settings
    _settings = settings
