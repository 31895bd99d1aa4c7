"""Configuration module for the Flare TVL dashboard.

Usage:
    from flaretvl.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.refresh_interval_seconds)
"""

from flaretvl.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
