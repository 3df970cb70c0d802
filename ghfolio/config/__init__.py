"""Configuration package."""

from ghfolio.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
