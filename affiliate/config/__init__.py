"""
Configuration package.

Exports the application settings instance.
"""

from affiliate.config.settings import Settings, settings


__all__ = [
    "Settings",
    "settings",
]
