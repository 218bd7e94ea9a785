"""Configuration module using Pydantic Settings.

Provides typed configuration for the store with environment variable support.

Usage:
    from entitymix.config import StoreSettings

    settings = StoreSettings(snapshot_mode="copy")
"""

from entitymix.config.settings import StoreSettings, configure_logging

__all__ = [
    "StoreSettings",
    "configure_logging",
]
