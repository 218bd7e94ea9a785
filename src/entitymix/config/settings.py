"""Configuration settings using Pydantic Settings.

Usage:
    from entitymix.config import StoreSettings, configure_logging

    # Load from environment variables (ENTITYMIX_*)
    settings = StoreSettings()
    configure_logging(settings)
    store = LocalStore.from_settings(settings)

    # Or override with explicit values
    settings = StoreSettings(snapshot_mode="copy")
"""

from __future__ import annotations

import logging

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install entitymix[config]"
    ) from e

from pydantic import field_validator

from entitymix.storage.local import SnapshotMode

_STDERR_HANDLER = "entitymix.stderr"


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the entity store and package logging.

    Attributes:
        snapshot_mode: Whether the store keeps live entities or copies.
        log_level: Level name for the ``entitymix`` logger.

    Environment Variables:
        ENTITYMIX_SNAPSHOT_MODE
        ENTITYMIX_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITYMIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    snapshot_mode: SnapshotMode = SnapshotMode.REFERENCE
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def configure_logging(settings: StoreSettings | None = None) -> logging.Logger:
    """Set the package logger level and attach a stderr handler once.

    Returns:
        The ``entitymix`` logger.
    """
    settings = settings or StoreSettings()
    log = logging.getLogger("entitymix")
    log.setLevel(settings.log_level)
    if not any(h.get_name() == _STDERR_HANDLER for h in log.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_STDERR_HANDLER)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        log.addHandler(handler)
    return log
