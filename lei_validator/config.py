"""
Runtime settings, read from the environment (and a .env file if present).

The library itself needs no configuration; these settings drive the CLI and
the HTTP API wrappers.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for the CLI and API entry points."""

    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings."""
    load_dotenv()
    level = os.getenv("LEI_VALIDATOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        level = DEFAULT_LOG_LEVEL
    return Settings(log_level=level)


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
