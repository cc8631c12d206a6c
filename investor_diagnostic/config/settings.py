"""
Application settings resolved from the environment.

Exposes a typed, immutable Settings object (dataset path, log level, log
format) for the tools and any in-process caller that wants the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from investor_diagnostic.config.env import get_dataset_path, get_log_format, get_log_level


@dataclass(frozen=True)
class Settings:
    dataset_path: Path
    log_level: str
    log_format: str


def get_settings() -> Settings:
    """
    Return the current settings.

    Read fresh on every call so tests can monkeypatch the environment.
    """
    return Settings(
        dataset_path=get_dataset_path(),
        log_level=get_log_level(),
        log_format=get_log_format(),
    )
