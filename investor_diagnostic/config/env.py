"""
Environment variable loading for the investor diagnostic engine.

- INVESTOR_DIAGNOSTIC_DATASET: path to a dataset JSON (default: bundled questionnaire)
- LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default: INFO)
- LOG_FORMAT: json | console (default: json)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is investor_diagnostic/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_DATASET_PATH = _PACKAGE_DIR / "data" / "questionnaire_investor.json"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

_LOG_FORMATS = ("json", "console")


def load_diagnostic_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def get_dataset_path() -> Path:
    """
    Return the dataset path.
    Order: INVESTOR_DIAGNOSTIC_DATASET > bundled questionnaire_investor.json.
    """
    load_diagnostic_env()
    raw = (os.getenv("INVESTOR_DIAGNOSTIC_DATASET") or "").strip()
    if raw:
        return Path(raw).expanduser()
    return DEFAULT_DATASET_PATH


def get_log_level() -> str:
    load_diagnostic_env()
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    """Return LOG_FORMAT; unknown values fall back to json."""
    load_diagnostic_env()
    raw = (os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
    return raw if raw in _LOG_FORMATS else DEFAULT_LOG_FORMAT
