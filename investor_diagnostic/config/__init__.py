"""
Configuration for the investor diagnostic engine.

Loads settings from environment variables and an optional .env file.
"""

from investor_diagnostic.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
