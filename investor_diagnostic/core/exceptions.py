"""
Application-level exceptions.

ConfigError is fatal and raised only while loading a dataset; evaluation
itself never raises for degenerate responses.
"""

from __future__ import annotations


class InvestorDiagnosticError(Exception):
    """Base class for all engine errors."""


class ConfigError(InvestorDiagnosticError):
    """Dataset is missing, unparsable, structurally invalid or declares no archetypes."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)
