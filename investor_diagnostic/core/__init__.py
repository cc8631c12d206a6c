"""
Core utilities: shared exceptions used across the loader, engine and tools.
"""

from investor_diagnostic.core.exceptions import ConfigError, InvestorDiagnosticError

__all__ = ["ConfigError", "InvestorDiagnosticError"]
