"""
Investor diagnostic: classify questionnaire answers into investor archetypes.

Load a dataset once with load_dataset() (or load_default_dataset()) and pass
the context to evaluate() for each respondent.
"""

from investor_diagnostic.core.exceptions import ConfigError, InvestorDiagnosticError
from investor_diagnostic.engine import evaluate, load_dataset, load_default_dataset

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "InvestorDiagnosticError",
    "evaluate",
    "load_dataset",
    "load_default_dataset",
]
