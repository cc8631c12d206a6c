"""
Structured logging for the investor diagnostic engine.

JSON logs with timestamp, level, event_type and evaluation context.
Use get_logger() in all engine modules.
"""

from investor_diagnostic.diagnostic_logging.logger import bind_diagnostic, configure_structlog, get_logger

__all__ = ["bind_diagnostic", "configure_structlog", "get_logger"]
