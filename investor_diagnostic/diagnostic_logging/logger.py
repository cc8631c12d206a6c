"""
Structured logging: timestamp, level, event_type and key/value context.

structlog with ISO timestamps and consistent keys so evaluations and dataset
loads can be aggregated. Engine modules call get_logger(__name__) and log a
snake_case event_type plus context (diagnostic_id, archetype ids, scores).

Level and format come from config.env (LOG_LEVEL, LOG_FORMAT, .env); config.env
must not import this package.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from investor_diagnostic.config.env import get_log_format, get_log_level

LOG_LEVEL = get_log_level()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# JSON output by default (LOG_FORMAT=json); LOG_FORMAT=console for local runs
LOG_FORMAT = get_log_format()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog(log_format: str = LOG_FORMAT, level: int = LOG_LEVEL_VALUE) -> None:
    """Configure structlog: JSON or console renderer, timestamp, level, event_type."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # stderr keeps stdout clean for the tools that print result JSON
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# One-time configuration on first import
if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("dataset_loaded", diagnostic_id="diagnostic_investisseur_v1", archetypes=7)

    Output (JSON): {"event_type": "dataset_loaded", "diagnostic_id": "...", "archetypes": 7,
    "timestamp": "...", "level": "info", "logger": "module.name", "message": "dataset_loaded"}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_diagnostic(diagnostic_id: str, version: str) -> structlog.BoundLogger:
    """Return a logger with diagnostic_id and version bound to all subsequent calls."""
    return get_logger("investor_diagnostic").bind(diagnostic_id=diagnostic_id, version=version)
