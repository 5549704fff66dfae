"""
Structured JSON logging for the pulse engine.

Every record carries timestamp, level, event_type and logger; records
emitted while a cycle is being processed also carry organization_id and
cycle_number, taken from context variables bound by cycle_context(). That
way the signal, friction and net-value steps, which know nothing about
organizations, still log lines that can be grouped per cycle.

LOG_LEVEL sets the level, LOG_FORMAT=json (default) or console the renderer.

Only stdlib logging and structlog are imported here; engine modules import
this package, never the other way round.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

import structlog

SERVICE_NAME = "lyra-pulse"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# JSON output for production (LOG_FORMAT=json); human-readable for local
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

# Context keys that identify a cycle; dropped from a record when unset.
CYCLE_KEYS = ("organization_id", "cycle_number")


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_service(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _drop_unset_cycle_keys(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Remove organization_id / cycle_number when they are None (records of unscoped inputs)."""
    for key in CYCLE_KEYS:
        if key in event_dict and event_dict[key] is None:
            del event_dict[key]
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def build_processors(log_format: str = LOG_FORMAT) -> list[Any]:
    """Processor chain ending in the JSON or console renderer."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _add_service,
        _drop_unset_cycle_keys,
        _normalize_event,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_structlog(level: int = LOG_LEVEL_VALUE, log_format: str = LOG_FORMAT) -> None:
    """Configure structlog for the process; logs go to stderr so CLI stdout stays JSON only."""
    structlog.configure(
        processors=build_processors(log_format),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("dimension_signals_computed", signals={"trust": 0.5225})

    Output (JSON): {"event_type": "dimension_signals_computed", "level": "info",
    "logger": "lyra_pulse.baseline.signals", "service": "lyra-pulse",
    "signals": {...}, "timestamp": "..."}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_organization(organization_id: str) -> structlog.BoundLogger:
    """Return a logger with organization_id bound to all subsequent log calls."""
    return get_logger("lyra_pulse").bind(organization_id=organization_id)


@contextmanager
def cycle_context(organization_id: str | None, cycle_number: int | None) -> Iterator[None]:
    """
    Bind organization_id and cycle_number to every record logged inside the block.

    Unset values are not bound. Bindings from an enclosing block are restored
    on exit.
    """
    values = {
        key: value
        for key, value in zip(CYCLE_KEYS, (organization_id, cycle_number))
        if value is not None
    }
    with structlog.contextvars.bound_contextvars(**values):
        yield
