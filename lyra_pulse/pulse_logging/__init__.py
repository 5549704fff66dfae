"""
Structured logging for Lyra Pulse.

JSON logs with timestamp, event_type and, inside cycle_context(), the
organization_id and cycle_number of the cycle being processed.
"""

from lyra_pulse.pulse_logging.logger import bind_organization, configure_structlog, cycle_context, get_logger

__all__ = ["bind_organization", "configure_structlog", "cycle_context", "get_logger"]
