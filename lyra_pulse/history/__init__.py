"""
Organization cycle history: append-only baseline snapshots per organization.
"""

from lyra_pulse.history.store import BaselineHistory, get_history

__all__ = ["BaselineHistory", "get_history"]
