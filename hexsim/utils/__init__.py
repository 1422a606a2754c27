"""Utilities: logging setup and the event log."""

from hexsim.utils.event_log import EventLog, SimEvent
from hexsim.utils.logging import setup_logging

__all__ = ["EventLog", "SimEvent", "setup_logging"]
