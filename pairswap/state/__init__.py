"""Execution state helpers: atomic operations and event logs."""

from pairswap.state.events import EventLog
from pairswap.state.journal import Snapshottable, atomic

__all__ = ["EventLog", "Snapshottable", "atomic"]
