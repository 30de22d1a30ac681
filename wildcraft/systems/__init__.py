"""Core game systems: transitions, queries, time, sessions, and event logging."""

from .event_log import EventLog
from .session import GameSession
from .ticker import Ticker

__all__ = ["EventLog", "GameSession", "Ticker"]
