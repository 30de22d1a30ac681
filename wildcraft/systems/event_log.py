"""Bounded event history for one session."""

from __future__ import annotations
from typing import Optional

from wildcraft.models.events import Event, EventType, EventLog as EventLogModel


class EventLog:
    """Keeps the newest *max_events* events a session produced.

    Screens read it through the visible-only views; hidden tick bookkeeping
    stays in the log for debugging but never reaches the feed.
    """

    def __init__(self, max_events: Optional[int] = 1000) -> None:
        self._log = EventLogModel()
        self.max_events = max_events

    def add(self, event: Event) -> None:
        events = self._log.events
        self._log.add(event)
        if self.max_events is not None and len(events) > self.max_events:
            del events[: len(events) - self.max_events]

    def extend(self, events: list[Event]) -> None:
        for event in events:
            self.add(event)

    def get_recent(self, count: int = 10) -> list[Event]:
        return self._log.get_recent(count)

    def get_by_type(self, event_type: EventType, visible_only: bool = False) -> list[Event]:
        events = self._log.get_by_type(event_type)
        return [e for e in events if e.visible_to_player] if visible_only else events

    def search(self, text: str) -> list[Event]:
        """Visible events whose description contains *text*, case-insensitive."""
        needle = text.lower()
        return [e for e in self._log.events if e.visible_to_player and needle in e.description.lower()]

    def summary(self, count: int = 10) -> str:
        """The last *count* visible events, one per line."""
        return self._log.summary(count)
