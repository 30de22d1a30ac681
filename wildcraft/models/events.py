"""Event schemas - chronological record of everything that happens."""

from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field
import uuid


class EventType(str, Enum):
    """Categories of events."""
    # Session events
    SESSION_START = "session_start"
    SESSION_RESET = "session_reset"
    PLAYER_DIED = "player_died"

    # Player actions
    RESOURCE_COLLECTED = "resource_collected"
    ITEM_CRAFTED = "item_crafted"
    RECIPE_UNLOCKED = "recipe_unlocked"
    ITEM_USED = "item_used"
    ITEM_DROPPED = "item_dropped"
    BIOME_CHANGED = "biome_changed"
    ACTION_FAILED = "action_failed"

    # Passive changes
    TIME_ADVANCE = "time_advance"
    STATS_DECAYED = "stats_decayed"
    STAT_CHANGED = "stat_changed"


class EventEffect(BaseModel):
    """An effect that resulted from an event."""
    target_type: str  # "stat", "inventory", "clock", "recipe", "biome"
    target_id: Optional[str] = None
    field: str
    old_value: Any = None
    new_value: Any = None
    description: Optional[str] = None


class Event(BaseModel):
    """A recorded event in the game history."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4())[:8])

    # When
    timestamp: datetime = Field(default_factory=datetime.now)
    game_minute: int = 0  # Minutes since day 1 00:00
    game_time: str = "Day 1 08:00"

    # What
    event_type: EventType
    description: str

    # Who/what caused it
    actor: str = "player"  # "player" or "system"

    effects: list[EventEffect] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    # Passive ticks are noisy, the feed hides them
    visible_to_player: bool = True

    def summary(self) -> str:
        """Generate human-readable summary."""
        return f"[{self.game_time}] {self.description}"


class EventLog(BaseModel):
    """Container for game event history."""
    events: list[Event] = Field(default_factory=list)

    def add(self, event: Event) -> None:
        """Add an event to the log."""
        self.events.append(event)

    def get_recent(self, count: int = 10) -> list[Event]:
        """Get most recent events."""
        return self.events[-count:] if self.events and count > 0 else []

    def get_by_type(self, event_type: EventType) -> list[Event]:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def summary(self, count: int = 10) -> str:
        """Generate summary of recent visible events."""
        recent = [e for e in self.events if e.visible_to_player][-count:] if count > 0 else []
        if not recent:
            return "No events recorded."
        return "\n".join(e.summary() for e in recent)
