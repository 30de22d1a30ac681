"""Transition results - what every player action and tick returns."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from wildcraft.models.events import Event
from wildcraft.models.game_state import GameState


class Outcome(str, Enum):
    """How a transition ended. Everything except OK left the state untouched."""
    OK = "ok"
    INSUFFICIENT_ENERGY = "insufficient_energy"
    MISSING_INGREDIENTS = "missing_ingredients"
    NOT_USABLE = "not_usable"
    NOT_AVAILABLE = "not_available"
    RECIPE_LOCKED = "recipe_locked"


class TransitionResult(BaseModel):
    """The new state plus everything the caller needs to react to it."""
    state: GameState
    outcome: Outcome = Outcome.OK
    message: str = ""
    changed: bool = True
    events: list[Event] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.OK

    @property
    def player_died(self) -> bool:
        """Health reached zero; the session is over until the caller resets it."""
        return self.state.stats.health <= 0

    def summary(self) -> str:
        status = "✓" if self.ok else "✗"
        return f"{status} {self.outcome.value}: {self.message}"
