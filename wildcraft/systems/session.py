"""Game session - owns the state and serializes every change to it."""

from __future__ import annotations
import logging
import threading
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from wildcraft.config import Settings

from wildcraft.models.catalog import Biome, Catalog
from wildcraft.models.events import Event, EventType
from wildcraft.models.game_state import GameState, StatName, new_session
from wildcraft.models.outcomes import TransitionResult
from wildcraft.systems import transitions
from wildcraft.systems.event_log import EventLog


logger = logging.getLogger(__name__)

DeathListener = Callable[["GameSession", TransitionResult], None]


class GameSession:
    """The single writer for one player's game state.

    Every action runs under one lock, so a background ticker and player input
    never interleave. The state property hands out the current snapshot;
    transitions always build a new one, so snapshots are never modified
    after they are published.
    """

    def __init__(
        self,
        catalog: Catalog,
        settings: Optional["Settings"] = None,
        event_log: Optional[EventLog] = None,
    ):
        self.catalog = catalog
        self.settings = settings
        self.event_log = event_log or EventLog()
        self._lock = threading.RLock()
        self._death_listeners: list[DeathListener] = []
        self._state = new_session(catalog)
        self.deaths = 0

        self._log_session_event(EventType.SESSION_START, "You wake up in the forest.")

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def auto_restart(self) -> bool:
        return bool(self.settings and self.settings.auto_restart)

    @property
    def is_dead(self) -> bool:
        return self._state.stats.health <= 0

    def on_death(self, listener: DeathListener) -> None:
        """Register a callback fired whenever health reaches zero."""
        self._death_listeners.append(listener)

    # ===== Player actions =====

    def collect(self, resource_id: str) -> TransitionResult:
        return self._apply("collect", transitions.collect_resource, resource_id)

    def craft(self, recipe_id: str) -> TransitionResult:
        return self._apply("craft", transitions.craft_item, recipe_id)

    def use(self, item_id: str) -> TransitionResult:
        return self._apply("use", transitions.use_item, item_id)

    def drop(self, entry_id: str, amount: int = 1) -> TransitionResult:
        return self._apply("drop", transitions.drop_item, entry_id, amount)

    def travel(self, biome: Biome | str) -> TransitionResult:
        return self._apply("travel", transitions.change_biome, biome)

    def change_stat(self, stat: StatName | str, delta: float) -> TransitionResult:
        return self._apply("change_stat", transitions.change_player_stat, stat, delta)

    # ===== Passive =====

    def tick(self, minutes: Optional[int] = None) -> TransitionResult:
        """Timer entry point: advance the clock then run a decay tick."""
        if minutes is None:
            minutes = self.settings.tick_minutes if self.settings else 1
        return self._apply("tick", transitions.tick, minutes)

    def wait(self, minutes: int) -> TransitionResult:
        """Let time pass minute by minute, with one decay tick per minute."""
        if minutes < 1:
            raise ValueError(f"minutes must be >= 1, got {minutes}")
        with self._lock:
            result = None
            for _ in range(minutes):
                result = self.tick(1)
                if result.player_died:
                    break
            return result

    # ===== Lifecycle =====

    def reset(self) -> GameState:
        """Start over from the initial state."""
        with self._lock:
            logger.debug("State before reset:\n%s", self._state.summary(self.catalog))
            self._state = new_session(self.catalog)
            logger.info("Session reset")
            self._log_session_event(EventType.SESSION_RESET, "You wake up in the forest, starting over.")
            return self._state

    def _apply(self, action: str, transition: Callable[..., TransitionResult], *args) -> TransitionResult:
        with self._lock:
            result = transition(self._state, self.catalog, *args)
            self._state = result.state
            self.event_log.extend(result.events)

            if result.ok:
                logger.debug("%s%r: %s", action, args, result.summary())
            else:
                logger.info("%s%r: %s", action, args, result.summary())

            if result.player_died and any(e.event_type == EventType.PLAYER_DIED for e in result.events):
                self._handle_death(result)

            return result

    def _handle_death(self, result: TransitionResult) -> None:
        self.deaths += 1
        logger.warning("Player died at %s", self._state.clock.label())

        for listener in list(self._death_listeners):
            listener(self, result)

        if self.auto_restart:
            self.reset()

    def _log_session_event(self, event_type: EventType, description: str) -> None:
        clock = self._state.clock
        self.event_log.add(Event(
            event_type=event_type,
            description=description,
            actor="system",
            game_minute=clock.total_minutes,
            game_time=clock.label(),
        ))
