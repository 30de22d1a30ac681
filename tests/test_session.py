"""Tests for GameSession and the background ticker."""
from __future__ import annotations

import threading
import time

import pytest

from wildcraft.config import Settings
from wildcraft.models.catalog import Catalog
from wildcraft.models.events import EventType
from wildcraft.models.outcomes import Outcome
from wildcraft.systems.session import GameSession
from wildcraft.systems.ticker import Ticker


class TestActions:
    def test_session_start_logged(self, session: GameSession) -> None:
        events = session.event_log.get_recent(1)
        assert events[0].event_type == EventType.SESSION_START

    def test_collect_updates_state_and_log(self, session: GameSession) -> None:
        result = session.collect("wood")
        assert result.ok
        assert session.state is result.state
        assert session.state.quantity_of("wood") == 1
        assert session.event_log.get_by_type(EventType.RESOURCE_COLLECTED)

    def test_failure_keeps_state(self, session: GameSession) -> None:
        before = session.state
        result = session.craft("stone_axe")
        assert result.outcome == Outcome.MISSING_INGREDIENTS
        assert session.state is before
        assert len(session.event_log.get_by_type(EventType.ACTION_FAILED)) == 1

    def test_craft_flow(self, session: GameSession) -> None:
        for resource in ["wood", "wood", "stone", "stone", "stone", "fiber"]:
            session.collect(resource)
        result = session.craft("stone_axe")
        assert result.ok
        assert session.state.quantity_of("axe") == 1

    def test_travel_and_drop(self, session: GameSession) -> None:
        session.collect("stone")
        session.travel("desert")
        assert session.state.biome.value == "desert"
        session.drop("stone")
        assert session.state.quantity_of("stone") == 0

    def test_snapshots_are_not_modified(self, session: GameSession) -> None:
        snapshot = session.state
        copy = snapshot.model_copy(deep=True)
        session.collect("wood")
        session.tick()
        assert snapshot == copy


class TestTime:
    def test_tick_uses_default_minutes(self, session: GameSession) -> None:
        session.tick()
        assert session.state.clock.minute == 1
        assert session.state.stats.hunger == 99

    def test_tick_uses_settings(self, catalog: Catalog) -> None:
        session = GameSession(catalog, settings=Settings(tick_minutes=5))
        session.tick()
        assert session.state.clock.minute == 5
        assert session.state.stats.hunger == 99

    def test_wait_decays_once_per_minute(self, session: GameSession) -> None:
        session.wait(10)
        assert session.state.clock.minute == 10
        assert session.state.stats.hunger == 90
        assert session.state.stats.thirst == 85

    def test_wait_stops_at_death(self, session: GameSession) -> None:
        session.change_stat("hunger", -100)
        session.change_stat("health", -95)
        result = session.wait(60)
        assert result.player_died
        # 5 health at 2 per minute
        assert session.state.clock.minute == 3

    def test_wait_rejects_zero(self, session: GameSession) -> None:
        with pytest.raises(ValueError):
            session.wait(0)


class TestDeath:
    def test_listener_called_once(self, session: GameSession) -> None:
        calls = []
        session.on_death(lambda s, r: calls.append(r))
        session.change_stat("health", -100)
        session.change_stat("health", -10)
        assert len(calls) == 1
        assert calls[0].player_died
        assert session.deaths == 1
        assert session.is_dead

    def test_no_auto_restart_by_default(self, session: GameSession) -> None:
        session.change_stat("health", -100)
        assert session.state.stats.health == 0
        assert session.event_log.get_by_type(EventType.PLAYER_DIED)

    def test_auto_restart(self, catalog: Catalog) -> None:
        session = GameSession(catalog, settings=Settings(auto_restart=True))
        session.collect("wood")
        session.change_stat("health", -100)
        assert not session.is_dead
        assert session.state.stats.health == 100
        assert session.state.inventory == []
        assert session.event_log.get_by_type(EventType.SESSION_RESET)

    def test_reset(self, session: GameSession, catalog: Catalog) -> None:
        session.collect("wood")
        state = session.reset()
        assert state.inventory == []
        assert state.unlocked_recipes == catalog.initially_unlocked()


class TestConcurrency:
    def test_parallel_collects_are_serialized(self, session: GameSession) -> None:
        def worker() -> None:
            for _ in range(5):
                session.collect("fiber")

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # 20 collects at 5 minutes each
        assert session.state.quantity_of("fiber") == 20
        assert session.state.clock.total_minutes == 8 * 60 + 100


class TestTicker:
    def test_rejects_bad_interval(self, session: GameSession) -> None:
        with pytest.raises(ValueError):
            Ticker(session, interval=0)

    def test_ticks_until_stopped(self, session: GameSession) -> None:
        with Ticker(session, interval=0.01) as ticker:
            assert ticker.running
            deadline = time.monotonic() + 5
            while session.state.clock.total_minutes < 8 * 60 + 3 and time.monotonic() < deadline:
                time.sleep(0.01)
        assert not ticker.running
        assert session.state.clock.total_minutes >= 8 * 60 + 3

        stopped_at = session.state.clock.total_minutes
        time.sleep(0.05)
        assert session.state.clock.total_minutes == stopped_at

    def test_skips_ticks_while_dead(self, session: GameSession) -> None:
        session.change_stat("health", -100)
        stopped_at = session.state.clock.total_minutes
        ticker = Ticker(session, interval=0.01)
        ticker.start()
        time.sleep(0.05)
        ticker.stop()
        assert session.state.clock.total_minutes == stopped_at


class TestLogging:
    def test_failures_logged_at_info(self, session: GameSession, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="wildcraft.systems.session"):
            session.craft("stone_axe")
        assert "✗ missing_ingredients" in caplog.text

    def test_death_logged_as_warning(self, session: GameSession, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="wildcraft.systems.session"):
            session.change_stat("health", -100)
        assert "Player died at Day 1 08:00" in caplog.text

    def test_state_summary(self, session: GameSession) -> None:
        session.collect("fiber")
        summary = session.state.summary(session.catalog)
        assert "Biome: forest" in summary
        assert "Plant Fiber x1" in summary


class _FlakySession:
    """Stands in for a session whose first tick blows up."""
    is_dead = False

    def __init__(self) -> None:
        self.calls = 0

    def tick(self, minutes: int) -> None:
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("tick exploded")


class TestTickerFailures:
    def test_keeps_ticking_after_an_error(self, caplog: pytest.LogCaptureFixture) -> None:
        session = _FlakySession()
        ticker = Ticker(session, interval=0.01)
        with caplog.at_level("ERROR", logger="wildcraft.systems.ticker"):
            ticker.start()
            deadline = time.monotonic() + 5
            while session.calls < 3 and time.monotonic() < deadline:
                time.sleep(0.01)
            assert ticker.running
            ticker.stop()

        assert session.calls >= 3
        assert ticker.failures == 1
        assert "Tick failed" in caplog.text
