"""Tests for clock arithmetic and the decay tick."""
from __future__ import annotations

import random

import pytest

from wildcraft.models.game_state import GameClock, PlayerStats
from wildcraft.systems.time_system import advance_clock, decay, format_clock


class TestAdvanceClock:
    def test_simple_advance(self) -> None:
        clock = advance_clock(GameClock(day=1, hour=8, minute=0), 5)
        assert (clock.day, clock.hour, clock.minute) == (1, 8, 5)

    def test_zero_minutes(self) -> None:
        clock = advance_clock(GameClock(day=3, hour=12, minute=30), 0)
        assert (clock.day, clock.hour, clock.minute) == (3, 12, 30)

    def test_minute_carries_into_hour(self) -> None:
        clock = advance_clock(GameClock(day=1, hour=8, minute=50), 15)
        assert (clock.day, clock.hour, clock.minute) == (1, 9, 5)

    def test_hour_carries_into_day(self) -> None:
        clock = advance_clock(GameClock(day=1, hour=23, minute=45), 30)
        assert (clock.day, clock.hour, clock.minute) == (2, 0, 15)

    def test_cascading_carry_over_many_days(self) -> None:
        # 3 days, 5 hours, 7 minutes
        minutes = 3 * 24 * 60 + 5 * 60 + 7
        clock = advance_clock(GameClock(day=1, hour=8, minute=0), minutes)
        assert (clock.day, clock.hour, clock.minute) == (4, 13, 7)

    def test_negative_minutes_raises(self) -> None:
        with pytest.raises(ValueError, match="minutes must be >= 0"):
            advance_clock(GameClock(), -1)

    def test_input_clock_untouched(self) -> None:
        clock = GameClock(day=1, hour=8, minute=0)
        advance_clock(clock, 120)
        assert (clock.day, clock.hour, clock.minute) == (1, 8, 0)

    def test_normalized_for_random_advances(self) -> None:
        rng = random.Random(1234)
        for _ in range(500):
            start = GameClock(day=rng.randint(1, 50), hour=rng.randint(0, 23), minute=rng.randint(0, 59))
            minutes = rng.randint(0, 100000)
            clock = advance_clock(start, minutes)
            assert 0 <= clock.minute <= 59
            assert 0 <= clock.hour <= 23
            assert clock.day >= start.day
            assert clock.is_day_time == (6 <= clock.hour < 20)
            assert clock.total_minutes == start.total_minutes + minutes


class TestDayTime:
    @pytest.mark.parametrize("hour,expected", [
        (0, False), (5, False), (6, True), (12, True), (19, True), (20, False), (23, False),
    ])
    def test_is_day_time(self, hour: int, expected: bool) -> None:
        assert GameClock(hour=hour).is_day_time is expected

    def test_initial_clock_is_morning(self) -> None:
        clock = GameClock()
        assert (clock.day, clock.hour, clock.minute) == (1, 8, 0)
        assert clock.is_day_time is True


class TestDecay:
    def test_single_tick_from_full(self) -> None:
        stats = decay(PlayerStats())
        assert stats.health == 100
        assert stats.hunger == 99
        assert stats.thirst == 98.5
        assert stats.energy == 99.5

    def test_floors_at_zero(self) -> None:
        stats = decay(PlayerStats(health=50, hunger=0.5, thirst=1, energy=0.2))
        assert stats.hunger == 0
        assert stats.thirst == 0
        assert stats.energy == 0

    def test_health_drops_when_hunger_is_zero(self) -> None:
        stats = decay(PlayerStats(health=50, hunger=1, thirst=80))
        assert stats.hunger == 0
        assert stats.health == 48

    def test_health_drops_when_thirst_is_zero(self) -> None:
        stats = decay(PlayerStats(health=50, hunger=80, thirst=1.5))
        assert stats.thirst == 0
        assert stats.health == 48

    def test_health_keeps_dropping_while_at_zero(self) -> None:
        stats = PlayerStats(health=50, hunger=0, thirst=80)
        stats = decay(decay(stats))
        assert stats.health == 46

    def test_health_loss_is_two_even_when_both_are_zero(self) -> None:
        stats = decay(PlayerStats(health=50, hunger=0, thirst=0))
        assert stats.health == 48

    def test_health_floors_at_zero(self) -> None:
        stats = decay(PlayerStats(health=1, hunger=0, thirst=0))
        assert stats.health == 0

    def test_no_health_loss_when_fed_and_watered(self) -> None:
        stats = decay(PlayerStats(health=50, hunger=2, thirst=2))
        assert stats.health == 50


class TestFormatClock:
    @pytest.mark.parametrize("hour,minute,expected", [
        (0, 0, "Day 1 - 12:00 AM"),
        (8, 5, "Day 1 - 8:05 AM"),
        (12, 30, "Day 1 - 12:30 PM"),
        (19, 45, "Day 1 - 7:45 PM"),
    ])
    def test_twelve_hour_format(self, hour: int, minute: int, expected: str) -> None:
        assert format_clock(GameClock(day=1, hour=hour, minute=minute)) == expected
