"""Time system - clock arithmetic and the passive stat decay tick."""

from __future__ import annotations

from wildcraft.models.game_state import GameClock, PlayerStats, STAT_MIN


MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

# Per decay tick
HUNGER_DECAY = 1.0
THIRST_DECAY = 1.5
ENERGY_DECAY = 0.5
STARVATION_DAMAGE = 2.0


def advance_clock(clock: GameClock, minutes: int) -> GameClock:
    """Return *clock* moved forward by *minutes*, carries fully normalized.

    Minutes carry into hours and hours into days, so a single call may roll
    over any number of hours and days.
    """
    if minutes < 0:
        raise ValueError(f"minutes must be >= 0, got {minutes}")

    minute = clock.minute + minutes
    hour = clock.hour + minute // MINUTES_PER_HOUR
    minute %= MINUTES_PER_HOUR
    day = clock.day + hour // HOURS_PER_DAY
    hour %= HOURS_PER_DAY

    return GameClock(day=day, hour=hour, minute=minute)


def decay(stats: PlayerStats) -> PlayerStats:
    """Apply one decay tick.

    Hunger, thirst and energy drop and floor at zero. Health then drops
    whenever hunger or thirst sits at zero, not only on the tick it got there.
    """
    hunger = max(STAT_MIN, stats.hunger - HUNGER_DECAY)
    thirst = max(STAT_MIN, stats.thirst - THIRST_DECAY)
    energy = max(STAT_MIN, stats.energy - ENERGY_DECAY)

    health = stats.health
    if hunger == 0 or thirst == 0:
        health = max(STAT_MIN, health - STARVATION_DAMAGE)

    return PlayerStats(health=health, hunger=hunger, thirst=thirst, energy=energy)


def format_clock(clock: GameClock) -> str:
    """Twelve-hour display string, e.g. 'Day 2 - 7:05 PM'."""
    display_hour = clock.hour % 12 or 12
    period = "PM" if clock.hour >= 12 else "AM"
    return f"Day {clock.day} - {display_hour}:{clock.minute:02d} {period}"
