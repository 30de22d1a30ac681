"""Game state schemas - the single mutable aggregate of a play session."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from wildcraft.models.catalog import Biome, Catalog


STAT_MIN = 0.0
STAT_MAX = 100.0

# Daylight runs from 06:00 up to (not including) 20:00
DAY_START_HOUR = 6
NIGHT_START_HOUR = 20


def clamp_stat(value: float) -> float:
    """Clamp a stat value to [0, 100]."""
    return max(STAT_MIN, min(STAT_MAX, value))


class StatName(str, Enum):
    """The four survival stats."""
    HEALTH = "health"
    HUNGER = "hunger"
    THIRST = "thirst"
    ENERGY = "energy"


class PlayerStats(BaseModel):
    """Survival stats, each bounded to 0-100."""
    health: float = Field(default=STAT_MAX, ge=STAT_MIN, le=STAT_MAX)
    hunger: float = Field(default=STAT_MAX, ge=STAT_MIN, le=STAT_MAX)
    thirst: float = Field(default=STAT_MAX, ge=STAT_MIN, le=STAT_MAX)
    energy: float = Field(default=STAT_MAX, ge=STAT_MIN, le=STAT_MAX)

    model_config = {"validate_assignment": True}

    def get(self, stat: StatName | str) -> float:
        return getattr(self, StatName(stat).value)

    def with_stat(self, stat: StatName | str, value: float) -> "PlayerStats":
        """Return a copy with one stat replaced by the clamped value."""
        return self.model_copy(update={StatName(stat).value: clamp_stat(value)})


class GameClock(BaseModel):
    """In-game calendar time."""
    day: int = Field(default=1, ge=1)
    hour: int = Field(default=8, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)

    @property
    def is_day_time(self) -> bool:
        return DAY_START_HOUR <= self.hour < NIGHT_START_HOUR

    @property
    def total_minutes(self) -> int:
        """Minutes elapsed since day 1 00:00."""
        return ((self.day - 1) * 24 + self.hour) * 60 + self.minute

    def label(self) -> str:
        return f"Day {self.day} {self.hour:02d}:{self.minute:02d}"


class ResourceStack(BaseModel):
    """A stack of a gathered resource."""
    kind: Literal["resource"] = "resource"
    id: str
    quantity: int = Field(ge=1)


class ItemStack(BaseModel):
    """A stack of a crafted item."""
    kind: Literal["item"] = "item"
    id: str
    quantity: int = Field(ge=1)


InventoryEntry = Annotated[Union[ResourceStack, ItemStack], Field(discriminator="kind")]


class GameState(BaseModel):
    """The complete state of one survival session."""
    stats: PlayerStats = Field(default_factory=PlayerStats)
    clock: GameClock = Field(default_factory=GameClock)
    inventory: list[InventoryEntry] = Field(default_factory=list)
    unlocked_recipes: list[str] = Field(
        default_factory=list,
        description="Unlocked recipe ids, unique, in unlock order",
    )
    biome: Biome = Biome.FOREST

    def get_entry(self, entry_id: str) -> Optional[ResourceStack | ItemStack]:
        """Find an inventory stack by id."""
        for entry in self.inventory:
            if entry.id == entry_id:
                return entry
        return None

    def quantity_of(self, entry_id: str) -> int:
        entry = self.get_entry(entry_id)
        return entry.quantity if entry else 0

    def is_unlocked(self, recipe_id: str) -> bool:
        return recipe_id in self.unlocked_recipes

    def summary(self, catalog: Optional[Catalog] = None) -> str:
        """Generate a text summary of the game state."""
        s = self.stats
        lines = [
            f"=== {self.clock.label()} ({'day' if self.clock.is_day_time else 'night'}) ===",
            f"Biome: {self.biome.value}",
            "",
            "--- Stats ---",
            f"  Health: {s.health:g}",
            f"  Hunger: {s.hunger:g}",
            f"  Thirst: {s.thirst:g}",
            f"  Energy: {s.energy:g}",
        ]

        if self.inventory:
            lines.append("")
            lines.append("--- Inventory ---")
            for entry in self.inventory:
                name = catalog.display_name(entry.id) if catalog else entry.id
                lines.append(f"  {name} x{entry.quantity}")

        return "\n".join(lines)


def new_session(catalog: Catalog) -> GameState:
    """Create the initial state of a fresh session."""
    return GameState(unlocked_recipes=catalog.initially_unlocked())
