"""Pydantic data models for content, game state, events, and transition results."""

from .catalog import (
    Biome,
    Catalog,
    ItemCategory,
    ItemDef,
    ItemEffects,
    Rarity,
    Recipe,
    RecipeIngredient,
    ResourceDef,
)
from .game_state import GameClock, GameState, ItemStack, PlayerStats, ResourceStack, StatName, new_session
from .events import Event, EventEffect, EventType
from .outcomes import Outcome, TransitionResult

__all__ = [
    "Biome",
    "Catalog",
    "ItemCategory",
    "ItemDef",
    "ItemEffects",
    "Rarity",
    "Recipe",
    "RecipeIngredient",
    "ResourceDef",
    "GameClock",
    "GameState",
    "ItemStack",
    "PlayerStats",
    "ResourceStack",
    "StatName",
    "new_session",
    "Event",
    "EventEffect",
    "EventType",
    "Outcome",
    "TransitionResult",
]
