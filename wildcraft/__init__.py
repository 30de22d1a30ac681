"""Wildcraft - a single-player survival and crafting simulation."""

from wildcraft.data import default_catalog
from wildcraft.errors import CatalogError, UnknownContentError, WildcraftError
from wildcraft.models import GameState, Outcome, TransitionResult, new_session
from wildcraft.systems import GameSession, Ticker

__version__ = "0.1.0"

__all__ = [
    "default_catalog",
    "CatalogError",
    "UnknownContentError",
    "WildcraftError",
    "GameState",
    "Outcome",
    "TransitionResult",
    "new_session",
    "GameSession",
    "Ticker",
]
