"""Shared fixtures."""
from __future__ import annotations

import pytest

from wildcraft.data import default_catalog
from wildcraft.models.catalog import Catalog
from wildcraft.models.game_state import GameState, ItemStack, PlayerStats, ResourceStack, new_session
from wildcraft.systems.session import GameSession


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def state(catalog: Catalog) -> GameState:
    return new_session(catalog)


@pytest.fixture
def session(catalog: Catalog) -> GameSession:
    return GameSession(catalog)


def stocked(state: GameState, catalog: Catalog, **quantities: int) -> GameState:
    """Copy of *state* with the given stacks in the inventory."""
    inventory = []
    for entry_id, quantity in quantities.items():
        if catalog.is_resource(entry_id):
            inventory.append(ResourceStack(id=entry_id, quantity=quantity))
        else:
            inventory.append(ItemStack(id=entry_id, quantity=quantity))
    return state.model_copy(update={"inventory": inventory}, deep=True)


def with_stats(state: GameState, **stats: float) -> GameState:
    """Copy of *state* with some stats replaced."""
    return state.model_copy(update={"stats": PlayerStats(**{**state.stats.model_dump(), **stats})}, deep=True)


def inventory_dict(state: GameState) -> dict[str, int]:
    return {e.id: e.quantity for e in state.inventory}
