"""Tests for the read-only views."""
from __future__ import annotations

import pytest

from conftest import stocked, with_stats
from wildcraft.models.catalog import Biome, Catalog
from wildcraft.models.game_state import GameState, StatName
from wildcraft.systems import queries


class TestCraftable:
    def test_empty_inventory_cannot_craft(self, state: GameState, catalog: Catalog) -> None:
        assert not queries.craftable(catalog.get_recipe("stone_axe"), state)

    def test_exact_quantities_are_enough(self, state: GameState, catalog: Catalog) -> None:
        state = stocked(state, catalog, wood=2, stone=3, fiber=1)
        assert queries.craftable(catalog.get_recipe("stone_axe"), state)

    def test_missing_ingredients_in_recipe_order(self, state: GameState, catalog: Catalog) -> None:
        state = stocked(state, catalog, stone=1, fiber=5)
        missing = queries.missing_ingredients(catalog.get_recipe("stone_axe"), state)
        assert missing == [
            queries.Shortfall(id="wood", have=0, need=2),
            queries.Shortfall(id="stone", have=1, need=3),
        ]

    def test_nothing_missing_when_craftable(self, state: GameState, catalog: Catalog) -> None:
        state = stocked(state, catalog, fiber=8)
        assert queries.missing_ingredients(catalog.get_recipe("fiber_jacket"), state) == []


class TestAvailability:
    def test_forest(self, catalog: Catalog) -> None:
        ids = [r.id for r in queries.available_resources(catalog, Biome.FOREST)]
        assert "wood" in ids
        assert "stone" in ids
        assert "flint" not in ids
        assert "metal" not in ids

    def test_desert_by_string(self, catalog: Catalog) -> None:
        ids = [r.id for r in queries.available_resources(catalog, "desert")]
        assert "flint" in ids
        assert "water" in ids
        assert "wood" not in ids

    def test_every_biome_offers_wildcards(self, catalog: Catalog) -> None:
        for biome in Biome:
            ids = {r.id for r in queries.available_resources(catalog, biome)}
            assert {"stone", "meat", "water"} <= ids


class TestRecipeViews:
    def test_initial_unlocked_order(self, state: GameState, catalog: Catalog) -> None:
        ids = [r.id for r in queries.unlocked_recipes(state, catalog)]
        assert ids == catalog.initially_unlocked()
        assert "cooked_meat_recipe" not in ids

    def test_categories_always_include_all(self, state: GameState, catalog: Catalog) -> None:
        categories = queries.categories_present(state, catalog)
        assert queries.ALL_CATEGORY in categories
        assert "tool" in categories
        assert "food" not in categories

    def test_recipes_in_category(self, state: GameState, catalog: Catalog) -> None:
        weapons = queries.recipes_in_category(state, catalog, "weapon")
        assert [r.id for r in weapons] == ["wooden_spear"]

    def test_all_category_returns_everything(self, state: GameState, catalog: Catalog) -> None:
        assert queries.recipes_in_category(state, catalog) == queries.unlocked_recipes(state, catalog)

    def test_unknown_result_is_misc(self, catalog: Catalog) -> None:
        recipe = catalog.get_recipe("stone_axe").model_copy(update={"result": "mystery"})
        assert queries.result_category(recipe, catalog) == queries.MISC_CATEGORY


class TestFilterInventory:
    def test_tabs(self, state: GameState, catalog: Catalog) -> None:
        state = stocked(state, catalog, wood=2, axe=1, stone=4)
        assert [e.id for e in queries.filter_inventory(state)] == ["wood", "axe", "stone"]
        assert [e.id for e in queries.filter_inventory(state, "resources")] == ["wood", "stone"]
        assert [e.id for e in queries.filter_inventory(state, "items")] == ["axe"]

    def test_unknown_tab_raises(self, state: GameState) -> None:
        with pytest.raises(ValueError, match="Unknown inventory tab"):
            queries.filter_inventory(state, "weapons")


class TestStatBars:
    @pytest.mark.parametrize("value,level", [
        (100, "ok"), (51, "ok"), (50, "low"), (21, "low"), (20, "critical"), (0, "critical"),
    ])
    def test_levels(self, value: float, level: str) -> None:
        assert queries.stat_level(value) == level

    def test_one_bar_per_stat(self, state: GameState) -> None:
        state = with_stats(state, thirst=10)
        bars = queries.stat_bars(state)
        assert [b.stat for b in bars] == list(StatName)
        thirst = next(b for b in bars if b.stat == StatName.THIRST)
        assert thirst.value == 10
        assert thirst.level == "critical"


class TestRarity:
    @pytest.mark.parametrize("rarity,stars", [
        ("common", "★☆☆"), ("uncommon", "★★☆"), ("rare", "★★★"),
    ])
    def test_stars(self, rarity: str, stars: str) -> None:
        assert queries.rarity_stars(rarity) == stars

    def test_every_resource_has_a_rating(self, catalog: Catalog) -> None:
        for resource in catalog.resources:
            assert queries.rarity_stars(resource.rarity).startswith("★")
        assert catalog.get_resource("metal").rarity.value == "rare"
