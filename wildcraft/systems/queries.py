"""Read-only views derived from game state for the screens."""

from __future__ import annotations
from pydantic import BaseModel

from wildcraft.models.catalog import ANY_BIOME, Biome, Catalog, Rarity, Recipe, ResourceDef
from wildcraft.models.game_state import GameState, StatName


ALL_CATEGORY = "all"
MISC_CATEGORY = "misc"

INVENTORY_TABS = ("all", "resources", "items")

_RARITY_STARS = {Rarity.COMMON: 1, Rarity.UNCOMMON: 2, Rarity.RARE: 3}

# Bar severity thresholds
LOW_THRESHOLD = 50
CRITICAL_THRESHOLD = 20


class Shortfall(BaseModel):
    """An ingredient the inventory cannot cover."""
    id: str
    have: int
    need: int


class StatBar(BaseModel):
    stat: StatName
    value: float
    level: str  # "ok", "low" or "critical"


def craftable(recipe: Recipe, state: GameState) -> bool:
    """True iff every ingredient quantity is covered by the inventory."""
    return all(state.quantity_of(i.id) >= i.quantity for i in recipe.ingredients)


def missing_ingredients(recipe: Recipe, state: GameState) -> list[Shortfall]:
    """Ingredients that are absent or short, in recipe order."""
    missing = []
    for ingredient in recipe.ingredients:
        have = state.quantity_of(ingredient.id)
        if have < ingredient.quantity:
            missing.append(Shortfall(id=ingredient.id, have=have, need=ingredient.quantity))
    return missing


def is_available(resource: ResourceDef, biome: Biome | str) -> bool:
    return resource.biome == ANY_BIOME or resource.biome == Biome(biome).value


def available_resources(catalog: Catalog, biome: Biome | str) -> list[ResourceDef]:
    """Resources collectible in *biome*, in catalog order."""
    return [r for r in catalog.resources if is_available(r, biome)]


def rarity_stars(rarity: Rarity | str) -> str:
    """Star rating shown next to a resource, e.g. '★★☆' for uncommon."""
    filled = _RARITY_STARS[Rarity(rarity)]
    return "★" * filled + "☆" * (len(_RARITY_STARS) - filled)


def result_category(recipe: Recipe, catalog: Catalog) -> str:
    item = catalog.find_item(recipe.result)
    return item.category.value if item else MISC_CATEGORY


def unlocked_recipes(state: GameState, catalog: Catalog) -> list[Recipe]:
    """Unlocked recipes in the order they were unlocked."""
    recipes = []
    for recipe_id in state.unlocked_recipes:
        recipe = catalog.find_recipe(recipe_id)
        if recipe:
            recipes.append(recipe)
    return recipes


def categories_present(state: GameState, catalog: Catalog) -> set[str]:
    """Result categories among unlocked recipes, plus 'all'."""
    categories = {ALL_CATEGORY}
    categories.update(result_category(r, catalog) for r in unlocked_recipes(state, catalog))
    return categories


def recipes_in_category(state: GameState, catalog: Catalog, category: str = ALL_CATEGORY) -> list[Recipe]:
    """Unlocked recipes whose result falls into *category*."""
    recipes = unlocked_recipes(state, catalog)
    if category == ALL_CATEGORY:
        return recipes
    return [r for r in recipes if result_category(r, catalog) == category]


def filter_inventory(state: GameState, tab: str = "all") -> list:
    """Inventory stacks shown under an inventory tab."""
    if tab == "all":
        return list(state.inventory)
    if tab == "resources":
        return [e for e in state.inventory if e.kind == "resource"]
    if tab == "items":
        return [e for e in state.inventory if e.kind == "item"]
    raise ValueError(f"Unknown inventory tab '{tab}', use one of: {', '.join(INVENTORY_TABS)}")


def stat_level(value: float) -> str:
    if value <= CRITICAL_THRESHOLD:
        return "critical"
    if value <= LOW_THRESHOLD:
        return "low"
    return "ok"


def stat_bars(state: GameState) -> list[StatBar]:
    """One bar per stat, in display order."""
    bars = []
    for stat in StatName:
        value = state.stats.get(stat)
        bars.append(StatBar(stat=stat, value=value, level=stat_level(value)))
    return bars
