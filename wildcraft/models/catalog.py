"""Content catalog schemas - the static resource, item and recipe tables."""

from __future__ import annotations
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, PrivateAttr, model_validator

from wildcraft.errors import CatalogError, UnknownContentError


class Biome(str, Enum):
    """Places the player can travel to."""
    FOREST = "forest"
    DESERT = "desert"
    MOUNTAINS = "mountains"


# Resource biome value meaning "collectible everywhere"
ANY_BIOME = "all"


class ItemCategory(str, Enum):
    """Categories of craftable items."""
    TOOL = "tool"
    WEAPON = "weapon"
    FOOD = "food"
    MEDICINE = "medicine"
    SHELTER = "shelter"
    CLOTHING = "clothing"


class Rarity(str, Enum):
    """How scarce a resource is."""
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"


# Only these categories can be consumed with use_item
CONSUMABLE_CATEGORIES = frozenset({ItemCategory.FOOD, ItemCategory.MEDICINE})


class ResourceDef(BaseModel):
    """A raw resource that can be gathered in a biome."""
    id: str
    name: str
    description: str = ""
    icon: str = ""
    biome: str = Field(default=ANY_BIOME, description="Biome value or 'all'")
    energy_cost: float = Field(default=0, ge=0)
    rarity: Rarity = Rarity.COMMON

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_biome(self) -> "ResourceDef":
        valid = {b.value for b in Biome} | {ANY_BIOME}
        if self.biome not in valid:
            raise ValueError(f"Unknown biome '{self.biome}' for resource '{self.id}'")
        return self


class ItemEffects(BaseModel):
    """Stat restoration applied when an item is consumed."""
    health: Optional[float] = None
    hunger: Optional[float] = None
    thirst: Optional[float] = None
    energy: Optional[float] = None

    model_config = {"frozen": True}

    def declared(self) -> dict[str, float]:
        """Return only the effects that are actually set."""
        return {k: v for k, v in self.model_dump().items() if v is not None}


class ItemDef(BaseModel):
    """A craftable item."""
    id: str
    name: str
    description: str = ""
    icon: str = ""
    category: ItemCategory
    effects: Optional[ItemEffects] = None
    durability: Optional[int] = None

    model_config = {"frozen": True}

    @property
    def consumable(self) -> bool:
        return self.category in CONSUMABLE_CATEGORIES


class RecipeIngredient(BaseModel):
    """One ingredient line of a recipe."""
    id: str
    quantity: int = Field(ge=1)

    model_config = {"frozen": True}


class Recipe(BaseModel):
    """A crafting recipe turning ingredients into a single result item."""
    id: str
    name: str
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    result: str
    description: str = ""
    locked: bool = False
    unlocked_by: Optional[str] = Field(
        default=None,
        description="Result item id whose crafting unlocks this recipe",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_ingredients(self) -> "Recipe":
        seen: set[str] = set()
        for ingredient in self.ingredients:
            if ingredient.id in seen:
                raise ValueError(f"Duplicate ingredient '{ingredient.id}' in recipe '{self.id}'")
            seen.add(ingredient.id)
        return self


class Catalog(BaseModel):
    """The immutable content tables shared by every session."""
    resources: list[ResourceDef] = Field(default_factory=list)
    items: list[ItemDef] = Field(default_factory=list)
    recipes: list[Recipe] = Field(default_factory=list)

    model_config = {"frozen": True}

    _resources_by_id: dict[str, ResourceDef] = PrivateAttr(default_factory=dict)
    _items_by_id: dict[str, ItemDef] = PrivateAttr(default_factory=dict)
    _recipes_by_id: dict[str, Recipe] = PrivateAttr(default_factory=dict)
    _unlocks: dict[str, tuple[str, ...]] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        self._resources_by_id = {r.id: r for r in self.resources}
        self._items_by_id = {i.id: i for i in self.items}
        self._recipes_by_id = {r.id: r for r in self.recipes}

        # Locked recipes indexed by the result id that unlocks them, catalog order kept
        unlocks: dict[str, list[str]] = {}
        for recipe in self.recipes:
            if recipe.locked and recipe.unlocked_by:
                unlocks.setdefault(recipe.unlocked_by, []).append(recipe.id)
        self._unlocks = {k: tuple(v) for k, v in unlocks.items()}

    # ===== Lookups =====

    def get_resource(self, resource_id: str) -> ResourceDef:
        """Find a resource definition. Raises UnknownContentError if missing."""
        try:
            return self._resources_by_id[resource_id]
        except KeyError:
            raise UnknownContentError("resource", resource_id) from None

    def get_item(self, item_id: str) -> ItemDef:
        """Find an item definition. Raises UnknownContentError if missing."""
        try:
            return self._items_by_id[item_id]
        except KeyError:
            raise UnknownContentError("item", item_id) from None

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Find a recipe. Raises UnknownContentError if missing."""
        try:
            return self._recipes_by_id[recipe_id]
        except KeyError:
            raise UnknownContentError("recipe", recipe_id) from None

    def find_item(self, item_id: str) -> Optional[ItemDef]:
        return self._items_by_id.get(item_id)

    def find_recipe(self, recipe_id: str) -> Optional[Recipe]:
        return self._recipes_by_id.get(recipe_id)

    def is_resource(self, entry_id: str) -> bool:
        return entry_id in self._resources_by_id

    def is_item(self, entry_id: str) -> bool:
        return entry_id in self._items_by_id

    def display_name(self, entry_id: str) -> str:
        """Human-readable name for any resource or item id."""
        entry = self._resources_by_id.get(entry_id) or self._items_by_id.get(entry_id)
        return entry.name if entry else entry_id

    def icon(self, entry_id: str) -> str:
        entry = self._resources_by_id.get(entry_id) or self._items_by_id.get(entry_id)
        return entry.icon if entry and entry.icon else "❓"

    # ===== Recipes =====

    def initially_unlocked(self) -> list[str]:
        """Ids of every recipe that starts unlocked, in catalog order."""
        return [r.id for r in self.recipes if not r.locked]

    def recipes_unlocked_by(self, result_id: str) -> tuple[str, ...]:
        """Locked recipes whose unlock condition is crafting *result_id*."""
        return self._unlocks.get(result_id, ())

    # ===== Validation =====

    def validate_content(self) -> None:
        """Check cross-table references. Raises CatalogError on the first problem."""
        problems: list[str] = []

        for table, entries in (("resource", self.resources), ("item", self.items), ("recipe", self.recipes)):
            ids = [e.id for e in entries]
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            if dupes:
                problems.append(f"duplicate {table} ids: {', '.join(dupes)}")

        overlap = sorted(set(self._resources_by_id) & set(self._items_by_id))
        if overlap:
            problems.append(f"ids used by both resources and items: {', '.join(overlap)}")

        for recipe in self.recipes:
            for ingredient in recipe.ingredients:
                if not (self.is_resource(ingredient.id) or self.is_item(ingredient.id)):
                    problems.append(f"recipe '{recipe.id}' uses unknown ingredient '{ingredient.id}'")
            if not self.is_item(recipe.result):
                problems.append(f"recipe '{recipe.id}' produces unknown item '{recipe.result}'")
            if recipe.locked and not recipe.unlocked_by:
                problems.append(f"recipe '{recipe.id}' is locked with no unlock condition")

        if problems:
            raise CatalogError(problems)
