"""Built-in content tables."""

from functools import lru_cache

from wildcraft.models.catalog import Catalog

from .items import ITEMS
from .recipes import RECIPES
from .resources import RESOURCES


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The standard content set. Validated once and shared."""
    catalog = Catalog(resources=RESOURCES, items=ITEMS, recipes=RECIPES)
    catalog.validate_content()
    return catalog


__all__ = ["default_catalog", "ITEMS", "RECIPES", "RESOURCES"]
