"""Crafting recipes and their unlock chain."""

from wildcraft.models.catalog import Recipe, RecipeIngredient


def _needs(**quantities: int) -> list[RecipeIngredient]:
    return [RecipeIngredient(id=k, quantity=v) for k, v in quantities.items()]


RECIPES: list[Recipe] = [
    Recipe(
        id="stone_axe",
        name="Stone Axe",
        ingredients=_needs(wood=2, stone=3, fiber=1),
        result="axe",
        description="A basic tool for chopping wood more efficiently.",
    ),
    Recipe(
        id="stone_pickaxe",
        name="Stone Pickaxe",
        ingredients=_needs(wood=2, stone=4, fiber=1),
        result="pickaxe",
        description="A tool for mining stone and ore.",
    ),
    Recipe(
        id="wooden_spear",
        name="Wooden Spear",
        ingredients=_needs(wood=3, flint=1, fiber=2),
        result="spear",
        description="A simple weapon for hunting and defense.",
    ),
    Recipe(
        id="cooked_meat_recipe",
        name="Cooked Meat",
        ingredients=_needs(meat=1, fire=1),
        result="cooked_meat",
        description="Cook raw meat to make it safe to eat.",
        locked=True,
        unlocked_by="fire",
    ),
    Recipe(
        id="berry_juice_recipe",
        name="Berry Juice",
        ingredients=_needs(berries=3, water=1, water_container=1),
        result="berry_juice",
        description="A refreshing drink made from berries.",
        locked=True,
        unlocked_by="water_container",
    ),
    Recipe(
        id="herbal_medicine",
        name="Herbal Medicine",
        ingredients=_needs(herbs=3, berries=1, water=1),
        result="medicine",
        description="A medicinal preparation that heals wounds.",
        locked=True,
        unlocked_by="water_container",
    ),
    Recipe(
        id="simple_tent",
        name="Simple Tent",
        ingredients=_needs(wood=4, fiber=6),
        result="tent",
        description="A basic shelter for protection.",
    ),
    Recipe(
        id="campfire",
        name="Campfire",
        ingredients=_needs(wood=3, stone=5, flint=1),
        result="fire",
        description="A source of heat and light, used for cooking.",
    ),
    Recipe(
        id="water_container_recipe",
        name="Water Container",
        ingredients=_needs(fiber=3, wood=1),
        result="water_container",
        description="A container to store clean water.",
    ),
    Recipe(
        id="metal_axe_recipe",
        name="Metal Axe",
        ingredients=_needs(metal=3, wood=2, fiber=1),
        result="metal_axe",
        description="An advanced tool for chopping wood faster.",
        locked=True,
        unlocked_by="pickaxe",
    ),
    Recipe(
        id="fiber_jacket",
        name="Fiber Jacket",
        ingredients=_needs(fiber=8),
        result="jacket",
        description="Clothing to protect from cold weather.",
    ),
]
