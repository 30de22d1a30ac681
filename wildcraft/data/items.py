"""Craftable items."""

from wildcraft.models.catalog import ItemCategory, ItemDef, ItemEffects


ITEMS: list[ItemDef] = [
    ItemDef(
        id="axe",
        name="Stone Axe",
        description="Basic tool for chopping wood.",
        icon="🪓",
        category=ItemCategory.TOOL,
        durability=50,
    ),
    ItemDef(
        id="pickaxe",
        name="Stone Pickaxe",
        description="Tool for mining stone and ore.",
        icon="⛏️",
        category=ItemCategory.TOOL,
        durability=40,
    ),
    ItemDef(
        id="spear",
        name="Wooden Spear",
        description="Simple weapon for hunting and defense.",
        icon="🔱",
        category=ItemCategory.WEAPON,
        durability=30,
    ),
    ItemDef(
        id="cooked_meat",
        name="Cooked Meat",
        description="Nutritious food from cooked animal meat.",
        icon="🍖",
        category=ItemCategory.FOOD,
        effects=ItemEffects(hunger=40, energy=10),
    ),
    ItemDef(
        id="berry_juice",
        name="Berry Juice",
        description="Refreshing drink made from berries.",
        icon="🧃",
        category=ItemCategory.FOOD,
        effects=ItemEffects(thirst=30, hunger=5),
    ),
    ItemDef(
        id="medicine",
        name="Herbal Medicine",
        description="Medicinal preparation that heals wounds.",
        icon="💊",
        category=ItemCategory.MEDICINE,
        effects=ItemEffects(health=25),
    ),
    ItemDef(
        id="tent",
        name="Simple Tent",
        description="Basic shelter for protection.",
        icon="⛺",
        category=ItemCategory.SHELTER,
    ),
    ItemDef(
        id="fire",
        name="Campfire",
        description="Source of heat and light, used for cooking.",
        icon="🔥",
        category=ItemCategory.TOOL,
    ),
    ItemDef(
        id="water_container",
        name="Water Container",
        description="Stores clean water for drinking.",
        icon="🧴",
        category=ItemCategory.TOOL,
    ),
    ItemDef(
        id="metal_axe",
        name="Metal Axe",
        description="Advanced tool for chopping wood faster.",
        icon="⚒️",
        category=ItemCategory.TOOL,
        durability=100,
    ),
    ItemDef(
        id="jacket",
        name="Fiber Jacket",
        description="Clothing to protect from cold weather.",
        icon="🧥",
        category=ItemCategory.CLOTHING,
        effects=ItemEffects(health=5),
    ),
]
