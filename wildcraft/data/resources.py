"""Gatherable resources and where they can be found."""

from wildcraft.models.catalog import ResourceDef


RESOURCES: list[ResourceDef] = [
    ResourceDef(
        id="wood",
        name="Wood",
        description="Sturdy branches and logs for building and fuel.",
        icon="🪵",
        biome="forest",
        energy_cost=5,
        rarity="common",
    ),
    ResourceDef(
        id="stone",
        name="Stone",
        description="Hard rock for tools and construction.",
        icon="🪨",
        biome="all",
        energy_cost=5,
        rarity="common",
    ),
    ResourceDef(
        id="fiber",
        name="Plant Fiber",
        description="Tough plant strands for binding and weaving.",
        icon="🌿",
        biome="forest",
        energy_cost=2,
        rarity="common",
    ),
    ResourceDef(
        id="berries",
        name="Berries",
        description="Wild berries, sweet but not very filling.",
        icon="🫐",
        biome="forest",
        energy_cost=2,
        rarity="common",
    ),
    ResourceDef(
        id="herbs",
        name="Herbs",
        description="Medicinal plants with healing properties.",
        icon="🌱",
        biome="forest",
        energy_cost=3,
        rarity="uncommon",
    ),
    ResourceDef(
        id="meat",
        name="Raw Meat",
        description="Fresh meat from hunting. Should be cooked first.",
        icon="🥩",
        biome="all",
        energy_cost=10,
        rarity="uncommon",
    ),
    ResourceDef(
        id="water",
        name="Water",
        description="Fresh water from a spring or oasis.",
        icon="💧",
        biome="all",
        energy_cost=3,
        rarity="common",
    ),
    ResourceDef(
        id="flint",
        name="Flint",
        description="Sharp stone for sparking fires and cutting edges.",
        icon="🔶",
        biome="desert",
        energy_cost=4,
        rarity="uncommon",
    ),
    ResourceDef(
        id="cactus",
        name="Cactus Flesh",
        description="Moist pulp cut from desert cacti.",
        icon="🌵",
        biome="desert",
        energy_cost=4,
        rarity="uncommon",
    ),
    ResourceDef(
        id="metal",
        name="Metal Ore",
        description="Raw ore that can be worked into better tools.",
        icon="⛓️",
        biome="mountains",
        energy_cost=8,
        rarity="rare",
    ),
    ResourceDef(
        id="clay",
        name="Clay",
        description="Soft earth from mountain streams.",
        icon="🟫",
        biome="mountains",
        energy_cost=4,
        rarity="uncommon",
    ),
]
