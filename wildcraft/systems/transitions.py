"""Transition engine - every way the game state is allowed to change.

Each public function takes the current state, the catalog and its own
arguments, and returns a TransitionResult carrying a new state. The input
state is never modified. When a precondition fails the result carries the
original state object, a failure Outcome and a single ACTION_FAILED event.

Follow-up steps are part of each action's contract:

    collect_resource   energy cost, +5 min, decay tick
    craft_item         flat 10 energy, +15 min, decay tick
    use_item           +2 min (no decay tick)
    change_biome       +30 min, -20 energy, decay tick
    drop_item          nothing
"""

from __future__ import annotations
from typing import Any, Optional

from wildcraft.models.catalog import Biome, Catalog
from wildcraft.models.events import Event, EventEffect, EventType
from wildcraft.models.game_state import (
    GameState,
    ItemStack,
    ResourceStack,
    StatName,
    clamp_stat,
)
from wildcraft.models.outcomes import Outcome, TransitionResult
from wildcraft.systems import queries
from wildcraft.systems.time_system import advance_clock, decay


COLLECT_MINUTES = 5
CRAFT_MINUTES = 15
USE_MINUTES = 2
TRAVEL_MINUTES = 30

CRAFT_ENERGY_COST = 10
TRAVEL_ENERGY_COST = 20


class _Transition:
    """Working copy of the state plus the events produced while changing it."""

    def __init__(self, state: GameState, catalog: Catalog, actor: str = "player"):
        self.original = state
        self.state = state.model_copy(deep=True)
        self.catalog = catalog
        self.actor = actor
        self.events: list[Event] = []

    def event(
        self,
        event_type: EventType,
        description: str,
        effects: Optional[list[EventEffect]] = None,
        actor: Optional[str] = None,
        visible: bool = True,
        **metadata: Any,
    ) -> Event:
        clock = self.state.clock
        event = Event(
            event_type=event_type,
            description=description,
            actor=actor or self.actor,
            game_minute=clock.total_minutes,
            game_time=clock.label(),
            effects=effects or [],
            metadata=metadata,
            visible_to_player=visible,
        )
        self.events.append(event)
        return event

    # ===== Inventory =====

    def add_stack(self, entry_id: str, amount: int = 1) -> EventEffect:
        """Merge *amount* units into the stack for *entry_id*, creating it if needed."""
        inventory = self.state.inventory
        for index, entry in enumerate(inventory):
            if entry.id == entry_id:
                old = entry.quantity
                inventory[index] = entry.model_copy(update={"quantity": old + amount})
                return _inventory_effect(entry_id, old, old + amount)

        if self.catalog.is_resource(entry_id):
            inventory.append(ResourceStack(id=entry_id, quantity=amount))
        else:
            inventory.append(ItemStack(id=entry_id, quantity=amount))
        return _inventory_effect(entry_id, 0, amount)

    def take_from_stack(self, entry_id: str, amount: int) -> EventEffect:
        """Remove up to *amount* units; the stack disappears when it empties."""
        inventory = self.state.inventory
        for index, entry in enumerate(inventory):
            if entry.id == entry_id:
                old = entry.quantity
                remaining = old - amount
                if remaining > 0:
                    inventory[index] = entry.model_copy(update={"quantity": remaining})
                else:
                    del inventory[index]
                    remaining = 0
                return _inventory_effect(entry_id, old, remaining)
        return _inventory_effect(entry_id, 0, 0)

    # ===== Stats and clock =====

    def change_stat(self, stat: StatName, delta: float) -> EventEffect:
        stats = self.state.stats
        old = stats.get(stat)
        self.state.stats = stats.with_stat(stat, old + delta)
        return EventEffect(
            target_type="stat",
            field=stat.value,
            old_value=old,
            new_value=self.state.stats.get(stat),
        )

    def restore_stat(self, stat: StatName, amount: float) -> EventEffect:
        """Raise a stat, capped at 100. Never lowers it."""
        old = self.state.stats.get(stat)
        new = max(old, clamp_stat(old + amount))
        self.state.stats = self.state.stats.with_stat(stat, new)
        return EventEffect(target_type="stat", field=stat.value, old_value=old, new_value=new)

    def advance_time(self, minutes: int) -> None:
        old = self.state.clock
        new = advance_clock(old, minutes)
        self.state.clock = new

        self.event(
            EventType.TIME_ADVANCE,
            f"{minutes} minute(s) pass",
            effects=[EventEffect(target_type="clock", field="time", old_value=old.label(), new_value=new.label())],
            actor="system",
            visible=False,
            minutes=minutes,
        )

        if new.day > old.day:
            self.event(EventType.TIME_ADVANCE, f"Day {new.day} begins", actor="system", day=new.day)
        if old.is_day_time and not new.is_day_time:
            self.event(EventType.TIME_ADVANCE, "Night falls", actor="system")
        elif new.is_day_time and not old.is_day_time:
            self.event(EventType.TIME_ADVANCE, "The sun rises", actor="system")

    def decay(self) -> None:
        old = self.state.stats
        new = decay(old)
        self.state.stats = new

        effects = [
            EventEffect(target_type="stat", field=stat.value, old_value=old.get(stat), new_value=new.get(stat))
            for stat in StatName
            if old.get(stat) != new.get(stat)
        ]
        self.event(EventType.STATS_DECAYED, "Stats decay", effects=effects, actor="system", visible=False)

        # Announced once when starving begins, not on every tick after
        was_starving = old.hunger == 0 or old.thirst == 0
        if new.health < old.health and not was_starving:
            cause = "hunger" if new.hunger == 0 else "thirst"
            if new.hunger == 0 and new.thirst == 0:
                cause = "hunger and thirst"
            self.event(EventType.STAT_CHANGED, f"You are weakening from {cause}", actor="system")

    # ===== Results =====

    def finish(self, message: str = "") -> TransitionResult:
        if self.state.stats.health <= 0 < self.original.stats.health:
            self.event(
                EventType.PLAYER_DIED,
                "You couldn't survive the harsh wilderness.",
                actor="system",
            )
        return TransitionResult(state=self.state, outcome=Outcome.OK, message=message, events=self.events)


def _inventory_effect(entry_id: str, old: int, new: int) -> EventEffect:
    return EventEffect(target_type="inventory", target_id=entry_id, field="quantity", old_value=old, new_value=new)


def _fail(state: GameState, outcome: Outcome, message: str, action: str, **metadata: Any) -> TransitionResult:
    """A rejected action: same state, one failure event."""
    clock = state.clock
    event = Event(
        event_type=EventType.ACTION_FAILED,
        description=message,
        actor="player",
        game_minute=clock.total_minutes,
        game_time=clock.label(),
        metadata={"action": action, "outcome": outcome.value, **metadata},
    )
    return TransitionResult(state=state, outcome=outcome, message=message, changed=False, events=[event])


# ===== Player actions =====

def collect_resource(state: GameState, catalog: Catalog, resource_id: str) -> TransitionResult:
    """Gather one unit of a resource available in the current biome."""
    resource = catalog.get_resource(resource_id)

    if not queries.is_available(resource, state.biome):
        return _fail(
            state,
            Outcome.NOT_AVAILABLE,
            f"{resource.name} can't be found in the {state.biome.value}.",
            "collect",
            resource=resource_id,
        )

    if state.stats.energy < resource.energy_cost:
        return _fail(
            state,
            Outcome.INSUFFICIENT_ENERGY,
            "Not enough energy. Rest or eat food to regain energy.",
            "collect",
            resource=resource_id,
            energy=state.stats.energy,
            energy_cost=resource.energy_cost,
        )

    t = _Transition(state, catalog)
    effects = [t.add_stack(resource.id), t.change_stat(StatName.ENERGY, -resource.energy_cost)]
    t.event(EventType.RESOURCE_COLLECTED, f"Collected {resource.name}", effects=effects, resource=resource.id)
    t.advance_time(COLLECT_MINUTES)
    t.decay()
    return t.finish(f"Collected {resource.name}.")


def craft_item(state: GameState, catalog: Catalog, recipe_id: str) -> TransitionResult:
    """Turn a recipe's ingredients into its result item, unlocking follow-up recipes."""
    recipe = catalog.get_recipe(recipe_id)

    if not state.is_unlocked(recipe.id):
        return _fail(state, Outcome.RECIPE_LOCKED, f"You don't know how to make {recipe.name} yet.", "craft", recipe=recipe.id)

    missing = queries.missing_ingredients(recipe, state)
    if missing:
        needed = ", ".join(f"{catalog.display_name(m.id)} {m.have}/{m.need}" for m in missing)
        return _fail(
            state,
            Outcome.MISSING_INGREDIENTS,
            f"Missing ingredients for {recipe.name}: {needed}",
            "craft",
            recipe=recipe.id,
            missing=[m.model_dump() for m in missing],
        )

    t = _Transition(state, catalog)

    # All ingredients leave before the result arrives
    effects = [t.take_from_stack(i.id, i.quantity) for i in recipe.ingredients]
    effects.append(t.add_stack(recipe.result))
    result_name = catalog.display_name(recipe.result)
    t.event(EventType.ITEM_CRAFTED, f"Crafted {result_name}", effects=effects, recipe=recipe.id, result=recipe.result)

    # Single pass, no transitive unlocking
    for unlocked_id in catalog.recipes_unlocked_by(recipe.result):
        if unlocked_id not in t.state.unlocked_recipes:
            t.state.unlocked_recipes.append(unlocked_id)
            unlocked = catalog.get_recipe(unlocked_id)
            t.event(
                EventType.RECIPE_UNLOCKED,
                f"New recipe unlocked: {unlocked.name}",
                effects=[EventEffect(target_type="recipe", target_id=unlocked_id, field="unlocked", old_value=False, new_value=True)],
                recipe=unlocked_id,
            )

    t.change_stat(StatName.ENERGY, -CRAFT_ENERGY_COST)
    t.advance_time(CRAFT_MINUTES)
    t.decay()
    return t.finish(f"Crafted {result_name}.")


def use_item(state: GameState, catalog: Catalog, item_id: str) -> TransitionResult:
    """Consume one food or medicine item and apply its effects."""
    item = catalog.find_item(item_id)
    if item is None:
        name = catalog.display_name(item_id)
        return _fail(state, Outcome.NOT_USABLE, f"{name} can't be consumed.", "use", item=item_id)

    if not item.consumable:
        return _fail(
            state,
            Outcome.NOT_USABLE,
            f"{item.name} can't be consumed. It may be used for crafting or other purposes.",
            "use",
            item=item_id,
        )

    entry = state.get_entry(item_id)
    if entry is None or entry.kind != "item":
        return _fail(state, Outcome.NOT_USABLE, f"You don't have any {item.name}.", "use", item=item_id)

    t = _Transition(state, catalog)
    effects = []
    if item.effects:
        for stat, amount in item.effects.declared().items():
            effects.append(t.restore_stat(StatName(stat), amount))
    effects.append(t.take_from_stack(item.id, 1))
    t.event(EventType.ITEM_USED, f"Used {item.name}", effects=effects, item=item.id)
    t.advance_time(USE_MINUTES)
    return t.finish(f"Used {item.name}.")


def drop_item(state: GameState, catalog: Catalog, entry_id: str, amount: int = 1) -> TransitionResult:
    """Throw away *amount* units of a stack. Dropping something you don't have does nothing."""
    if amount < 1:
        raise ValueError(f"amount must be >= 1, got {amount}")

    entry = state.get_entry(entry_id)
    if entry is None:
        return TransitionResult(state=state, message="Nothing to drop.", changed=False)

    t = _Transition(state, catalog)
    name = catalog.display_name(entry_id)
    effect = t.take_from_stack(entry_id, amount)
    dropped = effect.old_value - effect.new_value
    t.event(EventType.ITEM_DROPPED, f"Dropped {name} x{dropped}", effects=[effect], entry=entry_id, amount=dropped)
    return t.finish(f"Dropped {name} x{dropped}.")


def change_player_stat(state: GameState, catalog: Catalog, stat: StatName | str, delta: float) -> TransitionResult:
    """Adjust one stat directly, clamped to [0, 100]."""
    stat = StatName(stat)
    t = _Transition(state, catalog, actor="system")
    effect = t.change_stat(stat, delta)
    t.event(EventType.STAT_CHANGED, f"{stat.value.capitalize()} {delta:+g}", effects=[effect], visible=False)
    return t.finish()


def change_biome(state: GameState, catalog: Catalog, biome: Biome | str) -> TransitionResult:
    """Travel to another biome: 30 minutes, 20 energy and a decay tick."""
    biome = Biome(biome)
    t = _Transition(state, catalog)
    old = t.state.biome
    t.state.biome = biome
    t.event(
        EventType.BIOME_CHANGED,
        f"Travelled to the {biome.value}",
        effects=[EventEffect(target_type="biome", field="biome", old_value=old.value, new_value=biome.value)],
        biome=biome.value,
    )
    t.advance_time(TRAVEL_MINUTES)
    t.change_stat(StatName.ENERGY, -TRAVEL_ENERGY_COST)
    t.decay()
    return t.finish(f"You arrive in the {biome.value}.")


# ===== Passive =====

def advance_time(state: GameState, catalog: Catalog, minutes: int) -> TransitionResult:
    """Move the clock forward. Stats and inventory are untouched."""
    t = _Transition(state, catalog, actor="system")
    t.advance_time(minutes)
    return t.finish()


def decay_stats(state: GameState, catalog: Catalog) -> TransitionResult:
    """One passive decay tick. The clock is untouched."""
    t = _Transition(state, catalog, actor="system")
    t.decay()
    return t.finish()


def tick(state: GameState, catalog: Catalog, minutes: int = 1) -> TransitionResult:
    """The periodic timer step: advance the clock, then decay."""
    t = _Transition(state, catalog, actor="system")
    t.advance_time(minutes)
    t.decay()
    return t.finish()
