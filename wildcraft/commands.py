"""Text command handling shared by the REPL and the TUI.

Commands resolve names loosely (ids, display names, typos) and return
rich-markup lines for whichever screen asked.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, Field
from thefuzz import fuzz, process

if TYPE_CHECKING:
    from wildcraft.systems.session import GameSession

from wildcraft.models.catalog import Biome
from wildcraft.models.events import EventType
from wildcraft.models.game_state import StatName
from wildcraft.models.outcomes import TransitionResult
from wildcraft.systems import queries
from wildcraft.systems.time_system import format_clock


MATCH_THRESHOLD = 70

HELP_ROWS = [
    ("collect <resource>", "Gather a resource available here"),
    ("craft <recipe>", "Craft an unlocked recipe"),
    ("use <item>", "Eat, drink or apply an item"),
    ("drop <item> [n]", "Drop items from your inventory"),
    ("travel <biome>", "Travel to forest, desert or mountains"),
    ("wait [minutes]", "Let time pass (default: 10)"),
    ("status", "Show stats, time and biome"),
    ("inventory [all|resources|items]", "Show your inventory"),
    ("recipes [category]", "Show unlocked recipes"),
    ("resources", "Show resources available here"),
    ("events [n|kind|text]", "Show recent events, or only matching ones"),
    ("restart", "Start a new game"),
    ("help", "Show this help"),
    ("quit", "Exit the game"),
]

_STAT_COLORS = {
    StatName.HEALTH: "red",
    StatName.HUNGER: "yellow",
    StatName.THIRST: "cyan",
    StatName.ENERGY: "green",
}

_LEVEL_COLORS = {"ok": "green", "low": "yellow", "critical": "red"}

EVENT_LIST_LIMIT = 10

# Event kinds the events command can filter on
EVENT_FILTERS = {
    "collected": EventType.RESOURCE_COLLECTED,
    "crafted": EventType.ITEM_CRAFTED,
    "unlocked": EventType.RECIPE_UNLOCKED,
    "used": EventType.ITEM_USED,
    "dropped": EventType.ITEM_DROPPED,
    "travel": EventType.BIOME_CHANGED,
    "failed": EventType.ACTION_FAILED,
    "deaths": EventType.PLAYER_DIED,
}

# The result message already says what these did
_ECHOED_BY_MESSAGE = frozenset({
    EventType.RESOURCE_COLLECTED,
    EventType.ITEM_CRAFTED,
    EventType.ITEM_USED,
    EventType.ITEM_DROPPED,
    EventType.BIOME_CHANGED,
    EventType.ACTION_FAILED,
})


class CommandResponse(BaseModel):
    """What a command produced for the screen."""
    lines: list[str] = Field(default_factory=list)
    quit: bool = False
    result: Optional[TransitionResult] = None

    def add(self, line: str) -> None:
        self.lines.append(line)


def fuzzy_match(query: str, choices: dict[str, str], threshold: int = MATCH_THRESHOLD) -> Optional[str]:
    """Find the id whose id or display name best matches *query*.

    *choices* maps id -> display name. Exact id or name matches win outright.
    """
    query_lower = query.strip().lower()
    if not query_lower:
        return None

    for choice_id, name in choices.items():
        if query_lower in (choice_id.lower(), name.lower(), choice_id.replace("_", " ").lower()):
            return choice_id

    candidates = {}
    for choice_id, name in choices.items():
        candidates[f"{choice_id}|id"] = choice_id.replace("_", " ")
        candidates[f"{choice_id}|name"] = name

    match = process.extractOne(query_lower, candidates, scorer=fuzz.ratio, score_cutoff=threshold)
    if match is None:
        return None
    _value, _score, key = match
    return key.split("|", 1)[0]


def stat_line(session: "GameSession") -> str:
    parts = []
    for bar in queries.stat_bars(session.state):
        color = _LEVEL_COLORS[bar.level]
        label = f"[{_STAT_COLORS[bar.stat]}]{bar.stat.value.capitalize()}[/{_STAT_COLORS[bar.stat]}]"
        parts.append(f"{label} [{color}]{bar.value:g}[/{color}]")
    return " │ ".join(parts)


def time_line(session: "GameSession") -> str:
    clock = session.state.clock
    icon = "☀" if clock.is_day_time else "☾"
    return f"{icon} {format_clock(clock)} │ {session.state.biome.value.capitalize()}"


class CommandProcessor:
    """Parses player commands and runs them against a session."""

    def __init__(self, session: "GameSession"):
        self.session = session

    @property
    def catalog(self):
        return self.session.catalog

    def execute(self, command: str) -> CommandResponse:
        response = CommandResponse()
        parts = command.strip().split()
        if not parts:
            return response

        cmd = parts[0].lower()
        args = parts[1:]

        handler = getattr(self, f"_cmd_{cmd}", None)
        if handler is None:
            alias = fuzzy_match(cmd, {name: name for name, _ in _COMMAND_NAMES}, threshold=80)
            handler = getattr(self, f"_cmd_{alias}", None) if alias else None

        if handler is None:
            response.add(f"[red]Unknown command: {cmd}[/red] [dim](type 'help')[/dim]")
            return response

        handler(args, response)
        return response

    # ===== Helpers =====

    def _report(self, result: TransitionResult, response: CommandResponse) -> None:
        response.result = result
        if result.ok:
            if result.message:
                response.add(f"[green]{result.message}[/green]")
        else:
            response.add(f"[red]{result.message}[/red]")

        for event in result.events:
            if event.visible_to_player and event.event_type not in _ECHOED_BY_MESSAGE:
                response.add(f"[yellow]⚡[/yellow] {event.description}")

        if result.player_died:
            response.add("[bold red]You died![/bold red] Type 'restart' to try again.")

    def _dead(self, response: CommandResponse) -> bool:
        if self.session.is_dead:
            response.add("[red]You are dead.[/red] Type 'restart' to try again.")
            return True
        return False

    def _resolve(self, query: str, choices: dict[str, str], what: str, response: CommandResponse) -> Optional[str]:
        match = fuzzy_match(query, choices)
        if match is None:
            response.add(f"[red]Unknown {what}: {query}[/red]")
            if choices:
                response.add(f"[yellow]Available: {', '.join(choices.values())}[/yellow]")
        return match

    # ===== Actions =====

    def _cmd_collect(self, args: list[str], response: CommandResponse) -> None:
        if self._dead(response):
            return
        if not args:
            response.add("[red]Usage: collect <resource>[/red]")
            return
        available = queries.available_resources(self.catalog, self.session.state.biome)
        resource_id = self._resolve(" ".join(args), {r.id: r.name for r in available}, "resource here", response)
        if resource_id:
            self._report(self.session.collect(resource_id), response)

    def _cmd_craft(self, args: list[str], response: CommandResponse) -> None:
        if self._dead(response):
            return
        if not args:
            response.add("[red]Usage: craft <recipe>[/red]")
            return
        recipes = queries.unlocked_recipes(self.session.state, self.catalog)
        recipe_id = self._resolve(" ".join(args), {r.id: r.name for r in recipes}, "recipe", response)
        if recipe_id:
            self._report(self.session.craft(recipe_id), response)

    def _cmd_use(self, args: list[str], response: CommandResponse) -> None:
        if self._dead(response):
            return
        if not args:
            response.add("[red]Usage: use <item>[/red]")
            return
        entry_id = self._resolve(" ".join(args), self._inventory_choices(), "inventory item", response)
        if entry_id:
            self._report(self.session.use(entry_id), response)

    def _cmd_drop(self, args: list[str], response: CommandResponse) -> None:
        if not args:
            response.add("[red]Usage: drop <item> [n][/red]")
            return
        amount = 1
        if len(args) > 1 and args[-1].isdigit():
            amount = int(args[-1])
            args = args[:-1]
        if amount < 1:
            response.add("[red]Amount must be at least 1[/red]")
            return
        entry_id = self._resolve(" ".join(args), self._inventory_choices(), "inventory item", response)
        if entry_id:
            self._report(self.session.drop(entry_id, amount), response)

    def _cmd_travel(self, args: list[str], response: CommandResponse) -> None:
        if self._dead(response):
            return
        if not args:
            response.add("[red]Usage: travel <forest|desert|mountains>[/red]")
            return
        biome = self._resolve(" ".join(args), {b.value: b.value.capitalize() for b in Biome}, "biome", response)
        if biome:
            self._report(self.session.travel(biome), response)

    def _cmd_wait(self, args: list[str], response: CommandResponse) -> None:
        if self._dead(response):
            return
        minutes = 10
        if args:
            try:
                minutes = int(args[0])
            except ValueError:
                response.add("[red]Minutes must be a number[/red]")
                return
        if not 1 <= minutes <= 24 * 60:
            response.add("[red]You can wait between 1 minute and 24 hours[/red]")
            return
        result = self.session.wait(minutes)
        response.add(f"[dim]Time passes... {time_line(self.session)}[/dim]")
        self._report(result, response)

    # ===== Views =====

    def _cmd_status(self, args: list[str], response: CommandResponse) -> None:
        response.add(time_line(self.session))
        response.add(stat_line(self.session))

    def _cmd_inventory(self, args: list[str], response: CommandResponse) -> None:
        tab = args[0].lower() if args else "all"
        if tab not in queries.INVENTORY_TABS:
            response.add(f"[red]Unknown tab: {tab}[/red] [dim](all, resources, items)[/dim]")
            return
        entries = queries.filter_inventory(self.session.state, tab)
        if not entries:
            response.add("[dim]No items in inventory. Collect resources in the world.[/dim]")
            return
        for entry in entries:
            icon = self.catalog.icon(entry.id)
            kind = "[dim](resource)[/dim]" if entry.kind == "resource" else ""
            response.add(f"{icon} [bold]{self.catalog.display_name(entry.id)}[/bold] x{entry.quantity} {kind}".rstrip())

    def _cmd_recipes(self, args: list[str], response: CommandResponse) -> None:
        state = self.session.state
        category = args[0].lower() if args else queries.ALL_CATEGORY
        categories = queries.categories_present(state, self.catalog)
        if category not in categories:
            response.add(f"[red]Unknown category: {category}[/red] [dim]({', '.join(sorted(categories))})[/dim]")
            return
        for recipe in queries.recipes_in_category(state, self.catalog, category):
            mark = "[green]✓[/green]" if queries.craftable(recipe, state) else "[red]✗[/red]"
            needs = ", ".join(
                f"{self.catalog.display_name(i.id)} {state.quantity_of(i.id)}/{i.quantity}" for i in recipe.ingredients
            )
            response.add(f"{mark} [bold]{recipe.name}[/bold] [dim]({recipe.id})[/dim]: {needs}")

    def _cmd_resources(self, args: list[str], response: CommandResponse) -> None:
        for resource in queries.available_resources(self.catalog, self.session.state.biome):
            response.add(
                f"{resource.icon} [bold]{resource.name}[/bold] {queries.rarity_stars(resource.rarity)} "
                f"[dim]energy {resource.energy_cost:g}[/dim]"
            )

    def _cmd_events(self, args: list[str], response: CommandResponse) -> None:
        log = self.session.event_log
        if not args:
            response.add(log.summary(EVENT_LIST_LIMIT))
            return
        if len(args) == 1 and args[0].isdigit():
            response.add(log.summary(int(args[0])))
            return

        query = " ".join(args).lower()
        if query in EVENT_FILTERS:
            matches = log.get_by_type(EVENT_FILTERS[query], visible_only=True)
        else:
            matches = log.search(query)

        if not matches:
            response.add(f"[dim]No events matching '{query}'[/dim]")
            return
        for event in matches[-EVENT_LIST_LIMIT:]:
            response.add(event.summary())

    # ===== System =====

    def _cmd_restart(self, args: list[str], response: CommandResponse) -> None:
        self.session.reset()
        response.add("[green]A new day, a new life.[/green]")
        response.add(time_line(self.session))

    def _cmd_help(self, args: list[str], response: CommandResponse) -> None:
        for cmd, desc in HELP_ROWS:
            response.add(f"[cyan]{cmd}[/cyan] - {desc}")

    def _cmd_quit(self, args: list[str], response: CommandResponse) -> None:
        response.quit = True

    _cmd_exit = _cmd_quit
    _cmd_inv = _cmd_inventory

    def _inventory_choices(self) -> dict[str, str]:
        return {e.id: self.catalog.display_name(e.id) for e in self.session.state.inventory}


_COMMAND_NAMES = [(row[0].split()[0], row[1]) for row in HELP_ROWS]
