"""TUI panel components - stats, inventory and the message log."""

from __future__ import annotations
from typing import TYPE_CHECKING

from textual.widgets import Static, RichLog
from rich.panel import Panel

from wildcraft.systems import queries
from wildcraft.systems.time_system import format_clock

if TYPE_CHECKING:
    from wildcraft.systems.session import GameSession


BAR_WIDTH = 20

_STAT_COLORS = {"health": "red", "hunger": "yellow", "thirst": "cyan", "energy": "green"}


def stat_bar(value: float, width: int = BAR_WIDTH) -> str:
    filled = round(value / 100 * width)
    return "█" * filled + "░" * (width - filled)


class StatsPanel(Static):
    """Top-left panel with the four stat bars and the clock."""

    DEFAULT_CSS = """
    StatsPanel {
        width: 100%;
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(self, session: "GameSession" = None, **kwargs):
        super().__init__(**kwargs)
        self.session = session

    def refresh_display(self) -> None:
        if not self.session:
            self.update("[dim]No game[/dim]")
            return

        state = self.session.state
        clock = state.clock
        icon = "☀" if clock.is_day_time else "☾"
        lines = [
            f"[bold]{icon} {format_clock(clock)}[/bold]",
            f"[dim]Biome:[/dim] {state.biome.value.capitalize()}",
            "",
        ]

        for bar in queries.stat_bars(state):
            color = _STAT_COLORS[bar.stat.value]
            value_color = {"ok": "white", "low": "yellow", "critical": "red"}[bar.level]
            lines.append(
                f"{bar.stat.value.capitalize():<7} [{color}]{stat_bar(bar.value)}[/{color}] "
                f"[{value_color}]{bar.value:g}[/{value_color}]"
            )

        self.update("\n".join(lines))


class InventoryPanel(Static):
    """Right panel listing inventory stacks and craftable recipes."""

    DEFAULT_CSS = """
    InventoryPanel {
        width: 100%;
        height: 100%;
        padding: 0 1;
    }
    """

    def __init__(self, session: "GameSession" = None, **kwargs):
        super().__init__(**kwargs)
        self.session = session

    def refresh_display(self) -> None:
        if not self.session:
            self.update("[dim]No game[/dim]")
            return

        state = self.session.state
        catalog = self.session.catalog
        lines = ["[bold]─ INVENTORY ─[/bold]"]

        if state.inventory:
            for entry in state.inventory:
                lines.append(f"{catalog.icon(entry.id)} {catalog.display_name(entry.id)} x{entry.quantity}")
        else:
            lines.append("[dim]Empty. Collect resources in the world.[/dim]")

        lines.append("")
        lines.append("[bold]─ CRAFTABLE ─[/bold]")
        craftable = [r for r in queries.unlocked_recipes(state, catalog) if queries.craftable(r, state)]
        if craftable:
            for recipe in craftable:
                lines.append(f"[green]✓[/green] {recipe.name}")
        else:
            lines.append("[dim]Nothing yet[/dim]")

        lines.append("")
        lines.append("[bold]─ HERE ─[/bold]")
        for resource in queries.available_resources(catalog, state.biome):
            stars = queries.rarity_stars(resource.rarity)
            lines.append(f"{resource.icon} {resource.name} [yellow]{stars}[/yellow] [dim]({resource.energy_cost:g})[/dim]")

        self.update("\n".join(lines))


class MessageLog(RichLog):
    """Left panel with command results and world events."""

    DEFAULT_CSS = """
    MessageLog {
        width: 100%;
        height: 100%;
        border: none;
        scrollbar-gutter: stable;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(highlight=True, markup=True, wrap=True, **kwargs)

    def add_player(self, text: str) -> None:
        """Add player input for display."""
        self.write(f"[bold green]>[/bold green] {text}")

    def add_line(self, text: str) -> None:
        self.write(text)

    def add_system(self, text: str) -> None:
        """Add system message."""
        self.write(f"[dim]{text}[/dim]")

    def add_event(self, text: str) -> None:
        """Add event notification."""
        self.write(f"[yellow]⚡[/yellow] {text}")

    def add_death(self) -> None:
        self.write(Panel(
            "You couldn't survive the harsh wilderness.\n\n[dim]Type 'restart' to try again.[/dim]",
            title="You died!",
            border_style="red",
            padding=(0, 1),
        ))
