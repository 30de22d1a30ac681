"""Main Textual app - split screen TUI for the survival game."""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, Container
from textual.timer import Timer
from textual.widgets import Input, Header, Footer

from wildcraft.commands import CommandProcessor
from wildcraft.models.events import EventType
from wildcraft.tui.panels import InventoryPanel, MessageLog, StatsPanel

if TYPE_CHECKING:
    from wildcraft.models.outcomes import TransitionResult
    from wildcraft.systems.session import GameSession


class WildcraftApp(App):
    """The main TUI application."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-container {
        height: 1fr;
    }

    #left-column {
        width: 2fr;
    }

    #stats-container {
        height: auto;
        border: solid $primary;
        border-title-color: $text;
    }

    #log-container {
        height: 1fr;
        border: solid $primary;
        border-title-color: $text;
    }

    #inventory-container {
        width: 1fr;
        border: solid $secondary;
        border-title-color: $text;
    }

    #input-area {
        height: 3;
        dock: bottom;
        padding: 0 1;
    }

    #command-input {
        width: 100%;
    }
    """

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("f2", "toggle_pause", "Pause"),
        ("escape", "focus_input", "Focus Input"),
    ]

    TITLE = "Wildcraft"

    def __init__(self, session: "GameSession", realtime: bool = True, **kwargs):
        super().__init__(**kwargs)
        self.session = session
        self.processor = CommandProcessor(session)
        self.realtime = realtime
        self._timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()

        with Horizontal(id="main-container"):
            with Vertical(id="left-column"):
                with Container(id="stats-container"):
                    yield StatsPanel(self.session, id="stats")
                with Container(id="log-container"):
                    yield MessageLog(id="log")

            with Container(id="inventory-container"):
                yield InventoryPanel(self.session, id="inventory")

        with Container(id="input-area"):
            yield Input(placeholder="Enter command... (help)", id="command-input")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app starts."""
        self.query_one("#stats-container").border_title = "Survivor"
        self.query_one("#log-container").border_title = "Wilderness"
        self.query_one("#inventory-container").border_title = "Pack"
        self.query_one("#command-input").focus()

        log = self.query_one("#log", MessageLog)
        log.add_system("You wake up in the forest. Type 'help' for commands.")

        # Every 3 real seconds is one game minute unless configured otherwise
        settings = self.session.settings
        interval = settings.tick_seconds if settings else 3.0
        self._timer = self.set_interval(interval, self._on_tick, pause=not self.realtime)

        self._refresh_panels()

    def _on_tick(self) -> None:
        if self.session.is_dead:
            return
        result = self.session.tick()
        self._show_events(result)
        self._refresh_panels()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle command input."""
        command = event.value.strip()
        if not command:
            return

        event.input.value = ""
        log = self.query_one("#log", MessageLog)
        log.add_player(command)

        response = self.processor.execute(command)
        for line in response.lines:
            log.add_line(line)

        if response.quit:
            self.exit()
            return

        self._refresh_panels()

    def _show_events(self, result: "TransitionResult") -> None:
        log = self.query_one("#log", MessageLog)
        for event in result.events:
            if not event.visible_to_player:
                continue
            if event.event_type == EventType.PLAYER_DIED:
                log.add_death()
            else:
                log.add_event(event.description)

    def _refresh_panels(self) -> None:
        self.query_one("#stats", StatsPanel).refresh_display()
        self.query_one("#inventory", InventoryPanel).refresh_display()

    def action_toggle_pause(self) -> None:
        """Stop or resume the passage of time."""
        log = self.query_one("#log", MessageLog)
        if self.realtime:
            self._timer.pause()
            log.add_system("Time stands still.")
        else:
            self._timer.resume()
            log.add_system("Time flows again.")
        self.realtime = not self.realtime

    def action_focus_input(self) -> None:
        """Focus the input field."""
        self.query_one("#command-input").focus()
