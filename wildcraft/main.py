"""Main entry point - REPL interface for the game."""

from __future__ import annotations
import argparse
import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.patch_stdout import patch_stdout

from wildcraft.commands import HELP_ROWS, CommandProcessor, stat_line, time_line
from wildcraft.config import Settings, configure_logging, load_settings
from wildcraft.data import default_catalog
from wildcraft.systems.session import GameSession
from wildcraft.systems.ticker import Ticker


console = Console()
logger = logging.getLogger(__name__)


def print_help() -> None:
    """Print help information."""
    table = Table(title="Commands", show_header=True, header_style="bold magenta")
    table.add_column("Command", style="cyan")
    table.add_column("Description")

    for cmd, desc in HELP_ROWS:
        table.add_row(cmd, desc)

    console.print(table)


def on_death(session: GameSession, result) -> None:
    """Death notice; restarting is left to the player unless auto-restart is on."""
    message = "You couldn't survive the harsh wilderness."
    if session.auto_restart:
        message += "\n\n[dim]Starting over...[/dim]"
    else:
        message += "\n\n[dim]Type 'restart' to try again.[/dim]"
    console.print(Panel(message, title="You died!", border_style="red"))


def run_repl(settings: Settings, realtime: bool = True) -> None:
    """Run the prompt loop, with time passing in the background if *realtime*."""
    console.print(Panel(
        "[bold green]Wildcraft[/bold green]\n"
        "[dim]Gather, craft, and survive the wilderness[/dim]",
        border_style="green",
    ))

    settings.history_dir.mkdir(parents=True, exist_ok=True)
    prompt = PromptSession(
        history=FileHistory(str(settings.history_dir / "command_history")),
        auto_suggest=AutoSuggestFromHistory(),
    )

    session = GameSession(default_catalog(), settings=settings)
    session.on_death(on_death)
    processor = CommandProcessor(session)

    ticker: Optional[Ticker] = None
    if realtime:
        ticker = Ticker(session, interval=settings.tick_seconds, minutes=settings.tick_minutes)
        ticker.start()

    console.print(time_line(session))
    console.print(stat_line(session))
    console.print("\n[dim]Type 'help' for commands[/dim]\n")

    # Ticker output lands above the prompt instead of through it
    try:
        with patch_stdout():
            while True:
                try:
                    command = prompt.prompt("> ")

                    if not command.strip():
                        continue

                    if command.strip().lower() == "help":
                        print_help()
                        continue

                    response = processor.execute(command)
                    for line in response.lines:
                        console.print(line)

                    if response.quit:
                        console.print("[dim]You leave the wilderness behind.[/dim]")
                        break

                except KeyboardInterrupt:
                    console.print("\n[dim]Type 'quit' to exit[/dim]")

                except EOFError:
                    console.print("\n[dim]You leave the wilderness behind.[/dim]")
                    break
    finally:
        if ticker:
            ticker.stop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wildcraft", description="Survival crafting simulation")
    parser.add_argument("--tui", action="store_true", help="Use the full-screen interface")
    parser.add_argument("--paused", action="store_true", help="Only advance time through actions")
    parser.add_argument("--env-file", default=None, help="Read settings from this .env file")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(settings.log_level)
    logger.debug("Settings: %s", settings)

    if args.tui:
        from wildcraft.tui.app import WildcraftApp

        app = WildcraftApp(GameSession(default_catalog(), settings=settings), realtime=not args.paused)
        app.run()
    else:
        run_repl(settings, realtime=not args.paused)


if __name__ == "__main__":
    main()
