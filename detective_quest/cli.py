"""Command-line interface for Detective Quest."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from detective_quest import __version__
from detective_quest.game import DetectiveQuestGame
from detective_quest.mansion import Room, build_mansion, find_room, iter_rooms
from detective_quest.player import HumanDetective
from detective_quest.rules import load_rules
from detective_quest.utils.logging import setup_logging

app = typer.Typer(
    help="Detective Quest - explore the mansion, collect clues and accuse the culprit",
    invoke_without_command=True,
)
console = Console()


def _play(log_path: Optional[Path], verbose: bool) -> None:
    log_file = setup_logging(log_path, verbose)
    logger = logging.getLogger(__name__)
    if log_file:
        logger.info(f"Logging to {log_file}")

    try:
        game = DetectiveQuestGame(detective=HumanDetective(console=console), console=console)
        game.play()
    except MemoryError:
        console.print("[red]Erro ao alocar memoria.[/red]")
        raise typer.Exit(1)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Investigacao interrompida.[/yellow]")
        raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    log_path: Optional[Path] = typer.Option(None, help="Directory for log files"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Play a game of Detective Quest (default when no command is given)."""
    ctx.obj = {"log_path": log_path, "verbose": verbose}
    if ctx.invoked_subcommand is None:
        _play(log_path, verbose)


@app.command()
def play(ctx: typer.Context):
    """Play a game of Detective Quest."""
    options = ctx.obj or {}
    _play(options.get("log_path"), options.get("verbose", False))


def _room_label(room: Room, side: str) -> str:
    where = f"{side}, sem saida" if room.is_leaf else side
    label = f"[bold]{escape(room.name)}[/bold] [dim]({where})[/dim]"
    if room.has_clue:
        label += f": {escape(room.clue)}"
    return label


@app.command("map")
def show_map(
    room: Optional[str] = typer.Option(None, "--room", "-r", help="Only show the wing starting at this room"),
):
    """Show the mansion layout and its clues."""
    root = build_mansion()
    if room is not None:
        start = find_room(root, room)
        if start is None:
            console.print(f"[red]Error: Unknown room '{escape(room)}'[/red]")
            raise typer.Exit(1)
        root = start

    tree = Tree(f"[bold]{escape(root.name)}[/bold]")
    # Pre-order: a room's branch always exists before its children are added
    branches = {id(root): tree}
    for current in iter_rooms(root):
        branch = branches[id(current)]
        for side, child in (("esquerda", current.left), ("direita", current.right)):
            if child is not None:
                branches[id(child)] = branch.add(_room_label(child, side))
    console.print(tree)


@app.command()
def suspects():
    """Show the suspects and the clue keywords that point at them."""
    book = load_rules()

    table = Table(title="Suspeitos")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Suspeito", style="cyan")
    table.add_column("Palavras-chave", style="magenta")

    for number, rule in enumerate(book.rules, start=1):
        table.add_row(str(number), rule.suspect, ", ".join(rule.keywords))

    console.print(table)
    console.print(f"\nPistas sem palavra-chave apontam para: [bold]{escape(book.unknown)}[/bold]")


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]Detective Quest[/bold] {__version__}")


if __name__ == "__main__":
    app()
