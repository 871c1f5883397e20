"""CLI for the study tracker.

Running without a subcommand opens the interactive menu. The add, log,
delete and view subcommands run a single action and exit, which is handy
for scripting.
"""

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from cli.display import format_percent, goal_choices, progress_bar
from study_tracker.config.settings import settings
from study_tracker.core.logger import setup_logger
from study_tracker.goals import commands
from study_tracker.goals.commands import CommandResult, format_hours
from study_tracker.goals.errors import PersistenceError, ValidationError
from study_tracker.goals.store import GoalStore

T = TypeVar("T")

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="study-tracker",
    help="Study Tracker - weekly study-hour goals and logged sessions",
    add_completion=False,
)

ADD_GOAL = "Add a new goal"
LOG_SESSION = "Log a study session"
VIEW_PROGRESS = "View progress"
DELETE_GOAL = "Delete a goal"
EXIT = "Exit"
MENU_ACTIONS = [ADD_GOAL, LOG_SESSION, VIEW_PROGRESS, DELETE_GOAL, EXIT]

CONGRATULATIONS = "🎉 Congratulations! You've achieved your goal!"


def _setup_logging(debug: bool = False) -> None:
    """Set up logging from settings, forcing DEBUG when requested."""
    log_level = "DEBUG" if debug else settings.log_level
    setup_logger(level=log_level, log_file=settings.log_file)


def _fatal(e: PersistenceError) -> None:
    """Report an unusable data file and exit non-zero."""
    logger.exception(f"Data file error: {e}")
    console.print(f"[red]Error:[/red] {escape(str(e))}", style="bold red")
    raise typer.Exit(1) from e


# === Prompt helpers ===


def _ask(message: str, parse: Callable[[str], T]) -> T:
    """Prompt until ``parse`` accepts the answer, showing each rejection inline."""
    while True:
        raw = Prompt.ask(message, console=console)
        try:
            return parse(raw)
        except ValidationError as e:
            console.print(f"[red]>> {escape(str(e))}[/red]")


def _select(message: str, options: list[str]) -> int:
    """Show pre-numbered options and return the 1-based position picked."""
    for option in options:
        console.print(f"  {escape(option)}")
    choices = [str(index) for index in range(1, len(options) + 1)]
    return int(Prompt.ask(message, choices=choices, show_choices=False, console=console))


def _print_result(result: CommandResult, style: str = "green") -> None:
    """Print a command outcome; failed commands exit with code 1."""
    if not result.ok:
        console.print(f"[red]Error:[/red] {escape(result.message)}")
        raise typer.Exit(1)
    console.print(f"[{style}]{escape(result.message)}[/{style}]")
    if result.goal_completed:
        console.print(f"[blue]{CONGRATULATIONS}[/blue]")


# === Menu actions ===


def _add_goal_interactive(store: GoalStore) -> None:
    title = _ask("Enter your goal title", lambda raw: commands.check_title_available(store, raw))
    weekly_goal = _ask("Enter weekly study goal (hours)", commands.parse_weekly_goal)
    weeks = _ask("Enter duration of goal (weeks)", commands.parse_weeks)
    result = commands.add_goal(store, title, weekly_goal, weeks)
    if not result.ok:
        console.print(f"[red]>> {escape(result.message)}[/red]")
        return
    _print_result(result)


def _log_session_interactive(store: GoalStore) -> None:
    goals = store.list()
    if not goals:
        console.print("[yellow]No goals found. Add a goal first.[/yellow]")
        return

    position = _select("Select the goal to log progress", goal_choices(goals))
    hours = _ask("Enter hours studied", commands.parse_hours)
    result = commands.log_session(store, position, hours)
    if not result.ok:
        console.print(f"[red]>> {escape(result.message)}[/red]")
        return
    _print_result(result)


def _view_progress(store: GoalStore) -> None:
    goals = store.list()
    if not goals:
        console.print("[yellow]No goals found.[/yellow]")
        return

    for index, goal in enumerate(goals, start=1):
        percentage = store.progress_percent(goal)
        console.print(f"\n[cyan]{index}. {escape(goal.title)}[/cyan]")
        console.print(f"Weekly Goal: {format_hours(goal.weekly_goal)} hours")
        console.print(f"Total Goal: {format_hours(goal.total_goal)} hours")
        console.print(f"Progress: {format_hours(goal.progress)} hours ({format_percent(percentage)}%)")
        console.print(Text(progress_bar(percentage)))


def _delete_goal_interactive(store: GoalStore) -> None:
    goals = store.list()
    if not goals:
        console.print("[yellow]No goals found to delete.[/yellow]")
        return

    position = _select("Select the goal to delete", goal_choices(goals))
    result = commands.delete_goal(store, position)
    if not result.ok:
        console.print(f"[red]>> {escape(result.message)}[/red]")
        return
    _print_result(result, style="red")


MENU_HANDLERS: dict[str, Callable[[GoalStore], None]] = {
    ADD_GOAL: _add_goal_interactive,
    LOG_SESSION: _log_session_interactive,
    VIEW_PROGRESS: _view_progress,
    DELETE_GOAL: _delete_goal_interactive,
}


def run_menu(store: GoalStore) -> None:
    """Run the interactive menu until the user picks Exit."""
    console.print(
        Panel(
            Text("Study Tracker", style="bold cyan"),
            subtitle=escape(f"Data file: {store.path}"),
            border_style="cyan",
        )
    )

    while True:
        try:
            console.print()
            menu = [f"{index}. {action}" for index, action in enumerate(MENU_ACTIONS, start=1)]
            action = MENU_ACTIONS[_select("What do you want to do?", menu) - 1]
            if action == EXIT:
                console.print("[blue]Goodbye![/blue]")
                return
            MENU_HANDLERS[action](store)
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]Interrupted. Exiting...[/yellow]")
            return


# === Commands ===


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(None, "--data-file", "-f", help="Goals JSON file (default: STUDY_TRACKER_DATA_FILE or study-tracker.json)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Track weekly study-hour goals.

    With no subcommand, opens the interactive menu.
    """
    _setup_logging(debug=debug)
    store = GoalStore(data_file or settings.data_file)
    ctx.obj = store
    logger.debug(f"Using data file {store.path}")

    if ctx.invoked_subcommand is None:
        try:
            run_menu(store)
        except PersistenceError as e:
            _fatal(e)


@app.command()
def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Goal title"),
    weekly_goal: str = typer.Argument(..., help="Weekly study goal in hours"),
    weeks: str = typer.Argument(..., help="Duration of the goal in weeks"),
) -> None:
    """Add a new goal."""
    try:
        _print_result(commands.add_goal(ctx.obj, title, weekly_goal, weeks))
    except PersistenceError as e:
        _fatal(e)


@app.command()
def log(
    ctx: typer.Context,
    goal: str = typer.Argument(..., help="Goal position (as shown by view) or title"),
    hours: str = typer.Argument(..., help="Hours studied"),
) -> None:
    """Log a study session against a goal."""
    try:
        _print_result(commands.log_session(ctx.obj, goal, hours))
    except PersistenceError as e:
        _fatal(e)


@app.command()
def delete(
    ctx: typer.Context,
    goal: str = typer.Argument(..., help="Goal position (as shown by view) or title"),
) -> None:
    """Delete a goal."""
    try:
        _print_result(commands.delete_goal(ctx.obj, goal), style="red")
    except PersistenceError as e:
        _fatal(e)


@app.command()
def view(ctx: typer.Context) -> None:
    """Show progress for every goal."""
    try:
        _view_progress(ctx.obj)
    except PersistenceError as e:
        _fatal(e)


if __name__ == "__main__":
    app()
