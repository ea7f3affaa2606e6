"""Command-line interface for colortasks."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import colors
from .config import TaskListConfig, discover_config, select_config_path
from .exceptions import ColorTasksError, ValidationError
from .logger import setup_logger
from .models import ClearOutcome, Task
from .state import AppState

app = typer.Typer(
    name="colortasks",
    help="A color-tagged task list for the terminal",
    add_completion=False,
)

SESSION_HELP = """Commands:
  add            add a task (prompts for text, time and color)
  list           show the tasks
  toggle N       mark task N done / not done
  rm N           delete task N
  clear          delete every task (asks first)
  help           show this help
  quit           leave the session (tasks are not saved)"""


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: colortasks.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for colortasks commands."""
    setup_logger(verbose)
    select_config_path(config)


def _load_config() -> TaskListConfig:
    try:
        return discover_config()
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _swatch(text: str, background: str, foreground: str) -> str:
    return typer.style(
        text, fg=colors.hex_to_rgb(foreground), bg=colors.hex_to_rgb(background)
    )


@app.command()
def hue(
    position: Annotated[float, typer.Argument(help="Slider position, 0 to --slider-max")],
    slider_max: Annotated[
        float | None,
        typer.Option("--slider-max", help="Slider track length (default from config)"),
    ] = None,
) -> None:
    """Convert a hue slider position to a background color and its text color."""
    track = slider_max if slider_max is not None else _load_config().slider_max
    if track <= 0:
        typer.echo("Error: --slider-max must be positive", err=True)
        raise typer.Exit(1)
    if not 0 <= position <= track:
        typer.echo(f"Error: position must be between 0 and {track:g}", err=True)
        raise typer.Exit(1)
    background = colors.hue_to_hex(position, track)
    typer.echo(f"{background} {colors.contrast_text_color(background)}")


@app.command()
def hsl(
    hue_degrees: Annotated[float, typer.Argument(metavar="HUE", help="Hue in degrees")],
    saturation: Annotated[
        float, typer.Option("--saturation", "-s", min=0, max=100, help="Saturation %")
    ] = colors.SLIDER_SATURATION,
    lightness: Annotated[
        float, typer.Option("--lightness", "-l", min=0, max=100, help="Lightness %")
    ] = colors.SLIDER_LIGHTNESS,
) -> None:
    """Convert an HSL color to hex and print its text color."""
    background = colors.hsl_to_hex(hue_degrees, saturation, lightness)
    typer.echo(f"{background} {colors.contrast_text_color(background)}")


@app.command()
def contrast(
    background: Annotated[str, typer.Argument(help="Background color, #RRGGBB")],
) -> None:
    """Print the text color (black or white) readable on a background."""
    try:
        typer.echo(colors.contrast_text_color(background))
    except ColorTasksError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def palette() -> None:
    """Show the configured palette with the text color used on each entry."""
    config = _load_config()
    for i, (background, foreground) in enumerate(colors.palette_swatches(config.palette), 1):
        typer.echo(f"{i}. {_swatch(f' {background} ', background, foreground)} text {foreground}")


@app.command()
def session() -> None:
    """Run an interactive task list. Tasks live only as long as the session."""
    state = AppState(config=_load_config())
    typer.echo(SESSION_HELP)
    while True:
        try:
            line = typer.prompt("colortasks", prompt_suffix="> ", default="", show_default=False)
        except typer.Abort:
            typer.echo()
            break
        words = line.split()
        if not words:
            continue
        command, args = words[0].lower(), words[1:]
        if command in ("quit", "exit", "q"):
            break
        if command == "help":
            typer.echo(SESSION_HELP)
        elif command == "list":
            _print_tasks(state)
        elif command == "add":
            _add_interactive(state)
        elif command in ("toggle", "rm"):
            task = _task_from_args(state, args)
            if task is None:
                continue
            if command == "toggle":
                state.toggle(task.id)
            else:
                state.remove(task.id)
            _print_tasks(state)
        elif command == "clear":
            _clear_interactive(state)
        else:
            typer.echo(f"Unknown command: {command} (type 'help')", err=True)


def _print_tasks(state: AppState) -> None:
    tasks = state.visible_tasks()
    if not tasks:
        typer.echo("(no tasks)")
        return
    typer.echo(f"{state.store.pending_count} to do, {state.store.completed_count} done")
    for i, task in enumerate(tasks, 1):
        typer.echo(f"{i}. {_swatch(f' {task} ', task.color, task.text_color)}")


def _task_from_args(state: AppState, args: list[str]) -> Task | None:
    tasks = state.visible_tasks()
    if len(args) != 1 or not args[0].isdigit() or not 1 <= int(args[0]) <= len(tasks):
        typer.echo(f"Expected a task number between 1 and {len(tasks)}", err=True)
        return None
    return tasks[int(args[0]) - 1]


def _apply_color_choice(state: AppState, choice: str) -> None:
    """Apply one of: palette number, 'hue:DEG', 'slider:POS' or '#RRGGBB'."""
    choice = choice.strip()
    if not choice:
        return
    if choice.isdigit():
        index = int(choice) - 1
        if not 0 <= index < len(state.config.palette):
            raise ValueError(f"Palette has {len(state.config.palette)} colors")
        state.pick_color(state.config.palette[index])
    elif choice.startswith("hue:"):
        state.pick_hue(float(choice[len("hue:") :]))
    elif choice.startswith("slider:"):
        state.slide_hue(float(choice[len("slider:") :]))
    else:
        state.pick_color(choice)


def _add_interactive(state: AppState) -> None:
    state.open_form()
    state.type_text(typer.prompt("Task", default="", show_default=False))
    state.type_hours(typer.prompt("Hours (HH)", default="", show_default=False))
    state.type_minutes(typer.prompt("Minutes (MM)", default="", show_default=False))
    try:
        typer.echo(f"Time: {state.confirm_time()}")
    except ValidationError as e:
        typer.echo(str(e), err=True)
        return

    choice = typer.prompt(
        f"Color [1-{len(state.config.palette)}, hue:DEG, slider:POS, #RRGGBB]",
        default="",
        show_default=False,
    )
    try:
        _apply_color_choice(state, choice)
    except ValueError as e:
        typer.echo(f"Invalid color: {e}", err=True)
        return

    try:
        task = state.submit()
    except ValidationError as e:
        typer.echo(str(e), err=True)
        return
    typer.echo(f"Added {_swatch(f' {task} ', task.color, task.text_color)}")


def _clear_interactive(state: AppState) -> None:
    outcome = state.request_clear()
    if outcome is ClearOutcome.NOTHING_TO_CLEAR:
        typer.echo(outcome.notice)
        return
    if not typer.confirm("Delete all tasks?", default=False):
        return
    typer.echo(state.confirm_clear().notice)


if __name__ == "__main__":
    app()
