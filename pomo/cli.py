"""pomo CLI -- a pomodoro countdown for the terminal."""

from __future__ import annotations

from typing import Optional

import typer

from pomo import config as cfg
from pomo import display, timer
from pomo.engine import CountdownEngine
from pomo.models import PhaseDurations

app = typer.Typer(
    name="pomo",
    help="Focus, short break, focus, ... long break. One countdown at a time.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Write logs to this file (overrides config)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
) -> None:
    """Start the countdown. Keys: s start/stop, r reset, q quit."""
    if ctx.invoked_subcommand is not None:
        return

    settings = cfg.load_config()
    level = "DEBUG" if verbose else settings.log_level
    cfg.setup_logging(log_file or settings.log_file, level)

    engine = CountdownEngine(PhaseDurations())
    try:
        timer.run_pomodoro(engine, settings.keys)
    except Exception as err:
        display.print_error(f"Uh oh, we encountered an error: {err}")
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Key bindings & configuration
# ---------------------------------------------------------------------------


@app.command()
def keys() -> None:
    """Show the key bindings."""
    display.print_keys(cfg.load_config().keys)


@app.command()
def config(
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Set the log file path"),
    reset: bool = typer.Option(False, "--reset", help="Reset to the default config"),
    show: bool = typer.Option(False, "--show", help="Show current config"),
) -> None:
    """Inspect or change the configuration file."""
    if log_file:
        result = cfg.set_log_file(log_file)
        display.print_success(f"Logs will be written to: {result.log_file}")
    elif reset:
        cfg.reset_config()
        display.print_success("Reset to default config.")
    elif show:
        current = cfg.load_config()
        display.print_info(f"Config file: {cfg.config_path()}")
        display.print_info(f"Log file: {current.log_file or 'none'}")
        display.print_info(f"Log level: {current.log_level}")
        display.print_keys(current.keys)
    else:
        display.print_info("Use --log-file, --reset, or --show.")
