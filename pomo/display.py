"""Rich terminal formatting helpers."""

from __future__ import annotations

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from pomo.models import CountdownState, KeyMap, Phase

console = Console()

_ACTIVE_MODE_STYLE = "underline on #0000FF"
_HELP_KEY_STYLE = "#909090"
_HELP_DESC_STYLE = "#626262"
_HELP_SEPARATOR = " • "

# Control characters shown by name in the help line
_KEY_NAMES: dict[str, str] = {
    "\x03": "ctrl+c",
    " ": "space",
    "\r": "enter",
    "\n": "enter",
}


def format_remaining(seconds: int) -> str:
    """Format a number of seconds as zero-padded MM:SS."""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def key_label(key: str) -> str:
    """Human-readable name for a bound key."""
    return _KEY_NAMES.get(key, key)


def render_modes(state: CountdownState) -> Text:
    """The mode row, with the current phase highlighted."""
    text = Text("Mode: ")
    for phase in Phase:
        style = _ACTIVE_MODE_STYLE if phase is state.phase else ""
        text.append(phase.value, style=style)
        text.append(" ")
    return text


def render_help(state: CountdownState, keys: KeyMap) -> Text:
    """Short help line. Offers stop while running and start otherwise."""
    entries = [
        (keys.start_stop[0], "stop" if state.running else "start"),
        (keys.reset[0], "reset"),
        (keys.quit[0], "quit"),
    ]
    text = Text()
    for i, (key, desc) in enumerate(entries):
        if i:
            text.append(_HELP_SEPARATOR, style=_HELP_DESC_STYLE)
        text.append(key_label(key), style=_HELP_KEY_STYLE)
        text.append(" ")
        text.append(desc, style=_HELP_DESC_STYLE)
    return text


def render_state(state: CountdownState, keys: KeyMap, quitting: bool = False) -> Panel:
    """The whole timer view in a rounded panel."""
    lines: list[Text] = [render_modes(state), Text("")]
    if not quitting:
        lines.append(Text(f"Time left {format_remaining(state.remaining)}"))
    lines.append(Text(f"Completed: {state.total_completed}"))
    lines.append(Text(""))
    lines.append(render_help(state, keys))
    return Panel(Group(*lines), box=box.ROUNDED, expand=False)


def print_keys(keys: KeyMap) -> None:
    """Print the key bindings."""
    for desc, bound in (
        ("start / stop", keys.start_stop),
        ("reset", keys.reset),
        ("quit", keys.quit),
    ):
        labels = escape(", ".join(key_label(k) for k in bound))
        console.print(f"[bold]{labels}[/bold]  {desc}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(message, style="red", markup=False)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]{message}[/blue]")
