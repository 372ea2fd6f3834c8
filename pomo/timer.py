"""Tick source and the interactive countdown loop."""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live

from pomo.display import console as default_console
from pomo.display import render_state
from pomo.engine import CountdownEngine
from pomo.keyboard import KeyboardHandler
from pomo.models import Command, CountdownState, KeyMap

log = logging.getLogger(__name__)

TICK_INTERVAL = 1.0
POLL_INTERVAL = 0.1


class Ticker:
    """Counts whole tick intervals elapsed on a monotonic clock."""

    def __init__(
        self,
        interval: float = TICK_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be greater than zero")
        self.interval = interval
        self._clock = clock
        self._anchor = clock()

    def restart(self) -> None:
        """Start counting from now; the next tick is one interval away."""
        self._anchor = self._clock()

    def due(self) -> int:
        """Number of ticks elapsed since the last call (or restart)."""
        elapsed = self._clock() - self._anchor
        # rounding absorbs float error such as 1.9 - 0.9 == 0.9999999999999999
        count = math.floor(round(elapsed / self.interval, 9))
        if count <= 0:
            return 0
        self._anchor += count * self.interval
        return count


def _apply_ticks(engine: CountdownEngine, ticker: Ticker) -> bool:
    """Deliver pending ticks one at a time. Returns True if any were applied."""
    applied = False
    for _ in range(ticker.due()):
        if not engine.state.running:
            break
        engine.tick()
        applied = True
    return applied


def run_pomodoro(
    engine: CountdownEngine,
    keys: Optional[KeyMap] = None,
    keyboard_factory: Callable[[], KeyboardHandler] = KeyboardHandler,
    clock: Callable[[], float] = time.monotonic,
    poll_interval: float = POLL_INTERVAL,
    console: Optional[Console] = None,
) -> CountdownState:
    """Run the countdown until the quit command. Returns the last state.

    Keys and ticks are handled on this thread, one event at a time, and the
    view is redrawn after each of them.
    """
    keys = keys if keys is not None else KeyMap()
    console = console if console is not None else default_console
    ticker = Ticker(clock=clock)

    with keyboard_factory() as keyboard, Live(
        render_state(engine.state, keys),
        console=console,
        auto_refresh=False,
    ) as live:
        try:
            while not engine.quitting:
                changed = False
                key = keyboard.get_key(poll_interval)
                command = keys.command_for(key) if key is not None else None
                if command is not None:
                    was_running = engine.state.running
                    engine.handle(command)
                    if command is Command.START_STOP and engine.state.running and not was_running:
                        ticker.restart()
                    changed = True

                if engine.state.running and not engine.quitting:
                    changed = _apply_ticks(engine, ticker) or changed

                if changed:
                    live.update(render_state(engine.state, keys), refresh=True)
        except KeyboardInterrupt:
            log.debug("Interrupted")
            engine.quit()

        live.update(render_state(engine.state, keys, quitting=True), refresh=True)

    return engine.state
