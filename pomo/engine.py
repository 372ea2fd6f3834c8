"""Countdown engine: the pomodoro phase rotation and its counters.

The engine owns a single :class:`~pomo.models.CountdownState` and replaces it
with a new frozen value on every event. It never sleeps, reads the clock or
touches the terminal; ticks and commands are delivered by the caller one at a
time (see :mod:`pomo.timer`).
"""

from __future__ import annotations

import logging

from pomo.models import Command, CountdownState, Phase, PhaseDurations

log = logging.getLogger(__name__)

# Focus bouts completed before a long break is earned; the check happens
# after the increment, so the long break follows the 4th bout.
LONG_BREAK_AFTER = 3


class CountdownEngine:
    """Single pomodoro countdown with focus/short break/long break rotation."""

    def __init__(self, durations: PhaseDurations | None = None) -> None:
        self._durations = durations if durations is not None else PhaseDurations()
        self._state = CountdownState(
            phase=Phase.FOCUS,
            remaining=self._durations.for_phase(Phase.FOCUS),
        )
        self._quitting = False

    @property
    def state(self) -> CountdownState:
        return self._state

    @property
    def durations(self) -> PhaseDurations:
        return self._durations

    @property
    def quitting(self) -> bool:
        return self._quitting

    def tick(self) -> CountdownState:
        """Advance a running countdown by one second, expiring it at zero."""
        if self._quitting or not self._state.running:
            return self._state

        remaining = max(self._state.remaining - 1, 0)
        if remaining == 0:
            self._state = self._state.model_copy(update={"remaining": 0})
            return self.expire()

        self._state = self._state.model_copy(update={"remaining": remaining})
        return self._state

    def expire(self) -> CountdownState:
        """Move to the next phase and stop the countdown."""
        current = self._state
        bouts = current.completed_focus_bouts
        total = current.total_completed

        if current.phase is Phase.FOCUS:
            bouts += 1
            total += 1
            if bouts > LONG_BREAK_AFTER:
                next_phase = Phase.LONG_BREAK
                bouts = 0
            else:
                next_phase = Phase.SHORT_BREAK
        else:
            next_phase = Phase.FOCUS

        self._state = current.model_copy(
            update={
                "phase": next_phase,
                "remaining": self._durations.for_phase(next_phase),
                "running": False,
                "completed_focus_bouts": bouts,
                "total_completed": total,
            }
        )
        log.info(
            "%s finished, next up: %s (completed: %d)",
            current.phase.value, next_phase.value, total,
        )
        return self._state

    def toggle(self) -> CountdownState:
        """Start a stopped countdown or stop a running one."""
        if self._quitting:
            return self._state
        self._state = self._state.model_copy(update={"running": not self._state.running})
        log.debug("Countdown %s at %ds", "started" if self._state.running else "stopped",
                  self._state.remaining)
        return self._state

    def reset(self) -> CountdownState:
        """Restart the current phase's countdown without touching anything else."""
        if self._quitting:
            return self._state
        self._state = self._state.model_copy(
            update={"remaining": self._durations.for_phase(self._state.phase)}
        )
        log.debug("Countdown reset to %ds", self._state.remaining)
        return self._state

    def quit(self) -> CountdownState:
        """Stop accepting ticks and commands. The last state stays as it is."""
        if not self._quitting:
            log.debug("Quit requested")
        self._quitting = True
        return self._state

    def handle(self, command: Command) -> CountdownState:
        """Apply a keyboard command."""
        if command is Command.START_STOP:
            return self.toggle()
        if command is Command.RESET:
            return self.reset()
        return self.quit()
