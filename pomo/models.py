"""Pydantic models for the countdown state, key bindings and config."""

from __future__ import annotations

import enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Phase(str, enum.Enum):
    """Countdown phases, in display order. Values are the display labels."""

    FOCUS = "focus"
    SHORT_BREAK = "short break"
    LONG_BREAK = "long break"


class Command(str, enum.Enum):
    """Commands the keyboard can send to the engine."""

    START_STOP = "start-or-stop"
    RESET = "reset"
    QUIT = "quit"


class PhaseDurations(BaseModel):
    """Nominal length of each phase in seconds, fixed at startup."""

    model_config = ConfigDict(frozen=True)

    focus: int = Field(default=45 * 60, gt=0)
    short_break: int = Field(default=5 * 60, gt=0)
    long_break: int = Field(default=15 * 60, gt=0)

    def for_phase(self, phase: Phase) -> int:
        if phase is Phase.FOCUS:
            return self.focus
        if phase is Phase.SHORT_BREAK:
            return self.short_break
        return self.long_break


class CountdownState(BaseModel):
    """Snapshot of the countdown. Every engine event produces a new one."""

    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.FOCUS
    remaining: int = Field(ge=0)
    running: bool = False
    completed_focus_bouts: int = Field(default=0, ge=0)
    total_completed: int = Field(default=0, ge=0)

    @property
    def minutes(self) -> int:
        return self.remaining // 60

    @property
    def seconds(self) -> int:
        return self.remaining % 60


class KeyMap(BaseModel):
    """Keys bound to each command. The first key of each list is shown in help."""

    start_stop: list[str] = Field(default_factory=lambda: ["s"], min_length=1)
    reset: list[str] = Field(default_factory=lambda: ["r"], min_length=1)
    # ctrl+c arrives as SIGINT in cbreak mode and is handled as KeyboardInterrupt;
    # it is listed so the key list shows it
    quit: list[str] = Field(default_factory=lambda: ["q", "\x03"], min_length=1)

    def command_for(self, key: str) -> Optional[Command]:
        """Return the command bound to ``key``, or None if it is unbound."""
        if not key:
            return None
        candidates = {key, key.lower()}
        for command, keys in (
            (Command.START_STOP, self.start_stop),
            (Command.RESET, self.reset),
            (Command.QUIT, self.quit),
        ):
            if candidates.intersection(keys):
                return command
        return None


class AppConfig(BaseModel):
    """Application configuration (persisted to ~/.config/pomo/config.json)."""

    keys: KeyMap = Field(default_factory=KeyMap)
    log_file: Optional[str] = None  # None = no logging output
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
