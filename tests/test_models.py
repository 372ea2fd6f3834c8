"""Tests for Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pomo.models import AppConfig, Command, CountdownState, KeyMap, Phase, PhaseDurations


class TestPhase:
    def test_labels(self) -> None:
        assert Phase.FOCUS.value == "focus"
        assert Phase.SHORT_BREAK.value == "short break"
        assert Phase.LONG_BREAK.value == "long break"

    def test_display_order(self) -> None:
        assert list(Phase) == [Phase.FOCUS, Phase.SHORT_BREAK, Phase.LONG_BREAK]


class TestPhaseDurations:
    def test_defaults(self) -> None:
        durations = PhaseDurations()
        assert durations.for_phase(Phase.FOCUS) == 45 * 60
        assert durations.for_phase(Phase.SHORT_BREAK) == 5 * 60
        assert durations.for_phase(Phase.LONG_BREAK) == 15 * 60

    def test_custom(self) -> None:
        durations = PhaseDurations(focus=10, short_break=2, long_break=5)
        assert durations.for_phase(Phase.LONG_BREAK) == 5

    def test_zero_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PhaseDurations(focus=0)

    def test_immutable(self) -> None:
        durations = PhaseDurations()
        with pytest.raises(ValidationError):
            durations.focus = 60  # type: ignore[misc]


class TestCountdownState:
    def test_minutes_and_seconds(self) -> None:
        state = CountdownState(remaining=125)
        assert state.minutes == 2
        assert state.seconds == 5

    def test_defaults(self) -> None:
        state = CountdownState(remaining=60)
        assert state.phase == Phase.FOCUS
        assert not state.running
        assert state.completed_focus_bouts == 0
        assert state.total_completed == 0

    def test_negative_remaining_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CountdownState(remaining=-1)

    def test_frozen(self) -> None:
        state = CountdownState(remaining=60)
        with pytest.raises(ValidationError):
            state.running = True  # type: ignore[misc]


class TestKeyMap:
    def test_default_bindings(self) -> None:
        keys = KeyMap()
        assert keys.command_for("s") == Command.START_STOP
        assert keys.command_for("r") == Command.RESET
        assert keys.command_for("q") == Command.QUIT
        assert keys.command_for("\x03") == Command.QUIT

    def test_uppercase_matches(self) -> None:
        assert KeyMap().command_for("S") == Command.START_STOP

    def test_unbound_key(self) -> None:
        assert KeyMap().command_for("x") is None
        assert KeyMap().command_for("") is None

    def test_custom_bindings(self) -> None:
        keys = KeyMap(start_stop=[" "], quit=["x"])
        assert keys.command_for(" ") == Command.START_STOP
        assert keys.command_for("x") == Command.QUIT
        assert keys.command_for("q") is None

    def test_empty_binding_rejected(self) -> None:
        with pytest.raises(ValidationError):
            KeyMap(reset=[])


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.log_file is None
        assert config.log_level == "WARNING"
        assert config.keys == KeyMap()

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(log_level="LOUD")
