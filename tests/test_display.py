"""Tests for the display helpers."""

from __future__ import annotations

from rich.console import Console

from pomo.display import format_remaining, key_label, render_help, render_modes, render_state
from pomo.models import CountdownState, KeyMap, Phase


def _plain(renderable) -> str:
    console = Console(width=80, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestFormatRemaining:
    def test_zero_padded(self) -> None:
        assert format_remaining(45 * 60) == "45:00"
        assert format_remaining(65) == "01:05"
        assert format_remaining(0) == "00:00"


class TestKeyLabel:
    def test_control_keys_named(self) -> None:
        assert key_label("\x03") == "ctrl+c"
        assert key_label("q") == "q"


class TestRenderModes:
    def test_lists_all_phases(self) -> None:
        text = render_modes(CountdownState(remaining=60))
        assert text.plain == "Mode: focus short break long break "

    def test_highlights_current(self) -> None:
        text = render_modes(CountdownState(phase=Phase.SHORT_BREAK, remaining=60))
        styled = [text.plain[s.start:s.end] for s in text.spans if s.style]
        assert styled == ["short break"]


class TestRenderHelp:
    def test_offers_start_when_stopped(self) -> None:
        text = render_help(CountdownState(remaining=60), KeyMap())
        assert "s start" in text.plain
        assert "stop" not in text.plain
        assert "r reset" in text.plain
        assert "q quit" in text.plain

    def test_offers_stop_when_running(self) -> None:
        text = render_help(CountdownState(remaining=60, running=True), KeyMap())
        assert "s stop" in text.plain
        assert "start" not in text.plain


class TestRenderState:
    def test_contents(self) -> None:
        state = CountdownState(remaining=125, total_completed=3)
        out = _plain(render_state(state, KeyMap()))
        assert "Mode: focus short break long break" in out
        assert "Time left 02:05" in out
        assert "Completed: 3" in out
        assert "╭" in out

    def test_quitting_hides_time_left(self) -> None:
        state = CountdownState(remaining=125, total_completed=3)
        out = _plain(render_state(state, KeyMap(), quitting=True))
        assert "Time left" not in out
        assert "Completed: 3" in out
