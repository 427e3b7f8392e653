import logging

import pytest

from c78engine.console import Console
from c78engine.events import KeyPressedEvent, MouseMovedEvent
from c78engine.keycodes import Key
from c78engine.keycombo import InputState


@pytest.fixture
def console():
    state = InputState()
    con = Console("Test Console", input_state=state, window_size=(1920, 1080))
    con.on_attach()
    return con


def test_execute_runs_callback_and_records(console):
    received = []
    console.add_command("hello", received.append)
    console.execute("hello")
    assert received == ["hello"]
    assert console.history == ["hello"]
    assert console.lines[-1] == "> hello"
    assert console.scroll_to_bottom is True


def test_unknown_command_is_logged_only(console):
    console.execute("nothing")
    assert console.history == ["nothing"]
    assert console.lines == ["> nothing"]


def test_empty_command_is_ignored(console):
    console.execute("")
    assert console.history == []
    assert console.lines == []
    assert console.scroll_to_bottom is False


def test_add_command_keeps_existing(console):
    calls = []
    console.add_command("x", lambda cmd: calls.append("first"))
    console.add_command("x", lambda cmd: calls.append("second"))
    console.execute("x")
    assert calls == ["first"]


def test_close_command_hides(console):
    console.show(True)
    console.execute("close")
    assert console.visible is False


def test_clear_command_empties_log(console):
    console.add_log("one")
    console.add_log("two")
    console.execute("clear")
    assert console.lines == []


def test_add_log_uses_logging(console, caplog):
    with caplog.at_level(logging.INFO, logger="c78engine.console"):
        console.add_log("entry text")
    assert "entry text" in caplog.text
    assert console.lines == ["entry text"]


def test_toggle_with_hotkey(console):
    console.input_state.press_key(Key.F1)
    event = KeyPressedEvent(Key.F1)
    assert console.on_toggle_console(event) is True
    assert console.visible is True
    rect = console.window_rect
    assert rect.pos_x + rect.size_x + rect.pos_y == 1920
    assert console.on_toggle_console(KeyPressedEvent(Key.F1)) is True
    assert console.visible is False


def test_toggle_needs_trigger_key(console):
    assert console.on_toggle_console(KeyPressedEvent(Key.A)) is False
    assert console.visible is False


def test_on_event_claims_key_presses(console):
    event = KeyPressedEvent(Key.A)
    assert console.on_event(event) is True
    assert event.handled is False
    assert console.visible is False


def test_on_event_marks_toggle_handled(console):
    console.input_state.press_key(Key.F1)
    event = KeyPressedEvent(Key.F1)
    assert console.on_event(event) is True
    assert event.handled is True


def test_on_event_ignores_mouse(console):
    assert console.on_event(MouseMovedEvent(1.0, 2.0)) is False


@pytest.mark.parametrize("width,height", [(1920, 1080), (640, 480), (3200, 1600)])
def test_reset_pos_size_invariants(width, height):
    con = Console()
    con.reset_pos_size(width, height)
    rect = con.window_rect
    assert rect.pos_y == min(width, height) // 32
    assert rect.pos_x + rect.size_x + rect.pos_y == width
    assert rect.size_y <= height


def test_set_pos_size_stores_values():
    con = Console()
    con.set_pos_size(1, 2, 3, 4)
    assert (con.window_rect.pos_x, con.window_rect.pos_y) == (1, 2)
    assert (con.window_rect.size_x, con.window_rect.size_y) == (3, 4)