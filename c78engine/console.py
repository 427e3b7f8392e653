"""An in-application command console layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .events import Event, EventDispatcher, KeyPressedEvent
from .keycodes import Key
from .keycombo import InputState, KeyCombo
from .layers import Layer

logger = logging.getLogger(__name__)

CommandCallback = Callable[[str], None]


@dataclass
class WindowRect:
    """Position and size of the console window, in pixels."""

    pos_x: int = 0
    pos_y: int = 0
    size_x: int = 0
    size_y: int = 0


class Console(Layer):
    """A layer that keeps a log, runs named commands and toggles on a hotkey.

    The console is shown and hidden with Left Alt + F1. ``input_state`` tells
    which keys are held; ``window_size`` is used to place the console when it
    is toggled.
    """

    def __init__(
        self,
        name: str = "C78E Console",
        input_state: InputState | None = None,
        window_size: tuple[int, int] = (1920, 1080),
    ) -> None:
        super().__init__(name)
        self.title = name
        self.visible = False
        self.toggle_key_combo = KeyCombo([Key.LEFT_ALT, Key.F1])
        self.input_state = input_state if input_state is not None else InputState()
        self.window_size = window_size
        self.commands: dict[str, CommandCallback] = {}
        self.history: list[str] = []
        self.lines: list[str] = []
        self.auto_scroll = True
        self.scroll_to_bottom = False
        self.window_rect = WindowRect()

    def set_pos_size(self, pos_x: int, pos_y: int, size_x: int, size_y: int) -> None:
        self.window_rect = WindowRect(pos_x, pos_y, size_x, size_y)

    def reset_pos_size(self, window_width: int, window_height: int) -> None:
        """Place the console in the upper right part of a window of the given size."""
        border = min(window_width, window_height) // 32
        self.set_pos_size(
            9 * window_width // 32,
            border,
            23 * window_width // 32 - border,
            18 * window_height // 32,
        )

    def add_log(self, entry: str) -> None:
        self.lines.append(entry)
        logger.info(entry)

    def add_command(self, name: str, callback: CommandCallback) -> None:
        """Register ``callback`` under ``name``; an existing command is kept."""
        self.commands.setdefault(name, callback)

    def execute(self, command: str) -> None:
        """Log and remember ``command`` and run the callback registered for it.

        An empty command is ignored.
        """
        if not command:
            return
        self.add_log("> " + command)
        self.history.append(command)
        callback = self.commands.get(command)
        if callback is not None:
            callback(command)
        self.scroll_to_bottom = True

    def show(self, visible: bool) -> None:
        self.visible = visible

    def _clear_log(self) -> None:
        self.lines.clear()

    def _on_clear(self, command: str) -> None:
        self._clear_log()

    def _on_close(self, command: str) -> None:
        self.visible = False

    def on_attach(self) -> None:
        self.add_command("clear", self._on_clear)
        self.add_command("close", self._on_close)

    def on_detach(self) -> None:
        logger.info("Console stopped.")

    def on_event(self, event: Event) -> bool:
        """Return True for every key press, after checking it for the toggle hotkey."""
        return EventDispatcher(event).dispatch(KeyPressedEvent, self.on_toggle_console)

    def on_toggle_console(self, event: Event) -> bool:
        """Toggle visibility if ``event`` completes the hotkey; return whether it did."""
        if not self.toggle_key_combo.matches(event, self.input_state):
            return False
        self.visible = not self.visible
        self.reset_pos_size(*self.window_size)
        return True