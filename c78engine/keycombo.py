"""Input state, key combinations and a recorder for them."""

from __future__ import annotations

from typing import Iterable

from .events import Event, EventCategory, EventType
from .keycodes import Key, key_code_from_string, key_code_to_string

_SEPARATOR = " + "


class InputState:
    """Which keys and mouse buttons are held, and where the mouse is."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self.mouse_position: tuple[float, float] = (0.0, 0.0)

    def press_key(self, key: int) -> None:
        self._keys.add(key)

    def release_key(self, key: int) -> None:
        self._keys.discard(key)

    def is_key_pressed(self, key: int) -> bool:
        return key in self._keys

    def press_mouse_button(self, button: int) -> None:
        self._buttons.add(button)

    def release_mouse_button(self, button: int) -> None:
        self._buttons.discard(button)

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._buttons

    def set_mouse_position(self, x: float, y: float) -> None:
        self.mouse_position = (float(x), float(y))


class KeyCombo:
    """Keys pressed together; the last key is the one that triggers the combo."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._keys: list[int] = list(keys)

    def push_key(self, key: int) -> None:
        self._keys.append(key)

    def pop_key(self) -> int:
        """Remove and return the last key; raise ``IndexError`` if empty."""
        if not self._keys:
            raise IndexError("cannot pop a key from an empty key combo")
        return self._keys.pop()

    def erase_key(self, key: int) -> bool:
        """Remove the first occurrence of ``key``; return whether it was present."""
        try:
            self._keys.remove(key)
        except ValueError:
            return False
        return True

    def codes(self) -> list[int]:
        return list(self._keys)

    def matches(self, event: Event, input_state: InputState) -> bool:
        """True if ``event`` presses the trigger key while the combo is held.

        The trigger key must be the last key, and every key after the first
        must be reported as held by ``input_state``.
        """
        if event.event_type is not EventType.KEY_PRESSED or not self._keys:
            return False
        if getattr(event, "key_code", None) != self._keys[-1]:
            return False
        return all(input_state.is_key_pressed(key) for key in self._keys[1:])

    @classmethod
    def from_string(cls, text: str) -> KeyCombo:
        """Parse ``"A + B + "`` style text; an unknown key name yields an empty combo."""
        combo = cls()
        for name in text.split(_SEPARATOR):
            if not name:
                continue
            key = key_code_from_string(name)
            if key is Key.NONE:
                return cls()
            combo.push_key(key)
        return combo

    def __str__(self) -> str:
        return "".join(key_code_to_string(key) + _SEPARATOR for key in self._keys)

    def __repr__(self) -> str:
        return f"KeyCombo({self._keys!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyCombo):
            return NotImplemented
        return self._keys == other._keys

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._keys)


class KeyComboRecorder:
    """Builds a key combo from the key events it is fed."""

    def __init__(self) -> None:
        self._combo = KeyCombo()
        self._recording = False

    def start(self) -> None:
        self._combo = KeyCombo()
        self._recording = True

    def reset(self) -> None:
        self._combo = KeyCombo()
        self._recording = False

    def on_event(self, event: Event) -> bool:
        """Record key presses and releases; return whether the combo changed."""
        if not event.is_in_category(EventCategory.INPUT):
            return False
        if event.event_type is EventType.KEY_PRESSED:
            self._combo.push_key(event.key_code)  # type: ignore[attr-defined]
            return True
        if event.event_type is EventType.KEY_RELEASED:
            codes = self._combo.codes()
            key = event.key_code  # type: ignore[attr-defined]
            if codes and codes[-1] == key:
                self._recording = False
            else:
                return self._combo.erase_key(key)
        return False

    def has_finished(self) -> bool:
        return self._recording and len(self._combo) > 0

    def key_combo(self) -> KeyCombo:
        return KeyCombo(self._combo.codes())