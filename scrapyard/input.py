"""Keyboard and mouse input codes and per-frame input tracking."""

from __future__ import annotations

from collections import Counter
from enum import Enum, auto
from typing import Iterable


class KeyCode(Enum):
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    NA = auto()


class MouseInput(Enum):
    LEFT_MOUSE = auto()
    RIGHT_MOUSE = auto()
    MIDDLE_MOUSE = auto()
    NA = auto()


_SCANCODES = {
    "A": KeyCode.A,
    "W": KeyCode.W,
    "S": KeyCode.S,
    "D": KeyCode.D,
    "Up": KeyCode.UP,
    "Down": KeyCode.DOWN,
    "Left": KeyCode.LEFT,
    "Right": KeyCode.RIGHT,
    "Space": KeyCode.SPACE,
}

_MOUSE_BUTTONS = {
    "Left": MouseInput.LEFT_MOUSE,
    "Right": MouseInput.RIGHT_MOUSE,
    "Middle": MouseInput.MIDDLE_MOUSE,
}


def scancode_to_keycode(scancode: str) -> KeyCode:
    """Map a scancode name such as ``"Space"`` to a key code; unknown names give NA."""
    return _SCANCODES.get(scancode, KeyCode.NA)


def sdl_mouse_to_mouse(button: str) -> MouseInput:
    """Map a mouse button name such as ``"Left"`` to a mouse input; unknown names give NA."""
    return _MOUSE_BUTTONS.get(button, MouseInput.NA)


def is_registered_input(code: KeyCode) -> bool:
    return code is not KeyCode.NA


def is_registered_mouse_input(code: MouseInput) -> bool:
    return code is not MouseInput.NA


class InputHandler:
    """Tracks which keys and buttons are down and for how many frames they were held."""

    def __init__(self) -> None:
        self._keyboard_pressed: list[KeyCode] = []
        self._mouse_pressed: list[MouseInput] = []
        self._held_mouse_buttons: Counter[MouseInput] = Counter()
        self._held_keys: Counter[KeyCode] = Counter()

    def update_input_state(
        self, pressed_scancodes: Iterable[str], pressed_buttons: Iterable[str]
    ) -> None:
        """Record this frame's pressed keys and buttons and bump their hold counts."""
        self._keyboard_pressed = [
            code for code in map(scancode_to_keycode, pressed_scancodes) if is_registered_input(code)
        ]
        self._mouse_pressed = [
            button
            for button in map(sdl_mouse_to_mouse, pressed_buttons)
            if is_registered_mouse_input(button)
        ]
        self._held_mouse_buttons.update(self._mouse_pressed)
        self._held_keys.update(self._keyboard_pressed)

    def clear_mouse_input(self, button: MouseInput) -> None:
        """Reset the hold count of a released button."""
        if button in self._held_mouse_buttons:
            self._held_mouse_buttons[button] = 0

    def clear_keyboard_input(self, key: KeyCode) -> None:
        """Reset the hold count of a released key."""
        if key in self._held_keys:
            self._held_keys[key] = 0

    def get_keycode_down(self, code: KeyCode) -> bool:
        """True while the key is held down."""
        return code in self._keyboard_pressed

    def get_keycode(self, key: KeyCode) -> bool:
        """True only on the first frame the key is down."""
        return self._held_keys.get(key) == 1

    def get_mouse_button(self, button: MouseInput) -> bool:
        """True only on the first frame the button is down."""
        return self._held_mouse_buttons.get(button) == 1

    def get_mouse_down(self, button: MouseInput) -> bool:
        """True while the button is held down."""
        return button in self._mouse_pressed