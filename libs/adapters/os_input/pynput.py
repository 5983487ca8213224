from __future__ import annotations

import time

from pynput import keyboard, mouse
from ports.input import InputPort

_BUTTONS = {
    "left": mouse.Button.left,
    "right": mouse.Button.right,
    "middle": mouse.Button.middle,
}


def resolve_key(key: str) -> keyboard.Key | keyboard.KeyCode:
    """Single characters pass through; names ("shift", "f5") map to Key members."""
    if len(key) == 1:
        return keyboard.KeyCode.from_char(key)
    try:
        return keyboard.Key[key.lower()]
    except KeyError:
        raise ValueError(f"unknown key name: {key!r}") from None


class PynputInputPort(InputPort):
    """Keyboard and mouse through pynput controllers."""

    def __init__(self, tap_ms: int = 50) -> None:
        self.kb = keyboard.Controller()
        self.mouse = mouse.Controller()
        self._tap_s = tap_ms / 1000.0

    def move_cursor(self, x: int, y: int) -> None:
        self.mouse.position = (x, y)

    def key_down(self, key: str) -> None:
        self.kb.press(resolve_key(key))

    def key_up(self, key: str) -> None:
        self.kb.release(resolve_key(key))

    def click(self, button: str) -> None:
        try:
            btn = _BUTTONS[button]
        except KeyError:
            raise ValueError(f"unknown mouse button: {button!r}") from None
        self.mouse.click(btn)

    def tap_key(self, key: str) -> None:
        k = resolve_key(key)
        self.kb.press(k)
        time.sleep(self._tap_s)
        self.kb.release(k)
