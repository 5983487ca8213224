from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final

# Named keys every backend must understand; anything else is a single character.
KEY_NAMES: Final = frozenset(
    {
        "alt", "alt_l", "alt_r", "backspace", "caps_lock", "cmd", "ctrl", "ctrl_l", "ctrl_r",
        "delete", "down", "end", "enter", "esc", "home", "left", "page_down", "page_up",
        "right", "shift", "shift_l", "shift_r", "space", "tab", "up",
        *(f"f{n}" for n in range(1, 13)),
    }
)  # fmt: skip


def is_valid_key(key: str) -> bool:
    return len(key) == 1 or key.lower() in KEY_NAMES


class InputPort(ABC):
    """Abstract keyboard/mouse; the domain never sees the OS backend directly.

    Calls are fire-and-forget. Keys are single characters ("0") or names
    ("shift"); buttons are "left" | "right" | "middle".
    """

    @abstractmethod
    def move_cursor(self, x: int, y: int) -> None: ...

    @abstractmethod
    def key_down(self, key: str) -> None: ...

    @abstractmethod
    def key_up(self, key: str) -> None: ...

    @abstractmethod
    def click(self, button: str) -> None: ...

    @abstractmethod
    def tap_key(self, key: str) -> None: ...
