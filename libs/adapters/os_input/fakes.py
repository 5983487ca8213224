from __future__ import annotations

from dataclasses import dataclass

from ports.input import InputPort


@dataclass(frozen=True)
class InputRecord:
    action: str  # "move" | "down" | "up" | "click" | "tap"
    arg: str | tuple[int, int]


class FakeInputPort(InputPort):
    """Records what would have been sent to the OS."""

    def __init__(self) -> None:
        self.actions: list[InputRecord] = []
        self.pressed: set[str] = set()

    def move_cursor(self, x: int, y: int) -> None:
        self.actions.append(InputRecord("move", (x, y)))

    def key_down(self, key: str) -> None:
        self.actions.append(InputRecord("down", key))
        self.pressed.add(key)

    def key_up(self, key: str) -> None:
        self.actions.append(InputRecord("up", key))
        self.pressed.discard(key)

    def click(self, button: str) -> None:
        self.actions.append(InputRecord("click", button))

    def tap_key(self, key: str) -> None:
        self.actions.append(InputRecord("tap", key))

    def script(self) -> list[tuple[str, str | tuple[int, int]]]:
        return [(a.action, a.arg) for a in self.actions]
