"""Mouse cursor, button and scroll state gathered from window callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class ButtonAction(IntEnum):
    """Actions a mouse button event can carry."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class MouseScroll:
    """Which way the wheel turned since the last query."""

    increase: bool
    decrease: bool


NO_BUTTON = -1


class MouseInput:
    """Collects cursor offsets, the last pressed button and scroll direction."""

    def __init__(self) -> None:
        self.pressed_button = 0
        self._offset: Tuple[float, float] = (0.0, 0.0)
        self._last_offset: Tuple[float, float] = (0.0, 0.0)
        self._last_x = 1000.0 / 2.0
        self._last_y = 1000.0 / 2.0
        self._first_move = True
        self._previous_scroll_y = 0.0
        self._increase = False
        self._decrease = False

    def on_cursor_pos(self, xpos: float, ypos: float) -> None:
        """Record a cursor position as an offset from the previous one."""
        if self._first_move:
            self._last_x = xpos
            self._last_y = ypos
            self._first_move = False
        # y is reversed since screen coordinates grow downwards
        self._offset = (float(xpos - self._last_x), float(self._last_y - ypos))
        self._last_x = xpos
        self._last_y = ypos

    def on_mouse_button(self, button: int, action: ButtonAction) -> None:
        """Record a button press or repeat; releases leave the state as it is."""
        if action in (ButtonAction.PRESS, ButtonAction.REPEAT):
            self.pressed_button = button

    def on_scroll(self, x: float, y: float) -> None:
        """Record the scroll direction relative to the previous wheel value."""
        if y > self._previous_scroll_y:
            self._increase, self._decrease = True, False
        elif y < self._previous_scroll_y:
            self._increase, self._decrease = False, True
        self._previous_scroll_y = y

    def scroll_state(self) -> MouseScroll:
        """Return the pending scroll direction and clear it."""
        state = MouseScroll(self._increase, self._decrease)
        self._increase = self._decrease = False
        return state

    def mouse_moved(self) -> bool:
        """Tell whether the horizontal offset changed since the last call."""
        if self._last_offset[0] != self._offset[0]:
            self._last_offset = self._offset
            return True
        return False

    def check_mouse_button(self, button: int) -> bool:
        """Consume a pending press of ``button``, returning whether there was one."""
        if self.pressed_button == button:
            self.pressed_button = NO_BUTTON
            return True
        return False

    def cursor_position(self) -> Tuple[float, float]:
        """Return the latest cursor offset as ``(x, y)``."""
        return self._offset