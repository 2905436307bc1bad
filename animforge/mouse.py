"""Mouse state tracking with a bounded queue of input events."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

WHEEL_DELTA = 120


class MouseEventType(enum.Enum):
    MOUSE_MOVE = enum.auto()
    LEFT_CLICK = enum.auto()
    LEFT_DOUBLE_CLICK = enum.auto()
    RIGHT_CLICK = enum.auto()
    RIGHT_DOUBLE_CLICK = enum.auto()
    MIDDLE_CLICK = enum.auto()
    LEFT_RELEASE = enum.auto()
    RIGHT_RELEASE = enum.auto()
    MIDDLE_RELEASE = enum.auto()
    SCROLL_UP = enum.auto()
    SCROLL_DOWN = enum.auto()
    ENTER_WINDOW = enum.auto()
    LEAVE_WINDOW = enum.auto()


@dataclass(frozen=True)
class MouseEvent:
    """A snapshot of the mouse taken when an event happened.

    An event without a type marks the end of the queue.
    """

    type: Optional[MouseEventType] = None
    x: int = 0
    y: int = 0
    left_was_clicked: bool = False
    right_was_clicked: bool = False
    middle_was_clicked: bool = False
    was_in_window: bool = False

    def is_end_of_queue(self) -> bool:
        return self.type is None


class Mouse:
    """Tracks buttons, position and window presence, and queues events."""

    BUFFER_SIZE = 32

    def __init__(self) -> None:
        self.reset()

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def left_is_clicked(self) -> bool:
        return self._left

    @property
    def right_is_clicked(self) -> bool:
        return self._right

    @property
    def middle_is_clicked(self) -> bool:
        return self._middle

    @property
    def is_in_window(self) -> bool:
        return self._in_window

    def _push(self, event_type: MouseEventType) -> None:
        self._events.append(
            MouseEvent(
                event_type, self._x, self._y,
                self._left, self._right, self._middle, self._in_window,
            )
        )
        while len(self._events) >= self.BUFFER_SIZE:
            self._events.popleft()

    def _move_to(self, x: int, y: int) -> None:
        self._x = x
        self._y = y

    def on_mouse_move(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._push(MouseEventType.MOUSE_MOVE)

    def on_left_click(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._left = True
        self._push(MouseEventType.LEFT_CLICK)

    def on_left_double_click(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._push(MouseEventType.LEFT_DOUBLE_CLICK)

    def on_right_click(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._right = True
        self._push(MouseEventType.RIGHT_CLICK)

    def on_right_double_click(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._push(MouseEventType.RIGHT_DOUBLE_CLICK)

    def on_middle_click(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._middle = True
        self._push(MouseEventType.MIDDLE_CLICK)

    def on_left_release(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._left = False
        self._push(MouseEventType.LEFT_RELEASE)

    def on_right_release(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._right = False
        self._push(MouseEventType.RIGHT_RELEASE)

    def on_middle_release(self, x: int, y: int) -> None:
        self._move_to(x, y)
        self._middle = False
        self._push(MouseEventType.MIDDLE_RELEASE)

    def on_wheel_scroll(self, z: int) -> None:
        """Accumulate wheel movement and emit one scroll event per notch."""
        self._scroll_buffer += z
        if z > 0:
            while self._scroll_buffer > 0:
                self._scroll_buffer -= WHEEL_DELTA
                self._push(MouseEventType.SCROLL_UP)
        else:
            while self._scroll_buffer < 0:
                self._scroll_buffer += WHEEL_DELTA
                self._push(MouseEventType.SCROLL_DOWN)

    def on_mouse_enter(self) -> None:
        self._in_window = True
        self._push(MouseEventType.ENTER_WINDOW)

    def on_mouse_leave(self) -> None:
        self._in_window = False
        self._push(MouseEventType.LEAVE_WINDOW)

    def is_in_use(self) -> bool:
        """Whether any button is held down."""
        return self._left or self._right or self._middle

    def clear_mouse_states(self) -> None:
        self._left = False
        self._right = False
        self._middle = False

    def read(self) -> MouseEvent:
        """Take the oldest event, or an end-of-queue event when none is left."""
        if self._events:
            return self._events.popleft()
        return MouseEvent()

    def is_active(self) -> bool:
        """Whether events are waiting to be read."""
        return bool(self._events)

    def empty_event_queue(self) -> None:
        self._events.clear()

    def reset(self) -> None:
        """Return to the initial state with no events queued."""
        self._x = 0
        self._y = 0
        self._left = False
        self._right = False
        self._middle = False
        self._in_window = False
        self._scroll_buffer = 0
        self._events: Deque[MouseEvent] = deque()