"""Contracts for the host editor the scroller drives.

The host owns the scroll position. The scroller only reads and writes the
offset of one axis at a time and listens for the host's "scroll settled"
notification.

Date: October 19, 2026
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple


class ScrollAxis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class WheelEvent:
    """A single mouse-wheel notification from the host.

    ``rotation`` is signed and may be fractional on high-resolution wheels.
    Any modifier key held during the event turns it into horizontal scrolling.
    """
    rotation: float
    scroll_amount: int = 1
    modifiers: int = 0

    @property
    def is_horizontal(self) -> bool:
        return self.modifiers != 0


class ScrollStore(ABC):
    """Scroll position store exposed by the host editor."""

    @abstractmethod
    def get_offset(self, axis: ScrollAxis) -> int:
        pass

    @abstractmethod
    def set_offset(self, axis: ScrollAxis, offset: int) -> None:
        pass

    @abstractmethod
    def add_settled_listener(self, callback: Callable[[], None]) -> None:
        pass

    @abstractmethod
    def remove_settled_listener(self, callback: Callable[[], None]) -> None:
        pass

    @abstractmethod
    def disable_builtin_animation(self) -> None:
        pass


class InMemoryScrollStore(ScrollStore):
    """Dict-backed scroll store used by tests and offline replays."""

    def __init__(self, vertical: int = 0, horizontal: int = 0):
        self._offsets: Dict[ScrollAxis, int] = {
            ScrollAxis.VERTICAL: vertical,
            ScrollAxis.HORIZONTAL: horizontal,
        }
        self._listeners: List[Callable[[], None]] = []
        self.builtin_animation_enabled = True
        self.writes: List[Tuple[ScrollAxis, int]] = []

    def get_offset(self, axis: ScrollAxis) -> int:
        return self._offsets[axis]

    def set_offset(self, axis: ScrollAxis, offset: int) -> None:
        self._offsets[axis] = offset
        self.writes.append((axis, offset))

    def add_settled_listener(self, callback: Callable[[], None]) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_settled_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def disable_builtin_animation(self) -> None:
        self.builtin_animation_enabled = False

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def settle(self) -> None:
        """Report that the current scroll has finished to every listener."""
        for callback in list(self._listeners):
            callback()
