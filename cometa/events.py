"""Event types and the input events passed between layers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar


class EventType(IntEnum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    KEY_PRESS = 3
    KEY_RELEASE = 4
    MOUSE_MOVE = 5
    MOUSE_SCROLL = 6
    MOUSE_BUTTON_PRESS = 7
    MOUSE_BUTTON_RELEASE = 8
    TEST = 256


@dataclass
class Event(ABC):
    """An event that layers may handle; once handled it stops propagating."""

    event_type: ClassVar[EventType] = EventType.NONE
    _handled: bool = field(default=False, init=False, repr=False, compare=False)

    @property
    def handled(self) -> bool:
        """Whether some layer has handled the event."""
        return self._handled

    def set_handled(self) -> None:
        """Mark the event as handled."""
        self._handled = True

    @abstractmethod
    def __str__(self) -> str:
        """Human-readable description of the event."""


@dataclass
class MouseMoveEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVE
    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"MouseMoveEvent: ({self.x:f}, {self.y:f})"


@dataclass
class MouseScrollEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLL
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __str__(self) -> str:
        return f"MouseScrollEvent: ({self.offset_x:f}, {self.offset_y:f})"


@dataclass
class MousePressButtonEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESS
    mouse_code: int = 0

    def __str__(self) -> str:
        return f"MousePressButtonEvent: {self.mouse_code}"


@dataclass
class MouseReleaseButtonEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASE
    mouse_code: int = 0

    def __str__(self) -> str:
        return f"MouseReleaseButtonEvent: {self.mouse_code}"


@dataclass
class KeyPressEvent(Event):
    event_type: ClassVar[EventType] = EventType.KEY_PRESS
    key: int = 0
    repeat: bool = False

    def __str__(self) -> str:
        return f"KeyPressEvent{self.key}"


@dataclass
class KeyReleasedEvent(Event):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASE
    key: int = 0

    def __str__(self) -> str:
        return f"KeyReleaseEvent{self.key}"