"""Base class for application layers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cometa.events import Event


class Layer(ABC):
    """A named slice of the application with its own life cycle and event handling."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @abstractmethod
    def init(self) -> None:
        """Prepare the layer."""

    @abstractmethod
    def update(self) -> None:
        """Advance the layer by one frame."""

    @abstractmethod
    def close(self) -> None:
        """Release the layer's resources."""

    @abstractmethod
    def handle_event(self, event: Event) -> None:
        """React to an event; call event.set_handled() to stop propagation."""