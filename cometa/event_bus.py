"""Publish/subscribe bus that routes events to layers."""

from __future__ import annotations

from collections import defaultdict
from typing import DefaultDict, List

from cometa.events import Event, EventType
from cometa.layer import Layer
from cometa.singleton import Singleton


class EventBus(Singleton):
    """Delivers events to the layers subscribed to their type, in subscription order."""

    def __init__(self) -> None:
        self._subscribers: DefaultDict[EventType, List[Layer]] = defaultdict(list)

    def subscribe(self, event_type: EventType, layer: Layer) -> None:
        """Register layer for events of event_type."""
        self._subscribers[event_type].append(layer)

    def unsubscribe(self, event_type: EventType, layer: Layer) -> None:
        """Remove the first registration of layer for event_type, if any."""
        subscribers = self._subscribers.get(event_type)
        if subscribers and layer in subscribers:
            subscribers.remove(layer)

    def notify(self, event: Event) -> bool:
        """Pass event to subscribers until one handles it; return whether it was handled."""
        if event.handled:
            return True
        for layer in list(self._subscribers.get(event.event_type, ())):
            layer.handle_event(event)
            if event.handled:
                break
        return event.handled