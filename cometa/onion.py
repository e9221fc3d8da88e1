"""Ordered stack of layers driven together."""

from __future__ import annotations

from typing import Iterator, List

from cometa.layer import Layer


class Onion:
    """Holds layers; initialises and closes them in order, updates them in reverse."""

    def __init__(self) -> None:
        self._layers: List[Layer] = []

    def init(self) -> None:
        for layer in self._layers:
            layer.init()

    def update(self) -> None:
        for layer in reversed(self._layers):
            layer.update()

    def close(self) -> None:
        for layer in self._layers:
            layer.close()

    def push_layer(self, layer: Layer) -> None:
        """Append layer on top."""
        self._layers.append(layer)

    def pop_layer(self, layer: Layer) -> None:
        """Remove every occurrence of layer."""
        self._layers = [item for item in self._layers if item is not layer]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __len__(self) -> int:
        return len(self._layers)