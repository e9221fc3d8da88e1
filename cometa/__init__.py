"""Game-engine core: layers, events, sparse sets, rigid-body physics and a ship game."""

__version__ = "0.1.0"