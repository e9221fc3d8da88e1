"""Frame timing manager and default window dimensions."""

from __future__ import annotations

import time
from typing import Callable, Optional

from cometa.assertion import info
from cometa.singleton import SingletonManager

DEFAULT_WIDTH = 1600
DEFAULT_HEIGHT = 900


class Time(SingletonManager):
    """Tracks the time elapsed between consecutive frames."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self.clock: Callable[[], float] = clock or time.perf_counter
        self.delta_time = 0.0
        self.time_scale = 1.0
        self.last_frame_time = 0.0

    def init(self) -> None:
        info("Initialized Time singleton correctly")
        self.last_frame_time = float(self.clock())

    def update(self) -> None:
        current = float(self.clock())
        self.delta_time = current - self.last_frame_time
        self.last_frame_time = current

    def close(self) -> None:
        info("Close Time singleton correctly")

    @classmethod
    def get_delta_time(cls) -> float:
        """Delta time of the shared instance."""
        return cls.get_instance().delta_time

    @classmethod
    def get_time_scale(cls) -> float:
        """Time scale of the shared instance."""
        return cls.get_instance().time_scale