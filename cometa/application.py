"""The application: owns the managers and layers and runs the frame loop."""

from __future__ import annotations

import argparse
import itertools
from typing import Callable, List, Optional, Sequence

from cometa.assertion import info
from cometa.input import Input
from cometa.onion import Onion
from cometa.physics import PhysicsManager
from cometa.ship_game import ShipGameLayer
from cometa.singleton import Singleton
from cometa.timing import Time


class Application(Singleton):
    """Initialises managers and layers, updates them every frame and closes them."""

    def __init__(
        self,
        managers: Optional[Sequence] = None,
        should_close: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.is_running = True
        if managers is None:
            managers = [Time.get_instance(), PhysicsManager.get_instance()]
        self.managers: List = list(managers)
        self.should_close = should_close
        self.onion = Onion()

    def _time_source(self) -> Optional[Callable[[], float]]:
        for manager in self.managers:
            if isinstance(manager, Time):
                return lambda: manager.delta_time
        return None

    def init(self) -> None:
        ship_game = ShipGameLayer(delta_time=self._time_source())
        self.onion.push_layer(ship_game)

        for manager in self.managers:
            if isinstance(manager, PhysicsManager) and manager.bodies is None:
                manager.bodies = ship_game.bodies
            if isinstance(manager, Input) and manager.on_close is None:
                manager.on_close = self.must_close

        for manager in self.managers:
            manager.init()
        self.onion.init()

    def running(self) -> None:
        """Run frames until something asks the application to close."""
        while self.is_running:
            for manager in self.managers:
                manager.update()
            self.onion.update()
            if self.is_running and self.should_close is not None:
                self.is_running = not self.should_close()

    def close(self) -> None:
        for manager in reversed(self.managers):
            manager.close()
        info("Application closed correctly")

    def must_close(self) -> None:
        """Stop the loop after the current frame."""
        self.is_running = False


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="cometa", description="Run the ship game simulation.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 1:
        parser.error("--frames must be at least 1")

    should_close = None
    if args.frames is not None:
        counter = itertools.count(1)
        limit = args.frames
        should_close = lambda: next(counter) >= limit  # noqa: E731

    app = Application(should_close=should_close)
    app.init()
    app.running()
    app.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())