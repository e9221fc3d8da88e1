"""A small arcade game: dodge obstacles that fall toward the player's ship."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from cometa.colliders import BoxCollider
from cometa.collision import Transform
from cometa.event_bus import EventBus
from cometa.events import Event, EventType, KeyPressEvent
from cometa.layer import Layer
from cometa.physics import Body, RigidBody
from cometa.timing import Time

KEY_P = 80
KEY_R = 82

PLAYER_NAME = "PlayerShip"
PLAYER_START = (0.0, 0.0, -5.0)
PLAYER_SCALE = (1.0, 0.2, 0.5)
PLAYER_MASS = 1.0

FLOOR_NAME = "Floor"
FLOOR_POSITION = (0.0, -2.0, -10.0)
FLOOR_SCALE = (20.0, 0.1, 40.0)

OBSTACLE_TAG = "obstacle"
OBSTACLE_SPAWN_HEIGHT = 10.0
OBSTACLE_DEPTH = -5.0
OBSTACLE_THICKNESS = 0.5
OBSTACLE_MASS = 1.0

INITIAL_SPAWN_INTERVAL = 2.0
MIN_SPAWN_INTERVAL = 0.5
SPAWN_INTERVAL_STEP = 0.02
INITIAL_GAME_SPEED = 5.0
SPEED_STEP = 0.001

_COUNTER_MODULO = 256


@dataclass(eq=False)
class Obstacle:
    """A falling obstacle and the speed it was launched with."""

    name: str
    body: Body
    speed: float
    tag: str = OBSTACLE_TAG


class ShipGameLayer(Layer):
    """Spawns obstacles at a rising pace, keeps score and handles pause and restart."""

    def __init__(
        self,
        delta_time: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__("ShipGameLayer")
        self._delta_time = delta_time or Time.get_delta_time
        self.rng = rng or random.Random()
        self.game_running = False
        self.score = 0
        self.obstacle_spawn_timer = 0.0
        self.obstacle_counter = 0
        self.obstacle_spawn_interval = INITIAL_SPAWN_INTERVAL
        self.game_speed = INITIAL_GAME_SPEED
        self.player: Optional[Body] = None
        self.floor: Optional[Body] = None
        self.obstacles: List[Obstacle] = []
        self.bodies: List[Body] = []

    def init(self) -> None:
        self.player = Body(
            name=PLAYER_NAME,
            transform=Transform(position=PLAYER_START, scale=PLAYER_SCALE),
            collider=BoxCollider(PLAYER_SCALE),
            rigid_body=RigidBody(mass=PLAYER_MASS, affected_by_gravity=False),
        )
        self.floor = Body(
            name=FLOOR_NAME,
            transform=Transform(position=FLOOR_POSITION, scale=FLOOR_SCALE),
        )
        self.bodies.extend([self.player, self.floor])

        bus = EventBus.get_instance()
        bus.subscribe(EventType.KEY_PRESS, self)
        bus.subscribe(EventType.KEY_RELEASE, self)

        self.game_running = True

    def update(self) -> None:
        if not self.game_running:
            return
        self.obstacle_spawn_timer += self._delta_time()
        if self.obstacle_spawn_timer >= self.obstacle_spawn_interval:
            self.spawn_obstacle()
            self.obstacle_spawn_timer = 0.0
            self.game_speed += SPEED_STEP
            self.obstacle_spawn_interval = max(
                MIN_SPAWN_INTERVAL, self.obstacle_spawn_interval - SPAWN_INTERVAL_STEP
            )
        self.update_score(1)

    def close(self) -> None:
        self.game_running = False

    def handle_event(self, event: Event) -> None:
        if not isinstance(event, KeyPressEvent):
            return
        if event.key == KEY_R:
            self.reset_game()
            event.set_handled()
        if event.key == KEY_P:
            self.game_running = not self.game_running
            event.set_handled()

    def spawn_obstacle(self) -> Optional[Obstacle]:
        """Drop a new obstacle from above at a random column; None while paused."""
        if not self.game_running:
            return None
        name = f"Obstacle_{self.obstacle_counter}"
        self.obstacle_counter = (self.obstacle_counter + 1) % _COUNTER_MODULO

        x = float(self.rng.randrange(10) - 5)
        scale_x = 0.5 + self.rng.randrange(100) / 100.0
        scale_y = 0.5 + self.rng.randrange(100) / 100.0
        scale = (scale_x, scale_y, OBSTACLE_THICKNESS)

        body = Body(
            name=name,
            transform=Transform(position=(x, OBSTACLE_SPAWN_HEIGHT, OBSTACLE_DEPTH), scale=scale),
            collider=BoxCollider(scale),
            rigid_body=RigidBody(
                mass=OBSTACLE_MASS,
                affected_by_gravity=False,
                linear_velocity=(0.0, -self.game_speed, 0.0),
            ),
        )
        obstacle = Obstacle(name=name, body=body, speed=self.game_speed)
        self.obstacles.append(obstacle)
        self.bodies.append(body)
        return obstacle

    def reset_game(self) -> None:
        """Restart: clear obstacles, restore pacing and put the ship back."""
        self.game_running = True
        self.score = 0
        self.obstacle_spawn_timer = 0.0
        self.obstacle_spawn_interval = INITIAL_SPAWN_INTERVAL
        self.game_speed = INITIAL_GAME_SPEED

        removed = {id(obstacle.body) for obstacle in self.obstacles}
        self.bodies[:] = [body for body in self.bodies if id(body) not in removed]
        self.obstacles.clear()

        if self.player is None:
            return
        self.player.transform.position = Transform(position=PLAYER_START).position
        self.player.transform.rotation = Transform().rotation
        rb = self.player.rigid_body
        if rb is not None:
            rb.linear_velocity = RigidBody().linear_velocity
            rb.affected_by_gravity = False
            rb.mass = PLAYER_MASS
            rb.angular_velocity = RigidBody().angular_velocity

    def update_score(self, points: int) -> None:
        self.score += points