"""Rigid-body integration, collision detection and impulse-based resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations
from typing import Callable, Iterable, List, Optional, Sequence

import numpy as np

from cometa.assertion import message, warning
from cometa.colliders import Collider
from cometa.collision import Collision, Transform, dispatch
from cometa.singleton import SingletonManager
from cometa.timing import Time

DEFAULT_GRAVITY = (0.0, -9.81, 0.0)
DEFAULT_BETA = 0.2

_SLOP = 0.01
_RESTITUTION = 0.1
_FRICTION = 0.3
_STATIC_MASS_THRESHOLD = 0.01
_TANGENT_EPSILON = 0.0001


def _zeros() -> np.ndarray:
    return np.zeros(3)


def _vec(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=float)


def _quat_from_euler(angles: np.ndarray) -> np.ndarray:
    """Quaternion (w, x, y, z) from Euler angles in radians."""
    c = np.cos(angles * 0.5)
    s = np.sin(angles * 0.5)
    return np.array([
        c[0] * c[1] * c[2] + s[0] * s[1] * s[2],
        s[0] * c[1] * c[2] - c[0] * s[1] * s[2],
        c[0] * s[1] * c[2] + s[0] * c[1] * s[2],
        c[0] * c[1] * s[2] - s[0] * s[1] * c[2],
    ])


def _quat_mul(q: np.ndarray, r: np.ndarray) -> np.ndarray:
    w1, x1, y1, z1 = q
    w2, x2, y2, z2 = r
    return np.array([
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
        w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
    ])


def _euler_from_quat(q: np.ndarray) -> np.ndarray:
    """Euler angles (pitch, yaw, roll) in radians from a (w, x, y, z) quaternion."""
    w, x, y, z = q
    pitch_y = 2.0 * (y * z + w * x)
    pitch_x = w * w - x * x - y * y + z * z
    if abs(pitch_y) < 1e-12 and abs(pitch_x) < 1e-12:
        pitch = 2.0 * np.arctan2(x, w)
    else:
        pitch = np.arctan2(pitch_y, pitch_x)
    yaw = np.arcsin(np.clip(-2.0 * (x * z - w * y), -1.0, 1.0))
    roll = np.arctan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)
    return np.array([pitch, yaw, roll])


@dataclass(eq=False)
class RigidBody:
    """Dynamic state of a body: mass, velocities and accumulated force and torque."""

    mass: float = 1.0
    linear_velocity: np.ndarray = field(default_factory=_zeros)
    angular_velocity: np.ndarray = field(default_factory=_zeros)
    force: np.ndarray = field(default_factory=_zeros)
    torque: np.ndarray = field(default_factory=_zeros)
    affected_by_gravity: bool = True
    enabled: bool = True
    inverse_inertia_tensor: np.ndarray = field(default_factory=lambda: np.eye(3))

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.linear_velocity = _vec(self.linear_velocity)
        self.angular_velocity = _vec(self.angular_velocity)
        self.force = _vec(self.force)
        self.torque = _vec(self.torque)
        self.inverse_inertia_tensor = np.array(self.inverse_inertia_tensor, dtype=float)

    def init(self, collider: Collider) -> None:
        """Derive the inverse inertia tensor from the body's collider."""
        self.inverse_inertia_tensor = np.array(
            collider.inverse_inertia_tensor(self.mass), dtype=float
        )

    def reset(self) -> None:
        """Stop all motion and drop accumulated force and torque."""
        self.linear_velocity = _zeros()
        self.angular_velocity = _zeros()
        self.force = _zeros()
        self.torque = _zeros()

    def add_force(self, force: Sequence[float]) -> None:
        """Accumulate a force to be applied on the next step."""
        self.force = self.force + _vec(force)

    def add_torque(self, torque: Sequence[float]) -> None:
        """Accumulate a torque to be applied on the next step."""
        self.torque = self.torque + _vec(torque)


@dataclass(eq=False)
class Body:
    """An object taking part in the simulation."""

    name: str = ""
    transform: Transform = field(default_factory=Transform)
    collider: Optional[Collider] = None
    rigid_body: Optional[RigidBody] = None


CollisionListener = Callable[[Body, Body, Collision, bool], None]


class PhysicsManager(SingletonManager):
    """Steps rigid bodies, finds contacts and resolves them with impulses."""

    def __init__(
        self,
        gravity: Sequence[float] = DEFAULT_GRAVITY,
        beta: float = DEFAULT_BETA,
    ) -> None:
        self.gravity = _vec(gravity)
        self.beta = float(beta)
        self.on_simulation = True
        self.bodies: Optional[List[Body]] = None
        self.collision_listener: Optional[CollisionListener] = None

    def init(self) -> None:
        pass

    def update(self) -> None:
        """Advance the current bodies by the frame's delta time."""
        if not self.on_simulation:
            return
        if self.bodies is None:
            warning("[PHYSICS_MANAGER] Current world is not set, cannot calculate physics interactions")
            return
        self.step(self.bodies, Time.get_delta_time())

    def close(self) -> None:
        pass

    def step(self, bodies: Iterable[Body], dt: float) -> List[Collision]:
        """Integrate, detect and resolve one step of dt seconds; return the contacts found."""
        if dt <= 0:
            raise ValueError(f"time step must be positive, got {dt}")
        bodies = list(bodies)

        for body in bodies:
            rb = body.rigid_body
            if rb is None or not rb.enabled:
                continue
            if body.collider is None:
                message("[PHYSICS_MANAGER] Rigidbody owner ", body.name, " has no collider")
                continue
            self._integrate(body, rb, dt)

        collisions = self._detect(bodies)
        for collision in collisions:
            self._resolve(collision, dt)
        return collisions

    def _integrate(self, body: Body, rb: RigidBody, dt: float) -> None:
        transform = body.transform
        rb.init(body.collider)

        if rb.affected_by_gravity:
            rb.force = rb.force + rb.mass * self.gravity
        rb.linear_velocity = rb.linear_velocity + rb.force / rb.mass * dt
        transform.position = transform.position + rb.linear_velocity * dt
        rb.force = _zeros()

        rb.angular_velocity = rb.angular_velocity + rb.inverse_inertia_tensor @ rb.torque * dt
        spin = _quat_from_euler(rb.angular_velocity * dt)
        current = _quat_from_euler(np.radians(transform.rotation))
        transform.rotation = np.degrees(_euler_from_quat(_quat_mul(spin, current)))
        rb.torque = _zeros()

    def _detect(self, bodies: List[Body]) -> List[Collision]:
        collisions: List[Collision] = []
        with_colliders = [body for body in bodies if body.collider is not None]
        for body_a, body_b in combinations(with_colliders, 2):
            point = dispatch(body_a.collider, body_a.transform, body_b.collider, body_b.transform)
            collision = Collision(body_a, body_b, point)
            if point.collided:
                collisions.append(collision)
            if self.collision_listener is not None:
                self.collision_listener(body_a, body_b, collision, point.collided)
        return collisions

    def _resolve(self, collision: Collision, dt: float) -> None:
        body_a: Body = collision.collider_a
        body_b: Body = collision.collider_b
        rb_a, rb_b = body_a.rigid_body, body_b.rigid_body
        contact = collision.point

        total_mass = (rb_a.mass if rb_a else 0.0) + (rb_b.mass if rb_b else 0.0)
        if total_mass <= _STATIC_MASS_THRESHOLD:
            return

        r_a = contact.point - body_a.transform.position
        r_b = contact.point - body_b.transform.position

        vel_a = rb_a.linear_velocity + np.cross(rb_a.angular_velocity, r_a) if rb_a else _zeros()
        vel_b = rb_b.linear_velocity + np.cross(rb_b.angular_velocity, r_b) if rb_b else _zeros()
        relative = vel_b - vel_a
        vel_along_normal = float(np.dot(relative, contact.normal))

        penetration = max(contact.length - _SLOP, 0.0)
        j = -(1.0 + _RESTITUTION) * vel_along_normal
        j += (self.beta / dt) * penetration
        j /= total_mass
        impulse = j * contact.normal

        dynamic_a = rb_a is not None and rb_a.mass > 0.0
        dynamic_b = rb_b is not None and rb_b.mass > 0.0

        if dynamic_a:
            angular = np.cross(r_a, impulse)
            rb_a.angular_velocity = rb_a.angular_velocity - (
                rb_a.inverse_inertia_tensor @ angular * (rb_a.mass / total_mass)
            )
        if dynamic_b:
            angular = np.cross(r_b, impulse)
            rb_b.angular_velocity = rb_b.angular_velocity + (
                rb_b.inverse_inertia_tensor @ angular * (rb_b.mass / total_mass)
            )

        if dynamic_a:
            ratio = rb_a.mass / total_mass
            rb_a.linear_velocity = rb_a.linear_velocity - impulse * ratio
            body_a.transform.position = (
                body_a.transform.position - contact.normal * penetration * self.beta * ratio
            )
        if dynamic_b:
            ratio = rb_b.mass / total_mass
            rb_b.linear_velocity = rb_b.linear_velocity + impulse * ratio
            body_b.transform.position = (
                body_b.transform.position + contact.normal * penetration * self.beta * ratio
            )

        tangent = relative - contact.normal * vel_along_normal
        tangent_length = float(np.linalg.norm(tangent))
        if tangent_length > _TANGENT_EPSILON:
            tangent = tangent / tangent_length
            jt = -float(np.dot(relative, tangent)) / total_mass
            max_friction = j * _FRICTION
            jt = min(max(jt, -max_friction), max_friction)
            friction_impulse = jt * tangent
            if dynamic_a:
                rb_a.linear_velocity = rb_a.linear_velocity - friction_impulse * (rb_a.mass / total_mass)
            if dynamic_b:
                rb_b.linear_velocity = rb_b.linear_velocity + friction_impulse * (rb_b.mass / total_mass)