"""Narrow-phase intersection tests between colliders and their dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Sequence, Tuple

import numpy as np

from cometa.colliders import BoxCollider, Collider, ColliderType, SphereCollider


def _zeros() -> np.ndarray:
    return np.zeros(3)


def _ones() -> np.ndarray:
    return np.ones(3)


@dataclass(eq=False)
class Transform:
    """Position, Euler rotation in degrees, and scale of an object."""

    position: np.ndarray = field(default_factory=_zeros)
    rotation: np.ndarray = field(default_factory=_zeros)
    scale: np.ndarray = field(default_factory=_ones)

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        self.scale = np.array(self.scale, dtype=float)


@dataclass(eq=False)
class CollisionPoint:
    """Contact between two colliders: surface points, normal and penetration depth."""

    a: np.ndarray = field(default_factory=_zeros)
    b: np.ndarray = field(default_factory=_zeros)
    point: np.ndarray = field(default_factory=_zeros)
    normal: np.ndarray = field(default_factory=_zeros)
    length: float = 0.0
    collided: bool = False


@dataclass(eq=False)
class Collision:
    """Two colliding objects and the contact found between them."""

    collider_a: Any
    collider_b: Any
    point: CollisionPoint


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return vector / np.linalg.norm(vector)


def _rotation_x(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _rotation_y(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def _rotation_z(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def euler_angles_xyz(angles: Sequence[float]) -> np.ndarray:
    """Rotation matrix for Euler angles in radians, applied X first, then Y, then Z."""
    x, y, z = (float(v) for v in angles)
    return _rotation_z(z) @ _rotation_y(y) @ _rotation_x(x)


def _rotation_of(transform: Transform) -> np.ndarray:
    return euler_angles_xyz(np.radians(transform.rotation))


def intersect_box_sphere(
    collider: BoxCollider,
    transform: Transform,
    other_collider: SphereCollider,
    other_transform: Transform,
) -> CollisionPoint:
    """Contact between a box (first) and a sphere (second)."""
    result = CollisionPoint()
    sphere_center = np.asarray(other_transform.position, dtype=float)
    radius = other_collider.radius
    box_center = np.asarray(transform.position, dtype=float)
    half = collider.extents

    rotation = _rotation_of(transform)
    local_center = rotation.T @ (sphere_center - box_center)
    closest = np.clip(local_center, -half, half)
    world_closest = rotation @ closest + box_center

    delta = sphere_center - world_closest
    distance = float(np.linalg.norm(delta))

    if distance <= radius:
        result.collided = True
        result.point = world_closest
        result.normal = _normalize(delta)
        result.length = radius - distance
        result.a = world_closest.copy()
        result.b = sphere_center - result.normal * radius
    return result


def intersect_sphere_sphere(
    collider: SphereCollider,
    transform: Transform,
    other_collider: SphereCollider,
    other_transform: Transform,
) -> CollisionPoint:
    """Contact between two spheres; fields are filled even when they do not touch."""
    center_a = np.asarray(transform.position, dtype=float) + collider.center
    center_b = np.asarray(other_transform.position, dtype=float) + other_collider.center

    delta = center_b - center_a
    normal = _normalize(delta)
    distance = float(np.linalg.norm(delta))
    radius_sum = collider.radius + other_collider.radius

    return CollisionPoint(
        a=center_a + normal * collider.radius,
        b=center_b - normal * other_collider.radius,
        normal=normal,
        length=radius_sum - distance,
        collided=distance < radius_sum,
    )


def intersect_box_box(
    collider: BoxCollider,
    transform: Transform,
    other_collider: BoxCollider,
    other_transform: Transform,
) -> CollisionPoint:
    """Contact between two boxes by a separating-axis test over their face axes."""
    center1 = np.asarray(transform.position, dtype=float)
    center2 = np.asarray(other_transform.position, dtype=float)
    extents1 = collider.extents
    extents2 = other_collider.extents

    rotation1 = _rotation_of(transform)
    rotation2 = _rotation_of(other_transform)

    max_distance = np.linalg.norm(extents1) + np.linalg.norm(extents2)
    if np.linalg.norm(center2 - center1) > max_distance:
        return CollisionPoint()

    columns1 = [rotation1[:, i] for i in range(3)]
    columns2 = [rotation2[:, i] for i in range(3)]

    min_overlap = np.inf
    collision_normal = np.zeros(3)

    for axis in columns1 + columns2:
        c1 = float(np.dot(center1, axis))
        c2 = float(np.dot(center2, axis))
        e1 = sum(abs(float(np.dot(extents1 * column, axis))) for column in columns1)
        e2 = sum(abs(float(np.dot(extents2 * column, axis))) for column in columns2)

        overlap = e1 + e2 - abs(c2 - c1)
        if overlap <= 0:
            return CollisionPoint()
        if overlap < min_overlap:
            min_overlap = overlap
            collision_normal = axis * (-1.0 if c2 - c1 < 0 else 1.0)

    normal = _normalize(collision_normal)
    length = float(min_overlap)
    a = center1 + normal * (length * 0.5)
    b = center2 - normal * (length * 0.5)
    return CollisionPoint(
        a=a,
        b=b,
        point=(a + b) * 0.5,
        normal=normal,
        length=length,
        collided=True,
    )


_IntersectFunction = Callable[[Collider, Transform, Collider, Transform], CollisionPoint]

_DISPATCH_TABLE: Dict[Tuple[ColliderType, ColliderType], _IntersectFunction] = {
    (ColliderType.BOX_COLLIDER, ColliderType.BOX_COLLIDER): intersect_box_box,
    (ColliderType.BOX_COLLIDER, ColliderType.SPHERE_COLLIDER): intersect_box_sphere,
    (ColliderType.SPHERE_COLLIDER, ColliderType.BOX_COLLIDER): intersect_box_sphere,
    (ColliderType.SPHERE_COLLIDER, ColliderType.SPHERE_COLLIDER): intersect_sphere_sphere,
}


def dispatch(
    collider: Collider,
    transform: Transform,
    other_collider: Collider,
    other_transform: Transform,
) -> CollisionPoint:
    """Pick the intersection test for the two collider kinds and run it.

    The collider of the lower kind is always passed first.
    """
    type_a = collider.collider_type
    type_b = other_collider.collider_type

    if type_a > type_b:
        collider, other_collider = other_collider, collider
        transform, other_transform = other_transform, transform

    function = _DISPATCH_TABLE.get((type_a, type_b))
    if function is None:
        print(f"Did not find function: {int(type_a)} {int(type_b)}")
        return CollisionPoint()
    return function(collider, transform, other_collider, other_transform)