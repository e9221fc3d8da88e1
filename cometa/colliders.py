"""Collision shapes and their inertia tensors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Sequence

import numpy as np


class ColliderType(IntEnum):
    """Kinds of collider; the order decides argument order in dispatch."""

    BOX_COLLIDER = 0
    SPHERE_COLLIDER = 1


def _vec3(values: Sequence[float]) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected three components, got shape {array.shape}")
    return array


class Collider(ABC):
    """A collision shape attached to a body."""

    @property
    @abstractmethod
    def collider_type(self) -> ColliderType:
        """The kind of this collider."""

    @abstractmethod
    def inertia_tensor(self, mass: float) -> np.ndarray:
        """Local inertia tensor per unit mass (mass is applied by the caller)."""

    @abstractmethod
    def inverse_inertia_tensor(self, mass: float) -> np.ndarray:
        """Inverse of the local inertia tensor."""


class BoxCollider(Collider):
    """An oriented box described by its half extents."""

    def __init__(
        self,
        extents: Sequence[float] = (0.5, 0.5, 0.5),
        center: Sequence[float] = (0.0, 0.0, 0.0),
        rotation: Sequence[float] = (1.0, 0.0, 0.0, 0.0),
    ) -> None:
        self.extents = _vec3(extents)
        self.center = _vec3(center)
        quat = np.array(rotation, dtype=float)
        if quat.shape != (4,):
            raise ValueError(f"rotation must be a (w, x, y, z) quaternion, got shape {quat.shape}")
        self.rotation = quat

    def __repr__(self) -> str:
        return (
            f"BoxCollider(extents={self.extents.tolist()}, "
            f"center={self.center.tolist()}, rotation={self.rotation.tolist()})"
        )

    @property
    def collider_type(self) -> ColliderType:
        return ColliderType.BOX_COLLIDER

    @property
    def size(self) -> np.ndarray:
        """Full edge lengths of the box."""
        return self.extents * 2.0

    def inertia_tensor(self, mass: float) -> np.ndarray:
        x2, y2, z2 = self.size ** 2
        return np.diag([(y2 + z2) / 12.0, (x2 + z2) / 12.0, (x2 + y2) / 12.0])

    def inverse_inertia_tensor(self, mass: float) -> np.ndarray:
        return np.linalg.inv(self.inertia_tensor(mass))


class SphereCollider(Collider):
    """A solid sphere."""

    def __init__(
        self,
        radius: float = 0.5,
        center: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.radius = float(radius)
        self.center = _vec3(center)

    def __repr__(self) -> str:
        return f"SphereCollider(radius={self.radius}, center={self.center.tolist()})"

    @property
    def collider_type(self) -> ColliderType:
        return ColliderType.SPHERE_COLLIDER

    def _moment(self) -> float:
        return 2.0 * self.radius * self.radius / 5.0

    def inertia_tensor(self, mass: float) -> np.ndarray:
        return np.eye(3) * self._moment()

    def inverse_inertia_tensor(self, mass: float) -> np.ndarray:
        return np.eye(3) * (1.0 / self._moment())