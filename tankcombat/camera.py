"""Vector maths and camera matrices for the perspective and look-at views."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; a zero vector is returned as is."""
        n = self.length()
        if n == 0:
            return self
        return Vec3(self.x / n, self.y / n, self.z / n)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True)
class Frustum:
    """Clip planes of a perspective projection."""

    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float


def perspective(theta: float, alpha: float, beta: float, width: float, height: float) -> Frustum:
    """Frustum for a lens angle ``theta`` (degrees) on a ``width`` x ``height`` screen.

    The near plane sits at ``d / alpha`` and the far plane at ``d * beta``,
    where ``d`` is the distance at which the screen fills the view.
    """
    t = math.tan(math.radians(theta * 0.5))
    d = (height / 2.0) / t
    near = d / alpha
    far = d * beta
    ymax = near * t
    xmax = (width / height) * ymax
    return Frustum(-xmax, xmax, -ymax, ymax, near, far)


Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]


def lookat(cam: Vec3, target: Vec3, up: Vec3) -> Matrix4:
    """View matrix for a camera at ``cam`` looking at ``target``.

    The result is laid out in OpenGL column-major order: ``m[i]`` is column i,
    so a point ``p`` maps to ``sum(p[i] * m[i][j] for i)`` with ``p[3] == 1``.
    """
    n = (cam - target).normalized()
    u = up.cross(n).normalized()
    v = n.cross(u).normalized()
    return (
        (u.x, v.x, n.x, 0.0),
        (u.y, v.y, n.y, 0.0),
        (u.z, v.z, n.z, 0.0),
        (-u.dot(cam), -v.dot(cam), -n.dot(cam), 1.0),
    )