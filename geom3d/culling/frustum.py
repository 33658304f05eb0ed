"""
Frustum‑culling: протокол, который потребляют тесты пересечений,
и конкретная реализация на основе view‑projection матрицы.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Protocol, Tuple

import numpy as np

from geom3d.math.mat4 import Mat4
from geom3d.utils.logger import logger


class FrustumIntersection(IntEnum):
    """Результат классификации коробки относительно frustum‑а."""
    INSIDE = 0
    INTERSECT = 1
    OUTSIDE = 2


class FrustumCuller(Protocol):
    """Всё, что нужно от frustum‑а модулю intersections."""

    def classify_aabb(self, min_x: float, min_y: float, min_z: float,
                      max_x: float, max_y: float, max_z: float) -> FrustumIntersection:
        ...

    def is_sphere_inside(self, x: float, y: float, z: float, radius: float) -> bool:
        ...


class Plane:
    """Плоскость dot(normal, p) + distance = 0; normal смотрит внутрь frustum‑а."""
    __slots__ = ("normal", "distance")

    def __init__(self, normal: np.ndarray, distance: float):
        self.normal = np.asarray(normal, dtype=np.float32)
        self.distance = float(distance)

    def signed_distance(self, x: float, y: float, z: float) -> float:
        n = self.normal
        return float(n[0] * x + n[1] * y + n[2] * z) + self.distance

    def __repr__(self):
        return f"Plane(normal={self.normal}, distance={self.distance:.3f})"


class Frustum:
    """
    Шесть плоскостей, извлечённых из матрицы proj · view
    (метод Gribb/Hartmann). Порядок: left, right, bottom, top, near, far.
    """

    def __init__(self, planes: List[Plane]):
        self.planes = planes

    @classmethod
    def from_matrix(cls, view_projection: Mat4) -> "Frustum":
        m = view_projection.m.astype(np.float64)
        raw: List[Tuple[np.ndarray, str]] = [
            (m[3] + m[0], "left"),
            (m[3] - m[0], "right"),
            (m[3] + m[1], "bottom"),
            (m[3] - m[1], "top"),
            (m[3] + m[2], "near"),
            (m[3] - m[2], "far"),
        ]
        planes = []
        for coeffs, name in raw:
            length = np.linalg.norm(coeffs[:3])
            if length == 0.0:
                logger.warning(f"[Frustum] Degenerate {name} plane in matrix.")
                length = 1.0
            planes.append(Plane(coeffs[:3] / length, coeffs[3] / length))
        logger.debug("[Frustum] Built from view‑projection matrix.")
        return cls(planes)

    @classmethod
    def from_camera(cls, eye, target, up, fov_deg: float, aspect: float,
                    z_near: float, z_far: float) -> "Frustum":
        """Удобный конструктор: perspective(...) @ look_at(...)."""
        view = Mat4.look_at(eye, target, up)
        proj = Mat4.perspective(fov_deg, aspect, z_near, z_far)
        return cls.from_matrix(proj @ view)

    def classify_aabb(self, min_x: float, min_y: float, min_z: float,
                      max_x: float, max_y: float, max_z: float) -> FrustumIntersection:
        bmin = np.array([min_x, min_y, min_z], dtype=np.float32)
        bmax = np.array([max_x, max_y, max_z], dtype=np.float32)
        result = FrustumIntersection.INSIDE
        for plane in self.planes:
            # p‑вершина – самый «внутренний» угол вдоль нормали
            p = np.where(plane.normal >= 0, bmax, bmin)
            if np.dot(plane.normal, p) + plane.distance < 0:
                return FrustumIntersection.OUTSIDE
            n = np.where(plane.normal >= 0, bmin, bmax)
            if np.dot(plane.normal, n) + plane.distance < 0:
                result = FrustumIntersection.INTERSECT
        return result

    def is_sphere_inside(self, x: float, y: float, z: float, radius: float) -> bool:
        for plane in self.planes:
            if plane.signed_distance(x, y, z) < -radius:
                return False
        return True
