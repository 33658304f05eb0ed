# -*- coding: utf-8 -*-
"""
Сфера: центр + радиус.

Радиус ожидается неотрицательным, но не проверяется; отрицательный
радиус портит сравнения по квадрату радиуса.
"""

from __future__ import annotations

from typing import Optional

from geom3d.math.vec3 import Vec3, as_xyz, store_or_new


class Sphere:
    __slots__ = ("center_x", "center_y", "center_z", "radius")

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 1.0):
        self.center_x, self.center_y, self.center_z = as_xyz(center)
        self.radius = float(radius)

    def get_center(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.center_x, self.center_y, self.center_z)

    def get_radius_squared(self) -> float:
        return self.radius * self.radius

    def set_center(self, x, y=None, z=None) -> "Sphere":
        self.center_x, self.center_y, self.center_z = as_xyz(x, y, z)
        return self

    def set_radius(self, radius: float) -> "Sphere":
        self.radius = float(radius)
        return self

    def grow(self, amount: float) -> "Sphere":
        self.radius += amount
        return self

    def shrink(self, amount: float) -> "Sphere":
        self.radius -= amount
        return self

    def move(self, x, y=None, z=None) -> "Sphere":
        dx, dy, dz = as_xyz(x, y, z)
        self.center_x += dx
        self.center_y += dy
        self.center_z += dz
        return self

    def copy(self) -> "Sphere":
        return Sphere((self.center_x, self.center_y, self.center_z), self.radius)

    def intersect(self, other: "Sphere") -> bool:
        """
        Квадрат расстояния между центрами сравнивается с (r1 + r2),
        а не с (r1 + r2)². Так было исходно; оставлено как есть до
        решения владельца (см. DESIGN.md).
        """
        return self.intersect_sphere_at((other.center_x, other.center_y, other.center_z),
                                        other.radius)

    def intersect_sphere_at(self, position, radius: float) -> bool:
        px, py, pz = as_xyz(position)
        off_x = self.center_x - px
        off_y = self.center_y - py
        off_z = self.center_z - pz
        return (off_x * off_x + off_y * off_y + off_z * off_z) <= (self.radius + radius)

    def __repr__(self) -> str:
        return (f"Sphere(center=({self.center_x:.3f}, {self.center_y:.3f}, "
                f"{self.center_z:.3f}), radius={self.radius:.3f})")
