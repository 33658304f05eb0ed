# -*- coding: utf-8 -*-
"""
Луч: начало (origin) + направление (direction).

Направление НЕ нормализуется автоматически. Все тесты пересечений
решают параметрическое уравнение, поэтому работают и с ненормированным
направлением, но тогда возвращаемое t – это расстояние в единицах
длины direction, а не истинное расстояние.
"""

from __future__ import annotations

from typing import Optional

from geom3d.math.mat4 import Mat4
from geom3d.math.vec3 import Vec3, as_xyz, store_or_new
from geom3d.math.vec4 import Vec4


class Ray:
    __slots__ = ("origin_x", "origin_y", "origin_z",
                 "direction_x", "direction_y", "direction_z")

    def __init__(self, direction=(0.0, 0.0, 1.0), origin=(0.0, 0.0, 0.0)):
        self.direction_x, self.direction_y, self.direction_z = as_xyz(direction)
        self.origin_x, self.origin_y, self.origin_z = as_xyz(origin)

    def get_direction(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.direction_x, self.direction_y, self.direction_z)

    def get_origin(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.origin_x, self.origin_y, self.origin_z)

    def set_direction(self, x, y=None, z=None) -> "Ray":
        self.direction_x, self.direction_y, self.direction_z = as_xyz(x, y, z)
        return self

    def set_origin(self, x, y=None, z=None) -> "Ray":
        self.origin_x, self.origin_y, self.origin_z = as_xyz(x, y, z)
        return self

    def copy(self) -> "Ray":
        return Ray((self.direction_x, self.direction_y, self.direction_z),
                   (self.origin_x, self.origin_y, self.origin_z))

    def trace(self, t: float, store: Optional[Vec3] = None) -> Vec3:
        """Точка origin + direction * t."""
        return store_or_new(store,
                            self.origin_x + self.direction_x * t,
                            self.origin_y + self.direction_y * t,
                            self.origin_z + self.direction_z * t)

    def trace_reverse(self, t: float, store: Optional[Vec3] = None) -> Vec3:
        """Точка origin - direction * t."""
        return store_or_new(store,
                            self.origin_x - self.direction_x * t,
                            self.origin_y - self.direction_y * t,
                            self.origin_z - self.direction_z * t)

    def move(self, x, y=None, z=None) -> "Ray":
        dx, dy, dz = as_xyz(x, y, z)
        self.origin_x += dx
        self.origin_y += dy
        self.origin_z += dz
        return self

    def normalize_direction(self) -> "Ray":
        """Нормализовать direction на месте (нулевой остаётся нулевым)."""
        length_sq = (self.direction_x * self.direction_x
                     + self.direction_y * self.direction_y
                     + self.direction_z * self.direction_z)
        if length_sq != 0.0:
            inv = length_sq ** -0.5
            self.direction_x *= inv
            self.direction_y *= inv
            self.direction_z *= inv
        return self

    def transform(self, matrix: Mat4, store: Optional[Vec4] = None,
                  normalize_direction: bool = False) -> "Ray":
        """
        Применить 4×4 матрицу к origin и direction.

        Оба вектора расширяются до w = 1 (в т.ч. direction!), поэтому
        сдвиг матрицы попадает и в направление. Корректно только для
        матриц без переноса. `store` – необязательный Vec4 для
        промежуточных значений.

        normalize_direction нормализует только xyz результата (через
        Vec4.normalize3); синтетическая w = 1 в длину не входит. Исходная
        версия нормализовала все четыре компоненты, и длина direction
        получалась меньше единицы.
        """
        if store is None:
            store = Vec4()

        store.set(self.origin_x, self.origin_y, self.origin_z, 1.0)
        matrix.transform(store)
        self.origin_x, self.origin_y, self.origin_z = store.x, store.y, store.z

        store.set(self.direction_x, self.direction_y, self.direction_z, 1.0)
        matrix.transform(store)
        if normalize_direction:
            store.normalize3()
        self.direction_x, self.direction_y, self.direction_z = store.x, store.y, store.z
        return self

    def __repr__(self) -> str:
        return (f"Ray(direction=({self.direction_x:.3f}, {self.direction_y:.3f}, "
                f"{self.direction_z:.3f}), origin=({self.origin_x:.3f}, "
                f"{self.origin_y:.3f}, {self.origin_z:.3f}))")
