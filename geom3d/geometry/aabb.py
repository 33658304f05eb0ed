# -*- coding: utf-8 -*-
"""
Axis‑aligned bounding box (AABB).

Важно:
    * extent – это *половина* размера коробки по каждой оси;
    * origin – центр коробки, а не угол.

    min = origin - extent,   max = origin + extent

Отрицательный extent нигде не проверяется: он молча меняет местами
min и max и ломает все производные тесты. Единственная защита –
явный вызов `correct_extent()` (например, после `shrink` за ноль).
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable, Optional

from geom3d.math.vec3 import Vec3, as_xyz, store_or_new


def _min_distance_squared_axis(p: float, bmin: float, bmax: float) -> float:
    """Квадрат расстояния от координаты до отрезка [bmin, bmax] (0 внутри)."""
    if p < bmin:
        d = bmin - p
        return d * d
    if p > bmax:
        d = p - bmax
        return d * d
    return 0.0


class AABB:
    """Коробка, выровненная по осям. Изменяемый value‑тип, сеттеры возвращают self."""

    __slots__ = ("extent_x", "extent_y", "extent_z",
                 "origin_x", "origin_y", "origin_z")

    def __init__(self, extent=(1.0, 1.0, 1.0), origin=(0.0, 0.0, 0.0)):
        self.extent_x, self.extent_y, self.extent_z = as_xyz(extent)
        self.origin_x, self.origin_y, self.origin_z = as_xyz(origin)

    # -------------------------------------------------
    # чтение
    # -------------------------------------------------
    def get_origin(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.origin_x, self.origin_y, self.origin_z)

    def get_extent(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.extent_x, self.extent_y, self.extent_z)

    def get_size(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.extent_x * 2.0, self.extent_y * 2.0,
                            self.extent_z * 2.0)

    def get_minimum(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.get_min_x(), self.get_min_y(), self.get_min_z())

    def get_maximum(self, store: Optional[Vec3] = None) -> Vec3:
        return store_or_new(store, self.get_max_x(), self.get_max_y(), self.get_max_z())

    def get_min_and_max(self, min_store: Vec3, max_store: Vec3) -> "AABB":
        self.get_minimum(min_store)
        self.get_maximum(max_store)
        return self

    def get_min_x(self) -> float:
        return self.origin_x - self.extent_x

    def get_min_y(self) -> float:
        return self.origin_y - self.extent_y

    def get_min_z(self) -> float:
        return self.origin_z - self.extent_z

    def get_max_x(self) -> float:
        return self.origin_x + self.extent_x

    def get_max_y(self) -> float:
        return self.origin_y + self.extent_y

    def get_max_z(self) -> float:
        return self.origin_z + self.extent_z

    # -------------------------------------------------
    # запись (все возвращают self)
    # -------------------------------------------------
    def set_extent(self, x, y=None, z=None) -> "AABB":
        self.extent_x, self.extent_y, self.extent_z = as_xyz(x, y, z)
        return self

    def set_origin(self, x, y=None, z=None) -> "AABB":
        self.origin_x, self.origin_y, self.origin_z = as_xyz(x, y, z)
        return self

    def set_size(self, x, y=None, z=None) -> "AABB":
        """Задать полный размер; extent становится его половиной."""
        sx, sy, sz = as_xyz(x, y, z)
        self.extent_x = sx / 2.0
        self.extent_y = sy / 2.0
        self.extent_z = sz / 2.0
        return self

    def set_width(self, width: float) -> "AABB":
        self.extent_x = width / 2.0
        return self

    def set_height(self, height: float) -> "AABB":
        self.extent_y = height / 2.0
        return self

    def set_length(self, length: float) -> "AABB":
        self.extent_z = length / 2.0
        return self

    def set(self, extent_x: float, extent_y: float, extent_z: float,
            origin_x: float, origin_y: float, origin_z: float) -> "AABB":
        self.extent_x = float(extent_x)
        self.extent_y = float(extent_y)
        self.extent_z = float(extent_z)
        self.origin_x = float(origin_x)
        self.origin_y = float(origin_y)
        self.origin_z = float(origin_z)
        return self

    def set_from(self, other: "AABB") -> "AABB":
        return self.set(other.extent_x, other.extent_y, other.extent_z,
                        other.origin_x, other.origin_y, other.origin_z)

    def copy(self) -> "AABB":
        return AABB().set_from(self)

    # -------------------------------------------------
    # преобразования
    # -------------------------------------------------
    def correct_extent(self) -> "AABB":
        """Сделать extent неотрицательным (abs по каждой оси)."""
        self.extent_x = abs(self.extent_x)
        self.extent_y = abs(self.extent_y)
        self.extent_z = abs(self.extent_z)
        return self

    def move(self, x, y=None, z=None) -> "AABB":
        dx, dy, dz = as_xyz(x, y, z)
        self.origin_x += dx
        self.origin_y += dy
        self.origin_z += dz
        return self

    def grow(self, amount) -> "AABB":
        """Увеличить extent на скаляр или покомпонентно на вектор."""
        if isinstance(amount, numbers.Real):
            ax = ay = az = float(amount)
        else:
            ax, ay, az = as_xyz(amount)
        self.extent_x += ax
        self.extent_y += ay
        self.extent_z += az
        return self

    def shrink(self, amount) -> "AABB":
        """Уменьшить extent. Может дать отрицательный extent – не исправляется."""
        if isinstance(amount, numbers.Real):
            ax = ay = az = float(amount)
        else:
            ax, ay, az = as_xyz(amount)
        self.extent_x -= ax
        self.extent_y -= ay
        self.extent_z -= az
        return self

    # -------------------------------------------------
    # пересечения
    # -------------------------------------------------
    def intersect_on_x(self, other: "AABB") -> bool:
        return abs(self.origin_x - other.origin_x) < self.extent_x + other.extent_x

    def intersect_on_y(self, other: "AABB") -> bool:
        return abs(self.origin_y - other.origin_y) < self.extent_y + other.extent_y

    def intersect_on_z(self, other: "AABB") -> bool:
        return abs(self.origin_z - other.origin_z) < self.extent_z + other.extent_z

    def overlap(self, other: "AABB") -> bool:
        """
        Separating‑axis тест по трём осям.
        Касание граней (равенство) пересечением НЕ считается.
        """
        if abs(self.origin_x - other.origin_x) >= self.extent_x + other.extent_x:
            return False
        if abs(self.origin_y - other.origin_y) >= self.extent_y + other.extent_y:
            return False
        if abs(self.origin_z - other.origin_z) >= self.extent_z + other.extent_z:
            return False
        return True

    intersect = overlap

    def overlap_boxes(self, other: "AABB", store: "AABB") -> bool:
        """
        Если коробки пересекаются – записать область пересечения в store
        и вернуть True. Иначе store не трогается, возвращается False.
        store не должен совпадать с self/other.
        """
        if not self.overlap(other):
            return False

        min_x = max(self.get_min_x(), other.get_min_x())
        min_y = max(self.get_min_y(), other.get_min_y())
        min_z = max(self.get_min_z(), other.get_min_z())
        max_x = min(self.get_max_x(), other.get_max_x())
        max_y = min(self.get_max_y(), other.get_max_y())
        max_z = min(self.get_max_z(), other.get_max_z())

        store.set((max_x - min_x) / 2.0, (max_y - min_y) / 2.0, (max_z - min_z) / 2.0,
                  (min_x + max_x) / 2.0, (min_y + max_y) / 2.0, (min_z + max_z) / 2.0)
        return True

    def surround_points_with_box(self, points: Iterable) -> "AABB":
        """
        Обернуть точки минимальной коробкой.

        Аккумуляторы min/max стартуют с (0, 0, 0), а не с первой точки,
        поэтому результат всегда содержит начало координат. Поведение
        сохранено намеренно, см. DESIGN.md.
        """
        min_x = min_y = min_z = 0.0
        max_x = max_y = max_z = 0.0

        for point in points:
            x, y, z = as_xyz(point)
            min_x = x if x < min_x else min_x
            min_y = y if y < min_y else min_y
            min_z = z if z < min_z else min_z
            max_x = x if x > max_x else max_x
            max_y = y if y > max_y else max_y
            max_z = z if z > max_z else max_z

        return self.set((max_x - min_x) / 2.0, (max_y - min_y) / 2.0, (max_z - min_z) / 2.0,
                        (min_x + max_x) / 2.0, (min_y + max_y) / 2.0, (min_z + max_z) / 2.0)

    def min_distance_squared(self, x, y=None, z=None) -> float:
        """Квадрат расстояния от точки до коробки (0, если точка внутри)."""
        px, py, pz = as_xyz(x, y, z)
        return (_min_distance_squared_axis(px, self.get_min_x(), self.get_max_x())
                + _min_distance_squared_axis(py, self.get_min_y(), self.get_max_y())
                + _min_distance_squared_axis(pz, self.get_min_z(), self.get_max_z()))

    def min_distance(self, x, y=None, z=None) -> float:
        return math.sqrt(self.min_distance_squared(x, y, z))

    def inside(self, x, y=None, z=None) -> bool:
        """Точка внутри коробки; границы включаются."""
        px, py, pz = as_xyz(x, y, z)
        return (self.get_min_x() <= px <= self.get_max_x()
                and self.get_min_y() <= py <= self.get_max_y()
                and self.get_min_z() <= pz <= self.get_max_z())

    @staticmethod
    def interpolate(a: "AABB", b: "AABB", t: float, store: Optional["AABB"] = None) -> "AABB":
        """Линейная интерполяция extent и origin между a (t=0) и b (t=1)."""
        if store is None:
            store = AABB()
        return store.set(
            a.extent_x + (b.extent_x - a.extent_x) * t,
            a.extent_y + (b.extent_y - a.extent_y) * t,
            a.extent_z + (b.extent_z - a.extent_z) * t,
            a.origin_x + (b.origin_x - a.origin_x) * t,
            a.origin_y + (b.origin_y - a.origin_y) * t,
            a.origin_z + (b.origin_z - a.origin_z) * t,
        )

    # -------------------------------------------------
    # ограничение перемещения (swept‑коллизии)
    # -------------------------------------------------
    # Если коробки не перекрываются по двум другим осям – движение не
    # ограничивается. Иначе оно урезается до зазора, но только когда
    # препятствие лежит по ходу движения и коробки ещё не вошли друг в
    # друга по этой оси.

    def get_x_movement_overlap(self, other: "AABB", movement: float) -> float:
        if not (self.intersect_on_y(other) and self.intersect_on_z(other)):
            return movement
        return self._clamp_movement(movement,
                                    other.get_min_x() - self.get_max_x(),
                                    other.get_max_x() - self.get_min_x())

    def get_y_movement_overlap(self, other: "AABB", movement: float) -> float:
        if not (self.intersect_on_x(other) and self.intersect_on_z(other)):
            return movement
        return self._clamp_movement(movement,
                                    other.get_min_y() - self.get_max_y(),
                                    other.get_max_y() - self.get_min_y())

    def get_z_movement_overlap(self, other: "AABB", movement: float) -> float:
        if not (self.intersect_on_x(other) and self.intersect_on_y(other)):
            return movement
        return self._clamp_movement(movement,
                                    other.get_min_z() - self.get_max_z(),
                                    other.get_max_z() - self.get_min_z())

    @staticmethod
    def _clamp_movement(movement: float, gap_forward: float, gap_backward: float) -> float:
        # gap_forward >= 0: препятствие впереди по +оси
        # gap_backward <= 0: препятствие позади (движение по -оси)
        if movement > 0.0 and 0.0 <= gap_forward < movement:
            return gap_forward
        if movement < 0.0 and movement < gap_backward <= 0.0:
            return gap_backward
        return movement

    def __repr__(self) -> str:
        return (f"AABB(extent=({self.extent_x:.3f}, {self.extent_y:.3f}, {self.extent_z:.3f}), "
                f"origin=({self.origin_x:.3f}, {self.origin_y:.3f}, {self.origin_z:.3f}))")
