# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32).

Изменяемый: `set`, `normalize` и сеттеры x/y/z правят объект на месте,
поэтому Vec3 годится как «store»‑параметр для функций геометрии.
Арифметические операторы, наоборот, всегда возвращают новый объект.
"""
import numpy as np


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float):
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float):
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float):
        self._v[2] = float(value)

    def set(self, x: float, y: float, z: float) -> "Vec3":
        """Записать три компоненты и вернуть self (для цепочек)."""
        self._v[0] = x
        self._v[1] = y
        self._v[2] = z
        return self

    def copy(self) -> "Vec3":
        return Vec3(*self._v)

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar):
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(*(self._v / scalar))

    def __neg__(self):
        return Vec3(*(-self._v))

    # -------------------------------------------------
    # распаковка: `x, y, z = vec`
    # -------------------------------------------------
    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __len__(self):
        return 3

    def __getitem__(self, index):
        return float(self._v[index])

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other):
        return float(np.dot(self._v, other._v))

    def cross(self, other):
        return Vec3(*np.cross(self._v, other._v))

    def length(self):
        return float(np.linalg.norm(self._v))

    def length_squared(self):
        return float(np.dot(self._v, self._v))

    def normalized(self):
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def normalize(self) -> "Vec3":
        """Нормализация на месте; нулевой вектор остаётся нулевым."""
        n = self.length()
        if n != 0.0:
            self._v /= n
        return self

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self):
        return (self.x, self.y, self.z)

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


def as_xyz(x, y=None, z=None):
    """
    Привести аргументы к тройке float.

    Принимает либо три числа, либо один «вектор» (Vec3, кортеж, ndarray),
    который распаковывается в три компоненты.
    """
    if y is None and z is None:
        x, y, z = x
    return float(x), float(y), float(z)


def store_or_new(store, x: float, y: float, z: float) -> Vec3:
    """Записать (x, y, z) в store; если store не передан – создать Vec3."""
    if store is None:
        return Vec3(x, y, z)
    return store.set(x, y, z)
