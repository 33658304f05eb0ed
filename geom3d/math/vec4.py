# geom3d/math/vec4.py
"""
4‑мерный вектор (float32). Однородные координаты для Mat4.transform.
"""

import numpy as np


class Vec4:
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = float(value)

    def set(self, x: float, y: float, z: float, w: float) -> "Vec4":
        """Записать все четыре компоненты, вернуть self."""
        self._v[:] = (x, y, z, w)
        return self

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def normalize3(self) -> "Vec4":
        """Нормализовать xyz на месте (w не трогаем)."""
        n = float(np.linalg.norm(self._v[:3]))
        if n != 0.0:
            self._v[:3] /= n
        return self

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

