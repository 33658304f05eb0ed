"""
Геометрические value‑типы: AABB, Sphere, Ray.

Все типы изменяемые, методы‑сеттеры возвращают self для цепочек:

    box = AABB().set_origin(1, 2, 3).grow(0.5)
"""

from geom3d.geometry.aabb import AABB
from geom3d.geometry.sphere import Sphere
from geom3d.geometry.ray import Ray

__all__ = ["AABB", "Sphere", "Ray"]
