"""
geom3d – небольшой набор вычислительной геометрии для 3‑D движков.

AABB, сферы, лучи и библиотека попарных тестов пересечения/расстояния
между ними (плюс frustum‑тесты через внешний culler). Только узкая фаза:
никаких деревьев и сеток.
"""

from geom3d.utils import logger, Config
from geom3d.math import Vec3, Vec4, Mat4
from geom3d.geometry import AABB, Sphere, Ray
from geom3d.culling import Frustum, FrustumCuller, FrustumIntersection
from geom3d.intersect import *  # noqa: F401,F403
from geom3d.intersect import __all__ as _intersect_all

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "Vec3",
    "Vec4",
    "Mat4",
    "AABB",
    "Sphere",
    "Ray",
    "Frustum",
    "FrustumCuller",
    "FrustumIntersection",
] + list(_intersect_all)
