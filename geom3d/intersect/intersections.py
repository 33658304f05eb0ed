# -*- coding: utf-8 -*-
"""
Тесты пересечений между AABB, сферами, лучами, плоскостями и frustum‑ом.

Соглашения:
    * функции, возвращающие расстояние, при отсутствии попадания
      возвращают +inf (NO_HIT) – отдельного флага нет;
    * входные данные не валидируются вообще;
    * «store»‑параметры – только для записи, принадлежат вызывающему и
      не должны совпадать с входными аргументами.

Пример:
    >>> from geom3d import Ray, Sphere, intersect_ray_with_sphere
    >>> ray = Ray(direction=(0, 0, 1))
    >>> intersect_ray_with_sphere(ray, Sphere((0, 0, 10), 2))
    8.0
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional, Sequence

import numpy as np

from geom3d.culling.frustum import FrustumCuller, FrustumIntersection
from geom3d.geometry.aabb import AABB
from geom3d.geometry.ray import Ray
from geom3d.geometry.sphere import Sphere
from geom3d.intersect import _kernels
from geom3d.math.vec3 import Vec3, as_xyz
from geom3d.utils.config import Config

NO_HIT = math.inf

# Кардинальные нормали и начало координат. Кортежи – неизменяемы.
ORIGIN = (0.0, 0.0, 0.0)
RIGHT = (1.0, 0.0, 0.0)
UP = (0.0, 1.0, 0.0)
FRONT = (0.0, 0.0, 1.0)
LEFT = (-1.0, 0.0, 0.0)
DOWN = (0.0, -1.0, 0.0)
BACK = (0.0, 0.0, -1.0)


class LinePlaneResult(IntEnum):
    """Результат пересечения отрезка с плоскостью."""
    NONE = _kernels.LINE_PLANE_NONE
    POINT = _kernels.LINE_PLANE_POINT
    LINE = _kernels.LINE_PLANE_LINE


def _ray_args(ray: Ray):
    return (ray.origin_x, ray.origin_y, ray.origin_z,
            ray.direction_x, ray.direction_y, ray.direction_z)


def _box_bounds(aabb: AABB):
    return (aabb.get_min_x(), aabb.get_min_y(), aabb.get_min_z(),
            aabb.get_max_x(), aabb.get_max_y(), aabb.get_max_z())


# ----------------------------------------------------------------------
# Объём / объём
# ----------------------------------------------------------------------
def intersect_aabb_with_frustum(aabb: AABB, culler: FrustumCuller) -> bool:
    """True, если коробка внутри frustum‑а или пересекает его."""
    return culler.classify_aabb(*_box_bounds(aabb)) != FrustumIntersection.OUTSIDE


def intersect_aabb_with_sphere(aabb: AABB, sphere: Sphere) -> bool:
    """Касание границы считается пересечением (<=)."""
    return (aabb.min_distance_squared(sphere.center_x, sphere.center_y, sphere.center_z)
            <= sphere.get_radius_squared())


def intersect_aabb_with_sphere_at(aabb: AABB, center, radius: float) -> bool:
    return aabb.min_distance_squared(center) <= radius * radius


def intersect_aabb_with_aabb(a: AABB, b: AABB) -> bool:
    return a.overlap(b)


def intersect_aabb_with_extents(aabb: AABB, extent, origin) -> bool:
    """То же, что intersect_aabb_with_aabb, но вторая коробка задана extent/origin."""
    ex, ey, ez = as_xyz(extent)
    ox, oy, oz = as_xyz(origin)
    if abs(ox - aabb.origin_x) >= ex + aabb.extent_x:
        return False
    if abs(oy - aabb.origin_y) >= ey + aabb.extent_y:
        return False
    if abs(oz - aabb.origin_z) >= ez + aabb.extent_z:
        return False
    return True


def intersect_sphere_with_sphere(a: Sphere, b: Sphere) -> bool:
    return a.intersect(b)


def intersect_sphere_with_frustum(sphere: Sphere, culler: FrustumCuller) -> bool:
    return culler.is_sphere_inside(sphere.center_x, sphere.center_y, sphere.center_z,
                                   sphere.radius)


# ----------------------------------------------------------------------
# Луч / плоскость
# ----------------------------------------------------------------------
def intersect_ray_with_plane(ray: Ray, normal, point) -> float:
    """
    Расстояние до плоскости (normal, point) или NO_HIT.

    Параллельный луч (N·D == 0) не обрабатывается отдельно: деление
    даёт ±inf или NaN, и оба превращаются в NO_HIT либо сами им являются.
    """
    return _kernels.ray_plane(*_ray_args(ray), *as_xyz(normal), *as_xyz(point))


def intersect_ray_with_positive_x_axis_plane(ray: Ray) -> float:
    return intersect_ray_with_plane(ray, RIGHT, ORIGIN)


def intersect_ray_with_positive_y_axis_plane(ray: Ray) -> float:
    return intersect_ray_with_plane(ray, UP, ORIGIN)


def intersect_ray_with_positive_z_axis_plane(ray: Ray) -> float:
    return intersect_ray_with_plane(ray, FRONT, ORIGIN)


def intersect_ray_with_negative_x_axis_plane(ray: Ray) -> float:
    return intersect_ray_with_plane(ray, LEFT, ORIGIN)


def intersect_ray_with_negative_y_axis_plane(ray: Ray) -> float:
    return intersect_ray_with_plane(ray, DOWN, ORIGIN)


def intersect_ray_with_negative_z_axis_plane(ray: Ray) -> float:
    return intersect_ray_with_plane(ray, BACK, ORIGIN)


def intersect_ray_with_plane_in_box(ray: Ray, normal, point, aabb: AABB) -> float:
    """Попадание в плоскость засчитывается, только если точка лежит в коробке."""
    return _kernels.ray_plane_in_box(*_ray_args(ray), *as_xyz(normal), *as_xyz(point),
                                     *_box_bounds(aabb))


def intersect_ray_with_disk(ray: Ray, normal, center, radius: float) -> float:
    return _kernels.ray_disk(*_ray_args(ray), *as_xyz(normal), *as_xyz(center),
                             float(radius))


# ----------------------------------------------------------------------
# Луч / тела
# ----------------------------------------------------------------------
def intersect_ray_with_sphere(ray: Ray, sphere: Sphere) -> float:
    """
    Ближайший положительный корень. Если начало луча внутри сферы,
    возвращается дальний корень. Формула предполагает единичный direction.
    """
    return _kernels.ray_sphere(*_ray_args(ray), sphere.center_x, sphere.center_y,
                               sphere.center_z, sphere.radius)


def intersect_ray_with_aabb(ray: Ray, aabb: AABB) -> float:
    """Минимум из шести пересечений с гранями, попавших внутрь коробки."""
    return _kernels.ray_aabb(*_ray_args(ray), *_box_bounds(aabb))


def intersect_ray_with_triangle(ray: Ray, point1, point2, point3) -> float:
    """Möller–Trumbore. Вырожденный треугольник (divisor == 0) – NO_HIT."""
    return _kernels.ray_triangle(*_ray_args(ray), *as_xyz(point1), *as_xyz(point2),
                                 *as_xyz(point3))


def intersect_ray_with_line(ray: Ray, line_start, line_end,
                            hit_distance: Optional[float] = None,
                            epsilon: Optional[float] = None) -> float:
    """
    Сближение луча с отрезком [line_start, line_end].

    Если минимальное расстояние между прямыми меньше hit_distance
    (по умолчанию 0.1), возвращается длина ближайшего из двух отрезков
    до точек сближения; иначе NO_HIT.

    epsilon по умолчанию равен e ≈ 2.718 – так было исходно, хотя
    ожидался бы малый допуск. Он же обнуляет параметры sc/tc, если их
    числители по модулю меньше epsilon: короткие отрезки тогда
    «прилипают» к своему началу, а длина по ним получается 0. Оба
    значения берутся из Config, если не переданы явно.
    """
    if hit_distance is None or epsilon is None:
        cfg = Config()
        if hit_distance is None:
            hit_distance = cfg.section_value("intersections", "ray_line_hit_distance")
        if epsilon is None:
            epsilon = cfg.section_value("intersections", "ray_line_parallel_epsilon")
    return _kernels.ray_line(*_ray_args(ray), *as_xyz(line_start), *as_xyz(line_end),
                             float(hit_distance), float(epsilon))


# ----------------------------------------------------------------------
# Отрезок / плоскость, коробка / плоскость
# ----------------------------------------------------------------------
def intersect_line_with_plane(p0, p1, normal, point,
                              store: Optional[Vec3] = None) -> LinePlaneResult:
    """
    NONE  – пересечения нет;
    POINT – точка пересечения записана в store (если он передан);
    LINE  – отрезок целиком лежит в плоскости, store не трогается.
    """
    code, x, y, z = _kernels.line_plane(*as_xyz(p0), *as_xyz(p1), *as_xyz(normal),
                                        *as_xyz(point))
    if code == LinePlaneResult.POINT and store is not None:
        store.set(x, y, z)
    return LinePlaneResult(code)


def intersect_aabb_with_plane(normal, point, aabb: AABB, store: Sequence[Vec3]) -> int:
    """
    Разрезать коробку плоскостью: до шести точек на рёбрах.

    store – заранее выделенные шесть Vec3; вернётся число записанных точек.
    Плоскость через вершину даёт повторяющиеся точки (по одной на ребро).
    """
    out = np.empty((_kernels.MAX_BOX_PLANE_POINTS, 3), dtype=np.float64)
    count = _kernels.box_plane(*as_xyz(normal), *as_xyz(point), *_box_bounds(aabb), out)
    for i in range(count):
        store[i].set(out[i, 0], out[i, 1], out[i, 2])
    return count
