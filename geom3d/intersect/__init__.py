"""
Пакет intersect – узкая фаза: тесты пересечений и проекции.

Все функции чистые и без состояния; расстояния при промахе равны +inf
(NO_HIT). Вычисления выполняют Numba‑ядра из `_kernels`; `warmup()`
компилирует их заранее, чтобы первый вызов не платил за JIT.
"""

from geom3d.intersect._kernels import warmup
from geom3d.intersect.intersections import (
    NO_HIT,
    LinePlaneResult,
    intersect_aabb_with_aabb,
    intersect_aabb_with_extents,
    intersect_aabb_with_frustum,
    intersect_aabb_with_plane,
    intersect_aabb_with_sphere,
    intersect_aabb_with_sphere_at,
    intersect_line_with_plane,
    intersect_ray_with_aabb,
    intersect_ray_with_disk,
    intersect_ray_with_line,
    intersect_ray_with_negative_x_axis_plane,
    intersect_ray_with_negative_y_axis_plane,
    intersect_ray_with_negative_z_axis_plane,
    intersect_ray_with_plane,
    intersect_ray_with_plane_in_box,
    intersect_ray_with_positive_x_axis_plane,
    intersect_ray_with_positive_y_axis_plane,
    intersect_ray_with_positive_z_axis_plane,
    intersect_ray_with_sphere,
    intersect_ray_with_triangle,
    intersect_sphere_with_frustum,
    intersect_sphere_with_sphere,
)
from geom3d.intersect.projections import project_point_onto_plane

__all__ = [
    "NO_HIT",
    "LinePlaneResult",
    "intersect_aabb_with_aabb",
    "intersect_aabb_with_extents",
    "intersect_aabb_with_frustum",
    "intersect_aabb_with_plane",
    "intersect_aabb_with_sphere",
    "intersect_aabb_with_sphere_at",
    "intersect_line_with_plane",
    "intersect_ray_with_aabb",
    "intersect_ray_with_disk",
    "intersect_ray_with_line",
    "intersect_ray_with_negative_x_axis_plane",
    "intersect_ray_with_negative_y_axis_plane",
    "intersect_ray_with_negative_z_axis_plane",
    "intersect_ray_with_plane",
    "intersect_ray_with_plane_in_box",
    "intersect_ray_with_positive_x_axis_plane",
    "intersect_ray_with_positive_y_axis_plane",
    "intersect_ray_with_positive_z_axis_plane",
    "intersect_ray_with_sphere",
    "intersect_ray_with_triangle",
    "intersect_sphere_with_frustum",
    "intersect_sphere_with_sphere",
    "project_point_onto_plane",
    "warmup",
]
