# -*- coding: utf-8 -*-
"""
Тесты geom3d.intersect: луч/тела, отрезок/плоскость, срез коробки,
объём/объём и объём/frustum.
"""
import math

import pytest

from geom3d.geometry import AABB, Ray, Sphere
from geom3d.intersect import (
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
    project_point_onto_plane,
    warmup,
)
from geom3d.culling import FrustumIntersection
from geom3d.math import Vec3
from geom3d.utils.config import Config


def test_warmup_reports_elapsed_time():
    assert warmup() >= 0.0


# ----------------------------------------------------------------------
# Луч / сфера
# ----------------------------------------------------------------------
def test_ray_sphere_hit_distance():
    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_sphere(ray, Sphere((0, 0, 10), 2)) == pytest.approx(8.0)


def test_ray_sphere_pointing_away():
    ray = Ray(direction=(0, 0, -1))
    assert intersect_ray_with_sphere(ray, Sphere((0, 0, 10), 2)) == NO_HIT


def test_ray_sphere_miss():
    ray = Ray(direction=(0, 0, 1), origin=(5, 0, 0))
    assert intersect_ray_with_sphere(ray, Sphere((0, 0, 10), 2)) == math.inf


def test_ray_sphere_from_inside_returns_far_root(unit_sphere):
    assert intersect_ray_with_sphere(Ray(), unit_sphere) == pytest.approx(1.0)


# ----------------------------------------------------------------------
# Луч / плоскость, диск
# ----------------------------------------------------------------------
def test_ray_plane_hit():
    ray = Ray(direction=(0, -1, 0), origin=(0, 5, 0))
    assert intersect_ray_with_plane(ray, (0, 1, 0), (0, 0, 0)) == pytest.approx(5.0)


def test_ray_plane_behind_origin():
    ray = Ray(direction=(0, 1, 0), origin=(0, 5, 0))
    assert intersect_ray_with_plane(ray, (0, 1, 0), (0, 0, 0)) == NO_HIT


def test_parallel_ray_never_hits_plane():
    above = Ray(direction=(1, 0, 0), origin=(0, 1, 0))
    assert intersect_ray_with_plane(above, Vec3(0, 1, 0), Vec3(0, 0, 0)) == NO_HIT

    # луч лежит в плоскости: 0/0 → NaN → NO_HIT
    inside = Ray(direction=(1, 0, 0), origin=(0, 0, 0))
    assert intersect_ray_with_plane(inside, (0, 1, 0), (0, 0, 0)) == NO_HIT


def test_axis_planes():
    down = Ray(direction=(0, -1, 0), origin=(0, 5, 0))
    assert intersect_ray_with_positive_y_axis_plane(down) == pytest.approx(5.0)
    assert intersect_ray_with_negative_y_axis_plane(down) == pytest.approx(5.0)
    assert intersect_ray_with_positive_x_axis_plane(down) == NO_HIT

    left = Ray(direction=(-1, 0, 0), origin=(3, 0, 0))
    assert intersect_ray_with_positive_x_axis_plane(left) == pytest.approx(3.0)
    assert intersect_ray_with_negative_x_axis_plane(left) == pytest.approx(3.0)

    back = Ray(direction=(0, 0, 1), origin=(0, 0, -2))
    assert intersect_ray_with_positive_z_axis_plane(back) == pytest.approx(2.0)
    assert intersect_ray_with_negative_z_axis_plane(back) == pytest.approx(2.0)


def test_ray_plane_in_box(unit_box):
    ray = Ray(direction=(0, -1, 0), origin=(0, 5, 0))
    assert intersect_ray_with_plane_in_box(ray, (0, 1, 0), (0, 0, 0), unit_box) \
        == pytest.approx(5.0)

    unit_box.set_origin(5, 0, 0)
    assert intersect_ray_with_plane_in_box(ray, (0, 1, 0), (0, 0, 0), unit_box) == NO_HIT


def test_ray_disk():
    hit = Ray(direction=(0, 0, 1), origin=(0.5, 0, -5))
    assert intersect_ray_with_disk(hit, (0, 0, 1), (0, 0, 0), 1.0) == pytest.approx(5.0)

    miss = Ray(direction=(0, 0, 1), origin=(2, 0, -5))
    assert intersect_ray_with_disk(miss, (0, 0, 1), (0, 0, 0), 1.0) == NO_HIT


# ----------------------------------------------------------------------
# Луч / AABB
# ----------------------------------------------------------------------
def test_ray_aabb_nearest_face(unit_box):
    ray = Ray(direction=(0, 0, 1), origin=(0, 0, -5))
    assert intersect_ray_with_aabb(ray, unit_box) == pytest.approx(4.0)


def test_ray_aabb_miss(unit_box):
    ray = Ray(direction=(0, 0, 1), origin=(5, 0, -5))
    assert intersect_ray_with_aabb(ray, unit_box) == NO_HIT


def test_ray_aabb_from_inside_hits_exit_face(unit_box):
    assert intersect_ray_with_aabb(Ray(), unit_box) == pytest.approx(1.0)


# ----------------------------------------------------------------------
# Луч / треугольник
# ----------------------------------------------------------------------
TRIANGLE = ((0, 0, 0), (1, 0, 0), (0, 1, 0))


def test_ray_triangle_hit():
    ray = Ray(direction=(0, 0, -1), origin=(0.2, 0.2, 1))
    assert intersect_ray_with_triangle(ray, *TRIANGLE) == pytest.approx(1.0)


def test_ray_triangle_miss_outside():
    ray = Ray(direction=(0, 0, -1), origin=(2, 2, 1))
    assert intersect_ray_with_triangle(ray, *TRIANGLE) == NO_HIT


def test_ray_triangle_behind():
    ray = Ray(direction=(0, 0, 1), origin=(0.2, 0.2, 1))
    assert intersect_ray_with_triangle(ray, *TRIANGLE) == NO_HIT


def test_ray_triangle_parallel():
    ray = Ray(direction=(1, 0, 0), origin=(0.2, 0.2, 1))
    assert intersect_ray_with_triangle(ray, *TRIANGLE) == NO_HIT


# ----------------------------------------------------------------------
# Луч / отрезок
# ----------------------------------------------------------------------
def test_ray_line_hit_returns_shorter_leg():
    # сближение в (0, 0, 5): по лучу 5, по отрезку 4 – возвращается 4
    ray = Ray(direction=(0, 0, 1))
    t = intersect_ray_with_line(ray, (-4, 0, 5), (4, 0, 5))
    assert t == pytest.approx(4.0)


def test_ray_line_short_segment_misses_with_default_epsilon():
    # t_n = 2 < e: tc обнуляется, ближайшая точка отрезка – его начало,
    # зазор 1.0 больше порога 0.1
    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_line(ray, (-1, 0, 5), (1, 0, 5)) == NO_HIT


def test_ray_line_miss():
    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_line(ray, (-4, 1, 5), (4, 1, 5)) == NO_HIT


def test_ray_line_explicit_hit_distance():
    # зазор √2 < 2, но tc обнулён, поэтому длина по отрезку равна 0
    ray = Ray(direction=(0, 0, 1))
    t = intersect_ray_with_line(ray, (-1, 1, 5), (1, 1, 5), hit_distance=2.0)
    assert t == 0.0


def test_ray_line_tolerance_from_config():
    Config()["intersections"] = {"ray_line_hit_distance": 2.0}
    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_line(ray, (-1, 1, 5), (1, 1, 5)) == 0.0


def test_ray_line_near_parallel_branch_fires_below_e():
    # D = 1: меньше e, поэтому ветка «почти параллельны» срабатывает
    # даже для перпендикулярных прямых
    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_line(ray, (-0.5, 0, 5), (0.5, 0, 5)) == NO_HIT


def test_ray_line_explicit_epsilon():
    ray = Ray(direction=(0, 0, 1))
    t = intersect_ray_with_line(ray, (-0.5, 0, 5), (0.5, 0, 5), epsilon=1e-6)
    assert t == pytest.approx(0.5)


def test_ray_line_epsilon_from_config():
    Config()["intersections"] = {"ray_line_parallel_epsilon": 1e-6}
    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_line(ray, (-0.5, 0, 5), (0.5, 0, 5)) == pytest.approx(0.5)


# ----------------------------------------------------------------------
# Отрезок / плоскость
# ----------------------------------------------------------------------
def test_line_plane_point():
    store = Vec3(9, 9, 9)
    result = intersect_line_with_plane((0, -1, 0), (0, 1, 0), (0, 1, 0), (0, 0, 0), store)
    assert result == LinePlaneResult.POINT
    assert result == 1
    assert store.to_tuple() == (0.0, 0.0, 0.0)


def test_line_plane_none_leaves_store():
    store = Vec3(9, 9, 9)
    result = intersect_line_with_plane((0, 1, 0), (0, 2, 0), (0, 1, 0), (0, 0, 0), store)
    assert result == LinePlaneResult.NONE
    assert store.to_tuple() == (9.0, 9.0, 9.0)


def test_line_plane_segment_in_plane():
    store = Vec3(9, 9, 9)
    result = intersect_line_with_plane((-1, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 0), store)
    assert result == LinePlaneResult.LINE
    assert result == 2
    assert store.to_tuple() == (9.0, 9.0, 9.0)


def test_line_plane_parallel_offset():
    result = intersect_line_with_plane((-1, 1, 0), (1, 1, 0), (0, 1, 0), (0, 0, 0))
    assert result == LinePlaneResult.NONE


# ----------------------------------------------------------------------
# AABB / плоскость
# ----------------------------------------------------------------------
def _stores(n=6):
    return [Vec3(7, 7, 7) for _ in range(n)]


def test_box_plane_mid_section(unit_box):
    store = _stores()
    count = intersect_aabb_with_plane((0, 1, 0), (0, 0, 0), unit_box, store)
    assert count == 4
    points = {p.to_tuple() for p in store[:4]}
    assert points == {(-1.0, 0.0, -1.0), (1.0, 0.0, -1.0),
                      (1.0, 0.0, 1.0), (-1.0, 0.0, 1.0)}
    assert store[4].to_tuple() == (7.0, 7.0, 7.0)


def test_box_plane_hexagon(unit_box):
    store = _stores()
    assert intersect_aabb_with_plane((1, 1, 1), (0, 0, 0), unit_box, store) == 6


def test_box_plane_through_edges_is_capped_at_six(unit_box):
    # плоскость x = y проходит через две пары рёбер: 8 кандидатов, записано 6
    store = _stores(8)
    count = intersect_aabb_with_plane((1, -1, 0), (0, 0, 0), unit_box, store)
    assert count == 6
    assert store[6].to_tuple() == (7.0, 7.0, 7.0)


def test_box_plane_miss(unit_box):
    store = _stores()
    assert intersect_aabb_with_plane((0, 1, 0), (0, 5, 0), unit_box, store) == 0


# ----------------------------------------------------------------------
# Объём / объём
# ----------------------------------------------------------------------
def test_aabb_sphere(unit_box):
    assert intersect_aabb_with_sphere(unit_box, Sphere((0, 3, 0), 2))      # касание
    assert not intersect_aabb_with_sphere(unit_box, Sphere((0, 3, 0), 1.9))
    assert intersect_aabb_with_sphere_at(unit_box, (3, 0, 0), 2.5)
    assert not intersect_aabb_with_sphere_at(unit_box, Vec3(3, 3, 3), 3.0)


def test_aabb_aabb_and_extents(unit_box):
    assert intersect_aabb_with_aabb(unit_box, AABB(origin=(1.999, 0, 0)))
    assert not intersect_aabb_with_aabb(unit_box, AABB(origin=(2.0, 0, 0)))
    assert intersect_aabb_with_extents(unit_box, (1, 1, 1), (1.5, 0, 0))
    assert not intersect_aabb_with_extents(unit_box, (1, 1, 1), (0, 0, 2))


def test_sphere_sphere():
    assert intersect_sphere_with_sphere(Sphere((0, 0, 0), 1), Sphere((1, 0, 0), 1))
    assert not intersect_sphere_with_sphere(Sphere((0, 0, 0), 1), Sphere((3, 0, 0), 1))


# ----------------------------------------------------------------------
# Frustum
# ----------------------------------------------------------------------
def test_aabb_frustum(frustum, unit_box):
    assert intersect_aabb_with_frustum(unit_box, frustum)
    assert not intersect_aabb_with_frustum(AABB(origin=(0, 0, 50)), frustum)
    assert not intersect_aabb_with_frustum(AABB(origin=(100, 0, 0)), frustum)


class _FixedCuller:
    """Заглушка frustum‑а с фиксированным ответом."""

    def __init__(self, answer):
        self.answer = answer
        self.calls = []

    def classify_aabb(self, *bounds):
        self.calls.append(bounds)
        return self.answer

    def is_sphere_inside(self, x, y, z, radius):
        self.calls.append((x, y, z, radius))
        return self.answer == FrustumIntersection.INSIDE


@pytest.mark.parametrize("answer, expected", [
    (FrustumIntersection.INSIDE, True),
    (FrustumIntersection.INTERSECT, True),
    (FrustumIntersection.OUTSIDE, False),
])
def test_aabb_frustum_uses_classification(unit_box, answer, expected):
    culler = _FixedCuller(answer)
    assert intersect_aabb_with_frustum(unit_box.move(1, 0, 0), culler) is expected
    assert culler.calls == [(0.0, -1.0, -1.0, 2.0, 1.0, 1.0)]


def test_sphere_frustum(frustum, unit_sphere):
    assert intersect_sphere_with_frustum(unit_sphere, frustum)
    assert not intersect_sphere_with_frustum(Sphere((0, 0, 50), 1), frustum)

    culler = _FixedCuller(FrustumIntersection.INSIDE)
    assert intersect_sphere_with_frustum(Sphere((1, 2, 3), 4), culler)
    assert culler.calls == [(1.0, 2.0, 3.0, 4.0)]


# ----------------------------------------------------------------------
# Проекции
# ----------------------------------------------------------------------
def test_project_point_onto_plane():
    p = project_point_onto_plane((1, 5, 2), (0, 1, 0), (0, 1, 0))
    assert p.to_tuple() == (1.0, 1.0, 2.0)

    store = Vec3()
    assert project_point_onto_plane(Vec3(3, 3, 3), (0, 0, 1), (0, 0, 0), store) is store
    assert store.to_tuple() == (3.0, 3.0, 0.0)
