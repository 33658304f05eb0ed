# -*- coding: utf-8 -*-
"""
geom3d/intersect/_kernels.py

Скалярные Numba‑ядра для тестов пересечений. Вся арифметика с
делением живёт здесь: error_model="numpy" превращает деление на ноль
в ±inf/NaN вместо ZeroDivisionError, а `NaN > 0` ложно – значит,
вырожденная геометрия сама собой даёт сентинел «нет попадания» (+inf).

Ядра принимают распакованные float‑ы (никаких объектов), поэтому
обёртки в intersections.py лишь разворачивают AABB/Ray/Vec3 в скаляры.
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit

from geom3d.utils.logger import logger
from geom3d.utils.profiler import Profiler

INF = math.inf

# Float.MIN_VALUE из float32 – наименьшее положительное представимое число.
FLOAT32_MIN_VALUE = float(np.finfo(np.float32).smallest_subnormal)

# Результаты отрезок/плоскость
LINE_PLANE_NONE = 0
LINE_PLANE_POINT = 1
LINE_PLANE_LINE = 2

# Рёбра коробки как пары индексов углов. Угол i: бит 0 → max_x,
# бит 1 → max_y, бит 2 → max_z. Порядок: 4 вертикальных, 4 нижних, 4 верхних.
BOX_EDGES = np.array([
    [0, 2], [1, 3], [5, 7], [4, 6],
    [0, 1], [4, 5], [0, 4], [1, 5],
    [2, 3], [6, 7], [2, 6], [3, 7],
], dtype=np.int64)

MAX_BOX_PLANE_POINTS = 6


# ----------------------------------------------------------------------
# Луч / плоскость
# ----------------------------------------------------------------------
@njit(error_model="numpy")
def ray_plane(ox, oy, oz, dx, dy, dz, nx, ny, nz, px, py, pz):
    """t = -(N·O + (-N·P)) / (N·D); t > 0, иначе +inf."""
    ndr = nx * dx + ny * dy + nz * dz
    nndp = -(nx * px + ny * py + nz * pz)
    ndo = nx * ox + ny * oy + nz * oz
    t = -((ndo + nndp) / ndr)
    if t > 0.0:
        return t
    return INF


@njit(error_model="numpy")
def ray_plane_in_box(ox, oy, oz, dx, dy, dz, nx, ny, nz, px, py, pz,
                     min_x, min_y, min_z, max_x, max_y, max_z):
    t = ray_plane(ox, oy, oz, dx, dy, dz, nx, ny, nz, px, py, pz)

    hx = ox + dx * t
    hy = oy + dy * t
    hz = oz + dz * t

    if (min_x <= hx <= max_x and min_y <= hy <= max_y and min_z <= hz <= max_z):
        return t
    return INF


@njit(error_model="numpy")
def ray_disk(ox, oy, oz, dx, dy, dz, nx, ny, nz, cx, cy, cz, radius):
    t = ray_plane(ox, oy, oz, dx, dy, dz, nx, ny, nz, cx, cy, cz)
    if t < INF:
        vx = ox + dx * t - cx
        vy = oy + dy * t - cy
        vz = oz + dz * t - cz
        if vx * vx + vy * vy + vz * vz <= radius * radius:
            return t
    return INF


# ----------------------------------------------------------------------
# Луч / сфера
# ----------------------------------------------------------------------
@njit(error_model="numpy")
def ray_sphere(ox, oy, oz, dx, dy, dz, cx, cy, cz, radius):
    """
    Дискриминант в форме для единичного direction:
        b = V·D,  disc = b² - V·V + r²,  V = C - O
    Ближайший положительный корень; изнутри сферы – дальний (t2).
    """
    vx = cx - ox
    vy = cy - oy
    vz = cz - oz

    b = vx * dx + vy * dy + vz * dz
    v_dot = vx * vx + vy * vy + vz * vz
    disc = b * b - v_dot + radius * radius

    if disc < 0.0:
        return INF

    d = math.sqrt(disc)
    t2 = b + d
    if t2 < 0.0:
        return INF

    t1 = b - d
    if t1 > 0.0:
        return t1
    return t2


# ----------------------------------------------------------------------
# Луч / AABB (шесть граней, каждая проверяется на попадание внутрь)
# ----------------------------------------------------------------------
@njit(error_model="numpy")
def ray_aabb(ox, oy, oz, dx, dy, dz, min_x, min_y, min_z, max_x, max_y, max_z):
    t_top = ray_plane_in_box(ox, oy, oz, dx, dy, dz, 0.0, 1.0, 0.0, 0.0, max_y, 0.0,
                             min_x, min_y, min_z, max_x, max_y, max_z)
    t_bottom = ray_plane_in_box(ox, oy, oz, dx, dy, dz, 0.0, -1.0, 0.0, 0.0, min_y, 0.0,
                                min_x, min_y, min_z, max_x, max_y, max_z)
    t_left = ray_plane_in_box(ox, oy, oz, dx, dy, dz, -1.0, 0.0, 0.0, min_x, 0.0, 0.0,
                              min_x, min_y, min_z, max_x, max_y, max_z)
    t_right = ray_plane_in_box(ox, oy, oz, dx, dy, dz, 1.0, 0.0, 0.0, max_x, 0.0, 0.0,
                               min_x, min_y, min_z, max_x, max_y, max_z)
    t_front = ray_plane_in_box(ox, oy, oz, dx, dy, dz, 0.0, 0.0, 1.0, 0.0, 0.0, max_z,
                               min_x, min_y, min_z, max_x, max_y, max_z)
    t_back = ray_plane_in_box(ox, oy, oz, dx, dy, dz, 0.0, 0.0, -1.0, 0.0, 0.0, min_z,
                              min_x, min_y, min_z, max_x, max_y, max_z)
    return min(t_top, t_bottom, t_left, t_right, t_front, t_back)


# ----------------------------------------------------------------------
# Луч / треугольник (Möller–Trumbore)
# ----------------------------------------------------------------------
@njit(error_model="numpy")
def ray_triangle(ox, oy, oz, dx, dy, dz,
                 ax, ay, az, bx, by, bz, cx, cy, cz):
    edge1_x = bx - ax
    edge1_y = by - ay
    edge1_z = bz - az

    edge2_x = cx - ax
    edge2_y = cy - ay
    edge2_z = cz - az

    # s1 = direction × edge2
    s1_x = dy * edge2_z - dz * edge2_y
    s1_y = dz * edge2_x - dx * edge2_z
    s1_z = dx * edge2_y - dy * edge2_x

    divisor = s1_x * edge1_x + s1_y * edge1_y + s1_z * edge1_z
    # точное сравнение с нулём, без эпсилона
    if divisor == 0.0:
        return INF

    inv_divisor = 1.0 / divisor

    dist_x = ox - ax
    dist_y = oy - ay
    dist_z = oz - az

    bary_1 = (dist_x * s1_x + dist_y * s1_y + dist_z * s1_z) * inv_divisor
    if bary_1 < 0.0 or bary_1 > 1.0:
        return INF

    # s2 = distance × edge1
    s2_x = dist_y * edge1_z - dist_z * edge1_y
    s2_y = dist_z * edge1_x - dist_x * edge1_z
    s2_z = dist_x * edge1_y - dist_y * edge1_x

    bary_2 = (dx * s2_x + dy * s2_y + dz * s2_z) * inv_divisor
    if bary_2 < 0.0 or bary_1 + bary_2 > 1.0:
        return INF

    t = (edge2_x * s2_x + edge2_y * s2_y + edge2_z * s2_z) * inv_divisor
    if t >= 0.0:
        return t
    return INF


# ----------------------------------------------------------------------
# Луч / отрезок (ближайшее сближение двух прямых)
# ----------------------------------------------------------------------
@njit(error_model="numpy")
def ray_line(ox, oy, oz, ux, uy, uz, sx, sy, sz, ex, ey, ez,
             hit_distance, epsilon):
    vx = ex - sx
    vy = ey - sy
    vz = ez - sz

    wx = ox - sx
    wy = oy - sy
    wz = oz - sz

    a = ux * ux + uy * uy + uz * uz
    b = ux * vx + uy * vy + uz * vz
    c = vx * vx + vy * vy + vz * vz
    d = ux * wx + uy * wy + uz * wz
    e = vx * wx + vy * wy + vz * wz
    big_d = a * c - b * b

    s_d = big_d
    t_d = big_d

    if big_d < epsilon:
        # почти параллельны: берём начало луча
        s_n = 0.0
        s_d = 1.0
        t_n = e
        t_d = c
    else:
        s_n = b * e - c * d
        t_n = a * e - b * d
        if s_n < 0.0:
            s_n = 0.0
            t_n = e
            t_d = c

    if t_n < 0.0:
        t_n = 0.0
        if -d < 0.0:
            s_n = 0.0
        else:
            s_n = -d
            s_d = a
    elif t_n > t_d:
        t_n = t_d
        if -d + b < 0.0:
            s_n = 0.0
        else:
            s_n = -d + b
            s_d = a

    # тот же epsilon обнуляет малые числители
    sc = 0.0 if abs(s_n) < epsilon else s_n / s_d
    tc = 0.0 if abs(t_n) < epsilon else t_n / t_d

    usc_x = ux * sc
    usc_y = uy * sc
    usc_z = uz * sc

    vtc_x = vx * tc
    vtc_y = vy * tc
    vtc_z = vz * tc

    dp_x = wx + (usc_x - vtc_x)
    dp_y = wy + (usc_y - vtc_y)
    dp_z = wz + (usc_z - vtc_z)

    dist_to_ray = math.sqrt(dp_x * dp_x + dp_y * dp_y + dp_z * dp_z)
    usc_len = math.sqrt(usc_x * usc_x + usc_y * usc_y + usc_z * usc_z)
    vtc_len = math.sqrt(vtc_x * vtc_x + vtc_y * vtc_y + vtc_z * vtc_z)

    if dist_to_ray < hit_distance:
        return min(usc_len, vtc_len)
    return INF


# ----------------------------------------------------------------------
# Отрезок / плоскость и срез коробки плоскостью
# ----------------------------------------------------------------------
@njit(error_model="numpy")
def line_plane(p0x, p0y, p0z, p1x, p1y, p1z, nx, ny, nz, px, py, pz):
    """Возврат (код, x, y, z); точка имеет смысл только при коде POINT."""
    ux = p1x - p0x
    uy = p1y - p0y
    uz = p1z - p0z

    wx = p0x - px
    wy = p0y - py
    wz = p0z - pz

    den = nx * ux + ny * uy + nz * uz
    num = -(nx * wx + ny * wy + nz * wz)

    if abs(den) < FLOAT32_MIN_VALUE:
        # отрезок параллелен плоскости
        if num == 0.0:
            return LINE_PLANE_LINE, 0.0, 0.0, 0.0
        return LINE_PLANE_NONE, 0.0, 0.0, 0.0

    s = num / den
    if s < 0.0 or s > 1.0:
        return LINE_PLANE_NONE, 0.0, 0.0, 0.0

    return LINE_PLANE_POINT, p0x + s * ux, p0y + s * uy, p0z + s * uz


@njit
def _box_corner(index, min_x, min_y, min_z, max_x, max_y, max_z):
    x = max_x if (index & 1) != 0 else min_x
    y = max_y if (index & 2) != 0 else min_y
    z = max_z if (index & 4) != 0 else min_z
    return x, y, z


@njit(error_model="numpy")
def box_plane(nx, ny, nz, px, py, pz,
              min_x, min_y, min_z, max_x, max_y, max_z, out):
    """Пересечь 12 рёбер коробки плоскостью; точки пишутся в out (6, 3)."""
    count = 0
    for i in range(BOX_EDGES.shape[0]):
        ax, ay, az = _box_corner(BOX_EDGES[i, 0], min_x, min_y, min_z, max_x, max_y, max_z)
        bx, by, bz = _box_corner(BOX_EDGES[i, 1], min_x, min_y, min_z, max_x, max_y, max_z)
        code, x, y, z = line_plane(ax, ay, az, bx, by, bz, nx, ny, nz, px, py, pz)
        if code == LINE_PLANE_POINT:
            out[count, 0] = x
            out[count, 1] = y
            out[count, 2] = z
            count += 1
            if count >= MAX_BOX_PLANE_POINTS:
                return count
    return count


# ----------------------------------------------------------------------
# Прогрев JIT
# ----------------------------------------------------------------------
def warmup() -> float:
    """Скомпилировать все ядра заранее; вернуть затраченные миллисекунды."""
    with Profiler("geom3d kernels warmup") as prof:
        ray_plane(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0)
        ray_disk(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0)
        ray_sphere(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 5.0, 1.0)
        ray_aabb(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, -1.0, -1.0, 4.0, 1.0, 1.0, 6.0)
        ray_triangle(0.0, 0.0, 1.0, 0.0, 0.0, -1.0,
                     0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0)
        ray_line(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, -1.0, 0.0, 5.0, 1.0, 0.0, 5.0, 0.1, math.e)
        box_plane(0.0, 1.0, 0.0, 0.0, 0.0, 0.0, -1.0, -1.0, -1.0, 1.0, 1.0, 1.0,
                  np.empty((MAX_BOX_PLANE_POINTS, 3), dtype=np.float64))
    logger.info(f"[geom3d] Kernels compiled in {prof.elapsed_ms:.1f} ms.")
    return prof.elapsed_ms
