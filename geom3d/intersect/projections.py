"""
Проекции точек на плоскости.
"""

from typing import Optional

from geom3d.math.vec3 import Vec3, as_xyz, store_or_new


def project_point_onto_plane(point, plane_normal, plane_point,
                             store: Optional[Vec3] = None) -> Vec3:
    """
    Ближайшая к `point` точка плоскости:  q - n · ((q - p) · n).
    plane_normal должен быть единичным.
    """
    qx, qy, qz = as_xyz(point)
    nx, ny, nz = as_xyz(plane_normal)
    px, py, pz = as_xyz(plane_point)

    n_dot_qp = (qx - px) * nx + (qy - py) * ny + (qz - pz) * nz
    return store_or_new(store, qx - nx * n_dot_qp, qy - ny * n_dot_qp, qz - nz * n_dot_qp)
