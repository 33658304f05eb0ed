"""
Математический суб‑пакет: Vec3, Vec4, Mat4.
"""

from geom3d.math.vec3 import Vec3, as_xyz, store_or_new
from geom3d.math.vec4 import Vec4
from geom3d.math.mat4 import Mat4

__all__ = ["Vec3", "Vec4", "Mat4", "as_xyz", "store_or_new"]
