"""
Пакет culling – frustum и его протокол.
"""

from geom3d.culling.frustum import Frustum, FrustumCuller, FrustumIntersection, Plane

__all__ = ["Frustum", "FrustumCuller", "FrustumIntersection", "Plane"]
