# setup.py
from setuptools import setup, find_packages

setup(
    name="geom3d",
    version="1.0.0",
    description="Narrow-phase 3D intersection toolkit: AABB, spheres, rays, frustum tests",
    packages=find_packages(include=["geom3d", "geom3d.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.22.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
