# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов geom3d.
"""

import pytest

from geom3d.culling.frustum import Frustum
from geom3d.geometry import AABB, Sphere
from geom3d.utils.config import Config


# ----------------------------------------------------------------------
# Изоляция конфигурации: каждый тест видит «чистый» Config в tmp_path
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield tmp_path
    Config.reset()


@pytest.fixture
def unit_box() -> AABB:
    """extent (1,1,1) в начале координат."""
    return AABB()


@pytest.fixture
def unit_sphere() -> Sphere:
    return Sphere((0.0, 0.0, 0.0), 1.0)


@pytest.fixture
def frustum() -> Frustum:
    """Камера в (0,0,5) смотрит на начало координат, fov 60°, near 0.1, far 100."""
    return Frustum.from_camera(
        eye=(0.0, 0.0, 5.0),
        target=(0.0, 0.0, 0.0),
        up=(0.0, 1.0, 0.0),
        fov_deg=60.0,
        aspect=1.0,
        z_near=0.1,
        z_far=100.0,
    )
