# -*- coding: utf-8 -*-
import json
import math

import pytest

from geom3d.geometry import Ray
from geom3d.intersect import NO_HIT, intersect_ray_with_line
from geom3d.utils import Config, DEFAULT_CONFIG, Profiler


def test_missing_file_gives_defaults_without_writing(isolated_config):
    cfg = Config()
    assert cfg["intersections"] == DEFAULT_CONFIG["intersections"]
    assert not (isolated_config / "geom3d.json").exists()


def test_singleton():
    assert Config() is Config()


def test_defaults_are_not_shared():
    Config()["intersections"]["ray_line_hit_distance"] = 5.0
    assert DEFAULT_CONFIG["intersections"]["ray_line_hit_distance"] == 0.1


def test_setitem_saves_json(isolated_config):
    Config()["intersections"] = {"ray_line_hit_distance": 0.5}
    saved = json.loads((isolated_config / "geom3d.json").read_text(encoding="utf-8"))
    assert saved["intersections"]["ray_line_hit_distance"] == 0.5


def test_loads_existing_file(isolated_config):
    (isolated_config / "geom3d.json").write_text(
        json.dumps({"intersections": {"ray_line_parallel_epsilon": 1e-6}}),
        encoding="utf-8",
    )
    cfg = Config()
    assert cfg.section_value("intersections", "ray_line_parallel_epsilon") == 1e-6
    # отсутствующий ключ берётся из DEFAULT_CONFIG
    assert cfg.section_value("intersections", "ray_line_hit_distance") == 0.1


def test_broken_file_falls_back_to_defaults(isolated_config, caplog):
    (isolated_config / "geom3d.json").write_text("{not json", encoding="utf-8")
    cfg = Config()
    assert cfg.section_value("intersections", "ray_line_parallel_epsilon") == math.e
    assert "Failed to read config" in caplog.text


def test_non_object_file_falls_back_to_defaults(isolated_config, caplog):
    (isolated_config / "geom3d.json").write_text("[]", encoding="utf-8")
    cfg = Config()
    assert cfg["intersections"] == DEFAULT_CONFIG["intersections"]
    assert "Failed to read config" in caplog.text

    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_line(ray, (-4, 0, 5), (4, 0, 5)) == pytest.approx(4.0)


def test_non_object_section_uses_defaults(isolated_config):
    (isolated_config / "geom3d.json").write_text(
        json.dumps({"intersections": 5}), encoding="utf-8")
    cfg = Config()
    assert cfg.section_value("intersections", "ray_line_hit_distance") == 0.1

    ray = Ray(direction=(0, 0, 1))
    assert intersect_ray_with_line(ray, (-4, 1, 5), (4, 1, 5)) == NO_HIT


def test_reset_rereads_file(isolated_config):
    first = Config()
    Config.reset()
    assert Config() is not first


def test_profiler_measures_block():
    with Profiler("noop") as prof:
        sum(range(1000))
    assert prof.elapsed_ms >= 0.0
