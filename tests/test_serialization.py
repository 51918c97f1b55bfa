"""
Tests for scene files and connector JSON.

Run with:  pytest tests/test_serialization.py -v
"""
import json
import pytest
from pydantic import ValidationError

from lenslink.schema.types import LegendConfig, LegendLabel, Rectangle, Scene, Segment, ViewBox
from lenslink.schema.serialization import (
    connectors_to_dict, load_scene, save_scene, write_connectors_json,
)
from lenslink.utils.io import write_yaml

def R(x, y, w, h):
    return Rectangle(x=x, y=y, width=w, height=h)

@pytest.fixture
def scene():
    return Scene(
        viewbox=ViewBox(width=640, height=480),
        source=R(10, 20, 30, 40),
        lens=R(300, 200, 120, 160),
        legend=LegendConfig(enable=True, colors=[["#000"]], labels=[LegendLabel(text="a")]),
    )


class TestScene:
    @pytest.mark.parametrize("name", ["scene.yaml", "scene.yml", "scene.json"])
    def test_save_then_load(self, scene, tmp_path, name):
        p = tmp_path / name
        save_scene(scene, p)
        assert load_scene(p) == scene

    def test_relative_image_resolved_against_scene(self, tmp_path):
        write_yaml({
            "image": "pics/cells.png",
            "viewbox": {"width": 100, "height": 100},
            "source": {"x": 0, "y": 0, "width": 10, "height": 10},
            "lens": {"x": 50, "y": 50, "width": 40, "height": 40},
        }, tmp_path / "scene.yaml")
        sc = load_scene(tmp_path / "scene.yaml")
        assert sc.image == str((tmp_path / "pics" / "cells.png").resolve())

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scene(tmp_path / "missing.yaml")

    def test_missing_field(self, tmp_path):
        p = tmp_path / "scene.json"
        p.write_text(json.dumps({"viewbox": {"width": 1, "height": 1},
                                 "source": {"x": 0, "y": 0, "width": 1}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_scene(p)

    def test_invalid_geometry_is_accepted(self, tmp_path):
        # a rectangle with negative width is still a scene; the engine absorbs it
        p = tmp_path / "scene.json"
        p.write_text(json.dumps({
            "viewbox": {"width": 10, "height": 10},
            "source": {"x": 0, "y": 0, "width": -5, "height": 10},
            "lens": {"x": 5, "y": 5, "width": 2, "height": 2},
        }), encoding="utf-8")
        assert load_scene(p).source.width == -5


class TestConnectorJson:
    def test_shape(self):
        pair = (Segment(x1=1, y1=2, x2=3, y2=4), Segment(x1=5, y1=6, x2=7, y2=8))
        assert connectors_to_dict(pair) == {"segments": [
            {"x1": 1.0, "y1": 2.0, "x2": 3.0, "y2": 4.0},
            {"x1": 5.0, "y1": 6.0, "x2": 7.0, "y2": 8.0},
        ]}

    def test_write(self, tmp_path):
        pair = (Segment(x1=0, y1=0, x2=1, y2=1), Segment(x1=0, y1=1, x2=1, y2=0))
        out = tmp_path / "out" / "connectors.json"
        write_connectors_json(pair, out)
        assert len(json.loads(out.read_text(encoding="utf-8"))["segments"]) == 2
