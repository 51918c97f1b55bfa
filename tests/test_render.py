"""
Tests for the SVG overlay renderer.

Run with:  pytest tests/test_render.py -v
"""
import re
import xml.etree.ElementTree as ET
import pytest

from lenslink.schema.types import (
    LegendConfig, LegendLabel, Rectangle, ScaleConfig, ScaleText, Scene, ViewBox,
)
from lenslink.render.svg import render_scene, write_svg

NS = {"svg": "http://www.w3.org/2000/svg"}

def R(x, y, w, h):
    return Rectangle(x=x, y=y, width=w, height=h)

@pytest.fixture
def scene():
    return Scene(viewbox=ViewBox(width=200, height=100),
                 source=R(0, 0, 10, 10), lens=R(100, 0, 20, 20))

def connector_coords(svg: str):
    root = ET.fromstring(svg.encode("utf-8"))
    lines = root.findall("svg:g[@id='connectors']/svg:line", NS)
    return [tuple(float(l.get(k)) for k in ("x1", "y1", "x2", "y2")) for l in lines]


class TestRenderScene:
    def test_is_well_formed_with_viewbox(self, scene):
        root = ET.fromstring(render_scene(scene).encode("utf-8"))
        assert root.get("viewBox") == "0 0 200 100"

    def test_two_connectors_match_engine(self, scene):
        assert connector_coords(render_scene(scene)) == [(10, 0, 100, 0), (10, 10, 100, 20)]

    def test_frames_drawn(self, scene):
        svg = render_scene(scene)
        assert 'id="source" x="0" y="0" width="10" height="10"' in svg
        assert 'id="lens" x="100" y="0" width="20" height="20"' in svg

    def test_images_optional(self, scene):
        svg = render_scene(scene)
        assert "<image" not in svg
        svg = render_scene(scene, magnified_href="data:image/png;base64,AAAA", image_href="base.png")
        assert 'id="magnified" x="100" y="0" width="20" height="20"' in svg
        assert 'preserveAspectRatio="none"' in svg
        assert 'href="base.png"' in svg

    def test_degenerate_scene_collapses_to_origin(self):
        bad = Scene(viewbox=ViewBox(width=10, height=10), source=R(0, 0, -5, 10), lens=R(1, 1, 2, 2))
        assert connector_coords(render_scene(bad)) == [(0, 0, 0, 0), (0, 0, 0, 0)]

    def test_style_override(self, scene):
        style = {"connector": {"stroke": "#ff0000", "stroke_width": 2.5, "dasharray": "4 2"}}
        svg = render_scene(scene, style=style)
        assert len(re.findall(r'stroke="#ff0000" stroke-width="2.5" stroke-dasharray="4 2"', svg)) == 2

    def test_partial_style_keeps_defaults(self, scene):
        svg = render_scene(scene, style={"connector": {"stroke": "#f00"}, "lens": {"stroke_width": 3}})
        assert svg.count('stroke="#f00" stroke-width="1" />') == 2
        assert 'id="lens" x="100" y="0" width="20" height="20" fill="none" stroke="#1f77b4" stroke-width="3"' in svg

    def test_legend_and_scale(self, scene):
        legend = LegendConfig(enable=True, x=150, y=50, width=40, height=20,
                              colors=[["#000", "#fff"], ["#f00"]],
                              labels=[LegendLabel(text="A & B"), LegendLabel(text="<C>")])
        scale = ScaleConfig(enable=True, x=10, y=80, width=50, height=10, text=ScaleText(text="10 µm"))
        svg = render_scene(scene.model_copy(update={"legend": legend, "scale": scale}))
        ET.fromstring(svg.encode("utf-8"))
        assert '<g id="legend">' in svg and '<g id="scale">' in svg
        assert "A &amp; B" in svg and "&lt;C&gt;" in svg
        assert "10 µm" in svg

    def test_disabled_overlays_skipped(self, scene):
        svg = render_scene(scene.model_copy(update={"legend": LegendConfig(), "scale": ScaleConfig()}))
        assert "legend" not in svg and 'id="scale"' not in svg

    def test_write_svg(self, scene, tmp_path):
        out = tmp_path / "sub" / "overlay.svg"
        write_svg(render_scene(scene), out)
        assert out.read_text(encoding="utf-8").startswith("<?xml")
