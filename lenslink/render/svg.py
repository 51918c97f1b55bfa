# SVG overlay: image, source/lens frames, connectors, legend, scale bar
# lenslink/render/svg.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
from xml.sax.saxutils import escape, quoteattr

from loguru import logger
from omegaconf import OmegaConf

from lenslink.schema.types import LegendConfig, Rectangle, ScaleConfig, Scene, Segment
from lenslink.geometry.connectors import compute_connectors
from lenslink.utils.io import write_text

_DEFAULT_STYLE = {
    "source":    {"stroke": "#1f77b4", "stroke_width": 1.0},
    "lens":      {"stroke": "#1f77b4", "stroke_width": 1.0},
    "connector": {"stroke": "#1f77b4", "stroke_width": 1.0, "dasharray": ""},
}

def _f(v: float) -> str:
    return f"{float(v):.4f}".rstrip("0").rstrip(".") or "0"

def _rect(r: Rectangle, stroke: str, stroke_width: float, rid: str) -> str:
    return (f'  <rect id="{rid}" x="{_f(r.x)}" y="{_f(r.y)}" width="{_f(r.width)}" height="{_f(r.height)}" '
            f'fill="none" stroke={quoteattr(stroke)} stroke-width="{_f(stroke_width)}" />')

def _line(s: Segment, style: dict, lid: str) -> str:
    dash = style.get("dasharray") or ""
    dash_attr = f" stroke-dasharray={quoteattr(dash)}" if dash else ""
    return (f'    <line id="{lid}" x1="{_f(s.x1)}" y1="{_f(s.y1)}" x2="{_f(s.x2)}" y2="{_f(s.y2)}" '
            f'stroke={quoteattr(style["stroke"])} stroke-width="{_f(style["stroke_width"])}"{dash_attr} />')

def _legend(legend: LegendConfig) -> List[str]:
    rows = max(len(legend.colors), len(legend.labels))
    if rows == 0:
        return []
    row_h = legend.height / rows
    swatch_w = legend.width / 2
    out = ['  <g id="legend">']
    for i in range(rows):
        y = legend.y + i * row_h
        ramp = legend.colors[i] if i < len(legend.colors) else []
        for j, colour in enumerate(ramp):
            w = swatch_w / len(ramp)
            out.append(f'    <rect x="{_f(legend.x + j * w)}" y="{_f(y)}" width="{_f(w)}" height="{_f(row_h)}" '
                       f'fill={quoteattr(colour)} stroke="none" />')
        if i < len(legend.labels):
            lab = legend.labels[i]
            out.append(f'    <text x="{_f(legend.x + swatch_w + 4)}" y="{_f(y + row_h / 2)}" '
                       f'dominant-baseline="middle" font-family={quoteattr(lab.family)} '
                       f'font-variant={quoteattr(lab.variant)}>{escape(lab.text)}</text>')
    out.append("  </g>")
    return out

def _scale_bar(scale: ScaleConfig) -> List[str]:
    mid_y = scale.y + scale.height / 2
    return [
        '  <g id="scale">',
        f'    <rect x="{_f(scale.x)}" y="{_f(scale.y)}" width="{_f(scale.width)}" height="{_f(scale.height)}" '
        f'fill={quoteattr(scale.rect.fill)} stroke="none" />',
        f'    <line x1="{_f(scale.x)}" y1="{_f(mid_y)}" x2="{_f(scale.x + scale.width)}" y2="{_f(mid_y)}" '
        f'stroke={quoteattr(scale.line.stroke)} stroke-width="{_f(scale.line.stroke_width)}" />',
        f'    <text x="{_f(scale.x + scale.width / 2)}" y="{_f(scale.y)}" text-anchor="middle" '
        f'fill={quoteattr(scale.text.fill)} font-family={quoteattr(scale.text.font_family)} '
        f'font-size="{_f(scale.text.font_size)}">{escape(scale.text.text)}</text>',
        '  </g>',
    ]

def render_scene(scene: Scene, magnified_href: Optional[str] = None,
                 image_href: Optional[str] = None, style: Optional[dict] = None) -> str:
    """
    Build the SVG document for a scene.

    image_href overrides scene.image (e.g. a data URL); magnified_href, when
    given, is stretched over the lens rectangle. style holds optional
    "source" / "lens" / "connector" groups; missing keys keep their defaults.
    """
    # per-group merge: a partial override keeps the remaining defaults
    over = style or {}
    st = {k: {**v, **(over.get(k) or {})} for k, v in _DEFAULT_STYLE.items()}
    vb = scene.viewbox
    seg1, seg2 = compute_connectors(scene.source, scene.lens)
    if seg1 == seg2 and seg1 == Segment(x1=0, y1=0, x2=0, y2=0):
        logger.warning(f"[render] degenerate scene (source={scene.source}, lens={scene.lens}); connectors collapsed to origin")

    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(f'<svg xmlns="http://www.w3.org/2000/svg" '
                 f'viewBox="0 0 {_f(vb.width)} {_f(vb.height)}">')

    href = image_href or scene.image
    if href:
        lines.append(f'  <image id="base" x="0" y="0" width="{_f(vb.width)}" height="{_f(vb.height)}" '
                     f'href={quoteattr(href)} />')
    if magnified_href:
        lens = scene.lens
        lines.append(f'  <image id="magnified" x="{_f(lens.x)}" y="{_f(lens.y)}" width="{_f(lens.width)}" '
                     f'height="{_f(lens.height)}" preserveAspectRatio="none" href={quoteattr(magnified_href)} />')

    lines.append('  <g id="connectors">')
    lines.append(_line(seg1, st["connector"], "connector-1"))
    lines.append(_line(seg2, st["connector"], "connector-2"))
    lines.append("  </g>")

    lines.append(_rect(scene.source, st["source"]["stroke"], st["source"]["stroke_width"], "source"))
    lines.append(_rect(scene.lens, st["lens"]["stroke"], st["lens"]["stroke_width"], "lens"))

    if scene.legend is not None and scene.legend.enable:
        lines.extend(_legend(scene.legend))
    if scene.scale is not None and scene.scale.enable:
        lines.extend(_scale_bar(scene.scale))

    lines.append("</svg>")
    return "\n".join(lines)

def style_from_cfg(cfg) -> dict:
    return OmegaConf.to_container(cfg.render, resolve=True)

def write_svg(svg: str, path: str | Path) -> str:
    write_text(svg, path)
    return str(path)
