# -*- coding: utf-8 -*-
import sys
from pathlib import Path

import streamlit as st
from PIL import Image

# ── path bootstrap (must be first) ─────────────────────────────────────────────
# streamlit_app.py lives at <project>/lenslink/ui/streamlit_app.py
ROOT = Path(__file__).resolve().parents[2]  # -> <project>
if (ROOT / "lenslink").exists() and str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# ───────────────────────────────────────────────────────────────────────────────

from lenslink.config.loader import load_cfg
from lenslink.geometry.connectors import compute_connectors
from lenslink.imaging.magnify import ensure_rgb, magnify, to_data_url
from lenslink.interact.drag import DragSession
from lenslink.interact.resize import resize_from_cfg
from lenslink.render.svg import render_scene, style_from_cfg
from lenslink.schema.serialization import connectors_to_dict
from lenslink.schema.types import Point, Rectangle, Scene, ViewBox
from lenslink.utils.logging import setup_logging

st.set_page_config(page_title="lenslink", layout="wide", page_icon="🔍")
st.markdown("## lenslink — magnifier connectors")

cfg = load_cfg()
setup_logging(cfg.logging.level)

NUDGE = {"←": (-1, 0), "→": (1, 0), "↑": (0, -1), "↓": (0, 1)}

def _init_state(vb: ViewBox):
    if "source" not in st.session_state:
        st.session_state.source = Rectangle(x=vb.width * 0.1, y=vb.height * 0.1,
                                            width=vb.width * 0.1, height=vb.height * 0.1)
    if "lens" not in st.session_state:
        st.session_state.lens = Rectangle(x=vb.width * 0.55, y=vb.height * 0.45,
                                          width=vb.width * 0.35, height=vb.height * 0.35)

def _nudge(name: str, vb: ViewBox, dx: float, dy: float, step: float):
    # a button press is a one-tick drag at scale 1
    sess = DragSession(st.session_state[name], vb, decimals=int(cfg.interact.drag.decimals))
    sess.start(Point(x=0.0, y=0.0))
    st.session_state[name] = sess.move(Point(x=dx * step, y=dy * step), scale=1.0)

def _controls(name: str, vb: ViewBox):
    st.markdown(f"**{name.capitalize()}**")
    step = st.number_input(f"{name} step", min_value=1.0, value=10.0, key=f"{name}-step")
    cols = st.columns(6)
    for col, (label, (dx, dy)) in zip(cols, NUDGE.items()):
        if col.button(label, key=f"{name}-{label}"):
            _nudge(name, vb, dx, dy, step)
    if cols[4].button("＋", key=f"{name}-grow"):
        st.session_state[name] = resize_from_cfg(cfg, st.session_state[name], "+")
    if cols[5].button("－", key=f"{name}-shrink"):
        st.session_state[name] = resize_from_cfg(cfg, st.session_state[name], "-")

with st.sidebar:
    st.markdown("### Image")
    uploaded = st.file_uploader("Upload an image", type=["png", "jpg", "jpeg", "tif", "tiff"])

img = ensure_rgb(Image.open(uploaded)) if uploaded else None
vb = ViewBox(width=img.size[0], height=img.size[1]) if img else ViewBox(width=800, height=600)
_init_state(vb)

with st.sidebar:
    st.markdown("---")
    _controls("source", vb)
    st.markdown("---")
    _controls("lens", vb)

scene = Scene(viewbox=vb, source=st.session_state.source, lens=st.session_state.lens)

image_href = magnified_href = None
if img is not None:
    image_href = to_data_url(img)
    try:
        magnified_href = to_data_url(magnify(img, scene.source, scene.lens, resample=str(cfg.magnify.resample)))
    except ValueError as e:
        st.warning(f"Magnifier skipped: {e}")

svg = render_scene(scene, magnified_href=magnified_href, image_href=image_href, style=style_from_cfg(cfg))
st.markdown(svg.split("\n", 1)[1], unsafe_allow_html=True)  # drop the XML prolog for inline HTML

with st.expander("Geometry"):
    st.json({
        "source": scene.source.model_dump(),
        "lens": scene.lens.model_dump(),
        **connectors_to_dict(compute_connectors(scene.source, scene.lens)),
    })

st.download_button("Download overlay.svg", data=svg.encode("utf-8"),
                   file_name="overlay.svg", mime="image/svg+xml")
