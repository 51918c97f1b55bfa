# crop + rescale of the source region into the lens
# lenslink/imaging/magnify.py
from __future__ import annotations
import base64
import io
from pathlib import Path
from typing import Tuple

from PIL import Image

from lenslink.schema.types import Rectangle
from lenslink.geometry.primitives import is_valid_rect

_RESAMPLE = {
    "nearest":  Image.NEAREST,
    "bilinear": Image.BILINEAR,
    "bicubic":  Image.BICUBIC,
    "lanczos":  Image.LANCZOS,
}

def ensure_rgb(img: Image.Image) -> Image.Image:
    return img.convert("RGB") if img.mode != "RGB" else img

def open_image(path: str | Path) -> Image.Image:
    with Image.open(path) as img:
        return ensure_rgb(img).copy()

def _crop_box(source: Rectangle) -> Tuple[int, int, int, int]:
    x1, y1 = round(source.x), round(source.y)
    x2 = max(x1 + 1, round(source.x + source.width))
    y2 = max(y1 + 1, round(source.y + source.height))
    return x1, y1, x2, y2

def lens_size(lens: Rectangle) -> Tuple[int, int]:
    return max(1, round(lens.width)), max(1, round(lens.height))

def magnify(img: Image.Image, source: Rectangle, lens: Rectangle, resample: str = "lanczos") -> Image.Image:
    """
    Cut `source` out of `img` and stretch it to the lens size.
    Areas of the crop outside the image come out black, like a canvas drawImage.
    """
    if not is_valid_rect(source) or not is_valid_rect(lens):
        raise ValueError(f"cannot magnify with source={source} lens={lens}")
    if resample not in _RESAMPLE:
        raise ValueError(f"unknown resample '{resample}', expected one of {sorted(_RESAMPLE)}")
    crop = ensure_rgb(img).crop(_crop_box(source))
    return crop.resize(lens_size(lens), _RESAMPLE[resample])

def magnify_file(path: str | Path, source: Rectangle, lens: Rectangle, resample: str = "lanczos") -> Image.Image:
    return magnify(open_image(path), source, lens, resample=resample)

def to_data_url(img: Image.Image) -> str:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")
