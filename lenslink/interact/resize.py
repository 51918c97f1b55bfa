# lenslink/interact/resize.py
from __future__ import annotations
from typing import Callable, Optional, TypeVar

from lenslink.schema.types import Rectangle

GROW_KEYS   = ("+", "=", "w", "d")
SHRINK_KEYS = ("-", "_", "s", "a")

T = TypeVar("T")

def should_handle(hovered: Optional[T], target: Optional[T], allow_popping: bool = False,
                  contains: Optional[Callable[[T, T], bool]] = None) -> bool:
    """
    A key press resizes `target` only while the pointer is over it.
    With allow_popping, hovering any descendant of the target also counts.
    Meant for hosts with real hover tracking (a DOM or Qt front-end); the
    streamlit app resizes through buttons and does not need it.
    """
    if hovered is not None and hovered is target:
        return True
    if not allow_popping or target is None or hovered is None or contains is None:
        return False
    return bool(contains(target, hovered))

def apply_resize_key(rect: Rectangle, key: str, grow: float = 1.05, shrink: float = 0.95,
                     decimals: int = 2) -> Rectangle:
    k = key.lower()
    if k in GROW_KEYS:
        factor = grow
    elif k in SHRINK_KEYS:
        factor = shrink
    else:
        return rect
    return rect.model_copy(update={
        "width":  round(rect.width * factor, decimals),
        "height": round(rect.height * factor, decimals),
    })

def resize_from_cfg(cfg, rect: Rectangle, key: str) -> Rectangle:
    r = cfg.interact.resize
    return apply_resize_key(rect, key, grow=float(r.grow), shrink=float(r.shrink),
                            decimals=int(r.decimals))
