# lenslink/geometry/primitives.py
from __future__ import annotations
import math
from typing import List, Optional, Tuple

from lenslink.schema.types import Edge, Point, Rectangle, Segment

def is_valid_segment(seg: Segment) -> bool:
    # zero-length is still a valid segment
    return all(math.isfinite(v) for v in (seg.x1, seg.y1, seg.x2, seg.y2))

def is_valid_rect(rect: Rectangle) -> bool:
    return (
        all(math.isfinite(v) for v in (rect.x, rect.y, rect.width, rect.height))
        and rect.width > 0
        and rect.height > 0
    )

def distance(a: Point, b: Point) -> float:
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2)

def center(rect: Rectangle) -> Point:
    return Point(x=rect.x + rect.width / 2, y=rect.y + rect.height / 2)

def rect_edges(rect: Rectangle) -> List[Edge]:
    """Boundary edges in traversal order: top, right, bottom, left."""
    x1, y1 = rect.x, rect.y
    x2, y2 = rect.x + rect.width, rect.y + rect.height
    tl, tr = Point(x=x1, y=y1), Point(x=x2, y=y1)
    bl, br = Point(x=x1, y=y2), Point(x=x2, y=y2)
    return [
        Edge(side="top",    p1=tl, p2=tr),
        Edge(side="right",  p1=tr, p2=br),
        Edge(side="bottom", p1=bl, p2=br),
        Edge(side="left",   p1=tl, p2=bl),
    ]

def _parameters(a: Segment, b: Segment) -> Optional[Tuple[float, float]]:
    """
    Solve a.start + t*(a.end-a.start) == b.start + u*(b.end-b.start).
    Returns (t, u), or None when the direction vectors are parallel.
    """
    adx, ady = a.x2 - a.x1, a.y2 - a.y1
    bdx, bdy = b.x2 - b.x1, b.y2 - b.y1
    denominator = adx * bdy - ady * bdx
    if denominator == 0:
        return None
    wx, wy = a.x1 - b.x1, a.y1 - b.y1
    t = (bdx * wy - bdy * wx) / denominator
    u = (adx * wy - ady * wx) / denominator
    return t, u

def _in_unit(v: float) -> bool:
    return 0 <= v <= 1

def segments_intersect(a: Segment, b: Segment) -> bool:
    """True when two segments cross or touch; parallel segments never do."""
    if not is_valid_segment(a) or not is_valid_segment(b):
        return False
    params = _parameters(a, b)
    if params is None:
        return False
    t, u = params
    return _in_unit(t) and _in_unit(u)

def line_edge_intersection(line: Segment, edge: Edge) -> Optional[Point]:
    """Point where `line` meets `edge`, with both parameters inside [0, 1]."""
    params = _parameters(line, edge.segment)
    if params is None:
        return None
    t, u = params
    if not (_in_unit(t) and _in_unit(u)):
        return None
    return Point(
        x=line.x1 + t * (line.x2 - line.x1),
        y=line.y1 + t * (line.y2 - line.y1),
    )
