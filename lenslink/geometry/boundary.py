# lenslink/geometry/boundary.py
from __future__ import annotations
import math

from lenslink.schema.types import (
    IntersectionFound, IntersectionNotFound, IntersectionResult, Rectangle, Segment,
)
from lenslink.geometry.primitives import (
    distance, is_valid_rect, is_valid_segment, line_edge_intersection, rect_edges,
)

def boundary_exit(line: Segment, rect: Rectangle) -> IntersectionResult:
    """
    Where a ray starting at `line.start` first crosses the boundary of `rect`.

    Each edge (top, right, bottom, left) is tested against the line; the hit
    nearest to the line origin wins. Ties keep the earlier edge, so a ray
    through a corner resolves to the first of the two edges in that order.
    """
    if not is_valid_segment(line) or not is_valid_rect(rect):
        return IntersectionNotFound()

    origin = line.start
    best = None
    best_d = math.inf
    for edge in rect_edges(rect):
        hit = line_edge_intersection(line, edge)
        if hit is None:
            continue
        d = distance(origin, hit)
        if d < best_d:
            best = IntersectionFound(point=hit, p1=edge.p1, p2=edge.p2)
            best_d = d
    return best if best is not None else IntersectionNotFound()
