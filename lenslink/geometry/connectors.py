# lenslink/geometry/connectors.py
from __future__ import annotations

from lenslink.schema.types import (
    ConnectorPair, IntersectionFound, Point, Rectangle, Segment,
)
from lenslink.geometry.primitives import center, is_valid_rect, segments_intersect
from lenslink.geometry.boundary import boundary_exit

_ORIGIN = Segment(x1=0.0, y1=0.0, x2=0.0, y2=0.0)

def compute_connectors(source: Rectangle, lens: Rectangle) -> ConnectorPair:
    """
    Two connector segments joining the facing edges of `source` and `lens`.

    Always returns exactly two segments and never raises:
      - either rectangle invalid -> both segments pinned at the origin;
      - a rectangle whose boundary exit cannot be resolved (e.g. the two
        centres coincide) is anchored at its centre on both segments.
    Same-index edge endpoints are paired (p1<->p1, p2<->p2); if that pairing
    crosses, the lens anchors are swapped once.
    """
    if not is_valid_rect(source) or not is_valid_rect(lens):
        return _ORIGIN, _ORIGIN

    s_center = center(source)
    l_center = center(lens)
    center_line = Segment.between(s_center, l_center)

    s_exit = boundary_exit(center_line, source)
    l_exit = boundary_exit(center_line.reversed(), lens)

    if isinstance(s_exit, IntersectionFound):
        s1, s2 = s_exit.p1, s_exit.p2
    else:
        s1 = s2 = s_center
    if isinstance(l_exit, IntersectionFound):
        l1, l2 = l_exit.p1, l_exit.p2
    else:
        l1 = l2 = l_center

    if isinstance(s_exit, IntersectionFound) and isinstance(l_exit, IntersectionFound):
        l1, l2 = _uncross(s1, s2, l1, l2)

    return Segment.between(s1, l1), Segment.between(s2, l2)

def _uncross(s1: Point, s2: Point, l1: Point, l2: Point):
    # convex rectangles: a single swap is enough, the swapped pair is not re-checked
    if segments_intersect(Segment.between(s1, l1), Segment.between(s2, l2)):
        return l2, l1
    return l1, l2
