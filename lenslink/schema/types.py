# pydantic models: Point, Rectangle, Segment, Edge, intersection results, scene overlays
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional, Tuple, Union

Side = Literal["top", "right", "bottom", "left"]

class _Value(BaseModel):
    # geometry is recomputed, never mutated in place
    model_config = ConfigDict(frozen=True)

class Point(_Value):
    x: float
    y: float

class Rectangle(_Value):
    """Axis-aligned rectangle; (x, y) is the top-left corner.

    Any float is accepted here, NaN and negative sizes included. Validity is
    a predicate (see ``geometry.primitives.is_valid_rect``), not a
    construction error, because hosts feed transient mid-drag state.
    """
    x: float
    y: float
    width: float
    height: float

class Segment(_Value):
    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def between(cls, a: Point, b: Point) -> "Segment":
        return cls(x1=a.x, y1=a.y, x2=b.x, y2=b.y)

    @property
    def start(self) -> Point:
        return Point(x=self.x1, y=self.y1)

    @property
    def end(self) -> Point:
        return Point(x=self.x2, y=self.y2)

    def reversed(self) -> "Segment":
        return Segment(x1=self.x2, y1=self.y2, x2=self.x1, y2=self.y1)

class Edge(_Value):
    side: Side
    p1: Point
    p2: Point

    @property
    def segment(self) -> Segment:
        return Segment.between(self.p1, self.p2)

class IntersectionFound(_Value):
    kind: Literal["found"] = "found"
    point: Point
    p1: Point   # endpoints of the edge that was crossed
    p2: Point

class IntersectionNotFound(_Value):
    kind: Literal["not_found"] = "not_found"

IntersectionResult = Union[IntersectionFound, IntersectionNotFound]
ConnectorPair = Tuple[Segment, Segment]

# ---- overlays drawn next to the magnifier (legend + scale bar) ----

class LegendLabel(_Value):
    text: str
    family: str = "sans-serif"
    variant: str = "normal"

class LegendConfig(_Value):
    enable: bool = False
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    colors: List[List[str]] = []        # one colour ramp per label row
    labels: List[LegendLabel] = []

class ScaleLine(_Value):
    stroke: str = "#000000"
    stroke_width: float = 1.0

class ScaleRect(_Value):
    fill: str = "#ffffff"

class ScaleText(_Value):
    fill: str = "#000000"
    font_family: str = "sans-serif"
    font_size: float = 12.0
    text: str = ""

class ScaleConfig(_Value):
    enable: bool = False
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    line: ScaleLine = ScaleLine()
    rect: ScaleRect = ScaleRect()
    text: ScaleText = ScaleText()

class ViewBox(_Value):
    width: float = Field(gt=0)
    height: float = Field(gt=0)

class Scene(_Value):
    image: Optional[str] = None
    viewbox: ViewBox
    source: Rectangle
    lens: Rectangle
    legend: Optional[LegendConfig] = None
    scale: Optional[ScaleConfig] = None
