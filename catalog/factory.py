from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

from shapes import Shape, Point, Rectangle, Square, Circle, Triangle


ShapeKind = Literal["rectangle", "square", "circle", "triangle"]

# menu selector -> variant
SELECTOR_CODES: Dict[int, ShapeKind] = {
    1: "rectangle",
    2: "square",
    3: "circle",
    4: "triangle",
}

# number of integers expected after the anchor coordinates
DIMENSION_COUNTS: Dict[ShapeKind, int] = {
    "rectangle": 2,  # width, length
    "square": 1,  # side
    "circle": 1,  # radius
    "triangle": 4,  # x2, y2, x3, y3
}


def kind_for_selector(code: int) -> Optional[ShapeKind]:
    return SELECTOR_CODES.get(code)


@dataclass(frozen=True)
class ShapeSpec:
    """
    Primitive description of a shape: kind, anchor and dimensions.
    For a triangle the anchor is vertex 1 and dims hold vertices 2 and 3.
    """
    kind: ShapeKind
    x: int
    y: int
    dims: Tuple[int, ...] = ()

    def to_shape(self) -> Shape:
        expected = DIMENSION_COUNTS.get(self.kind)
        if expected is None:
            raise ValueError(f"unknown shape kind: {self.kind}")
        if len(self.dims) != expected:
            raise ValueError(f"{self.kind} needs {expected} dimensions, got {len(self.dims)}")
        anchor = Point(self.x, self.y)
        if self.kind == "rectangle":
            width, length = self.dims
            return Rectangle(anchor, width, length)
        if self.kind == "square":
            return Square(anchor, self.dims[0])
        if self.kind == "circle":
            return Circle(anchor, self.dims[0])
        x2, y2, x3, y3 = self.dims
        return Triangle(anchor, Point(x2, y2), Point(x3, y3))
