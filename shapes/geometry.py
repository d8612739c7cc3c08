from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import numpy as np


PI = 3.142


def _trunc_div(a: int, b: int) -> int:
    # integer division rounding toward zero
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class Point:
    """
    Integer 2D coordinate. Mutable: translate/scale change it in place.
    """
    x: int
    y: int

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def distance(self, other: "Point") -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return float(np.hypot(dx, dy))

    def translate(self, dx: int, dy: int) -> None:
        self.x = self.x + dx
        self.y = self.y + dy

    def scale(self, factor: int, increase: bool) -> None:
        if increase:
            self.x = self.x * factor
            self.y = self.y * factor
            return
        if factor == 0:
            raise ValueError("scale factor must be non-zero when decreasing")
        self.x = _trunc_div(self.x, factor)
        self.y = _trunc_div(self.y, factor)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def display(self) -> str:
        return f"X = {self.x}, Y = {self.y}"


class Shape:
    """
    Base of the closed shape family. Every shape owns an anchor point used
    for translation, scaling and the "Coordinates" line of its summary.
    """
    name: str = "Shape"
    sides: int = 0

    def __init__(self, position: Point):
        self.position = position.copy()

    # ---- Anchor ----
    def get_position(self) -> Point:
        return self.position.copy()

    def set_position(self, position: Point) -> None:
        self.position = position.copy()

    def get_sides(self) -> int:
        return self.sides

    def translate(self, dx: int, dy: int) -> None:
        self.position.translate(dx, dy)

    def scale(self, factor: int, increase: bool) -> None:
        self.position.scale(factor, increase)

    # ---- Measures ----
    def get_area(self) -> float:
        raise NotImplementedError

    def get_perimeter(self) -> float:
        raise NotImplementedError

    def display(self) -> str:
        raise NotImplementedError

    def _measures(self) -> str:
        return f"\nArea: {self.get_area():f}\nPerimeter: {self.get_perimeter():f}"


class Rectangle(Shape):
    name = "Rectangle"
    sides = 4

    def __init__(self, position: Point, width: int, length: int):
        super().__init__(position)
        self.width = width
        self.length = length

    def get_area(self) -> float:
        return float(self.width * self.length)

    def get_perimeter(self) -> float:
        return float(2 * (self.width + self.length))

    def display(self) -> str:
        return (
            f"Rectangle\nCoordinates: {self.position.display()}"
            f"\nWidth: {self.width}\nLength: {self.length}"
            + self._measures()
        )


class Square(Shape):
    name = "Square"
    sides = 4

    def __init__(self, position: Point, side: int):
        super().__init__(position)
        self.side = side

    def get_area(self) -> float:
        return float(self.side * self.side)

    def get_perimeter(self) -> float:
        return float(4 * self.side)

    def display(self) -> str:
        return f"Square\nCoordinates: {self.position.display()}\nSide: {self.side}" + self._measures()


class Circle(Shape):
    """
    Circle placed at its anchor. Uses the fixed approximation PI = 3.142.
    """
    name = "Circle"
    sides = 0

    def __init__(self, position: Point, radius: int):
        super().__init__(position)
        self.radius = radius

    def get_area(self) -> float:
        return PI * self.radius * self.radius

    def get_perimeter(self) -> float:
        return 2 * PI * self.radius

    def display(self) -> str:
        return f"Circle\nCoordinates: {self.position.display()}\nRadius: {self.radius}" + self._measures()


class Triangle(Shape):
    """
    Triangle given by three vertices. The anchor starts as a copy of vertex1;
    translate() and scale() move only the anchor, so the vertices, and with
    them area and perimeter, stay where they were created.
    """
    name = "Triangle"
    sides = 3

    def __init__(self, vertex1: Point, vertex2: Point, vertex3: Point):
        super().__init__(vertex1)
        self.vertex1 = vertex1.copy()
        self.vertex2 = vertex2.copy()
        self.vertex3 = vertex3.copy()

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return self.vertex1, self.vertex2, self.vertex3

    def side_lengths(self) -> Tuple[float, float, float]:
        a = self.vertex1.distance(self.vertex2)
        b = self.vertex2.distance(self.vertex3)
        c = self.vertex3.distance(self.vertex1)
        return a, b, c

    def get_area(self) -> float:
        # Heron; collinear vertices can leave a tiny negative radicand
        a, b, c = self.side_lengths()
        s = (a + b + c) / 2
        radicand = s * (s - a) * (s - b) * (s - c)
        return float(np.sqrt(max(radicand, 0.0)))

    def get_perimeter(self) -> float:
        return float(sum(self.side_lengths()))

    def vertex_array(self) -> np.ndarray:
        return np.stack([v.as_array() for v in self.vertices])

    def display(self) -> str:
        return (
            "Triangle\nCoordinates:"
            f"\nVertex 1: {self.vertex1.display()}"
            f"\nVertex 2: {self.vertex2.display()}"
            f"\nVertex 3: {self.vertex3.display()}"
            + self._measures()
        )
