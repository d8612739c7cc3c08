from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from shapes import Shape


logger = logging.getLogger(__name__)


class ShapeCatalog:
    """
    Ordered collection owning every shape added to it.

    Indices are 0-based and always dense: removing a shape shifts the
    following ones down by one. Lookups with an index outside [0, count)
    return None instead of raising; negative indices are never wrapped.
    """

    def __init__(self) -> None:
        self._shapes: List[Shape] = []

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def count(self) -> int:
        return len(self._shapes)

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._shapes)

    # ---- Membership ----
    def add(self, shape: Shape) -> None:
        self._shapes.append(shape)
        logger.debug("added %s at index %d", shape.name, len(self._shapes) - 1)

    def get_at(self, index: int) -> Optional[Shape]:
        if self._valid(index):
            return self._shapes[index]
        return None

    def remove_at(self, index: int) -> Optional[Shape]:
        """
        Remove the shape at index and hand it back to the caller.
        """
        if not self._valid(index):
            return None
        shape = self._shapes.pop(index)
        logger.debug("removed %s from index %d", shape.name, index)
        return shape

    def clear(self) -> None:
        self._shapes.clear()

    # ---- Bulk transforms ----
    def translate_all(self, dx: int, dy: int) -> None:
        for shape in self._shapes:
            shape.translate(dx, dy)
        logger.debug("translated %d shapes by (%d, %d)", len(self._shapes), dx, dy)

    def scale_all(self, factor: int, increase: bool) -> None:
        # reject before touching anything so a failed scale changes nothing
        if not increase and factor == 0:
            raise ValueError("scale factor must be non-zero when decreasing")
        for shape in self._shapes:
            shape.scale(factor, increase)
        logger.debug(
            "scaled %d shapes (%s by %d)",
            len(self._shapes), "up" if increase else "down", factor,
        )

    # ---- Measures ----
    def measure(self, index: int) -> Optional[Tuple[float, float]]:
        """
        (area, perimeter) of the shape at index, or None when there is none.
        """
        shape = self.get_at(index)
        if shape is None:
            return None
        return shape.get_area(), shape.get_perimeter()

    def area_at(self, index: int) -> float:
        # 0.0 doubles as "not found"; use measure() to tell them apart
        shape = self.get_at(index)
        return shape.get_area() if shape is not None else 0.0

    def perimeter_at(self, index: int) -> float:
        shape = self.get_at(index)
        return shape.get_perimeter() if shape is not None else 0.0

    def display_all(self) -> str:
        return "".join(shape.display() + "\n\n" for shape in self._shapes)
