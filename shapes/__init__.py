# Re-export core geometry API for convenience
from .geometry import (
    PI,
    Point,
    Shape,
    Rectangle,
    Square,
    Circle,
    Triangle,
)
