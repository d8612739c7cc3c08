"""
Pytest configuration and shared fixtures for the shape catalog tests.
"""

import pytest
from pathlib import Path

# Add repo root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use("Agg")

from shapes import Point, Rectangle, Square, Circle, Triangle
from catalog import ShapeCatalog, CatalogConfig


# ============== Shape Fixtures ==============

@pytest.fixture
def rectangle() -> Rectangle:
    """3 x 4 rectangle anchored at (1, 2)."""
    return Rectangle(Point(1, 2), 3, 4)


@pytest.fixture
def square() -> Square:
    return Square(Point(-2, 5), 5)


@pytest.fixture
def circle() -> Circle:
    return Circle(Point(0, 0), 2)


@pytest.fixture
def right_triangle() -> Triangle:
    """3-4-5 right triangle."""
    return Triangle(Point(0, 0), Point(4, 0), Point(0, 3))


# ============== Catalog Fixtures ==============

@pytest.fixture
def empty_catalog() -> ShapeCatalog:
    return ShapeCatalog()


@pytest.fixture
def populated_catalog(rectangle, square, circle, right_triangle) -> ShapeCatalog:
    """Catalog holding one shape of each variant, in that order."""
    catalog = ShapeCatalog()
    for shape in (rectangle, square, circle, right_triangle):
        catalog.add(shape)
    return catalog


@pytest.fixture
def triangle_config() -> CatalogConfig:
    return CatalogConfig(allow_triangle=True)
