import numpy as np
import matplotlib.pyplot as plt
from shapely.geometry import Polygon, Point as ShapelyPoint, box
import shapely.ops
from typing import Any, Dict, List, Optional, Tuple
import io
from PIL import Image

from shapes import Shape, Rectangle, Square, Circle, Triangle
from catalog import ShapeCatalog


SHAPE_COLORS: Dict[str, np.ndarray] = {
    "Rectangle": np.array([0.9, 0.2, 0.2]),
    "Square": np.array([0.2, 0.45, 0.95]),
    "Circle": np.array([0.2, 0.8, 0.5]),
    "Triangle": np.array([0.95, 0.7, 0.1]),
}
DEFAULT_COLOR = np.array([0.6, 0.6, 0.6])


def shape_to_shapely(shape: Shape) -> Any:
    """
    Rectangles and squares are axis-aligned boxes with the anchor as the
    lower-left corner, circles are centred on the anchor, triangles use
    their three vertices.
    """
    p = shape.get_position()
    if isinstance(shape, Rectangle):
        return box(p.x, p.y, p.x + shape.width, p.y + shape.length)
    if isinstance(shape, Square):
        return box(p.x, p.y, p.x + shape.side, p.y + shape.side)
    if isinstance(shape, Circle):
        return ShapelyPoint(p.x, p.y).buffer(abs(shape.radius), quad_segs=64)
    if isinstance(shape, Triangle):
        return Polygon(shape.vertex_array())
    raise ValueError(f"Unknown shape {type(shape).__name__}")


def catalog_geometries(catalog: ShapeCatalog) -> List[Tuple[int, Any, np.ndarray]]:
    """
    Returns [(index, shapely_geometry, rgb)] for every shape with a
    non-zero footprint.
    """
    out = []
    for idx, shape in enumerate(catalog):
        geom = shape_to_shapely(shape)
        if geom.is_empty or geom.area == 0.0:
            continue
        out.append((idx, geom, SHAPE_COLORS.get(shape.name, DEFAULT_COLOR)))
    return out


def draw_geometries_on_axis(
    ax: plt.Axes,
    items: List[Tuple[int, Any, np.ndarray]],
    label_indices: bool = True,
    margin: float = 1.0,
) -> None:
    if not items:
        # keep the frame so an empty catalog still has a non-empty bbox
        ax.set_aspect('equal')
        ax.set_xticks([])
        ax.set_yticks([])
        return

    total_shape = shapely.ops.unary_union([geom for _, geom, _ in items])
    minx, miny, maxx, maxy = total_shape.bounds
    half_side = max(maxx - minx, maxy - miny) / 2 + margin
    center_x = (minx + maxx) / 2
    center_y = (miny + maxy) / 2

    ax.set_aspect('equal')
    ax.set_xlim(center_x - half_side, center_x + half_side)
    ax.set_ylim(center_y - half_side, center_y + half_side)
    ax.axis('off')

    for idx, geom, rgb in items:
        rgba = np.append(np.asarray(rgb, dtype=float)[:3], 0.6)
        x, y = geom.exterior.xy
        ax.fill(x, y, fc=rgba, ec=rgba[:3], linewidth=1.0, joinstyle='round')
        if label_indices:
            c = geom.centroid
            ax.text(c.x, c.y, str(idx), ha="center", va="center", fontsize=9, color="black")


def draw_catalog_on_axis(
    ax: plt.Axes,
    catalog: ShapeCatalog,
    label_indices: bool = True,
) -> None:
    """
    Draws every shape of the catalog onto one Matplotlib axis, framed to
    the union of their bounds.
    """
    draw_geometries_on_axis(ax, catalog_geometries(catalog), label_indices=label_indices)


def save_catalog_as_svg(
    catalog: ShapeCatalog,
    filename: str
) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    draw_catalog_on_axis(ax, catalog)
    fig.savefig(
        filename,
        format='svg',
        bbox_inches='tight',
        pad_inches=0
    )
    plt.close(fig)


def save_catalog_as_png(
    catalog: ShapeCatalog,
    filename: Optional[str] = None,
    resolution: int = 300
) -> Optional[Image.Image]:
    """
    Saves the catalog as a PNG, or returns the PIL Image object if filename
    is None (in-memory rendering).
    """
    dpi = resolution / 3.0

    fig, ax = plt.subplots(figsize=(3, 3))
    draw_catalog_on_axis(ax, catalog)

    target = io.BytesIO() if filename is None else filename
    fig.savefig(
        target,
        format='png',
        dpi=dpi,
        bbox_inches='tight',
        pad_inches=0,
        transparent=False,
        facecolor='white'
    )
    plt.close(fig)
    if filename is not None:
        return None
    target.seek(0)
    image = Image.open(target)
    image.load()
    return image
