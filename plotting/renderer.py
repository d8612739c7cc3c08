from __future__ import annotations

from typing import Optional, Tuple
import os
import matplotlib.pyplot as plt
from PIL import Image

from catalog import ShapeCatalog

from plotting.vectorizer import (
    SHAPE_COLORS,
    DEFAULT_COLOR,
    draw_geometries_on_axis,
    save_catalog_as_png,
    save_catalog_as_svg,
    shape_to_shapely,
)


def render_to_file(
    catalog: ShapeCatalog,
    out_path: Optional[str],
    resolution: int = 300,
    format: str = "png",
    return_image: bool = False,
) -> Optional[Image.Image]:
    """
    Render the whole catalog on a single canvas.
    """
    if format == "svg":
        if out_path is None:
            raise ValueError("SVG rendering requires an output path (out_path).")
        save_catalog_as_svg(catalog, filename=out_path)
        return None

    if format == "png":
        if return_image:
            return save_catalog_as_png(catalog, filename=None, resolution=resolution)
        if out_path is None:
            raise ValueError("PNG rendering requires an output path (out_path) when return_image is False.")
        save_catalog_as_png(catalog, filename=out_path, resolution=resolution)
        return None

    raise ValueError(f"unsupported format: {format}")


def render_catalog_grid(
    catalog: ShapeCatalog,
    out_path: str,
    cols: int = 4,
    figsize_per_cell: Tuple[float, float] = (3.0, 3.0),
) -> None:
    """
    Renders one cell per catalog index, titled with the index and variant.
    """
    n = len(catalog)
    cols = max(1, min(cols, n)) if n else 1
    rows = max(1, (n + cols - 1) // cols)
    fig_w = figsize_per_cell[0] * cols
    fig_h = figsize_per_cell[1] * rows

    fig, axes = plt.subplots(rows, cols, figsize=(fig_w, fig_h), constrained_layout=True, squeeze=False)
    fig.patch.set_facecolor('white')

    for idx, shape in enumerate(catalog):
        ax = axes[idx // cols, idx % cols]
        ax.set_facecolor('white')
        geom = shape_to_shapely(shape)
        if geom.is_empty or geom.area == 0.0:
            ax.text(0.5, 0.5, "degenerate", ha="center", va="center", transform=ax.transAxes)
            ax.axis("off")
        else:
            rgb = SHAPE_COLORS.get(shape.name, DEFAULT_COLOR)
            draw_geometries_on_axis(ax, [(idx, geom, rgb)], label_indices=False)
            ax.axis("on")
            ax.set_xticks([])
            ax.set_yticks([])
            for spine in ax.spines.values():
                spine.set_visible(True)
                spine.set_color('black')
                spine.set_linewidth(1.0)
        ax.set_title(f"{idx}: {shape.name}", fontsize=10, color='black')

    for idx in range(n, rows * cols):
        axes[idx // cols, idx % cols].axis("off")

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    fmt = "svg" if out_path.endswith(".svg") else "png"
    fig.savefig(out_path, dpi=200, format=fmt, transparent=False, facecolor='white')
    plt.close(fig)
