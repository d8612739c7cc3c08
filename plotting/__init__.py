from .vectorizer import (
    shape_to_shapely,
    draw_catalog_on_axis,
    save_catalog_as_svg,
    save_catalog_as_png,
)
from .renderer import render_to_file, render_catalog_grid
