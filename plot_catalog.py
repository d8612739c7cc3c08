from __future__ import annotations

import argparse
import logging
import os

from catalog import (
    CatalogConfig,
    ShapeCatalog,
    AddShape,
    MeasureShape,
    TranslateAll,
    ScaleAll,
    DisplayAll,
    execute,
    setup_logging,
)
from plotting import render_to_file, render_catalog_grid


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scripted demo: build a catalog, transform it and render it.")
    p.add_argument("--outdir", type=str, default="plots/catalog", help="output directory for images")
    p.add_argument("--cols", type=int, default=4, help="columns in the grid")
    p.add_argument("--dx", type=int, default=2, help="translation applied to every shape (x)")
    p.add_argument("--dy", type=int, default=-1, help="translation applied to every shape (y)")
    p.add_argument("--factor", type=int, default=2, help="scale factor applied after translating")
    p.add_argument("--verbose", action="store_true", help="log catalog operations")
    return p.parse_args()


def build_catalog(config: CatalogConfig) -> ShapeCatalog:
    catalog = ShapeCatalog()
    commands = [
        AddShape(1, 0, 0, (3, 4)),
        AddShape(2, 5, 1, (5,)),
        AddShape(3, -4, 2, (2,)),
        AddShape(4, 0, 0, (4, 0, 0, 3)),
    ]
    for cmd in commands:
        result = execute(catalog, cmd, config)
        print(result.message)
    return catalog


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    os.makedirs(args.outdir, exist_ok=True)
    config = CatalogConfig(allow_triangle=True, render_cols=args.cols)
    catalog = build_catalog(config)

    for idx in range(len(catalog)):
        print(f"[{idx}] {execute(catalog, MeasureShape(idx), config).message}")

    before = os.path.join(args.outdir, "catalog_before.png")
    print(f"Rendering catalog -> {before}")
    render_to_file(catalog, out_path=before, resolution=config.render_resolution)

    print(execute(catalog, TranslateAll(args.dx, args.dy), config).message)
    print(execute(catalog, ScaleAll(args.factor, True), config).message)
    print(execute(catalog, DisplayAll(), config).message)

    grid = os.path.join(args.outdir, "catalog_grid.png")
    print(f"Rendering catalog grid -> {grid}")
    render_catalog_grid(catalog, out_path=grid, cols=config.render_cols)


if __name__ == "__main__":
    main()
