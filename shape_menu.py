from __future__ import annotations

import argparse
import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from catalog import (
    CatalogConfig,
    ShapeCatalog,
    AddShape,
    RemoveShape,
    ShowShape,
    MeasureShape,
    DisplayAll,
    TranslateAll,
    ScaleAll,
    Quit,
    CommandResult,
    execute,
    setup_logging,
)


MAIN_MENU = [
    "1: Add a shape",
    "2: Remove a shape by position",
    "3: Get information about a shape by position",
    "4: Area and perimeter of a shape by position",
    "5: Display information of all the shapes",
    "6: Translate all the shapes",
    "7: Scale all the shapes",
    "0: Quit program",
]

SHAPE_MENU = [
    "Select a shape to add:",
    "1: Rectangle",
    "2: Square",
    "3: Circle",
    "4: Triangle",
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Interactive catalog of 2D shapes.")
    p.add_argument("--allow-triangle", action="store_true", help="let menu option 4 create triangles")
    p.add_argument("--render", type=str, default="", help="write the final catalog grid to this path on exit")
    p.add_argument("--cols", type=int, default=4, help="columns in the rendered grid")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    p.add_argument("--log-file", type=str, default="", help="optional log file")
    return p.parse_args(argv)


class ShapeMenu:
    """
    Console front end. Reads integers the way a stream extractor does
    (whitespace-separated tokens, any number per line), turns each menu
    choice into a command and prints the result message.
    """

    def __init__(
        self,
        catalog: Optional[ShapeCatalog] = None,
        config: Optional[CatalogConfig] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.catalog = catalog if catalog is not None else ShapeCatalog()
        self.config = config if config is not None else CatalogConfig()
        self._input = input_fn if input_fn is not None else input
        self._output = output_fn if output_fn is not None else print
        self._tokens: Deque[str] = deque()

    def read_int(self, prompt: str) -> int:
        while True:
            while not self._tokens:
                self._tokens.extend(self._input(prompt).split())
            tok = self._tokens.popleft()
            try:
                return int(tok)
            except ValueError:
                self._tokens.clear()
                self._output(f"'{tok}' is not an integer, try again.")

    def _report(self, result: CommandResult) -> CommandResult:
        self._output(result.message)
        return result

    def add_shape(self) -> CommandResult:
        for line in SHAPE_MENU:
            self._output(line)
        selector = self.read_int("Enter your choice: ")
        # coordinates come first for every choice, valid or not
        x = self.read_int("Enter the coordinates x:")
        y = self.read_int("Enter the coordinates y:")
        dims: Tuple[int, ...] = ()
        if selector == 1:
            dims = (self.read_int("Enter the width and length: "), self.read_int("Enter the width and length: "))
        elif selector == 2:
            dims = (self.read_int("Enter the side length: "),)
        elif selector == 3:
            dims = (self.read_int("Enter the radius: "),)
        elif selector == 4 and self.config.allow_triangle:
            dims = (
                self.read_int("Enter vertex 2 x: "),
                self.read_int("Enter vertex 2 y: "),
                self.read_int("Enter vertex 3 x: "),
                self.read_int("Enter vertex 3 y: "),
            )
        return self._report(execute(self.catalog, AddShape(selector, x, y, dims), self.config))

    def remove_shape(self) -> CommandResult:
        pos = self.read_int("Enter the position of the shape to remove: ")
        return self._report(execute(self.catalog, RemoveShape(pos), self.config))

    def shape_info(self) -> CommandResult:
        pos = self.read_int("Enter the position of the shape to get information: ")
        return self._report(execute(self.catalog, ShowShape(pos), self.config))

    def area_and_perimeter(self) -> CommandResult:
        pos = self.read_int("Enter the position of the shape to calculate area and perimeter: ")
        return self._report(execute(self.catalog, MeasureShape(pos), self.config))

    def display_shapes(self) -> CommandResult:
        return self._report(execute(self.catalog, DisplayAll(), self.config))

    def translate_shapes(self) -> CommandResult:
        dx = self.read_int("Enter the translation values (dx): ")
        dy = self.read_int("Enter the translation values (dy): ")
        return self._report(execute(self.catalog, TranslateAll(dx, dy), self.config))

    def scale_shapes(self) -> CommandResult:
        factor = self.read_int("Enter the scaling factor: ")
        sign = self.read_int("Enter the scaling sign (0 to Decrease, 1 to Increase): ")
        return self._report(execute(self.catalog, ScaleAll(factor, sign != 0), self.config))

    def run(self) -> None:
        actions = {
            1: self.add_shape,
            2: self.remove_shape,
            3: self.shape_info,
            4: self.area_and_perimeter,
            5: self.display_shapes,
            6: self.translate_shapes,
            7: self.scale_shapes,
        }
        while True:
            for line in MAIN_MENU:
                self._output(line)
            try:
                choice = self.read_int("Enter your choice: ")
                if choice == 0:
                    self._report(execute(self.catalog, Quit(), self.config))
                    return
                action = actions.get(choice)
                if action is None:
                    self._output("Invalid Input.")
                    continue
                action()
            except EOFError:
                # closed input ends the session like choosing 0
                self._report(execute(self.catalog, Quit(), self.config))
                return


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = CatalogConfig(
        allow_triangle=args.allow_triangle,
        render_cols=args.cols,
        log_level=getattr(logging, args.log_level),
    )
    setup_logging(config.log_level, log_file=args.log_file or None)
    menu = ShapeMenu(config=config)
    menu.run()
    if args.render:
        from plotting.renderer import render_catalog_grid

        print(f"Rendering catalog grid -> {args.render}")
        render_catalog_grid(menu.catalog, out_path=args.render, cols=config.render_cols)


if __name__ == "__main__":
    main()
