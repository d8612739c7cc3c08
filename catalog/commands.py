"""
Command values and the dispatcher that applies them to a ShapeCatalog.

The interaction layer (interactive menu, scripts, tests) builds one of the
command dataclasses below from already-parsed integers and passes it to
execute(). Every outcome, including failures, comes back as a
CommandResult whose message is ready to print.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union
import logging

from shapes import Shape
from .collection import ShapeCatalog
from .config import CatalogConfig
from .factory import ShapeSpec, kind_for_selector


logger = logging.getLogger(__name__)

Status = Literal["ok", "not_found", "invalid_selector", "invalid_argument"]


@dataclass(frozen=True)
class AddShape:
    selector: int
    x: int
    y: int
    dims: Tuple[int, ...] = ()


@dataclass(frozen=True)
class RemoveShape:
    index: int


@dataclass(frozen=True)
class ShowShape:
    index: int


@dataclass(frozen=True)
class MeasureShape:
    index: int


@dataclass(frozen=True)
class DisplayAll:
    pass


@dataclass(frozen=True)
class TranslateAll:
    dx: int
    dy: int


@dataclass(frozen=True)
class ScaleAll:
    factor: int
    increase: bool


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[AddShape, RemoveShape, ShowShape, MeasureShape, DisplayAll, TranslateAll, ScaleAll, Quit]


@dataclass(frozen=True)
class CommandResult:
    status: Status
    message: str
    shape: Optional[Shape] = None
    area: Optional[float] = None
    perimeter: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def _add(catalog: ShapeCatalog, cmd: AddShape, config: CatalogConfig) -> CommandResult:
    kind = kind_for_selector(cmd.selector)
    if kind is None or (kind == "triangle" and not config.allow_triangle):
        logger.info("rejected shape selector %d", cmd.selector)
        return CommandResult("invalid_selector", "Invalid choice. Shape not added.")
    try:
        shape = ShapeSpec(kind=kind, x=cmd.x, y=cmd.y, dims=tuple(cmd.dims)).to_shape()
    except ValueError as e:
        logger.info("rejected %s: %s", kind, e)
        return CommandResult("invalid_argument", f"Invalid dimensions. Shape not added. ({e})")
    catalog.add(shape)
    return CommandResult("ok", "Shape added successfully!", shape=shape)


def _remove(catalog: ShapeCatalog, cmd: RemoveShape) -> CommandResult:
    shape = catalog.remove_at(cmd.index)
    if shape is None:
        return CommandResult("not_found", "Invalid position. Shape not removed.")
    return CommandResult("ok", "Shape removed successfully!", shape=shape)


def _show(catalog: ShapeCatalog, cmd: ShowShape) -> CommandResult:
    shape = catalog.get_at(cmd.index)
    if shape is None:
        return CommandResult("not_found", "Invalid position. Shape not found.")
    return CommandResult("ok", shape.display(), shape=shape)


def _measure(catalog: ShapeCatalog, cmd: MeasureShape) -> CommandResult:
    measures = catalog.measure(cmd.index)
    if measures is None:
        return CommandResult("not_found", "There's no shape on the given coordinates!")
    area, perimeter = measures
    return CommandResult(
        "ok",
        f"Area: {area:g}\nPerimeter: {perimeter:g}",
        area=area,
        perimeter=perimeter,
    )


def _scale(catalog: ShapeCatalog, cmd: ScaleAll) -> CommandResult:
    try:
        catalog.scale_all(cmd.factor, cmd.increase)
    except ValueError as e:
        logger.info("scale rejected: %s", e)
        return CommandResult(
            "invalid_argument",
            "Scale factor must be non-zero when decreasing. Shapes not scaled.",
        )
    return CommandResult("ok", "Shapes scaled successfully!")


def execute(catalog: ShapeCatalog, command: Command, config: Optional[CatalogConfig] = None) -> CommandResult:
    if config is None:
        config = CatalogConfig()
    if isinstance(command, AddShape):
        return _add(catalog, command, config)
    if isinstance(command, RemoveShape):
        return _remove(catalog, command)
    if isinstance(command, ShowShape):
        return _show(catalog, command)
    if isinstance(command, MeasureShape):
        return _measure(catalog, command)
    if isinstance(command, DisplayAll):
        return CommandResult("ok", catalog.display_all())
    if isinstance(command, TranslateAll):
        catalog.translate_all(command.dx, command.dy)
        return CommandResult("ok", "Shapes translated!")
    if isinstance(command, ScaleAll):
        return _scale(catalog, command)
    if isinstance(command, Quit):
        return CommandResult("ok", "Program Exited!")
    raise ValueError(f"unknown command: {command!r}")
