"""
Module: engine.mapping

Purpose:
    Convert between pixel geometry and grid units.
    Pure arithmetic: no collision awareness, only unit conversion and
    clamping to the grid.

Key Functions:
    - calc_xy(): Pixel position -> grid cell
    - calc_wh(): Pixel size -> grid spans
    - calc_grid_item_position(): Grid rectangle -> pixel rectangle
    - calc_column_width(): Column width for a container width
    - calc_container_height(): Pixel height needed by a layout
    - clamp(): Bound a value, lower bound winning

Rounding:
    Values are rounded half up (2.5 -> 3, -2.5 -> -2), matching how hosts
    round pixel math, not Python's round-half-even.

Dependencies:
    - engine.config: PositionParams
    - engine.collision: bottom

Used By:
    - session.GridSession: drag/resize mapping and container sizing
    - engine.move: span clamping on resize
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from dashgrid.core.models import LayoutItem

from .collision import bottom
from .config import PositionParams


@dataclass(frozen=True)
class GridRect:
    """
    Pixel rectangle of a grid item, relative to the container.

    Attributes:
        left: X offset in pixels
        top: Y offset in pixels
        width: Width in pixels
        height: Height in pixels
    """

    left: int
    top: int
    width: int
    height: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Bound ``value`` to [lower, upper].

    When the bounds cross (lower > upper) the lower bound wins.

    Example:
        >>> clamp(5, 1, 3)
        3
        >>> clamp(5, 4, 2)
        4
    """
    return max(min(value, upper), lower)


def calc_grid_item_wh_px(grid_units: int, cell_size: float, margin: int) -> int:
    """Pixel length of ``grid_units`` cells with margins between (not after) them."""
    return round_half_up(cell_size * grid_units + max(0, grid_units - 1) * margin)


def calc_grid_item_position(params: PositionParams, x: int, y: int, w: int, h: int) -> GridRect:
    """
    Forward map a grid rectangle to pixels.

    Args:
        params: Pixel geometry
        x, y: Grid cell of the top-left corner
        w, h: Spans in grid units

    Returns:
        GridRect with left/top offsets and pixel size
    """
    pad_x, pad_y = params.container_padding
    return GridRect(
        left=round_half_up(params.column_pitch * x + pad_x),
        top=round_half_up(params.row_pitch * y + pad_y),
        width=calc_grid_item_wh_px(w, params.column_width, params.margin[0]),
        height=calc_grid_item_wh_px(h, params.row_height, params.margin[1]),
    )


def calc_xy(params: PositionParams, top: float, left: float, w: int, h: int) -> Tuple[int, int]:
    """
    Inverse map a pixel position to the nearest grid cell.

    The result keeps an item of span (w, h) inside the grid:
    x in [0, cols - w] and y in [0, max_rows - h] (no upper row bound
    when max_rows is None).

    Args:
        params: Pixel geometry
        top: Pixel offset from the container top
        left: Pixel offset from the container left
        w, h: Spans of the item being placed

    Returns:
        (x, y) grid cell
    """
    pad_x, pad_y = params.container_padding
    x = _units(left - pad_x, params.column_pitch)
    y = _units(top - pad_y, params.row_pitch)

    x = clamp(x, 0, params.cols - w)
    y = clamp(y, 0, _row_limit(params.max_rows, h))
    return int(x), int(y)


def calc_wh(params: PositionParams, width: float, height: float, x: int, y: int) -> Tuple[int, int]:
    """
    Inverse map a pixel size to grid spans.

    Spans are rounded to the nearest whole cell, kept inside the grid from
    (x, y), and never drop below 1.

    Args:
        params: Pixel geometry
        width, height: Pixel size
        x, y: Grid cell the item starts at

    Returns:
        (w, h) spans
    """
    w = _units(width + params.margin[0], params.column_pitch)
    h = _units(height + params.margin[1], params.row_pitch)

    w = clamp(w, 1, params.cols - x)
    h = clamp(h, 1, _row_limit(params.max_rows, y))
    return int(w), int(h)


def calc_column_width(
    container_width: int,
    cols: int,
    margin: Tuple[int, int],
    container_padding: Tuple[int, int],
) -> int:
    """
    Width of one column so that cols columns, their margins and the
    container padding fill the container.
    """
    usable = container_width - margin[0] * (cols - 1) - container_padding[0] * 2
    return max(0, round_half_up(usable / cols))


def calc_container_height(
    layout: Iterable[LayoutItem],
    row_height: int,
    margin: Tuple[int, int],
    container_padding: Tuple[int, int],
) -> int:
    """
    Pixel height that fits every row of the layout plus vertical padding.

    An empty layout needs only its padding.
    """
    rows = bottom(layout)
    if rows == 0:
        return container_padding[1] * 2
    return rows * row_height + (rows - 1) * margin[1] + container_padding[1] * 2


def _units(pixels: float, pitch: float) -> int:
    if pitch <= 0:
        return 0
    return round_half_up(pixels / pitch)


def _row_limit(max_rows: Optional[int], used: int) -> float:
    if max_rows is None:
        return math.inf
    return max_rows - used
