"""
Module: engine

Purpose:
    Layout-resolution engine. Every function takes a Layout and returns a
    new one; nothing here holds state between calls.

Key Functions:
    - collides(), get_first_collision(), get_all_collisions(), bottom()
    - correct_bounds(): Clamp items after a column count change
    - compact(): Pack items toward the top or left edge
    - move_element(), resize_element(): Mutations with collision handling
    - calc_xy(), calc_wh(), calc_grid_item_position(): Pixel <-> grid mapping

Key Classes:
    - GridConfig: Layout-wide options
    - PositionParams: Pixel geometry for mapping
    - CompactType: Compaction direction

Dependencies:
    - dashgrid.core.models: Layout, LayoutItem

Used By:
    - dashgrid.session: drag/resize lifecycle
"""

from .config import CompactType, GridConfig, PositionParams
from .collision import collides, get_first_collision, get_all_collisions, bottom
from .bounds import correct_bounds
from .compaction import compact, compact_item, sort_layout_items
from .move import move_element, resize_element
from .mapping import (
    GridRect,
    calc_xy,
    calc_wh,
    calc_grid_item_position,
    calc_column_width,
    calc_container_height,
    clamp,
)
from .responsive import get_breakpoint_from_width, get_cols_from_breakpoint, sort_breakpoints

__all__ = [
    # Config
    "CompactType",
    "GridConfig",
    "PositionParams",
    # Collision
    "collides",
    "get_first_collision",
    "get_all_collisions",
    "bottom",
    # Bounds
    "correct_bounds",
    # Compaction
    "compact",
    "compact_item",
    "sort_layout_items",
    # Move
    "move_element",
    "resize_element",
    # Mapping
    "GridRect",
    "calc_xy",
    "calc_wh",
    "calc_grid_item_position",
    "calc_column_width",
    "calc_container_height",
    "clamp",
    # Responsive
    "get_breakpoint_from_width",
    "get_cols_from_breakpoint",
    "sort_breakpoints",
]
