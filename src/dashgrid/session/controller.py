"""
Module: session.controller

Purpose:
    Drive the engine through the drag/resize lifecycle of an interactive
    grid. The session owns the single authoritative layout and swaps it for
    a new value after every event:
    pixel event → calc_xy/calc_wh → move/resize → compact → commit

Key Classes:
    - GridSession: Layout holder and event handlers
    - LayoutChange: Old/new layout pair reported when geometry changes

Dependencies:
    - engine: Geometry, compaction and mapping functions
    - core.models: Layout, LayoutItem

Used By:
    - Host UI code (pointer events, container resize observers)

Thread safety:
    A session is not thread-safe; give each host its own session. The
    layouts it hands out are immutable and safe to share.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple, Union

from dashgrid.core.models import Layout, LayoutItem
from dashgrid.engine import (
    GridConfig,
    GridRect,
    PositionParams,
    calc_column_width,
    calc_container_height,
    calc_grid_item_position,
    calc_wh,
    calc_xy,
    compact,
    correct_bounds,
    get_breakpoint_from_width,
    get_cols_from_breakpoint,
    move_element,
    resize_element,
)

logger = logging.getLogger(__name__)

LayoutListener = Callable[["LayoutChange"], None]


@dataclass(frozen=True)
class LayoutChange:
    """
    Notification that the committed layout's geometry changed.

    Attributes:
        old_layout: Layout before the gesture or reconfiguration
        layout: Layout now committed
    """

    old_layout: Layout
    layout: Layout

    @property
    def changed_ids(self) -> tuple[str, ...]:
        """Ids whose position or size differs, in new layout order."""
        changed = []
        for item in self.layout:
            before = self.old_layout.get(item.id)
            if before is None or before.geometry != item.geometry:
                changed.append(item.id)
        return tuple(changed)


class GridSession:
    """
    Authoritative layout plus the drag/resize state machine around it.

    Events for ids that are not in the layout, or for items whose drag or
    resize capability is off, are ignored.

    Example:
        >>> session = GridSession(GridConfig(cols=4, responsive=False), container_width=440)
        >>> _ = session.load([LayoutItem("a", 0, 3), LayoutItem("b", 1, 0)])
        >>> session.layout.get("a").y
        0
    """

    def __init__(self, config: Optional[GridConfig] = None, container_width: int = 0):
        self.config = config or GridConfig()
        self._cols = self.config.cols
        self._padding: Optional[Tuple[int, int]] = self.config.container_padding
        self._breakpoint: Optional[str] = None
        self._container_width = 0
        self._column_width = 0

        self._declared = Layout()
        self._layout = Layout()

        self.active_drag: Optional[LayoutItem] = None
        self._old_drag_item: Optional[LayoutItem] = None
        self._old_resize_item: Optional[LayoutItem] = None
        self._old_layout: Optional[Layout] = None

        self._listeners: List[LayoutListener] = []

        if container_width:
            self.set_container_width(container_width)

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def layout(self) -> Layout:
        """Currently committed layout."""
        return self._layout

    @property
    def cols(self) -> int:
        """Active column count."""
        return self._cols

    @property
    def breakpoint(self) -> Optional[str]:
        """Active breakpoint name (None until a width is set on a responsive grid)."""
        return self._breakpoint

    @property
    def column_width(self) -> int:
        """Column width in pixels for the current container width."""
        return self._column_width

    @property
    def container_padding(self) -> Tuple[int, int]:
        """Padding in effect, falling back to the margin."""
        return self._padding if self._padding is not None else self.config.margin

    @property
    def is_interacting(self) -> bool:
        """True between a drag/resize start and its stop."""
        return self._old_drag_item is not None or self._old_resize_item is not None

    def position_params(self) -> PositionParams:
        """Pixel geometry for the current container."""
        return PositionParams(
            cols=self._cols,
            column_width=self._column_width,
            row_height=self.config.row_height,
            margin=self.config.margin,
            container_padding=self.container_padding,
            container_width=self._container_width,
            max_rows=self.config.max_rows,
        )

    def container_height(self) -> int:
        """Pixel height needed to show every row of the layout."""
        return calc_container_height(
            self._layout, self.config.row_height, self.config.margin, self.container_padding
        )

    def item_position(self, item_id: str) -> Optional[GridRect]:
        """Pixel rectangle of an item, or None if it is not in the layout."""
        item = self._layout.get(item_id)
        if item is None:
            return None
        return calc_grid_item_position(self.position_params(), item.x, item.y, item.w, item.h)

    # ─────────────────────────────────────────────────────────────────────────
    # Listeners
    # ─────────────────────────────────────────────────────────────────────────

    def add_listener(self, listener: LayoutListener) -> None:
        """Call ``listener`` with every LayoutChange this session commits."""
        self._listeners.append(listener)

    def remove_listener(self, listener: LayoutListener) -> None:
        """Stop notifying ``listener``."""
        self._listeners.remove(listener)

    # ─────────────────────────────────────────────────────────────────────────
    # Layout loading and responsive columns
    # ─────────────────────────────────────────────────────────────────────────

    def load(self, items: Union[Layout, Iterable[LayoutItem]]) -> Optional[LayoutChange]:
        """
        Replace the layout with newly declared items.

        The declaration is kept so that later column changes start from it
        rather than from an already-squeezed layout.

        Returns:
            LayoutChange if the committed geometry changed, else None
        """
        declared = items if isinstance(items, Layout) else Layout.from_items(items)
        self._declared = declared.reset_moved()
        logger.debug(f"Loading {len(declared)} items into {self._cols} columns")
        settled = self._settle(correct_bounds(self._declared, self._cols))
        return self._commit(settled, self._layout)

    def set_container_width(self, width: int) -> Optional[LayoutChange]:
        """
        React to a container width change.

        On a responsive grid the breakpoint may switch; when it changes the
        column count the declared layout is re-fitted with correct_bounds
        and compacted. The column width is recomputed in every case.

        Returns:
            LayoutChange if the committed geometry changed, else None
        """
        self._container_width = width
        change = None

        if self.config.responsive:
            breakpoint = get_breakpoint_from_width(self.config.breakpoints, width)
            cols = get_cols_from_breakpoint(breakpoint, self.config.cols_by_breakpoint)
            self._breakpoint = breakpoint
            self._padding = self.config.padding_by_breakpoint.get(breakpoint) or self.config.container_padding
            if cols != self._cols:
                logger.debug(f"Breakpoint {breakpoint!r}: {self._cols} -> {cols} columns")
                self._cols = cols
                settled = self._settle(correct_bounds(self._declared, cols))
                change = self._commit(settled, self._layout)

        self._column_width = calc_column_width(width, self._cols, self.config.margin, self.container_padding)
        return change

    # ─────────────────────────────────────────────────────────────────────────
    # Drag lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def drag_start(self, item_id: str) -> bool:
        """
        Begin dragging an item.

        Returns:
            False if the item is unknown or not draggable
        """
        item = self._layout.get(item_id)
        if item is None or not self.config.can_drag(item):
            logger.debug(f"drag_start ignored for {item_id!r}")
            return False
        self._old_drag_item = item
        self._old_layout = self._layout
        return True

    def drag(self, item_id: str, top: float, left: float) -> None:
        """Move the dragged item to the cell under (top, left) and re-settle."""
        item = self._layout.get(item_id)
        if item is None or not self.config.can_drag(item):
            return
        moved = self._move(item, top, left)
        self.active_drag = moved.get(item_id)
        self._layout = self._settle(moved)

    def drag_stop(self, item_id: str, top: float, left: float) -> Optional[LayoutChange]:
        """
        Drop the dragged item at the cell under (top, left).

        Returns:
            LayoutChange against the layout at drag start, if geometry changed
        """
        item = self._layout.get(item_id)
        if item is None or not self.config.can_drag(item):
            return None
        settled = self._settle(self._move(item, top, left))
        old_layout = self._old_layout or self._layout
        self.active_drag = None
        self._old_drag_item = None
        self._old_layout = None
        return self._commit(settled, old_layout)

    # ─────────────────────────────────────────────────────────────────────────
    # Resize lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def resize_start(self, item_id: str) -> bool:
        """
        Begin resizing an item.

        Returns:
            False if the item is unknown or not resizable
        """
        item = self._layout.get(item_id)
        if item is None or not self.config.can_resize(item):
            logger.debug(f"resize_start ignored for {item_id!r}")
            return False
        self._old_resize_item = item
        self._old_layout = self._layout
        return True

    def resize(self, item_id: str, width: float, height: float) -> None:
        """Resize an item to the spans nearest (width, height) pixels and re-settle."""
        item = self._layout.get(item_id)
        if item is None or not self.config.can_resize(item):
            return
        w, h = calc_wh(self.position_params(), width, height, item.x, item.y)
        resized = resize_element(
            self._layout,
            item_id,
            w,
            h,
            prevent_collision=self.config.prevent_collision,
            allow_overlap=self.config.allow_overlap,
            cols=self._cols,
        )
        self.active_drag = resized.get(item_id)
        self._layout = self._settle(resized)

    def resize_stop(self) -> Optional[LayoutChange]:
        """
        Finish the current resize.

        Returns:
            LayoutChange against the layout at resize start, if geometry changed
        """
        settled = self._settle(self._layout)
        old_layout = self._old_layout or self._layout
        self.active_drag = None
        self._old_resize_item = None
        self._old_layout = None
        return self._commit(settled, old_layout)

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _move(self, item: LayoutItem, top: float, left: float) -> Layout:
        x, y = calc_xy(self.position_params(), top, left, item.w, item.h)
        return move_element(
            self._layout,
            item.id,
            x,
            y,
            is_user_action=True,
            prevent_collision=self.config.prevent_collision,
            compact_type=self.config.compact_type,
            cols=self._cols,
            allow_overlap=self.config.allow_overlap,
        )

    def _settle(self, layout: Layout) -> Layout:
        if self.config.allow_overlap:
            return layout
        return compact(layout, self.config.compact_type, self._cols)

    def _commit(self, layout: Layout, old_layout: Layout) -> Optional[LayoutChange]:
        self._layout = layout
        if layout.geometry() == old_layout.geometry():
            return None
        change = LayoutChange(old_layout=old_layout, layout=layout)
        logger.info(f"Layout changed: {len(change.changed_ids)} items")
        for listener in list(self._listeners):
            listener(change)
        return change
