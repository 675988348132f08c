"""
Module: engine.move

Purpose:
    Move or resize one item and push any items it lands on out of the way.

Key Functions:
    - move_element(): Move an item to a grid cell with cascading displacement
    - resize_element(): Change an item's spans, optionally refusing collisions

Algorithm (move_element):
    1. Place the item at the requested cell; if it now overlaps a static
       item, push it past the static along the compaction axis.
    2. Keep a worklist of placed items and a set of visited ids.
    3. For each item taken from the worklist, push every unvisited
       non-static item it overlaps to just past it (below in vertical
       mode, to the right in horizontal mode), then past any static or
       already-placed item it lands on, and add it to the worklist.
    Every item is placed at most once and only ever moves away from the
    origin, so the cascade ends after at most len(layout) pushes.

Dependencies:
    - engine.collision: get_all_collisions, get_first_collision
    - engine.config: CompactType
    - engine.mapping: clamp

Used By:
    - session.GridSession: drag and resize handling
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, List, Optional

from dashgrid.core.models import Layout, LayoutItem

from .collision import get_all_collisions, get_first_collision
from .config import CompactType
from .mapping import clamp

logger = logging.getLogger(__name__)


def move_element(
    layout: Layout,
    item_id: str,
    x: int,
    y: int,
    *,
    is_user_action: bool = False,
    prevent_collision: bool = False,
    compact_type: Optional[CompactType] = CompactType.VERTICAL,
    cols: int,
    allow_overlap: bool = False,
) -> Layout:
    """
    Move one item to (x, y), displacing the items it collides with.

    Outcomes:
    - Unknown id, static item or unchanged position: input layout returned.
    - allow_overlap: the item is moved and nothing else changes.
    - prevent_collision and the target overlaps any other item: input
      layout returned (the move is rejected).
    - Otherwise: the item and every displaced item are marked moved.

    Args:
        layout: Current layout
        item_id: Id of the item to move
        x, y: Requested grid cell
        is_user_action: True for the directly dragged item; logged only
        prevent_collision: Reject moves that would overlap another item
        compact_type: Axis to push displaced items along (None pushes down)
        cols: Active column count
        allow_overlap: Skip collision handling

    Returns:
        New layout in the input order (order is only changed by compaction)
    """
    compact_type = CompactType.parse(compact_type)
    item = layout.get(item_id)
    if item is None:
        logger.debug(f"move_element: no item {item_id!r} in layout; ignoring")
        return layout
    if item.is_static:
        logger.debug(f"move_element: {item_id!r} is static; ignoring")
        return layout
    if (item.x, item.y) == (x, y):
        return layout

    target = item.with_position(x, y, moved=True)

    if allow_overlap:
        return layout.reset_moved().replace_item(target)

    items: List[LayoutItem] = layout.reset_moved().to_list()
    index = {it.id: i for i, it in enumerate(items)}
    items[index[item_id]] = target

    if prevent_collision and get_first_collision(items, target) is not None:
        logger.debug(f"move_element: {item_id!r} -> ({x}, {y}) rejected, target occupied")
        return layout

    logger.debug(
        f"move_element: {item_id!r} ({item.x}, {item.y}) -> ({x}, {y})"
        f"{' [user]' if is_user_action else ''}"
    )

    visited = {item_id}
    # The moved item itself may not rest on a static obstacle
    target = _push_clear(target, items, lambda other: other.is_static, compact_type, cols)
    items[index[item_id]] = target

    queue = deque([item_id])
    pushed = 0
    while queue:
        current = items[index[queue.popleft()]]
        for other in get_all_collisions(items, current):
            if other.is_static or other.id in visited:
                continue
            displaced = _advance(other, current, compact_type, cols).with_moved(True)
            displaced = _push_clear(
                displaced,
                items,
                lambda obstacle: obstacle.is_static or obstacle.id in visited,
                compact_type,
                cols,
            )
            items[index[other.id]] = displaced
            visited.add(other.id)
            queue.append(other.id)
            pushed += 1

    if pushed:
        logger.debug(f"move_element: displaced {pushed} items")
    return Layout.from_items(items)


def resize_element(
    layout: Layout,
    item_id: str,
    w: int,
    h: int,
    *,
    prevent_collision: bool = False,
    allow_overlap: bool = False,
    cols: int,
) -> Layout:
    """
    Change an item's spans, honouring its min/max constraints.

    Spans are clamped to [min_w, min(max_w, cols - x)] and
    [min_h, max_h]; a crossed range resolves to the minimum.

    With prevent_collision (and overlap not allowed), a size that would
    overlap neighbours is cut back instead: on each axis the span stops at
    the nearest colliding neighbour that starts beyond the item's own
    edge. This is a best-effort clamp; neighbours that do not start past
    the item on an axis leave that axis at its current span.

    Args:
        layout: Current layout
        item_id: Id of the item to resize
        w, h: Requested spans in grid units
        prevent_collision: Shrink instead of overlapping neighbours
        allow_overlap: Skip collision handling
        cols: Active column count

    Returns:
        New layout, or the input layout for unknown or static items
    """
    item = layout.get(item_id)
    if item is None:
        logger.debug(f"resize_element: no item {item_id!r} in layout; ignoring")
        return layout
    if item.is_static:
        logger.debug(f"resize_element: {item_id!r} is static; ignoring")
        return layout

    max_w = cols - item.x if item.max_w is None else min(item.max_w, cols - item.x)
    w = int(clamp(w, item.min_w, max_w))
    h = int(clamp(h, item.min_h, h if item.max_h is None else item.max_h))
    resized = item.with_size(w, h)

    if prevent_collision and not allow_overlap:
        collisions = get_all_collisions(layout, resized)
        if collisions:
            least_x = min((c.x for c in collisions if c.x > item.x), default=None)
            least_y = min((c.y for c in collisions if c.y > item.y), default=None)
            resized = item.with_size(
                least_x - item.x if least_x is not None else item.w,
                least_y - item.y if least_y is not None else item.h,
            )
            logger.debug(
                f"resize_element: {item_id!r} clamped to {resized.w}x{resized.h} "
                f"by {len(collisions)} neighbours"
            )

    if (resized.w, resized.h) == (item.w, item.h):
        return layout
    return layout.replace_item(resized)


def _advance(
    item: LayoutItem,
    blocker: LayoutItem,
    compact_type: Optional[CompactType],
    cols: int,
) -> LayoutItem:
    """Position ``item`` just past ``blocker`` along the compaction axis."""
    if compact_type is CompactType.HORIZONTAL:
        x = blocker.x + blocker.w
        if x + item.w <= cols:
            return item.with_position(x, item.y)
        # No room to the right: drop below the blocker instead
        return item.with_position(min(item.x, max(0, cols - item.w)), blocker.y + blocker.h)
    return item.with_position(item.x, blocker.y + blocker.h)


def _push_clear(
    item: LayoutItem,
    items: List[LayoutItem],
    is_obstacle: Callable[[LayoutItem], bool],
    compact_type: Optional[CompactType],
    cols: int,
) -> LayoutItem:
    """Advance ``item`` past obstacles until it overlaps none of them."""
    while True:
        hit = next(
            (other for other in get_all_collisions(items, item) if is_obstacle(other)),
            None,
        )
        if hit is None:
            return item
        item = _advance(item, hit, compact_type, cols)
