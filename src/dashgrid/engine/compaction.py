"""
Module: engine.compaction

Purpose:
    Repack a layout toward the top (vertical) or left (horizontal) edge,
    removing gaps and overlaps while keeping the relative order of items.

Key Functions:
    - compact(): Main compaction function
    - compact_item(): Settle one item against already-placed items
    - sort_layout_items(): Processing order for a compaction type

Algorithm:
    1. Register every static item as an obstacle.
    2. Visit movable items in order of their row (vertical) or column
       (horizontal); ties keep layout order.
    3. Slide each item toward the edge while the next cell is free.
    4. While it overlaps a placed item, push it past that item.
    5. Add it to the placed set.
    Only placed items and statics are considered, never the old positions
    of items still waiting their turn.

Dependencies:
    - engine.collision: get_first_collision, bottom
    - engine.config: CompactType

Used By:
    - session.GridSession: after every drag, resize and column change
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from dashgrid.core.models import Layout, LayoutItem

from .collision import bottom, get_first_collision
from .config import CompactType

logger = logging.getLogger(__name__)


def sort_layout_items(layout: Sequence[LayoutItem], compact_type: Optional[CompactType]) -> List[LayoutItem]:
    """
    Order in which compaction visits items.

    Horizontal compaction sorts by column, everything else by row. The
    sort is stable, so ties keep layout order.
    """
    if compact_type is CompactType.HORIZONTAL:
        return sorted(layout, key=lambda item: item.x)
    return sorted(layout, key=lambda item: item.y)


def compact(layout: Layout, compact_type: Optional[CompactType], cols: int) -> Layout:
    """
    Pack a layout into a collision-free arrangement.

    Args:
        layout: Layout to compact
        compact_type: VERTICAL, HORIZONTAL, or None (resolve overlaps only)
        cols: Active column count; horizontal packing never exceeds it

    Returns:
        New layout in the input order. ``moved`` is True exactly for items
        whose position changed.
    """
    compact_type = CompactType.parse(compact_type)
    compare_with: List[LayoutItem] = [item for item in layout if item.is_static]
    placed: dict[str, LayoutItem] = {}

    for item in sort_layout_items(layout.items, compact_type):
        if item.is_static:
            placed[item.id] = item.with_moved(False)
            continue
        settled = compact_item(compare_with, item, compact_type, cols)
        compare_with.append(settled)
        placed[item.id] = settled

    result = Layout.from_items(placed[item.id] for item in layout)
    moved = sum(1 for item in result if item.moved)
    logger.debug(f"Compacted {len(layout)} items ({compact_type}), {moved} moved")
    return result


def compact_item(
    compare_with: Sequence[LayoutItem],
    item: LayoutItem,
    compact_type: Optional[CompactType],
    cols: int,
) -> LayoutItem:
    """
    Settle one item against already-placed items.

    Args:
        compare_with: Placed items and static obstacles
        item: Item to settle
        compact_type: Direction to slide in (None: no sliding)
        cols: Column count, the right-hand limit for horizontal packing

    Returns:
        Copy of the item at its settled position, with ``moved`` set when
        the position changed
    """
    x, y = max(0, item.x), max(0, item.y)

    if compact_type is CompactType.VERTICAL:
        # Nothing placed lies below bottom(), so start there at most
        y = min(bottom(compare_with), y)
        while y > 0 and _is_free(compare_with, item, x, y - 1):
            y -= 1
    elif compact_type is CompactType.HORIZONTAL:
        x = min(x, max(0, cols - item.w))
        x = _slide_left(compare_with, item, x, y)

    while True:
        hit = get_first_collision(compare_with, item.with_position(x, y))
        if hit is None:
            break
        if compact_type is CompactType.HORIZONTAL:
            x = hit.x + hit.w
            if x + item.w > cols:
                # No room to the right: wrap onto the next row
                x = max(0, cols - item.w)
                y += 1
                x = _slide_left(compare_with, item, x, y)
        else:
            y = hit.y + hit.h

    return item.with_position(x, y, moved=(x, y) != (item.x, item.y))


def _slide_left(compare_with: Sequence[LayoutItem], item: LayoutItem, x: int, y: int) -> int:
    while x > 0 and _is_free(compare_with, item, x - 1, y):
        x -= 1
    return x


def _is_free(compare_with: Sequence[LayoutItem], item: LayoutItem, x: int, y: int) -> bool:
    return get_first_collision(compare_with, item.with_position(x, y)) is None
