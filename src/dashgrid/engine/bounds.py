"""
Module: engine.bounds

Purpose:
    Bring items back inside the grid after the column count changes.
    Each item is corrected on its own; overlaps created here are left for
    compaction to resolve.

Key Functions:
    - correct_bounds(): Clamp every movable item into [0, cols)

Dependencies:
    - core.models: Layout

Used By:
    - session.GridSession: layout load and breakpoint changes
"""

from __future__ import annotations

import logging

from dashgrid.core.models import Layout, LayoutItem

logger = logging.getLogger(__name__)


def correct_bounds(layout: Layout, cols: int) -> Layout:
    """
    Clamp non-static items into the column range.

    Rules, per item in layout order:
    1. If x + w > cols, shift x left to max(0, cols - w).
    2. If w > cols, shrink w to cols.
    3. Negative x is raised to 0.
    Static items are never touched, even when out of bounds.

    Args:
        layout: Layout to correct
        cols: Active column count

    Returns:
        New layout; unchanged items are shared with the input
    """
    corrected: list[LayoutItem] = []
    changed = 0
    for item in layout:
        if item.is_static:
            if item.x + item.w > cols or item.x < 0:
                logger.warning(f"Static item {item.id!r} is outside {cols} columns; leaving it in place")
            corrected.append(item)
            continue

        x, w = item.x, item.w
        if x + w > cols:
            x = max(0, cols - w)
        if w > cols:
            w = cols
        x = max(0, x)

        if (x, w) != (item.x, item.w):
            changed += 1
            item = item.with_size(w, item.h).with_position(x, item.y)
        corrected.append(item)

    if not changed:
        return layout
    logger.debug(f"Corrected bounds of {changed} items for {cols} columns")
    return Layout.from_items(corrected)
