"""
Module: engine.collision

Purpose:
    Overlap tests between grid rectangles.
    Pure predicates over the item set; nothing here moves items.

Key Functions:
    - collides(): Pairwise overlap test
    - get_first_collision(): First overlapping item in layout order
    - get_all_collisions(): Every overlapping item in layout order
    - bottom(): Lowest occupied row boundary

Dependencies:
    - core.models: LayoutItem, Layout

Used By:
    - engine.compaction, engine.move, engine.mapping
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from dashgrid.core.models import LayoutItem


def collides(a: LayoutItem, b: LayoutItem) -> bool:
    """
    Check if two items overlap with nonzero area.

    Edges that only touch do not collide. An item never collides with
    itself (matched by id).

    Example:
        >>> collides(LayoutItem("a", 0, 0, 2, 1), LayoutItem("b", 1, 0, 1, 1))
        True
        >>> collides(LayoutItem("a", 0, 0, 1, 1), LayoutItem("b", 1, 0, 1, 1))
        False
    """
    if a.id == b.id:
        return False
    if a.x + a.w <= b.x:
        return False  # a is left of b
    if a.x >= b.x + b.w:
        return False  # a is right of b
    if a.y + a.h <= b.y:
        return False  # a is above b
    if a.y >= b.y + b.h:
        return False  # a is below b
    return True


def get_first_collision(layout: Iterable[LayoutItem], item: LayoutItem) -> Optional[LayoutItem]:
    """Return the first item (in layout order) that overlaps ``item``, or None."""
    for other in layout:
        if collides(other, item):
            return other
    return None


def get_all_collisions(layout: Iterable[LayoutItem], item: LayoutItem) -> List[LayoutItem]:
    """Return every item (in layout order) that overlaps ``item``, excluding itself."""
    return [other for other in layout if collides(other, item)]


def bottom(layout: Iterable[LayoutItem]) -> int:
    """
    Lowest occupied row boundary (max of y + h); 0 for an empty layout.

    Example:
        >>> bottom([LayoutItem("a", 0, 2, 1, 3), LayoutItem("b", 0, 0, 1, 1)])
        5
    """
    return max((item.y + item.h for item in layout), default=0)
