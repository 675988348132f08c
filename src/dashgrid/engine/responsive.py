"""
Module: engine.responsive

Purpose:
    Pick the active breakpoint and column count for a container width.

Key Functions:
    - sort_breakpoints(): Breakpoint names, narrowest first
    - get_breakpoint_from_width(): Breakpoint for a container width
    - get_cols_from_breakpoint(): Column count for a breakpoint

Dependencies:
    - common.defaults: Default tables

Used By:
    - session.GridSession.set_container_width
"""

from __future__ import annotations

from typing import List, Mapping

from dashgrid.common.defaults import DEFAULT_BREAKPOINTS, DEFAULT_COLS


def sort_breakpoints(breakpoints: Mapping[str, int] = DEFAULT_BREAKPOINTS) -> List[str]:
    """
    Breakpoint names ordered by minimum width, narrowest first.

    Example:
        >>> sort_breakpoints({"lg": 1200, "sm": 768, "md": 996})
        ['sm', 'md', 'lg']
    """
    return sorted(breakpoints, key=lambda name: breakpoints[name])


def get_breakpoint_from_width(breakpoints: Mapping[str, int], width: int) -> str:
    """
    Widest breakpoint whose minimum width is strictly below ``width``.

    Falls back to the narrowest breakpoint when none qualifies.

    Raises:
        ValueError: If no breakpoints are configured

    Example:
        >>> get_breakpoint_from_width({"lg": 1200, "md": 996, "sm": 0}, 1000)
        'md'
    """
    ordered = sort_breakpoints(breakpoints)
    if not ordered:
        raise ValueError("No breakpoints configured")
    matching = ordered[0]
    for name in ordered[1:]:
        if width > breakpoints[name]:
            matching = name
    return matching


def get_cols_from_breakpoint(breakpoint: str, cols: Mapping[str, int] = DEFAULT_COLS) -> int:
    """
    Column count configured for a breakpoint.

    Raises:
        ValueError: If the breakpoint has no column count
    """
    if breakpoint not in cols:
        raise ValueError(f"No column count for breakpoint {breakpoint!r}. Available: {list(cols)}")
    return cols[breakpoint]
