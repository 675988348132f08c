"""Centralized layout defaults.

Default grid geometry and responsive breakpoint tables used when the host
does not supply its own. Having these in one place keeps the config and
the responsive helpers in agreement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


# Breakpoint name -> minimum container width (px)
DEFAULT_BREAKPOINTS: dict[str, int] = {"lg": 1200, "md": 996, "sm": 768, "xs": 480, "xxs": 0}

# Breakpoint name -> column count
DEFAULT_COLS: dict[str, int] = {"lg": 12, "md": 10, "sm": 6, "xs": 4, "xxs": 2}

# Breakpoint name -> container padding override (None = inherit margin)
DEFAULT_PADDING: dict[str, Optional[Tuple[int, int]]] = {
    "lg": None,
    "md": None,
    "sm": None,
    "xs": None,
    "xxs": None,
}


@dataclass
class GridDefaults:
    """Default values for GridConfig fields."""

    cols: int = 12
    row_height: int = 150  # px
    margin: Tuple[int, int] = (10, 10)  # px between cells (x, y)
    compact_type: str = "vertical"
    allow_overlap: bool = False
    prevent_collision: bool = False
    is_draggable: bool = True
    is_resizable: bool = True
    is_bounded: bool = False
    responsive: bool = True
    breakpoints: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    cols_by_breakpoint: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_COLS))


# Global instance
DEFAULTS = GridDefaults()
