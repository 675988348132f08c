"""Shared defaults."""

from .defaults import DEFAULTS, DEFAULT_BREAKPOINTS, DEFAULT_COLS, DEFAULT_PADDING, GridDefaults

__all__ = [
    "DEFAULTS",
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_COLS",
    "DEFAULT_PADDING",
    "GridDefaults",
]
