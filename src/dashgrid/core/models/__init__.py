"""
Core Models Package

Immutable, validated data models shared by the engine and the session.

All models in this package are frozen dataclasses: layouts are values,
and every engine call returns a new one instead of editing the input.
"""

from .items import LayoutItem, resolve_flag
from .layout import Layout

__all__ = [
    "LayoutItem",
    "Layout",
    "resolve_flag",
]
