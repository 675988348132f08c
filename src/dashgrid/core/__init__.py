"""
dashgrid Core Package

Shared data models, schema validation and serialization.

Layouts are immutable values:
- ``LayoutItem`` is a frozen dataclass; moving or resizing produces a copy
- ``Layout`` keeps items in caller order and indexes them by id
- Engine functions return new layouts and never edit their input
"""

from .models import Layout, LayoutItem, resolve_flag
from .schemas import ValidationError

__all__ = [
    "Layout",
    "LayoutItem",
    "resolve_flag",
    "ValidationError",
]
