"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_layout,
    deserialize_layout,
    dumps_layout,
    loads_layout,
    layout_from_declarations,
)

__all__ = [
    "serialize_layout",
    "deserialize_layout",
    "dumps_layout",
    "loads_layout",
    "layout_from_declarations",
]
