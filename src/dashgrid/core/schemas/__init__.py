"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_item,
    validate_layout,
    ValidationError,
    LAYOUT_SCHEMA_VERSION,
)

__all__ = [
    "validate_item",
    "validate_layout",
    "ValidationError",
    "LAYOUT_SCHEMA_VERSION",
]
