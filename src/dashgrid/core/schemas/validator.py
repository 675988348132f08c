"""
Schema Validation Utilities

Validates layout JSON documents before they are turned into models.

Two levels:
- Basic checks (always): required fields, integer coordinates, spans >= 1,
  unique ids. Error paths point at the offending field.
- Strict checks (strict=True): full jsonschema validation against
  ``layout.schema.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


LAYOUT_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_layout(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a serialized layout document.

    Args:
        data: Layout dictionary ({"schema_version": 1, "items": [...]})
        strict: If True, also run full jsonschema validation

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Layout document must be a dict")

    required = ["schema_version", "items"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != LAYOUT_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported layout schema version: {version} (expected {LAYOUT_SCHEMA_VERSION})",
            path="schema_version",
        )

    items = data["items"]
    if not isinstance(items, list):
        raise ValidationError("items must be a list", path="items")

    seen: set[str] = set()
    for i, item in enumerate(items):
        path = f"items[{i}]"
        validate_item(item, path=path)
        if item["id"] in seen:
            raise ValidationError(
                f"Duplicate item id: {item['id']!r}",
                path=f"{path}.id",
            )
        seen.add(item["id"])

    if strict:
        schema = _load_schema("layout")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def validate_item(data: dict[str, Any], path: str = "") -> None:
    """
    Validate a single serialized layout item.

    Args:
        data: Item dictionary
        path: Location of the item, used in error paths

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("item must be a dict", path=path)

    required = ["id", "x", "y"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Item missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    item_id = data["id"]
    if not isinstance(item_id, str) or not item_id:
        raise ValidationError(
            f"Invalid id: {item_id!r} (must be a non-empty string)",
            path=_join(path, "id"),
        )

    for key in ("x", "y"):
        value = data[key]
        if not _is_int(value) or value < 0:
            raise ValidationError(
                f"Invalid {key}: {value!r} (must be non-negative integer)",
                path=_join(path, key),
            )

    for key in ("w", "h", "min_w", "min_h", "max_w", "max_h"):
        if key not in data or (key.startswith("max_") and data[key] is None):
            continue
        value = data[key]
        if not _is_int(value) or value < 1:
            raise ValidationError(
                f"Invalid {key}: {value!r} (must be integer >= 1)",
                path=_join(path, key),
            )


def _is_int(value: Any) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key
