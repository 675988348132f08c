"""
Serialization Utilities

Provides to/from JSON utilities for layout models.

Two input shapes are supported:
- Layout documents: ``{"schema_version": 1, "items": [...]}`` with typed
  values, as written by ``serialize_layout``.
- Declarations: the per-child descriptors a host collects from its
  markup, where every value is a string attribute and boolean flags are
  expressed by attribute presence (``{"id": "a", "x": "2", "static": ""}``).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping, Optional

from ..models.items import LayoutItem
from ..models.layout import Layout
from ..schemas.validator import LAYOUT_SCHEMA_VERSION, ValidationError, validate_layout

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Layout Documents
# ─────────────────────────────────────────────────────────────────────────────

def serialize_layout(layout: Layout) -> dict[str, Any]:
    """
    Serialize a Layout to a dictionary.

    The output can be written to JSON and will pass schema validation.

    Args:
        layout: Layout to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": LAYOUT_SCHEMA_VERSION,
        "items": [item.to_dict() for item in layout],
    }


def deserialize_layout(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Layout:
    """
    Deserialize a Layout from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building models
        strict: Run full jsonschema validation (implies validate)

    Returns:
        Layout instance

    Raises:
        ValidationError: If validation is enabled and data is invalid
        ValueError: If the data cannot form valid models
    """
    if validate or strict:
        validate_layout(data, strict=strict)

    return Layout.from_items(LayoutItem.from_dict(item) for item in data["items"])


def dumps_layout(layout: Layout, *, indent: Optional[int] = None) -> str:
    """Serialize a Layout to a JSON string."""
    return json.dumps(serialize_layout(layout), indent=indent, ensure_ascii=False)


def loads_layout(text: str, *, strict: bool = False) -> Layout:
    """
    Parse a Layout from a JSON string.

    Raises:
        ValidationError: If the text is not valid JSON or not a valid layout
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", errors=[str(e)]) from e
    return deserialize_layout(data, strict=strict)


# ─────────────────────────────────────────────────────────────────────────────
# Declarations
# ─────────────────────────────────────────────────────────────────────────────

# attribute name -> (LayoutItem field, default)
_INT_ATTRIBUTES = {
    "x": ("x", 0),
    "y": ("y", 0),
    "w": ("w", 1),
    "h": ("h", 1),
    "min-w": ("min_w", 1),
    "min-h": ("min_h", 1),
    "max-w": ("max_w", None),
    "max-h": ("max_h", None),
}

_FLAG_ATTRIBUTES = {
    "drag": "is_draggable",
    "resizable": "is_resizable",
    "bounded": "is_bounded",
}


def layout_from_declarations(declarations: Iterable[Mapping[str, Any]]) -> Layout:
    """
    Build a Layout from host child declarations.

    Rules:
    1. Declarations without an id are skipped.
    2. Missing coordinates default to x=0, y=0, w=1, h=1.
    3. ``static`` is true when the attribute is present at all.
    4. ``drag``/``resizable``/``bounded`` are tri-state: absent leaves the
       override unset, present means true unless the value is "false".

    Args:
        declarations: Attribute mappings in document order

    Returns:
        Layout in declaration order

    Raises:
        ValidationError: If an attribute is not an integer or a span is < 1,
            or two declarations share an id
    """
    items: list[LayoutItem] = []
    seen: set[str] = set()
    for i, attrs in enumerate(declarations):
        item_id = attrs.get("id")
        if not item_id:
            logger.debug(f"Skipping declaration {i} without id")
            continue
        if item_id in seen:
            raise ValidationError(
                f"Duplicate item id: {item_id!r}",
                path=f"declarations[{i}].id",
            )
        seen.add(item_id)

        kwargs: dict[str, Any] = {"id": item_id, "is_static": "static" in attrs}
        for attr, (name, default) in _INT_ATTRIBUTES.items():
            kwargs[name] = _parse_int(attrs.get(attr), default, f"declarations[{i}].{attr}")
        for attr, name in _FLAG_ATTRIBUTES.items():
            kwargs[name] = _parse_flag(attrs, attr)

        try:
            items.append(LayoutItem(**kwargs))
        except ValueError as e:
            raise ValidationError(str(e), path=f"declarations[{i}]", errors=[str(e)]) from e

    return Layout.from_items(items)


def _parse_int(value: Any, default: Optional[int], path: str) -> Optional[int]:
    """Parse an integer attribute; empty or missing yields the default."""
    if value is None or value == "":
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"Invalid integer attribute: {value!r}", path=path) from e


def _parse_flag(attrs: Mapping[str, Any], attr: str) -> Optional[bool]:
    """Tri-state presence flag: absent -> None, "false" -> False, else True."""
    if attr not in attrs:
        return None
    value = attrs[attr]
    if isinstance(value, bool):
        return value
    return str(value) != "false"
