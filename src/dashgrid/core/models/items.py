"""
Module: items

Purpose:
    Provides the LayoutItem dataclass - one grid-aligned rectangle in a
    layout. Positions and spans are integer grid units, never pixels.

Key Functions:
    - LayoutItem.with_position(x, y): Copy placed at a new cell
    - LayoutItem.with_size(w, h): Copy with new spans
    - LayoutItem.to_dict(): Serialize for JSON
    - LayoutItem.from_dict(data): Deserialize from JSON
    - resolve_flag(override, default): Tri-state override resolution

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.models.layout.Layout
    - core.utils.serialization
    - engine (all geometry modules)
    - session.GridSession
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional


def resolve_flag(override: Optional[bool], default: bool) -> bool:
    """
    Resolve a tri-state per-item override against the layout default.

    The item override wins when it is set (True or False); an unset
    override (None) inherits the layout-wide default.

    Example:
        >>> resolve_flag(None, True)
        True
        >>> resolve_flag(False, True)
        False
    """
    if override is None:
        return default
    return override


@dataclass(frozen=True, slots=True)
class LayoutItem:
    """
    A placed rectangle on the integer grid (immutable).

    The region covers columns [x, x + w) and rows [y, y + h).

    Attributes:
        id: Identifier, unique within a layout
        x: Column of the left edge
        y: Row of the top edge
        w: Column span
        h: Row span
        is_static: Never moved or resized by the engine; obstacle only
        is_draggable: Per-item drag override (None = layout default)
        is_resizable: Per-item resize override (None = layout default)
        is_bounded: Per-item bounded-drag override (None = layout default)
        min_w: Smallest column span a resize may produce
        max_w: Largest column span a resize may produce (None = cols)
        min_h: Smallest row span a resize may produce
        max_h: Largest row span a resize may produce (None = unbounded)
        moved: Set when the last engine call relocated this item

    Invariants:
        - w >= 1 and h >= 1
        - min_w >= 1, min_h >= 1
        - max_w/max_h, when set, are >= the matching minimum

    Note:
        ``moved`` is transient bookkeeping and does not take part in
        equality, so two layouts with the same geometry compare equal.

    Example:
        >>> item = LayoutItem("a", x=0, y=2, w=3, h=1)
        >>> item.bottom
        3
    """

    id: str
    x: int
    y: int
    w: int = 1
    h: int = 1
    is_static: bool = False
    is_draggable: Optional[bool] = None
    is_resizable: Optional[bool] = None
    is_bounded: Optional[bool] = None
    min_w: int = 1
    max_w: Optional[int] = None
    min_h: int = 1
    max_h: Optional[int] = None
    moved: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        """Validate item on construction."""
        if not self.id:
            raise ValueError("id must be a non-empty string")
        if self.w < 1:
            raise ValueError(f"w must be >= 1: {self.w}")
        if self.h < 1:
            raise ValueError(f"h must be >= 1: {self.h}")
        if self.min_w < 1:
            raise ValueError(f"min_w must be >= 1: {self.min_w}")
        if self.min_h < 1:
            raise ValueError(f"min_h must be >= 1: {self.min_h}")
        if self.max_w is not None and self.max_w < self.min_w:
            raise ValueError(f"max_w must be >= min_w: {self.max_w} < {self.min_w}")
        if self.max_h is not None and self.max_h < self.min_h:
            raise ValueError(f"max_h must be >= min_h: {self.max_h} < {self.min_h}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> int:
        """First column to the right of the item (exclusive)."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """First row below the item (exclusive)."""
        return self.y + self.h

    @property
    def geometry(self) -> tuple[int, int, int, int]:
        """(x, y, w, h) tuple."""
        return (self.x, self.y, self.w, self.h)

    # ─────────────────────────────────────────────────────────────────────────
    # Copies
    # ─────────────────────────────────────────────────────────────────────────

    def with_position(self, x: int, y: int, *, moved: Optional[bool] = None) -> LayoutItem:
        """
        Copy of this item placed at (x, y).

        Args:
            x: New column
            y: New row
            moved: Value for the moved flag (default: keep current)
        """
        return replace(self, x=x, y=y, moved=self.moved if moved is None else moved)

    def with_size(self, w: int, h: int) -> LayoutItem:
        """Copy of this item with new spans (each raised to at least 1)."""
        return replace(self, w=max(1, w), h=max(1, h))

    def with_moved(self, moved: bool) -> LayoutItem:
        """Copy of this item with the moved flag set."""
        if self.moved == moved:
            return self
        return replace(self, moved=moved)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to dictionary for JSON storage.

        Optional fields are only written when they differ from defaults.
        ``moved`` is never written.
        """
        d: dict[str, Any] = {"id": self.id, "x": self.x, "y": self.y, "w": self.w, "h": self.h}
        if self.is_static:
            d["static"] = True
        for key, value in (
            ("is_draggable", self.is_draggable),
            ("is_resizable", self.is_resizable),
            ("is_bounded", self.is_bounded),
            ("max_w", self.max_w),
            ("max_h", self.max_h),
        ):
            if value is not None:
                d[key] = value
        if self.min_w != 1:
            d["min_w"] = self.min_w
        if self.min_h != 1:
            d["min_h"] = self.min_h
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutItem:
        """
        Deserialize from dictionary.

        Args:
            data: Dict with id, x, y and optionally w, h, static and overrides

        Returns:
            LayoutItem instance
        """
        return cls(
            id=data["id"],
            x=data["x"],
            y=data["y"],
            w=data.get("w", 1),
            h=data.get("h", 1),
            is_static=data.get("static", False),
            is_draggable=data.get("is_draggable"),
            is_resizable=data.get("is_resizable"),
            is_bounded=data.get("is_bounded"),
            min_w=data.get("min_w", 1),
            max_w=data.get("max_w"),
            min_h=data.get("min_h", 1),
            max_h=data.get("max_h"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        flag = ", static" if self.is_static else ""
        return f"LayoutItem({self.id!r}, {self.x}, {self.y}, {self.w}, {self.h}{flag})"
