"""
Module: engine.config

Purpose:
    Configuration for the layout engine.
    Defines grid options (columns, compaction, collision policy) and the
    pixel geometry used for coordinate mapping.

Key Classes:
    - CompactType: Compaction direction
    - GridConfig: Immutable layout-wide options
    - PositionParams: Pixel geometry for grid <-> pixel conversion

Dependencies:
    - dataclasses (std)
    - enum (std)
    - common.defaults: Default values and breakpoint tables

Used By:
    - engine.compaction, engine.move: compaction direction
    - engine.mapping: PositionParams
    - session.GridSession: GridConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from dashgrid.common.defaults import DEFAULT_PADDING, DEFAULTS
from dashgrid.core.models import LayoutItem, resolve_flag


class CompactType(str, Enum):
    """Edge that compaction packs items toward."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def parse(cls, value: Union[CompactType, str, None]) -> Optional[CompactType]:
        """
        Normalize a host value to a CompactType.

        None and empty strings disable compaction.

        Raises:
            ValueError: If the value is not a known compaction type
        """
        if value is None or value == "":
            return None
        return cls(value)


@dataclass(frozen=True)
class GridConfig:
    """
    Layout-wide configuration (immutable).

    Attributes:
        cols: Number of columns
        row_height: Height of one row in pixels
        margin: Gap between cells in pixels (x, y)
        container_padding: Padding inside the container (x, y); None inherits margin
        max_rows: Row limit for coordinate mapping (None = unbounded)
        compact_type: Compaction direction (None disables compaction)
        allow_overlap: Skip collision handling and compaction entirely
        prevent_collision: Reject moves/resizes that would collide
        is_draggable: Default for items without a drag override
        is_resizable: Default for items without a resize override
        is_bounded: Default bounded-drag behaviour
        responsive: Pick cols from breakpoints when the width changes
        breakpoints: Breakpoint name -> minimum container width
        cols_by_breakpoint: Breakpoint name -> column count
        padding_by_breakpoint: Breakpoint name -> padding override

    Example:
        >>> config = GridConfig(cols=6, compact_type="horizontal")
        >>> config.compact_type
        <CompactType.HORIZONTAL: 'horizontal'>
        >>> config.effective_padding
        (10, 10)
    """

    cols: int = DEFAULTS.cols
    row_height: int = DEFAULTS.row_height
    margin: Tuple[int, int] = DEFAULTS.margin
    container_padding: Optional[Tuple[int, int]] = None
    max_rows: Optional[int] = None
    compact_type: Optional[CompactType] = CompactType(DEFAULTS.compact_type)

    # Collision policy
    allow_overlap: bool = DEFAULTS.allow_overlap
    prevent_collision: bool = DEFAULTS.prevent_collision

    # Per-item defaults
    is_draggable: bool = DEFAULTS.is_draggable
    is_resizable: bool = DEFAULTS.is_resizable
    is_bounded: bool = DEFAULTS.is_bounded

    # Responsive
    responsive: bool = DEFAULTS.responsive
    breakpoints: dict[str, int] = field(default_factory=lambda: dict(DEFAULTS.breakpoints))
    cols_by_breakpoint: dict[str, int] = field(default_factory=lambda: dict(DEFAULTS.cols_by_breakpoint))
    padding_by_breakpoint: dict[str, Optional[Tuple[int, int]]] = field(
        default_factory=lambda: dict(DEFAULT_PADDING)
    )

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        object.__setattr__(self, "compact_type", CompactType.parse(self.compact_type))
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1: {self.cols}")
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive: {self.row_height}")
        if min(self.margin) < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.container_padding is not None and min(self.container_padding) < 0:
            raise ValueError(f"container_padding must be non-negative: {self.container_padding}")
        if self.max_rows is not None and self.max_rows < 1:
            raise ValueError(f"max_rows must be >= 1: {self.max_rows}")
        if self.responsive:
            missing = [bp for bp in self.breakpoints if bp not in self.cols_by_breakpoint]
            if missing:
                raise ValueError(f"No column count for breakpoints: {missing}")

    @property
    def effective_padding(self) -> Tuple[int, int]:
        """Container padding, falling back to the margin when unset."""
        return self.container_padding if self.container_padding is not None else self.margin

    # ─────────────────────────────────────────────────────────────────────────
    # Per-item capabilities (item override, else layout default)
    # ─────────────────────────────────────────────────────────────────────────

    def can_drag(self, item: LayoutItem) -> bool:
        """Whether the host may drag this item. Static items never drag."""
        return resolve_flag(item.is_draggable, self.is_draggable) and not item.is_static

    def can_resize(self, item: LayoutItem) -> bool:
        """Whether the host may resize this item. Static items never resize."""
        return resolve_flag(item.is_resizable, self.is_resizable) and not item.is_static

    def is_item_bounded(self, item: LayoutItem) -> bool:
        """
        Whether dragging this item is confined to the container.

        Requires a draggable item and the layout-wide setting; an item can
        only opt out (is_bounded=False), not opt in.
        """
        return self.can_drag(item) and self.is_bounded and item.is_bounded is not False


@dataclass(frozen=True)
class PositionParams:
    """
    Pixel geometry for converting between pixels and grid units (immutable).

    Supplied per call; not part of any layout.

    Attributes:
        cols: Number of columns
        column_width: Width of one column in pixels
        row_height: Height of one row in pixels
        margin: Gap between cells in pixels (x, y)
        container_padding: Padding inside the container (x, y)
        container_width: Container width in pixels
        max_rows: Row limit (None = unbounded)

    Example:
        >>> params = PositionParams(cols=12, column_width=100, row_height=50)
        >>> params.column_pitch
        110
    """

    cols: int
    column_width: float
    row_height: float
    margin: Tuple[int, int] = (10, 10)
    container_padding: Tuple[int, int] = (10, 10)
    container_width: int = 0
    max_rows: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1: {self.cols}")
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive: {self.row_height}")
        if self.column_width < 0:
            raise ValueError(f"column_width must be non-negative: {self.column_width}")

    @property
    def column_pitch(self) -> float:
        """Distance between the left edges of adjacent columns."""
        return self.column_width + self.margin[0]

    @property
    def row_pitch(self) -> float:
        """Distance between the top edges of adjacent rows."""
        return self.row_height + self.margin[1]
