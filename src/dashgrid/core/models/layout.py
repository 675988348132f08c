"""
Module: layout

Purpose:
    Provides the Layout dataclass - an ordered, immutable collection of
    LayoutItems with id lookup. Every change produces a new Layout.

Key Functions:
    - Layout.get(item_id): Look up an item by id
    - Layout.replace_item(item): New layout with one item swapped
    - Layout.with_item(item_id, fn): Apply a function to one item
    - Layout.reset_moved(): Clear the transient moved flags
    - Layout.geometry(): Positions only, for change detection

Dependencies:
    - dataclasses (std)
    - .items.LayoutItem

Used By:
    - engine (all geometry modules)
    - core.utils.serialization
    - session.GridSession

Storage:
    Items live in a dense tuple in caller order; an id -> index map is
    built once on construction. Order is significant: compaction uses it
    to break ties.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional

from .items import LayoutItem


@dataclass(frozen=True)
class Layout:
    """
    Ordered set of LayoutItems (immutable).

    Attributes:
        items: Items in layout order

    Invariants:
        - No two items share an id

    Example:
        >>> layout = Layout.from_items([LayoutItem("a", 0, 0), LayoutItem("b", 1, 0)])
        >>> layout.get("b").x
        1
        >>> len(layout)
        2
    """

    items: tuple[LayoutItem, ...] = ()
    _index: dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build the id index and reject duplicate ids."""
        index: dict[str, int] = {}
        for i, item in enumerate(self.items):
            if item.id in index:
                raise ValueError(f"Duplicate item id in layout: {item.id!r}")
            index[item.id] = i
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_items(cls, items: Iterable[LayoutItem]) -> Layout:
        """Create a layout from any iterable of items, keeping order."""
        return cls(items=tuple(items))

    # ─────────────────────────────────────────────────────────────────────────
    # Container protocol
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LayoutItem]:
        return iter(self.items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._index

    def __getitem__(self, position: int) -> LayoutItem:
        return self.items[position]

    # ─────────────────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def ids(self) -> tuple[str, ...]:
        """Item ids in layout order."""
        return tuple(item.id for item in self.items)

    def get(self, item_id: str) -> Optional[LayoutItem]:
        """Return the item with this id, or None if it is not in the layout."""
        i = self._index.get(item_id)
        return None if i is None else self.items[i]

    def index_of(self, item_id: str) -> int:
        """
        Position of an item in layout order.

        Raises:
            KeyError: If the id is not in the layout
        """
        return self._index[item_id]

    # ─────────────────────────────────────────────────────────────────────────
    # Derived layouts
    # ─────────────────────────────────────────────────────────────────────────

    def replace_item(self, item: LayoutItem) -> Layout:
        """
        New layout with the item of the same id replaced.

        Unknown ids return this layout unchanged.
        """
        i = self._index.get(item.id)
        if i is None:
            return self
        items = list(self.items)
        items[i] = item
        return Layout(items=tuple(items))

    def with_item(
        self,
        item_id: str,
        fn: Callable[[LayoutItem], LayoutItem],
    ) -> tuple[Layout, Optional[LayoutItem]]:
        """
        Apply ``fn`` to one item.

        Returns:
            (new layout, new item), or (this layout, None) if the id is unknown
        """
        item = self.get(item_id)
        if item is None:
            return self, None
        updated = fn(item)
        return self.replace_item(updated), updated

    def reset_moved(self) -> Layout:
        """New layout with every moved flag cleared."""
        if not any(item.moved for item in self.items):
            return self
        return Layout(items=tuple(item.with_moved(False) for item in self.items))

    def geometry(self) -> tuple[tuple[str, int, int, int, int], ...]:
        """(id, x, y, w, h) for each item in layout order."""
        return tuple((item.id, *item.geometry) for item in self.items)

    def to_list(self) -> list[LayoutItem]:
        """Items as a new list (safe to modify)."""
        return list(self.items)
