"""
Unit Tests for LayoutItem Model

Tests for the LayoutItem dataclass and tri-state flag resolution.
"""

import pytest

from dashgrid.core.models.items import LayoutItem, resolve_flag


class TestLayoutItem:
    """Tests for LayoutItem dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_item_then_creates_item(self):
        """Valid item should be created with defaults."""
        item = LayoutItem("a", x=1, y=2)
        assert item.w == 1
        assert item.h == 1
        assert item.is_static is False
        assert item.is_draggable is None
        assert item.moved is False

    def test_init_when_zero_width_then_raises_error(self):
        """w < 1 should raise ValueError."""
        with pytest.raises(ValueError, match="w must be >= 1"):
            LayoutItem("a", 0, 0, w=0)

    def test_init_when_negative_height_then_raises_error(self):
        """h < 1 should raise ValueError."""
        with pytest.raises(ValueError, match="h must be >= 1"):
            LayoutItem("a", 0, 0, h=-2)

    def test_init_when_empty_id_then_raises_error(self):
        """Empty id should raise ValueError."""
        with pytest.raises(ValueError, match="id must be a non-empty string"):
            LayoutItem("", 0, 0)

    def test_init_when_max_below_min_then_raises_error(self):
        """max_w < min_w should raise ValueError."""
        with pytest.raises(ValueError, match="max_w must be >= min_w"):
            LayoutItem("a", 0, 0, min_w=3, max_w=2)

    # ─────────────────────────────────────────────────────────────────────────
    # Property Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_right_and_bottom_when_placed_then_exclusive_edges(self):
        """right/bottom are the first cells outside the item."""
        item = LayoutItem("a", 2, 3, 4, 5)
        assert item.right == 6
        assert item.bottom == 8
        assert item.geometry == (2, 3, 4, 5)

    def test_equality_when_only_moved_differs_then_equal(self):
        """The moved flag does not take part in equality."""
        a = LayoutItem("a", 0, 0)
        assert a == a.with_moved(True)

    # ─────────────────────────────────────────────────────────────────────────
    # Copy Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_with_position_when_called_then_returns_new_item(self):
        """with_position copies; the original is untouched."""
        a = LayoutItem("a", 0, 0, 2, 2)
        b = a.with_position(3, 4, moved=True)
        assert (b.x, b.y, b.w, b.h) == (3, 4, 2, 2)
        assert b.moved is True
        assert (a.x, a.y) == (0, 0)

    def test_with_size_when_degenerate_span_then_raised_to_one(self):
        """Computed spans below 1 are corrected to 1."""
        a = LayoutItem("a", 0, 0, 2, 2)
        b = a.with_size(0, -3)
        assert (b.w, b.h) == (1, 1)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_to_dict_when_defaults_then_minimal_output(self):
        """Default optional fields are omitted."""
        assert LayoutItem("a", 1, 2, 3, 4).to_dict() == {"id": "a", "x": 1, "y": 2, "w": 3, "h": 4}

    def test_to_dict_when_overrides_set_then_included(self):
        """Static and explicit overrides are written."""
        d = LayoutItem("a", 0, 0, is_static=True, is_draggable=False, max_h=4).to_dict()
        assert d["static"] is True
        assert d["is_draggable"] is False
        assert d["max_h"] == 4
        assert "is_resizable" not in d

    def test_from_dict_when_minimal_then_defaults_filled(self):
        """Missing w/h default to 1."""
        item = LayoutItem.from_dict({"id": "a", "x": 1, "y": 0})
        assert (item.w, item.h) == (1, 1)
        assert item.is_static is False


class TestResolveFlag:
    """Tests for tri-state override resolution."""

    @pytest.mark.parametrize(
        "override, default, expected",
        [
            (None, True, True),
            (None, False, False),
            (True, False, True),
            (False, True, False),
        ],
    )
    def test_resolve_flag_when_override_given_then_override_wins(self, override, default, expected):
        assert resolve_flag(override, default) is expected
