"""
Unit tests for GridConfig, PositionParams and CompactType.
"""

import pytest

from dashgrid.core.models import LayoutItem
from dashgrid.engine import CompactType, GridConfig, PositionParams


class TestCompactType:
    """Tests for CompactType.parse."""

    def test_parse_when_string_then_enum(self):
        assert CompactType.parse("horizontal") is CompactType.HORIZONTAL

    def test_parse_when_none_or_empty_then_none(self):
        assert CompactType.parse(None) is None
        assert CompactType.parse("") is None

    def test_parse_when_unknown_then_raises(self):
        with pytest.raises(ValueError):
            CompactType.parse("diagonal")


class TestGridConfig:
    """Tests for GridConfig."""

    def test_defaults_when_constructed_then_vertical_twelve_columns(self):
        config = GridConfig()
        assert config.cols == 12
        assert config.compact_type is CompactType.VERTICAL
        assert config.effective_padding == config.margin

    def test_compact_type_when_string_then_parsed(self):
        assert GridConfig(compact_type="horizontal").compact_type is CompactType.HORIZONTAL
        assert GridConfig(compact_type=None).compact_type is None

    def test_padding_when_set_then_used_instead_of_margin(self):
        assert GridConfig(container_padding=(0, 5)).effective_padding == (0, 5)

    @pytest.mark.parametrize(
        "kwargs",
        [{"cols": 0}, {"row_height": 0}, {"margin": (-1, 0)}, {"max_rows": 0}, {"container_padding": (0, -2)}],
    )
    def test_config_when_invalid_value_then_raises(self, kwargs):
        with pytest.raises(ValueError):
            GridConfig(**kwargs)

    def test_config_when_breakpoint_has_no_cols_then_raises(self):
        with pytest.raises(ValueError, match="No column count"):
            GridConfig(breakpoints={"lg": 1200, "huge": 2000})

    def test_config_when_not_responsive_then_breakpoints_unchecked(self):
        config = GridConfig(responsive=False, breakpoints={"huge": 2000})
        assert config.breakpoints == {"huge": 2000}


class TestCapabilities:
    """Tests for per-item capability resolution."""

    def test_can_drag_when_no_override_then_layout_default(self):
        item = LayoutItem("a", 0, 0)
        assert GridConfig().can_drag(item) is True
        assert GridConfig(is_draggable=False).can_drag(item) is False

    def test_can_drag_when_item_override_then_override_wins(self):
        assert GridConfig(is_draggable=False).can_drag(LayoutItem("a", 0, 0, is_draggable=True)) is True
        assert GridConfig().can_drag(LayoutItem("a", 0, 0, is_draggable=False)) is False

    def test_can_drag_when_static_then_false(self):
        assert GridConfig().can_drag(LayoutItem("s", 0, 0, is_static=True, is_draggable=True)) is False

    def test_can_resize_when_override_then_override_wins(self):
        assert GridConfig(is_resizable=False).can_resize(LayoutItem("a", 0, 0, is_resizable=True)) is True
        assert GridConfig().can_resize(LayoutItem("s", 0, 0, is_static=True)) is False

    def test_is_bounded_when_layout_bounded_then_item_can_opt_out(self):
        config = GridConfig(is_bounded=True)
        assert config.is_item_bounded(LayoutItem("a", 0, 0)) is True
        assert config.is_item_bounded(LayoutItem("a", 0, 0, is_bounded=False)) is False

    def test_is_bounded_when_layout_unbounded_then_item_cannot_opt_in(self):
        assert GridConfig().is_item_bounded(LayoutItem("a", 0, 0, is_bounded=True)) is False


class TestPositionParams:
    """Tests for PositionParams."""

    def test_pitch_when_margins_then_cell_plus_margin(self):
        params = PositionParams(cols=12, column_width=100, row_height=50, margin=(10, 20))
        assert (params.column_pitch, params.row_pitch) == (110, 70)

    def test_params_when_invalid_then_raises(self):
        with pytest.raises(ValueError):
            PositionParams(cols=0, column_width=100, row_height=50)
        with pytest.raises(ValueError):
            PositionParams(cols=4, column_width=-1, row_height=50)
