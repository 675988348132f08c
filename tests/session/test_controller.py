"""
Unit tests for GridSession (drag/resize lifecycle and responsive columns).
"""

import pytest

from dashgrid.core.models import LayoutItem
from dashgrid.engine import GridConfig, GridRect
from dashgrid.session import GridSession, LayoutChange


def _config(**overrides):
    """4 columns of 100px at a 450px container, 50px rows, 10px margins."""
    options = dict(cols=4, row_height=50, margin=(10, 10), responsive=False)
    options.update(overrides)
    return GridConfig(**options)


@pytest.fixture
def session():
    return GridSession(_config(), container_width=450)


# ─────────────────────────────────────────────────────────────────────────────
# Loading and geometry
# ─────────────────────────────────────────────────────────────────────────────

class TestLoad:
    """Tests for load and derived geometry."""

    def test_column_width_when_container_width_set_then_fills_container(self, session):
        assert session.column_width == 100
        assert session.container_padding == (10, 10)

    def test_load_when_gaps_then_compacted(self, session):
        change = session.load([LayoutItem("a", 0, 2), LayoutItem("b", 1, 0)])
        assert isinstance(change, LayoutChange)
        assert session.layout.get("a").geometry == (0, 0, 1, 1)
        assert session.layout.ids == ("a", "b")

    def test_load_when_same_geometry_then_no_change(self, session):
        session.load([LayoutItem("a", 0, 0)])
        assert session.load([LayoutItem("a", 0, 0)]) is None

    def test_load_when_item_too_wide_then_bounded_to_columns(self, session):
        session.load([LayoutItem("a", 3, 0, 3, 1)])
        assert session.layout.get("a").geometry == (1, 0, 3, 1)

    def test_container_height_when_loaded_then_fits_rows(self, session):
        session.load([LayoutItem("a", 0, 0, 1, 2)])
        assert session.container_height() == 130

    def test_item_position_when_known_then_pixel_rect(self, session):
        session.load([LayoutItem("a", 1, 0)])
        assert session.item_position("a") == GridRect(left=120, top=10, width=100, height=50)
        assert session.item_position("ghost") is None


# ─────────────────────────────────────────────────────────────────────────────
# Drag
# ─────────────────────────────────────────────────────────────────────────────

class TestDrag:
    """Tests for the drag lifecycle."""

    def test_drag_stop_when_dropped_on_neighbour_then_neighbour_pushed(self, session):
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 1, 0)])
        assert session.drag_start("a")

        change = session.drag_stop("a", top=10, left=120)

        assert session.layout.get("a").geometry == (1, 0, 1, 1)
        assert session.layout.get("b").geometry == (1, 1, 1, 1)
        assert change.changed_ids == ("a", "b")

    def test_drag_stop_when_dropped_below_neighbour_then_items_swap(self, session):
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 0, 1)])
        session.drag_start("a")
        session.drag_stop("a", top=130, left=10)
        assert session.layout.get("a").geometry == (0, 1, 1, 1)
        assert session.layout.get("b").geometry == (0, 0, 1, 1)

    def test_drag_when_in_progress_then_active_drag_and_interacting(self, session):
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 0, 1)])
        session.drag_start("a")
        session.drag("a", top=130, left=10)

        assert session.is_interacting
        assert session.active_drag.geometry == (0, 2, 1, 1)
        assert session.layout.get("a").geometry == (0, 1, 1, 1)

        session.drag_stop("a", top=130, left=10)
        assert session.active_drag is None
        assert not session.is_interacting

    def test_drag_stop_when_gesture_then_change_against_layout_at_start(self, session):
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 0, 1)])
        start = session.layout
        session.drag_start("a")
        session.drag("a", top=130, left=10)
        change = session.drag_stop("a", top=130, left=10)
        assert change.old_layout is start

    def test_drag_start_when_static_or_unknown_then_refused(self, session):
        session.load([LayoutItem("s", 0, 0, is_static=True)])
        assert session.drag_start("s") is False
        assert session.drag_start("ghost") is False
        assert not session.is_interacting

    def test_drag_start_when_not_draggable_then_refused(self):
        session = GridSession(_config(is_draggable=False), container_width=450)
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 1, 0, is_draggable=True)])
        assert session.drag_start("a") is False
        assert session.drag_start("b") is True

    def test_drag_stop_when_prevent_collision_then_rejected(self):
        session = GridSession(_config(prevent_collision=True), container_width=450)
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 1, 0)])
        session.drag_start("a")
        assert session.drag_stop("a", top=10, left=120) is None
        assert session.layout.get("a").geometry == (0, 0, 1, 1)

    def test_drag_stop_when_allow_overlap_then_items_overlap(self):
        session = GridSession(_config(allow_overlap=True), container_width=450)
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 0, 1)])
        session.drag_start("a")
        session.drag_stop("a", top=70, left=10)
        assert session.layout.get("a").geometry == (0, 1, 1, 1)
        assert session.layout.get("b").geometry == (0, 1, 1, 1)


# ─────────────────────────────────────────────────────────────────────────────
# Resize
# ─────────────────────────────────────────────────────────────────────────────

class TestResize:
    """Tests for the resize lifecycle."""

    def test_resize_when_grows_into_neighbour_then_neighbour_moves_down(self, session):
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 1, 0)])
        assert session.resize_start("a")
        session.resize("a", width=210, height=50)
        change = session.resize_stop()

        assert session.layout.get("a").geometry == (0, 0, 2, 1)
        assert session.layout.get("b").geometry == (1, 1, 1, 1)
        assert set(change.changed_ids) == {"a", "b"}

    def test_resize_when_prevent_collision_then_stops_at_neighbour(self):
        session = GridSession(_config(prevent_collision=True), container_width=450)
        session.load([LayoutItem("a", 0, 0), LayoutItem("b", 2, 0)])
        session.resize_start("a")
        session.resize("a", width=430, height=50)
        session.resize_stop()
        assert session.layout.get("a").geometry == (0, 0, 2, 1)

    def test_resize_start_when_not_resizable_then_refused(self, session):
        session.load([LayoutItem("a", 0, 0, is_resizable=False), LayoutItem("s", 1, 0, is_static=True)])
        assert session.resize_start("a") is False
        assert session.resize_start("s") is False
        assert session.resize_start("ghost") is False

    def test_resize_stop_when_size_unchanged_then_no_change(self, session):
        session.load([LayoutItem("a", 0, 0)])
        session.resize_start("a")
        session.resize("a", width=100, height=50)
        assert session.resize_stop() is None


# ─────────────────────────────────────────────────────────────────────────────
# Listeners
# ─────────────────────────────────────────────────────────────────────────────

class TestListeners:
    """Tests for change notification."""

    def test_listener_when_layout_changes_then_called(self, session):
        received = []
        session.add_listener(received.append)
        session.load([LayoutItem("a", 0, 0)])
        session.load([LayoutItem("a", 0, 0)])
        assert len(received) == 1
        assert received[0].layout.geometry() == session.layout.geometry()

    def test_listener_when_removed_then_not_called(self, session):
        received = []
        session.add_listener(received.append)
        session.remove_listener(received.append)
        session.load([LayoutItem("a", 0, 0)])
        assert received == []


# ─────────────────────────────────────────────────────────────────────────────
# Responsive columns
# ─────────────────────────────────────────────────────────────────────────────

class TestResponsive:
    """Tests for breakpoint-driven column changes."""

    def test_width_when_breakpoint_narrows_then_items_refit(self):
        session = GridSession(GridConfig())
        session.load([LayoutItem("a", 10, 0, 2, 1)])

        change = session.set_container_width(500)

        assert session.breakpoint == "xs"
        assert session.cols == 4
        assert session.column_width == 113
        assert change is not None
        assert session.layout.get("a").geometry == (2, 0, 2, 1)

    def test_width_when_breakpoint_widens_again_then_declared_positions_restored(self):
        session = GridSession(GridConfig())
        session.load([LayoutItem("a", 10, 0, 2, 1)])
        session.set_container_width(500)
        session.set_container_width(1300)
        assert session.breakpoint == "lg"
        assert session.layout.get("a").geometry == (10, 0, 2, 1)

    def test_width_when_same_breakpoint_then_only_column_width_changes(self):
        session = GridSession(GridConfig(), container_width=1300)
        session.load([LayoutItem("a", 0, 0)])
        assert session.set_container_width(1400) is None
        assert session.cols == 12

    def test_width_when_breakpoint_padding_then_padding_applied(self):
        config = GridConfig(padding_by_breakpoint={"xs": (0, 0)})
        session = GridSession(config, container_width=500)
        assert session.container_padding == (0, 0)
        assert session.column_width == 118

    def test_width_when_not_responsive_then_cols_fixed(self, session):
        session.set_container_width(300)
        assert session.cols == 4
        assert session.breakpoint is None
