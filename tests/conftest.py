import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import dashgrid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from dashgrid.core.models import Layout, LayoutItem  # noqa: E402
from dashgrid.engine import collides  # noqa: E402


# Common test fixtures
@pytest.fixture
def make_layout():
    """Factory: build a Layout from (id, x, y, w, h[, static]) tuples."""
    def _create(*specs):
        items = []
        for spec in specs:
            item_id, x, y, w, h, *rest = spec
            items.append(LayoutItem(item_id, x, y, w, h, is_static=bool(rest and rest[0])))
        return Layout.from_items(items)
    return _create


@pytest.fixture
def assert_no_overlap():
    """Assert that no two non-static items in a layout overlap."""
    def _check(layout):
        movable = [item for item in layout if not item.is_static]
        for i, a in enumerate(movable):
            for b in movable[i + 1:]:
                assert not collides(a, b), f"{a!r} overlaps {b!r}"
    return _check
