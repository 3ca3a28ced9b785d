import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from satchel.grid import Rotation, Shape  # noqa: E402
from satchel.items import Item, ItemCategory  # noqa: E402


@pytest.fixture
def make_item():
    """Factory for items from ASCII art, e.g. make_item("A", ["##", "#."], x=1, y=4)."""

    def _make(item_id, rows=("#",), x=0, y=0, rotation=Rotation.R0, **kwargs):
        kwargs.setdefault("category", ItemCategory.LOOT)
        return Item(id=item_id, shape=Shape.from_ascii(rows), x=x, y=y, rotation=rotation, **kwargs)

    return _make
