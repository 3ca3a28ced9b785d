from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from .occupancy import OccupancyGrid
from .shape import Rotation

if TYPE_CHECKING:
    from ..items.models import Item


class PlacementVerdict(str, Enum):
    OK = 'ok'
    OUT_OF_BOUNDS = 'out_of_bounds'
    ZONE_CROSSING = 'zone_crossing'
    COLLISION = 'collision'

    @property
    def rearrangeable(self) -> bool:
        """Only a pure collision can be fixed by moving other items."""
        return self == PlacementVerdict.COLLISION


def footprint(item: "Item", x: int, y: int, rotation: Optional[Rotation] = None) -> List[Tuple[int, int]]:
    """Absolute cells covered by ``item`` anchored at (x, y)."""
    return [(x + dx, y + dy) for dx, dy in item.shape_at(rotation).offsets()]


def can_place(
    grid: OccupancyGrid,
    item: "Item",
    x: int,
    y: int,
    rotation: Optional[Rotation] = None,
) -> bool:
    """
    True when ``item`` fits at anchor (x, y) with ``rotation``.

    Every filled cell of the rotated shape must, in order:
    1. lie inside the grid;
    2. on a zoned grid, share the anchor cell's zone;
    3. be free or already owned by ``item`` itself.
    The first failing cell stops the check. ``rotation`` defaults to the
    item's current rotation.
    """
    anchor_zone = grid.zone_of_row(y)
    for tx, ty in footprint(item, x, y, rotation):
        if not grid.in_bounds(tx, ty):
            return False
        if grid.is_zoned and grid.zone_of_row(ty) != anchor_zone:
            return False
        owner = grid.cells[ty][tx]
        if owner is not None and owner != item.id:
            return False
    return True


def check_target(
    grid: OccupancyGrid,
    item: "Item",
    x: int,
    y: int,
    rotation: Optional[Rotation] = None,
) -> PlacementVerdict:
    """Explain a placement: inherent failures (bounds, zone) win over collisions.

    Agrees with :func:`can_place` on whether the result is OK, but checks the
    whole footprint for bounds/zone problems before looking at other items so
    that a COLLISION verdict means rearranging could help.
    """
    cells = footprint(item, x, y, rotation)
    anchor_zone = grid.zone_of_row(y)
    for tx, ty in cells:
        if not grid.in_bounds(tx, ty):
            return PlacementVerdict.OUT_OF_BOUNDS
        if grid.is_zoned and grid.zone_of_row(ty) != anchor_zone:
            return PlacementVerdict.ZONE_CROSSING
    for tx, ty in cells:
        owner = grid.cells[ty][tx]
        if owner is not None and owner != item.id:
            return PlacementVerdict.COLLISION
    return PlacementVerdict.OK


__all__ = [
    'PlacementVerdict',
    'can_place',
    'check_target',
    'footprint',
]
