from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Set, Tuple

if TYPE_CHECKING:
    from ..items.models import Item

Cells = Tuple[Tuple[Optional[str], ...], ...]


class Zone(str, Enum):
    EQUIPMENT = 'equipment'
    BACKPACK = 'backpack'


@dataclass(frozen=True)
class OccupancyGrid:
    """
    Value-type table of which item owns each cell.

    - ``cells[y][x]`` is the owning item id, or None when the cell is free.
    - ``equipment_rows`` zones the grid: rows above it form the equipment band,
      the rest is backpack. None means an unzoned grid (loot containers).

    The grid is a cache derived from an item list; every operation returns a
    new instance and leaves its arguments untouched.
    """

    width: int
    height: int
    cells: Cells
    equipment_rows: Optional[int] = None

    @property
    def is_zoned(self) -> bool:
        return self.equipment_rows is not None

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def owner_at(self, x: int, y: int) -> Optional[str]:
        """Owning item id at (x, y); None for free or out-of-bounds cells."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def zone_of_row(self, y: int) -> Optional[Zone]:
        if self.equipment_rows is None:
            return None
        return Zone.EQUIPMENT if y < self.equipment_rows else Zone.BACKPACK

    def occupied_ids(self) -> Set[str]:
        return {cell for row in self.cells for cell in row if cell is not None}

    def cells_of(self, item_id: str) -> List[Tuple[int, int]]:
        return [
            (x, y)
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell == item_id
        ]

    def to_ascii(self) -> List[str]:
        """Debug dump: '.' for free cells, the first letter of the id otherwise."""
        return [
            "".join("." if cell is None else cell[0] for cell in row)
            for row in self.cells
        ]

    def __repr__(self) -> str:
        zoning = f", equipment_rows={self.equipment_rows}" if self.is_zoned else ""
        return f"OccupancyGrid({self.width}x{self.height}{zoning})"


def empty_grid(width: int, height: int, equipment_rows: Optional[int] = None) -> OccupancyGrid:
    cells: Cells = tuple(tuple(None for _ in range(width)) for _ in range(height))
    return OccupancyGrid(width=width, height=height, cells=cells, equipment_rows=equipment_rows)


def write_item(grid: OccupancyGrid, item: "Item", x: int, y: int) -> OccupancyGrid:
    """Stamp the item's footprint at its current rotation with anchor (x, y).

    No validation happens here; callers must check the placement first.
    Footprint cells outside the grid are skipped.
    """
    rows = [list(row) for row in grid.cells]
    for dx, dy in item.shape_at().offsets():
        tx, ty = x + dx, y + dy
        if grid.in_bounds(tx, ty):
            rows[ty][tx] = item.id
    return OccupancyGrid(grid.width, grid.height, tuple(tuple(r) for r in rows), grid.equipment_rows)


def clear_item(grid: OccupancyGrid, item_id: str) -> OccupancyGrid:
    cells = tuple(tuple(None if cell == item_id else cell for cell in row) for row in grid.cells)
    return OccupancyGrid(grid.width, grid.height, cells, grid.equipment_rows)


def build_grid(
    items: Iterable["Item"],
    width: int,
    height: int,
    equipment_rows: Optional[int] = None,
) -> OccupancyGrid:
    """Rebuild the occupancy cache from the authoritative item list."""
    grid = empty_grid(width, height, equipment_rows)
    for item in items:
        grid = write_item(grid, item, item.x, item.y)
    return grid


__all__ = [
    'OccupancyGrid',
    'Zone',
    'build_grid',
    'clear_item',
    'empty_grid',
    'write_item',
]
