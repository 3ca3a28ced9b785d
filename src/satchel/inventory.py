from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import GridLayout
from .grid import (
    ArrangementStatus,
    OccupancyGrid,
    Rotation,
    Zone,
    build_grid,
    can_place,
    check_target,
    find_arrangement,
)
from .items import Item

logger = logging.getLogger(__name__)


class DropKind(str, Enum):
    PLACED = 'placed'
    REARRANGED = 'rearranged'
    REJECTED = 'rejected'


@dataclass(frozen=True)
class DropOutcome:
    """Result of dropping an item onto a grid.

    ``state`` is the new inventory on success and the untouched one otherwise.
    ``moved`` lists the items that were pushed aside to make room.
    """

    kind: DropKind
    state: "InventoryState"
    moved: Tuple[Item, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.kind != DropKind.REJECTED


@dataclass(frozen=True)
class InventoryState:
    """
    Authoritative item list for one grid (player pack or loot container).

    Each item carries its own anchor and rotation; the occupancy grid is
    rebuilt from the list whenever it is needed. Every mutator returns a new
    state, so a rejected operation simply hands back ``self``.
    """

    width: int
    height: int
    equipment_rows: Optional[int] = None
    items: Tuple[Item, ...] = field(default_factory=tuple)

    @classmethod
    def from_layout(cls, layout: GridLayout, items: Iterable[Item] = ()) -> "InventoryState":
        return cls(layout.width, layout.height, layout.equipment_rows, tuple(items))

    @property
    def grid(self) -> OccupancyGrid:
        return build_grid(self.items, self.width, self.height, self.equipment_rows)

    def get(self, item_id: str) -> Optional[Item]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def zone_of(self, item: Item) -> Optional[Zone]:
        """Zone of the item's anchor row; None on unzoned grids."""
        return self.grid.zone_of_row(item.y)

    def equipped_items(self) -> List[Item]:
        """Items anchored in the equipment band, in list order."""
        if self.equipment_rows is None:
            return []
        return [item for item in self.items if item.y < self.equipment_rows]

    def _with_items(self, items: Iterable[Item]) -> "InventoryState":
        return replace(self, items=tuple(items))

    def _commit(self, placed: Item, moved: Iterable[Item] = ()) -> "InventoryState":
        updates = {item.id: item for item in moved}
        updates[placed.id] = placed
        items = [updates.pop(item.id, item) for item in self.items]
        # whatever is left was not in this grid before (e.g. dragged in from loot)
        items.extend(updates.values())
        return self._with_items(items)

    def drop(self, item: Item, x: int, y: int, rotation: Optional[Rotation] = None) -> DropOutcome:
        """
        Drop ``item`` with its anchor at (x, y).

        Places directly when legal. When the only problem is overlapping other
        items, tries to push them aside with :func:`find_arrangement`. Any
        other failure (off-grid, straddling zones, no room) rejects the drop
        and leaves the state unchanged.
        """
        candidate = item.moved_to(x, y, rotation)
        grid = self.grid
        if can_place(grid, candidate, x, y):
            logger.debug("Dropped %s at (%d,%d,%d)", item.id, x, y, candidate.rotation.value)
            return DropOutcome(DropKind.PLACED, self._commit(candidate))

        verdict = check_target(grid, candidate, x, y)
        if not verdict.rearrangeable:
            logger.debug("Rejected drop of %s at (%d,%d): %s", item.id, x, y, verdict.value)
            return DropOutcome(DropKind.REJECTED, self)

        result = find_arrangement(
            self.items, candidate, x, y, self.width, self.height, self.equipment_rows
        )
        if result.status != ArrangementStatus.FOUND:
            logger.debug("Rejected drop of %s at (%d,%d): %s", item.id, x, y, result.status.value)
            return DropOutcome(DropKind.REJECTED, self)
        return DropOutcome(
            DropKind.REARRANGED, self._commit(candidate, result.relocated), result.relocated
        )

    def rotate(self, item_id: str) -> "InventoryState":
        """Turn an item 90° clockwise around its anchor if it still fits."""
        item = self.get(item_id)
        if item is None:
            return self
        turned = item.rotated_once()
        if not can_place(self.grid, turned, turned.x, turned.y):
            logger.debug("Cannot rotate %s in place at (%d,%d)", item_id, item.x, item.y)
            return self
        return self._commit(turned)

    def remove(self, item_id: str) -> "InventoryState":
        return self._with_items(item for item in self.items if item.id != item_id)

    def find_free_slot(self, item: Item) -> Optional[Item]:
        """First legal placement in row-major order, trying each rotation per cell."""
        grid = self.grid
        for y in range(self.height):
            for x in range(self.width):
                for rotation in Rotation:
                    if can_place(grid, item, x, y, rotation):
                        return item.moved_to(x, y, rotation)
        return None

    def stow(self, item: Item) -> DropOutcome:
        """Auto-place an item at the first free slot, or reject it."""
        slot = self.find_free_slot(item)
        if slot is None:
            return DropOutcome(DropKind.REJECTED, self)
        return DropOutcome(DropKind.PLACED, self._commit(slot))


__all__ = [
    'DropKind',
    'DropOutcome',
    'InventoryState',
]
