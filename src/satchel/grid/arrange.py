from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence, Tuple

from .occupancy import OccupancyGrid, build_grid, write_item
from .placement import can_place, footprint
from .shape import Rotation

if TYPE_CHECKING:
    from ..items.models import Item

logger = logging.getLogger(__name__)


class ArrangementStatus(str, Enum):
    FOUND = 'found'
    # The drop collides with nothing; place it directly instead
    NOT_APPLICABLE = 'not_applicable'
    INFEASIBLE = 'infeasible'


@dataclass(frozen=True)
class ArrangementResult:
    """Outcome of an auto-arrange search.

    ``relocated`` holds the displaced items with their new anchor and rotation
    and is only populated when ``status`` is FOUND. The dragged item's own
    placement is the target the caller asked for and is not repeated here.
    """

    status: ArrangementStatus
    relocated: Tuple["Item", ...] = ()

    @property
    def found(self) -> bool:
        return self.status == ArrangementStatus.FOUND

    @classmethod
    def not_applicable(cls) -> "ArrangementResult":
        return cls(ArrangementStatus.NOT_APPLICABLE)

    @classmethod
    def infeasible(cls) -> "ArrangementResult":
        return cls(ArrangementStatus.INFEASIBLE)


def iter_candidates(width: int, height: int, origin_x: int, origin_y: int) -> Iterator[Tuple[int, int]]:
    """
    Yield every cell of a width x height grid nearest-first from the origin.

    Cells come in ascending Manhattan distance; equal distances are ordered by
    row, then column. Rings are produced lazily, nothing is sorted.
    """
    corners = [(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)]
    max_dist = max(abs(cx - origin_x) + abs(cy - origin_y) for cx, cy in corners)
    for dist in range(max_dist + 1):
        for y in range(max(0, origin_y - dist), min(height - 1, origin_y + dist) + 1):
            dx = dist - abs(y - origin_y)
            left, right = origin_x - dx, origin_x + dx
            if 0 <= left < width:
                yield left, y
            if dx > 0 and 0 <= right < width:
                yield right, y


def _relocate(scratch: OccupancyGrid, item: "Item") -> Optional["Item"]:
    """First (anchor, rotation) near the item's old anchor that fits, if any."""
    for cx, cy in iter_candidates(scratch.width, scratch.height, item.x, item.y):
        for rotation in Rotation:
            if can_place(scratch, item, cx, cy, rotation):
                return item.moved_to(cx, cy, rotation)
    return None


def find_arrangement(
    items: Sequence["Item"],
    dragged: "Item",
    x: int,
    y: int,
    width: int,
    height: int,
    equipment_rows: Optional[int] = None,
) -> ArrangementResult:
    """
    Make room for ``dragged`` at anchor (x, y) by moving only the items it hits.

    The dragged item keeps its current rotation. Items it collides with are
    re-placed largest first (by filled cells, ties in list order), each at the
    nearest free anchor to where it was, trying rotations 0/90/180/270 of its
    base shape. Everything else stays put.

    Returns FOUND with the relocated items, NOT_APPLICABLE when the drop hits
    nothing, or INFEASIBLE when the target footprint leaves the grid or crosses
    a zone, or when some displaced item has nowhere to go. Inputs are never
    modified; a failed search leaves no trace.
    """
    others = [item for item in items if item.id != dragged.id]
    current = build_grid(others, width, height, equipment_rows)

    anchor_zone = current.zone_of_row(y)
    # dict keeps first-hit order without duplicates
    colliding: Dict[str, None] = {}
    for tx, ty in footprint(dragged, x, y):
        if not current.in_bounds(tx, ty):
            logger.debug("Arrange %s at (%d,%d): cell (%d,%d) out of bounds", dragged.id, x, y, tx, ty)
            return ArrangementResult.infeasible()
        if current.is_zoned and current.zone_of_row(ty) != anchor_zone:
            logger.debug("Arrange %s at (%d,%d): crosses zone boundary at row %d", dragged.id, x, y, ty)
            return ArrangementResult.infeasible()
        owner = current.cells[ty][tx]
        if owner is not None:
            colliding[owner] = None

    if not colliding:
        return ArrangementResult.not_applicable()

    displaced = [item for item in others if item.id in colliding]
    static = [item for item in others if item.id not in colliding]

    scratch = build_grid(static, width, height, equipment_rows)
    scratch = write_item(scratch, dragged.moved_to(x, y), x, y)

    # list.sort is stable, so equal sizes keep list order
    displaced.sort(key=lambda item: item.cell_count, reverse=True)

    relocated: List["Item"] = []
    for item in displaced:
        moved = _relocate(scratch, item)
        if moved is None:
            logger.debug("Arrange %s at (%d,%d): no room left for %s", dragged.id, x, y, item.id)
            return ArrangementResult.infeasible()
        scratch = write_item(scratch, moved, moved.x, moved.y)
        relocated.append(moved)
        logger.debug(
            "Arrange %s: moved %s (%d,%d,%d) -> (%d,%d,%d)",
            dragged.id, item.id, item.x, item.y, item.rotation.value,
            moved.x, moved.y, moved.rotation.value,
        )

    return ArrangementResult(ArrangementStatus.FOUND, tuple(relocated))


__all__ = [
    'ArrangementResult',
    'ArrangementStatus',
    'find_arrangement',
    'iter_candidates',
]
