'''
satchel: grid inventory engine with polyomino items, zones and auto-arrange.
'''
from .grid import (
    ArrangementResult,
    ArrangementStatus,
    OccupancyGrid,
    PlacementVerdict,
    Rotation,
    Shape,
    Zone,
    build_grid,
    can_place,
    clear_item,
    empty_grid,
    find_arrangement,
    rotate_clockwise,
    write_item,
)
from .inventory import DropKind, DropOutcome, InventoryState
from .items import Item, ItemCategory, Rarity

__all__ = [
    'ArrangementResult',
    'ArrangementStatus',
    'DropKind',
    'DropOutcome',
    'InventoryState',
    'Item',
    'ItemCategory',
    'OccupancyGrid',
    'PlacementVerdict',
    'Rarity',
    'Rotation',
    'Shape',
    'Zone',
    'build_grid',
    'can_place',
    'clear_item',
    'empty_grid',
    'find_arrangement',
    'rotate_clockwise',
    'write_item',
]
