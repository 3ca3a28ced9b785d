'''
Grid geometry: shapes, occupancy, placement checks and auto-arrange.
'''
from .arrange import ArrangementResult, ArrangementStatus, find_arrangement, iter_candidates
from .occupancy import OccupancyGrid, Zone, build_grid, clear_item, empty_grid, write_item
from .placement import PlacementVerdict, can_place, check_target, footprint
from .shape import Rotation, Shape, rotate_clockwise

__all__ = [
    'ArrangementResult',
    'ArrangementStatus',
    'OccupancyGrid',
    'PlacementVerdict',
    'Rotation',
    'Shape',
    'Zone',
    'build_grid',
    'can_place',
    'check_target',
    'clear_item',
    'empty_grid',
    'find_arrangement',
    'footprint',
    'iter_candidates',
    'rotate_clockwise',
    'write_item',
]
