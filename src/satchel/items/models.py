from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional

from ..grid.shape import Rotation, Shape
from .schema import validate_item_dict

logger = logging.getLogger(__name__)


class ItemCategory(str, Enum):
    ARTIFACT = 'artifact'
    CONSUMABLE = 'consumable'
    LOOT = 'loot'


class Rarity(str, Enum):
    COMMON = 'common'
    RARE = 'rare'
    LEGENDARY = 'legendary'


# Stat keys read by the passive-stat aggregator and consumables
SUPPORTED_STATS = {
    'damage_bonus', 'shield_bonus', 'hp_bonus', 'shield_start', 'heal', 'thorns', 'cleanse'
}


@dataclass(frozen=True)
class Item:
    """Domain model for an item sitting in a grid inventory.

    ``shape`` is the authoritative base shape (rotation 0). ``x``/``y`` is the
    anchor: the grid cell under local (0, 0) of the shape at ``rotation``.
    Whether the player knows the true shape is tracked by ``revealed``; the
    shape used for placement never changes with it.
    """

    id: str
    shape: Shape
    name: str = ''
    category: ItemCategory = ItemCategory.LOOT
    rarity: Rarity = Rarity.COMMON
    rotation: Rotation = Rotation.R0
    x: int = 0
    y: int = 0
    revealed: bool = True
    description: str = ''
    value: int = 0
    quantity: int = 1
    stats: Dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def is_equipment_eligible(self) -> bool:
        return self.category == ItemCategory.ARTIFACT

    @property
    def cell_count(self) -> int:
        return self.shape.cell_count

    def shape_at(self, rotation: Optional[Rotation] = None) -> Shape:
        """Base shape turned to ``rotation`` (defaults to the current rotation)."""
        return self.shape.rotated(self.rotation if rotation is None else rotation)

    @property
    def display_shape(self) -> Shape:
        """Shape shown to the player.

        Unrevealed items show a solid block covering the true shape's bounds.
        """
        true_shape = self.shape_at()
        if self.revealed:
            return true_shape
        return Shape.rectangle(true_shape.width, true_shape.height)

    def moved_to(self, x: int, y: int, rotation: Optional[Rotation] = None) -> 'Item':
        return replace(self, x=x, y=y, rotation=self.rotation if rotation is None else rotation)

    def rotated_once(self) -> 'Item':
        return replace(self, rotation=self.rotation.next())

    def reveal(self) -> 'Item':
        return replace(self, revealed=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        """Create an Item from a dict, validating with the JSON schema."""
        validate_item_dict(data)
        stats = {k: v for k, v in data.get('stats', {}).items() if k in SUPPORTED_STATS}
        ignored = set(data.get('stats', {})) - SUPPORTED_STATS
        if ignored:
            logger.warning('Ignoring unsupported stats on item %s: %s', data['id'], sorted(ignored))
        return cls(
            id=data['id'],
            shape=Shape.from_rows(data['shape']),
            name=data.get('name', ''),
            category=ItemCategory(data.get('category', ItemCategory.LOOT.value)),
            rarity=Rarity(data.get('rarity', Rarity.COMMON.value)),
            rotation=Rotation.from_degrees(data.get('rotation', 0)),
            x=int(data.get('x', 0)),
            y=int(data.get('y', 0)),
            revealed=bool(data.get('revealed', True)),
            description=data.get('description', ''),
            value=int(data.get('value', 0)),
            quantity=int(data.get('quantity', 1)),
            stats=stats,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'shape': self.shape.to_rows(),
            'category': self.category.value,
            'rarity': self.rarity.value,
            'rotation': self.rotation.value,
            'x': self.x,
            'y': self.y,
            'revealed': self.revealed,
            'description': self.description,
            'value': self.value,
            'quantity': self.quantity,
            'stats': dict(self.stats),
        }


__all__ = [
    'Item',
    'ItemCategory',
    'Rarity',
    'SUPPORTED_STATS',
]
