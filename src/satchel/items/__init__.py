'''
Items package: item model and schema validation.
'''
from .models import Item, ItemCategory, Rarity
from .schema import validate_item_dict

__all__ = [
    'Item',
    'ItemCategory',
    'Rarity',
    'validate_item_dict',
]
