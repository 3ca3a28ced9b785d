import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

from jsonschema import Draft202012Validator

from ..exceptions import ItemDataError

logger = logging.getLogger(__name__)

_SCHEMA_PKG = 'satchel.items'
_SCHEMA_NAME = 'item.schema.json'


@lru_cache(maxsize=1)
def _load_item_schema() -> Dict[str, Any]:
    """
    Load the bundled item JSON schema.

    The function is cached for performance since the schema is static.
    """
    text = resources.files(_SCHEMA_PKG).joinpath(_SCHEMA_NAME).read_text(encoding='utf-8')
    logger.debug('Loaded item schema resource %s/%s', _SCHEMA_PKG, _SCHEMA_NAME)
    return json.loads(text)


def validate_item_dict(data: Dict[str, Any]) -> None:
    """
    Validate a single item dictionary against the item JSON schema.

    Shapes must also be rectangular, which JSON schema cannot express.

    Raises:
        ItemDataError if the data is invalid.
    """
    validator = Draft202012Validator(_load_item_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        # Log all errors, then raise with the first one as the headline
        for err in errors:
            logger.error('Item schema validation error at %s: %s', list(err.path), err.message)
        raise ItemDataError(f'Invalid item data: {errors[0].message}', errors)
    widths = {len(row) for row in data['shape']}
    if len(widths) != 1:
        logger.error('Item %s has a ragged shape (row widths %s)', data['id'], sorted(widths))
        raise ItemDataError(f"Item {data['id']} shape rows must all have the same length")


__all__ = [
    'validate_item_dict',
]
