from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.resources import files as resource_files
from typing import Any, Optional

import yaml

from ..exceptions import LayoutConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridLayout:
    width: int
    height: int
    # None = unzoned container
    equipment_rows: Optional[int] = None

    @property
    def is_zoned(self) -> bool:
        return self.equipment_rows is not None


@dataclass(frozen=True)
class LayoutConfig:
    player: GridLayout = GridLayout(width=6, height=8, equipment_rows=3)
    loot: GridLayout = GridLayout(width=6, height=4)


def _parse_layout(name: str, raw: Any, default: GridLayout) -> GridLayout:
    if raw is None:
        return default
    if not isinstance(raw, dict):
        raise LayoutConfigError(f"Layout '{name}' must be a mapping, got {type(raw).__name__}")
    try:
        width = int(raw.get("width", default.width))
        height = int(raw.get("height", default.height))
        rows = raw.get("equipment_rows", default.equipment_rows)
        equipment_rows = None if rows is None else int(rows)
    except (TypeError, ValueError) as e:
        raise LayoutConfigError(f"Layout '{name}' has a non-integer dimension: {e}") from e
    if width <= 0 or height <= 0:
        raise LayoutConfigError(f"Layout '{name}' dimensions must be positive, got {width}x{height}")
    if equipment_rows is not None and not 0 < equipment_rows < height:
        raise LayoutConfigError(
            f"Layout '{name}' equipment_rows must be between 1 and {height - 1}, got {equipment_rows}"
        )
    return GridLayout(width=width, height=height, equipment_rows=equipment_rows)


def load_layout_config(path: Optional[str] = None) -> LayoutConfig:
    """Load grid layouts from YAML.

    If path is None, loads the embedded default resource at
    satchel/config/layout.yaml.
    """
    if path is None:
        data = resource_files("satchel.config").joinpath("layout.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded layout config resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded layout config from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as e:
        raise LayoutConfigError(f"Layout config is not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise LayoutConfigError(f"Layout config must be a mapping, got {type(raw).__name__}")
    defaults = LayoutConfig()
    cfg = LayoutConfig(
        player=_parse_layout("player", raw.get("player"), defaults.player),
        loot=_parse_layout("loot", raw.get("loot"), defaults.loot),
    )
    logger.info(
        "Player grid %dx%d (equipment rows=%s) | loot grid %dx%d",
        cfg.player.width, cfg.player.height, cfg.player.equipment_rows,
        cfg.loot.width, cfg.loot.height,
    )
    return cfg
