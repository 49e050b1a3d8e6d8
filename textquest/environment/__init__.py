"""Terrain maps for textquest."""

from .coordinates import COORDINATE_PATTERN, Coordinate, parse_coordinate
from .grid import DEFAULT_START, START_META, TerrainMap
from .helpers import (
    MovementPolicy,
    RenderError,
    TerrainPrinter,
    allow_any_move,
    render_viewport,
    render_window,
    viewport_origin,
)
from .schemas import TerrainMapState
from .terrain import EMPTY_KEY, InvalidMapFormatError, TerrainType

__all__ = [
    "COORDINATE_PATTERN",
    "Coordinate",
    "parse_coordinate",
    "DEFAULT_START",
    "START_META",
    "TerrainMap",
    "MovementPolicy",
    "RenderError",
    "TerrainPrinter",
    "allow_any_move",
    "render_viewport",
    "render_window",
    "viewport_origin",
    "TerrainMapState",
    "EMPTY_KEY",
    "InvalidMapFormatError",
    "TerrainType",
]
