"""
textquest - terrain maps for a text-based exploration game.

Load a saved map, edit it in place (writes past the edge grow the map), and
draw the part of it the player can see as plain ASCII.
"""

__version__ = "0.1.0"

from .config import Config

from .environment import (
    COORDINATE_PATTERN,
    DEFAULT_START,
    EMPTY_KEY,
    START_META,
    Coordinate,
    InvalidMapFormatError,
    MovementPolicy,
    RenderError,
    TerrainMap,
    TerrainMapState,
    TerrainPrinter,
    TerrainType,
    allow_any_move,
    parse_coordinate,
    render_viewport,
    render_window,
)

from .persistence import (
    MapStore,
    InMemoryMapStore,
    JsonMapStore,
    load_map,
)

__all__ = [
    "Config",
    # Terrain maps
    "TerrainMap",
    "TerrainType",
    "TerrainMapState",
    "Coordinate",
    "COORDINATE_PATTERN",
    "DEFAULT_START",
    "EMPTY_KEY",
    "START_META",
    "parse_coordinate",
    # Rendering
    "TerrainPrinter",
    "render_window",
    "render_viewport",
    # Movement
    "MovementPolicy",
    "allow_any_move",
    # Errors
    "InvalidMapFormatError",
    "RenderError",
    # Persistence
    "MapStore",
    "InMemoryMapStore",
    "JsonMapStore",
    "load_map",
]
