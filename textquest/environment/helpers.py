"""Utilities for terrain maps: text rendering and movement policies."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Optional, Protocol, TextIO, Tuple

from ..config import Config
from .coordinates import Coordinate
from .terrain import EMPTY_KEY, TerrainType

if TYPE_CHECKING:  # pragma: no cover
    from .grid import TerrainMap


class RenderError(RuntimeError):
    """Raised when a rendered map cannot be written to its output sink."""


class MovementPolicy(Protocol):
    """Decides whether a player may step onto ``(x, y)`` of ``terrain_map``."""

    def __call__(self, terrain_map: "TerrainMap", x: int, y: int) -> bool:
        ...


def allow_any_move(terrain_map: "TerrainMap", x: int, y: int) -> bool:
    """Default policy: every coordinate is reachable."""
    return True


class TerrainPrinter:
    """Walk visitor that prints terrain keys to a text stream.

    Rows are delimited with a single newline; no newline follows the last
    row. Coordinates without a materialized cell print as the Empty key.
    """

    def __init__(self, out: TextIO):
        if out is None:
            raise ValueError("TerrainPrinter requires an output stream")
        self.out = out
        self._last_row: Optional[int] = None

    def __call__(self, x: int, y: int, terrain: Optional[TerrainType]) -> None:
        try:
            # First cell fixes the starting row; each later row begins with a newline
            if self._last_row is None:
                self._last_row = y
            elif y > self._last_row:
                self.out.write("\n")
                self._last_row = y
            self.out.write(terrain.key if terrain is not None else EMPTY_KEY)
        except OSError as exc:
            raise RenderError(f"Error writing to output stream: {exc}") from exc


def render_window(terrain_map: "TerrainMap", x: int, y: int, width: int, height: int) -> str:
    """Render the ``width`` x ``height`` window at origin ``(x, y)`` to a string."""

    out = io.StringIO()
    terrain_map.walk(x, y, width, height, TerrainPrinter(out))
    return out.getvalue()


def viewport_origin(
    center: Coordinate | Tuple[int, int], *, width: int, height: int
) -> Tuple[int, int]:
    """Return the top-left corner of a window centered on ``center``, clamped at 0."""

    cx, cy = (center.x, center.y) if isinstance(center, Coordinate) else center
    return max(0, cx - width // 2), max(0, cy - height // 2)


def render_viewport(
    terrain_map: "TerrainMap",
    center: Coordinate | Tuple[int, int],
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> str:
    """Render the visible part of a large map around ``center``.

    The window never starts left of or above the map origin; it does extend
    past the right and bottom edges, which render as Empty.
    Width and height default to ``Config.VIEWPORT_WIDTH``/``VIEWPORT_HEIGHT``.
    """

    width = Config.VIEWPORT_WIDTH if width is None else width
    height = Config.VIEWPORT_HEIGHT if height is None else height
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must be positive, got {width}x{height}")
    x, y = viewport_origin(center, width=width, height=height)
    return render_window(terrain_map, x, y, width, height)
