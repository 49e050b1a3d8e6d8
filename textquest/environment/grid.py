"""Terrain grid for the text quest overworld.

A TerrainMap is loaded once from a saved map and then edited in place. Maps
that were saved before the play area was expanded are smaller than the area
the game writes to, so writes past the current bounds grow the map instead
of failing.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..logging_utils import log_map_change
from .coordinates import Coordinate, parse_coordinate
from .helpers import MovementPolicy, allow_any_move, render_window
from .schemas import TerrainMapState
from .terrain import EMPTY_KEY, TerrainType

START_META = "start"
DEFAULT_START = Coordinate(9, 9)

# (x, y, terrain) with terrain None when no cell is materialized there
WalkVisitor = Callable[[int, int, Optional[TerrainType]], None]
WalkItem = Tuple[int, int, Optional[TerrainType]]


class TerrainMap:
    """Mutable 2D map of terrain cells.

    Cells live in a single row-major list of ``width * height`` entries. Cells
    added by growth and never written hold ``None``: ``terrain_at`` reports
    them as Empty while the walks pass ``None`` through, so renderers can tell
    "nothing here yet" apart from real Empty terrain.
    """

    def __init__(
        self,
        name: str,
        terrain: Sequence[Optional[Sequence[TerrainType]]],
        metadata: Mapping[str, str],
        *,
        movement_policy: Optional[MovementPolicy] = None,
    ):
        if name is None or terrain is None or metadata is None:
            raise ValueError("TerrainMap requires a name, terrain and metadata")
        if not name:
            raise ValueError("TerrainMap name must be non-empty")
        if len(terrain) < 1 or not terrain[0]:
            raise ValueError("Invalid terrain array: must have at least 1 non-empty element.")

        self._name = name
        self._metadata: Mapping[str, str] = MappingProxyType(dict(metadata))
        self._movement_policy: MovementPolicy = movement_policy or allow_any_move
        self._width = len(terrain[0])
        self._height = len(terrain)

        cells: List[Optional[TerrainType]] = [None] * (self._width * self._height)
        for y, row in enumerate(terrain):
            row = row or ()
            if len(row) > self._width:
                raise ValueError(
                    f"Invalid terrain array: row {y} has {len(row)} cells, "
                    f"wider than the first row ({self._width})"
                )
            for x, cell in enumerate(row):
                if cell is not None and not isinstance(cell, TerrainType):
                    raise ValueError(
                        f"Invalid terrain array: cell ({x}, {y}) is {cell!r}, not a TerrainType"
                    )
            start = y * self._width
            cells[start:start + len(row)] = list(row)
        self._cells = cells

    # --- Properties ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def metadata(self) -> Mapping[str, str]:
        """Read-only metadata attached when the map was created."""
        return self._metadata

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # --- Point access ---

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _cell(self, x: int, y: int) -> Optional[TerrainType]:
        if not self._in_bounds(x, y):
            return None
        return self._cells[y * self._width + x]

    def terrain_at(self, x: int, y: int) -> TerrainType:
        """Return the terrain at ``(x, y)``, or Empty if out of bounds or unset."""
        cell = self._cell(x, y)
        return cell if cell is not None else TerrainType.Empty

    def modify_at(self, x: int, y: int, terrain: TerrainType) -> bool:
        """Set the terrain at ``(x, y)``, growing the map if needed.

        Growth reallocates the whole backing list (O(new area)) and copies
        every existing row into the top-left of the new one.

        Returns:
            True if the stored terrain changed.

        Raises:
            ValueError: If either coordinate is negative, or ``terrain`` is not
                a TerrainType.
        """
        if not isinstance(terrain, TerrainType):
            raise ValueError(f"Terrain must be a TerrainType, got {terrain!r}")
        if x < 0 or y < 0:
            raise ValueError(f"Cannot modify negative coordinate ({x}, {y})")
        if x >= self._width or y >= self._height:
            self._grow(max(x + 1, self._width), max(y + 1, self._height))

        index = y * self._width + x
        if self._cells[index] is terrain:
            return False
        self._cells[index] = terrain
        return True

    def _grow(self, width: int, height: int) -> None:
        old_width = self._width
        # New buffer starts fully unset; cells past the old width and rows past
        # the old height stay None and read as Empty.
        cells: List[Optional[TerrainType]] = [None] * (width * height)
        for row in range(self._height):
            # Old row `row` occupies old_width cells at row * old_width; copy it
            # into the left edge of the wider row in the new buffer.
            src = row * old_width
            dst = row * width
            cells[dst:dst + old_width] = self._cells[src:src + old_width]
        log_map_change(
            f"Expanded map '{self._name}' from {old_width}x{self._height} to {width}x{height}"
        )
        # Swap buffer and bounds together so readers never see a half-grown map
        self._cells, self._width, self._height = cells, width, height

    # --- Metadata ---

    def starting_coordinate(self) -> Coordinate:
        """Return the ``start`` metadata coordinate, or (9, 9) if missing or malformed."""
        return parse_coordinate(self._metadata.get(START_META)) or DEFAULT_START

    def can_player_move_to(self, x: int, y: int) -> bool:
        """Test if a player may move to ``(x, y)`` according to the movement policy."""
        return self._movement_policy(self, x, y)

    # --- Traversal ---

    def iter_window(self, x: int, y: int, width: int, height: int) -> Iterator[WalkItem]:
        """Yield ``(x, y, terrain)`` for every coordinate of a window, row by row.

        The window is not clamped to the map: coordinates outside the backing
        store are still yielded, with ``None`` as their terrain.
        """
        for row in range(y, y + height):
            for col in range(x, x + width):
                yield col, row, self._cell(col, row)

    def walk(self, x: int, y: int, width: int, height: int, visit: WalkVisitor) -> None:
        """Pass every coordinate of a window to ``visit``; see ``iter_window``.

        ``visit`` must not modify the map.
        """
        for col, row, terrain in self.iter_window(x, y, width, height):
            visit(col, row, terrain)

    def iter_surrounding(self, x: int, y: int) -> Iterator[WalkItem]:
        """Yield the up-to-8 neighbours of ``(x, y)`` inside the map, skipping the point itself."""
        # Clamp the 3x3 block to the map so edge and corner points yield fewer
        # neighbours and never a negative or out-of-bounds coordinate.
        for row in range(max(0, y - 1), min(self._height - 1, y + 1) + 1):
            for col in range(max(0, x - 1), min(self._width - 1, x + 1) + 1):
                # Skip the centre point itself
                if col == x and row == y:
                    continue
                yield col, row, self._cell(col, row)

    def walk_surrounding(self, x: int, y: int, visit: WalkVisitor) -> None:
        """Pass the neighbours of ``(x, y)`` to ``visit``; see ``iter_surrounding``."""
        for col, row, terrain in self.iter_surrounding(x, y):
            visit(col, row, terrain)

    # --- Rendering ---

    def render(
        self,
        x: int = 0,
        y: int = 0,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> str:
        """Render a window (the whole map by default) as rows of terrain keys.

        Raises:
            RenderError: If the output sink fails.
        """
        width = self._width if width is None else width
        height = self._height if height is None else height
        return render_window(self, x, y, width, height)

    # --- Snapshot / Restore ---

    def to_state(self) -> TerrainMapState:
        """Serialize to the persisted record; unset cells are saved as Empty."""
        rows = [
            [
                cell.key if cell is not None else EMPTY_KEY
                for cell in self._cells[row * self._width:(row + 1) * self._width]
            ]
            for row in range(self._height)
        ]
        return TerrainMapState(name=self._name, terrain=rows, metadata=dict(self._metadata))

    @classmethod
    def from_state(
        cls, state: TerrainMapState, *, movement_policy: Optional[MovementPolicy] = None
    ) -> "TerrainMap":
        """Build a map from its persisted record."""
        terrain = [[TerrainType.from_key(key) for key in row] for row in state.terrain]
        return cls(state.name, terrain, state.metadata, movement_policy=movement_policy)

    def __repr__(self) -> str:
        return f"TerrainMap(name={self._name!r}, width={self._width}, height={self._height})"
