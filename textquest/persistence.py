"""
MapStore interface for pluggable save/load backends.

Two implementations are included:
1. InMemoryMapStore - dict-based snapshots, lost on exit (testing, prototyping)
2. JsonMapStore - one human-readable JSON file per map (save games, authored maps)

Every backend stores ``TerrainMapState`` records, never live maps, so a
loaded map never shares backing storage with the map that was saved.

Usage pattern:
    store = JsonMapStore(Config.SAVES_DIR)
    store.save(terrain_map)
    restored = store.load(terrain_map.name)
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from .config import Config
from .environment import InvalidMapFormatError, TerrainMap, TerrainMapState
from .logging_utils import log_error, log_success

# Map names become file names; these would escape base_path or nest directories
_PATH_SEPARATORS = ("/", "\\", "\0")


class MapStore(ABC):
    """Abstract base class for terrain map persistence."""

    @abstractmethod
    def save(self, terrain_map: TerrainMap) -> None:
        """
        Save a map under its name, replacing any previous save.

        Args:
            terrain_map: Map to save
        """
        pass

    @abstractmethod
    def load(self, name: str) -> Optional[TerrainMap]:
        """
        Load a map by name.

        Args:
            name: Map name

        Returns:
            A new TerrainMap if found, None otherwise

        Raises:
            InvalidMapFormatError: If the stored data cannot be decoded
        """
        pass

    @abstractmethod
    def list_maps(self) -> List[str]:
        """Return the names of all stored maps, sorted."""
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Delete a stored map. Safe to call for unknown names."""
        pass


class InMemoryMapStore(MapStore):
    """In-memory persistence keyed by map name. Data is lost when the process exits."""

    def __init__(self):
        self.maps: Dict[str, TerrainMapState] = {}

    def save(self, terrain_map: TerrainMap) -> None:
        self.maps[terrain_map.name] = terrain_map.to_state()

    def load(self, name: str) -> Optional[TerrainMap]:
        state = self.maps.get(name)
        if state is None:
            return None
        return TerrainMap.from_state(state)

    def list_maps(self) -> List[str]:
        return sorted(self.maps)

    def delete(self, name: str) -> None:
        self.maps.pop(name, None)


class JsonMapStore(MapStore):
    """File-based persistence, one pretty-printed JSON file per map.

    Directory structure:
    ```
    {base_path}/
      overworld.json
      caves.json
    ```

    File format:
    ```json
    {
      "name": "overworld",
      "terrain": [[".", ".", "~"], ["T", ".", "~"]],
      "metadata": {"start": "1,0"}
    }
    ```
    Rows may also be written as strings (``"..~"``) in hand-authored files.
    """

    def __init__(self, base_path: Path | str = "saves"):
        self.base_path = Path(base_path)

    def _path(self, name: str) -> Path:
        return map_path(self.base_path, name)

    def save(self, terrain_map: TerrainMap) -> None:
        path = self._path(terrain_map.name)
        self.base_path.mkdir(parents=True, exist_ok=True)
        payload = terrain_map.to_state().model_dump(mode="json")
        path.write_text(json.dumps(payload, indent=2), "utf-8")
        log_success(f"Saved map '{terrain_map.name}' ({terrain_map.width}x{terrain_map.height}) to {path}")

    def load(self, name: str) -> Optional[TerrainMap]:
        path = self._path(name)
        if not path.exists():
            return None
        return read_map_file(path)

    def list_maps(self) -> List[str]:
        if not self.base_path.exists():
            return []
        return sorted(
            f.stem for f in self.base_path.glob("*.json")
            if not f.name.startswith("_")
        )

    def delete(self, name: str) -> None:
        path = self._path(name)
        if path.exists():
            path.unlink()


def map_path(directory: Path, name: str) -> Path:
    """Return the JSON file for map ``name``, which must stay inside ``directory``.

    Raises:
        ValueError: If the name is empty, contains a path separator, or is a
            relative path component such as ``..``.
    """
    if not name or name in (".", "..") or any(sep in name for sep in _PATH_SEPARATORS):
        raise ValueError(f"Map name {name!r} cannot be used as a file name")
    return Path(directory) / f"{name}.json"


def read_map_file(path: Path) -> TerrainMap:
    """Decode a JSON map file into a TerrainMap.

    Raises:
        InvalidMapFormatError: If the file is not valid JSON, does not match
            the map schema, or holds an empty terrain array.
    """
    try:
        payload = json.loads(path.read_text("utf-8"))
        state = TerrainMapState.model_validate(payload)
        terrain_map = TerrainMap.from_state(state)
    except (json.JSONDecodeError, ValidationError, ValueError) as exc:
        log_error(f"Could not read map file {path}: {exc}")
        if isinstance(exc, InvalidMapFormatError):
            raise
        raise InvalidMapFormatError(f"Invalid map file {path}: {exc}") from exc
    return terrain_map


def load_map(name: str, maps_dir: Optional[Path] = None) -> TerrainMap:
    """Convenience function to load an authored map.

    Args:
        name: Map name (without .json extension)
        maps_dir: Directory to read from. Defaults to ``Config.MAPS_DIR``

    Raises:
        FileNotFoundError: If no such map exists
        ValueError: If the name cannot be used as a file name
        InvalidMapFormatError: If the file cannot be decoded
    """
    path = map_path(maps_dir or Config.MAPS_DIR, name)
    if not path.exists():
        raise FileNotFoundError(f"Map '{name}' not found at {path}")
    return read_map_file(path)
