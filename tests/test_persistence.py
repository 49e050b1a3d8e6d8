"""Tests for map persistence and the saved-map schema."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from textquest.environment import (
    Coordinate,
    InvalidMapFormatError,
    TerrainMap,
    TerrainMapState,
    TerrainType,
)
from textquest.persistence import InMemoryMapStore, JsonMapStore, load_map

MAPS_DIR = Path(__file__).resolve().parent.parent / "examples" / "maps"

G = TerrainType.Grass
W = TerrainType.Water


def make_map() -> TerrainMap:
    return TerrainMap("island", [[W, W, W], [W, G, W]], {"start": "1,1", "music": "waves"})


def test_terrain_keys_are_unique_single_characters():
    keys = [terrain.key for terrain in TerrainType]
    assert len(set(keys)) == len(keys)
    assert all(len(key) == 1 and key.isascii() and key.isprintable() for key in keys)
    assert TerrainType.Empty.key == " "


def test_from_key_round_trips_and_rejects_unknown():
    for terrain in TerrainType:
        assert TerrainType.from_key(terrain.key) is terrain
    with pytest.raises(InvalidMapFormatError):
        TerrainType.from_key("?")


def test_state_accepts_string_rows():
    state = TerrainMapState(name="strip", terrain=["..~", "T=@"])
    assert state.terrain == [[".", ".", "~"], ["T", "=", "@"]]
    assert state.metadata == {}


@pytest.mark.parametrize("terrain", [[["?"]], [[".."]], [["", "."]]])
def test_state_rejects_bad_keys(terrain):
    with pytest.raises(ValidationError):
        TerrainMapState(name="bad", terrain=terrain)


def test_to_state_writes_unset_cells_as_empty():
    terrain_map = make_map()
    terrain_map.modify_at(3, 0, G)
    state = terrain_map.to_state()
    assert state.terrain == [["~", "~", "~", "."], ["~", ".", "~", " "]]
    assert state.metadata == {"start": "1,1", "music": "waves"}


def test_in_memory_store_round_trip_does_not_share_storage():
    store = InMemoryMapStore()
    terrain_map = make_map()
    store.save(terrain_map)
    terrain_map.modify_at(0, 0, G)

    restored = store.load("island")
    assert restored is not None
    assert restored is not terrain_map
    assert restored.terrain_at(0, 0) is W
    assert restored.metadata == terrain_map.metadata
    assert store.list_maps() == ["island"]

    store.delete("island")
    assert store.load("island") is None
    store.delete("island")  # should not raise


def test_json_store_round_trip(tmp_path):
    store = JsonMapStore(tmp_path / "saves")
    terrain_map = make_map()
    terrain_map.modify_at(4, 3, TerrainType.Bridge)
    store.save(terrain_map)

    payload = json.loads((tmp_path / "saves" / "island.json").read_text("utf-8"))
    assert set(payload) == {"name", "terrain", "metadata"}

    restored = store.load("island")
    assert (restored.width, restored.height) == (5, 4)
    assert restored.render() == terrain_map.render()
    assert restored.terrain_at(4, 3) is TerrainType.Bridge
    assert restored.metadata["music"] == "waves"
    assert restored.starting_coordinate() == Coordinate(1, 1)


def test_json_store_missing_and_listing(tmp_path):
    store = JsonMapStore(tmp_path)
    assert store.load("nowhere") is None
    assert store.list_maps() == []
    assert JsonMapStore(tmp_path / "absent").list_maps() == []

    store.save(make_map())
    store.save(TerrainMap("cave", [[TerrainType.Mountain]], {}))
    assert store.list_maps() == ["cave", "island"]

    store.delete("cave")
    assert store.list_maps() == ["island"]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"name": "bad", "terrain": [["?"]], "metadata": {}}),
        json.dumps({"name": "bad", "terrain": [], "metadata": {}}),
        json.dumps({"terrain": [["."]]}),
    ],
)
def test_json_store_rejects_malformed_files(tmp_path, content):
    (tmp_path / "bad.json").write_text(content, "utf-8")
    with pytest.raises(InvalidMapFormatError):
        JsonMapStore(tmp_path).load("bad")


def test_load_authored_map():
    meadow = load_map("meadow", maps_dir=MAPS_DIR)
    assert meadow.name == "meadow"
    assert (meadow.width, meadow.height) == (8, 6)
    assert meadow.starting_coordinate() == Coordinate(3, 3)
    assert meadow.terrain_at(3, 3) is TerrainType.Town
    assert meadow.metadata["mode"] == "explore"


def test_load_map_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map("nowhere", maps_dir=tmp_path)


@pytest.mark.parametrize("name", ["region/north", "../escaped", "..", "back\\slash"])
def test_json_store_rejects_names_outside_base_path(tmp_path, name):
    base = tmp_path / "saves"
    store = JsonMapStore(base)

    with pytest.raises(ValueError, match="cannot be used as a file name"):
        store.save(TerrainMap(name, [[G]], {}))
    with pytest.raises(ValueError):
        store.load(name)
    with pytest.raises(ValueError):
        store.delete(name)

    assert not (tmp_path / "escaped.json").exists()
    assert not base.exists()


def test_load_map_rejects_names_outside_maps_dir(tmp_path):
    with pytest.raises(ValueError):
        load_map("../meadow", maps_dir=tmp_path)


def test_json_store_accepts_names_with_dots(tmp_path):
    store = JsonMapStore(tmp_path)
    store.save(TerrainMap("act1..west", [[G]], {}))
    assert store.list_maps() == ["act1..west"]
    assert store.load("act1..west").terrain_at(0, 0) is G
