"""
Explore the meadow map.

Loads the authored meadow map, draws the viewport around the starting
position, extends the map eastward and saves the result.

Run: uv run python examples/explore/run.py
"""

from textquest import Config, JsonMapStore, TerrainType, load_map, render_viewport
from textquest.logging_utils import log_info


def main() -> None:
    Config.validate()
    log_info(Config.display())

    meadow = load_map("meadow")
    start = meadow.starting_coordinate()
    log_info(f"Loaded {meadow!r}, starting at {start}")
    print(render_viewport(meadow, start, width=11, height=7))

    # Lay a road east past the current edge of the map
    for x in range(meadow.width, meadow.width + 4):
        meadow.modify_at(x, start.y, TerrainType.Road)
    print(meadow.render())

    JsonMapStore(Config.SAVES_DIR).save(meadow)


if __name__ == "__main__":
    main()
