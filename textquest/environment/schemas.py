"""Pydantic schema for saved terrain maps.

``TerrainMapState`` is the record a save/load collaborator reads and writes:
a name, a 2D array of single-character terrain keys, and string metadata.
Metadata keys the map itself does not use (game mode, narrative hooks, ...)
are carried through untouched.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from .terrain import TerrainType


class TerrainMapState(BaseModel):
    """Persisted representation of a TerrainMap."""

    name: str = Field(..., description="Map name")
    terrain: List[List[str]] = Field(
        ...,
        description="Rows of terrain keys, top row first",
    )
    metadata: Dict[str, str] = Field(
        default_factory=dict,
        description="Free-form metadata (e.g., start -> '3,4')",
    )

    @field_validator("terrain", mode="before")
    @classmethod
    def _split_string_rows(cls, value: Any) -> Any:
        # Hand-authored maps may write each row as a single string ("..~~")
        if isinstance(value, list):
            return [list(row) if isinstance(row, str) else row for row in value]
        return value

    @field_validator("terrain")
    @classmethod
    def _check_keys(cls, value: List[List[str]]) -> List[List[str]]:
        for y, row in enumerate(value):
            for x, key in enumerate(row):
                if len(key) != 1:
                    raise ValueError(f"Terrain key at ({x}, {y}) must be one character, got {key!r}")
                TerrainType.from_key(key)
        return value
