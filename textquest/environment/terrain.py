"""Terrain cell types.

Every terrain kind prints as exactly one ASCII character. The same character
is used when a map is saved, so the key doubles as the on-disk encoding.
"""

from __future__ import annotations

from enum import Enum

EMPTY_KEY = " "


class InvalidMapFormatError(ValueError):
    """Raised when saved map data cannot be decoded (unknown cell keys, bad JSON)."""


class TerrainType(Enum):
    """Closed set of terrain kinds, valued by their printable key."""

    Empty = EMPTY_KEY
    Grass = "."
    Forest = "T"
    Mountain = "^"
    Water = "~"
    Road = "="
    Bridge = "#"
    Town = "@"

    @property
    def key(self) -> str:
        return self.value

    @classmethod
    def from_key(cls, key: str) -> "TerrainType":
        """Return the variant whose key is ``key``.

        Raises:
            InvalidMapFormatError: If ``key`` is not a recognised terrain character.
        """
        try:
            return cls(key)
        except ValueError as exc:
            raise InvalidMapFormatError(f"Unknown terrain key: {key!r}") from exc
