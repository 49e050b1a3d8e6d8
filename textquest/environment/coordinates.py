"""Map coordinates and the lenient ``"X,Y"`` parser used for map metadata."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Searched anywhere in the value, so "start at 3, 4" is accepted as well.
COORDINATE_PATTERN = re.compile(r"(\d+)\s*,\s*(\d+)")


@dataclass(frozen=True)
class Coordinate:
    """Zero-based map position; ``x`` grows rightward and ``y`` grows downward."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinate must be non-negative, got ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


def parse_coordinate(text: Optional[str]) -> Optional[Coordinate]:
    """Parse ``"X,Y"`` into a Coordinate, or return None when absent or malformed.

    Whitespace around the comma is tolerated. Never raises.
    """
    if not isinstance(text, str):
        return None
    match = COORDINATE_PATTERN.search(text)
    if match is None:
        return None
    return Coordinate(int(match.group(1)), int(match.group(2)))
