"""
textquest Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent

    # Authored maps shipped with the game, and player save files
    MAPS_DIR: Path = Path(os.getenv("TEXTQUEST_MAPS_DIR", str(PROJECT_ROOT / "examples" / "maps")))
    SAVES_DIR: Path = Path(os.getenv("TEXTQUEST_SAVES_DIR", "saves"))

    # Visible portion of the map drawn around the player
    VIEWPORT_WIDTH: int = int(os.getenv("TEXTQUEST_VIEWPORT_WIDTH", "21"))
    VIEWPORT_HEIGHT: int = int(os.getenv("TEXTQUEST_VIEWPORT_HEIGHT", "11"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.VIEWPORT_WIDTH <= 0 or cls.VIEWPORT_HEIGHT <= 0:
            raise ValueError(
                "TEXTQUEST_VIEWPORT_WIDTH and TEXTQUEST_VIEWPORT_HEIGHT must be positive, "
                f"got {cls.VIEWPORT_WIDTH}x{cls.VIEWPORT_HEIGHT}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "textquest Configuration:",
            f"  Maps: {cls.MAPS_DIR}",
            f"  Saves: {cls.SAVES_DIR}",
            f"  Viewport: {cls.VIEWPORT_WIDTH}x{cls.VIEWPORT_HEIGHT}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
