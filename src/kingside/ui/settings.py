"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Default"
    tile_size: int = 75  # px per square
    show_coordinates: bool = True
    show_legal_moves: bool = True
    highlight_check: bool = True

    # Diagnostics
    log_level: str = "WARNING"
