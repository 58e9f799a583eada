"""Map loading and validation, tile sizes and XPM texture reading for a tile-based puzzle game."""

__version__ = "0.1.0"
__all__ = ["colornames", "pixels", "wordtab", "xpm", "game_map", "tiles", "cli"]