"""Falling-block puzzle engine: shapes, board, rotation system, play loop and settings."""

__version__ = "0.1.0"

__all__ = [
    "audio",
    "board",
    "controller",
    "game",
    "generator",
    "goals",
    "hud",
    "menu",
    "piece_queue",
    "pieces",
    "play_manager",
    "player_state",
    "shapes",
    "timing",
]