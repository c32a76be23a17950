"""Constant values for the duel game."""

from __future__ import annotations

DEFAULTS = {
    "WINDOW_WIDTH": 1280,
    "WINDOW_HEIGHT": 720,
    "FPS": 60,
    "PLAYER_START_X": -4.0,
    "ENEMY_START_X": 4.0,
    "CAMERA_BASE_SPAN": 5.0,
}
