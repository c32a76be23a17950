"""Simulation package containing the duel state, commands and the main loop."""

from __future__ import annotations

from .actor import Actor
from .state import DuelState

__all__ = [
    "Actor",
    "DuelState",
    "actor",
    "bootstrap",
    "commands",
    "loop",
    "state",
]
