from dataclasses import dataclass

from ..animation.state import IDLE, AnimationState
from .actor import Actor


@dataclass
class DuelState:
    player: Actor
    enemy: Actor
    animation: AnimationState = IDLE
    elapsed: float = 0.0
    ticks: int = 0
