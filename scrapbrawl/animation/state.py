"""Animation state: either idle or playing one selected skill."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class Idle:
    """No skill is running; a new selection may be made."""


@dataclass(frozen=True)
class Active:
    """A skill is running.

    ``skill_index`` is a snapshot of the position in the actor's skill list
    taken at selection time; it is not re-validated against later lists.
    ``turn_origin`` holds the facing captured on the first step of a turn.
    """

    skill_index: int
    progress: float = 0.0
    turn_origin: Optional[float] = None

    def advanced(self, amount: float) -> "Active":
        return replace(self, progress=self.progress + amount)


AnimationState = Union[Idle, Active]

IDLE = Idle()


def begin(skill_index: int) -> Active:
    """Start playing the skill at ``skill_index``."""

    return Active(skill_index=skill_index, progress=0.0)


def is_active(state: AnimationState) -> bool:
    return isinstance(state, Active)


__all__ = ["Active", "AnimationState", "IDLE", "Idle", "begin", "is_active"]
