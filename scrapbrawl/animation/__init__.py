"""Skill execution: pose handles, animation state and the per-tick step."""

from .engine import step_animation
from .errors import AnimationError, MissingLimbError, UnimplementedSkillError
from .poses import ActorTransform, BodyPoses, Pose
from .state import IDLE, Active, AnimationState, Idle, begin

__all__ = [
    "Active",
    "ActorTransform",
    "AnimationError",
    "AnimationState",
    "BodyPoses",
    "IDLE",
    "Idle",
    "MissingLimbError",
    "Pose",
    "UnimplementedSkillError",
    "begin",
    "step_animation",
]
