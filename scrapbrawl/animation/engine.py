"""Per-tick execution of the selected skill.

One step reads the actor's stats and the skill at the snapshot index, moves
the actor and poses its limbs, keeps it clear of the opponent and advances the
animation progress. Progress beyond 1.0 returns the state to :class:`Idle`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Protocol

from ..body.skills import Skill, SkillKind
from ..body.stats import Stats
from .errors import UnimplementedSkillError
from .poses import ActorTransform, BodyPoses
from .state import IDLE, Active, AnimationState

logger = logging.getLogger("scrapbrawl.animation")

ANIMATION_SPEED = 1.0
WALK_FORWARD_MULTIPLIER = 1.0
WALK_BACKWARD_MULTIPLIER = -0.5
WALK_END_TIME = 0.1
TURN_EPSILON = 0.0001
MIN_GAP = 0.1

_UNIMPLEMENTED = frozenset({SkillKind.BASIC_RANGED, SkillKind.SCAN})


class Animated(Protocol):
    """What the animation step needs from an actor."""

    stats: Stats
    transform: ActorTransform
    poses: BodyPoses


def ensure_implemented(skill: Skill) -> None:
    """Raise :class:`UnimplementedSkillError` for skills without kinematics."""

    if skill.kind in _UNIMPLEMENTED:
        raise UnimplementedSkillError(f"Skill '{skill.name}' ({skill.kind.value}) has no animation")


def resolve_skill(stats: Stats, skill_index: int) -> Skill:
    """Return the skill at ``skill_index``; negative indices are rejected."""

    if not 0 <= skill_index < len(stats.skills):
        raise IndexError(f"Skill index {skill_index} out of range for {len(stats.skills)} skills")
    return stats.skills[skill_index]


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _walk(
    position: float,
    multiplier: float,
    progress: float,
    dt: float,
    stats: Stats,
    transform: ActorTransform,
    poses: BodyPoses,
) -> float:
    position += dt * stats.speed * transform.facing * multiplier

    if progress < 1.0 - WALK_END_TIME:
        distance_moved = stats.speed * progress * multiplier
        for index, pose in poses.legs():
            sign = (index % 2) * 2.0 - 1.0
            pose.rotation = math.sin(sign * distance_moved)
        for index, pose in poses.arms():
            sign = -((index % 2) * 2.0 - 1.0)
            pose.rotation = math.sin(sign * distance_moved)
    else:
        t = (progress - 1.0 + WALK_END_TIME) / WALK_END_TIME
        for pose in poses.all():
            pose.rotation = _lerp(pose.rotation, 0.0, t)
    return position


def _turn(origin: float, progress: float) -> float:
    """Facing while turning away from ``origin``.

    The magnitude shrinks towards zero over the first half keeping the
    original sign, then grows back with the opposite sign.
    """

    sign = math.copysign(1.0, origin)
    magnitude = abs(origin)
    if progress <= 0.5:
        t = 1.0 - progress * 2.0
        return sign * max(TURN_EPSILON, magnitude * t)
    t = min(1.0, progress * 2.0 - 1.0)
    return -sign * max(TURN_EPSILON, magnitude * t)


def resolve_overlap(position: float, actor: Animated, opponent: Animated) -> float:
    """Clamp ``position`` so the actor stays on its side with a minimum gap.

    The side is decided by the actor's position before this step.
    """

    gap = (actor.stats.width + opponent.stats.width) / 2.0 + MIN_GAP
    opponent_x = opponent.transform.x
    if actor.transform.x < opponent_x:
        return min(position, opponent_x - gap)
    return max(position, opponent_x + gap)


def step_animation(
    state: AnimationState,
    actor: Animated,
    opponent: Animated,
    dt: float,
) -> AnimationState:
    """Advance ``state`` by ``dt`` seconds, writing into ``actor``'s transform and poses."""

    if not isinstance(state, Active):
        return state

    stats = actor.stats
    transform = actor.transform
    poses = actor.poses
    progress = state.progress
    skill = resolve_skill(stats, state.skill_index)

    position = transform.x
    facing = transform.facing

    if skill.kind is SkillKind.WALK_BACKWARD:
        position = _walk(position, WALK_BACKWARD_MULTIPLIER, progress, dt, stats, transform, poses)
    elif skill.kind is SkillKind.WALK_FORWARD:
        position = _walk(position, WALK_FORWARD_MULTIPLIER, progress, dt, stats, transform, poses)
    elif skill.kind is SkillKind.TURN_AROUND:
        if state.turn_origin is None:
            state = replace(state, turn_origin=facing)
        facing = _turn(state.turn_origin, progress)
    elif skill.kind is SkillKind.BASIC_MELEE:
        pose = poses.get(skill.ability.limb)
        pose.rotation = math.sin(progress * math.pi)
    else:
        ensure_implemented(skill)

    transform.x = resolve_overlap(position, actor, opponent)
    transform.facing = facing

    advanced = state.advanced(dt * ANIMATION_SPEED)
    if advanced.progress > 1.0:
        if state.turn_origin is not None:
            transform.facing = -state.turn_origin
        logger.debug("Finished '%s' (index %d)", skill.name, state.skill_index)
        return IDLE
    return advanced


__all__ = [
    "ANIMATION_SPEED",
    "Animated",
    "MIN_GAP",
    "ensure_implemented",
    "resolve_overlap",
    "resolve_skill",
    "step_animation",
]
