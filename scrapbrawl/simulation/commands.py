"""Command layer between player input and the animation engine."""

from __future__ import annotations

import logging
import random

from ..animation.engine import ensure_implemented, step_animation
from ..animation.state import Active, AnimationState, begin
from ..body.generator import random_body
from .actor import Actor
from .state import DuelState

logger = logging.getLogger("scrapbrawl.simulation")

__all__ = ["regenerate_body", "select_skill", "tick"]


def select_skill(duel: DuelState, index: int) -> AnimationState:
    """Start the player's skill at ``index`` unless a skill is already running.

    Selections made while a skill runs are ignored and the running state is
    returned unchanged.
    """

    if isinstance(duel.animation, Active):
        logger.debug("Ignoring selection %d while skill %d runs", index, duel.animation.skill_index)
        return duel.animation

    skills = duel.player.stats.skills
    if not 0 <= index < len(skills):
        raise ValueError(f"Skill index {index} out of range; player has {len(skills)} skills")
    skill = skills[index]
    ensure_implemented(skill)

    duel.animation = begin(index)
    logger.debug("Selected skill %d '%s'", index, skill.name)
    return duel.animation


def tick(duel: DuelState, dt: float) -> AnimationState:
    """Advance the duel by ``dt`` seconds."""

    if dt < 0.0:
        raise ValueError(f"Elapsed time must be non-negative, got {dt}")
    duel.animation = step_animation(duel.animation, duel.player, duel.enemy, dt)
    duel.elapsed += dt
    duel.ticks += 1
    return duel.animation


def regenerate_body(actor: Actor, rng: random.Random) -> None:
    """Replace ``actor``'s body with a freshly generated one."""

    actor.replace_body(random_body(rng))
