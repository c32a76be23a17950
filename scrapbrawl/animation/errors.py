"""Errors raised while executing a skill animation."""

from __future__ import annotations


class AnimationError(RuntimeError):
    """Raised when an animation step hits corrupted bookkeeping."""


class MissingLimbError(AnimationError, KeyError):
    """Raised when no pose handle exists for a limb."""


class UnimplementedSkillError(AnimationError, NotImplementedError):
    """Raised when a skill without kinematics is selected or reached."""


__all__ = ["AnimationError", "MissingLimbError", "UnimplementedSkillError"]
