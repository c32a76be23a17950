"""Aggregation of a body's parts into one performance profile."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List

from .parts import Body, PartStats
from .skills import Skill, sort_and_dedup

logger = logging.getLogger("scrapbrawl.stats")

BASE_MAX_ENERGY = 100.0
TORSO_WIDTH_RATIO = 0.3


@dataclass
class Stats:
    """Derived performance profile; rebuilt in full whenever the body changes."""

    health: float = 0.0
    energy: float = 0.0

    max_health: float = 0.0
    max_energy: float = 0.0
    weight: float = 0.0
    width: float = 0.0
    speed: float = 0.0
    reaction_time: float = 0.0
    close_accuracy: float = 0.0
    far_accuracy: float = 0.0
    jump_force: float = 0.0
    skills: List[Skill] = field(default_factory=list)

    def add_part_stats(self, part_stats: PartStats) -> None:
        self.max_health += part_stats.health
        self.max_energy += part_stats.energy
        self.weight += part_stats.weight
        self.skills.extend(part_stats.skills)

    def summary(self) -> Dict[str, object]:
        """Return a plain mapping of the profile, skills reduced to names."""

        return {
            "health": self.health,
            "energy": self.energy,
            "max_health": self.max_health,
            "max_energy": self.max_energy,
            "weight": self.weight,
            "width": self.width,
            "speed": self.speed,
            "reaction_time": self.reaction_time,
            "close_accuracy": self.close_accuracy,
            "far_accuracy": self.far_accuracy,
            "jump_force": self.jump_force,
            "skills": [(skill.kind.value, skill.name) for skill in self.skills],
        }


def compute_stats(body: Body) -> Stats:
    """Fold every part of ``body`` into a fresh :class:`Stats`.

    Parts are visited torso, head, legs, arms. The skill list is sorted by
    category and consecutive equal skills are collapsed; ability skills never
    compare equal and therefore always survive. Health and energy start at
    their maxima.
    """

    stats = Stats()
    stats.speed = math.inf
    # Flat endurance floor independent of parts.
    stats.max_energy = BASE_MAX_ENERGY

    body.torso.contribute(stats)
    body.head.contribute(stats)
    for leg in body.legs:
        leg.contribute(stats)
    for arm in body.arms:
        arm.contribute(stats)

    stats.skills = sort_and_dedup(stats.skills)
    stats.width = TORSO_WIDTH_RATIO * body.torso.stats.size

    stats.health = stats.max_health
    stats.energy = stats.max_energy

    logger.debug(
        "Recomputed stats: hp=%.1f energy=%.1f speed=%.2f skills=%d",
        stats.max_health,
        stats.max_energy,
        stats.speed,
        len(stats.skills),
    )
    return stats


__all__ = ["BASE_MAX_ENERGY", "Stats", "TORSO_WIDTH_RATIO", "compute_stats"]
