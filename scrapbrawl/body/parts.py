"""Body part definitions and the composed :class:`Body`."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Tuple, TypeVar

from .materials import DEFAULT_MATERIAL, Color, Material
from .skills import Ability, Limb, Skill

if TYPE_CHECKING:  # pragma: no cover - used only for type checking to avoid circular import
    from .stats import Stats


@dataclass(frozen=True)
class PartStats:
    """Statistics every part exposes regardless of its kind."""

    skills: Tuple[Skill, ...]
    material: Material
    weight: float
    health: float
    energy: float  # negative values are an upkeep cost
    size: float
    color: Color


@dataclass(frozen=True)
class HeadMeta:
    """Sensory hub: reaction time and accuracy."""

    refresh_rate: float
    close_vision: float
    far_vision: float

    def contribute(self, stats: "Stats") -> None:
        stats.close_accuracy = max(self.close_vision, stats.close_accuracy)
        stats.far_accuracy = max(self.far_vision, stats.far_accuracy)
        stats.reaction_time = min(self.refresh_rate, stats.reaction_time)


@dataclass(frozen=True)
class LegMeta:
    """Locomotion: the slowest leg caps the speed, jump forces add up."""

    max_speed: float
    jump_force: float

    def contribute(self, stats: "Stats") -> None:
        stats.speed = min(self.max_speed, stats.speed)
        stats.jump_force += self.jump_force


@dataclass(frozen=True)
class TorsoMeta:
    """Capacity of the torso; adds nothing to the stats by itself."""

    arm_slots: int
    leg_slots: int

    def contribute(self, stats: "Stats") -> None:
        return None


@dataclass(frozen=True)
class ArmMeta:
    """Arms carry their ability in the skill list only."""

    def contribute(self, stats: "Stats") -> None:
        return None


M = TypeVar("M", HeadMeta, LegMeta, TorsoMeta, ArmMeta)


@dataclass(frozen=True)
class Part(Generic[M]):
    """One structural unit of a body: shared stats plus kind specific metadata."""

    name: str
    stats: PartStats
    meta: M

    def contribute(self, stats: "Stats") -> None:
        """Fold this part into ``stats``."""

        stats.add_part_stats(self.stats)
        self.meta.contribute(stats)


Torso = Part[TorsoMeta]
Head = Part[HeadMeta]
Arm = Part[ArmMeta]
Leg = Part[LegMeta]


def min_arm_count(arm_slots: int) -> int:
    """Smallest number of arms a torso with ``arm_slots`` must carry."""

    return math.ceil(arm_slots * 0.2)


@dataclass(frozen=True)
class Body:
    """Complete physical makeup of one actor.

    A body is never edited in place; a new configuration replaces the old
    one wholesale.
    """

    torso: Part[TorsoMeta]
    head: Part[HeadMeta]
    arms: Tuple[Part[ArmMeta], ...] = field(default_factory=tuple)
    legs: Tuple[Part[LegMeta], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arms", tuple(self.arms))
        object.__setattr__(self, "legs", tuple(self.legs))
        slots = self.torso.meta
        if len(self.legs) != slots.leg_slots:
            raise ValueError(
                f"Body has {len(self.legs)} legs but the torso provides {slots.leg_slots} leg slots"
            )
        minimum = min_arm_count(slots.arm_slots)
        if not (minimum <= len(self.arms) <= slots.arm_slots):
            raise ValueError(
                f"Body has {len(self.arms)} arms, expected between {minimum} and {slots.arm_slots}"
            )

    def parts(self) -> Tuple[Part, ...]:
        """Return every part in fold order: torso, head, legs, arms."""

        return (self.torso, self.head, *self.legs, *self.arms)

    @property
    def total_weight(self) -> float:
        return sum(part.stats.weight for part in self.parts())


def _jab(index: int) -> Skill:
    return Skill.basic_melee(
        Ability(
            meta=5.0,
            time=1.0,
            cooldown=0.2,
            energy_cost=3.0,
            limb=Limb.arm(index),
            name="Jab",
        )
    )


def default_body() -> Body:
    """Return the fixed starter body built entirely from rust."""

    material = DEFAULT_MATERIAL
    color = material.color

    def create_arm(index: int) -> Part[ArmMeta]:
        return Part(
            name="Typical Rusty Arm - V0",
            stats=PartStats(
                skills=(_jab(index),),
                material=material,
                weight=16.0,
                health=1.0,
                energy=-2.0,
                size=1.0,
                color=color,
            ),
            meta=ArmMeta(),
        )

    leg = Part(
        name="Normal Rusty Leg - V0",
        stats=PartStats(
            skills=(Skill.walk_forward(), Skill.walk_backward()),
            material=material,
            weight=26.0,
            health=5.0,
            energy=-2.0,
            size=1.0,
            color=color,
        ),
        meta=LegMeta(max_speed=5.0, jump_force=15.0),
    )
    torso = Part(
        name="Basic Rusty Torso - V0",
        stats=PartStats(
            skills=(),
            material=material,
            weight=50.0,
            health=10.0,
            energy=-12.0,
            size=1.0,
            color=color,
        ),
        meta=TorsoMeta(arm_slots=2, leg_slots=2),
    )
    head = Part(
        name="Ordinary Rusty Head - V0",
        stats=PartStats(
            skills=(),
            material=material,
            weight=12.0,
            health=2.0,
            energy=-4.0,
            size=1.0,
            color=color,
        ),
        meta=HeadMeta(refresh_rate=1.0, close_vision=1.0, far_vision=1.0),
    )
    return Body(
        torso=torso,
        head=head,
        arms=(create_arm(0), create_arm(1)),
        legs=(leg, leg),
    )


__all__ = [
    "Arm",
    "ArmMeta",
    "Body",
    "Head",
    "HeadMeta",
    "Leg",
    "LegMeta",
    "Part",
    "PartStats",
    "Torso",
    "TorsoMeta",
    "default_body",
    "min_arm_count",
]
