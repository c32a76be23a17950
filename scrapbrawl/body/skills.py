"""Skills that body parts grant to the actor wearing them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class LimbKind(str, Enum):
    """Kind of appendage a :class:`Limb` points at."""

    ARM = "arm"
    LEG = "leg"


@dataclass(frozen=True)
class Limb:
    """Reference to one arm or leg of a body, addressed by its index."""

    kind: LimbKind
    index: int

    @classmethod
    def arm(cls, index: int) -> "Limb":
        return cls(LimbKind.ARM, index)

    @classmethod
    def leg(cls, index: int) -> "Limb":
        return cls(LimbKind.LEG, index)

    def __str__(self) -> str:
        return f"{self.kind.value}[{self.index}]"


@dataclass(eq=False)
class Ability(Generic[T]):
    """Payload of a limb-bound skill.

    ``meta`` carries the skill specific value (power for melee). ``time``,
    ``cooldown`` and ``energy_cost`` are declared for combat resolution and
    are not consumed by the animation pacing.
    """

    meta: T
    time: float
    cooldown: float
    energy_cost: float
    limb: Limb
    name: str

    def __eq__(self, other: object) -> bool:
        # Abilities never compare equal so that skill lists keep every one.
        return False

    __hash__ = None  # type: ignore[assignment]


class SkillKind(Enum):
    """Closed set of skills, valued by their sort order."""

    WALK_BACKWARD = "walk_backward"
    WALK_FORWARD = "walk_forward"
    TURN_AROUND = "turn_around"
    BASIC_MELEE = "basic_melee"
    BASIC_RANGED = "basic_ranged"
    SCAN = "scan"

    @property
    def order(self) -> int:
        return _SKILL_ORDER[self]

    @property
    def requires_ability(self) -> bool:
        return self in _ABILITY_KINDS


_SKILL_ORDER = {
    SkillKind.WALK_BACKWARD: 0,
    SkillKind.WALK_FORWARD: 1,
    SkillKind.TURN_AROUND: 2,
    SkillKind.BASIC_MELEE: 3,
    SkillKind.BASIC_RANGED: 3,
    SkillKind.SCAN: 4,
}

_ABILITY_KINDS = frozenset({SkillKind.BASIC_MELEE, SkillKind.BASIC_RANGED, SkillKind.SCAN})

_LOCOMOTION_NAMES = {
    SkillKind.WALK_BACKWARD: "Walk backward",
    SkillKind.WALK_FORWARD: "Walk forward",
    SkillKind.TURN_AROUND: "Turn around",
}


@dataclass(frozen=True, eq=False)
class Skill:
    """A named action: a locomotion primitive or an ability bound to a limb."""

    kind: SkillKind
    ability: Optional[Ability[float]] = None

    def __post_init__(self) -> None:
        if self.kind.requires_ability and self.ability is None:
            raise ValueError(f"Skill '{self.kind.value}' requires an ability payload")
        if not self.kind.requires_ability and self.ability is not None:
            raise ValueError(f"Skill '{self.kind.value}' does not take an ability payload")

    @classmethod
    def walk_backward(cls) -> "Skill":
        return cls(SkillKind.WALK_BACKWARD)

    @classmethod
    def walk_forward(cls) -> "Skill":
        return cls(SkillKind.WALK_FORWARD)

    @classmethod
    def turn_around(cls) -> "Skill":
        return cls(SkillKind.TURN_AROUND)

    @classmethod
    def basic_melee(cls, ability: Ability[float]) -> "Skill":
        return cls(SkillKind.BASIC_MELEE, ability)

    @classmethod
    def basic_ranged(cls, ability: Ability[float]) -> "Skill":
        return cls(SkillKind.BASIC_RANGED, ability)

    @classmethod
    def scan(cls, ability: Ability[float]) -> "Skill":
        return cls(SkillKind.SCAN, ability)

    @property
    def name(self) -> str:
        if self.ability is not None:
            return self.ability.name
        return _LOCOMOTION_NAMES[self.kind]

    @property
    def order(self) -> int:
        return self.kind.order

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Skill):
            return NotImplemented
        return self.kind is other.kind and self.ability == other.ability

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.ability is None:
            return f"Skill({self.kind.name})"
        return f"Skill({self.kind.name}, {self.ability.name!r} on {self.ability.limb})"


def sort_and_dedup(skills: Iterable[Skill]) -> List[Skill]:
    """Stable-sort ``skills`` by category and drop consecutive equal entries."""

    ordered = sorted(skills, key=lambda skill: skill.order)
    result: List[Skill] = []
    for skill in ordered:
        if result and result[-1] == skill:
            continue
        result.append(skill)
    return result


__all__ = [
    "Ability",
    "Limb",
    "LimbKind",
    "Skill",
    "SkillKind",
    "sort_and_dedup",
]
