"""Body parts, their generation and the stats derived from them."""

from .generator import random_body, randomize_part
from .layout import Anchor, BodyLayout, PartPlacement, compute_body_layout
from .materials import Material
from .parts import ArmMeta, Body, HeadMeta, LegMeta, Part, PartStats, TorsoMeta, default_body
from .skills import Ability, Limb, LimbKind, Skill, SkillKind
from .stats import Stats, compute_stats

__all__ = [
    "Ability",
    "Anchor",
    "ArmMeta",
    "Body",
    "BodyLayout",
    "HeadMeta",
    "LegMeta",
    "Limb",
    "LimbKind",
    "Material",
    "Part",
    "PartPlacement",
    "PartStats",
    "Skill",
    "SkillKind",
    "Stats",
    "TorsoMeta",
    "compute_body_layout",
    "compute_stats",
    "default_body",
    "random_body",
    "randomize_part",
]
