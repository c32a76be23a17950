"""Procedural generation of random parts and bodies.

Every function takes an explicit :class:`random.Random` so that a duel can be
reconstructed from its seed.
"""

from __future__ import annotations

import logging
import math
import random
import string
from typing import Sequence, Tuple

from .materials import Color, Material
from .parts import ArmMeta, Body, HeadMeta, LegMeta, Part, PartStats, TorsoMeta, min_arm_count
from .skills import Ability, Limb, Skill

logger = logging.getLogger("scrapbrawl.generator")

__all__ = [
    "ADJECTIVES",
    "gen_name",
    "random_arm",
    "random_body",
    "random_head",
    "random_leg",
    "random_torso",
    "randomize_color",
    "randomize_part",
]

ADJECTIVES: Tuple[str, ...] = (
    "Rad",
    "Cool",
    "Examplar",
    "Energetic",
    "Clean",
    "Dirty",
    "Hard",
    "Excited",
    "Tiny",
    "Long",
    "Wide",
    "Good",
    "Bad",
    "Sour",
    "Salty",
    "Bitter",
    "Sweet",
    "Spicy",
    "Hot",
    "Swollen",
    "Rational",
    "Decent",
    "Brave",
    "Wise",
    "Glowing",
    "Fair",
    "Sharp",
    "Cowardly",
    "Rude",
    "Clumsy",
    "Stingy",
    "Loyal",
    "Adorable",
    "Beautiful",
    "Awesome",
    "Wonderful",
    "Friendly",
    "Calm",
    "Fresh",
    "Smelly",
    "Stinky",
    "Noisy",
    "Soft",
    "Dull",
    "Blurry",
    "Colorful",
    "Uncomfortable",
    "Turbo",
    "Bussin",
    "Suspicous",
    "Sussy",
)

HEAD_NOUNS = ("head", "skull", "noggin")
ARM_NOUNS = ("arm", "grabber", "limb")
LEG_NOUNS = ("leg", "thigh", "walker")
TORSO_NOUNS = ("torso", "body", "trunk", "thorax", "midsection")

SIZE_RANGE = (0.5, 2.0)
RATIO_RANGE = (0.2, 5.0)
RATIO_EXPONENT = 0.3
COLOR_JITTER = 0.04
WALK_BACKWARD_CHANCE = 0.95


def gen_name(rng: random.Random, part_name: str) -> str:
    """Return a cosmetic name like ``"Sharp leg - QX0421B"``."""

    pre_letters = rng.randint(1, 4)
    numbers = rng.randint(2, 5)
    post_letters = rng.randint(0, 1)
    serial = "".join(rng.choice(string.ascii_uppercase) for _ in range(pre_letters))
    serial += "".join(rng.choice(string.digits) for _ in range(numbers))
    serial += "".join(rng.choice(string.ascii_uppercase) for _ in range(post_letters))
    return f"{rng.choice(ADJECTIVES)} {part_name} - {serial}"


def randomize_color(color: Color, rng: random.Random, amount: float = COLOR_JITTER) -> Color:
    """Jitter every channel of ``color`` by up to ``amount`` and clamp to [0, 1]."""

    red, green, blue = (min(1.0, max(0.0, channel + rng.uniform(-amount, amount))) for channel in color)
    return (red, green, blue)


def _spread_ratio(rng: random.Random) -> float:
    # Compress a wide uniform ratio towards 1.
    return rng.uniform(*RATIO_RANGE) ** RATIO_EXPONENT


def randomize_part(
    rng: random.Random,
    skills: Sequence[Skill],
    density_range: Tuple[float, float],
    hp_multiplier: float,
    energy_multiplier: float,
) -> PartStats:
    """Draw physical stats for one part anchored to a random material."""

    low, high = density_range
    if low > high or low <= 0.0:
        raise ValueError(f"Invalid density range {density_range}")

    size = rng.uniform(*SIZE_RANGE)
    material = Material.choose(rng)
    density = material.density * rng.uniform(low, high)
    weight = size * density

    health = material.base_health * _spread_ratio(rng) * math.sqrt(size) * hp_multiplier
    energy = material.base_energy * _spread_ratio(rng) * math.sqrt(size) * energy_multiplier

    color = randomize_color(material.color, rng)

    return PartStats(
        skills=tuple(skills),
        material=material,
        weight=weight,
        health=health,
        energy=energy,
        size=size,
        color=color,
    )


def random_head(rng: random.Random) -> Part[HeadMeta]:
    part_name = rng.choice(HEAD_NOUNS)
    return Part(
        name=gen_name(rng, part_name),
        stats=randomize_part(rng, (), (0.6, 1.0), 0.1, 0.3),
        meta=HeadMeta(
            refresh_rate=rng.uniform(0.1, 1.0) ** 2,
            close_vision=rng.uniform(0.1, 1.0) ** 2,
            far_vision=rng.uniform(0.1, 1.0) ** 2,
        ),
    )


def random_arm(rng: random.Random, index: int) -> Part[ArmMeta]:
    skills = (
        Skill.basic_melee(
            Ability(
                meta=math.sqrt(rng.uniform(100.0, 1000.0)),
                time=rng.uniform(0.5, 1.5),
                cooldown=rng.uniform(0.0, 0.5) ** 2,
                energy_cost=rng.uniform(1.0, 4.0) ** 2,
                limb=Limb.arm(index),
                name="Jab",
            )
        ),
    )
    part_name = rng.choice(ARM_NOUNS)
    return Part(
        name=gen_name(rng, part_name),
        stats=randomize_part(rng, skills, (0.6, 1.0), 0.1, 0.3),
        meta=ArmMeta(),
    )


def random_leg(rng: random.Random) -> Part[LegMeta]:
    skills = [Skill.walk_forward(), Skill.turn_around()]
    if rng.random() < WALK_BACKWARD_CHANCE:
        skills.append(Skill.walk_backward())

    part_name = rng.choice(LEG_NOUNS)
    return Part(
        name=gen_name(rng, part_name),
        stats=randomize_part(rng, skills, (0.6, 1.0), 0.3, 0.7),
        meta=LegMeta(
            max_speed=rng.uniform(0.2, 5.0) ** 0.2 * rng.uniform(5.0, 15.0),
            jump_force=rng.uniform(0.2, 5.0) ** 0.2 * rng.uniform(20.0, 25.0),
        ),
    )


def random_torso(rng: random.Random) -> Part[TorsoMeta]:
    part_name = rng.choice(TORSO_NOUNS)
    return Part(
        name=gen_name(rng, part_name),
        stats=randomize_part(rng, (), (0.8, 1.2), 1.0, 1.0),
        meta=TorsoMeta(arm_slots=2, leg_slots=2),
    )


def random_body(rng: random.Random) -> Body:
    """Assemble a random body whose limb counts fit the torso's slots."""

    torso = random_torso(rng)
    head = random_head(rng)

    legs = tuple(random_leg(rng) for _ in range(torso.meta.leg_slots))
    max_arms = torso.meta.arm_slots
    num_arms = rng.randint(min_arm_count(max_arms), max_arms)
    arms = tuple(random_arm(rng, index) for index in range(num_arms))

    body = Body(torso=torso, head=head, arms=arms, legs=legs)
    logger.debug("Generated body '%s' with %d arms and %d legs", torso.name, len(arms), len(legs))
    return body
