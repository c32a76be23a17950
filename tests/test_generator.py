"""Tests for procedural part and body generation."""

from __future__ import annotations

import math
import random
import re

import pytest

from scrapbrawl.body.generator import (
    gen_name,
    random_arm,
    random_body,
    random_head,
    random_leg,
    randomize_color,
    randomize_part,
)
from scrapbrawl.body.materials import DEFAULT_MATERIAL, RANDOMIZABLE_MATERIALS, Material
from scrapbrawl.body.parts import min_arm_count
from scrapbrawl.body.skills import Limb, SkillKind

NAME_PATTERN = re.compile(r"^[A-Z][a-z]+ [a-z]+ - [A-Z]{1,4}[0-9]{2,5}[A-Z]?$")


def test_catalog_has_seven_randomizable_materials() -> None:
    assert len(Material) == 8
    assert len(RANDOMIZABLE_MATERIALS) == 7
    assert DEFAULT_MATERIAL not in RANDOMIZABLE_MATERIALS


def test_default_material_never_drawn() -> None:
    rng = random.Random(3)
    drawn = {Material.choose(rng) for _ in range(2000)}
    assert DEFAULT_MATERIAL not in drawn
    assert drawn == set(RANDOMIZABLE_MATERIALS)


@pytest.mark.parametrize("seed", range(25))
def test_part_weight_is_size_times_density(seed: int) -> None:
    stats = randomize_part(random.Random(seed), (), (0.6, 1.0), 0.3, 0.7)

    assert 0.5 <= stats.size <= 2.0
    density = stats.weight / stats.size
    factor = density / stats.material.density
    assert 0.6 - 1e-9 <= factor <= 1.0 + 1e-9


@pytest.mark.parametrize("seed", range(25))
def test_part_health_and_energy_stay_within_shaped_bounds(seed: int) -> None:
    stats = randomize_part(random.Random(seed), (), (0.8, 1.2), 1.0, 1.0)
    low = 0.2 ** 0.3 * math.sqrt(stats.size)
    high = 5.0 ** 0.3 * math.sqrt(stats.size)

    base_hp = stats.material.base_health
    assert base_hp * low - 1e-9 <= stats.health <= base_hp * high + 1e-9
    base_energy = abs(stats.material.base_energy)
    assert abs(stats.energy) <= base_energy * high + 1e-9


def test_color_jitter_is_bounded_and_clamped() -> None:
    rng = random.Random(11)
    for _ in range(200):
        red, green, blue = randomize_color((0.0, 1.0, 0.5), rng)
        assert red <= 0.04 and red >= 0.0
        assert 0.96 <= green <= 1.0
        assert 0.46 <= blue <= 0.54


def test_generated_names_follow_pattern() -> None:
    rng = random.Random(5)
    for _ in range(100):
        assert NAME_PATTERN.match(gen_name(rng, "leg"))


def test_head_ranges() -> None:
    head = random_head(random.Random(8))
    assert head.stats.skills == ()
    for value in (head.meta.refresh_rate, head.meta.close_vision, head.meta.far_vision):
        assert 0.01 - 1e-9 <= value <= 1.0


def test_arm_carries_one_melee_on_its_own_limb() -> None:
    arm = random_arm(random.Random(2), 1)
    (skill,) = arm.stats.skills
    ability = skill.ability

    assert skill.kind is SkillKind.BASIC_MELEE
    assert ability.limb == Limb.arm(1)
    assert math.sqrt(100.0) <= ability.meta <= math.sqrt(1000.0)
    assert 0.5 <= ability.time <= 1.5
    assert 0.0 <= ability.cooldown <= 0.25
    assert 1.0 <= ability.energy_cost <= 16.0


def test_leg_always_walks_forward_and_turns() -> None:
    rng = random.Random(21)
    backward = 0
    for _ in range(400):
        leg = random_leg(rng)
        kinds = [skill.kind for skill in leg.stats.skills]
        assert SkillKind.WALK_FORWARD in kinds
        assert SkillKind.TURN_AROUND in kinds
        backward += SkillKind.WALK_BACKWARD in kinds
        assert 0.2 ** 0.2 * 5.0 <= leg.meta.max_speed <= 5.0 ** 0.2 * 15.0
        assert 0.2 ** 0.2 * 20.0 <= leg.meta.jump_force <= 5.0 ** 0.2 * 25.0
    assert 340 <= backward < 400


@pytest.mark.parametrize("seed", range(50))
def test_random_body_respects_slots(seed: int) -> None:
    body = random_body(random.Random(seed))
    slots = body.torso.meta

    assert len(body.legs) == slots.leg_slots
    assert min_arm_count(slots.arm_slots) <= len(body.arms) <= slots.arm_slots
    assert [arm.stats.skills[0].ability.limb.index for arm in body.arms] == list(range(len(body.arms)))


def test_random_body_is_reproducible_from_seed() -> None:
    first = random_body(random.Random(99))
    second = random_body(random.Random(99))

    assert first.torso.name == second.torso.name
    assert first.torso.stats.weight == second.torso.stats.weight
    assert [leg.meta.max_speed for leg in first.legs] == [leg.meta.max_speed for leg in second.legs]


def test_invalid_density_range_is_rejected() -> None:
    with pytest.raises(ValueError, match="density range"):
        randomize_part(random.Random(0), (), (1.0, 0.5), 1.0, 1.0)
