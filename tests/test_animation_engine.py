"""Behaviour of the per-tick skill animation step."""

from __future__ import annotations

import math

import pytest

from body_helpers import make_arm, turning_body
from scrapbrawl.animation.engine import MIN_GAP, resolve_overlap, step_animation
from scrapbrawl.animation.errors import AnimationError, MissingLimbError, UnimplementedSkillError
from scrapbrawl.animation.state import IDLE, Active, Idle
from scrapbrawl.body.parts import Body
from scrapbrawl.body.skills import Ability, Limb, Skill
from scrapbrawl.simulation import commands

WALK_BACKWARD, WALK_FORWARD, TURN_AROUND, JAB_LEFT, JAB_RIGHT = range(5)


def _with_arm_skills(first: Skill, second: Skill) -> Body:
    base = turning_body()
    return Body(
        torso=base.torso,
        head=base.head,
        arms=(make_arm(0, (first,)), make_arm(1, (second,))),
        legs=base.legs,
    )


def _ability(limb: Limb, name: str = "Test") -> Ability[float]:
    return Ability(meta=1.0, time=1.0, cooldown=0.0, energy_cost=1.0, limb=limb, name=name)


def _run_to_idle(duel, dt: float = 0.1, limit: int = 100) -> int:
    for ticks in range(1, limit + 1):
        if isinstance(commands.tick(duel, dt), Idle):
            return ticks
    raise AssertionError("animation never finished")


def test_idle_state_is_left_untouched(duel) -> None:
    before = duel.player.transform.x

    assert step_animation(IDLE, duel.player, duel.enemy, 0.5) is IDLE
    assert duel.player.transform.x == before


@pytest.mark.parametrize("index", [WALK_BACKWARD, WALK_FORWARD, TURN_AROUND, JAB_LEFT, JAB_RIGHT])
def test_every_implemented_skill_returns_to_idle(duel, index: int) -> None:
    commands.select_skill(duel, index)

    ticks = _run_to_idle(duel, dt=0.1)

    # Progress has to pass 1.0, which takes eleven steps of 0.1.
    assert ticks == 11
    assert duel.animation is IDLE


def test_progress_exactly_one_is_still_active(duel) -> None:
    commands.select_skill(duel, JAB_LEFT)

    state = commands.tick(duel, 1.0)

    assert state == Active(JAB_LEFT, 1.0)
    assert isinstance(commands.tick(duel, 0.01), Idle)


def test_walk_forward_moves_along_facing(duel) -> None:
    commands.select_skill(duel, WALK_FORWARD)
    commands.tick(duel, 0.5)

    assert duel.player.transform.x == pytest.approx(-4.0 + 0.5 * 5.0)


def test_walk_backward_is_half_speed_reversed(duel) -> None:
    commands.select_skill(duel, WALK_BACKWARD)
    commands.tick(duel, 0.5)

    assert duel.player.transform.x == pytest.approx(-4.0 - 0.5 * 5.0 * 0.5)


def test_walk_swings_alternate_between_sides(duel) -> None:
    duel.animation = Active(WALK_FORWARD, 0.1)
    commands.tick(duel, 0.01)
    poses = duel.player.poses
    swing = math.sin(5.0 * 0.1)

    assert poses.get(Limb.leg(0)).rotation == pytest.approx(-swing)
    assert poses.get(Limb.leg(1)).rotation == pytest.approx(swing)
    assert poses.get(Limb.arm(0)).rotation == pytest.approx(swing)
    assert poses.get(Limb.arm(1)).rotation == pytest.approx(-swing)


def test_walk_eases_back_to_rest_at_the_end(duel) -> None:
    for _, pose in duel.player.poses.legs():
        pose.rotation = 0.8
    duel.animation = Active(WALK_FORWARD, 0.95)

    commands.tick(duel, 0.01)

    for _, pose in duel.player.poses.legs():
        assert pose.rotation == pytest.approx(0.4)


def test_walk_poses_are_at_rest_after_finishing(duel) -> None:
    commands.select_skill(duel, WALK_FORWARD)
    _run_to_idle(duel, dt=0.1)

    for pose in duel.player.poses.all():
        assert pose.rotation == pytest.approx(0.0, abs=1e-9)


def test_melee_swings_its_own_arm(duel) -> None:
    duel.animation = Active(JAB_RIGHT, 0.5)

    commands.tick(duel, 0.01)

    assert duel.player.poses.get(Limb.arm(1)).rotation == pytest.approx(1.0)
    assert duel.player.poses.get(Limb.arm(0)).rotation == pytest.approx(0.0)


def test_melee_does_not_move_the_actor(duel) -> None:
    commands.select_skill(duel, JAB_LEFT)
    _run_to_idle(duel)

    assert duel.player.transform.x == pytest.approx(-4.0)
    assert duel.player.transform.facing == 1.0


@pytest.mark.parametrize("dt", [0.01, 0.1, 0.25, 0.6, 2.0])
def test_turn_around_reverses_facing_exactly_once(duel, dt: float) -> None:
    commands.select_skill(duel, TURN_AROUND)
    facings = [duel.player.transform.facing]
    while isinstance(commands.tick(duel, dt), Active):
        facings.append(duel.player.transform.facing)
    facings.append(duel.player.transform.facing)

    flips = sum(1 for a, b in zip(facings, facings[1:]) if (a > 0) != (b > 0))
    assert flips == 1
    assert facings[-1] == -1.0
    assert all(abs(value) > 0.0 for value in facings)


def test_turning_twice_restores_facing(duel) -> None:
    for _ in range(2):
        commands.select_skill(duel, TURN_AROUND)
        _run_to_idle(duel, dt=0.3)

    assert duel.player.transform.facing == 1.0


def test_overlap_keeps_a_gap_on_the_left(duel) -> None:
    duel.player.transform.x = 3.0
    commands.select_skill(duel, WALK_FORWARD)

    commands.tick(duel, 0.5)

    gap = duel.enemy.transform.x - duel.player.transform.x
    assert gap == pytest.approx(0.3 + MIN_GAP)


def test_overlap_pushes_an_overlapping_actor_back(duel) -> None:
    duel.player.transform.x = 3.8
    commands.select_skill(duel, WALK_BACKWARD)

    commands.tick(duel, 0.01)

    assert duel.player.transform.x == pytest.approx(3.6)


def test_overlap_on_the_right_side(duel) -> None:
    duel.player.transform.x = 6.0
    duel.player.transform.facing = -1.0
    commands.select_skill(duel, WALK_FORWARD)

    commands.tick(duel, 0.5)

    assert duel.player.transform.x == pytest.approx(4.4)


def test_resolve_overlap_leaves_distant_positions(duel) -> None:
    assert resolve_overlap(-2.0, duel.player, duel.enemy) == -2.0


@pytest.mark.parametrize(
    "skill_factory",
    [
        lambda: Skill.basic_ranged(_ability(Limb.arm(0), "Shot")),
        lambda: Skill.scan(_ability(Limb.arm(0), "Ping")),
    ],
)
def test_unimplemented_skills_fail_fast(duel, skill_factory) -> None:
    duel.player.replace_body(_with_arm_skills(skill_factory(), Skill.basic_melee(_ability(Limb.arm(1)))))
    index = next(i for i, skill in enumerate(duel.player.stats.skills) if skill.name in ("Shot", "Ping"))

    with pytest.raises(UnimplementedSkillError):
        commands.select_skill(duel, index)
    assert duel.animation is IDLE

    with pytest.raises(UnimplementedSkillError):
        step_animation(Active(index), duel.player, duel.enemy, 0.1)


def test_stale_index_is_an_index_error(duel) -> None:
    duel.animation = Active(12)

    with pytest.raises(IndexError):
        commands.tick(duel, 0.1)


def test_melee_on_unknown_limb_raises(duel) -> None:
    duel.player.replace_body(
        _with_arm_skills(
            Skill.basic_melee(_ability(Limb.arm(5), "Phantom")),
            Skill.basic_melee(_ability(Limb.arm(1))),
        )
    )

    with pytest.raises(MissingLimbError) as excinfo:
        step_animation(Active(JAB_LEFT, 0.5), duel.player, duel.enemy, 0.1)
    assert isinstance(excinfo.value, AnimationError)
