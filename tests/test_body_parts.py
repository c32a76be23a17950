"""Construction rules for bodies and the starter body."""

from __future__ import annotations

import pytest

from body_helpers import make_arm, make_leg
from scrapbrawl.body.materials import DEFAULT_MATERIAL
from scrapbrawl.body.parts import Body, Part, TorsoMeta, default_body, min_arm_count
from scrapbrawl.body.skills import Skill


def _torso(arm_slots: int, leg_slots: int) -> Part[TorsoMeta]:
    base = default_body().torso
    return Part(name=base.name, stats=base.stats, meta=TorsoMeta(arm_slots=arm_slots, leg_slots=leg_slots))


def _legs(count: int):
    return tuple(make_leg((Skill.walk_forward(),)) for _ in range(count))


def test_default_body_is_all_rust() -> None:
    body = default_body()

    assert {part.stats.material for part in body.parts()} == {DEFAULT_MATERIAL}
    assert len(body.arms) == 2
    assert len(body.legs) == 2
    assert body.total_weight == pytest.approx(146.0)


def test_parts_are_visited_torso_head_legs_arms() -> None:
    body = default_body()
    parts = body.parts()

    assert parts[0] is body.torso
    assert parts[1] is body.head
    assert parts[2:4] == body.legs
    assert parts[4:] == body.arms


@pytest.mark.parametrize("arm_slots, expected", [(0, 0), (1, 1), (2, 1), (4, 1), (6, 2)])
def test_min_arm_count(arm_slots: int, expected: int) -> None:
    assert min_arm_count(arm_slots) == expected


def test_leg_count_must_match_slots() -> None:
    with pytest.raises(ValueError, match="leg slots"):
        Body(torso=_torso(2, 2), head=default_body().head, arms=(make_arm(0),), legs=_legs(1))


def test_arm_count_must_fit_slots() -> None:
    head = default_body().head
    with pytest.raises(ValueError, match="arms"):
        Body(torso=_torso(2, 2), head=head, arms=(), legs=_legs(2))
    with pytest.raises(ValueError, match="arms"):
        Body(torso=_torso(2, 2), head=head, arms=tuple(make_arm(i) for i in range(3)), legs=_legs(2))


def test_single_arm_is_allowed() -> None:
    body = Body(torso=_torso(2, 2), head=default_body().head, arms=[make_arm(0)], legs=list(_legs(2)))

    assert isinstance(body.arms, tuple)
    assert isinstance(body.legs, tuple)
