"""Regression tests for body part placement."""

from __future__ import annotations

import random

import pytest

from scrapbrawl.animation.poses import BodyPoses
from scrapbrawl.body.generator import random_body
from scrapbrawl.body.layout import ROOT, Anchor, compute_body_layout
from scrapbrawl.body.parts import default_body
from scrapbrawl.body.skills import Limb


@pytest.fixture()
def layout():
    return compute_body_layout(default_body())


def test_torso_and_head_are_stacked(layout) -> None:
    assert layout.torso.offset == ROOT
    assert layout.torso.anchor is Anchor.BOTTOM_CENTER
    assert layout.head.offset == pytest.approx((0.0, ROOT[1] + layout.torso.scale[1]))
    assert layout.width == pytest.approx(0.3)


def test_legs_hang_from_root_spread_across_torso(layout) -> None:
    left, right = layout.legs
    assert left.offset[0] < 0.0 < right.offset[0]
    assert left.offset[0] == pytest.approx(-right.offset[0])
    assert all(leg.anchor is Anchor.TOP_CENTER for leg in layout.legs)
    assert [leg.limb for leg in layout.legs] == [Limb.leg(0), Limb.leg(1)]


def test_arms_alternate_sides(layout) -> None:
    first, second = layout.arms
    assert first.offset[0] < 0.0 < second.offset[0]
    assert first.anchor is Anchor.TOP_RIGHT
    assert second.anchor is Anchor.TOP_LEFT


@pytest.mark.parametrize("seed", range(10))
def test_every_limb_gets_a_pose_handle(seed: int) -> None:
    body = random_body(random.Random(seed))
    poses = BodyPoses.from_layout(compute_body_layout(body))

    assert [index for index, _ in poses.legs()] == list(range(len(body.legs)))
    assert [index for index, _ in poses.arms()] == list(range(len(body.arms)))
    for index in range(len(body.arms)):
        assert poses.get(Limb.arm(index)).rotation == 0.0
