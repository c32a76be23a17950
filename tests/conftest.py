from __future__ import annotations

import random

import pytest

from body_helpers import turning_body
from scrapbrawl.animation.poses import ActorTransform
from scrapbrawl.body.parts import default_body
from scrapbrawl.simulation.actor import Actor
from scrapbrawl.simulation.state import DuelState


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def duel() -> DuelState:
    player = Actor(name="Player", body=turning_body(), transform=ActorTransform(x=-4.0))
    enemy = Actor(name="Enemy", body=default_body(), transform=ActorTransform(x=4.0))
    return DuelState(player=player, enemy=enemy)
