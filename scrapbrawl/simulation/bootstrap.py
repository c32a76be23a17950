"""Helpers to set up a duel from runtime settings."""

from __future__ import annotations

import logging
import random
from typing import Optional

from ..animation.poses import ActorTransform
from ..body.generator import random_body
from ..body.parts import default_body
from ..config.settings import GameSettings
from .actor import Actor
from .state import DuelState

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int]) -> random.Random:
    """Return the random source for a duel; unseeded when ``seed`` is ``None``."""

    if seed is None:
        return random.Random()
    return random.Random(seed)


def create_duel(game_settings: GameSettings, rng: random.Random) -> DuelState:
    """Place the player and the enemy facing each other."""

    player_body = random_body(rng) if game_settings.RANDOM_PLAYER_BODY else default_body()
    player = Actor(
        name="Player",
        body=player_body,
        transform=ActorTransform(x=game_settings.PLAYER_START_X, facing=1.0),
    )
    enemy = Actor(
        name="Enemy",
        body=random_body(rng),
        transform=ActorTransform(x=game_settings.ENEMY_START_X, facing=1.0),
    )
    logger.info(
        "Duel created: player '%s' vs enemy '%s' (seed=%s)",
        player.body.torso.name,
        enemy.body.torso.name,
        game_settings.SEED,
    )
    return DuelState(player=player, enemy=enemy)
