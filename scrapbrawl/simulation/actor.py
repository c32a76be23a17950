"""Combatant wrapper tying a body to its derived stats and pose handles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..animation.poses import ActorTransform, BodyPoses
from ..body.layout import BodyLayout, compute_body_layout
from ..body.parts import Body
from ..body.stats import Stats, compute_stats

logger = logging.getLogger("scrapbrawl.simulation")


@dataclass
class Actor:
    """One side of the duel."""

    name: str
    body: Body
    transform: ActorTransform = field(default_factory=ActorTransform)
    stats: Stats = field(init=False)
    layout: BodyLayout = field(init=False)
    poses: BodyPoses = field(init=False)

    def __post_init__(self) -> None:
        self._rebuild()

    def replace_body(self, body: Body) -> None:
        """Swap in ``body`` and rebuild everything derived from it (full heal)."""

        self.body = body
        self._rebuild()
        logger.info(
            "%s now wears '%s' (hp %.1f, speed %.2f, %d skills)",
            self.name,
            body.torso.name,
            self.stats.max_health,
            self.stats.speed,
            len(self.stats.skills),
        )

    def _rebuild(self) -> None:
        self.stats = compute_stats(self.body)
        self.layout = compute_body_layout(self.body)
        self.poses = BodyPoses.from_layout(self.layout)


__all__ = ["Actor"]
