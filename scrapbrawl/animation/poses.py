"""Mutable pose handles the animation step writes into every tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from ..body.layout import BodyLayout
from ..body.skills import Limb, LimbKind
from .errors import MissingLimbError


@dataclass
class Pose:
    """Placement of one limb relative to its actor; rotation in radians."""

    offset: Tuple[float, float]
    scale: Tuple[float, float]
    rotation: float = 0.0


@dataclass
class ActorTransform:
    """Horizontal position and facing of an actor.

    ``facing`` is a signed horizontal scale: +1 faces right, -1 faces left.
    Intermediate magnitudes appear while turning around.
    """

    x: float = 0.0
    y: float = 0.0
    facing: float = 1.0


@dataclass
class BodyPoses:
    """Pose handles addressable by :class:`Limb`."""

    handles: Dict[Limb, Pose] = field(default_factory=dict)

    @classmethod
    def from_layout(cls, layout: BodyLayout) -> "BodyPoses":
        handles: Dict[Limb, Pose] = {}
        for placement in layout.limbs():
            if placement.limb is None:
                continue
            handles[placement.limb] = Pose(offset=placement.offset, scale=placement.scale)
        return cls(handles)

    def get(self, limb: Limb) -> Pose:
        try:
            return self.handles[limb]
        except KeyError as exc:
            raise MissingLimbError(f"No pose handle registered for limb {limb}") from exc

    def _of_kind(self, kind: LimbKind) -> Iterator[Tuple[int, Pose]]:
        for limb in sorted((limb for limb in self.handles if limb.kind is kind), key=lambda l: l.index):
            yield limb.index, self.handles[limb]

    def legs(self) -> Iterator[Tuple[int, Pose]]:
        return self._of_kind(LimbKind.LEG)

    def arms(self) -> Iterator[Tuple[int, Pose]]:
        return self._of_kind(LimbKind.ARM)

    def all(self) -> Iterator[Pose]:
        return iter(self.handles.values())


__all__ = ["ActorTransform", "BodyPoses", "Pose"]
