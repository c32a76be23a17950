"""Visual placement of a body's parts relative to the actor origin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .materials import Color
from .parts import Body
from .skills import Limb
from .stats import TORSO_WIDTH_RATIO

ROOT: Tuple[float, float] = (0.0, 0.7)
LEG_SPREAD = 0.8
HEAD_SCALE = 0.5
LEG_WIDTH_RATIO = 0.2
ARM_WIDTH_RATIO = 0.15
ARM_LENGTH = 0.8


class Anchor(str, Enum):
    """Point of a part sprite that sits on its offset."""

    BOTTOM_CENTER = "bottom_center"
    TOP_CENTER = "top_center"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"


@dataclass(frozen=True)
class PartPlacement:
    """Where one part is drawn, in body-local world units (y points up)."""

    offset: Tuple[float, float]
    scale: Tuple[float, float]
    anchor: Anchor
    color: Color
    limb: Optional[Limb] = None


@dataclass(frozen=True)
class BodyLayout:
    torso: PartPlacement
    head: PartPlacement
    legs: Tuple[PartPlacement, ...]
    arms: Tuple[PartPlacement, ...]

    @property
    def width(self) -> float:
        return self.torso.scale[0]

    def limbs(self) -> Tuple[PartPlacement, ...]:
        return (*self.legs, *self.arms)


def _spread(index: int, count: int) -> float:
    if count <= 1:
        return 0.5
    return index / (count - 1)


def compute_body_layout(body: Body) -> BodyLayout:
    """Derive the placement of every part from the part sizes."""

    root_x, root_y = ROOT
    torso_size = body.torso.stats.size
    torso_w, torso_h = TORSO_WIDTH_RATIO * torso_size, torso_size

    torso = PartPlacement(
        offset=ROOT,
        scale=(torso_w, torso_h),
        anchor=Anchor.BOTTOM_CENTER,
        color=body.torso.stats.color,
    )
    head_size = body.head.stats.size * HEAD_SCALE
    head = PartPlacement(
        offset=(root_x, root_y + torso_h),
        scale=(head_size, head_size),
        anchor=Anchor.BOTTOM_CENTER,
        color=body.head.stats.color,
    )

    leg_count = len(body.legs)
    legs = tuple(
        PartPlacement(
            offset=(root_x + (_spread(index, leg_count) * torso_w - torso_w / 2.0) * LEG_SPREAD, root_y),
            scale=(leg.stats.size * LEG_WIDTH_RATIO, root_y),
            anchor=Anchor.TOP_CENTER,
            color=leg.stats.color,
            limb=Limb.leg(index),
        )
        for index, leg in enumerate(body.legs)
    )

    # Arms alternate left/right and step down the torso in pairs.
    arms = []
    for index, arm in enumerate(body.arms):
        x = ((index % 2) * 2.0 - 1.0) * torso_w / 2.0
        y = torso_h * (1.0 - _spread(index // 2, leg_count) * 2.0) if leg_count > 1 else torso_h
        arms.append(
            PartPlacement(
                offset=(root_x + x, root_y + y),
                scale=(arm.stats.size * ARM_WIDTH_RATIO, ARM_LENGTH),
                anchor=Anchor.TOP_RIGHT if index % 2 == 0 else Anchor.TOP_LEFT,
                color=arm.stats.color,
                limb=Limb.arm(index),
            )
        )

    return BodyLayout(torso=torso, head=head, legs=legs, arms=tuple(arms))


__all__ = ["Anchor", "BodyLayout", "PartPlacement", "compute_body_layout"]
