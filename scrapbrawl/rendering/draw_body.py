"""Actor rendering helpers."""

from __future__ import annotations

import math
from typing import List, Tuple

import pygame

from ..body.layout import Anchor, PartPlacement
from ..simulation.actor import Actor
from .camera import Camera
from .palette import tint_color, to_rgb

_BACK_ARM_TINT = (0.8, 0.8, 0.8)
_OUTLINE = (30, 30, 30)


def _local_corners(anchor: Anchor, width: float, height: float) -> List[Tuple[float, float]]:
    if anchor is Anchor.BOTTOM_CENTER:
        left, right, bottom, top = -width / 2.0, width / 2.0, 0.0, height
    elif anchor is Anchor.TOP_CENTER:
        left, right, bottom, top = -width / 2.0, width / 2.0, -height, 0.0
    elif anchor is Anchor.TOP_RIGHT:
        left, right, bottom, top = -width, 0.0, -height, 0.0
    else:
        left, right, bottom, top = 0.0, width, -height, 0.0
    return [(left, bottom), (right, bottom), (right, top), (left, top)]


def part_polygon(
    placement: PartPlacement,
    actor: Actor,
    rotation: float = 0.0,
    offset: Tuple[float, float] | None = None,
    scale: Tuple[float, float] | None = None,
) -> List[Tuple[float, float]]:
    """Return the world-space corners of one part."""

    ox, oy = offset if offset is not None else placement.offset
    width, height = scale if scale is not None else placement.scale
    cos_a = math.cos(rotation)
    sin_a = math.sin(rotation)
    transform = actor.transform
    points = []
    for x, y in _local_corners(placement.anchor, width, height):
        rx = x * cos_a - y * sin_a + ox
        ry = x * sin_a + y * cos_a + oy
        points.append((transform.x + rx * transform.facing, transform.y + ry))
    return points


def draw_actor(surface: pygame.Surface, actor: Actor, camera: Camera) -> None:
    """Draw legs, torso, head and arms of ``actor``."""

    layout = actor.layout

    def _draw(points: List[Tuple[float, float]], color) -> None:
        screen_points = [camera.world_to_screen(point) for point in points]
        pygame.draw.polygon(surface, color, screen_points)
        pygame.draw.polygon(surface, _OUTLINE, screen_points, 1)

    back_arms = [placement for placement in layout.arms if placement.limb.index % 2 == 0]
    front_arms = [placement for placement in layout.arms if placement.limb.index % 2 == 1]

    for placement in back_arms:
        pose = actor.poses.get(placement.limb)
        _draw(
            part_polygon(placement, actor, pose.rotation, pose.offset, pose.scale),
            tint_color(to_rgb(placement.color), _BACK_ARM_TINT),
        )
    for placement in layout.legs:
        pose = actor.poses.get(placement.limb)
        _draw(part_polygon(placement, actor, pose.rotation, pose.offset, pose.scale), to_rgb(placement.color))
    _draw(part_polygon(layout.torso, actor), to_rgb(layout.torso.color))
    _draw(part_polygon(layout.head, actor), to_rgb(layout.head.color))
    for placement in front_arms:
        pose = actor.poses.get(placement.limb)
        _draw(part_polygon(placement, actor, pose.rotation, pose.offset, pose.scale), to_rgb(placement.color))


def draw_ground(surface: pygame.Surface, camera: Camera, color=(0, 0, 0)) -> None:
    _, ground_y = camera.world_to_screen((0.0, 0.0))
    ground_y = max(0, ground_y)
    height = surface.get_height() - ground_y
    if height > 0:
        pygame.draw.rect(surface, color, pygame.Rect(0, ground_y, surface.get_width(), height))


__all__ = ["draw_actor", "draw_ground", "part_polygon"]
