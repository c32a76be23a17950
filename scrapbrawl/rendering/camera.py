"""Camera that keeps both duelists in view."""
from __future__ import annotations

from typing import Tuple


class Camera:
    def __init__(
        self,
        width: int,
        height: int,
        base_span: float = 5.0,
        *,
        min_zoom: float = 0.01,
        max_zoom: float = 1.0,
    ) -> None:
        self.window_width = width
        self.window_height = height
        self.base_span = base_span
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.center = (0.0, 0.0)
        self.zoom = 1.0

    # ------------------------------------------------------------------
    # Movement & positioning
    # ------------------------------------------------------------------
    def center_on(self, x: float, y: float) -> None:
        self.center = (x, y)

    def follow(self, a: Tuple[float, float], b: Tuple[float, float]) -> None:
        """Centre between ``a`` and ``b`` and widen the view as they separate."""

        dx = b[0] - a[0]
        dy = b[1] - a[1]
        distance = (dx * dx + dy * dy) ** 0.5
        self.center_on(a[0] + dx / 2.0, a[1] + dy / 2.0)
        self.set_zoom(1.0 / (distance / 6.0 + 8.0))

    def set_window_size(self, width: int, height: int) -> None:
        self.window_width = max(1, width)
        self.window_height = max(1, height)

    # ------------------------------------------------------------------
    # Zoom helpers
    # ------------------------------------------------------------------
    def set_zoom(self, zoom: float) -> None:
        self.zoom = max(self.min_zoom, min(self.max_zoom, zoom))

    @property
    def visible_span(self) -> float:
        """World units visible across the window width."""

        return self.base_span / self.zoom

    @property
    def pixels_per_unit(self) -> float:
        return self.window_width / self.visible_span

    # ------------------------------------------------------------------
    # Coordinate transforms
    # ------------------------------------------------------------------
    def world_to_screen(self, position: Tuple[float, float]) -> Tuple[int, int]:
        scale = self.pixels_per_unit
        screen_x = int(round((position[0] - self.center[0]) * scale + self.window_width / 2))
        screen_y = int(round(self.window_height / 2 - (position[1] - self.center[1]) * scale))
        return screen_x, screen_y

    def screen_to_world(self, position: Tuple[float, float]) -> Tuple[float, float]:
        scale = self.pixels_per_unit
        world_x = (position[0] - self.window_width / 2) / scale + self.center[0]
        world_y = (self.window_height / 2 - position[1]) / scale + self.center[1]
        return world_x, world_y
