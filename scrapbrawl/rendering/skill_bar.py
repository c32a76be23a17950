"""Row of skill buttons along the bottom of the window, with a hover tooltip."""
from __future__ import annotations

from typing import List, Optional, Sequence

import pygame

from ..body.skills import Skill, SkillKind
from .palette import (
    DISABLED_BUTTON,
    HOVERED_BUTTON,
    NORMAL_BUTTON,
    PRESSED_BUTTON,
    TEXT_COLOR,
    TOOLTIP_BACKGROUND,
    TOOLTIP_TEXT,
)

BUTTON_SIZE = 100
BAR_HEIGHT_RATIO = 0.2

_GLYPHS = {
    SkillKind.WALK_BACKWARD: "<-",
    SkillKind.WALK_FORWARD: "->",
    SkillKind.TURN_AROUND: "<>",
    SkillKind.BASIC_MELEE: "*",
    SkillKind.BASIC_RANGED: "~",
    SkillKind.SCAN: "?",
}


class SkillBar:
    """Buttons for the player's current skill list."""

    def __init__(self, body_font: pygame.font.Font, heading_font: pygame.font.Font) -> None:
        self.font = body_font
        self.heading_font = heading_font
        self._skills: List[Skill] = []
        self._rects: List[pygame.Rect] = []
        self._hovered: Optional[int] = None

    def update_skills(self, skills: Sequence[Skill], surface_size: tuple[int, int]) -> None:
        """Lay out one button per skill, spaced evenly along the bottom edge."""

        self._skills = list(skills)
        width, height = surface_size
        count = len(self._skills)
        bar_top = int(height * (1.0 - BAR_HEIGHT_RATIO))
        y = max(bar_top, height - BUTTON_SIZE - 10)
        self._rects = []
        for index in range(count):
            center_x = int(width * (index + 0.5) / max(1, count))
            self._rects.append(pygame.Rect(center_x - BUTTON_SIZE // 2, y, BUTTON_SIZE, BUTTON_SIZE))
        self._hovered = None

    def button_at(self, position: tuple[int, int]) -> Optional[int]:
        for index, rect in enumerate(self._rects):
            if rect.collidepoint(position):
                return index
        return None

    def handle_event(self, event: pygame.event.Event, busy: bool) -> Optional[int]:
        """Return the clicked skill index, if any. Input is ignored while ``busy``."""

        if busy:
            self._hovered = None
            return None
        if event.type == pygame.MOUSEMOTION:
            self._hovered = self.button_at(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.button_at(event.pos)
        return None

    def draw(self, surface: pygame.Surface, running_index: Optional[int]) -> None:
        for index, (skill, rect) in enumerate(zip(self._skills, self._rects)):
            if running_index is not None:
                color = PRESSED_BUTTON if index == running_index else DISABLED_BUTTON
            elif index == self._hovered:
                color = HOVERED_BUTTON
            else:
                color = NORMAL_BUTTON
            pygame.draw.rect(surface, color, rect, border_radius=8)
            glyph = self.heading_font.render(_GLYPHS[skill.kind], True, TEXT_COLOR)
            surface.blit(glyph, glyph.get_rect(center=rect.center))
            hotkey = self.font.render(str(index + 1), True, TEXT_COLOR)
            surface.blit(hotkey, (rect.left + 6, rect.top + 4))

        if self._hovered is not None and running_index is None and self._hovered < len(self._skills):
            self._draw_tooltip(surface, self._skills[self._hovered], self._rects[self._hovered])

    def _draw_tooltip(self, surface: pygame.Surface, skill: Skill, anchor: pygame.Rect) -> None:
        header = self.heading_font.render(skill.name, True, TOOLTIP_TEXT)
        lines = [header]
        if skill.ability is not None:
            ability = skill.ability
            lines.append(
                self.font.render(
                    f"power {ability.meta:.1f}  cost {ability.energy_cost:.1f}  cooldown {ability.cooldown:.2f}",
                    True,
                    TOOLTIP_TEXT,
                )
            )
        width = max(line.get_width() for line in lines) + 16
        height = sum(line.get_height() for line in lines) + 12
        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill(TOOLTIP_BACKGROUND)
        y = 6
        for line in lines:
            panel.blit(line, (8, y))
            y += line.get_height()
        surface.blit(panel, (anchor.centerx - width // 2, anchor.top - height - 6))


__all__ = ["SkillBar"]
