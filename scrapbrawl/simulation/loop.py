"""Main pygame loop for the duel."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pygame

from ..animation.errors import UnimplementedSkillError
from ..animation.state import Active
from ..config import settings
from ..config.settings import GameSettings
from ..rendering.camera import Camera
from ..rendering.draw_body import draw_actor, draw_ground
from ..rendering.skill_bar import SkillBar
from . import bootstrap, commands
from .state import DuelState

_DIGIT_KEYS = {getattr(pygame, f"K_{digit}"): digit - 1 for digit in range(1, 10)}


def _initialise_logger() -> logging.Logger:
    log_dir = settings.LOG_DIRECTORY
    if not isinstance(log_dir, Path):
        log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / settings.DEBUG_LOG_FILE

    logger = logging.getLogger("scrapbrawl")
    if logger.handlers:
        return logger

    level_name = str(settings.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info("Debug logging initialised at %s", log_path)
    return logger


def _running_index(duel: DuelState) -> Optional[int]:
    if isinstance(duel.animation, Active):
        return duel.animation.skill_index
    return None


def _try_select(duel: DuelState, index: int, logger: logging.Logger) -> None:
    if index >= len(duel.player.stats.skills):
        return
    try:
        commands.select_skill(duel, index)
    except UnimplementedSkillError:
        logger.warning("Skill %d has no animation yet", index)


def run(runtime_settings: Optional[GameSettings] = None) -> None:
    """Open the window and play until it is closed or Escape is pressed."""

    game_settings = runtime_settings or settings.current_settings()
    logger = _initialise_logger()
    rng = bootstrap.make_rng(game_settings.SEED)
    duel = bootstrap.create_duel(game_settings, rng)

    pygame.init()
    pygame.display.set_caption("Scrapbrawl")
    window = pygame.display.set_mode(
        (game_settings.WINDOW_WIDTH, game_settings.WINDOW_HEIGHT), pygame.RESIZABLE
    )
    clock = pygame.time.Clock()
    body_font = pygame.font.Font(None, 18)
    heading_font = pygame.font.Font(None, 32)

    camera = Camera(window.get_width(), window.get_height(), game_settings.CAMERA_BASE_SPAN)
    skill_bar = SkillBar(body_font, heading_font)
    skill_bar.update_skills(duel.player.stats.skills, window.get_size())

    running = True
    try:
        while running:
            dt = clock.tick(game_settings.FPS) / 1000.0
            busy = isinstance(duel.animation, Active)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    camera.set_window_size(event.w, event.h)
                    skill_bar.update_skills(duel.player.stats.skills, (event.w, event.h))
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and not busy:
                    commands.regenerate_body(duel.enemy, rng)
                elif event.type == pygame.KEYDOWN and event.key in _DIGIT_KEYS and not busy:
                    _try_select(duel, _DIGIT_KEYS[event.key], logger)
                else:
                    clicked = skill_bar.handle_event(event, busy)
                    if clicked is not None:
                        _try_select(duel, clicked, logger)

            commands.tick(duel, dt)

            camera.follow(
                (duel.player.transform.x, duel.player.transform.y),
                (duel.enemy.transform.x, duel.enemy.transform.y),
            )
            window.fill(settings.BACKGROUND)
            draw_ground(window, camera, settings.GROUND)
            draw_actor(window, duel.enemy, camera)
            draw_actor(window, duel.player, camera)
            skill_bar.draw(window, _running_index(duel))
            pygame.display.flip()
    finally:
        logger.info("Shutting down after %d ticks (%.1fs)", duel.ticks, duel.elapsed)
        pygame.quit()
