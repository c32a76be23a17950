"""Configuration constants for the duel game."""

from __future__ import annotations

import argparse
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

from .constants import DEFAULTS

_PATH_FIELDS = {"LOG_DIRECTORY"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL"}
_BOOL_FIELDS = {"RANDOM_PLAYER_BODY"}
_OPTIONAL_INT_FIELDS = {"SEED"}
_FLOAT_FIELDS = {
    "PLAYER_START_X",
    "ENEMY_START_X",
    "CAMERA_BASE_SPAN",
}

WINDOW_WIDTH = DEFAULTS["WINDOW_WIDTH"]
WINDOW_HEIGHT = DEFAULTS["WINDOW_HEIGHT"]
FPS = DEFAULTS["FPS"]
PLAYER_START_X = DEFAULTS["PLAYER_START_X"]
ENEMY_START_X = DEFAULTS["ENEMY_START_X"]
CAMERA_BASE_SPAN = DEFAULTS["CAMERA_BASE_SPAN"]

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BACKGROUND = (235, 235, 240)
GROUND = BLACK

SEED: Optional[int] = None
RANDOM_PLAYER_BODY = os.getenv("SCRAPBRAWL_RANDOM_PLAYER_BODY", "0") in {"1", "true", "True"}

CONFIG_ENV_VAR = "SCRAPBRAWL_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/default.yaml")
LOG_DIRECTORY = Path(os.getenv("SCRAPBRAWL_LOG_DIR", "logs"))
DEBUG_LOG_FILE = os.getenv("SCRAPBRAWL_DEBUG_LOG", "scrapbrawl_debug.log")
DEBUG_LOG_LEVEL = os.getenv("SCRAPBRAWL_DEBUG_LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class GameSettings:
    WINDOW_WIDTH: int = WINDOW_WIDTH
    WINDOW_HEIGHT: int = WINDOW_HEIGHT
    FPS: int = FPS
    SEED: Optional[int] = SEED
    PLAYER_START_X: float = PLAYER_START_X
    ENEMY_START_X: float = ENEMY_START_X
    RANDOM_PLAYER_BODY: bool = RANDOM_PLAYER_BODY
    CAMERA_BASE_SPAN: float = CAMERA_BASE_SPAN
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL

    def with_updates(self, overrides: Dict[str, Any]) -> "GameSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return GameSettings(**merged)


_ACTIVE_SETTINGS = GameSettings()
_ENV_VARS: Dict[str, str] = {
    "WINDOW_WIDTH": "SCRAPBRAWL_WINDOW_WIDTH",
    "WINDOW_HEIGHT": "SCRAPBRAWL_WINDOW_HEIGHT",
    "FPS": "SCRAPBRAWL_FPS",
    "SEED": "SCRAPBRAWL_SEED",
    "PLAYER_START_X": "SCRAPBRAWL_PLAYER_START_X",
    "ENEMY_START_X": "SCRAPBRAWL_ENEMY_START_X",
    "RANDOM_PLAYER_BODY": "SCRAPBRAWL_RANDOM_PLAYER_BODY",
    "CAMERA_BASE_SPAN": "SCRAPBRAWL_CAMERA_BASE_SPAN",
}


def _coerce(value: str, field: str) -> Any:
    if field in _BOOL_FIELDS:
        return value in {"1", "true", "True"}
    if field in _OPTIONAL_INT_FIELDS:
        return _normalize_optional_int(value)
    if field in _FLOAT_FIELDS:
        return float(value)
    return int(value)


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value in {"1", "true", "True", "TRUE"}
    if isinstance(value, (int, float)):
        return bool(value)
    raise ValueError("Invalid boolean value in config")


def _normalize_numeric(value: Any, caster: type[float | int]) -> float | int:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return caster(value)
    if isinstance(value, str):
        return caster(float(value) if caster is float else int(float(value)))
    raise ValueError("Invalid numeric value in config")


def _normalize_optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in {"", "none", "random"}:
        return None
    return int(_normalize_numeric(value, int))


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _BOOL_FIELDS:
        return _normalize_bool(value)
    if field in _OPTIONAL_INT_FIELDS:
        return _normalize_optional_int(value)
    if field in _FLOAT_FIELDS:
        return float(_normalize_numeric(value, float))
    return int(_normalize_numeric(value, int))


_NUMERIC_BOUNDS: Dict[str, tuple[float, float]] = {
    "WINDOW_WIDTH": (200, 7680),
    "WINDOW_HEIGHT": (200, 4320),
    "FPS": (1, 360),
    "SEED": (0, 2**63 - 1),
    "PLAYER_START_X": (-100.0, 100.0),
    "ENEMY_START_X": (-100.0, 100.0),
    "CAMERA_BASE_SPAN": (1.0, 50.0),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str) and current.upper() in choices:
            values[field] = current.upper()
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")
    _validate_relationships(values)


def _validate_relationships(values: Mapping[str, Any]) -> None:
    player_x = values.get("PLAYER_START_X")
    enemy_x = values.get("ENEMY_START_X")
    if player_x is not None and enemy_x is not None and player_x >= enemy_x:
        raise ValueError("PLAYER_START_X must be left of ENEMY_START_X")


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(GameSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the scrapbrawl duel with runtime overrides")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--window-width", type=int, help="Viewport width")
    parser.add_argument("--window-height", type=int, help="Viewport height")
    parser.add_argument("--fps", type=int, help="Target frames per second")
    parser.add_argument("--seed", type=int, help="Seed for body generation (random when omitted)")
    parser.add_argument("--player-start-x", type=float, help="Initial horizontal position of the player")
    parser.add_argument("--enemy-start-x", type=float, help="Initial horizontal position of the enemy")
    parser.add_argument("--camera-base-span", type=float, help="World units visible at the closest zoom")
    parser.add_argument(
        "--random-player-body",
        dest="random_player_body",
        action="store_true",
        help="Generate a random body for the player as well",
    )
    parser.add_argument(
        "--default-player-body",
        dest="random_player_body",
        action="store_false",
        help="Give the player the fixed default body",
    )
    parser.set_defaults(random_player_body=None)
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> GameSettings:
    env_mapping = env or os.environ
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=args)
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "WINDOW_WIDTH": parsed.window_width,
        "WINDOW_HEIGHT": parsed.window_height,
        "FPS": parsed.fps,
        "SEED": parsed.seed,
        "PLAYER_START_X": parsed.player_start_x,
        "ENEMY_START_X": parsed.enemy_start_x,
        "CAMERA_BASE_SPAN": parsed.camera_base_span,
        "RANDOM_PLAYER_BODY": parsed.random_player_body,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: GameSettings) -> GameSettings:
    global _ACTIVE_SETTINGS
    global WINDOW_WIDTH, WINDOW_HEIGHT, FPS, SEED
    global PLAYER_START_X, ENEMY_START_X, RANDOM_PLAYER_BODY, CAMERA_BASE_SPAN
    global LOG_DIRECTORY, DEBUG_LOG_FILE, DEBUG_LOG_LEVEL

    _ACTIVE_SETTINGS = new_settings
    WINDOW_WIDTH = new_settings.WINDOW_WIDTH
    WINDOW_HEIGHT = new_settings.WINDOW_HEIGHT
    FPS = new_settings.FPS
    SEED = new_settings.SEED
    PLAYER_START_X = new_settings.PLAYER_START_X
    ENEMY_START_X = new_settings.ENEMY_START_X
    RANDOM_PLAYER_BODY = new_settings.RANDOM_PLAYER_BODY
    CAMERA_BASE_SPAN = new_settings.CAMERA_BASE_SPAN
    LOG_DIRECTORY = new_settings.LOG_DIRECTORY
    DEBUG_LOG_FILE = new_settings.DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL = new_settings.DEBUG_LOG_LEVEL
    return _ACTIVE_SETTINGS


def current_settings() -> GameSettings:
    return _ACTIVE_SETTINGS
