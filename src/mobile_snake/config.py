from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .models import BOARD_SIZE, DEFAULT_TICK_MS


class ConfigError(RuntimeError):
    """Raised when runtime configuration is missing or invalid."""


@dataclass(slots=True)
class Settings:
    tick_ms: int
    seed: int | None
    screen_width: int
    screen_height: int
    fps: int
    screenshots_dir: Path
    log_level: str

    @property
    def tick_interval(self) -> float:
        return self.tick_ms / 1000


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ.setdefault(key, value)


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid integer value for {name}: {value}") from exc


def _get_optional_int(name: str) -> int | None:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid integer value for {name}: {value}") from exc


def _get_path(name: str, default: str) -> Path:
    value = os.getenv(name, default)
    return Path(value).expanduser().resolve()


def _require_at_least(name: str, value: int, minimum: int) -> int:
    if value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {value}")
    return value


def load_settings() -> Settings:
    _load_env_file(Path(".env"))

    return Settings(
        tick_ms=_require_at_least("SNAKE_TICK_MS", _get_int("SNAKE_TICK_MS", DEFAULT_TICK_MS), 1),
        seed=_get_optional_int("SNAKE_SEED"),
        screen_width=_require_at_least("SNAKE_SCREEN_WIDTH", _get_int("SNAKE_SCREEN_WIDTH", 360), BOARD_SIZE),
        screen_height=_require_at_least("SNAKE_SCREEN_HEIGHT", _get_int("SNAKE_SCREEN_HEIGHT", 640), BOARD_SIZE),
        fps=_require_at_least("SNAKE_FPS", _get_int("SNAKE_FPS", 30), 1),
        screenshots_dir=_get_path("SNAKE_SCREENSHOTS_DIR", "runs/screenshots"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
