"""
Configuration Loader
====================

Loads and validates rollerball_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import yaml


Color = Tuple[int, int, int]


@dataclass(frozen=True)
class SurfaceConfig:
    """Default play-field size used by the tools."""
    width: int
    height: int


@dataclass(frozen=True)
class BallConfig:
    """Ball geometry and colour."""
    radius: float
    reset_offset: float  # Gap between the top edge and the ball after reset
    color: Color


@dataclass(frozen=True)
class WallConfig:
    """Moving wall parameters."""
    count: int
    speed: int
    width_divisor: int
    height_divisor: int
    color: Color


@dataclass(frozen=True)
class DisplayConfig:
    """Background and win banner styling."""
    background_color: Color
    banner_text: str
    banner_color: Color
    banner_font_size: int


@dataclass(frozen=True)
class InputConfig:
    """Tilt input and shake detection parameters."""
    shake_threshold: float
    gravity: float
    max_tilt: float


@dataclass(frozen=True)
class LoopConfig:
    """Game loop pacing and shutdown parameters."""
    refresh_rate: int
    join_timeout: float


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    surface: SurfaceConfig
    ball: BallConfig
    walls: WallConfig
    display: DisplayConfig
    input: InputConfig
    loop: LoopConfig


def _parse_color(color_data: List) -> Color:
    """Parse RGB color from YAML."""
    if len(color_data) != 3:
        raise ValueError(f"Color must have 3 values [R, G, B], got {color_data}")
    return (int(color_data[0]), int(color_data[1]), int(color_data[2]))


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.surface.width <= 0 or config.surface.height <= 0:
        raise ValueError(
            f"Surface size must be positive, got {config.surface.width}x{config.surface.height}"
        )

    if config.ball.radius <= 0:
        raise ValueError(f"Ball radius must be positive, got {config.ball.radius}")

    if config.walls.count < 1:
        raise ValueError(f"Wall count must be at least 1, got {config.walls.count}")

    if config.walls.speed <= 0:
        raise ValueError(f"Wall speed must be positive, got {config.walls.speed}")

    if config.walls.width_divisor <= 0 or config.walls.height_divisor <= 0:
        raise ValueError(
            f"Wall divisors must be positive, got "
            f"{config.walls.width_divisor}/{config.walls.height_divisor}"
        )

    if config.display.banner_font_size <= 0:
        raise ValueError(
            f"Banner font size must be positive, got {config.display.banner_font_size}"
        )

    if config.loop.refresh_rate < 0:
        raise ValueError(f"refresh_rate must be >= 0, got {config.loop.refresh_rate}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to rollerball_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(os.path.dirname(__file__), "rollerball_config.yaml")

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    surface_data = raw["surface"]
    surface = SurfaceConfig(
        width=int(surface_data["width"]),
        height=int(surface_data["height"])
    )

    ball_data = raw["ball"]
    ball = BallConfig(
        radius=float(ball_data["radius"]),
        reset_offset=float(ball_data.get("reset_offset", 10)),
        color=_parse_color(ball_data["color"])
    )

    walls_data = raw["walls"]
    walls = WallConfig(
        count=int(walls_data["count"]),
        speed=int(walls_data["speed"]),
        width_divisor=int(walls_data.get("width_divisor", 6)),
        height_divisor=int(walls_data.get("height_divisor", 20)),
        color=_parse_color(walls_data["color"])
    )

    display_data = raw["display"]
    display = DisplayConfig(
        background_color=_parse_color(display_data["background_color"]),
        banner_text=str(display_data.get("banner_text", "You won!")),
        banner_color=_parse_color(display_data["banner_color"]),
        banner_font_size=int(display_data.get("banner_font_size", 90))
    )

    # Input and loop sections are optional
    input_data = raw.get("input", {})
    input_config = InputConfig(
        shake_threshold=float(input_data.get("shake_threshold", 100)),
        gravity=float(input_data.get("gravity", 9.80665)),
        max_tilt=float(input_data.get("max_tilt", 9.0))
    )

    loop_data = raw.get("loop", {})
    loop = LoopConfig(
        refresh_rate=int(loop_data.get("refresh_rate", 60)),
        join_timeout=float(loop_data.get("join_timeout", 2.0))
    )

    config = GameConfig(
        surface=surface,
        ball=ball,
        walls=walls,
        display=display,
        input=input_config,
        loop=loop
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
