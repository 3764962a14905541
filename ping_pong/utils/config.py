"""
Ping Pong game configuration with Pydantic validation
"""

import json
import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Surface dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Surface width in pixels")
    FIELD_HEIGHT: int = Field(default=500, gt=0, description="Surface height in pixels")

    # Paddles
    PADDLE_WIDTH: float = Field(default=12.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_MARGIN: float = Field(default=20.0, ge=0, description="Paddle inset from the edge")
    PADDLE_SPEED: float = Field(default=420.0, gt=0, description="Keyboard paddle speed (px/s)")
    AI_SPEED: float = Field(default=320.0, gt=0, description="Computer paddle max speed (px/s)")

    # Ball physics
    BALL_RADIUS: float = Field(default=8.0, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=300.0, gt=0, description="Initial ball speed (px/s)")
    BALL_SPEED_INCREASE: float = Field(
        default=1.05, gt=1.0, description="Speed multiplier on paddle hit"
    )
    MAX_DEFLECTION_ANGLE: float = Field(
        default=math.pi / 3, gt=0, lt=math.pi / 2, description="Max bounce angle (radians)"
    )
    SERVE_ANGLE_LIMIT: float = Field(
        default=0.3 * math.pi, gt=0, lt=math.pi / 2, description="Serve angle band (radians)"
    )

    # Round lifecycle
    WINNING_SCORE: int = Field(default=10, gt=0, description="Winning score")
    SERVE_DELAY: float = Field(default=0.6, ge=0, description="Pause before a serve (seconds)")
    MAX_FRAME_DT: float = Field(default=0.033, gt=0, description="Largest frame step (seconds)")

    # Controls (pygame key codes)
    UP_KEYS: list[int] = Field(default_factory=lambda: [pygame.K_UP], description="Move up")
    DOWN_KEYS: list[int] = Field(default_factory=lambda: [pygame.K_DOWN], description="Move down")
    PAUSE_KEYS: list[int] = Field(default_factory=lambda: [pygame.K_SPACE], description="Pause")
    RESET_KEYS: list[int] = Field(default_factory=lambda: [pygame.K_r], description="Reset")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    SHOW_CENTER_LINE: bool = Field(default=True, description="Draw the dashed center divider")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(11, 16, 32), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 209, 102), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(50, 54, 70), description="RGB color")

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate the surface is large enough for both paddles and the ball"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH + 2 * self.BALL_RADIUS) + 100
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = self.PADDLE_HEIGHT + 2 * self.BALL_RADIUS
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    @model_validator(mode="after")
    def validate_key_bindings(self) -> "GameConfig":
        """A key may only be bound to one control"""
        seen: dict[int, str] = {}
        for name in ("UP_KEYS", "DOWN_KEYS", "PAUSE_KEYS", "RESET_KEYS"):
            for key in getattr(self, name):
                if key in seen:
                    raise ValueError(f"Key {key} is bound to both {seen[key]} and {name}")
                seen[key] = name
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "ping_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "ping_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        # Applied in one go, see load_config_from_file
        self.__dict__.update(GameConfig().__dict__)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "ping_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (ValueError, json.JSONDecodeError) as e:
        logger.error("Error loading config %s: %s", filepath, e)
        return False

    # Field by field assignment would run the cross-field validators on half-applied values,
    # e.g. a larger PADDLE_HEIGHT checked against the old FIELD_HEIGHT
    game_config.__dict__.update(loaded_config.__dict__)
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values, recording the previous ones in old_values"""
    for name, new_value in kwargs.items():
        previous = getattr(obj, name)
        setattr(obj, name, new_value)
        old_values.setdefault(name, previous)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Restore in reverse order so cross-field checks see consistent values
        _change_values(game_config, {}, **dict(reversed(list(old_values.items()))))
