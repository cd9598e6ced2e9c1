"""
Duel Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Key bindings for both paddles"""

    name: str
    left_keys: dict[str, int]
    right_keys: dict[str, int]
    display_names: dict[str, str]


ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        right_keys=ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Viewport
    VIEWPORT_WIDTH: int = Field(default=600, gt=0, description="Viewport width in pixels")
    VIEWPORT_HEIGHT: int = Field(default=400, gt=0, description="Viewport height in pixels")
    WINDOW_TITLE: str = Field(default="Pong demo", description="Window caption")

    # Ball
    BALL_RADIUS: float = Field(default=12.5, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=300.0, gt=0, description="Ball speed on each axis")

    # Paddles
    PADDLE_SPEED: float = Field(default=500.0, gt=0, description="Paddle speed")
    PADDLE_SPRITE_WIDTH: float = Field(default=3.0, gt=0, description="Paddle sprite width")
    PADDLE_SPRITE_HEIGHT: float = Field(default=10.0, gt=0, description="Paddle sprite height")
    PADDLE_SCALE: float = Field(default=7.0, gt=0, description="Paddle sprite scale")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate the viewport is large enough for the ball and paddles"""
        if self.VIEWPORT_WIDTH <= 2 * self.BALL_RADIUS:
            raise ValueError(
                f"VIEWPORT_WIDTH ({self.VIEWPORT_WIDTH}) must exceed twice BALL_RADIUS"
            )
        if self.VIEWPORT_HEIGHT <= 2 * self.BALL_RADIUS:
            raise ValueError(
                f"VIEWPORT_HEIGHT ({self.VIEWPORT_HEIGHT}) must exceed twice BALL_RADIUS"
            )

        paddle_width, paddle_height = self.paddle_size
        if paddle_height > self.VIEWPORT_HEIGHT:
            raise ValueError(
                f"Scaled paddle height ({paddle_height}) exceeds VIEWPORT_HEIGHT"
            )
        if 2 * paddle_width >= self.VIEWPORT_WIDTH:
            raise ValueError(f"Scaled paddle width ({paddle_width}) leaves no room between paddles")

        return self

    @property
    def paddle_size(self) -> tuple[float, float]:
        """Paddle extents derived from the sprite dimensions and scale"""
        return (
            self.PADDLE_SPRITE_WIDTH * self.PADDLE_SCALE,
            self.PADDLE_SPRITE_HEIGHT * self.PADDLE_SCALE,
        )

    @property
    def center(self) -> tuple[float, float]:
        """Center of the playfield, where every serve starts"""
        return (self.VIEWPORT_WIDTH / 2, self.VIEWPORT_HEIGHT / 2)

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str | Path = "duel_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str | Path = "duel_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str | Path = "duel_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (ValidationError, json.JSONDecodeError) as e:
        logger.warning("Error loading config from %s: %s", filepath, e)
        return False

    # Copy field by field; the loaded config is already consistent as a whole
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the previous ones"""
    for name, new_value in kwargs.items():
        old_values.setdefault(name, getattr(obj, name))
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Restored values were valid together, skip per-field validation
        for name, old_value in old_values.items():
            object.__setattr__(game_config, name, old_value)
