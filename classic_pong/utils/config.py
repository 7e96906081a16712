"""
Classic Pong game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyBindings:
    """Key codes driving both paddles"""

    name: str
    left_up: int
    left_down: int
    right_up: int
    right_down: int
    display_names: dict[str, str]


# Key layouts definition
KEY_LAYOUTS = {
    "classic": KeyBindings(
        name="Classic",
        left_up=pygame.K_a,
        left_down=pygame.K_z,
        right_up=pygame.K_k,
        right_down=pygame.K_m,
        display_names={"left_up": "A", "left_down": "Z", "right_up": "K", "right_down": "M"},
    ),
    "arrows": KeyBindings(
        name="WS / Arrows",
        left_up=pygame.K_w,
        left_down=pygame.K_s,
        right_up=pygame.K_UP,
        right_down=pygame.K_DOWN,
        display_names={"left_up": "W", "left_down": "S", "right_up": "↑", "right_down": "↓"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation so temporary overrides go through validation
    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=400, gt=0, description="Field width in logical units")
    FIELD_HEIGHT: int = Field(default=300, gt=0, description="Field height in logical units")

    # Ball physics
    BALL_RADIUS: float = Field(default=6.0, gt=0, description="Ball radius")
    BALL_SPEED: float = Field(default=150.0, gt=0, description="Initial ball speed (units/s)")
    BALL_SPEED_INCREASE: float = Field(
        default=1.0, ge=0, description="Speed added on every border contact"
    )
    DIRECTION_SPREAD: int = Field(
        default=5, ge=1, description="Launch direction components are drawn from [-n, n)"
    )

    # Player paddles
    PADDLE_WIDTH: float = Field(default=5.0, gt=0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=50.0, gt=0, description="Paddle height")
    PADDLE_SPEED: float = Field(default=100.0, gt=0, description="Paddle speed (units/s)")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="classic", description="Key layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    WINDOW_SCALE: int = Field(default=2, ge=1, le=8, description="Window pixels per unit")
    FONT_PATH: str | None = Field(default=None, description="TTF font used for the score")
    SCORE_FONT_SIZE: int = Field(default=10, gt=0, description="Score font size in units")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(80, 80, 80), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(130, 130, 130), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(200, 200, 200), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEY_LAYOUTS:
            raise ValueError(f"Unknown keyboard layout '{v}'. Available: {list(KEY_LAYOUTS)}")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 4 * self.PADDLE_WIDTH + 2 * self.BALL_RADIUS
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be greater than {min_width}")

        if self.FIELD_HEIGHT <= self.PADDLE_HEIGHT:
            raise ValueError(f"FIELD_HEIGHT must be greater than {self.PADDLE_HEIGHT}")

        return self

    def get_key_bindings(self) -> KeyBindings:
        """Get the current key bindings"""
        return KEY_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "classic_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "classic_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "classic_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False

    # Bypass per-field validation so intermediate states cannot trip the model validator
    for field_name in GameConfig.model_fields:
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = _change_values(game_config, **kwargs)
    try:
        yield
    finally:
        _change_values(game_config, **old_values)
