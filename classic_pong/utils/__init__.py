"""
Classic Pong utility module
"""

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import KeyBindings
from classic_pong.utils.config import game_config
from classic_pong.utils.logger import logger

__all__ = ["game_config", "GameConfig", "KeyBindings", "logger"]
