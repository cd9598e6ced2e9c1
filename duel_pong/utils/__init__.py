"""
Utility module of the Duel Pong game
"""

from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import KeyboardLayout
from duel_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig", "KeyboardLayout"]
