"""
Ping Pong utility module
"""

from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config
from ping_pong.utils.config import game_config_tmp
from ping_pong.utils.config import load_config_from_file

__all__ = ["game_config", "game_config_tmp", "load_config_from_file", "GameConfig"]
