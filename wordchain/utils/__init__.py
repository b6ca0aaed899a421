"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_json_body, optional_flag
from .game_logger import game_logger

__all__ = ['get_json_body', 'optional_flag', 'game_logger']
