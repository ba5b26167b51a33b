"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_round_service, websocket_round_required
from .helpers import get_user_identity, loggable_word
from .game_logger import game_logger

__all__ = ['require_round_service', 'websocket_round_required', 'get_user_identity', 'loggable_word', 'game_logger']
