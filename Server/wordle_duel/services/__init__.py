"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService
from .multiplayer_service import GuessOutcome, MultiplayerService
from .room_store import RoomStore
from .registry import (
    Services, initialize_services, get_services,
    get_game_service, get_multiplayer_service, get_game_settings, report_word_list
)

__all__ = [
    'GameService', 'GuessOutcome', 'MultiplayerService', 'RoomStore',
    'Services', 'initialize_services', 'get_services',
    'get_game_service', 'get_multiplayer_service', 'get_game_settings', 'report_word_list'
]
