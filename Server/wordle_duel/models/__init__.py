"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GuessResult, LetterResult, LetterStatus, SinglePlayerGame
from .room import FinalResults, Player, PlayerStatus, PlayerSummary, Room, RoomStatus

__all__ = [
    'GameState', 'GuessResult', 'LetterResult', 'LetterStatus', 'SinglePlayerGame',
    'FinalResults', 'Player', 'PlayerStatus', 'PlayerSummary', 'Room', 'RoomStatus'
]
