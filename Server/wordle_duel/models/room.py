"""
Multiplayer Data Models

Contains rooms, players and the derived final results of a duel.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .game import GuessResult


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


class PlayerStatus(str, Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    WON = "won"
    FINISHED = "finished"


class RoomStatus(str, Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass
class Player:
    """A participant in a room. Only guess submission mutates it."""
    player_id: str
    player_name: str
    guesses: List[GuessResult] = field(default_factory=list)
    score: int = 0
    status: PlayerStatus = PlayerStatus.WAITING
    has_guessed_correctly: bool = False
    completed_at: Optional[datetime] = None
    rounds_used: Optional[int] = None

    @property
    def is_done(self) -> bool:
        return self.status in (PlayerStatus.WON, PlayerStatus.FINISHED)

    def to_progress(self) -> Dict:
        """Progress view shared with both players while polling."""
        return {
            'player_id': self.player_id,
            'player_name': self.player_name,
            'guesses': [guess.to_dict() for guess in self.guesses],
            'score': self.score,
            'has_won': self.has_guessed_correctly,
            'status': self.status.value,
            'rounds_used': len(self.guesses),
            'completed_at': _isoformat(self.completed_at)
        }


@dataclass
class Room:
    """
    A two-player match: one hidden answer, a shared round limit and
    independent guess histories.
    """
    room_id: str
    room_code: str
    host_player_id: str
    answer: str
    max_rounds: int
    players: List[Player] = field(default_factory=list)
    status: RoomStatus = RoomStatus.WAITING
    max_players: int = 2
    created_at: datetime = field(default_factory=datetime.now)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def find_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    @property
    def is_full(self) -> bool:
        return len(self.players) >= self.max_players

    def to_summary(self) -> Dict:
        """Room information without the answer."""
        return {
            'room_id': self.room_id,
            'room_code': self.room_code,
            'host_player_id': self.host_player_id,
            'status': self.status.value,
            'players': [
                {
                    'player_id': p.player_id,
                    'player_name': p.player_name,
                    'status': p.status.value
                }
                for p in self.players
            ],
            'max_rounds': self.max_rounds,
            'max_players': self.max_players,
            'created_at': _isoformat(self.created_at),
            'started_at': _isoformat(self.started_at),
            'finished_at': _isoformat(self.finished_at)
        }


@dataclass(frozen=True)
class PlayerSummary:
    player_id: str
    player_name: str
    score: int
    guessed_correctly: bool
    rounds_used: int

    def to_dict(self) -> Dict:
        return {
            'player_id': self.player_id,
            'player_name': self.player_name,
            'score': self.score,
            'guessed_correctly': self.guessed_correctly,
            'rounds_used': self.rounds_used
        }


@dataclass(frozen=True)
class FinalResults:
    """Read-only outcome of a finished room. Computed on demand, never stored."""
    winner: Optional[str]
    winner_name: Optional[str]
    is_tie: bool
    players: Tuple[PlayerSummary, ...]
    answer: str

    def to_dict(self) -> Dict:
        return {
            'winner': self.winner,
            'winner_name': self.winner_name,
            'is_tie': self.is_tie,
            'players': [p.to_dict() for p in self.players],
            'answer': self.answer
        }
