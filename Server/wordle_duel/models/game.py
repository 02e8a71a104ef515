"""
Game Data Models

Contains the letter-feedback types shared by both game modes and the
single-player game state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(str, Enum):
    """Per-letter feedback for a guess."""
    HIT = "hit"
    PRESENT = "present"
    MISS = "miss"
    EMPTY = "empty"  # Unfilled board cell, never produced by evaluation


@dataclass(frozen=True)
class LetterResult:
    """One evaluated letter of a guess."""
    letter: str
    status: LetterStatus

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'status': self.status.value}


@dataclass(frozen=True)
class GuessResult:
    """A normalized guess and its five letter results."""
    guess: str
    result: Tuple[LetterResult, ...]

    @property
    def is_all_hit(self) -> bool:
        return all(letter.status == LetterStatus.HIT for letter in self.result)

    def statuses(self) -> List[LetterStatus]:
        return [letter.status for letter in self.result]

    def to_dict(self) -> Dict:
        return {
            'guess': self.guess,
            'result': [letter.to_dict() for letter in self.result]
        }


@dataclass
class SinglePlayerGame:
    """Server-side record of a single-player game (holds the answer)."""
    game_id: str
    answer: str
    max_rounds: int
    guesses: List[GuessResult] = field(default_factory=list)
    is_won: bool = False
    is_lost: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_over(self) -> bool:
        return self.is_won or self.is_lost

    @property
    def remaining_rounds(self) -> int:
        return max(self.max_rounds - len(self.guesses), 0)


@dataclass
class GameState:
    """Client-facing single-player game state."""
    game_id: str
    guesses: List[GuessResult]
    max_rounds: int
    remaining_rounds: int
    is_won: bool
    is_lost: bool
    is_over: bool
    answer: Optional[str] = None  # Only included when game is over

    def to_dict(self) -> Dict:
        return {
            'game_id': self.game_id,
            'guesses': [guess.to_dict() for guess in self.guesses],
            'max_rounds': self.max_rounds,
            'remaining_rounds': self.remaining_rounds,
            'is_won': self.is_won,
            'is_lost': self.is_lost,
            'is_over': self.is_over,
            'answer': self.answer
        }
