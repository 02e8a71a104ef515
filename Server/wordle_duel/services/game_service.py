"""
Game Service

Contains the single-player game: one participant guessing a hidden word
within the round limit configured when the game was created.
"""

import random
import threading
import uuid
from datetime import datetime, timedelta
from typing import Dict, Optional

from ..config.game_settings import GameSettings
from ..errors import GameNotFoundError, GameOverError
from ..models.game import GameState, GuessResult, SinglePlayerGame
from ..utils.game_logger import game_logger
from .guess_evaluator import evaluate_guess, validate_guess_format


class GameService:
    """
    Core game service managing multiple single-player sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secure answer storage
    - Guess validation and evaluation
    - Game state snapshots that hide the answer until the game is over
    """

    def __init__(self, settings: GameSettings, rng: Optional[random.Random] = None):
        self.settings = settings
        self.games: Dict[str, SinglePlayerGame] = {}  # Store active games by game_id
        self._lock = threading.RLock()
        self._rng = rng or random.Random()

    def new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        settings = self.settings.snapshot()
        game = SinglePlayerGame(
            game_id=str(uuid.uuid4()),
            # Select random word (server keeps this secret)
            answer=self._rng.choice(settings.words),
            max_rounds=settings.max_rounds
        )

        with self._lock:
            self.games[game.game_id] = game

        game_logger.log_game_event(game.game_id, 'game_created', max_rounds=game.max_rounds)
        return game.game_id

    def guess(self, game_id: str, guess: str) -> GuessResult:
        """
        Evaluates a guess and updates the game.

        Raises:
            GameNotFoundError: unknown game
            GameOverError: the game was already won or lost (carries the answer)
            FormatError: the guess is not exactly 5 letters
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                raise GameNotFoundError()
            if game.is_over:
                raise GameOverError(answer=game.answer)

            guess_result = evaluate_guess(validate_guess_format(guess), game.answer)
            game.guesses.append(guess_result)

            if guess_result.guess == game.answer.upper():
                game.is_won = True
                game_logger.log_game_event(game_id, 'game_won', rounds_used=len(game.guesses))
            elif len(game.guesses) >= game.max_rounds:
                game.is_lost = True
                game_logger.log_game_event(game_id, 'game_lost', rounds_used=len(game.guesses))

            return guess_result

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None

            return GameState(
                game_id=game.game_id,
                guesses=list(game.guesses),
                max_rounds=game.max_rounds,
                remaining_rounds=game.remaining_rounds,
                is_won=game.is_won,
                is_lost=game.is_lost,
                is_over=game.is_over,
                answer=game.answer if game.is_over else None
            )

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def cleanup_old_games(self, max_age_minutes: float, now: Optional[datetime] = None) -> int:
        """
        Removes games created more than max_age_minutes ago, finished or not.

        Returns:
            int: Number of games removed
        """
        cutoff = (now or datetime.now()) - timedelta(minutes=max_age_minutes)
        with self._lock:
            expired = [game_id for game_id, game in self.games.items() if game.created_at < cutoff]
            for game_id in expired:
                del self.games[game_id]

        if expired:
            game_logger.log_game_event(None, 'games_expired', count=len(expired), max_age_minutes=max_age_minutes)
        return len(expired)

    def active_game_count(self) -> int:
        return len(self.games)
