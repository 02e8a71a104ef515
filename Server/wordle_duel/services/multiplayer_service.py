"""
Multiplayer Service

Runs the two-player duel: room creation and joining, guess submission with
scoring, leaving, and age-based expiry of rooms.

Every operation on a room holds that room's lock from lookup to the last
status change, so two players submitting at the same moment can never both
see the room as unfinished. Lock order is always room lock, then store lock.
"""

import random
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterator, Optional, Tuple

from ..config.game_settings import GameSettings
from ..errors import (
    GameAlreadyStartedError, GameNotInProgressError, PlayerAlreadyFinishedError,
    PlayerNotFoundError, RoomFullError, RoomNotFoundError
)
from ..models.game import GuessResult
from ..models.room import FinalResults, Player, PlayerStatus, Room, RoomStatus
from ..utils.game_logger import game_logger
from .guess_evaluator import evaluate_guess, validate_guess_format
from .room_store import RoomStore
from .scoring import calculate_guess_score
from .winner_resolver import determine_winner

DEFAULT_ROOM_MAX_AGE_MINUTES = 30


@dataclass(frozen=True)
class GuessOutcome:
    """What the routing layer reports back after a multiplayer guess."""
    guess_result: GuessResult
    score: int
    total_score: int
    game_state: Dict


class MultiplayerService:
    """
    Room and player lifecycle for multiplayer games.

    Room state machine: waiting -> playing (second player joins) -> finished
    (every player won or ran out of rounds). A waiting room is deleted as soon
    as anyone leaves it.
    """

    def __init__(self,
                 store: RoomStore,
                 settings: GameSettings,
                 clock: Callable[[], datetime] = datetime.now,
                 rng: Optional[random.Random] = None):
        self.store = store
        self.settings = settings
        self._clock = clock
        self._rng = rng or random.Random()

    @contextmanager
    def _locked_room(self, room_id: str) -> Iterator[Room]:
        room = self.store.get(room_id)
        if room is None:
            raise RoomNotFoundError()
        with room.lock:
            # The expiry sweep or a leave may have removed it while we waited
            if self.store.get(room_id) is not room:
                raise RoomNotFoundError()
            yield room

    def create_room(self, player_name: str) -> Tuple[str, str, str]:
        """
        Create a room with the caller as host and only player.

        Returns:
            Tuple of (room_id, room_code, player_id)
        """
        settings = self.settings.snapshot()
        answer = self._rng.choice(settings.words)
        room_id = str(uuid.uuid4())
        player_id = str(uuid.uuid4())

        def build(room_code: str) -> Room:
            return Room(
                room_id=room_id,
                room_code=room_code,
                host_player_id=player_id,
                answer=answer,
                max_rounds=settings.max_rounds,
                players=[Player(player_id=player_id, player_name=player_name)],
                created_at=self._clock()
            )

        room = self.store.reserve(build)

        game_logger.log_game_event(
            room_id, 'room_created',
            room_code=room.room_code, player_id=player_id, max_rounds=room.max_rounds
        )
        return room.room_id, room.room_code, player_id

    def join_room(self, room_code: str, player_name: str) -> Tuple[str, str]:
        """
        Join a waiting room by its code. Filling the room starts the game.

        Returns:
            Tuple of (room_id, player_id)

        Raises:
            RoomNotFoundError, RoomFullError, GameAlreadyStartedError
        """
        room = self.store.get_by_code(room_code)
        if room is None:
            raise RoomNotFoundError()

        with self._locked_room(room.room_id) as room:
            if room.is_full:
                raise RoomFullError()
            if room.status != RoomStatus.WAITING:
                raise GameAlreadyStartedError()

            player = Player(player_id=str(uuid.uuid4()), player_name=player_name)
            room.players.append(player)
            game_logger.log_game_event(
                room.room_id, 'player_joined',
                player_id=player.player_id, players=len(room.players)
            )

            if room.is_full:
                self._start(room)

            return room.room_id, player.player_id

    def _start(self, room: Room) -> None:
        room.status = RoomStatus.PLAYING
        room.started_at = self._clock()
        for player in room.players:
            player.status = PlayerStatus.PLAYING
        game_logger.log_game_event(room.room_id, 'game_started', room_code=room.room_code)

    def _check_can_guess(self, room: Room, player_id: str) -> Player:
        player = room.find_player(player_id)
        if player is None:
            raise PlayerNotFoundError()
        if player.is_done:
            raise PlayerAlreadyFinishedError()
        if room.status != RoomStatus.PLAYING:
            raise GameNotInProgressError()
        return player

    def submit_guess(self, room_id: str, player_id: str, guess_result: GuessResult) -> int:
        """
        Record an evaluated guess for a player and return its score.

        Raises:
            RoomNotFoundError, PlayerNotFoundError, PlayerAlreadyFinishedError,
            GameNotInProgressError
        """
        with self._locked_room(room_id) as room:
            player = self._check_can_guess(room, player_id)
            return self._apply_guess(room, player, guess_result)

    def make_guess(self, room_id: str, player_id: str, guess: str) -> GuessOutcome:
        """Validate, evaluate and submit raw guess text in one locked step."""
        with self._locked_room(room_id) as room:
            player = self._check_can_guess(room, player_id)
            guess_result = evaluate_guess(validate_guess_format(guess), room.answer)
            score = self._apply_guess(room, player, guess_result)
            return GuessOutcome(
                guess_result=guess_result,
                score=score,
                total_score=player.score,
                game_state=self._state_of(room)
            )

    def _apply_guess(self, room: Room, player: Player, guess_result: GuessResult) -> int:
        player.guesses.append(guess_result)
        score = calculate_guess_score(guess_result)
        player.score += score

        if guess_result.guess.upper() == room.answer.upper():
            player.status = PlayerStatus.WON
            player.has_guessed_correctly = True
            player.completed_at = self._clock()
            player.rounds_used = len(player.guesses)
            game_logger.log_game_event(
                room.room_id, 'player_won',
                player_id=player.player_id, rounds_used=player.rounds_used, score=player.score
            )
        elif len(player.guesses) >= room.max_rounds:
            player.status = PlayerStatus.FINISHED
            player.completed_at = self._clock()
            player.rounds_used = len(player.guesses)
            game_logger.log_game_event(
                room.room_id, 'player_finished',
                player_id=player.player_id, rounds_used=player.rounds_used, score=player.score
            )

        if all(p.is_done for p in room.players):
            room.status = RoomStatus.FINISHED
            room.finished_at = self._clock()
            results = determine_winner(room)
            game_logger.log_game_event(
                room.room_id, 'room_finished',
                winner=results.winner, is_tie=results.is_tie
            )

        return score

    def leave_room(self, room_id: str, player_id: str) -> bool:
        """
        Remove a player from a room.

        A waiting room, or one left empty, is deleted immediately. Returns
        False when the room or player is unknown.
        """
        try:
            with self._locked_room(room_id) as room:
                player = room.find_player(player_id)
                if player is None:
                    return False

                was_waiting = room.status == RoomStatus.WAITING
                room.players.remove(player)
                game_logger.log_game_event(room_id, 'player_left', player_id=player_id)

                if not room.players or was_waiting:
                    self.store.delete(room_id)
                    game_logger.log_game_event(room_id, 'room_deleted', reason='player_left')
                return True
        except RoomNotFoundError:
            return False

    def cleanup_old_rooms(self, max_age_minutes: float = DEFAULT_ROOM_MAX_AGE_MINUTES,
                          now: Optional[datetime] = None) -> int:
        """Delete every room created more than max_age_minutes ago. Returns the count."""
        cutoff = (now or self._clock()) - timedelta(minutes=max_age_minutes)
        cleaned = 0

        for room in self.store.all_rooms():
            if room.created_at >= cutoff:
                continue
            with room.lock:
                if self.store.delete(room.room_id):
                    cleaned += 1

        if cleaned:
            game_logger.log_game_event(None, 'rooms_expired', count=cleaned, max_age_minutes=max_age_minutes)
        return cleaned

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.store.get(room_id)

    def get_final_results(self, room_id: str) -> FinalResults:
        with self._locked_room(room_id) as room:
            return determine_winner(room)

    def get_game_state(self, room_id: str) -> Optional[Dict]:
        """Polling view of a room. The answer only appears in the final results."""
        try:
            with self._locked_room(room_id) as room:
                return self._state_of(room)
        except RoomNotFoundError:
            return None

    def _state_of(self, room: Room) -> Dict:
        final_results = determine_winner(room) if room.status == RoomStatus.FINISHED else None

        return {
            'room_id': room.room_id,
            'room_code': room.room_code,
            'status': room.status.value,
            'players': [p.to_progress() for p in room.players],
            'current_max_round': max((len(p.guesses) for p in room.players), default=0),
            'max_rounds': room.max_rounds,
            'winner': final_results.winner if final_results else None,
            'final_results': final_results.to_dict() if final_results else None
        }
