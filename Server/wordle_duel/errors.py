"""
Game Errors

Every failure raised by the game core. Each error is a rejected operation:
nothing is mutated when one of these is raised.
"""

from typing import Any, Dict, Optional


class GameError(Exception):
    """Base class for all game errors surfaced to the caller."""

    status_code = 400

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message()
        super().__init__(self.message)

    @classmethod
    def default_message(cls) -> str:
        return cls.__doc__.strip().splitlines()[0] if cls.__doc__ else cls.__name__

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': False,
            'error': self.message,
            'error_type': type(self).__name__
        }


class FormatError(GameError):
    """Guess must be exactly 5 letters and contain only alphabetic characters"""
    status_code = 400


class InvalidRequestError(GameError):
    """Invalid request"""
    status_code = 400


class InvalidConfigError(GameError):
    """Invalid game configuration"""
    status_code = 400


class NotFoundError(GameError):
    """Not found"""
    status_code = 404


class RoomNotFoundError(NotFoundError):
    """Room not found"""


class PlayerNotFoundError(NotFoundError):
    """Player not found in this room"""


class GameNotFoundError(NotFoundError):
    """Game not found"""


class StateConflictError(GameError):
    """Operation not allowed in the current state"""
    status_code = 409


class RoomFullError(StateConflictError):
    """Room is full (maximum 2 players)"""


class GameAlreadyStartedError(StateConflictError):
    """Game has already started"""


class PlayerAlreadyFinishedError(StateConflictError):
    """Player has already finished"""


class GameNotInProgressError(StateConflictError):
    """Game is not in progress"""


class GameNotFinishedError(StateConflictError):
    """Game is not finished yet"""


class GameOverError(StateConflictError):
    """Game is already over"""

    def __init__(self, answer: str, message: Optional[str] = None):
        self.answer = answer
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['answer'] = self.answer
        return data


class RoomCodeExhaustedError(GameError):
    """Could not generate a unique room code"""
    status_code = 503
