"""
Room Store

In-memory storage for multiplayer rooms with a secondary index from the
human-readable room code to the room id.
"""

import random
import string
import threading
from typing import Callable, Dict, List, Optional

from ..errors import RoomCodeExhaustedError
from ..models.room import Room

ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits
ROOM_CODE_LENGTH = 6
DEFAULT_MAX_CODE_ATTEMPTS = 100


class RoomStore:
    """
    Owns every live Room and the code index.

    The primary map and the code index are only changed together under the
    store lock, so a lookup never sees one without the other.
    """

    def __init__(self, max_code_attempts: int = DEFAULT_MAX_CODE_ATTEMPTS, rng: Optional[random.Random] = None):
        self._rooms: Dict[str, Room] = {}
        self._code_index: Dict[str, str] = {}  # room_code -> room_id
        self._lock = threading.RLock()
        self._rng = rng or random.SystemRandom()
        self.max_code_attempts = max_code_attempts

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms

    def generate_room_code(self) -> str:
        """
        Generate a 6-character code not used by any live room.

        Raises:
            RoomCodeExhaustedError: if no free code was found within max_code_attempts
        """
        with self._lock:
            for _ in range(self.max_code_attempts):
                code = ''.join(self._rng.choice(ROOM_CODE_ALPHABET) for _ in range(ROOM_CODE_LENGTH))
                if code not in self._code_index:
                    return code
        raise RoomCodeExhaustedError(
            f'Could not generate a unique room code after {self.max_code_attempts} attempts'
        )

    def reserve(self, factory: Callable[[str], Room]) -> Room:
        """Generate a free code and insert the room built from it in one step."""
        with self._lock:
            room = factory(self.generate_room_code())
            self.add(room)
            return room

    def add(self, room: Room) -> None:
        with self._lock:
            if room.room_code in self._code_index:
                raise ValueError(f'Room code {room.room_code} is already in use')
            self._rooms[room.room_id] = room
            self._code_index[room.room_code] = room.room_id

    def get(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def resolve_code(self, room_code: str) -> Optional[str]:
        if not room_code:
            return None
        return self._code_index.get(room_code.strip().upper())

    def get_by_code(self, room_code: str) -> Optional[Room]:
        with self._lock:
            room_id = self.resolve_code(room_code)
            return self._rooms.get(room_id) if room_id else None

    def delete(self, room_id: str) -> bool:
        """Remove a room and its code entry. Returns False if it was not stored."""
        with self._lock:
            room = self._rooms.pop(room_id, None)
            if room is None:
                return False
            self._code_index.pop(room.room_code, None)
            return True

    def all_rooms(self) -> List[Room]:
        """Snapshot of every stored room, safe to iterate while rooms are deleted."""
        with self._lock:
            return list(self._rooms.values())

    def clear(self) -> None:
        with self._lock:
            self._rooms.clear()
            self._code_index.clear()
