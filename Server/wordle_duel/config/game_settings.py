"""
Game Configuration Module

Holds the word list and round limit every new game or room draws from.
The defaults are loaded from wordles.json; the live values can be replaced
at runtime through GameSettings.update(). Games and rooms snapshot the
settings when they are created, so updates never reach games in flight.
"""

import json
import os
import threading
from collections import Counter
from typing import Final, List, NamedTuple, Optional, Sequence

from ..errors import InvalidConfigError

WORD_LENGTH: Final[int] = 5

# Default maximum number of guess attempts allowed per game
MAX_ROUNDS: Final[int] = 6


def _check_word(word) -> str:
    if not isinstance(word, str) or len(word) != WORD_LENGTH or not word.isalpha() or not word.isascii():
        raise InvalidConfigError(
            'All words must be exactly 5 letters and contain only alphabetic characters'
        )
    return word.upper()


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the file is malformed, the word list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    try:
        return [_check_word(word) for word in word_list]
    except InvalidConfigError as e:
        raise ValueError(f"Invalid word in wordles.json: {e.message}") from e


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


class SettingsSnapshot(NamedTuple):
    max_rounds: int
    words: Sequence[str]


class GameSettings:
    """
    Mutable word-list/config store.

    Readers take a snapshot; update() validates everything before
    replacing anything.
    """

    def __init__(self, max_rounds: int = MAX_ROUNDS, word_list: Optional[List[str]] = None):
        self._lock = threading.Lock()
        self._max_rounds = self._check_max_rounds(max_rounds)
        self._words = self._check_word_list(WORD_LIST if word_list is None else word_list)

    @staticmethod
    def _check_max_rounds(max_rounds) -> int:
        if isinstance(max_rounds, bool) or not isinstance(max_rounds, int) or max_rounds < 1:
            raise InvalidConfigError('maxRounds must be a positive number')
        return max_rounds

    @staticmethod
    def _check_word_list(word_list) -> tuple:
        if not isinstance(word_list, (list, tuple)) or not word_list:
            raise InvalidConfigError('wordList must be a non-empty array')
        return tuple(_check_word(word) for word in word_list)

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    @property
    def word_list(self) -> List[str]:
        return list(self._words)

    def snapshot(self) -> SettingsSnapshot:
        with self._lock:
            return SettingsSnapshot(self._max_rounds, self._words)

    def update(self, max_rounds=None, word_list=None) -> SettingsSnapshot:
        """Replace the round limit and/or word list. Nothing changes if either is invalid."""
        new_max_rounds = self._check_max_rounds(max_rounds) if max_rounds is not None else None
        new_words = self._check_word_list(word_list) if word_list is not None else None

        with self._lock:
            if new_max_rounds is not None:
                self._max_rounds = new_max_rounds
            if new_words is not None:
                self._words = new_words
            return SettingsSnapshot(self._max_rounds, self._words)

    def to_dict(self) -> dict:
        snapshot = self.snapshot()
        return {
            'max_rounds': snapshot.max_rounds,
            'word_list_size': len(snapshot.words)
        }


def find_duplicate_words(words: Sequence[str]) -> List[str]:
    """
    Words listed more than once, sorted. Duplicates are allowed and simply
    weight the random draw, so this is only a diagnostic.
    """
    counts = Counter(words)
    return sorted(word for word, count in counts.items() if count > 1)
