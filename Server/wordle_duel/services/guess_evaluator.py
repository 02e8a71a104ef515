"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm and the guess format check
that runs before it.
"""

import re
from collections import Counter
from typing import List, Optional

from ..config.game_settings import WORD_LENGTH
from ..errors import FormatError
from ..models.game import GuessResult, LetterResult, LetterStatus

_GUESS_PATTERN = re.compile(r'[A-Za-z]{%d}' % WORD_LENGTH)


def validate_guess_format(guess) -> str:
    """
    Checks a raw guess and returns it normalized to uppercase.

    Raises:
        FormatError: unless the guess is exactly 5 alphabetic characters
    """
    if not isinstance(guess, str):
        raise FormatError('Guess is required')

    # Surrounding whitespace is malformed input, not padding to strip
    if not _GUESS_PATTERN.fullmatch(guess):
        raise FormatError()

    return guess.upper()


def is_valid_guess(guess) -> bool:
    try:
        validate_guess_format(guess)
    except FormatError:
        return False
    return True


def evaluate_guess(guess: str, answer: str) -> GuessResult:
    """
    Evaluates a guess against the answer following Wordle rules.

    Hits are marked first and consume their letter from the answer. The
    remaining positions are scanned left to right and only marked present
    while the answer still has an unconsumed copy of that letter, so a
    repeated letter is never reported more often than the answer holds it.
    """
    guess = guess.upper()
    answer = answer.upper()

    remaining = Counter(answer)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (guessed, expected) in enumerate(zip(guess, answer)):
        if guessed == expected:
            statuses[i] = LetterStatus.HIT
            remaining[guessed] -= 1

    # Second pass: letters elsewhere in the answer
    for i, guessed in enumerate(guess):
        if statuses[i] is not None:
            continue
        if remaining[guessed] > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[guessed] -= 1
        else:
            statuses[i] = LetterStatus.MISS

    return GuessResult(
        guess=guess,
        result=tuple(LetterResult(letter, status) for letter, status in zip(guess, statuses))
    )
