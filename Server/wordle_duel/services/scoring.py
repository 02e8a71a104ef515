from typing import Dict

from ..models.game import GuessResult, LetterStatus

LETTER_SCORES: Dict[LetterStatus, int] = {
    LetterStatus.HIT: 2,
    LetterStatus.PRESENT: 1,
    LetterStatus.MISS: 0,
    LetterStatus.EMPTY: 0,
}


def calculate_guess_score(guess_result: GuessResult) -> int:
    """Score for a single guess: hit = 2, present = 1, miss = 0."""
    return sum(LETTER_SCORES[letter.status] for letter in guess_result.result)
