from wordle_duel.models import GuessResult, LetterResult, LetterStatus
from wordle_duel.services.guess_evaluator import evaluate_guess
from wordle_duel.services.scoring import calculate_guess_score


def test_all_hits_score_ten():
    assert calculate_guess_score(evaluate_guess('CRANE', 'CRANE')) == 10


def test_stone_against_crane():
    # N and E sit in the same positions in both words
    result = evaluate_guess('STONE', 'CRANE')
    assert result.statuses() == [LetterStatus.MISS] * 3 + [LetterStatus.HIT] * 2
    assert calculate_guess_score(result) == 4


def test_present_letters_score_one_each():
    # R, A, C, E present; S miss
    assert calculate_guess_score(evaluate_guess('RACES', 'CRANE')) == 4


def test_score_is_deterministic():
    result = evaluate_guess('ERASE', 'SPEED')
    assert calculate_guess_score(result) == calculate_guess_score(result) == 3


def test_empty_cells_score_nothing():
    result = GuessResult(
        guess='AB',
        result=(LetterResult('A', LetterStatus.EMPTY), LetterResult('B', LetterStatus.PRESENT))
    )
    assert calculate_guess_score(result) == 1
