from datetime import datetime, timedelta

import pytest

from wordle_duel.errors import FormatError, GameNotFoundError, GameOverError
from wordle_duel.models import LetterStatus


def test_new_game_hides_answer(game_service):
    game_id = game_service.new_game()
    state = game_service.get_game_state(game_id)

    assert state.answer is None
    assert state.max_rounds == 6
    assert state.remaining_rounds == 6
    assert not state.is_over


def test_winning_guess(game_service):
    game_id = game_service.new_game()
    game_service.guess(game_id, 'stone')
    result = game_service.guess(game_id, 'crane')

    assert result.statuses() == [LetterStatus.HIT] * 5
    state = game_service.get_game_state(game_id)
    assert state.is_won and state.is_over and not state.is_lost
    assert state.answer == 'CRANE'
    assert [g.guess for g in state.guesses] == ['STONE', 'CRANE']


def test_running_out_of_rounds(game_service, settings):
    settings.update(max_rounds=2)
    game_id = game_service.new_game()
    game_service.guess(game_id, 'STONE')
    assert not game_service.get_game_state(game_id).is_over

    game_service.guess(game_id, 'PIANO')
    state = game_service.get_game_state(game_id)
    assert state.is_lost and state.is_over
    assert state.remaining_rounds == 0


def test_guess_after_game_over_reveals_answer(game_service):
    game_id = game_service.new_game()
    game_service.guess(game_id, 'CRANE')

    with pytest.raises(GameOverError) as exc_info:
        game_service.guess(game_id, 'STONE')
    assert exc_info.value.answer == 'CRANE'
    assert exc_info.value.to_dict()['answer'] == 'CRANE'
    assert len(game_service.get_game_state(game_id).guesses) == 1


def test_unknown_game(game_service):
    with pytest.raises(GameNotFoundError):
        game_service.guess('missing', 'CRANE')
    assert game_service.get_game_state('missing') is None


def test_malformed_guess_is_not_counted(game_service):
    game_id = game_service.new_game()
    with pytest.raises(FormatError):
        game_service.guess(game_id, 'CRANES')
    assert game_service.get_game_state(game_id).remaining_rounds == 6


def test_config_change_does_not_affect_running_game(game_service, settings):
    game_id = game_service.new_game()
    settings.update(max_rounds=1, word_list=['PIANO'])

    game_service.guess(game_id, 'PIANO')
    state = game_service.get_game_state(game_id)
    assert not state.is_over
    assert state.max_rounds == 6


def test_delete_game(game_service):
    game_id = game_service.new_game()
    assert game_service.active_game_count() == 1
    assert game_service.delete_game(game_id) is True
    assert game_service.delete_game(game_id) is False
    assert game_service.active_game_count() == 0


def test_cleanup_old_games(game_service):
    old_id = game_service.new_game()
    finished_id = game_service.new_game()
    fresh_id = game_service.new_game()
    game_service.guess(finished_id, 'CRANE')

    now = datetime.now()
    game_service.games[old_id].created_at = now - timedelta(minutes=31)
    game_service.games[finished_id].created_at = now - timedelta(hours=2)

    assert game_service.cleanup_old_games(30, now=now) == 2
    assert game_service.get_game_state(old_id) is None
    assert game_service.get_game_state(finished_id) is None
    assert game_service.get_game_state(fresh_id) is not None
    assert game_service.cleanup_old_games(30, now=now) == 0
