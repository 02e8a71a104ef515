import pytest

from wordle_duel.errors import GameNotFinishedError
from wordle_duel.models import Player, PlayerStatus, Room, RoomStatus
from wordle_duel.services.winner_resolver import determine_winner


def make_player(player_id, score, correct, rounds):
    return Player(
        player_id=player_id,
        player_name=player_id.title(),
        score=score,
        status=PlayerStatus.WON if correct else PlayerStatus.FINISHED,
        has_guessed_correctly=correct,
        rounds_used=rounds
    )


def finished_room(*players):
    return Room(
        room_id='room', room_code='ABC123', host_player_id=players[0].player_id,
        answer='CRANE', max_rounds=6, players=list(players), status=RoomStatus.FINISHED
    )


def winner_both_orders(a, b):
    first = determine_winner(finished_room(a, b))
    second = determine_winner(finished_room(b, a))
    assert (first.winner, first.is_tie) == (second.winner, second.is_tie)
    return first


def test_only_correct_guesser_wins_despite_lower_score():
    results = winner_both_orders(
        make_player('alice', 10, True, 1),
        make_player('bob', 40, False, 6)
    )
    assert results.winner == 'alice'
    assert results.winner_name == 'Alice'
    assert not results.is_tie


def test_both_correct_fewer_rounds_wins():
    results = winner_both_orders(
        make_player('alice', 16, True, 3),
        make_player('bob', 30, True, 5)
    )
    assert results.winner == 'alice'


def test_both_correct_same_rounds_higher_score_wins():
    results = winner_both_orders(
        make_player('alice', 14, True, 3),
        make_player('bob', 17, True, 3)
    )
    assert results.winner == 'bob'


def test_both_correct_same_rounds_same_score_is_tie():
    results = winner_both_orders(
        make_player('alice', 14, True, 3),
        make_player('bob', 14, True, 3)
    )
    assert results.winner is None
    assert results.winner_name is None
    assert results.is_tie


def test_neither_correct_higher_score_wins_regardless_of_rounds():
    results = winner_both_orders(
        make_player('alice', 12, False, 6),
        make_player('bob', 9, False, 6)
    )
    assert results.winner == 'alice'


def test_neither_correct_same_score_is_tie():
    results = winner_both_orders(
        make_player('alice', 9, False, 6),
        make_player('bob', 9, False, 6)
    )
    assert results.is_tie
    assert results.winner is None


def test_results_are_idempotent_and_complete():
    room = finished_room(make_player('alice', 10, True, 1), make_player('bob', 7, False, 6))
    first, second = determine_winner(room), determine_winner(room)

    assert first == second
    assert first.answer == 'CRANE'
    assert [p.player_id for p in first.players] == ['alice', 'bob']
    assert first.players[1].rounds_used == 6
    assert first.players[1].guessed_correctly is False


def test_rounds_fall_back_to_guess_count():
    player = make_player('alice', 0, False, None)
    player.guesses = ['one', 'two']
    results = determine_winner(finished_room(player))
    assert results.players[0].rounds_used == 2


def test_unfinished_room_is_rejected():
    room = finished_room(make_player('alice', 10, True, 1))
    room.status = RoomStatus.PLAYING
    with pytest.raises(GameNotFinishedError):
        determine_winner(room)
