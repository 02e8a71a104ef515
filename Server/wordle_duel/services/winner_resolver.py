"""
Winner Resolver

Decides the outcome of a finished room:

1. A player who guessed the word beats one who did not.
2. Between players who guessed it, fewer rounds wins, then higher score.
3. Between players who did not, higher score wins.
4. Players still level after that share a tie and nobody wins.

The rules are applied as one sort key, so the result does not depend on the
order players are stored in and holds for any number of players.
"""

from typing import Tuple

from ..errors import GameNotFinishedError
from ..models.room import FinalResults, Player, PlayerSummary, Room, RoomStatus


def summarize_player(player: Player) -> PlayerSummary:
    return PlayerSummary(
        player_id=player.player_id,
        player_name=player.player_name,
        score=player.score,
        guessed_correctly=player.has_guessed_correctly,
        rounds_used=player.rounds_used or len(player.guesses)
    )


def _ranking_key(summary: PlayerSummary) -> Tuple[int, int, int]:
    # Rounds only separate players who guessed the word
    if summary.guessed_correctly:
        return (0, summary.rounds_used, -summary.score)
    return (1, 0, -summary.score)


def determine_winner(room: Room) -> FinalResults:
    """
    Resolve the winner of a finished room.

    Raises:
        GameNotFinishedError: if the room has not finished yet
    """
    if room.status != RoomStatus.FINISHED:
        raise GameNotFinishedError()

    players = tuple(summarize_player(p) for p in room.players)

    winner = None
    if players:
        best_key = min(_ranking_key(p) for p in players)
        leaders = [p for p in players if _ranking_key(p) == best_key]
        if len(leaders) == 1:
            winner = leaders[0]

    return FinalResults(
        winner=winner.player_id if winner else None,
        winner_name=winner.player_name if winner else None,
        is_tie=winner is None and len(players) > 0,
        players=players,
        answer=room.answer
    )
