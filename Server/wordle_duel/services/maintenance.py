"""
Room Maintenance

Background worker that periodically expires old multiplayer rooms and
abandoned single-player games.
"""

import threading
from typing import Optional

from ..utils.game_logger import game_logger
from .game_service import GameService
from .multiplayer_service import MultiplayerService


def _sweep(cleanup, max_age_minutes: float, action: str) -> int:
    try:
        return cleanup(max_age_minutes)
    except Exception as e:
        game_logger.log_error(None, e, action)
        return 0


def run_room_cleanup(multiplayer_service: MultiplayerService,
                     max_age_minutes: float,
                     game_service: Optional[GameService] = None) -> int:
    """
    Run one expiry sweep and return the number of rooms removed. Failures are
    logged and reported as zero cleaned so the schedule keeps running.
    """
    cleaned = _sweep(multiplayer_service.cleanup_old_rooms, max_age_minutes, 'cleanup_old_rooms')
    if cleaned > 0:
        game_logger.logger.info(f"Room cleanup: removed {cleaned} rooms older than {max_age_minutes} minutes")

    if game_service is not None:
        games = _sweep(game_service.cleanup_old_games, max_age_minutes, 'cleanup_old_games')
        if games > 0:
            game_logger.logger.info(f"Game cleanup: removed {games} games older than {max_age_minutes} minutes")

    return cleaned


def room_cleanup_worker(multiplayer_service: MultiplayerService,
                        max_age_minutes: float,
                        interval_seconds: float,
                        stop_event: threading.Event,
                        game_service: Optional[GameService] = None) -> None:
    """Sweep every interval_seconds until stop_event is set."""
    game_logger.logger.info(f"Room cleanup worker started - checking every {interval_seconds} seconds")
    while not stop_event.wait(interval_seconds):
        run_room_cleanup(multiplayer_service, max_age_minutes, game_service)
    game_logger.logger.info("Room cleanup worker stopped")


def start_room_cleanup_worker(multiplayer_service: MultiplayerService,
                              max_age_minutes: float,
                              interval_seconds: float,
                              stop_event: Optional[threading.Event] = None,
                              game_service: Optional[GameService] = None) -> threading.Event:
    """Start the worker in a daemon thread and return the event that stops it."""
    stop_event = stop_event or threading.Event()
    cleanup_thread = threading.Thread(
        target=room_cleanup_worker,
        args=(multiplayer_service, max_age_minutes, interval_seconds, stop_event, game_service),
        name='room-cleanup',
        daemon=True
    )
    cleanup_thread.start()
    return stop_event
