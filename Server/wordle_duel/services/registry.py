"""
Service Registry

Each Flask app owns one set of services, created by create_app() and kept
in app.extensions. Nothing here is a module-level global, so tests can run
several independent apps side by side.
"""

from dataclasses import dataclass
from typing import Optional

from flask import Flask, current_app

from ..config.game_settings import GameSettings, find_duplicate_words
from ..utils.game_logger import game_logger
from .game_service import GameService
from .multiplayer_service import MultiplayerService
from .room_store import RoomStore

EXTENSION_KEY = 'wordle_duel'


@dataclass
class Services:
    settings: GameSettings
    store: RoomStore
    game_service: GameService
    multiplayer_service: MultiplayerService

    def shutdown(self) -> None:
        """Drop every room and game held in memory."""
        self.store.clear()
        self.game_service.games.clear()


def initialize_services(app: Flask,
                        settings: Optional[GameSettings] = None,
                        store: Optional[RoomStore] = None) -> Services:
    """Build the services for an app from its config and register them on it."""
    settings = settings or GameSettings(max_rounds=app.config.get('MAX_ROUNDS', 6))
    store = store or RoomStore(max_code_attempts=app.config.get('ROOM_CODE_MAX_ATTEMPTS', 100))

    services = Services(
        settings=settings,
        store=store,
        game_service=GameService(settings),
        multiplayer_service=MultiplayerService(store, settings)
    )
    report_word_list(settings, source='startup')
    app.extensions[EXTENSION_KEY] = services
    return services


def report_word_list(settings: GameSettings, source: str) -> None:
    """Warn about repeated words in the active list; repeats make them likelier answers."""
    duplicates = find_duplicate_words(settings.snapshot().words)
    if duplicates:
        game_logger.logger.warning(f"Word list ({source}) repeats {len(duplicates)} words: {duplicates}")


def get_services() -> Services:
    """Services of the current app."""
    services = current_app.extensions.get(EXTENSION_KEY)
    if services is None:
        raise RuntimeError('Game services are not initialized')
    return services


def get_game_service() -> GameService:
    return get_services().game_service


def get_multiplayer_service() -> MultiplayerService:
    return get_services().multiplayer_service


def get_game_settings() -> GameSettings:
    return get_services().settings
