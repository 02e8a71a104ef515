import os
import sys
import pytest

# Ensure the server root (containing the `wordle_duel` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SERVER_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if SERVER_ROOT not in sys.path:
    sys.path.insert(0, SERVER_ROOT)

from wordle_duel import create_app
from wordle_duel.config import GameSettings, TestingConfig
from wordle_duel.services import GameService, MultiplayerService, RoomStore


@pytest.fixture()
def settings():
    # A single-word list makes every answer CRANE
    return GameSettings(max_rounds=6, word_list=['CRANE'])


@pytest.fixture()
def store():
    return RoomStore()


@pytest.fixture()
def multiplayer(store, settings):
    return MultiplayerService(store, settings)


@pytest.fixture()
def game_service(settings):
    return GameService(settings)


@pytest.fixture()
def flask_app(tmp_path, settings):
    class TestConfig(TestingConfig):
        LOG_DIR = str(tmp_path / 'logs')

    application, _ = create_app(TestConfig, settings=settings)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    socketio = flask_app.extensions['socketio']
    test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


def make_duel(multiplayer, host='Alice', guest='Bob'):
    """Create a room and fill it, returning (room_id, host_id, guest_id)."""
    room_id, room_code, host_id = multiplayer.create_room(host)
    _, guest_id = multiplayer.join_room(room_code, guest)
    return room_id, host_id, guest_id
