"""
Multiplayer Controller

Handles the room and duel HTTP endpoints. Validation here is limited to the
shape of the request; game rules live in MultiplayerService.
"""

from flask import Blueprint, current_app, request, jsonify
from ..errors import InvalidRequestError, RoomNotFoundError
from ..services import get_multiplayer_service
from ..utils.decorators import handle_game_errors
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body, require_text
from ..websocket.handlers import broadcast_room_closed, broadcast_room_state

multiplayer_bp = Blueprint('multiplayer', __name__)


def _player_name(data) -> str:
    return require_text(
        data, 'player_name', 'Player name',
        max_length=current_app.config.get('PLAYER_NAME_MAX_LENGTH', 20)
    )


@multiplayer_bp.route('/room/create', methods=['POST'])
@handle_game_errors('create_room')
def create_room():
    """Create a new room with the caller as host."""
    player_name = _player_name(get_json_body(request))
    game_logger.log_user_action(request, 'create_room', player_name=player_name)

    room_id, room_code, player_id = get_multiplayer_service().create_room(player_name)

    response_data = {
        'success': True,
        'room_id': room_id,
        'room_code': room_code,
        'player_id': player_id,
        'player_name': player_name
    }
    game_logger.log_server_response(request, 'create_room', True, response_data, room_id)
    return jsonify(response_data)


@multiplayer_bp.route('/room/join', methods=['POST'])
@handle_game_errors('join_room')
def join_room():
    """Join a waiting room by code. The second player starts the game."""
    data = get_json_body(request)
    player_name = _player_name(data)
    room_code = require_text(data, 'room_code', 'Room code').upper()

    game_logger.log_user_action(request, 'join_room', room_code=room_code, player_name=player_name)

    multiplayer_service = get_multiplayer_service()
    room_id, player_id = multiplayer_service.join_room(room_code, player_name)
    state = multiplayer_service.get_game_state(room_id)
    if state is None:
        raise RoomNotFoundError()

    response_data = {
        'success': True,
        'room_id': room_id,
        'room_code': state['room_code'],
        'player_id': player_id,
        'player_name': player_name,
        'status': state['status'],
        'players': state['players']
    }
    game_logger.log_server_response(request, 'join_room', True, response_data, room_id)

    broadcast_room_state(room_id)
    return jsonify(response_data)


@multiplayer_bp.route('/room/<room_id>', methods=['GET'])
@handle_game_errors('get_room')
def get_room(room_id):
    """Room information (never includes the answer)."""
    room = get_multiplayer_service().get_room(room_id)
    if room is None:
        raise RoomNotFoundError()

    with room.lock:
        summary = room.to_summary()
    return jsonify({'success': True, **summary})


@multiplayer_bp.route('/game/<room_id>/guess', methods=['POST'])
@handle_game_errors('multiplayer_guess')
def make_multiplayer_guess(room_id):
    """Submit a guess in a multiplayer game."""
    data = get_json_body(request)
    player_id = require_text(data, 'player_id', 'Player ID')
    if 'guess' not in data:
        raise InvalidRequestError('Guess is required')
    # Untrimmed; the evaluator rejects anything but 5 letters
    guess = data['guess']

    game_logger.log_user_action(request, 'multiplayer_guess', room_id, player_id=player_id, guess=guess)

    outcome = get_multiplayer_service().make_guess(room_id, player_id, guess)

    response_data = {
        'success': True,
        'guess_result': outcome.guess_result.to_dict(),
        'score': outcome.score,
        'total_score': outcome.total_score,
        'game_state': outcome.game_state
    }
    game_logger.log_server_response(
        request, 'multiplayer_guess', True, response_data, room_id,
        score=outcome.score, room_status=outcome.game_state['status']
    )

    broadcast_room_state(room_id, outcome.game_state)
    return jsonify(response_data)


@multiplayer_bp.route('/game/<room_id>/state', methods=['GET'])
@handle_game_errors('get_multiplayer_state')
def get_multiplayer_state(room_id):
    """Current game state, polled by both players."""
    state = get_multiplayer_service().get_game_state(room_id)
    if state is None:
        raise RoomNotFoundError()
    return jsonify({'success': True, 'state': state})


@multiplayer_bp.route('/room/<room_id>/leave', methods=['DELETE'])
@handle_game_errors('leave_room')
def leave_room(room_id):
    """Leave a room. A room that has not started yet is closed."""
    player_id = require_text(get_json_body(request), 'player_id', 'Player ID')
    game_logger.log_user_action(request, 'leave_room', room_id, player_id=player_id)

    multiplayer_service = get_multiplayer_service()
    if not multiplayer_service.leave_room(room_id, player_id):
        raise RoomNotFoundError('Room or player not found')

    response_data = {'success': True}
    game_logger.log_server_response(request, 'leave_room', True, response_data, room_id)

    state = multiplayer_service.get_game_state(room_id)
    if state is None:
        broadcast_room_closed(room_id)
    else:
        broadcast_room_state(room_id, state)
    return jsonify(response_data)
