"""
Game Controller

Handles the single-player, configuration and health HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..errors import GameNotFoundError, InvalidRequestError
from ..services import get_game_service, get_game_settings, get_services, report_word_list
from ..utils.decorators import handle_game_errors
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body

game_bp = Blueprint('game', __name__)


@game_bp.route('/config', methods=['GET'])
@handle_game_errors('get_config')
def get_config():
    """Return the settings new games will use."""
    response_data = get_game_settings().to_dict()
    game_logger.log_server_response(request, 'get_config', True, response_data)
    return jsonify(response_data)


@game_bp.route('/config', methods=['POST'])
@handle_game_errors('update_config')
def update_config():
    """Replace the round limit and/or the word list for future games."""
    data = get_json_body(request)
    max_rounds = data.get('max_rounds', data.get('maxRounds'))
    word_list = data.get('word_list', data.get('wordList'))

    game_logger.log_user_action(
        request, 'update_config',
        max_rounds=max_rounds,
        word_list_size=len(word_list) if isinstance(word_list, list) else None
    )

    settings = get_game_settings()
    settings.update(max_rounds=max_rounds, word_list=word_list)
    if word_list is not None:
        report_word_list(settings, source='update_config')

    response_data = settings.to_dict()
    game_logger.log_server_response(request, 'update_config', True, response_data)
    return jsonify(response_data)


@game_bp.route('/game/new', methods=['POST'])
@handle_game_errors('new_game')
def new_game():
    """Create a new game session."""
    game_service = get_game_service()
    game_logger.log_user_action(request, 'new_game')

    game_id = game_service.new_game()
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': state.to_dict()
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, game_id,
        max_rounds=state.max_rounds
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@handle_game_errors('get_state')
def get_state(game_id):
    """Get current game state."""
    state = get_game_service().get_game_state(game_id)
    if state is None:
        raise GameNotFoundError()

    return jsonify({
        'success': True,
        'state': state.to_dict()
    })


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@handle_game_errors('submit_guess')
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    game_service = get_game_service()

    data = get_json_body(request)
    if 'guess' not in data:
        raise InvalidRequestError('Guess is required')
    guess = data['guess']

    game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

    guess_result = game_service.guess(game_id, guess)
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'guess_result': guess_result.to_dict(),
        'state': state.to_dict()
    }

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        round=len(state.guesses), game_over=state.is_over
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@handle_game_errors('delete_game')
def delete_game(game_id):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = get_game_service().delete_game(game_id)
    if not success:
        raise GameNotFoundError()

    response_data = {'success': True}
    game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
@handle_game_errors('health_check')
def health_check():
    """Health check endpoint."""
    services = get_services()

    return jsonify({
        'status': 'healthy',
        'active_games': services.game_service.active_game_count(),
        'active_rooms': len(services.store),
        'log_stats': game_logger.get_log_stats()
    })
