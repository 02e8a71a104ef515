"""
Endpoint Decorators

Turns game errors raised by the services into JSON error responses.
"""

from functools import wraps
from flask import request, jsonify

from ..errors import GameError
from .game_logger import game_logger


def handle_game_errors(action: str):
    """
    Decorator that maps GameError to its status code and logs the failure.

    Any other exception is logged with full context and answered with a 500.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            game_id = kwargs.get('game_id') or kwargs.get('room_id')
            try:
                return f(*args, **kwargs)
            except GameError as e:
                error_response = e.to_dict()
                game_logger.log_server_response(
                    request, action, False, error_response, game_id,
                    status_code=e.status_code
                )
                return jsonify(error_response), e.status_code
            except Exception as e:
                game_logger.log_error(request, e, action, game_id)
                error_response = {
                    'success': False,
                    'error': 'Internal server error'
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 500

        return decorated_function
    return decorator
