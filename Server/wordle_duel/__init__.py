"""
Word Duel Game Server Application Package

Single-player and two-player word-guessing games served over HTTP, with
room updates pushed over Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, settings=None, store=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        settings: Optional GameSettings to share instead of building one from config
        store: Optional RoomStore to use instead of a fresh one

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.configure(app.config['LOG_DIR'], app.config['LOG_LEVEL'])

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Services are owned by this app instance
    from .services.registry import initialize_services
    initialize_services(app, settings=settings, store=store)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.multiplayer_controller import multiplayer_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(multiplayer_bp, url_prefix='/api/multiplayer')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    return app, socketio
