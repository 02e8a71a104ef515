"""
Word Duel Game Server - Main Entry Point

This is the main entry point for the game server.
It creates the Flask-SocketIO application, starts the room cleanup worker
and serves until interrupted.
"""

import os

from wordle_duel import create_app
from wordle_duel.config import config
from wordle_duel.services import get_services
from wordle_duel.services.maintenance import start_room_cleanup_worker
from wordle_duel.utils.game_logger import game_logger


def main():
    """Main function to create the app, start background maintenance and run the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]
    stop_cleanup = None
    services = None

    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        with app.app_context():
            services = get_services()

        if app.config['START_CLEANUP_WORKER']:
            stop_cleanup = start_room_cleanup_worker(
                services.multiplayer_service,
                max_age_minutes=app.config['ROOM_MAX_AGE_MINUTES'],
                interval_seconds=app.config['ROOM_CLEANUP_INTERVAL_SECONDS'],
                game_service=services.game_service
            )
            print(f"✓ Room cleanup worker started - checking every {app.config['ROOM_CLEANUP_INTERVAL_SECONDS']} seconds")

        game_logger.logger.info("Word Duel Server Starting")

        print(f"\nStarting Word Duel Game Server on {app.config['HOST']}:{app.config['PORT']}")
        print(f"Debug mode: {app.config['DEBUG']}")
        print("=" * 50)

        socketio.run(app, host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'])

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Duel Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        if stop_cleanup is not None:
            stop_cleanup.set()
        if services is not None:
            services.shutdown()


if __name__ == '__main__':
    main()
