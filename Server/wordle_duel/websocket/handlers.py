"""
WebSocket Event Handlers

Pushes room state to the players of a multiplayer game. Clients subscribe
to a room channel; every HTTP mutation of the room is broadcast to it.
"""

from typing import Dict, Optional

from flask import current_app
from flask_socketio import emit, join_room, leave_room
from ..services import get_multiplayer_service
from ..utils.game_logger import game_logger


def room_channel(room_id: str) -> str:
    return f"room_{room_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_room_channel')
    def handle_join_room_channel(data):
        """Subscribe to updates of a room and receive its current state."""
        room_id = (data or {}).get('room_id')
        if not room_id:
            emit('error', {'error': 'Room ID is required'})
            return

        state = get_multiplayer_service().get_game_state(room_id)
        if state is None:
            emit('error', {'error': 'Room not found'})
            return

        join_room(room_channel(room_id))
        game_logger.logger.info(f"WebSocket: client subscribed to room {room_id}")

        emit('game_state_update', {
            'success': True,
            'state': state
        })

    @socketio.on('leave_room_channel')
    def handle_leave_room_channel(data):
        """Stop receiving updates of a room."""
        room_id = (data or {}).get('room_id')
        if not room_id:
            emit('error', {'error': 'Room ID is required'})
            return

        leave_room(room_channel(room_id))
        game_logger.logger.info(f"WebSocket: client unsubscribed from room {room_id}")


def _socketio():
    return current_app.extensions.get('socketio')


def broadcast_room_state(room_id: str, state: Optional[Dict] = None) -> None:
    """Broadcast game state update to everyone subscribed to a room."""
    socketio = _socketio()
    if socketio is None:
        return

    try:
        if state is None:
            state = get_multiplayer_service().get_game_state(room_id)
        if state is None:
            return

        socketio.emit('game_state_update', {
            'success': True,
            'state': state
        }, to=room_channel(room_id))
    except Exception as e:
        game_logger.logger.error(f"Error broadcasting game state for {room_id}: {e}")


def broadcast_room_closed(room_id: str) -> None:
    """Tell subscribers the room no longer exists."""
    socketio = _socketio()
    if socketio is None:
        return

    try:
        socketio.emit('room_closed', {'room_id': room_id}, to=room_channel(room_id))
    except Exception as e:
        game_logger.logger.error(f"Error broadcasting room close for {room_id}: {e}")
