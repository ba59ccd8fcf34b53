"""
WebSocket Event Handlers

Streams keystrokes from the presentation layer into a game session and
pushes the updated state back.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_session_required
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection. Sessions outlive the socket."""
        game_logger.logger.info(f"WebSocket disconnected: {request.sid}")

    @socketio.on('join_game')
    @websocket_session_required
    def handle_join_game(data, session=None):
        """Join the room of a game to receive its state updates."""
        join_room(f"game_{session.game_id}")
        emit('game_state', asdict(session.to_state(include_emoji=True)))

    @socketio.on('leave_game')
    @websocket_session_required
    def handle_leave_game(data, session=None):
        """Leave a game's room."""
        leave_room(f"game_{session.game_id}")

    @socketio.on('key')
    @websocket_session_required
    def handle_key(data, session=None):
        """Apply one keystroke and broadcast the new state to the game's room."""
        key = data.get('key')
        if not isinstance(key, str) or not key:
            emit('error', {'error': 'Key is required'})
            return

        guesses_before = len(session.guesses)
        session.on_key(key)

        if len(session.guesses) > guesses_before:
            game_logger.log_game_event(
                session.game_id, 'guess_accepted', request.remote_addr or 'unknown',
                guesses_used=len(session.guesses), phase=session.phase.value
            )

        emit('game_state', asdict(session.to_state(include_emoji=True)), to=f"game_{session.game_id}")
