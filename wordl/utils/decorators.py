"""
Route Decorators

Contains decorators shared by the HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def with_session(f):
    """
    Decorator that resolves the <game_id> route parameter to its GameSession.

    Responds 500 if the game service is down and 404 if the game is unknown.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        session = game_service.get_session(game_id)
        if session is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        return f(session, *args, **kwargs)

    return decorated_function


def websocket_session_required(f):
    """Decorator for WebSocket events that carry a game_id."""
    @wraps(f)
    def decorated_function(data=None, *args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not isinstance(data, dict) or 'game_id' not in data:
            emit('error', {'error': 'Game ID is required'})
            return

        session = game_service.get_session(data['game_id'])
        if session is None:
            emit('error', {'error': 'Game not found'})
            return

        kwargs['session'] = session
        return f(data, *args, **kwargs)

    return decorated_function
