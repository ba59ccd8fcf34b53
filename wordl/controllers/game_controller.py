"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, request, jsonify
from ..models.game import GamePhase, PublishOutcome
from ..services.game_service import get_game_service, parse_game_number
from ..services.target_service import WordPoolExhaustedError
from ..utils.decorators import with_session
from ..utils.game_logger import game_logger
from ..utils.helpers import build_game_config, get_user_identity, parse_seed

game_bp = Blueprint('game', __name__)


def _json_body():
    """Request JSON as a dict; anything else (missing, malformed, arrays) reads as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _log_game_over(session, guess):
    """Records a win or loss once the accepted guess ended the game."""
    if not session.is_over:
        return
    event = 'game_won' if session.phase == GamePhase.WON else 'game_lost'
    game_logger.log_game_event(
        session.game_id, event, get_user_identity()['user_ip'],
        guesses_used=len(session.guesses), target_word=session.target,
        final_guess=guess, game_number=session.game_number
    )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session, optionally from a challenge token or daily seed."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = _json_body()
        challenge = data.get('challenge')

        try:
            game_config = build_game_config(data, current_app.config)
            seed = parse_seed(data.get('seed', current_app.config.get('DAILY_SEED')))
        except (TypeError, ValueError) as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(
            request, 'new_game',
            word_length=game_config.word_length, difficulty=game_config.difficulty.value,
            has_challenge=bool(challenge), seed=seed
        )

        game_id = game_service.create_game(
            game_config, challenge=challenge, seed=seed, game_number=parse_game_number(data.get('game'))
        )
        session = game_service.get_session(game_id)

        if challenge and not session.challenge:
            game_logger.log_game_event(game_id, 'challenge_rejected', get_user_identity()['user_ip'])

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(session.to_state())
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=session.word_length, max_guesses=session.max_guesses
        )

        return jsonify(response_data)

    except WordPoolExhaustedError as e:
        game_logger.log_error(request, e, 'new_game')
        return jsonify({'success': False, 'error': str(e)}), 500

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@with_session
def get_state(session):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', session.game_id)

    response_data = {
        'success': True,
        'state': asdict(session.to_state(include_emoji=True))
    }

    game_logger.log_server_response(request, 'get_state', True, response_data, session.game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@with_session
def press_key(session):
    """Apply a single keystroke (a letter, Backspace or Enter)."""
    data = _json_body()
    key = data.get('key')
    if not isinstance(key, str) or not key:
        error_response = {
            'success': False,
            'error': 'Key is required'
        }
        game_logger.log_server_response(request, 'key', False, error_response, session.game_id)
        return jsonify(error_response), 400

    try:
        guesses_before = len(session.guesses)
        pending_guess = session.current_guess
        session.on_key(key)

        if len(session.guesses) > guesses_before:
            game_logger.log_user_action(request, 'submit_guess', session.game_id, guess=pending_guess)
            _log_game_over(session, pending_guess)

        response_data = {
            'success': True,
            'state': asdict(session.to_state(include_emoji=True))
        }
        game_logger.log_server_response(
            request, 'key', True, response_data, session.game_id,
            key=key, hint=session.hint, phase=session.phase.value
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key', session.game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key', False, error_response, session.game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@with_session
def make_guess(session):
    """Submit a whole guess for validation and evaluation."""
    try:
        data = _json_body()
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, session.game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', session.game_id, guess=guess)

        accepted, reason = session.submit_guess(guess)
        if not accepted:
            error_response = {
                'success': False,
                'error': reason,
                'state': asdict(session.to_state())
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, session.game_id,
                validation_error=reason, attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': asdict(session.to_state(include_emoji=True))
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, session.game_id,
            guess=guess, guesses_used=len(session.guesses), phase=session.phase.value
        )
        _log_game_over(session, guess)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', session.game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, session.game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/next', methods=['POST'])
@with_session
def next_game(session):
    """Start the next game within the same session."""
    try:
        data = _json_body()
        game_logger.log_user_action(request, 'next_game', session.game_id, word_length=data.get('word_length'))

        session.new_game(data.get('word_length'))

        response_data = {
            'success': True,
            'state': asdict(session.to_state())
        }
        game_logger.log_server_response(
            request, 'next_game', True, response_data, session.game_id, game_number=session.game_number
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'next_game', session.game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'next_game', False, error_response, session.game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/challenge', methods=['GET'])
@with_session
def get_challenge(session):
    """Return a shareable link for the current puzzle."""
    game_logger.log_user_action(request, 'get_challenge', session.game_id)

    response_data = {
        'success': True,
        'challenge_url': session.share_url(),
        'seeded': bool(session.seed)
    }
    game_logger.log_server_response(request, 'get_challenge', True, response_data, session.game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/share', methods=['POST'])
@with_session
def share(session):
    """
    Build the share body for the client to publish.

    The client is the clipboard here, so the collected body is reported as
    copied and the matching hint is returned in the state.
    """
    data = _json_body()
    kind = data.get('kind', 'result')

    if kind == 'result' and not session.is_over:
        error_response = {
            'success': False,
            'error': 'Results can only be shared once the game is over'
        }
        game_logger.log_server_response(request, 'share', False, error_response, session.game_id)
        return jsonify(error_response), 400

    game_logger.log_user_action(request, 'share', session.game_id, kind=kind)

    published = []

    def publish(body):
        published.append(body)
        return PublishOutcome.COPIED

    if kind == 'result':
        session.share_result(publish)
    else:
        session.share_challenge(publish)

    response_data = {
        'success': True,
        'body': published[0] if published else '',
        'state': asdict(session.to_state(include_emoji=True))
    }
    game_logger.log_server_response(request, 'share', True, response_data, session.game_id, kind=kind)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', get_user_identity()['user_ip'])

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_games': len(game_service.games) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
