"""
Round Controller

Handles all round-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..utils.decorators import require_round_service
from ..utils.game_logger import game_logger
from ..utils.helpers import loggable_word

round_bp = Blueprint('round', __name__)


def _not_found(action, round_id):
    error_response = {
        'success': False,
        'error': 'Round not found'
    }
    game_logger.log_server_response(request, action, False, error_response, round_id)
    return jsonify(error_response), 404


def _server_error(action, error, round_id=None):
    game_logger.log_error(request, error, action, round_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, round_id)
    return jsonify(error_response), 500


@round_bp.route('/new_round', methods=['POST'])
@require_round_service
def new_round(round_service):
    """Create a new round session."""
    try:
        game_logger.log_user_action(request, 'new_round')

        round_id = round_service.create_round()
        state = round_service.get_round_state(round_id)

        response_data = {
            'success': True,
            'round_id': round_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_round', True, response_data, round_id,
            root_word=state.root_word
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_round', e)


@round_bp.route('/round/<round_id>/state', methods=['GET'])
@require_round_service
def get_state(round_id, round_service):
    """Get current round state."""
    try:
        game_logger.log_user_action(request, 'get_state', round_id)

        state = round_service.get_round_state(round_id)
        if state is None:
            return _not_found('get_state', round_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, round_id,
            score=state.score, word_count=state.word_count
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, round_id)


@round_bp.route('/round/<round_id>/submit', methods=['POST'])
@require_round_service
def submit_word(round_id, round_service):
    """Submit a word to the round. Rejections are reported, not failed."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('word'), str):
            error_response = {
                'success': False,
                'error': 'Word is required'
            }
            game_logger.log_server_response(request, 'submit_word', False, error_response, round_id)
            return jsonify(error_response), 400

        word = data['word']

        game_logger.log_user_action(
            request, 'submit_word', round_id,
            word=loggable_word(word), word_length=len(word)
        )

        submission = round_service.submit_word_with_state(round_id, word)
        if submission is None:
            return _not_found('submit_word', round_id)

        result, state = submission

        response_data = {
            'success': True,
            'accepted': result.accepted,
            'result': result.to_dict(),
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_word', True, response_data, round_id,
            word=loggable_word(result.word), status=result.status.value
        )

        if result.accepted:
            game_logger.log_game_event(
                round_id, 'word_accepted', request.remote_addr,
                word=result.word, score=result.score, root_word=state.root_word
            )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('submit_word', e, round_id)


@round_bp.route('/round/<round_id>/reset', methods=['POST'])
@require_round_service
def reset_round(round_id, round_service):
    """Start a new round on an existing round ID."""
    try:
        game_logger.log_user_action(request, 'reset_round', round_id)

        state = round_service.reset_round(round_id)
        if state is None:
            return _not_found('reset_round', round_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset_round', True, response_data, round_id)
        game_logger.log_game_event(
            round_id, 'round_reset', request.remote_addr, root_word=state.root_word
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('reset_round', e, round_id)


@round_bp.route('/round/<round_id>', methods=['DELETE'])
@require_round_service
def delete_round(round_id, round_service):
    """Delete a round session."""
    try:
        game_logger.log_user_action(request, 'delete_round', round_id)

        success = round_service.delete_round(round_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_round', success, response_data, round_id)

        if success:
            game_logger.log_game_event(round_id, 'round_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('delete_round', e, round_id)


@round_bp.route('/health', methods=['GET'])
@require_round_service
def health_check(round_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_rounds': round_service.active_round_count(),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
