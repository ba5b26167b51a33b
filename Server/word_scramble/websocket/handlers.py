"""
WebSocket Event Handlers

Handles WebSocket events so clients receive round updates without polling.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_round_required
from ..utils.game_logger import game_logger
from ..utils.helpers import loggable_word


def round_room(round_id):
    return f"round_{round_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_round')
    @websocket_round_required
    def handle_join_round(data, round_service=None, round_id=None):
        """Join a round room and receive its current state."""
        state = round_service.get_round_state(round_id)
        if state is None:
            emit('error', {'error': 'Round not found'})
            return

        join_room(round_room(round_id))
        game_logger.log_user_action(request, 'join_round', round_id)
        emit('round_state', asdict(state))

    @socketio.on('leave_round')
    @websocket_round_required
    def handle_leave_round(data, round_service=None, round_id=None):
        """Leave a round room."""
        leave_room(round_room(round_id))
        game_logger.log_user_action(request, 'leave_round', round_id)

    @socketio.on('submit_word')
    @websocket_round_required
    def handle_submit_word(data, round_service=None, round_id=None):
        """Submit a word; accepted words are broadcast to the round room."""
        word = data.get('word')
        if not isinstance(word, str):
            emit('error', {'error': 'Word is required'})
            return

        game_logger.log_user_action(request, 'submit_word', round_id, word=loggable_word(word), transport='websocket')

        try:
            result = round_service.submit_word(round_id, word)
        except Exception as e:
            game_logger.log_error(request, e, 'submit_word', round_id)
            emit('error', {'error': str(e)})
            return

        if result is None:
            emit('error', {'error': 'Round not found'})
            return

        emit('word_result', {
            'round_id': round_id,
            'accepted': result.accepted,
            'result': result.to_dict()
        })

        if result.accepted:
            game_logger.log_game_event(
                round_id, 'word_accepted', request.remote_addr,
                word=result.word, score=result.score
            )
            broadcast_round_state_update(round_id, socketio)

    @socketio.on('reset_round')
    @websocket_round_required
    def handle_reset_round(data, round_service=None, round_id=None):
        """Start a new round and broadcast it to the room."""
        state = round_service.reset_round(round_id)
        if state is None:
            emit('error', {'error': 'Round not found'})
            return

        game_logger.log_game_event(
            round_id, 'round_reset', request.remote_addr, root_word=state.root_word
        )
        broadcast_round_state_update(round_id, socketio)


def broadcast_round_state_update(round_id, socketio):
    """Send the latest state of a round to everyone in its room."""
    from ..services.round_service import get_round_service

    round_service = get_round_service()
    if not round_service:
        return

    state = round_service.get_round_state(round_id)
    if state is None:
        return

    socketio.emit('round_state_update', asdict(state), room=round_room(round_id))
