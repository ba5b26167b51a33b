"""
Service Decorators

Contains decorators that resolve the round service for HTTP and WebSocket
handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_round_service(f):
    """
    Decorator for HTTP endpoints that need the round service.

    Responds with 500 when the service has not been initialized, otherwise
    passes it to the endpoint as the round_service keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.round_service import get_round_service

        round_service = get_round_service()
        if not round_service:
            return jsonify({
                'success': False,
                'error': 'Round service unavailable'
            }), 500

        kwargs['round_service'] = round_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_round_required(f):
    """Decorator for WebSocket events that carry a round_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.round_service import get_round_service

        round_service = get_round_service()
        if not round_service:
            emit('error', {'error': 'Round service unavailable'})
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        round_id = data.get('round_id')
        if not round_id:
            emit('error', {'error': 'Round ID is required'})
            return

        kwargs['round_service'] = round_service
        kwargs['round_id'] = round_id
        return f(data, *args[1:], **kwargs)

    return decorated_function
