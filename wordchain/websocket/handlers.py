"""
WebSocket Event Handlers

Handles all WebSocket events for a browser client hosting a match:
word submissions, restarts, mode switches and live clock updates.
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit, join_room, leave_room
from ..config.game_settings import GAME_MODES
from ..services.game_service import get_game_service
from ..services.scheduler import game_room, schedule_turn_clock
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def _require_game(data):
        """Return (game_service, game_id) or emit an error and return (None, None)."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return None, None

        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return None, None

        if game_service.get_game_state(game_id) is None:
            emit('error', {'error': 'Game not found'})
            return None, None

        return game_service, game_id

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        emit('connected', {'sid': request.sid})

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a match room for real-time updates."""
        game_service, game_id = _require_game(data)
        if not game_id:
            return

        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        })
        schedule_turn_clock(current_app, socketio, game_id)

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a match room."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('submit_word')
    def handle_submit_word(data):
        """Submit a word via WebSocket."""
        game_service, game_id = _require_game(data)
        if not game_id:
            return

        word = data.get('word')
        if not isinstance(word, str):
            emit('error', {'error': 'Word is required'})
            return

        game_logger.log_user_action(request, 'submit_word', game_id, word=word, transport='websocket')

        result = game_service.submit_word(game_id, word)
        emit('word_result', {'success': True, 'result': asdict(result)})

        if result.accepted:
            broadcast_game_state_update(game_id, socketio)
            if result.state.game_over:
                socketio.emit('game_over', {
                    'game_id': game_id,
                    'reason': result.state.end_reason,
                    'state': asdict(result.state)
                }, room=game_room(game_id))
            else:
                schedule_turn_clock(current_app, socketio, game_id)

    @socketio.on('restart_game')
    def handle_restart_game(data):
        """Restart the match under its current mode."""
        game_service, game_id = _require_game(data)
        if not game_id:
            return

        game_logger.log_user_action(request, 'restart', game_id, transport='websocket')
        game_service.restart(game_id)
        broadcast_game_state_update(game_id, socketio)
        schedule_turn_clock(current_app, socketio, game_id)

    @socketio.on('set_mode')
    def handle_set_mode(data):
        """Switch mode; the match restarts from scratch."""
        game_service, game_id = _require_game(data)
        if not game_id:
            return

        mode = data.get('mode')
        if mode not in GAME_MODES:
            emit('error', {'error': f'Invalid game mode. Must be one of: {", ".join(GAME_MODES)}'})
            return

        game_logger.log_user_action(
            request, 'set_mode', game_id,
            mode=mode, time_limit=data.get('time_limit'), transport='websocket'
        )
        game_service.set_mode(game_id, mode, data.get('time_limit'))
        broadcast_game_state_update(game_id, socketio)
        schedule_turn_clock(current_app, socketio, game_id)


def broadcast_game_state_update(game_id, socketio):
    """Broadcast game state update to every client in the match room."""
    game_service = get_game_service()
    if not game_service:
        return

    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('game_state_update', {
        'success': True,
        'state': asdict(state)
    }, room=game_room(game_id))
