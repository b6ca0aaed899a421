"""
Game Controller

Handles all game-related HTTP endpoints. Every decision (acceptance,
scoring, transitions) is made by the match engine; this module only
translates HTTP to engine calls and back.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify, current_app
from ..config.game_settings import GAME_MODES, MIN_TIME_LIMIT, MAX_TIME_LIMIT, DEFAULT_TIME_LIMIT
from ..services.game_service import get_game_service
from ..services.scheduler import schedule_turn_clock
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body, optional_flag

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _start_clock(game_id):
    schedule_turn_clock(current_app, current_app.socketio, game_id)


@game_bp.route('/modes', methods=['GET'])
def list_modes():
    """List the built-in game modes."""
    modes = [asdict(mode) for mode in GAME_MODES.values()]
    return jsonify({
        'success': True,
        'modes': modes,
        'time_limit': {
            'min': MIN_TIME_LIMIT,
            'max': MAX_TIME_LIMIT,
            'default': DEFAULT_TIME_LIMIT
        }
    })


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new match."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = get_json_body()
        mode = data.get('mode', current_app.config.get('DEFAULT_MODE', 'klasik'))

        # Validate game mode
        if mode not in GAME_MODES:
            error_response = {
                'success': False,
                'error': f'Invalid game mode. Must be one of: {", ".join(GAME_MODES)}'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        scoring = optional_flag(data, 'scoring')
        seed_opening_word = optional_flag(data, 'seed_opening_word')

        game_logger.log_user_action(
            request, 'new_game',
            mode=mode, time_limit=data.get('time_limit'),
            scoring=scoring, seed_opening_word=seed_opening_word
        )

        game_id = game_service.create_new_game(
            mode,
            time_limit=data.get('time_limit'),
            scoring_enabled=current_app.config.get('SCORING_ENABLED', False) if scoring is None else scoring,
            seed_opening_word=(
                current_app.config.get('SEED_OPENING_WORD', False)
                if seed_opening_word is None else seed_opening_word
            ),
        )
        state = game_service.get_game_state(game_id)
        _start_clock(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            mode=state.mode, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            round=state.round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/word', methods=['POST'])
def submit_word(game_id):
    """Submit a word for the player on turn."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = get_json_body()
        if 'word' not in data or not isinstance(data['word'], str):
            error_response = {
                'success': False,
                'error': 'Word is required'
            }
            game_logger.log_server_response(request, 'submit_word', False, error_response, game_id)
            return jsonify(error_response), 400

        word = data['word']

        game_logger.log_user_action(request, 'submit_word', game_id, word=word)

        result = game_service.submit_word(game_id, word)
        if result is None:
            return _game_not_found('submit_word', game_id)

        if result.accepted:
            _start_clock(game_id)

        # A rejected word is a normal game outcome, not a request error
        response_data = {
            'success': True,
            'result': asdict(result)
        }

        game_logger.log_server_response(
            request, 'submit_word', True, response_data, game_id,
            outcome=result.outcome, reason=result.reason, game_over=result.state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_word', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_word', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/tick', methods=['POST'])
def tick(game_id):
    """Advance the turn clock by one second (client-driven clock only)."""
    if current_app.config.get('SERVER_SIDE_CLOCK', True):
        return jsonify({
            'success': False,
            'error': 'Clock is driven by the server'
        }), 409

    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    result = game_service.tick(game_id)
    if result is None:
        return _game_not_found('tick', game_id)

    response_data = {
        'success': True,
        'tick': asdict(result)
    }
    if result.timed_out:
        state = game_service.get_game_state(game_id)
        response_data['state'] = asdict(state)
        game_logger.log_server_response(request, 'tick', True, response_data, game_id, timed_out=True)

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/mode', methods=['POST'])
def set_mode(game_id):
    """Switch game mode; the match restarts from scratch."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = get_json_body()
        mode = data.get('mode')
        if mode not in GAME_MODES:
            error_response = {
                'success': False,
                'error': f'Invalid game mode. Must be one of: {", ".join(GAME_MODES)}'
            }
            game_logger.log_server_response(request, 'set_mode', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(
            request, 'set_mode', game_id,
            mode=mode, time_limit=data.get('time_limit')
        )

        state = game_service.set_mode(game_id, mode, data.get('time_limit'))
        if state is None:
            return _game_not_found('set_mode', game_id)

        _start_clock(game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'set_mode', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'set_mode', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'set_mode', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
def restart(game_id):
    """Restart the match under its current mode."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'restart', game_id)

    state = game_service.restart(game_id)
    if state is None:
        return _game_not_found('restart', game_id)

    _start_clock(game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(request, 'restart', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/end', methods=['POST'])
def end_game(game_id):
    """Force the match to end."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'end_game', game_id)

    state = game_service.end_game(game_id)
    if state is None:
        return _game_not_found('end_game', game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(request, 'end_game', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Discard a match."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

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
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'dictionary_size': len(game_service.dictionary) if game_service else 0,
            'server_side_clock': current_app.config.get('SERVER_SIDE_CLOCK', True),
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
