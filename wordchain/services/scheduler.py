"""Background ticker that drives the turn clock of timed matches."""

import threading
from dataclasses import asdict
from typing import Set, Tuple

from ..utils.game_logger import game_logger
from .game_service import get_game_service


_scheduled_clock_keys: Set[Tuple[str, int]] = set()
_scheduled_clock_lock = threading.Lock()


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def _claim_clock_key(key: Tuple[str, int]) -> bool:
    with _scheduled_clock_lock:
        if key in _scheduled_clock_keys:
            return False
        _scheduled_clock_keys.add(key)
        return True


def _release_clock_key(key: Tuple[str, int]) -> None:
    with _scheduled_clock_lock:
        _scheduled_clock_keys.discard(key)


def schedule_turn_clock(app, socketio, game_id: str) -> None:
    """Start ticking the current turn's countdown for the given game.

    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - No-ops when clients drive the clock (SERVER_SIDE_CLOCK off)
    - Ensures a single ticker per (game_id, clock generation)
    - Stops as soon as the countdown is disarmed or replaced by a newer one
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return
    if not app.config.get('SERVER_SIDE_CLOCK', True):
        return

    game_service = get_game_service()
    if not game_service:
        return

    generation = game_service.clock_generation(game_id)
    if generation is None:
        return

    key = (game_id, generation)
    if not _claim_clock_key(key):
        game_logger.logger.info(f"[clock-skip] game={game_id} generation={generation} already scheduled")
        return

    interval = float(app.config.get('CLOCK_TICK_SECONDS', 1))
    game_logger.logger.info(f"[clock-set] game={game_id} generation={generation} interval={interval}s")

    def _worker():
        try:
            while True:
                socketio.sleep(interval)
                service = get_game_service()
                result = service.tick_if_current(game_id, generation) if service else None
                if result is None:
                    game_logger.logger.info(f"[clock-stop] game={game_id} generation={generation}")
                    return

                socketio.emit('clock_tick', {'game_id': game_id, **asdict(result)}, room=game_room(game_id))

                if result.timed_out:
                    state = service.get_game_state(game_id)
                    socketio.emit('game_over', {
                        'game_id': game_id,
                        'reason': 'timeout',
                        'message': result.message,
                        'state': asdict(state) if state else None,
                    }, room=game_room(game_id))
                    return
        finally:
            _release_clock_key(key)

    socketio.start_background_task(_worker)
