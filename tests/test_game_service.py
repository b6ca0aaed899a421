import threading
import time

import pytest

from wordchain.services.game_service import GameService


@pytest.fixture()
def service():
    return GameService()


def test_create_game_with_custom_limit(service):
    game_id = service.create_new_game('zamanli', time_limit='40')
    state = service.get_game_state(game_id)
    assert state.mode == 'zamanli'
    assert state.time_limit == 40
    assert service.clock_generation(game_id) is not None


def test_unknown_mode_and_game(service):
    with pytest.raises(ValueError):
        service.create_new_game('blitz')
    assert service.get_game_state('missing') is None
    assert service.submit_word('missing', 'elma') is None
    assert service.clock_generation('missing') is None


def test_tick_if_current_ignores_stale_generation(service):
    game_id = service.create_new_game('zamanli')
    generation = service.clock_generation(game_id)

    assert service.tick_if_current(game_id, generation).remaining_seconds == 14

    service.restart(game_id)
    assert service.tick_if_current(game_id, generation) is None
    assert service.clock_generation(game_id) == generation + 1


def test_long_input_does_not_block_other_games(service):
    busy = service.create_new_game()
    other = service.create_new_game()

    worker = threading.Thread(target=service.submit_word, args=(busy, 'c' * 40))
    started = time.perf_counter()
    worker.start()
    assert service.get_game_state(other) is not None
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert time.perf_counter() - started < 0.5
    result = service.submit_word(busy, 'c' * 40)
    assert result.reason == 'not-in-dictionary'


def test_delete_game_disarms_clock(service):
    game_id = service.create_new_game('zamanli')
    engine = service.games[game_id]
    assert service.delete_game(game_id) is True
    assert engine.clock.armed is False
    assert service.delete_game(game_id) is False
