import json

import pytest

from wordchain.utils.game_logger import GameLogger, game_logger


class FakeRequest:
    remote_addr = '127.0.0.1'
    endpoint = 'game.submit_word'


@pytest.fixture
def temp_logger(tmp_path):
    logger = GameLogger(str(tmp_path), 'INFO')
    yield logger
    # Point the shared logger back at its own file
    game_logger.logger = game_logger._setup_logger()


def read_entries(logger):
    with open(logger._log_file(), encoding='utf-8') as f:
        return [json.loads(line.rpartition(' | ')[2]) for line in f if line.strip()]


def test_game_events_are_json_entries(temp_logger):
    temp_logger.log_game_event('g1', 'word_rejected', word='xyz', reason='not-in-dictionary')

    entry = read_entries(temp_logger)[0]
    assert entry['event_type'] == 'GAME_EVENT'
    assert entry['action'] == 'word_rejected'
    assert entry['origin']['transport'] == 'engine'
    assert entry['details'] == {'game_id': 'g1', 'word': 'xyz', 'reason': 'not-in-dictionary'}


def test_responses_are_summarized(temp_logger):
    state = {
        'mode': 'klasik', 'round': 2, 'max_rounds': 5, 'current_player': 1,
        'history': [{'word': 'elma', 'player': 1}, {'word': 'araba', 'player': 2}],
        'scores': None, 'game_over': False,
    }
    temp_logger.log_server_response(FakeRequest(), 'get_state', True, {'success': True, 'state': state}, 'g1')

    entry = read_entries(temp_logger)[0]
    assert entry['origin'] == {'client_ip': '127.0.0.1', 'session_id': None, 'transport': 'http'}
    summary = entry['details']['response']['state']
    assert summary['round'] == '2/5'
    assert summary['last_word'] == 'araba'
    assert summary['words_played'] == 2


def test_log_stats_count_rejections(temp_logger):
    temp_logger.log_user_action(FakeRequest(), 'submit_word', 'g1', word='elma')
    temp_logger.log_game_event('g1', 'word_accepted', word='elma')
    temp_logger.log_game_event('g1', 'word_rejected', reason='already-used')
    temp_logger.log_game_event('g1', 'word_rejected', reason='already-used')

    stats = temp_logger.get_log_stats()
    assert stats['total_entries'] == 4
    assert stats['event_types'] == {'CLIENT_ACTION': 1, 'GAME_EVENT': 3}
    assert stats['game_events'] == {'word_accepted': 1, 'word_rejected': 2}
    assert stats['rejections'] == {'already-used': 2}
