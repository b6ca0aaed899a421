import os
import sys
import pytest

# Ensure the project root (containing the `wordchain` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wordchain import create_app
from wordchain.config import TestingConfig
from wordchain.config.game_settings import CHAR_EQUIVALENTS
from wordchain.services.dictionary_service import Dictionary
from wordchain.services.game_service import initialize_game_service


class TestConfig(TestingConfig):
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SERVER_SIDE_CLOCK = False


@pytest.fixture()
def turkish_dictionary():
    return Dictionary(
        ['elma', 'araba', 'ağaç', 'çiçek', 'ışık', 'şeker', 'kalem', 'mum', 'kuş', 'saç', 'şac'],
        CHAR_EQUIVALENTS,
    )


@pytest.fixture()
def game_service():
    return initialize_game_service()


@pytest.fixture()
def flask_app(game_service):
    application, _ = create_app(TestConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    try:
        test_client.disconnect()
    except Exception:
        pass
