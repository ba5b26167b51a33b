import os
import random
import sys
import tempfile

import pytest

# Ensure the server root (containing the `word_scramble` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SERVER_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if SERVER_ROOT not in sys.path:
    sys.path.insert(0, SERVER_ROOT)

# Keep test logs out of the working directory; read when the logger is created
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='word_scramble_logs_'))

from word_scramble import create_app  # noqa: E402
from word_scramble.config import TestingConfig  # noqa: E402
from word_scramble.services.dictionary import WordSetDictionaryChecker  # noqa: E402
from word_scramble.services.round_service import initialize_round_service  # noqa: E402
from word_scramble.services.word_sources import StaticWordListSource  # noqa: E402

KNOWN_WORDS = [
    'silk', 'milk', 'worm', 'work', 'slow', 'owl', 'sow', 'mow', 'row',
    'silo', 'oil', 'so', 'is', 'sworn', 'word',
    'ape', 'pale', 'leap', 'peel', 'lap', 'app', 'apple',
]


@pytest.fixture()
def checker():
    return WordSetDictionaryChecker(KNOWN_WORDS)


@pytest.fixture()
def round_service(checker):
    return initialize_round_service(
        StaticWordListSource(['silkworm']),
        checker,
        rng=random.Random(1234)
    )


@pytest.fixture()
def flask_app(round_service):
    application, _ = create_app(TestingConfig)
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
    if test_client.is_connected():
        test_client.disconnect()
