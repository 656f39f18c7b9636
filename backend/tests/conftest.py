import os
import sys
import pytest

# Ensure the backend root (containing the `trivia` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from trivia import create_app, socketio
from trivia.services.game import GameSession


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    HOST = '127.0.0.1'
    PORT = 3000
    SOCKETIO_NAMESPACE = '/'
    CORS_ORIGINS = '*'
    PLAYER_PAGE_URL = None
    PUBLIC_BASE_URL = None
    MAX_NAME_LENGTH = 20
    QR_BOX_SIZE = 2
    QR_BORDER = 1
    QR_FILL_COLOR = 'black'
    QR_BACK_COLOR = 'white'


class RecordingFanout:
    """Collects outbound messages instead of sending them."""

    def __init__(self):
        self.sent = []
        self.players_room = set()

    def to_connection(self, sid, event, payload=None):
        self.sent.append(('one', sid, event, payload))

    def to_players(self, event, payload=None):
        self.sent.append(('players', None, event, payload))

    def to_all(self, event, payload=None):
        self.sent.append(('all', None, event, payload))

    def add_to_players(self, sid):
        self.players_room.add(sid)

    def events(self, event):
        return [m for m in self.sent if m[2] == event]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def fanout():
    return RecordingFanout()


@pytest.fixture()
def game(fanout):
    return GameSession(fanout)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def connect(flask_app):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    clients = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/'
        )
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        try:
            if test_client.is_connected('/'):
                test_client.disconnect(namespace='/')
        except Exception:
            pass
