import os
import sys
import pytest

# Ensure the backend root (containing the `menuboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from menuboard import create_app, socketio
from menuboard.services.menu import MenuStore, SessionRegistry


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    HTTP_ADDRESS = '127.0.0.1:0'
    SESSION_TOKEN_LENGTH = 8
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def store():
    return MenuStore()


@pytest.fixture()
def registry():
    return SessionRegistry()


@pytest.fixture()
def flask_app(store, registry):
    application = create_app(TestConfig, menu_store=store, session_registry=registry)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
