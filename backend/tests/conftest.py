import os
import random
import sys
import pytest

# Ensure the backend root (containing the `songyear` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from songyear import create_app, socketio
from songyear.errors import UpstreamUnavailable
from songyear.models import Track


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CATALOG_SEARCH_TERM = 'pop'
    CATALOG_RESULT_LIMIT = 10
    CATALOG_COUNTRY = None
    CATALOG_TIMEOUT_SEC = 1
    ITUNES_BASE_URL = 'https://itunes.test'
    DEEZER_BASE_URL = 'https://deezer.test'
    LOG_LEVEL = 'DEBUG'


def make_track(title='Song', year=2000, release_date=None):
    return Track(
        title=title,
        artist=f'{title} Artist',
        album=f'{title} Album',
        cover=f'https://img.test/{title}.jpg',
        preview=f'https://audio.test/{title}.m4a',
        release_date=release_date if release_date is not None else f'{year}-07-23T07:00:00Z',
    )


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, body_error=False):
        self.status_code = status_code
        self._payload = payload
        self._body_error = body_error

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body_error:
            raise ValueError("not json")
        return self._payload


class FakeCatalog:
    """Stands in for the iTunes client; queue up results or errors."""

    def __init__(self, tracks=None):
        self.tracks = list(tracks) if tracks is not None else [make_track()]
        self.error = None
        self.queries = []

    def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.tracks)

    def fail_with(self, status=503):
        self.error = UpstreamUnavailable('iTunes API returned an error', status=status)


@pytest.fixture()
def catalog():
    return FakeCatalog()


@pytest.fixture()
def flask_app(catalog):
    application = create_app(TestConfig, catalog=catalog, rng=random.Random(1234))
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
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
