import pytest

from leaderboard import create_app
from leaderboard.services.scores import RankingService, ScoreStore


class TestConfig:
    TESTING = True
    APP_ENV = 'test'
    CORS_ORIGINS = ['http://localhost:5173']
    SERVE_CLIENT = False
    CLIENT_DIST_DIR = None


@pytest.fixture()
def store():
    return ScoreStore()


@pytest.fixture()
def ranking(store):
    return RankingService(store)


@pytest.fixture()
def flask_app(store):
    application = create_app(TestConfig, store=store)
    yield application
    store.reset()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def client_dist(tmp_path):
    (tmp_path / 'index.html').write_text('<!doctype html><div id="root"></div>')
    assets = tmp_path / 'assets'
    assets.mkdir()
    (assets / 'app.js').write_text('console.log("leaderboard")')
    return tmp_path
