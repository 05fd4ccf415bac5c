import pytest

from rfapi import ApiContext, create_app
from rfapi.config import Config


@pytest.fixture
def ctx():
    return ApiContext()


@pytest.fixture
def app(ctx):
    app = create_app(Config(), context=ctx)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
