import pytest

from duecalc import create_app


@pytest.fixture
def app():
    """Application built with the testing configuration"""
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
