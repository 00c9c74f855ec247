# Centralized pytest configuration file (fixtures, hooks, plugins, etc.)
from pathlib import Path

import pytest
from asgi_lifespan import LifespanManager
from httpx import AsyncClient, ASGITransport

from urlshort.app import create_app
from urlshort.chain import build_chain
from urlshort.config import PathURLEntry, Settings

FIXTURES = Path(__file__).parent / 'fixtures'


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv('URLSHORT_YAML', raising=False)
    monkeypatch.delenv('URLSHORT_JSON', raising=False)


@pytest.fixture
def yaml_file() -> Path:
    return FIXTURES / 'redirects.yaml'


@pytest.fixture
def json_file() -> Path:
    return FIXTURES / 'redirects.json'


@pytest.fixture
def chain_settings(yaml_file, json_file) -> Settings:
    return Settings(
        redirects=[
            PathURLEntry(path='/static', url='https://example.com/static'),
            PathURLEntry(path='/shared', url='https://example.com/from-static'),
        ],
        yaml_path=str(yaml_file),
        json_path=str(json_file),
    )


@pytest.fixture
async def redirect_client(chain_settings):
    """Client for the app with all three redirect stages configured"""
    app = create_app(build_chain(chain_settings))
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(
                transport=transport,
                base_url="http://urlshort") as client:
            yield client
