"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from hubgate.events.publisher import InMemoryEventPublisher
from hubgate.integrations.config import parse_config


@pytest.fixture
def github_config():
    """Two GitHub apps on github.com, secrets s1 and s2."""
    return parse_config(
        {
            "integrations": {
                "github": [
                    {
                        "host": "github.com",
                        "apps": [
                            {"app_id": 1, "webhook_secret": "s1"},
                            {"app_id": 2, "webhook_secret": "s2"},
                        ],
                    }
                ]
            }
        }
    )

@pytest.fixture
def publisher():
    return InMemoryEventPublisher()

@pytest.fixture
def app(github_config, publisher):
    """Create a test application instance with in-memory publishing."""
    from hubgate.main import create_app

    return create_app(config=github_config, publisher=publisher)

@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def ingress_url() -> str:
    """Path of the GitHub webhook ingress route."""
    return "/api/v1/events/http/github"
