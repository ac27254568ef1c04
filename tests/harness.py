"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is reachable at DATABASE__URL with migrations applied.
Settings are loaded from environment variables (configure via .env or export).
"""

from uuid import UUID

import pytest
import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from askit.domain.value import UserId
from askit.interface.api.app import create_app
from askit.persistence.repository.inmemory import InMemoryStore
from askit.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Assumes docker services already running when persistence is unmocked

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything in memory, no docker needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_ask_question(unit_env):
            service = await unit_env.get(QuestionService)
            question = await service.create(author, "Title", "Body", ["python"])
            assert question.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture():
    """Factory for HTTP client fixtures used by E2E tests.

    The app runs on an in-memory test container. The client is entered as a
    context manager so the app lifespan runs and ``client.portal`` is available
    for reaching into the container from sync tests.

    Usage:
        client = create_client_fixture()

        def test_health(client):
            assert client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _client():
        container = build_test_container(None, FastapiProvider())
        app = create_app(container)
        with TestClient(app) as client:
            yield client

    return _client


def update_user(client: TestClient, user_id: str, **changes) -> None:
    """Overwrite stored fields of a user, e.g. to seed reputation or roles."""

    async def _update():
        store = await client.app.state.dishka_container.get(InMemoryStore)
        uid = UserId(UUID(user_id))
        store.users[uid] = store.users[uid].model_copy(update=changes)

    client.portal.call(_update)


def register(client: TestClient, username: str, password: str = "Secret123") -> dict:
    """Register a user over HTTP and return ``{id, token, headers}``."""
    response = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    # Requests pick their user from the Authorization header, not the cookie jar
    client.cookies.clear()
    return {
        "id": data["user"]["id"],
        "token": data["token"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
    }
