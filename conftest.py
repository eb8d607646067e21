"""
Root conftest for the pytest test suite.

This file contains the fixtures shared across the test suite.

Database-backed tests get a fresh, isolated in-memory SQLite database per
test through `initialize_test_db`. Pure mapping and parsing tests do not
request it and never touch Tortoise.

Key Fixtures:
- `anyio_backend`: Specifies the asyncio backend.
- `initialize_test_db`: Creates a fresh DB schema with seed agents, locations and users.
- `app_for_testing`: Provides the FastAPI application with its production
  lifespan disabled so `initialize_test_db` manages the test DB.
- `client`: Provides a non-authenticated TestClient for tests that never touch the DB.
- `async_client`: Provides a non-authenticated httpx.AsyncClient on the test's event loop.
- `agent_client`: Provides an AsyncClient authenticated as the user linked to agent ALPHA1.
- `admin_client`: Provides an AsyncClient authenticated as an admin.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Generator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from tortoise import Tortoise

from discoveries.features.agents.models import Agent
from discoveries.features.auth.models import User
from discoveries.features.auth.security import get_password_hash
from discoveries.features.locations.models import Location
from discoveries.main import MODEL_MODULES

from discoveries.main import app as actual_app

AGENT_USERNAME = "alphafixture"
ADMIN_USERNAME = "adminfixture"
FIXTURE_PASSWORD = "password123"


async def add_seed_data():
    alpha = await Agent.create(call_sign="ALPHA1", given_name="Ada", family_name="Lovelace")
    bravo = await Agent.create(call_sign="BRAVO2", given_name="Alan", family_name="Turing")
    london = await Location.create(site_name="Safe House", location="London", time_zone="Europe/London")
    tokyo = await Location.create(site_name="Embassy", location="Tokyo", time_zone="Asia/Tokyo")

    await User.create(
        username=AGENT_USERNAME,
        hashed_password=get_password_hash(FIXTURE_PASSWORD),
        role="agent",
        agent=alpha,
    )
    await User.create(
        username=ADMIN_USERNAME,
        hashed_password=get_password_hash(FIXTURE_PASSWORD),
        role="admin",
    )
    return {"alpha": alpha, "bravo": bravo, "london": london, "tokyo": tokyo}


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"


@pytest_asyncio.fixture(scope="function")
async def initialize_test_db() -> AsyncGenerator[dict, None]:
    """
    Creates a fresh in-memory database and schema for one test and tears it
    down afterwards. Yields the seeded agents and locations by short name.
    """
    test_db_config = {
        "connections": {"default": "sqlite://:memory:"},
        "apps": {
            "models": {
                "models": MODEL_MODULES,
                "default_connection": "default",
            }
        },
        "use_tz": True,
        "timezone": "UTC",
    }
    await Tortoise.init(config=test_db_config)
    await Tortoise.generate_schemas()
    seeded = await add_seed_data()

    yield seeded

    await Tortoise.close_connections()


@pytest.fixture(scope="function")
def app_for_testing() -> Generator[FastAPI, Any, None]:
    """
    Provides the FastAPI application with its production lifespan manager
    disabled, and clears any dependency overrides a test installed.
    """
    original_lifespan = actual_app.router.lifespan_context

    @asynccontextmanager
    async def dummy_lifespan(app: FastAPI):
        yield

    actual_app.router.lifespan_context = dummy_lifespan

    yield actual_app

    actual_app.router.lifespan_context = original_lifespan
    actual_app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(app_for_testing: FastAPI) -> Generator[TestClient, Any, None]:
    """
    Provides a non-authenticated starlette TestClient.
    """
    with TestClient(app_for_testing) as tc:
        yield tc


@pytest_asyncio.fixture(scope="function")
async def async_client(
    app_for_testing: FastAPI, initialize_test_db: dict
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Provides a non-authenticated client that runs the app on the test's own
    event loop, so requests share the Tortoise connection opened by
    `initialize_test_db`.
    """
    transport = httpx.ASGITransport(app=app_for_testing)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


async def _authenticate(ac: httpx.AsyncClient, username: str) -> httpx.AsyncClient:
    response = await ac.post(
        "/api/v1/auth/token",
        data={"username": username, "password": FIXTURE_PASSWORD},
    )
    if response.status_code != 200:
        raise Exception(f"Authentication failed for {username}")

    ac.headers["Authorization"] = f"Bearer {response.json()['access_token']}"
    return ac


@pytest_asyncio.fixture(scope="function")
async def agent_client(async_client: httpx.AsyncClient) -> httpx.AsyncClient:
    """
    Provides a client authenticated as the user linked to agent ALPHA1.
    """
    return await _authenticate(async_client, AGENT_USERNAME)


@pytest_asyncio.fixture(scope="function")
async def admin_client(async_client: httpx.AsyncClient) -> httpx.AsyncClient:
    """
    Provides a client authenticated as an admin user.
    """
    return await _authenticate(async_client, ADMIN_USERNAME)
