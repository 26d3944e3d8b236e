"""
Feature: MongoDB connection
  As the application
  I want one client per process, owned by the app lifespan
  So that handlers can reach the configured database

Scenario: Application startup creates the client
  When the application starts
  Then a MongoDB client is stored on the app state
  And get_database resolves the configured database from it

Scenario: Store is unreachable
  Given the MongoDB server cannot be reached
  When listing menu links
  Then a server selection timeout error propagates
"""

import pytest
from types import SimpleNamespace
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from pymongo import AsyncMongoClient
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from database import create_client, get_database
from helpers.menu_links import list_links
from main import app
from settings import Settings, settings


def test_lifespan_owns_client():
    with TestClient(app) as client:
        response = client.get("/health")
        assert response.status_code == 200
        assert isinstance(app.state.mongo_client, AsyncMongoClient)


def test_get_database_uses_configured_name():
    mongo_client = AsyncMongoMockClient()
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(mongo_client=mongo_client)))

    db = get_database(request)

    assert db.name == settings.database_name


@pytest.mark.asyncio
async def test_unreachable_store_raises():
    unreachable = Settings(mongodb_url="mongodb://127.0.0.1:1/", server_selection_timeout_ms=100)
    client = create_client(unreachable)
    try:
        with pytest.raises(ServerSelectionTimeoutError) as exc_info:
            await list_links(client[unreachable.database_name])
        assert isinstance(exc_info.value, ConnectionFailure)
    finally:
        await client.close()
