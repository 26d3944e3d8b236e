import asyncio
import pytest
from uuid import uuid4
from mongomock_motor import AsyncMongoMockClient
from helpers.menu_links import add_link
from models.menu import NewMenuLink


@pytest.fixture(name="db")
def db_fixture():
    client = AsyncMongoMockClient()
    yield client[f"test_{uuid4().hex}"]


@pytest.fixture(name="seed_links")
def seed_links_fixture(db):
    """Insert links synchronously, for tests that drive the app via TestClient."""
    def seed(*links):
        created = []
        for weight, path, name in links:
            created.append(asyncio.run(add_link(db, NewMenuLink(weight=weight, path=path, name=name))))
        return created
    return seed
