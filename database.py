from typing import Optional
from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from settings import Settings, settings as default_settings, logger


def create_client(settings: Optional[Settings] = None) -> AsyncMongoClient:
    """Create the MongoDB client for this process (connects lazily)."""
    settings = settings or default_settings
    client = AsyncMongoClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
    )
    logger.info("MongoDB client created", extra={
        "database": settings.database_name
    })
    return client


def get_database(request: Request) -> AsyncDatabase:
    """Resolve the configured database from the application's client."""
    client: AsyncMongoClient = request.app.state.mongo_client
    return client[default_settings.database_name]
