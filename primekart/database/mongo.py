from __future__ import annotations

"""
MongoDB connection helpers.

The client is created once by the application lifespan and the database
handle lives on ``app.state``; request handlers receive it through ``get_db``.
"""

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from primekart.config import Settings


def create_client(settings: Settings) -> MongoClient:
    return MongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        timeoutMS=settings.MONGODB_TIMEOUT_MS,
    )


def get_database(client: MongoClient, settings: Settings) -> Database:
    return client[settings.MONGODB_DB_NAME]


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the database bound to the running app."""
    return request.app.state.db
