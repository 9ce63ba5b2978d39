"""Liveness and database health endpoints."""

import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database
from pymongo.errors import PyMongoError

from primekart.database.mongo import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(db: Database = Depends(get_db)):
    try:
        db.command("ping")
        database = "connected"
    except PyMongoError as e:
        logger.warning("Database ping failed: %s", e)
        database = "unavailable"
    return {"status": "ok", "database": database}
