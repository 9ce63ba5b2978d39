"""Database index management for MongoDB collections."""

import logging

from pymongo.database import Database
from pymongo.errors import OperationFailure

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database) -> None:
    """
    Ensure all required indexes exist.

    Called on application startup. The unique email index is what keeps two
    concurrent registrations for the same address from both succeeding.
    """
    _ensure_users_indexes(db)
    _ensure_orders_indexes(db)
    logger.info("Database indexes ensured successfully")


def _ensure_users_indexes(db: Database) -> None:
    """Create indexes for users collection."""
    try:
        db.users.create_index([("email", 1)], unique=True, name="email_unique")
        logger.debug("Created index: email_unique")
    except OperationFailure as e:
        # Index may already exist with different options
        if "already exists" not in str(e):
            logger.warning(f"Failed to create email_unique index: {e}")


def _ensure_orders_indexes(db: Database) -> None:
    """Create indexes for orders collection."""
    collection = db.orders

    # Per-user listing filters on the customer snapshot email
    try:
        collection.create_index(
            [("customer.email", 1)],
            name="customer_email_idx",
        )
        logger.debug("Created index: customer_email_idx")
    except OperationFailure as e:
        if "already exists" not in str(e):
            logger.warning(f"Failed to create customer_email_idx index: {e}")

    # Admin listing sorts newest first
    try:
        collection.create_index([("created_at", -1)], name="created_at_idx")
        logger.debug("Created index: created_at_idx")
    except OperationFailure as e:
        if "already exists" not in str(e):
            logger.warning(f"Failed to create created_at_idx index: {e}")
