"""User repository for database operations"""

from typing import List, Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from primekart.entities.base import utc_now
from primekart.entities.user import User

from .base import BaseRepository


class EmailAlreadyRegistered(Exception):
    """Raised when the unique email index rejects an insert."""


class UserRepository(BaseRepository[User]):
    """Repository for user entities"""

    def __init__(self, db: Database):
        super().__init__(db, "users", User)

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)"""
        return self.find_one({"email": email.strip().lower()})

    def create_user(self, name: str, email: str, password_hash: str, role: str = "user") -> User:
        """Create a new user; raises EmailAlreadyRegistered on a duplicate email"""
        user = User(
            name=name,
            email=email.strip().lower(),
            password=password_hash,
            role=role,
            created_at=utc_now(),
        )
        try:
            return self.insert_one(user)
        except DuplicateKeyError as exc:
            raise EmailAlreadyRegistered(user.email) from exc

    def update_profile(self, user_id: str, updates: dict) -> Optional[User]:
        """Update a user's profile fields"""
        updates["updated_at"] = utc_now()
        return self.update_one(user_id, updates)

    def set_role(self, email: str, role: str) -> bool:
        """Set a user's role by email. Returns True if a user matched."""
        result = self.collection.update_one(
            {"email": email.strip().lower()},
            {"$set": {"role": role, "updated_at": utc_now()}},
        )
        return result.matched_count > 0

    def list_all(self) -> List[User]:
        """List all users sorted by creation date"""
        return self.find_many({}, sort=[("created_at", -1)])
