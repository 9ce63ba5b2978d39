"""Password hashing using bcrypt."""

import bcrypt


class PasswordHasher:
    """Salted one-way hashing with a configurable bcrypt work factor."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the password matches. Malformed hashes never match."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            # Invalid hash format
            return False
