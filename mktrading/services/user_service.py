"""
User Service - Login accounts
"""
from typing import Optional
import logging
from sqlalchemy import select, insert

from mktrading.core.database import Store
from mktrading.core.exceptions import ValidationError
from mktrading.core.security import get_password_hash, verify_password
from mktrading.models import User

logger = logging.getLogger(__name__)

users = User.__table__


class UserService:
    def __init__(self, store: Store):
        self.store = store

    def get_by_username(self, username: str) -> Optional[dict]:
        return self.store.first(select(users).where(users.c.username == username))

    def create(self, username: str, password: str) -> dict:
        if not username or not password:
            raise ValidationError("username and password required")
        row = self.store.first(
            insert(users).values(
                username=username,
                hashed_password=get_password_hash(password)
            ).returning(users.c.id)
        )
        return {"id": row["id"], "username": username}

    def authenticate(self, username: Optional[str], password: Optional[str]) -> Optional[dict]:
        """Return the user for a matching username/password pair, else None"""
        if not username or password is None:
            return None
        user = self.get_by_username(username)
        if not user or not verify_password(password, user["hashed_password"]):
            logger.warning(f"Failed login attempt for username '{username}'")
            return None
        return {"id": user["id"], "username": user["username"]}

    def ensure_user(self, username: str, password: str) -> bool:
        """Create the user unless it already exists; True if created"""
        if self.get_by_username(username):
            return False
        self.create(username, password)
        logger.info(f"Created login user '{username}'")
        return True
