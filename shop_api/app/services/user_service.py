"""
Business logic for users.

Passwords are hashed with ``core.security.hash_password`` before the
user is stored.  Users read back from the database are mapped onto
``UserRead``, which has no password field, so the digest never leaves
this module.
"""

import logging
from typing import List

from ..core.db import USERS, Repository
from ..core.security import hash_password
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Service for working with users."""

    def __init__(self, database) -> None:
        self.users = Repository(database[USERS], entity="User")

    async def create_user(self, data: UserCreate) -> UserRead:
        """Hash the password, store the user and return it without credentials."""
        logger.info("Registering user %s", data.username)
        user_id = await self.users.insert_one(
            {
                "username": data.username,
                "password": hash_password(data.password),
                "email": data.email,
            }
        )
        return UserRead(id=user_id, username=data.username, email=data.email)

    async def list_users(self, page: int = 1, limit: int = 10) -> List[UserRead]:
        """Return one page of users.  Pages are numbered from 1."""
        docs = await self.users.find_all(skip=(page - 1) * limit, limit=limit)
        return [
            UserRead(id=doc["id"], username=doc.get("username", ""), email=doc.get("email", ""))
            for doc in docs
        ]
