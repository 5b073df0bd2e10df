"""In-memory user repository for testing."""

from typing import Optional, Sequence

from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import Email, UserId
from qna.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._users = db.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
