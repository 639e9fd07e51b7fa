"""
Users API Backend — In-Memory User Store
==========================================

What:  The ordered, process-lifetime collection of User records.
How:   A plain list wrapped in a small class. One UserStore is built by the
       application factory, attached to `app.state.store`, and handed to route
       handlers through the `get_user_store` dependency.
Who:   Read and mutated only by UserService.
When:  Constructed once per application instance; discarded on shutdown.

Lookup:
    Linear scan, first match wins. Ids are unique in practice, and the
    collection is expected to stay small.

Locking:
    `lock` is a re-entrant lock. The service holds it around every
    read-modify-write sequence (find + mutate, max + append, index + remove).
"""

import logging
import threading
from typing import Iterable, Iterator, List, Optional

from fastapi import Request

from app.models.user import User

logger = logging.getLogger(__name__)

# Records present when the service starts
SEED_USERS = (
    (1, "John Doe", "john@example.com"),
    (2, "Jane Smith", "jane@example.com"),
)


class UserStore:
    """Ordered collection of User records; insertion order is preserved."""

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: List[User] = list(users or [])
        self.lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "UserStore":
        """Build a store holding the startup records."""
        return cls(User(id=uid, name=name, email=email) for uid, name, email in SEED_USERS)

    def __len__(self) -> int:
        return len(self._users)

    def all(self) -> List[User]:
        """Snapshot of the records, in insertion order."""
        return list(self._users)

    def ids(self) -> Iterator[int]:
        return (user.id for user in self._users)

    def find(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def index_of(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def append(self, user: User) -> None:
        self._users.append(user)

    def remove_at(self, index: int) -> User:
        """Remove and return the record at `index`; the rest keep their order."""
        return self._users.pop(index)


# ══════════════════════════════════════════════════════════════════════════
# FastAPI Dependency
# ══════════════════════════════════════════════════════════════════════════

def get_user_store(request: Request) -> UserStore:
    """
    FastAPI dependency returning the store owned by the running application.

    Usage in route handlers:
        @router.get("/users")
        async def list_users(store: UserStore = Depends(get_user_store)):
            ...
    """
    return request.app.state.store
