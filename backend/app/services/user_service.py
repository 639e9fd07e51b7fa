"""
Users API Backend — User Service (Business Logic)
===================================================

What:  The five CRUD operations over the user collection.
How:   Each method receives the UserStore it operates on, applies presence
       validation and id assignment, and raises application exceptions for
       the anticipated failures (ValidationError, NotFoundError).
Who:   Called by the /api/users route handlers.

ID Assignment:
    new id = max(current ids) + 1, or 1 when the collection is empty.
    The maximum is recomputed on every create from what is in the store right
    now, so deleting the highest record frees its id for the next create.
    There is no persistent counter.

Design Decision:
    UserService is stateless: the store is passed into every call, the same
    way a database session would be. Tests build a fresh store per case.
"""

import logging
from typing import List, Optional

from app.exceptions import NotFoundError, ValidationError
from app.models.user import User
from app.store import UserStore

logger = logging.getLogger(__name__)

RESOURCE = "User"


class UserService:
    """
    Business logic layer for user operations.

    Responsibilities:
        - list_users():  Every record, in insertion order
        - get_user():    Single record with not-found handling
        - create_user(): Presence validation + id assignment + append
        - update_user(): Independent partial update of name and email
        - delete_user(): Remove exactly one record
    """

    def list_users(self, store: UserStore) -> List[User]:
        return store.all()

    def get_user(self, store: UserStore, user_id: int) -> User:
        """
        Retrieve a single user by id.

        Raises:
            NotFoundError: No record carries `user_id` (→ 404)
        """
        user = store.find(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            raise NotFoundError(resource=RESOURCE, resource_id=user_id)
        return user

    def create_user(
        self,
        store: UserStore,
        name: Optional[str],
        email: Optional[str],
    ) -> User:
        """
        Validate and append a new user.

        Args:
            store: The collection to append to
            name:  Required, non-empty
            email: Required, non-empty

        Returns:
            The created record, already present at the end of the store

        Raises:
            ValidationError: name or email missing or empty (→ 400)
        """
        if not name or not email:
            missing = [field for field, value in (("name", name), ("email", email)) if not value]
            raise ValidationError(
                message="Name and email are required",
                fields=missing,
            )

        with store.lock:
            user = User(id=self._next_id(store), name=name, email=email)
            store.append(user)

        logger.info("User %d created", user.id)
        return user

    def update_user(
        self,
        store: UserStore,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """
        Partially update a user.

        `name` and `email` are applied independently, each only when present
        and non-empty. Passing neither returns the record unchanged.

        Raises:
            NotFoundError: No record carries `user_id` (→ 404)
        """
        with store.lock:
            user = self.get_user(store, user_id)
            changed = []
            if name:
                user.name = name
                changed.append("name")
            if email:
                user.email = email
                changed.append("email")

        if changed:
            logger.info("User %d updated: %s", user.id, ", ".join(changed))
        return user

    def delete_user(self, store: UserStore, user_id: int) -> None:
        """
        Remove the user with `user_id`, keeping the order of the others.

        Raises:
            NotFoundError: No record carries `user_id` (→ 404)
        """
        with store.lock:
            index = store.index_of(user_id)
            if index is None:
                logger.debug("User %s not found for delete", user_id)
                raise NotFoundError(resource=RESOURCE, resource_id=user_id)
            store.remove_at(index)

        logger.info("User %d deleted", user_id)

    @staticmethod
    def _next_id(store: UserStore) -> int:
        return max(store.ids(), default=0) + 1


# ── Singleton Instance ────────────────────────────────────────────────────
# Stateless; the store is supplied per call
user_service = UserService()
