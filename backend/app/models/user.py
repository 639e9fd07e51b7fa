"""
Users API Backend — User Record Model
=======================================

What:  The in-memory record held by the UserStore.
How:   A mutable Pydantic model; the service edits `name` and `email` in place
       on update, so a record keeps its identity and its position in the store.
Who:   Created by UserService.create_user and by UserStore.seeded();
       serialized through app.schemas.user.UserResponse.

Field rules:
    - id:    Positive integer assigned by the service, never client-supplied
    - name:  Non-empty string
    - email: Non-empty string, format not checked
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """A single user record."""

    id: int = Field(gt=0)
    name: str
    email: str
