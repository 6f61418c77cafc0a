"""Service for managing administrative user accounts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import fields, replace
from typing import Any

from survey_app.core.errors import DuplicateKeyError, ImmutableFieldError, NotFoundError
from survey_app.core.models import User
from survey_app.core.payloads import NewUser
from survey_app.core.services.id_allocator import next_id

_USER_FIELDS = frozenset(f.name for f in fields(User))


class UserDirectory:
    """Owns the user records shown on the admin surface."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def load(self, users: Iterable[User]) -> None:
        self._users = []
        for user in users:
            if any(existing.id == user.id for existing in self._users):
                raise DuplicateKeyError(f"User id {user.id} is repeated.")
            self._check_email(user.email)
            self._users.append(replace(user))

    def list(self) -> list[User]:
        return [replace(user) for user in self._users]

    def get(self, user_id: int) -> User:
        return replace(self._users[self._index_of(user_id)])

    def add(self, new_user: NewUser) -> User:
        self._check_email(new_user.email)
        user = User(id=next_id(u.id for u in self._users), **new_user.model_dump())
        self._users.append(user)
        return replace(user)

    def update(self, user_id: int, updates: Mapping[str, Any]) -> User:
        index = self._index_of(user_id)
        unknown = set(updates) - _USER_FIELDS
        if unknown:
            raise ValueError(f"Unknown user field(s): {', '.join(sorted(unknown))}.")
        if "id" in updates and updates["id"] != user_id:
            raise ImmutableFieldError(f"User id {user_id} cannot be changed.")
        nulls = sorted(name for name, value in updates.items() if value is None)
        if nulls:
            raise ValueError(f"User field(s) cannot be null: {', '.join(nulls)}.")
        if "email" in updates:
            self._check_email(updates["email"], ignore_id=user_id)

        self._users[index] = replace(self._users[index], **dict(updates))
        return replace(self._users[index])

    def delete(self, user_id: int) -> None:
        self._users.pop(self._index_of(user_id))

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise NotFoundError(f"User {user_id} does not exist.")

    def _check_email(self, email: str, ignore_id: int | None = None) -> None:
        cleaned = email.strip().lower()
        if not cleaned:
            raise ValueError("User email must not be empty.")
        for user in self._users:
            if user.id != ignore_id and user.email.strip().lower() == cleaned:
                raise DuplicateKeyError(f"A user with email '{email}' already exists.")
