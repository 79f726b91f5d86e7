from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import KEY_USERS
from ..storage.base import StateStorage
from ..storage.codec import user_from_dict, user_to_dict
from .model import User
from .repository import UserRepository


class KeyValueUserRepository(UserRepository):
    def __init__(self, storage: StateStorage):
        self._storage = storage

    def _load(self) -> list[User]:
        return [user_from_dict(d) for d in self._storage.get(KEY_USERS, []) or []]

    def _save(self, users: Sequence[User]) -> None:
        self._storage.set(KEY_USERS, [user_to_dict(u) for u in users])

    def list_all(self) -> Sequence[User]:
        return self._load()

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._load() if u.user_id == user_id), None)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._load() if u.username == username), None)

    def add(self, user: User) -> None:
        self._save(self._load() + [user])

    def update(self, user: User) -> bool:
        users = self._load()
        if not any(u.user_id == user.user_id for u in users):
            return False
        self._save([user if u.user_id == user.user_id else u for u in users])
        return True

    def delete_by_id(self, user_id: str) -> bool:
        users = self._load()
        remaining = [u for u in users if u.user_id != user_id]
        if len(remaining) == len(users):
            return False
        self._save(remaining)
        return True

    def is_initialized(self) -> bool:
        return self._storage.get(KEY_USERS) is not None
