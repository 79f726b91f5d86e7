from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..audit.service import AuditService
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import DEMO_USERS, MIN_PASSWORD_LENGTH
from ..core.enums import AuditAction, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    username: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. an empty or corrupted hash in the stored blob
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


class UserService:
    """Use case: manage login accounts (super-admin)."""

    def __init__(self, users: UserRepository, audit: Optional[AuditService] = None):
        self._users = users
        self._audit = audit

    def ensure_seed_users(self) -> bool:
        """Create the demo accounts when no user list was ever stored."""

        if self._users.is_initialized():
            return False
        for username, password, role in DEMO_USERS:
            self._users.add(
                User(
                    user_id=f"{role}-{uuid.uuid4().hex[:8]}",
                    username=username,
                    password_hash=generate_password_hash(password),
                    role=Role(role),
                )
            )
        return True

    def list_users(self) -> Sequence[User]:
        return sorted(self._users.list_all(), key=lambda u: (u.role.value, u.username))

    def create_user(self, *, current_role: Role, actor: str, username: str, password: str, role: Role) -> User:
        if current_role != Role.SUPERADMIN:
            raise AuthorizationError("You do not have permission to manage users")

        username = require_non_empty(username, "a username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user = User(
            user_id=f"{role.value}-{uuid.uuid4().hex[:8]}",
            username=username,
            password_hash=generate_password_hash(password),
            role=role,
        )
        self._users.add(user)
        if self._audit:
            self._audit.record(actor, AuditAction.USER_CREATE, f"{username} ({role.value})")
        return user

    def change_password(self, *, current_role: Role, current_user_id: str, actor: str, user_id: str, password: str) -> None:
        if current_role != Role.SUPERADMIN and current_user_id != user_id:
            raise AuthorizationError("You do not have permission to manage users")

        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("User not found")

        self._users.update(replace(user, password_hash=generate_password_hash(password)))
        if self._audit:
            self._audit.record(actor, AuditAction.USER_PASSWORD, user.username)

    def delete_user(self, *, current_role: Role, current_user_id: str, actor: str, user_id: str) -> None:
        if current_role != Role.SUPERADMIN:
            raise AuthorizationError("You do not have permission to manage users")
        if user_id == current_user_id:
            raise ValidationError("You cannot delete your own account")

        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("User not found")

        if user.role == Role.SUPERADMIN:
            admins = [u for u in self._users.list_all() if u.role == Role.SUPERADMIN]
            if len(admins) <= 1:
                raise ValidationError("Cannot delete the last super admin")

        if not self._users.delete_by_id(user_id):
            raise ValidationError("Failed to delete user")
        if self._audit:
            self._audit.record(actor, AuditAction.USER_DELETE, user.username)
