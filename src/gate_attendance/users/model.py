from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a login account (security guard, HR, dean, super-admin)."""

    user_id: str
    username: str
    password_hash: str
    role: Role
    is_active: bool = True
