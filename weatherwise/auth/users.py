from __future__ import annotations

from typing import Any

import bcrypt

_users: dict[str, dict[str, Any]] = {}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


_DEMO_ACCOUNTS = (
    ("user", "user123", "user"),
    ("premium", "premium123", "premium"),
    ("admin", "admin123", "admin"),
)


def _seed_users() -> None:
    """Pre-seed one demo account per subscription tier on import."""
    for username, password, role in _DEMO_ACCOUNTS:
        _users[username] = {"password_hash": _hash_password(password), "role": role}


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{username, role}`` or ``None``."""
    record = _users.get(username)
    if record and _verify_password(password, record["password_hash"]):
        return {"username": username, "role": record["role"]}
    return None


_seed_users()
