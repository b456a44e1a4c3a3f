from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")

PREMIUM_ROLES = frozenset({"premium", "admin"})


def is_premium(user: dict[str, Any] | None) -> bool:
    return bool(user) and user.get("role") in PREMIUM_ROLES


def apply_tier_limit(items: Sequence[T], premium: bool, limit: int) -> tuple[list[T], int]:
    """
    Trim a ranked list for the free tier.

    Returns ``(visible, hidden_count)``. Premium users see everything.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    if premium:
        return list(items), 0
    visible = list(items[:limit])
    return visible, len(items) - len(visible)
