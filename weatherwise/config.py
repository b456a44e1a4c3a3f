from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class AppConfig:
    session_secret: str = field(
        default_factory=lambda: os.getenv("SESSION_SECRET", "weatherwise-secret-change-in-production")
    )
    free_tier_limit: int = field(default_factory=lambda: _env_int("FREE_TIER_LIMIT", 2))
    history_limit: int = field(default_factory=lambda: _env_int("HISTORY_LIMIT", 50))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    def __post_init__(self) -> None:
        if self.free_tier_limit < 1:
            raise ValueError("free_tier_limit must be at least 1")
        if self.history_limit < 1:
            raise ValueError("history_limit must be at least 1")


DEFAULT_APP_CONFIG = AppConfig()
