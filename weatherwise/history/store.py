from __future__ import annotations

import uuid
from datetime import datetime, timezone

from ..recommendations.models import RecommendationRecord, RecommendationType

# Append order is chronological; newest records sit at the end.
_records: list[RecommendationRecord] = []
_preferences: dict[str, dict[str, str]] = {}


def record_shown(
    user_id: str,
    recommendation_id: str,
    recommendation_type: RecommendationType,
    location_id: str,
    weather_condition: str,
    temperature: float,
) -> RecommendationRecord:
    record = RecommendationRecord(
        id=str(uuid.uuid4()),
        user_id=user_id,
        recommendation_id=recommendation_id,
        recommendation_type=recommendation_type,
        location_id=location_id,
        weather_condition=weather_condition,
        temperature=temperature,
        timestamp=datetime.now(timezone.utc),
    )
    _records.append(record)
    return record


def record_feedback(
    user_id: str,
    recommendation_id: str,
    helpful: bool,
) -> RecommendationRecord | None:
    """Attach feedback to the user's most recent showing of a recommendation."""
    for record in reversed(_records):
        if record.user_id == user_id and record.recommendation_id == recommendation_id:
            record.feedback = helpful
            return record
    return None


def get_history(user_id: str, limit: int = 50) -> list[RecommendationRecord]:
    """Return the user's records, newest first."""
    mine = [r for r in reversed(_records) if r.user_id == user_id]
    return mine[:limit]


def get_all_records() -> list[RecommendationRecord]:
    return list(_records)


def clear_history() -> None:
    _records.clear()


# ── Preferences ──────────────────────────────────────────────────────────


def save_preference(user_id: str, key: str, value: str) -> None:
    _preferences.setdefault(user_id, {})[key] = value


def get_preferences(user_id: str) -> dict[str, str]:
    return dict(_preferences.get(user_id, {}))


def get_preference(user_id: str, key: str, default: str = "") -> str:
    return _preferences.get(user_id, {}).get(key) or default


def clear_preferences() -> None:
    _preferences.clear()
