"""
Weather-driven recommendation engine.

Responsibilities:
- Normalise an upstream weather payload into a ``WeatherSnapshot``.
- Filter each static catalog to entries whose temperature range and
  condition labels match the snapshot.
- Order the matches with a per-catalog sort key.

Everything here is pure: no I/O, no mutation of the catalogs. A missing or
malformed snapshot yields empty results rather than an exception.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from .catalog import ACTIVITIES, CLOTHING, HEALTH_ADVISORIES, TRANSPORTATION
from .models import (
    ActivityRecommendation,
    CatalogEntry,
    ClothingRecommendation,
    HealthAdvisory,
    RecommendationBundle,
    TransportationRecommendation,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=CatalogEntry)


def _to_number(value: Any) -> float | None:
    # bool is an int subclass; a True temperature is a malformed payload
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def snapshot_from_weather(payload: Any) -> WeatherSnapshot | None:
    """
    Build a snapshot from ``{"current": {...}}``.

    Accepts ``temperature``/``condition`` or the ``temp_c``/``condition.text``
    layout. Returns ``None`` when either field is missing or unusable.
    """
    if not isinstance(payload, Mapping):
        return None
    current = payload.get("current")
    if not isinstance(current, Mapping):
        return None

    temperature = _to_number(current.get("temperature", current.get("temp_c")))

    condition = current.get("condition")
    if isinstance(condition, Mapping):
        condition = condition.get("text")
    if not isinstance(condition, str) or not condition.strip():
        condition = None

    if temperature is None or condition is None:
        logger.debug("Unusable weather payload: %r", current)
        return None
    return WeatherSnapshot(temperature=temperature, condition=condition)


def matches(entry: CatalogEntry, snapshot: WeatherSnapshot) -> bool:
    """Inclusive temperature range plus case-insensitive condition containment."""
    if not entry.min_temp <= snapshot.temperature <= entry.max_temp:
        return False
    current = snapshot.condition.lower()
    return any(label.lower() in current for label in entry.conditions)


def filter_catalog(catalog: Iterable[T], snapshot: WeatherSnapshot | None) -> list[T]:
    if snapshot is None:
        return []
    return [entry for entry in catalog if matches(entry, snapshot)]


def _rank(
    catalog: Iterable[T],
    snapshot: WeatherSnapshot | None,
    sort_key: Callable[[T], Any],
) -> list[T]:
    # sorted() is stable, so ties keep catalog order
    ranked = sorted(filter_catalog(catalog, snapshot), key=sort_key)
    logger.debug("Matched %d entries for %s", len(ranked), snapshot)
    return ranked


def get_activity_recommendations(
    snapshot: WeatherSnapshot | None,
    catalog: Iterable[ActivityRecommendation] = ACTIVITIES,
) -> list[ActivityRecommendation]:
    return _rank(catalog, snapshot, lambda a: -a.suitability)


def get_clothing_recommendations(
    snapshot: WeatherSnapshot | None,
    catalog: Iterable[ClothingRecommendation] = CLOTHING,
) -> list[ClothingRecommendation]:
    """Essential items first; otherwise catalog order."""
    return _rank(catalog, snapshot, lambda c: not c.essential)


def get_transportation_recommendations(
    snapshot: WeatherSnapshot | None,
    catalog: Iterable[TransportationRecommendation] = TRANSPORTATION,
) -> list[TransportationRecommendation]:
    return _rank(catalog, snapshot, lambda t: -t.suitability)


def get_health_advisories(
    snapshot: WeatherSnapshot | None,
    catalog: Iterable[HealthAdvisory] = HEALTH_ADVISORIES,
) -> list[HealthAdvisory]:
    return _rank(catalog, snapshot, lambda h: -h.severity)


def get_all_recommendations(snapshot: WeatherSnapshot | None) -> RecommendationBundle:
    return RecommendationBundle(
        activities=get_activity_recommendations(snapshot),
        clothing=get_clothing_recommendations(snapshot),
        transportation=get_transportation_recommendations(snapshot),
        health=get_health_advisories(snapshot),
    )
