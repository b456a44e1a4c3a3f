from __future__ import annotations

import pytest

from weatherwise.recommendations.engine import (
    filter_catalog,
    get_activity_recommendations,
    get_all_recommendations,
    get_clothing_recommendations,
    get_health_advisories,
    get_transportation_recommendations,
    matches,
    snapshot_from_weather,
)
from weatherwise.recommendations.models import (
    ActivityRecommendation,
    ClothingRecommendation,
    HealthAdvisory,
    WeatherSnapshot,
)


def _activity(id_, min_temp, max_temp, conditions, suitability):
    return ActivityRecommendation(
        id=id_,
        activity=id_,
        description="",
        icon="x",
        conditions=conditions,
        min_temp=min_temp,
        max_temp=max_temp,
        suitability=suitability,
        is_outdoor=True,
    )


def _clothing(id_, essential, conditions=("Clear",)):
    return ClothingRecommendation(
        id=id_,
        item=id_,
        description="",
        icon="x",
        conditions=conditions,
        min_temp=-50,
        max_temp=50,
        essential=essential,
    )


def _advisory(id_, conditions, severity, min_temp=-50, max_temp=50):
    return HealthAdvisory(
        id=id_,
        title=id_,
        description="",
        icon="x",
        conditions=conditions,
        min_temp=min_temp,
        max_temp=max_temp,
        severity=severity,
    )


CLEAR_22 = WeatherSnapshot(temperature=22, condition="Clear")


# ── Filter predicate ─────────────────────────────────────────────────────


def test_only_in_range_entry_matches():
    run = _activity("run", 15, 25, ["Clear", "Partly cloudy"], 9)
    beach = _activity("beach", 25, 40, ["Clear"], 10)
    result = get_activity_recommendations(CLEAR_22, catalog=(run, beach))
    assert [a.id for a in result] == ["run"]
    assert result[0].suitability == 9


@pytest.mark.parametrize("temperature", [15, 25, 15.0, 25.0])
def test_temperature_bounds_are_inclusive(temperature):
    entry = _activity("run", 15, 25, ["Clear"], 9)
    assert matches(entry, WeatherSnapshot(temperature=temperature, condition="Clear"))


@pytest.mark.parametrize("temperature", [14.9, 25.1, -100])
def test_temperature_outside_bounds_rejected(temperature):
    entry = _activity("run", 15, 25, ["Clear"], 9)
    assert not matches(entry, WeatherSnapshot(temperature=temperature, condition="Clear"))


def test_condition_match_is_case_insensitive():
    entry = _activity("run", 15, 25, ["Partly cloudy"], 9)
    assert matches(entry, WeatherSnapshot(temperature=20, condition="PARTLY CLOUDY"))


def test_condition_match_uses_containment():
    entry = _advisory("flood", ["Heavy rain"], 9)
    assert matches(entry, WeatherSnapshot(temperature=0, condition="Heavy rain"))
    assert matches(entry, WeatherSnapshot(temperature=0, condition="it was a Heavy rain day"))
    # Containment runs one way: the label must sit inside the snapshot condition
    assert not matches(entry, WeatherSnapshot(temperature=0, condition="rain"))


def test_short_label_matches_broader_condition():
    entry = _activity("museum", -10, 40, ["Rain"], 8)
    assert matches(entry, WeatherSnapshot(temperature=5, condition="Heavy Rain and Wind"))


def test_condition_mismatch_rejected():
    entry = _activity("run", 15, 25, ["Clear"], 9)
    assert not matches(entry, WeatherSnapshot(temperature=20, condition="Snow"))


def test_filter_keeps_catalog_order():
    a = _activity("a", 0, 30, ["Clear"], 1)
    b = _activity("b", 0, 30, ["Clear"], 10)
    assert [e.id for e in filter_catalog((a, b), CLEAR_22)] == ["a", "b"]


# ── Ordering ─────────────────────────────────────────────────────────────


def test_activity_sorted_by_suitability_with_stable_ties():
    catalog = (
        _activity("low", 0, 30, ["Clear"], 5),
        _activity("high-first", 0, 30, ["Clear"], 9),
        _activity("mid", 0, 30, ["Clear"], 7),
        _activity("high-second", 0, 30, ["Clear"], 9),
    )
    result = get_activity_recommendations(CLEAR_22, catalog=catalog)
    assert [a.id for a in result] == ["high-first", "high-second", "mid", "low"]


def test_clothing_essentials_first_preserving_order():
    catalog = (
        _clothing("opt-1", False),
        _clothing("ess-1", True),
        _clothing("opt-2", False),
        _clothing("ess-2", True),
    )
    result = get_clothing_recommendations(CLEAR_22, catalog=catalog)
    assert [c.id for c in result] == ["ess-1", "ess-2", "opt-1", "opt-2"]


def test_health_sorted_by_severity():
    catalog = (
        _advisory("mild", ["Clear"], 3),
        _advisory("severe", ["Clear"], 9),
        _advisory("moderate", ["Clear"], 6),
    )
    result = get_health_advisories(CLEAR_22, catalog=catalog)
    assert [h.id for h in result] == ["severe", "moderate", "mild"]


# ── Built-in catalogs ────────────────────────────────────────────────────


def test_clear_22_activities():
    result = get_activity_recommendations(CLEAR_22)
    assert [a.activity for a in result] == [
        "Go for a run",
        "Visit a park",
        "Cycling",
        "Gardening",
    ]


def test_clear_22_clothing():
    result = get_clothing_recommendations(CLEAR_22)
    assert [c.item for c in result] == [
        "Light T-shirt",
        "Sunscreen",
        "Light, breathable pants",
        "Sunglasses",
    ]


def test_clear_22_transportation():
    result = get_transportation_recommendations(CLEAR_22)
    assert [t.mode for t in result] == ["Walking", "Biking", "Scooter"]


def test_clear_22_health():
    result = get_health_advisories(CLEAR_22)
    assert [h.title for h in result] == ["High UV Warning", "Allergy Alert"]


def test_rain_clothing_puts_essentials_first():
    result = get_clothing_recommendations(WeatherSnapshot(temperature=10, condition="Rain"))
    assert [c.item for c in result] == ["Rain jacket", "Waterproof boots"]


def test_thunderstorm_activities_and_health():
    snapshot = WeatherSnapshot(temperature=10, condition="Thunderstorm")
    assert [a.activity for a in get_activity_recommendations(snapshot)] == [
        "Indoor reading",
        "Visit a museum",
        "Movie marathon",
        "Indoor swimming",
    ]
    assert [h.title for h in get_health_advisories(snapshot)] == [
        "Flood Warning",
        "Thunderstorm Safety",
    ]


def test_extreme_cold_yields_empty_lists_not_errors():
    snapshot = WeatherSnapshot(temperature=-25, condition="Snow")
    assert get_activity_recommendations(snapshot) == []
    assert get_clothing_recommendations(snapshot) == []
    assert get_transportation_recommendations(snapshot) == []
    assert [h.title for h in get_health_advisories(snapshot)] == ["Cold Weather Alert"]


def test_heavy_rain_at_freezing_matches_flood_warning():
    for condition in ("Heavy rain", "it was a Heavy rain day"):
        result = get_health_advisories(WeatherSnapshot(temperature=0, condition=condition))
        assert [h.title for h in result] == ["Flood Warning"]


def test_repeated_calls_are_equal():
    first = get_all_recommendations(CLEAR_22)
    second = get_all_recommendations(CLEAR_22)
    assert first == second


def test_missing_snapshot_yields_empty_bundle():
    bundle = get_all_recommendations(None)
    assert bundle.activities == []
    assert bundle.clothing == []
    assert bundle.transportation == []
    assert bundle.health == []


# ── Snapshot parsing ─────────────────────────────────────────────────────


def test_snapshot_from_flat_payload():
    snapshot = snapshot_from_weather({"current": {"temperature": 22, "condition": "Clear"}})
    assert snapshot == WeatherSnapshot(temperature=22.0, condition="Clear")


def test_snapshot_from_nested_condition_payload():
    snapshot = snapshot_from_weather({"current": {"temp_c": -3.5, "condition": {"text": "Light snow"}}})
    assert snapshot == WeatherSnapshot(temperature=-3.5, condition="Light snow")


@pytest.mark.parametrize("payload", [
    None,
    {},
    "Clear",
    {"current": None},
    {"current": {"condition": "Clear"}},
    {"current": {"temperature": 20}},
    {"current": {"temperature": "warm", "condition": "Clear"}},
    {"current": {"temperature": True, "condition": "Clear"}},
    {"current": {"temperature": float("nan"), "condition": "Clear"}},
    {"current": {"temperature": 10**400, "condition": "Clear"}},
    {"current": {"temperature": 20, "condition": "   "}},
    {"current": {"temperature": 20, "condition": {"code": 1000}}},
])
def test_unusable_payload_gives_no_snapshot(payload):
    assert snapshot_from_weather(payload) is None
    assert get_activity_recommendations(snapshot_from_weather(payload)) == []
