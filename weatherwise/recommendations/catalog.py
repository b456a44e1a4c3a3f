"""
Static recommendation catalogs.

Each catalog is an immutable tuple of frozen models built once at import
time. Entry ids are stable slugs so history and feedback recorded in one
process still resolve in the next.

Temperatures are in degrees Celsius.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .models import (
    ActivityRecommendation,
    CatalogEntry,
    ClothingRecommendation,
    HealthAdvisory,
    RecommendationType,
    TransportationRecommendation,
)

ACTIVITIES: tuple[ActivityRecommendation, ...] = (
    ActivityRecommendation(
        id="activity-go-for-a-run",
        activity="Go for a run",
        description="Perfect weather for outdoor running. Consider a light jog or sprint intervals to take advantage of these conditions.",
        icon="fitness",
        suitability=9,
        conditions=["Clear", "Partly cloudy"],
        min_temp=15,
        max_temp=25,
        is_outdoor=True,
    ),
    ActivityRecommendation(
        id="activity-cycling",
        activity="Cycling",
        description="Great conditions for cycling. The weather is ideal for a bike ride, either for commuting or recreation.",
        icon="bicycle",
        suitability=8,
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=12,
        max_temp=28,
        is_outdoor=True,
    ),
    ActivityRecommendation(
        id="activity-visit-a-park",
        activity="Visit a park",
        description="Enjoy nature and fresh air by visiting a local park. Perfect for walking, picnics, or simply relaxing.",
        icon="leaf",
        suitability=9,
        conditions=["Clear", "Partly cloudy"],
        min_temp=18,
        max_temp=30,
        is_outdoor=True,
    ),
    ActivityRecommendation(
        id="activity-indoor-swimming",
        activity="Indoor swimming",
        description="While it's not ideal outside, indoor swimming is a great way to exercise regardless of weather.",
        icon="water",
        suitability=7,
        conditions=["Rain", "Thunderstorm", "Drizzle"],
        min_temp=-5,
        max_temp=40,
        is_outdoor=False,
    ),
    ActivityRecommendation(
        id="activity-visit-a-museum",
        activity="Visit a museum",
        description="Take shelter from the elements and explore cultural exhibits at a local museum.",
        icon="business",
        suitability=8,
        conditions=["Rain", "Thunderstorm", "Snow", "Sleet", "Hail"],
        min_temp=-10,
        max_temp=40,
        is_outdoor=False,
    ),
    ActivityRecommendation(
        id="activity-skiing-or-snowboarding",
        activity="Skiing or snowboarding",
        description="Hit the slopes! Current snow conditions are favorable for winter sports.",
        icon="snow",
        suitability=9,
        conditions=["Snow", "Light snow"],
        min_temp=-15,
        max_temp=5,
        is_outdoor=True,
    ),
    ActivityRecommendation(
        id="activity-beach-day",
        activity="Beach day",
        description="Perfect weather for swimming, sunbathing, or beach sports. Don't forget sunscreen!",
        icon="sunny",
        suitability=10,
        conditions=["Clear", "Partly cloudy"],
        min_temp=25,
        max_temp=40,
        is_outdoor=True,
    ),
    ActivityRecommendation(
        id="activity-gardening",
        activity="Gardening",
        description="Good conditions for gardening. Perfect time to tend to your plants or start a new garden project.",
        icon="flower",
        suitability=7,
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=12,
        max_temp=30,
        is_outdoor=True,
    ),
    ActivityRecommendation(
        id="activity-indoor-reading",
        activity="Indoor reading",
        description="Curl up with a good book while listening to the weather outside. Perfect for relaxation.",
        icon="book",
        suitability=9,
        conditions=["Rain", "Thunderstorm", "Snow"],
        min_temp=-10,
        max_temp=40,
        is_outdoor=False,
    ),
    ActivityRecommendation(
        id="activity-movie-marathon",
        activity="Movie marathon",
        description="Stay in and enjoy a movie marathon. The weather outside makes this a cozy indoor activity.",
        icon="film",
        suitability=8,
        conditions=["Rain", "Thunderstorm", "Snow", "Fog"],
        min_temp=-10,
        max_temp=40,
        is_outdoor=False,
    ),
)

CLOTHING: tuple[ClothingRecommendation, ...] = (
    ClothingRecommendation(
        id="clothing-light-t-shirt",
        item="Light T-shirt",
        description="A breathable, light t-shirt is perfect for today's temperature.",
        icon="shirt",
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=20,
        max_temp=40,
        essential=True,
    ),
    ClothingRecommendation(
        id="clothing-sweater-or-light-jacket",
        item="Sweater or light jacket",
        description="A medium-weight sweater or light jacket will keep you comfortable in these conditions.",
        icon="archive",
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=10,
        max_temp=20,
        essential=True,
    ),
    ClothingRecommendation(
        id="clothing-winter-coat",
        item="Winter coat",
        description="A heavy winter coat is essential in these cold conditions.",
        icon="snow",
        conditions=["Clear", "Partly cloudy", "Cloudy", "Snow", "Sleet"],
        min_temp=-20,
        max_temp=5,
        essential=True,
    ),
    ClothingRecommendation(
        id="clothing-rain-jacket",
        item="Rain jacket",
        description="Stay dry with a waterproof rain jacket or umbrella.",
        icon="umbrella",
        conditions=["Rain", "Drizzle", "Thunderstorm"],
        min_temp=-5,
        max_temp=30,
        essential=True,
    ),
    ClothingRecommendation(
        id="clothing-sunglasses",
        item="Sunglasses",
        description="Protect your eyes from UV rays with sunglasses.",
        icon="sunny",
        conditions=["Clear", "Partly cloudy"],
        min_temp=10,
        max_temp=40,
        essential=False,
    ),
    ClothingRecommendation(
        id="clothing-hat-and-gloves",
        item="Hat and gloves",
        description="Keep extremities warm with a hat and gloves in these cold temperatures.",
        icon="hand-left",
        conditions=["Clear", "Partly cloudy", "Cloudy", "Snow"],
        min_temp=-20,
        max_temp=5,
        essential=True,
    ),
    ClothingRecommendation(
        id="clothing-scarf",
        item="Scarf",
        description="A scarf will provide extra warmth and protect your neck from cold winds.",
        icon="stats-chart",
        conditions=["Clear", "Partly cloudy", "Cloudy", "Snow", "Windy"],
        min_temp=-20,
        max_temp=10,
        essential=False,
    ),
    ClothingRecommendation(
        id="clothing-sunscreen",
        item="Sunscreen",
        description="Apply sunscreen to protect your skin from UV rays, even on cloudy days.",
        icon="sunny",
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=15,
        max_temp=40,
        essential=True,
    ),
    ClothingRecommendation(
        id="clothing-waterproof-boots",
        item="Waterproof boots",
        description="Keep your feet dry with waterproof boots in wet conditions.",
        icon="footsteps",
        conditions=["Rain", "Snow", "Sleet"],
        min_temp=-10,
        max_temp=20,
        essential=False,
    ),
    ClothingRecommendation(
        id="clothing-light-breathable-pants",
        item="Light, breathable pants",
        description="Stay comfortable in the heat with light, breathable pants or shorts.",
        icon="layers",
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=20,
        max_temp=40,
        essential=True,
    ),
)

TRANSPORTATION: tuple[TransportationRecommendation, ...] = (
    TransportationRecommendation(
        id="transportation-walking",
        mode="Walking",
        description="Conditions are ideal for walking. Enjoy the fresh air and get some exercise.",
        icon="walk",
        suitability=9,
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=5,
        max_temp=30,
    ),
    TransportationRecommendation(
        id="transportation-biking",
        mode="Biking",
        description="Good weather for cycling. Fast, eco-friendly, and good exercise.",
        icon="bicycle",
        suitability=8,
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=5,
        max_temp=30,
    ),
    TransportationRecommendation(
        id="transportation-public-transport",
        mode="Public transport",
        description="Consider public transportation to avoid driving in these conditions.",
        icon="bus",
        suitability=9,
        conditions=["Rain", "Snow", "Fog", "Thunderstorm"],
        min_temp=-20,
        max_temp=40,
    ),
    TransportationRecommendation(
        id="transportation-car",
        mode="Car",
        description="Driving is recommended in current weather conditions for comfort and safety.",
        icon="car",
        suitability=7,
        conditions=["Rain", "Snow", "Fog", "Thunderstorm"],
        min_temp=-20,
        max_temp=40,
    ),
    TransportationRecommendation(
        id="transportation-ride-sharing",
        mode="Ride sharing",
        description="Consider ride sharing to reduce traffic and environmental impact.",
        icon="people",
        suitability=8,
        conditions=["Rain", "Snow", "Fog"],
        min_temp=-20,
        max_temp=40,
    ),
    TransportationRecommendation(
        id="transportation-scooter",
        mode="Scooter",
        description="Electric scooters are convenient for short trips in good weather.",
        icon="git-compare",
        suitability=7,
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=10,
        max_temp=35,
    ),
)

HEALTH_ADVISORIES: tuple[HealthAdvisory, ...] = (
    HealthAdvisory(
        id="health-high-uv-warning",
        title="High UV Warning",
        description="UV index is high. Wear sunscreen, sunglasses, and protective clothing. Limit direct sun exposure between 10am-4pm.",
        icon="sunny",
        conditions=["Clear", "Partly cloudy"],
        min_temp=20,
        max_temp=40,
        severity=8,
    ),
    HealthAdvisory(
        id="health-cold-weather-alert",
        title="Cold Weather Alert",
        description="Extremely cold temperatures can cause frostbite and hypothermia. Limit time outdoors and wear appropriate clothing.",
        icon="snow",
        conditions=["Clear", "Partly cloudy", "Cloudy", "Snow"],
        min_temp=-30,
        max_temp=-5,
        severity=9,
    ),
    HealthAdvisory(
        id="health-heat-advisory",
        title="Heat Advisory",
        description="Extreme heat can cause heat exhaustion and heat stroke. Stay hydrated, avoid strenuous activities, and stay in air-conditioned areas when possible.",
        icon="thermometer",
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=32,
        max_temp=45,
        severity=9,
    ),
    HealthAdvisory(
        id="health-air-quality-warning",
        title="Air Quality Warning",
        description="Poor air quality may affect sensitive groups. Those with respiratory conditions should limit outdoor activities.",
        icon="cloud",
        conditions=["Smoke", "Fog", "Haze"],
        min_temp=-5,
        max_temp=40,
        severity=7,
    ),
    HealthAdvisory(
        id="health-thunderstorm-safety",
        title="Thunderstorm Safety",
        description="Seek shelter indoors during thunderstorms. Avoid open areas, water, and tall objects.",
        icon="thunderstorm",
        conditions=["Thunderstorm"],
        min_temp=0,
        max_temp=40,
        severity=8,
    ),
    HealthAdvisory(
        id="health-flood-warning",
        title="Flood Warning",
        description="Flooding is possible in your area. Avoid flooded areas and follow local emergency instructions.",
        icon="water",
        conditions=["Heavy rain", "Rain", "Thunderstorm"],
        min_temp=0,
        max_temp=40,
        severity=9,
    ),
    HealthAdvisory(
        id="health-allergy-alert",
        title="Allergy Alert",
        description="High pollen count today. Those with allergies should take preventative medications and limit outdoor exposure.",
        icon="flower",
        conditions=["Clear", "Partly cloudy", "Cloudy"],
        min_temp=10,
        max_temp=30,
        severity=6,
    ),
)

CATALOGS: Mapping[RecommendationType, tuple[CatalogEntry, ...]] = MappingProxyType({
    RecommendationType.activity: ACTIVITIES,
    RecommendationType.clothing: CLOTHING,
    RecommendationType.transportation: TRANSPORTATION,
    RecommendationType.health: HEALTH_ADVISORIES,
})

_BY_ID: Mapping[str, tuple[RecommendationType, CatalogEntry]] = MappingProxyType({
    entry.id: (rec_type, entry)
    for rec_type, catalog in CATALOGS.items()
    for entry in catalog
})


def find_entry(recommendation_id: str) -> tuple[RecommendationType, CatalogEntry] | None:
    """Return ``(type, entry)`` for a catalog id, or ``None``."""
    return _BY_ID.get(recommendation_id)


def known_conditions() -> list[str]:
    """Every distinct condition label used across the catalogs, sorted."""
    labels = {c for catalog in CATALOGS.values() for entry in catalog for c in entry.conditions}
    return sorted(labels)
