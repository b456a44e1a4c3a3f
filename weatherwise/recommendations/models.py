from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RecommendationType(str, Enum):
    activity = "activity"
    clothing = "clothing"
    transportation = "transportation"
    health = "health"


# ── Catalog entries ──────────────────────────────────────────────────────


class CatalogEntry(BaseModel):
    """Fields shared by every catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    description: str
    icon: str
    conditions: tuple[str, ...] = Field(..., min_length=1)
    min_temp: float
    max_temp: float

    @model_validator(mode="after")
    def check_range(self) -> CatalogEntry:
        if self.min_temp > self.max_temp:
            raise ValueError(
                f"{self.id}: min_temp {self.min_temp} exceeds max_temp {self.max_temp}"
            )
        return self


class ActivityRecommendation(CatalogEntry):
    activity: str
    suitability: int = Field(..., ge=0, le=10)
    is_outdoor: bool


class ClothingRecommendation(CatalogEntry):
    item: str
    essential: bool


class TransportationRecommendation(CatalogEntry):
    mode: str
    suitability: int = Field(..., ge=0, le=10)


class HealthAdvisory(CatalogEntry):
    title: str
    severity: int = Field(..., ge=0, le=10)


# ── Weather input ────────────────────────────────────────────────────────


class WeatherSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float
    condition: str


# ── Engine output ────────────────────────────────────────────────────────


class RecommendationBundle(BaseModel):
    activities: list[ActivityRecommendation] = Field(default_factory=list)
    clothing: list[ClothingRecommendation] = Field(default_factory=list)
    transportation: list[TransportationRecommendation] = Field(default_factory=list)
    health: list[HealthAdvisory] = Field(default_factory=list)


# ── Persisted history ────────────────────────────────────────────────────


class RecommendationRecord(BaseModel):
    id: str
    user_id: str
    recommendation_id: str
    recommendation_type: RecommendationType
    location_id: str
    weather_condition: str
    temperature: float
    timestamp: datetime
    feedback: bool | None = None


# ── API payloads ─────────────────────────────────────────────────────────


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RecommendationRequest(BaseModel):
    weather: dict[str, Any] | None = Field(
        default=None,
        description='Raw weather payload, e.g. {"current": {"temperature": 22, "condition": "Clear"}}',
    )
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    location_id: str | None = None

    @model_validator(mode="after")
    def check_source(self) -> RecommendationRequest:
        has_coords = self.latitude is not None and self.longitude is not None
        if self.weather is None and not has_coords:
            raise ValueError("Provide either weather or latitude/longitude")
        return self


class RecommendationResponse(BaseModel):
    snapshot: WeatherSnapshot | None
    activities: list[ActivityRecommendation]
    clothing: list[ClothingRecommendation]
    transportation: list[TransportationRecommendation]
    health: list[HealthAdvisory]
    is_premium: bool
    hidden_counts: dict[str, int]


class ShownRequest(BaseModel):
    recommendation_id: str = Field(..., min_length=1)
    location_id: str = Field(..., min_length=1)
    weather_condition: str = Field(..., min_length=1)
    temperature: float


class FeedbackRequest(BaseModel):
    recommendation_id: str = Field(..., min_length=1)
    helpful: bool


class FeedbackResponse(BaseModel):
    status: str
    record: RecommendationRecord


class PreferenceRequest(BaseModel):
    key: str = Field(..., min_length=1, max_length=64)
    value: str
