from __future__ import annotations

import logging
import time

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics, feedback_summary
from .analytics.store import RECOMMENDATION_EVENT, get_events, record_event
from .auth.dependencies import require_admin, require_user
from .auth.users import authenticate
from .config import DEFAULT_APP_CONFIG
from .history.store import (
    get_history,
    get_preferences,
    record_feedback,
    record_shown,
    save_preference,
)
from .recommendations.catalog import CATALOGS, find_entry, known_conditions
from .recommendations.engine import get_all_recommendations, snapshot_from_weather
from .recommendations.models import (
    FeedbackRequest,
    FeedbackResponse,
    LoginRequest,
    PreferenceRequest,
    RecommendationRecord,
    RecommendationRequest,
    RecommendationResponse,
    ShownRequest,
)
from .subscription.tiers import apply_tier_limit, is_premium
from .weather.client import (
    APIKeyMissingError,
    LocationNotFoundError,
    WeatherServiceError,
    fetch_current_weather,
)

config = DEFAULT_APP_CONFIG

logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="WeatherWise Recommendation API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=config.session_secret)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/catalog")
def catalog() -> dict:
    return {
        "sizes": {rec_type.value: len(entries) for rec_type, entries in CATALOGS.items()},
        "conditions": known_conditions(),
    }


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Recommendation endpoints ─────────────────────────────────────────────


def _resolve_weather(body: RecommendationRequest) -> dict | None:
    if body.weather is not None:
        return body.weather
    try:
        return fetch_current_weather(body.latitude, body.longitude)
    except APIKeyMissingError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except LocationNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except WeatherServiceError as exc:
        logger.warning("Weather fetch failed for (%s, %s): %s", body.latitude, body.longitude, exc)
        raise HTTPException(status_code=502, detail=f"Weather fetch failed: {exc}") from exc


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: RecommendationRequest,
    user: dict = Depends(require_user),
) -> RecommendationResponse:
    start_time = time.time()

    snapshot = snapshot_from_weather(_resolve_weather(body))
    bundle = get_all_recommendations(snapshot)
    premium = is_premium(user)
    limit = config.free_tier_limit

    activities, hidden_activities = apply_tier_limit(bundle.activities, premium, limit)
    clothing, hidden_clothing = apply_tier_limit(bundle.clothing, premium, limit)
    transportation, hidden_transportation = apply_tier_limit(bundle.transportation, premium, limit)

    response = RecommendationResponse(
        snapshot=snapshot,
        activities=activities,
        clothing=clothing,
        transportation=transportation,
        # Health advisories are shown to every tier
        health=bundle.health,
        is_premium=premium,
        hidden_counts={
            "activity": hidden_activities,
            "clothing": hidden_clothing,
            "transportation": hidden_transportation,
            "health": 0,
        },
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event(RECOMMENDATION_EVENT, {
        "username": user["username"],
        "location_id": body.location_id,
        "condition": snapshot.condition if snapshot else None,
        "temperature": snapshot.temperature if snapshot else None,
        "result_counts": {
            "activity": len(bundle.activities),
            "clothing": len(bundle.clothing),
            "transportation": len(bundle.transportation),
            "health": len(bundle.health),
        },
        "is_premium": premium,
        "response_time_ms": elapsed_ms,
    })

    return response


@app.post("/recommendations/shown", response_model=RecommendationRecord)
def recommendation_shown(
    body: ShownRequest,
    user: dict = Depends(require_user),
) -> RecommendationRecord:
    found = find_entry(body.recommendation_id)
    if found is None:
        raise HTTPException(status_code=404, detail="Unknown recommendation")
    rec_type, _ = found
    return record_shown(
        user["username"],
        body.recommendation_id,
        rec_type,
        body.location_id,
        body.weather_condition,
        body.temperature,
    )


@app.post("/feedback", response_model=FeedbackResponse)
def feedback(
    body: FeedbackRequest,
    user: dict = Depends(require_user),
) -> FeedbackResponse:
    record = record_feedback(user["username"], body.recommendation_id, body.helpful)
    if record is None:
        raise HTTPException(status_code=404, detail="Recommendation was never shown to this user")
    return FeedbackResponse(status="recorded", record=record)


@app.get("/recommendations/history", response_model=list[RecommendationRecord])
def recommendation_history(
    limit: int = Query(default=config.history_limit, ge=1, le=200),
    user: dict = Depends(require_user),
) -> list[RecommendationRecord]:
    return get_history(user["username"], limit=limit)


# ── Preference endpoints ─────────────────────────────────────────────────


@app.get("/preferences")
def read_preferences(user: dict = Depends(require_user)) -> dict[str, str]:
    return get_preferences(user["username"])


@app.put("/preferences")
def write_preference(
    body: PreferenceRequest,
    user: dict = Depends(require_user),
) -> dict[str, str]:
    save_preference(user["username"], body.key, body.value)
    return get_preferences(user["username"])


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics(user: dict = Depends(require_admin)) -> dict:
    return compute_analytics(get_events())


@app.get("/feedback/stats")
def feedback_stats(user: dict = Depends(require_admin)) -> dict:
    return feedback_summary()
