from __future__ import annotations

from collections import Counter
from typing import Any

from ..history.store import get_all_records
from ..recommendations.models import RecommendationType
from .store import RECOMMENDATION_EVENT

CATEGORIES = [t.value for t in RecommendationType]


def feedback_summary() -> dict[str, Any]:
    rated = [r for r in get_all_records() if r.feedback is not None]
    helpful = sum(1 for r in rated if r.feedback)
    return {
        "total": len(rated),
        "helpful": helpful,
        "not_helpful": len(rated) - helpful,
        "helpful_rate": round(helpful / len(rated) * 100, 1) if rated else 0.0,
    }


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    requests = [e for e in events if e["type"] == RECOMMENDATION_EVENT]
    total = len(requests)

    times = [r["response_time_ms"] for r in requests if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Requests with no usable snapshot carry condition=None
    condition_counter: Counter[str] = Counter()
    for r in requests:
        condition_counter[r.get("condition") or "unknown"] += 1
    top_conditions = [{"name": n, "count": c} for n, c in condition_counter.most_common(10)]

    temps = [r["temperature"] for r in requests if r.get("temperature") is not None]
    avg_temp = round(sum(temps) / len(temps), 1) if temps else None

    avg_results: dict[str, float] = {}
    for category in CATEGORIES:
        counts = [r.get("result_counts", {}).get(category, 0) for r in requests]
        avg_results[category] = round(sum(counts) / total, 2) if total else 0.0

    empty = sum(1 for r in requests if not any(r.get("result_counts", {}).values()))
    premium = sum(1 for r in requests if r.get("is_premium"))

    return {
        "total_requests": total,
        "avg_response_time_ms": avg_time,
        "avg_temperature": avg_temp,
        "top_conditions": top_conditions,
        "avg_results_per_category": avg_results,
        "empty_result_rate": round(empty / total * 100, 1) if total else 0.0,
        "premium_share": round(premium / total * 100, 1) if total else 0.0,
        "feedback_summary": feedback_summary(),
    }
