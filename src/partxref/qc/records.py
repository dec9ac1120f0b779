"""Build recommendation log rows for the caller to persist."""

from typing import Any, Literal, Sequence

from ..config import MAX_SNAPSHOT_RECOMMENDATIONS
from ..models import Part, XrefRecommendation

RequestSource = Literal["direct", "chat", "batch"]
REQUEST_SOURCES: tuple[str, ...] = ("direct", "chat", "batch")


def build_snapshot(
    recommendations: Sequence[XrefRecommendation],
    source: Part | None = None,
) -> dict[str, Any]:
    """Snapshot of the top recommendations (already ranked best first)."""
    snapshot: dict[str, Any] = {
        "recommendations": [r.to_dict() for r in recommendations[:MAX_SNAPSHOT_RECOMMENDATIONS]],
    }
    if source is not None:
        snapshot["sourcePart"] = source.to_dict()
    return snapshot


def build_log_record(
    source: Part,
    recommendations: Sequence[XrefRecommendation],
    *,
    request_source: str,
    family_id: str | None = None,
    family_name: str | None = None,
    data_source: str | None = None,
    user_id: str | None = None,
) -> dict[str, Any]:
    """Row dict for the recommendation log.

    recommendation_count is the full count; the snapshot keeps only the top
    MAX_SNAPSHOT_RECOMMENDATIONS.
    """
    if request_source not in REQUEST_SOURCES:
        raise ValueError(f"Unknown request source: {request_source!r}")
    return {
        "user_id": user_id,
        "source_mpn": source.mpn,
        "source_manufacturer": source.manufacturer or None,
        "family_id": family_id,
        "family_name": family_name,
        "recommendation_count": len(recommendations),
        "request_source": request_source,
        "data_source": data_source,
        "snapshot": build_snapshot(recommendations, source),
    }
