"""Data model shared by the matching engine, ranker and QC aggregator.

Recommendations are persisted by the calling service as JSON snapshots, so
Part, MatchDetail and XrefRecommendation round-trip through the camelCase
layout used in stored log rows.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, Mapping

from .parsers import is_missing_value
from .rules import RuleResult

logger = logging.getLogger(__name__)


MatchStatus = Literal["exact", "compatible", "better", "worse", "different"]
FeedbackStatus = Literal["open", "reviewed", "resolved", "dismissed"]

FEEDBACK_STATUSES: tuple[str, ...] = ("open", "reviewed", "resolved", "dismissed")
RULE_RESULTS: tuple[str, ...] = ("pass", "fail", "review", "upgrade")
# Older logs record operational rules as "info"; they always passed
LEGACY_RULE_RESULTS: dict[str, str] = {"info": "pass"}

AttributeValue = str | int | float | bool | None


def format_value(value: AttributeValue) -> str:
    """Render a raw attribute value as the string rules compare against."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float):
        # Full precision; integral floats drop the ".0" so 10.0 still equals "10"
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    return str(value)


@dataclass(frozen=True)
class Part:
    """Part summary as returned by the attribute-resolution layer."""

    mpn: str
    manufacturer: str = ""
    description: str = ""
    category: str = ""
    subcategory: str = ""
    status: str = "Active"
    datasheet_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "mpn": self.mpn,
            "manufacturer": self.manufacturer,
            "description": self.description,
            "category": self.category,
            "subcategory": self.subcategory,
            "status": self.status,
            "datasheetUrl": self.datasheet_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Part":
        return cls(
            mpn=data.get("mpn") or "",
            manufacturer=data.get("manufacturer") or "",
            description=data.get("description") or "",
            category=data.get("category") or "",
            subcategory=data.get("subcategory") or "",
            status=data.get("status") or "Active",
            datasheet_url=data.get("datasheetUrl", data.get("datasheet_url")),
        )


@dataclass(frozen=True)
class PartAttributes:
    """A part plus its attribute values keyed by canonical attribute id.

    Values are read-only inputs. Absent attributes read as "".
    """

    part: Part
    values: Mapping[str, AttributeValue] = field(default_factory=dict)

    def value(self, attribute_id: str) -> str:
        return format_value(self.values.get(attribute_id))

    def has(self, attribute_id: str) -> bool:
        return not is_missing_value(self.values.get(attribute_id))


@dataclass(frozen=True)
class MatchDetail:
    """Outcome of one rule for one candidate."""

    parameter_id: str
    parameter_name: str
    source_value: str
    replacement_value: str
    rule_result: RuleResult
    match_status: MatchStatus = "exact"
    note: str | None = None

    @property
    def replacement_missing(self) -> bool:
        """Replacement value absent or a placeholder, tracked next to rule_result."""
        return is_missing_value(self.replacement_value)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "parameterId": self.parameter_id,
            "parameterName": self.parameter_name,
            "sourceValue": self.source_value,
            "replacementValue": self.replacement_value,
            "matchStatus": self.match_status,
            "ruleResult": self.rule_result,
        }
        if self.note:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatchDetail":
        rule_result = data.get("ruleResult", data.get("rule_result"))
        if rule_result not in RULE_RESULTS:
            raise ValueError(f"Invalid rule result: {rule_result!r}")
        return cls(
            parameter_id=data.get("parameterId", data.get("parameter_id")) or "",
            parameter_name=data.get("parameterName", data.get("parameter_name")) or "",
            source_value=format_value(data.get("sourceValue", data.get("source_value"))),
            replacement_value=format_value(data.get("replacementValue", data.get("replacement_value"))),
            rule_result=rule_result,
            match_status=data.get("matchStatus", data.get("match_status")) or "exact",
            note=data.get("note"),
        )


@dataclass(frozen=True)
class XrefRecommendation:
    """A ranked replacement candidate."""

    part: Part
    match_percentage: int
    match_details: tuple[MatchDetail, ...] = ()
    notes: str | None = None

    @property
    def failing_details(self) -> list[MatchDetail]:
        return [d for d in self.match_details if d.rule_result == "fail"]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "part": self.part.to_dict(),
            "matchPercentage": self.match_percentage,
            "matchDetails": [d.to_dict() for d in self.match_details],
        }
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "XrefRecommendation":
        details = []
        for d in data.get("matchDetails", data.get("match_details")) or []:
            result = d.get("ruleResult", d.get("rule_result"))
            if result in LEGACY_RULE_RESULTS:
                d = {**d, "ruleResult": LEGACY_RULE_RESULTS[result]}
                d.pop("rule_result", None)
            try:
                details.append(MatchDetail.from_dict(d))
            except ValueError as e:
                # One unreadable detail shouldn't cost the whole recommendation
                logger.warning(f"Skipping match detail {d.get('parameterId', d.get('parameter_id'))!r}: {e}")
        return cls(
            part=Part.from_dict(data.get("part") or {}),
            match_percentage=int(data.get("matchPercentage", data.get("match_percentage")) or 0),
            match_details=tuple(details),
            notes=data.get("notes"),
        )


# =============================================================================
# PERSISTED QC INPUTS
# =============================================================================


def _parse_timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unreadable log timestamp: {value!r}")
        return None


def _parse_snapshot(log_id: str, snapshot: Any) -> list[XrefRecommendation]:
    if snapshot is None:
        return []
    if isinstance(snapshot, str):
        try:
            snapshot = json.loads(snapshot)
        except json.JSONDecodeError as e:
            logger.warning(f"Log {log_id}: snapshot is not valid JSON: {e}")
            return []
    if not isinstance(snapshot, dict):
        logger.warning(f"Log {log_id}: snapshot has unexpected type {type(snapshot).__name__}")
        return []
    try:
        return [XrefRecommendation.from_dict(r) for r in snapshot.get("recommendations") or []]
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Log {log_id}: skipping malformed snapshot: {e}")
        return []


@dataclass(frozen=True)
class RecommendationLogEntry:
    """A persisted recommendation run, read back for QC analysis."""

    id: str
    family_id: str | None
    family_name: str | None
    source_mpn: str
    recommendation_count: int = 0
    recommendations: tuple[XrefRecommendation, ...] = ()
    request_source: str | None = None
    data_source: str | None = None
    created_at: datetime | None = None
    source_manufacturer: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "RecommendationLogEntry":
        log_id = str(row.get("id", ""))
        return cls(
            id=log_id,
            family_id=row.get("family_id"),
            family_name=row.get("family_name"),
            source_mpn=row.get("source_mpn") or "",
            recommendation_count=int(row.get("recommendation_count") or 0),
            recommendations=tuple(_parse_snapshot(log_id, row.get("snapshot"))),
            request_source=row.get("request_source"),
            data_source=row.get("data_source"),
            created_at=_parse_timestamp(row.get("created_at")),
            source_manufacturer=row.get("source_manufacturer"),
        )


@dataclass(frozen=True)
class FeedbackRecord:
    """User feedback attached to a logged recommendation."""

    log_id: str
    status: FeedbackStatus
    user_comment: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "FeedbackRecord":
        status = row.get("status") or "open"
        if status not in FEEDBACK_STATUSES:
            raise ValueError(f"Invalid feedback status: {status!r}")
        return cls(
            log_id=str(row.get("log_id", "")),
            status=status,
            user_comment=row.get("user_comment"),
        )
