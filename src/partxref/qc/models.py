"""QC analysis output structures.

QcAnalysisInput is handed to a reporting collaborator as plain data; to_dict()
gives a JSON-ready view.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Literal

ExampleKind = Literal["worst_match", "feedback"]


@dataclass
class RuleAggregateStats:
    attribute_id: str
    attribute_name: str
    logic_type: str  # "unknown" when the rule is no longer in the table
    weight: float
    total_evaluations: int = 0
    pass_count: int = 0
    fail_count: int = 0
    review_count: int = 0
    upgrade_count: int = 0
    missing_count: int = 0
    avg_earned_weight: float = 0.0
    fail_rate: float = 0.0
    missing_rate: float = 0.0


@dataclass
class FailingRule:
    attribute_id: str
    attribute_name: str
    source_value: str
    replacement_value: str


@dataclass
class RuleRate:
    """Entry in a family's top-N lists."""

    attribute_id: str
    attribute_name: str
    rate: float
    count: int


@dataclass
class FamilyAggregateStats:
    family_id: str
    family_name: str
    log_count: int
    avg_match_percentage: float
    median_match_percentage: float
    avg_recommendation_count: float
    match_distribution: dict[str, int]
    rule_stats: list[RuleAggregateStats]
    top_failing_rules: list[RuleRate]
    top_missing_attributes: list[RuleRate]
    feedback_count: int = 0
    feedback_by_status: dict[str, int] = field(default_factory=dict)
    feedback_status: str | None = None  # highest-priority status across the family's logs


@dataclass
class QcExample:
    kind: ExampleKind
    log_id: str
    family_id: str
    family_name: str
    source_mpn: str
    match_percentage: int
    failing_rules: list[FailingRule] = field(default_factory=list)
    feedback_status: str | None = None
    feedback_comment: str | None = None


@dataclass
class DateRange:
    start: datetime
    end: datetime

    def to_dict(self) -> dict[str, str]:
        return {"from": self.start.isoformat(), "to": self.end.isoformat()}


@dataclass
class QcAnalysisInput:
    total_logs: int
    total_feedback: int
    date_range: DateRange | None
    by_data_source: dict[str, int] = field(default_factory=dict)
    by_request_source: dict[str, int] = field(default_factory=dict)
    families: list[FamilyAggregateStats] = field(default_factory=list)
    representative_examples: list[QcExample] = field(default_factory=list)

    @classmethod
    def empty(cls, date_range: DateRange | None = None) -> "QcAnalysisInput":
        return cls(total_logs=0, total_feedback=0, date_range=date_range)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_logs": self.total_logs,
            "total_feedback": self.total_feedback,
            "date_range": self.date_range.to_dict() if self.date_range else None,
            "by_data_source": dict(self.by_data_source),
            "by_request_source": dict(self.by_request_source),
            "families": [asdict(f) for f in self.families],
            "representative_examples": [asdict(e) for e in self.representative_examples],
        }
