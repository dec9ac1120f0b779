"""Roll logged recommendations and feedback up into per-family QC statistics.

Input is the already-fetched log and feedback corpus; nothing here does I/O.
Earned weight is computed with the registry's current rule weights, not
whatever weights were in force when a log was written, so the statistics
reflect how the present tables would score past recommendations.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from ..config import MAX_REPRESENTATIVE_EXAMPLES, TOP_RULES_LIMIT
from ..matching import result_credit
from ..models import FEEDBACK_STATUSES, FeedbackRecord, RecommendationLogEntry, XrefRecommendation
from ..registry import LogicTableRegistry
from ..rules import MatchingRule
from .models import (
    DateRange,
    FailingRule,
    FamilyAggregateStats,
    QcAnalysisInput,
    QcExample,
    RuleAggregateStats,
    RuleRate,
)

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"

BUCKET_LABELS: tuple[str, ...] = ("0-20", "20-40", "40-60", "60-80", "80-100")

# Lower value wins when a log has several feedback rows
_STATUS_PRIORITY = {status: i for i, status in enumerate(FEEDBACK_STATUSES)}


# =============================================================================
# HELPERS
# =============================================================================


def median(values: Iterable[float]) -> float:
    """Median via full sort; even counts average the two middle values. 0 when empty."""
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return 0.0
    mid = n // 2
    if n % 2:
        return float(ordered[mid])
    return (ordered[mid - 1] + ordered[mid]) / 2


def bucket_label(pct: float) -> str:
    """[0,20) [20,40) [40,60) [60,80) [80,100]"""
    if pct < 20:
        return "0-20"
    if pct < 40:
        return "20-40"
    if pct < 60:
        return "40-60"
    if pct < 80:
        return "60-80"
    return "80-100"


def feedback_status_priority(status: str) -> int:
    """open=0 < reviewed=1 < resolved=2 < dismissed=3. Unknown statuses sort last."""
    return _STATUS_PRIORITY.get(status, len(_STATUS_PRIORITY))


@dataclass
class LogFeedback:
    """Feedback rows for one log, collapsed."""

    count: int
    status: str
    comment: str | None = None


def summarize_feedback(feedback: Iterable[FeedbackRecord]) -> dict[str, LogFeedback]:
    """Collapse feedback rows per log id, keeping the highest-priority status."""
    by_log: dict[str, LogFeedback] = {}
    for fb in feedback:
        existing = by_log.get(fb.log_id)
        if existing is None:
            by_log[fb.log_id] = LogFeedback(count=1, status=fb.status, comment=fb.user_comment or None)
            continue
        existing.count += 1
        if feedback_status_priority(fb.status) < feedback_status_priority(existing.status):
            existing.status = fb.status
        if existing.comment is None and fb.user_comment:
            existing.comment = fb.user_comment
    return by_log


def _failing_rules(rec: XrefRecommendation) -> list[FailingRule]:
    return [
        FailingRule(
            attribute_id=d.parameter_id,
            attribute_name=d.parameter_name,
            source_value=d.source_value,
            replacement_value=d.replacement_value,
        )
        for d in rec.failing_details
    ]


@dataclass
class _RuleAccumulator:
    attribute_id: str
    attribute_name: str
    total_evaluations: int = 0
    counts: dict[str, int] = field(default_factory=lambda: defaultdict(int))
    missing_count: int = 0
    earned_weight_sum: float = 0.0

    def to_stats(self, rule: MatchingRule | None) -> RuleAggregateStats:
        n = self.total_evaluations
        return RuleAggregateStats(
            attribute_id=self.attribute_id,
            attribute_name=self.attribute_name,
            logic_type=rule.logic_type if rule else UNKNOWN,
            weight=rule.weight if rule else 0,
            total_evaluations=n,
            pass_count=self.counts["pass"],
            fail_count=self.counts["fail"],
            review_count=self.counts["review"],
            upgrade_count=self.counts["upgrade"],
            missing_count=self.missing_count,
            avg_earned_weight=round(self.earned_weight_sum / n, 2) if n else 0.0,
            fail_rate=round(self.counts["fail"] / n, 3) if n else 0.0,
            missing_rate=round(self.missing_count / n, 3) if n else 0.0,
        )


# =============================================================================
# PER-FAMILY AGGREGATION
# =============================================================================


@dataclass
class _FamilyResult:
    stats: FamilyAggregateStats
    worst_example: QcExample | None
    feedback_example: QcExample | None


def _aggregate_family(
    family_id: str,
    logs: list[RecommendationLogEntry],
    feedback_by_log: dict[str, LogFeedback],
    registry: LogicTableRegistry,
) -> _FamilyResult:
    family_name = logs[0].family_name or family_id
    table = registry.get_table(family_id)
    rule_map = {rule.attribute_id: rule for rule in table.rules} if table else {}

    percentages: list[int] = []
    distribution = {label: 0 for label in BUCKET_LABELS}
    rec_count_sum = 0
    accumulators: dict[str, _RuleAccumulator] = {}

    feedback_count = 0
    feedback_by_status = {status: 0 for status in FEEDBACK_STATUSES}
    family_status: str | None = None

    worst: QcExample | None = None
    feedback_example: QcExample | None = None

    for log in logs:
        rec_count_sum += log.recommendation_count

        fb = feedback_by_log.get(log.id)
        if fb:
            feedback_count += fb.count
            feedback_by_status[fb.status] = feedback_by_status.get(fb.status, 0) + 1
            if family_status is None or feedback_status_priority(fb.status) < feedback_status_priority(family_status):
                family_status = fb.status

        if not log.recommendations:
            continue

        top = log.recommendations[0]
        pct = top.match_percentage
        percentages.append(pct)
        distribution[bucket_label(pct)] += 1

        # Every recommendation feeds rule stats, not just the top one
        for rec in log.recommendations:
            for detail in rec.match_details:
                acc = accumulators.get(detail.parameter_id)
                if acc is None:
                    acc = _RuleAccumulator(detail.parameter_id, detail.parameter_name)
                    accumulators[detail.parameter_id] = acc
                acc.total_evaluations += 1
                acc.counts[detail.rule_result] += 1
                if detail.replacement_missing:
                    acc.missing_count += 1
                rule = rule_map.get(detail.parameter_id)
                if rule is not None:
                    acc.earned_weight_sum += rule.weight * result_credit(detail.rule_result)

        if worst is None or pct < worst.match_percentage:
            worst = QcExample(
                kind="worst_match",
                log_id=log.id,
                family_id=family_id,
                family_name=family_name,
                source_mpn=log.source_mpn or UNKNOWN,
                match_percentage=pct,
                failing_rules=_failing_rules(top),
            )

        if fb and feedback_example is None:
            feedback_example = QcExample(
                kind="feedback",
                log_id=log.id,
                family_id=family_id,
                family_name=family_name,
                source_mpn=log.source_mpn or UNKNOWN,
                match_percentage=pct,
                failing_rules=_failing_rules(top),
                feedback_status=fb.status,
                feedback_comment=fb.comment,
            )

    rule_stats = [acc.to_stats(rule_map.get(acc.attribute_id)) for acc in accumulators.values()]

    by_fail = sorted((r for r in rule_stats if r.fail_count > 0), key=lambda r: -r.fail_rate)
    by_missing = sorted((r for r in rule_stats if r.missing_count > 0), key=lambda r: -r.missing_rate)

    stats = FamilyAggregateStats(
        family_id=family_id,
        family_name=family_name,
        log_count=len(logs),
        avg_match_percentage=round(sum(percentages) / len(percentages), 1) if percentages else 0.0,
        median_match_percentage=round(median(percentages), 1),
        avg_recommendation_count=round(rec_count_sum / len(logs), 1) if logs else 0.0,
        match_distribution=distribution,
        rule_stats=rule_stats,
        top_failing_rules=[
            RuleRate(r.attribute_id, r.attribute_name, r.fail_rate, r.fail_count)
            for r in by_fail[:TOP_RULES_LIMIT]
        ],
        top_missing_attributes=[
            RuleRate(r.attribute_id, r.attribute_name, r.missing_rate, r.missing_count)
            for r in by_missing[:TOP_RULES_LIMIT]
        ],
        feedback_count=feedback_count,
        feedback_by_status=feedback_by_status,
        feedback_status=family_status,
    )
    return _FamilyResult(stats, worst, feedback_example)


# =============================================================================
# ENTRY POINT
# =============================================================================


def aggregate_qc_stats(
    logs: Iterable[RecommendationLogEntry],
    feedback: Iterable[FeedbackRecord],
    registry: LogicTableRegistry,
    date_range: DateRange | None = None,
) -> QcAnalysisInput:
    """Aggregate a log corpus into per-family, per-rule statistics.

    Empty input gives a zero-valued result rather than an error.
    """
    logs = list(logs)
    if not logs:
        return QcAnalysisInput.empty(date_range)

    log_ids = {log.id for log in logs}
    feedback_rows = [fb for fb in feedback if fb.log_id in log_ids]
    feedback_by_log = summarize_feedback(feedback_rows)

    by_data_source: dict[str, int] = defaultdict(int)
    by_request_source: dict[str, int] = defaultdict(int)
    groups: dict[str, list[RecommendationLogEntry]] = {}
    for log in logs:
        by_data_source[log.data_source or UNKNOWN] += 1
        by_request_source[log.request_source or UNKNOWN] += 1
        groups.setdefault(log.family_id or UNKNOWN, []).append(log)

    results = [
        _aggregate_family(family_id, family_logs, feedback_by_log, registry)
        for family_id, family_logs in groups.items()
    ]
    # Stable: families with equal counts keep first-seen order
    results.sort(key=lambda r: -r.stats.log_count)

    examples: list[QcExample] = []
    for result in results:
        for example in (result.worst_example, result.feedback_example):
            if example is not None and len(examples) < MAX_REPRESENTATIVE_EXAMPLES:
                examples.append(example)

    logger.info(
        f"Aggregated {len(logs)} logs and {len(feedback_rows)} feedback rows across {len(results)} families"
    )
    return QcAnalysisInput(
        total_logs=len(logs),
        total_feedback=len(feedback_rows),
        date_range=date_range,
        by_data_source=dict(by_data_source),
        by_request_source=dict(by_request_source),
        families=[r.stats for r in results],
        representative_examples=examples,
    )
