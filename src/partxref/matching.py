"""Rule evaluation and scoring for cross-reference candidates.

Evaluates a candidate part against a source part, one rule at a time, using
the family's logic table. Each rule yields a MatchDetail with a result of
pass, fail, review or upgrade; the weighted results give the candidate's
match percentage.

Missing values:
- Source value missing (after overrides): the rule has nothing to hold the
  candidate to and passes.
- Replacement value missing while the source has one: the rule fails. The
  detail's replacement_missing flag marks it so QC can count it separately.
- application_review and operational rules ignore values entirely.
"""

import logging
import math
from dataclasses import dataclass
from typing import Mapping

from .config import REVIEW_CREDIT
from .context import apply_context
from .models import MatchDetail, MatchStatus, Part, PartAttributes
from .parsers import is_missing_value, normalize_label, parse_flag, parse_numeric, parse_range
from .rules import (
    ApplicationReviewRule,
    FitRule,
    IdentityFlagRule,
    IdentityRule,
    IdentityUpgradeRule,
    LogicTable,
    MatchingRule,
    OperationalRule,
    RuleResult,
    ThresholdRule,
)

logger = logging.getLogger(__name__)

Outcome = tuple[RuleResult, MatchStatus, str | None]

_NOT_SPECIFIED_NOTE = "Source value not specified"
_MISSING_REPLACEMENT_NOTE = "Replacement value not available"
_REVIEW_NOTE = "Requires engineering review"


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate's evaluated details and score, before ranking."""

    part: Part
    match_details: tuple[MatchDetail, ...]
    match_percentage: int

    @property
    def fail_count(self) -> int:
        return sum(1 for d in self.match_details if d.rule_result == "fail")


# =============================================================================
# PER-TYPE EVALUATORS
# =============================================================================


def _same_number(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-15)


def _evaluate_identity(source: str, candidate: str) -> Outcome:
    if candidate == source:
        return ("pass", "exact", None)
    return ("fail", "different", None)


def hierarchy_rank(value: str, hierarchy: tuple[str, ...]) -> int | None:
    """Position of value in an upgrade hierarchy, or None if it isn't ranked.

    An exact (case-insensitive) label match wins; otherwise the longest label
    contained in the value is used, so 'X7R ±15%' ranks as 'X7R'.
    """
    normalized = normalize_label(value)
    labels = [normalize_label(label) for label in hierarchy]
    if normalized in labels:
        return labels.index(normalized)

    best: int | None = None
    best_len = 0
    for i, label in enumerate(labels):
        if label and label in normalized and len(label) > best_len:
            best, best_len = i, len(label)
    return best


def _evaluate_upgrade(rule: IdentityUpgradeRule, source: str, candidate: str) -> Outcome:
    source_rank = hierarchy_rank(source, rule.upgrade_hierarchy)
    candidate_rank = hierarchy_rank(candidate, rule.upgrade_hierarchy)

    if source_rank is None and candidate_rank is None:
        return _evaluate_identity(source, candidate)
    if candidate_rank is None:
        return ("fail", "different", "Replacement not in upgrade hierarchy")
    if source_rank is None:
        return ("fail", "different", "Source not in upgrade hierarchy")

    if candidate_rank > source_rank:
        return ("upgrade", "better", None)
    if candidate_rank == source_rank:
        return ("pass", "exact", None)
    return ("fail", "worse", None)


def _evaluate_flag(source: str, candidate: str) -> Outcome:
    if not parse_flag(source):
        status: MatchStatus = "exact" if candidate == source else "compatible"
        return ("pass", status, None)
    if candidate == source:
        return ("pass", "exact", None)
    if parse_flag(candidate):
        return ("pass", "compatible", None)
    if is_missing_value(candidate):
        return ("fail", "different", _MISSING_REPLACEMENT_NOTE)
    return ("fail", "worse", None)


def _evaluate_threshold(rule: ThresholdRule | FitRule, source: str, candidate: str) -> Outcome:
    direction = rule.threshold_direction

    if direction == "range_superset":
        source_range = parse_range(source)
        candidate_range = parse_range(candidate)
        if source_range is None or candidate_range is None:
            logger.debug(f"Unparseable range for {rule.attribute_id}: {source!r} vs {candidate!r}")
            return ("fail", "different", "Could not compare ranges")
        low_ok = candidate_range[0] <= source_range[0] or _same_number(candidate_range[0], source_range[0])
        high_ok = candidate_range[1] >= source_range[1] or _same_number(candidate_range[1], source_range[1])
        if not (low_ok and high_ok):
            return ("fail", "worse", None)
        if _same_number(candidate_range[0], source_range[0]) and _same_number(candidate_range[1], source_range[1]):
            return ("pass", "exact", None)
        return ("pass", "better", None)

    source_num = parse_numeric(source)
    candidate_num = parse_numeric(candidate)
    if source_num is None or candidate_num is None:
        logger.debug(f"Unparseable value for {rule.attribute_id}: {source!r} vs {candidate!r}")
        return ("fail", "different", "Could not compare values")

    if _same_number(candidate_num, source_num):
        return ("pass", "exact", None)
    if direction == "gte":
        ok = candidate_num > source_num
    else:
        ok = candidate_num < source_num
    if ok:
        return ("pass", "better", None)
    return ("fail", "worse", None)


def evaluate_rule(rule: MatchingRule, source_value: str, candidate_value: str) -> MatchDetail:
    """Evaluate one rule. Never raises for bad values."""
    outcome: Outcome
    if isinstance(rule, ApplicationReviewRule):
        outcome = ("review", "compatible", _REVIEW_NOTE)
    elif isinstance(rule, OperationalRule):
        outcome = ("pass", "exact" if candidate_value == source_value else "compatible", None)
    elif isinstance(rule, IdentityFlagRule):
        outcome = _evaluate_flag(source_value, candidate_value)
    elif is_missing_value(source_value):
        outcome = ("pass", "compatible", _NOT_SPECIFIED_NOTE)
    elif is_missing_value(candidate_value):
        outcome = ("fail", "different", _MISSING_REPLACEMENT_NOTE)
    elif isinstance(rule, IdentityRule):
        outcome = _evaluate_identity(source_value, candidate_value)
    elif isinstance(rule, IdentityUpgradeRule):
        outcome = _evaluate_upgrade(rule, source_value, candidate_value)
    elif isinstance(rule, (ThresholdRule, FitRule)):
        outcome = _evaluate_threshold(rule, source_value, candidate_value)
    else:
        raise TypeError(f"Unsupported rule type: {type(rule).__name__}")

    rule_result, match_status, note = outcome
    return MatchDetail(
        parameter_id=rule.attribute_id,
        parameter_name=rule.attribute_name,
        source_value=source_value,
        replacement_value=candidate_value,
        rule_result=rule_result,
        match_status=match_status,
        note=note,
    )


# =============================================================================
# TABLE EVALUATION & SCORING
# =============================================================================


def merge_overrides(
    source: PartAttributes,
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Source values as strings, with non-empty overrides taking precedence."""
    values = {key: source.value(key) for key in source.values}
    for key, value in (overrides or {}).items():
        if not is_missing_value(value):
            values[key] = str(value)
    return values


def _evaluate_table(
    source_values: Mapping[str, str],
    candidate: PartAttributes,
    table: LogicTable,
) -> list[MatchDetail]:
    return [
        evaluate_rule(rule, source_values.get(rule.attribute_id, ""), candidate.value(rule.attribute_id))
        for rule in table.rules
    ]


def evaluate(
    source: PartAttributes,
    candidate: PartAttributes,
    table: LogicTable,
    overrides: Mapping[str, str] | None = None,
    context_answers: Mapping[str, str] | None = None,
) -> list[MatchDetail]:
    """Evaluate every rule in the (context-adjusted) table, in table order."""
    effective = apply_context(table, context_answers)
    return _evaluate_table(merge_overrides(source, overrides), candidate, effective)


def result_credit(rule_result: str | None) -> float:
    """Fraction of a rule's weight earned by a result."""
    if rule_result in ("pass", "upgrade"):
        return 1.0
    if rule_result == "review":
        return REVIEW_CREDIT
    return 0.0


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def score(details: list[MatchDetail] | tuple[MatchDetail, ...], table: LogicTable) -> int:
    """Weighted match percentage, 0-100. Rules without a detail earn nothing."""
    total = table.total_weight
    if total <= 0:
        return 0
    results = {d.parameter_id: d.rule_result for d in details}
    earned = sum(rule.weight * result_credit(results.get(rule.attribute_id)) for rule in table.rules)
    return min(100, max(0, _round_half_up(100 * earned / total)))


def evaluate_candidate(
    source: PartAttributes,
    candidate: PartAttributes,
    table: LogicTable,
    overrides: Mapping[str, str] | None = None,
    context_answers: Mapping[str, str] | None = None,
) -> ScoredCandidate:
    """Evaluate and score one candidate against the effective table."""
    effective = apply_context(table, context_answers)
    details = _evaluate_table(merge_overrides(source, overrides), candidate, effective)
    return ScoredCandidate(
        part=candidate.part,
        match_details=tuple(details),
        match_percentage=score(details, effective),
    )
