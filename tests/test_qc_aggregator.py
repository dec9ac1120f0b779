"""Tests for QC statistics aggregation."""

import pytest

from partxref.models import FeedbackRecord, MatchDetail, Part, RecommendationLogEntry, XrefRecommendation
from partxref.qc.aggregator import (
    aggregate_qc_stats,
    bucket_label,
    feedback_status_priority,
    median,
    summarize_feedback,
)
from partxref.registry import build_registry


REGISTRY = build_registry([{
    "family_id": "T1",
    "family_name": "Test Family",
    "rules": [
        {"attribute_id": "voltage", "attribute_name": "Voltage", "logic_type": "threshold", "weight": 6},
        {"attribute_id": "package", "attribute_name": "Package", "logic_type": "identity", "weight": 4},
        {"attribute_id": "noise", "attribute_name": "Noise", "logic_type": "application_review", "weight": 2},
    ],
}])


def _detail(attribute_id, result, replacement="x", name=None):
    return MatchDetail(attribute_id, name or attribute_id.title(), "src", replacement, result)


def _rec(mpn, pct, *details):
    return XrefRecommendation(Part(mpn=mpn), pct, tuple(details))


def _log(log_id, pct=80, family_id="T1", details=None, recs=None, **kwargs):
    if recs is None:
        recs = (_rec(f"ALT-{log_id}", pct, *(details or [_detail("voltage", "pass")])),)
    return RecommendationLogEntry(
        id=log_id,
        family_id=family_id,
        family_name=kwargs.pop("family_name", "Test Family"),
        source_mpn=kwargs.pop("source_mpn", f"SRC-{log_id}"),
        recommendation_count=kwargs.pop("recommendation_count", len(recs)),
        recommendations=tuple(recs),
        **kwargs,
    )


class TestHelpers:
    """Tests for median, buckets and status priority."""

    def test_median(self):
        assert median([20, 40, 60]) == 40
        assert median([20, 40]) == 30
        assert median([60, 20, 40]) == 40
        assert median([]) == 0

    @pytest.mark.parametrize("pct,label", [
        (0, "0-20"), (19, "0-20"), (20, "20-40"), (59, "40-60"),
        (79, "60-80"), (80, "80-100"), (100, "80-100"),
    ])
    def test_bucket_label(self, pct, label):
        assert bucket_label(pct) == label

    def test_status_priority(self):
        order = ["open", "reviewed", "resolved", "dismissed"]
        assert sorted(order, key=feedback_status_priority) == order
        assert feedback_status_priority("weird") > feedback_status_priority("dismissed")

    def test_summarize_feedback(self):
        summary = summarize_feedback([
            FeedbackRecord("L1", "resolved", None),
            FeedbackRecord("L1", "open", "wrong package"),
            FeedbackRecord("L1", "dismissed", "later comment"),
        ])
        assert summary["L1"].count == 3
        assert summary["L1"].status == "open"
        assert summary["L1"].comment == "wrong package"


class TestAggregateEmpty:
    """Aggregation over no logs."""

    def test_empty(self):
        result = aggregate_qc_stats([], [], REGISTRY)
        assert result.total_logs == 0
        assert result.total_feedback == 0
        assert result.families == []
        assert result.representative_examples == []

    def test_feedback_without_logs_ignored(self):
        result = aggregate_qc_stats([], [FeedbackRecord("L1", "open")], REGISTRY)
        assert result.total_feedback == 0


class TestFamilyStats:
    """Tests for per-family statistics."""

    def test_match_percentages(self):
        logs = [_log("L1", 20), _log("L2", 40), _log("L3", 60)]
        family = aggregate_qc_stats(logs, [], REGISTRY).families[0]
        assert family.family_id == "T1"
        assert family.log_count == 3
        assert family.avg_match_percentage == 40.0
        assert family.median_match_percentage == 40.0
        assert family.match_distribution == {"0-20": 0, "20-40": 1, "40-60": 1, "60-80": 1, "80-100": 0}

    def test_avg_rounded_to_one_decimal(self):
        logs = [_log("L1", 10), _log("L2", 10), _log("L3", 11)]
        family = aggregate_qc_stats(logs, [], REGISTRY).families[0]
        assert family.avg_match_percentage == 10.3

    def test_log_without_recommendations(self):
        logs = [_log("L1", 90), _log("L2", recs=[], recommendation_count=0)]
        family = aggregate_qc_stats(logs, [], REGISTRY).families[0]
        assert family.log_count == 2
        assert family.avg_match_percentage == 90.0
        assert family.avg_recommendation_count == 0.5
        assert sum(family.match_distribution.values()) == 1

    def test_families_sorted_by_log_count(self):
        logs = [_log("L1", family_id="A"), _log("L2", family_id="B"), _log("L3", family_id="B")]
        result = aggregate_qc_stats(logs, [], REGISTRY)
        assert [f.family_id for f in result.families] == ["B", "A"]

    def test_missing_family_grouped_as_unknown(self):
        logs = [_log("L1", family_id=None, family_name=None)]
        family = aggregate_qc_stats(logs, [], REGISTRY).families[0]
        assert family.family_id == "unknown"
        assert family.family_name == "unknown"

    def test_source_breakdowns(self):
        logs = [
            _log("L1", request_source="chat", data_source="digikey"),
            _log("L2", request_source="batch"),
            _log("L3", request_source="chat", data_source="digikey"),
        ]
        result = aggregate_qc_stats(logs, [], REGISTRY)
        assert result.by_request_source == {"chat": 2, "batch": 1}
        assert result.by_data_source == {"digikey": 2, "unknown": 1}


class TestRuleStats:
    """Tests for per-rule statistics."""

    def test_counts_every_recommendation(self):
        logs = [_log("L1", recs=[
            _rec("A", 100, _detail("voltage", "pass"), _detail("package", "pass")),
            _rec("B", 60, _detail("voltage", "fail"), _detail("package", "pass")),
        ])]
        family = aggregate_qc_stats(logs, [], REGISTRY).families[0]
        voltage = next(r for r in family.rule_stats if r.attribute_id == "voltage")
        assert voltage.total_evaluations == 2
        assert voltage.pass_count == 1
        assert voltage.fail_count == 1
        assert voltage.fail_rate == 0.5
        assert voltage.logic_type == "threshold"
        assert voltage.weight == 6
        assert voltage.avg_earned_weight == 3.0

    def test_review_earns_half_weight(self):
        logs = [_log("L1", details=[_detail("noise", "review")])]
        noise = aggregate_qc_stats(logs, [], REGISTRY).families[0].rule_stats[0]
        assert noise.review_count == 1
        assert noise.avg_earned_weight == 1.0

    def test_missing_tracked_separately(self):
        logs = [
            _log("L1", details=[_detail("package", "fail", replacement="")]),
            _log("L2", details=[_detail("package", "fail", replacement="0805")]),
            _log("L3", details=[_detail("package", "pass", replacement="0603")]),
        ]
        package = aggregate_qc_stats(logs, [], REGISTRY).families[0].rule_stats[0]
        assert package.fail_count == 2
        assert package.missing_count == 1
        assert package.fail_rate == 0.667
        assert package.missing_rate == 0.333

    def test_rule_not_in_table(self):
        logs = [_log("L1", details=[_detail("retired_attr", "fail")])]
        stats = aggregate_qc_stats(logs, [], REGISTRY).families[0].rule_stats[0]
        assert stats.logic_type == "unknown"
        assert stats.weight == 0
        assert stats.avg_earned_weight == 0.0

    def test_unregistered_family(self):
        logs = [_log("L1", family_id="ZZ", details=[_detail("voltage", "pass")])]
        stats = aggregate_qc_stats(logs, [], REGISTRY).families[0].rule_stats[0]
        assert stats.logic_type == "unknown"

    def test_top_failing_limited_and_sorted(self):
        details = [_detail(f"a{i}", "fail" if i < 6 else "pass") for i in range(8)]
        logs = [
            _log("L1", details=details),
            _log("L2", details=[_detail("a0", "pass"), _detail("a1", "fail")]),
        ]
        family = aggregate_qc_stats(logs, [], REGISTRY).families[0]
        assert len(family.top_failing_rules) == 5
        assert family.top_failing_rules[0].rate == 1.0
        assert "a0" not in [r.attribute_id for r in family.top_failing_rules[:4]]
        rates = [r.rate for r in family.top_failing_rules]
        assert rates == sorted(rates, reverse=True)

    def test_top_missing(self):
        logs = [_log("L1", details=[_detail("voltage", "fail", replacement="-"), _detail("package", "pass")])]
        family = aggregate_qc_stats(logs, [], REGISTRY).families[0]
        assert [r.attribute_id for r in family.top_missing_attributes] == ["voltage"]
        assert family.top_missing_attributes[0].count == 1


class TestFeedback:
    """Tests for feedback roll-up."""

    def test_resolved_then_open_reports_open(self):
        feedback = [FeedbackRecord("L1", "resolved"), FeedbackRecord("L1", "open")]
        family = aggregate_qc_stats([_log("L1")], feedback, REGISTRY).families[0]
        assert family.feedback_status == "open"
        assert family.feedback_count == 2

    def test_status_across_logs(self):
        feedback = [FeedbackRecord("L1", "dismissed"), FeedbackRecord("L2", "reviewed")]
        family = aggregate_qc_stats([_log("L1"), _log("L2")], feedback, REGISTRY).families[0]
        assert family.feedback_status == "reviewed"
        assert family.feedback_by_status["dismissed"] == 1
        assert family.feedback_by_status["reviewed"] == 1

    def test_no_feedback(self):
        family = aggregate_qc_stats([_log("L1")], [], REGISTRY).families[0]
        assert family.feedback_status is None
        assert family.feedback_count == 0

    def test_feedback_for_other_logs_dropped(self):
        result = aggregate_qc_stats([_log("L1")], [FeedbackRecord("L9", "open")], REGISTRY)
        assert result.total_feedback == 0


class TestExamples:
    """Tests for representative examples."""

    def test_worst_match_and_feedback(self):
        logs = [
            _log("L1", 90),
            _log("L2", 30, details=[_detail("package", "fail", replacement="0805", name="Package")]),
        ]
        feedback = [FeedbackRecord("L1", "open", "bad pick")]
        examples = aggregate_qc_stats(logs, feedback, REGISTRY).representative_examples

        worst = next(e for e in examples if e.kind == "worst_match")
        assert worst.log_id == "L2"
        assert worst.match_percentage == 30
        assert worst.failing_rules[0].attribute_name == "Package"
        assert worst.failing_rules[0].replacement_value == "0805"

        fb = next(e for e in examples if e.kind == "feedback")
        assert fb.log_id == "L1"
        assert fb.feedback_comment == "bad pick"

    def test_examples_capped(self):
        logs = [_log(f"L{i}", 50, family_id=f"F{i}") for i in range(4)]
        feedback = [FeedbackRecord(f"L{i}", "open") for i in range(4)]
        examples = aggregate_qc_stats(logs, feedback, REGISTRY).representative_examples
        assert len(examples) == 5

    def test_examples_follow_family_order(self):
        logs = [_log("L1", 50, family_id="A"), _log("L2", 60, family_id="B"), _log("L3", 70, family_id="B")]
        examples = aggregate_qc_stats(logs, [], REGISTRY).representative_examples
        assert [e.family_id for e in examples] == ["B", "A"]

    def test_to_dict(self):
        data = aggregate_qc_stats([_log("L1")], [], REGISTRY).to_dict()
        assert data["total_logs"] == 1
        assert data["families"][0]["family_id"] == "T1"
        assert data["date_range"] is None
