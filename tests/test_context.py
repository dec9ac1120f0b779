"""Tests for application context questions and their rule effects."""

import pytest

from partxref.context import (
    active_effects,
    apply_context,
    blocking_attributes,
    context_from_dict,
)
from partxref.missing import detect_missing
from partxref.models import Part, PartAttributes
from partxref.rules import ApplicationReviewRule, LogicTableError, table_from_dict


CONTEXT = context_from_dict({
    "family_ids": ["T1"],
    "context_sensitivity": "high",
    "questions": [
        {
            "question_id": "flex",
            "question_text": "Is the board flexible?",
            "priority": 2,
            "options": [
                {"value": "yes", "label": "Yes", "attribute_effects": [
                    {"attribute_id": "termination", "effect": "escalate_to_mandatory"},
                ]},
                {"value": "no", "label": "No"},
            ],
        },
        {
            "question_id": "environment",
            "question_text": "Operating environment?",
            "priority": 1,
            "options": [
                {"value": "automotive", "label": "Automotive", "attribute_effects": [
                    {"attribute_id": "aec", "effect": "escalate_to_mandatory", "block_on_missing": True},
                    {"attribute_id": "temp", "effect": "escalate_to_primary"},
                ]},
                {"value": "consumer", "label": "Consumer", "attribute_effects": [
                    {"attribute_id": "aec", "effect": "not_applicable"},
                    {"attribute_id": "temp", "effect": "set_threshold", "note": "0 to 70C is enough"},
                ]},
                {"value": "audio", "label": "Audio", "attribute_effects": [
                    {"attribute_id": "noise", "effect": "add_review_flag"},
                ]},
            ],
        },
        {
            "question_id": "grade",
            "question_text": "Which automotive grade?",
            "priority": 3,
            "condition": {"question_id": "environment", "values": ["automotive"]},
            "options": [
                {"value": "grade0", "label": "Grade 0", "attribute_effects": [
                    {"attribute_id": "noise", "effect": "escalate_to_primary"},
                ]},
            ],
        },
    ],
})

TABLE = table_from_dict({
    "family_id": "T1",
    "family_name": "Test",
    "rules": [
        {"attribute_id": "value", "logic_type": "identity", "weight": 10},
        {"attribute_id": "temp", "logic_type": "threshold", "threshold_direction": "range_superset", "weight": 6},
        {"attribute_id": "aec", "logic_type": "identity_flag", "weight": 4},
        {"attribute_id": "termination", "logic_type": "identity_flag", "weight": 3},
        {"attribute_id": "noise", "logic_type": "threshold", "threshold_direction": "lte", "weight": 10},
    ],
}, context=CONTEXT)


class TestContextFromDict:
    """Tests for loading context definitions."""

    def test_questions_sorted_by_priority(self):
        assert [q.question_id for q in CONTEXT.questions] == ["environment", "flex", "grade"]

    def test_condition_loaded(self):
        grade = CONTEXT.question("grade")
        assert grade.condition == ("environment", ("automotive",))
        assert grade.applies({"environment": "automotive"})
        assert not grade.applies({"environment": "consumer"})
        assert not grade.applies({})

    def test_unknown_effect_rejected(self):
        with pytest.raises(LogicTableError):
            context_from_dict({"questions": [{
                "question_id": "q",
                "options": [{"value": "v", "attribute_effects": [{"attribute_id": "a", "effect": "explode"}]}],
            }]})


class TestApplyContext:
    """Tests for apply_context."""

    def test_mandatory_sets_weight_ten(self):
        effective = apply_context(TABLE, {"flex": "yes"})
        assert effective.get_rule("termination").weight == 10

    def test_primary_raises_to_nine(self):
        effective = apply_context(TABLE, {"environment": "automotive"})
        assert effective.get_rule("temp").weight == 9
        assert effective.get_rule("aec").weight == 10

    def test_primary_never_lowers(self):
        effective = apply_context(TABLE, {"environment": "automotive", "grade": "grade0"})
        assert effective.get_rule("noise").weight == 10

    def test_not_applicable_zeroes_weight(self):
        effective = apply_context(TABLE, {"environment": "consumer"})
        assert effective.get_rule("aec").weight == 0
        assert effective.total_weight == TABLE.total_weight - 4

    def test_set_threshold_only_notes(self):
        effective = apply_context(TABLE, {"environment": "consumer"})
        temp = effective.get_rule("temp")
        assert temp.weight == 6
        assert temp.threshold_direction == "range_superset"
        assert temp.engineering_reason == "0 to 70C is enough"

    def test_review_flag_converts_rule(self):
        effective = apply_context(TABLE, {"environment": "audio"})
        assert isinstance(effective.get_rule("noise"), ApplicationReviewRule)

    def test_conditional_question_ignored_without_parent(self):
        effective = apply_context(TABLE, {"environment": "consumer", "grade": "grade0"})
        assert effective.get_rule("noise").weight == 10
        assert len(active_effects(CONTEXT, {"grade": "grade0"})) == 0

    def test_registry_table_not_mutated(self):
        apply_context(TABLE, {"environment": "consumer", "flex": "yes"})
        assert TABLE.get_rule("aec").weight == 4
        assert TABLE.get_rule("termination").weight == 3

    def test_order_preserved(self):
        effective = apply_context(TABLE, {"environment": "audio"})
        assert [r.attribute_id for r in effective.rules] == [r.attribute_id for r in TABLE.rules]

    def test_unknown_answers_ignored(self):
        assert apply_context(TABLE, {"environment": "space"}) is TABLE
        assert apply_context(TABLE, {"nope": "yes"}) is TABLE
        assert apply_context(TABLE, None) is TABLE
        assert apply_context(TABLE, {"flex": "no"}) is TABLE

    def test_table_without_context(self):
        plain = table_from_dict({"family_id": "P", "rules": []})
        assert apply_context(plain, {"flex": "yes"}) is plain


class TestBlocking:
    """Tests for block_on_missing effects."""

    def test_blocking_attributes(self):
        assert blocking_attributes(TABLE, {"environment": "automotive"}) == {"aec"}
        assert blocking_attributes(TABLE, {"environment": "consumer"}) == set()
        assert blocking_attributes(TABLE, None) == set()

    def test_missing_detection_marks_blocking(self):
        source = PartAttributes(Part(mpn="SRC"), {"value": "10k"})
        missing = detect_missing(source, TABLE, context_answers={"environment": "automotive"})
        by_id = {m.attribute_id: m for m in missing}
        assert by_id["aec"].blocking
        assert not by_id["temp"].blocking
