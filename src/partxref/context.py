"""Application context questions and their effect on a family's rules.

Some families ask the user how the part is used (automotive? flex PCB? hard
switching?) and adjust the rule table to match. Each answer option carries a
list of attribute effects; applying the answers produces an effective copy of
the table. The registry's table is never modified.
"""

from dataclasses import dataclass
from typing import Any, Literal, Mapping

from .rules import LogicTable, LogicTableError, MatchingRule, replace_rule

AttributeEffectType = Literal[
    "escalate_to_mandatory",
    "escalate_to_primary",
    "set_threshold",
    "not_applicable",
    "add_review_flag",
]

ATTRIBUTE_EFFECT_TYPES: tuple[str, ...] = (
    "escalate_to_mandatory",
    "escalate_to_primary",
    "set_threshold",
    "not_applicable",
    "add_review_flag",
)

MANDATORY_WEIGHT = 10
PRIMARY_WEIGHT = 9


@dataclass(frozen=True)
class AttributeEffect:
    attribute_id: str
    effect: AttributeEffectType
    note: str = ""
    block_on_missing: bool = False


@dataclass(frozen=True)
class ContextOption:
    value: str
    label: str
    description: str = ""
    effects: tuple[AttributeEffect, ...] = ()


@dataclass(frozen=True)
class ContextQuestion:
    question_id: str
    question_text: str
    options: tuple[ContextOption, ...]
    priority: int = 0
    # Only asked when another question was answered with one of these values
    condition: tuple[str, tuple[str, ...]] | None = None

    def applies(self, answers: Mapping[str, str]) -> bool:
        if self.condition is None:
            return True
        question_id, values = self.condition
        return answers.get(question_id) in values

    def option(self, value: str) -> ContextOption | None:
        for option in self.options:
            if option.value == value:
                return option
        return None


@dataclass(frozen=True)
class FamilyContext:
    """Context questions for one family, ordered by priority."""

    family_ids: tuple[str, ...]
    questions: tuple[ContextQuestion, ...]
    context_sensitivity: Literal["critical", "high", "moderate", "low"] = "moderate"

    def question(self, question_id: str) -> ContextQuestion | None:
        for question in self.questions:
            if question.question_id == question_id:
                return question
        return None


def _condition_from_dict(data: dict[str, Any] | None) -> tuple[str, tuple[str, ...]] | None:
    if not data:
        return None
    return (data["question_id"], tuple(data.get("values", ())))


def context_from_dict(data: dict[str, Any]) -> FamilyContext:
    """Build a FamilyContext from its dict definition."""
    questions = []
    for q in data.get("questions", []):
        options = []
        for o in q.get("options", []):
            effects = []
            for e in o.get("attribute_effects", []):
                if e.get("effect") not in ATTRIBUTE_EFFECT_TYPES:
                    raise LogicTableError(
                        f"Unknown context effect '{e.get('effect')}' in question '{q.get('question_id')}'"
                    )
                effects.append(AttributeEffect(
                    attribute_id=e["attribute_id"],
                    effect=e["effect"],
                    note=e.get("note", ""),
                    block_on_missing=e.get("block_on_missing", False),
                ))
            options.append(ContextOption(
                value=o["value"],
                label=o.get("label", o["value"]),
                description=o.get("description", ""),
                effects=tuple(effects),
            ))
        questions.append(ContextQuestion(
            question_id=q["question_id"],
            question_text=q.get("question_text", ""),
            options=tuple(options),
            priority=q.get("priority", 0),
            condition=_condition_from_dict(q.get("condition")),
        ))
    questions.sort(key=lambda q: q.priority)
    return FamilyContext(
        family_ids=tuple(data.get("family_ids", ())),
        questions=tuple(questions),
        context_sensitivity=data.get("context_sensitivity", "moderate"),
    )


def _apply_effect(rule: MatchingRule, effect: AttributeEffect) -> MatchingRule:
    if effect.effect == "escalate_to_mandatory":
        return replace_rule(rule, weight=MANDATORY_WEIGHT)
    if effect.effect == "escalate_to_primary":
        return replace_rule(rule, weight=max(rule.weight, PRIMARY_WEIGHT))
    if effect.effect == "not_applicable":
        return replace_rule(rule, weight=0)
    if effect.effect == "add_review_flag":
        return replace_rule(rule, logic_type="application_review")
    # set_threshold: the threshold itself is defined by the source part; the
    # note records what the answer implies for this application.
    if effect.note:
        return replace_rule(rule, engineering_reason=effect.note)
    return rule


def active_effects(context: FamilyContext, answers: Mapping[str, str]) -> list[AttributeEffect]:
    """Effects selected by the answers, in question priority order."""
    effects: list[AttributeEffect] = []
    for question in context.questions:
        value = answers.get(question.question_id)
        if not value or not question.applies(answers):
            continue
        option = question.option(value)
        if option is None:
            continue
        effects.extend(option.effects)
    return effects


def apply_context(table: LogicTable, answers: Mapping[str, str] | None) -> LogicTable:
    """Return the effective table for the given answers.

    Unknown questions, unknown answer values and effects on attributes the
    table doesn't have are ignored.
    """
    if not answers or table.context is None:
        return table

    effects = active_effects(table.context, answers)
    if not effects:
        return table

    rules = list(table.rules)
    index = {rule.attribute_id: i for i, rule in enumerate(rules)}
    for effect in effects:
        i = index.get(effect.attribute_id)
        if i is None:
            continue
        rules[i] = _apply_effect(rules[i], effect)
    return table.with_rules(rules)


def blocking_attributes(table: LogicTable, answers: Mapping[str, str] | None) -> set[str]:
    """Attribute ids whose value must be known before recommending, given the answers."""
    if not answers or table.context is None:
        return set()
    return {e.attribute_id for e in active_effects(table.context, answers) if e.block_on_missing}
