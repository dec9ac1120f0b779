"""Matching rule model and logic table loading.

A logic table is the ordered, weighted set of rules that decides whether one
part can replace another within a component family. Each rule is one variant
of a closed set, keyed by its logic type, and carries only the fields its
evaluation needs:

    identity            exact match required
    identity_upgrade    ranked categories, a higher rank is an upgrade
    identity_flag       only constrains when the source requires the flag
    threshold           numeric comparison (gte, lte, range_superset)
    fit                 physical constraint, lte unless told otherwise
    application_review  always needs an engineer to confirm
    operational         informational only

Table data is written as plain dicts (see logic_tables/) and converted here.
Derived families are built from a base table with a remove/override/add delta.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Literal

if TYPE_CHECKING:
    from .context import FamilyContext


LogicType = Literal[
    "identity",
    "identity_upgrade",
    "identity_flag",
    "threshold",
    "fit",
    "application_review",
    "operational",
]
ThresholdDirection = Literal["gte", "lte", "range_superset"]
RuleResult = Literal["pass", "fail", "review", "upgrade"]

THRESHOLD_DIRECTIONS: tuple[str, ...] = ("gte", "lte", "range_superset")


class LogicTableError(ValueError):
    """Raised when a logic table definition is invalid."""


# =============================================================================
# RULE VARIANTS
# =============================================================================


@dataclass(frozen=True)
class MatchingRule:
    """Fields shared by every rule variant."""

    logic_type: ClassVar[str] = ""

    attribute_id: str
    attribute_name: str
    weight: float
    engineering_reason: str = ""
    sort_order: int = 0


@dataclass(frozen=True)
class IdentityRule(MatchingRule):
    logic_type: ClassVar[str] = "identity"


@dataclass(frozen=True)
class IdentityUpgradeRule(MatchingRule):
    logic_type: ClassVar[str] = "identity_upgrade"

    upgrade_hierarchy: tuple[str, ...] = ()  # weakest first


@dataclass(frozen=True)
class IdentityFlagRule(MatchingRule):
    logic_type: ClassVar[str] = "identity_flag"


@dataclass(frozen=True)
class ThresholdRule(MatchingRule):
    logic_type: ClassVar[str] = "threshold"

    threshold_direction: ThresholdDirection = "gte"


@dataclass(frozen=True)
class FitRule(MatchingRule):
    logic_type: ClassVar[str] = "fit"

    threshold_direction: ThresholdDirection = "lte"


@dataclass(frozen=True)
class ApplicationReviewRule(MatchingRule):
    logic_type: ClassVar[str] = "application_review"


@dataclass(frozen=True)
class OperationalRule(MatchingRule):
    logic_type: ClassVar[str] = "operational"


RULE_TYPES: dict[str, type[MatchingRule]] = {
    cls.logic_type: cls
    for cls in (
        IdentityRule,
        IdentityUpgradeRule,
        IdentityFlagRule,
        ThresholdRule,
        FitRule,
        ApplicationReviewRule,
        OperationalRule,
    )
}

LOGIC_TYPES: tuple[str, ...] = tuple(RULE_TYPES)


def rule_from_dict(data: dict[str, Any]) -> MatchingRule:
    """Build a rule variant from a loosely-typed record.

    Fields that do not apply to the variant (e.g. an upgrade hierarchy on a
    threshold rule) are dropped.
    """
    attribute_id = data.get("attribute_id")
    if not attribute_id:
        raise LogicTableError(f"Rule is missing attribute_id: {data!r}")

    logic_type = data.get("logic_type")
    rule_cls = RULE_TYPES.get(logic_type or "")
    if rule_cls is None:
        raise LogicTableError(f"Unknown logic type '{logic_type}' for attribute '{attribute_id}'")

    weight = data.get("weight", 0)
    if not isinstance(weight, (int, float)) or isinstance(weight, bool) or weight < 0:
        raise LogicTableError(f"Invalid weight {weight!r} for attribute '{attribute_id}'")

    kwargs: dict[str, Any] = {
        "attribute_id": attribute_id,
        "attribute_name": data.get("attribute_name") or attribute_id,
        "weight": weight,
        "engineering_reason": data.get("engineering_reason", ""),
        "sort_order": data.get("sort_order", 0),
    }

    if rule_cls is IdentityUpgradeRule:
        hierarchy = data.get("upgrade_hierarchy") or ()
        if not hierarchy:
            raise LogicTableError(f"identity_upgrade rule '{attribute_id}' needs an upgrade_hierarchy")
        kwargs["upgrade_hierarchy"] = tuple(hierarchy)
    elif rule_cls in (ThresholdRule, FitRule):
        direction = data.get("threshold_direction")
        if direction is not None:
            if direction not in THRESHOLD_DIRECTIONS:
                raise LogicTableError(
                    f"Unknown threshold direction '{direction}' for attribute '{attribute_id}'"
                )
            kwargs["threshold_direction"] = direction

    return rule_cls(**kwargs)


def rule_to_dict(rule: MatchingRule) -> dict[str, Any]:
    """Inverse of rule_from_dict."""
    data = dataclasses.asdict(rule)
    data["logic_type"] = rule.logic_type
    if "upgrade_hierarchy" in data:
        data["upgrade_hierarchy"] = list(data["upgrade_hierarchy"])
    return data


def replace_rule(rule: MatchingRule, **changes: Any) -> MatchingRule:
    """Copy a rule with changes applied. A logic_type change swaps the variant."""
    if "logic_type" in changes and changes["logic_type"] != rule.logic_type:
        return rule_from_dict({**rule_to_dict(rule), **changes})
    changes.pop("logic_type", None)
    if "upgrade_hierarchy" in changes:
        changes["upgrade_hierarchy"] = tuple(changes["upgrade_hierarchy"])
    known = {f.name for f in dataclasses.fields(rule)}
    return dataclasses.replace(rule, **{k: v for k, v in changes.items() if k in known})


# =============================================================================
# LOGIC TABLE
# =============================================================================


@dataclass(frozen=True)
class LogicTable:
    """Ordered, weighted rule set for one component family."""

    family_id: str
    family_name: str
    category: str
    description: str
    rules: tuple[MatchingRule, ...]
    context: FamilyContext | None = None

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for rule in self.rules:
            if rule.attribute_id in seen:
                raise LogicTableError(
                    f"Duplicate attribute '{rule.attribute_id}' in family {self.family_id}"
                )
            if rule.weight < 0:
                raise LogicTableError(
                    f"Negative weight for '{rule.attribute_id}' in family {self.family_id}"
                )
            seen.add(rule.attribute_id)

    @property
    def total_weight(self) -> float:
        return sum(rule.weight for rule in self.rules)

    def get_rule(self, attribute_id: str) -> MatchingRule | None:
        for rule in self.rules:
            if rule.attribute_id == attribute_id:
                return rule
        return None

    def with_rules(self, rules: list[MatchingRule] | tuple[MatchingRule, ...]) -> LogicTable:
        return dataclasses.replace(self, rules=tuple(rules))


def table_from_dict(data: dict[str, Any], context: FamilyContext | None = None) -> LogicTable:
    """Build a LogicTable from its dict definition."""
    family_id = data.get("family_id")
    if not family_id:
        raise LogicTableError(f"Logic table is missing family_id: {data.get('family_name')!r}")
    try:
        rules = tuple(rule_from_dict(r) for r in data.get("rules", []))
    except LogicTableError as e:
        raise LogicTableError(f"Family {family_id}: {e}") from e
    return LogicTable(
        family_id=family_id,
        family_name=data.get("family_name") or family_id,
        category=data.get("category", ""),
        description=data.get("description", ""),
        rules=rules,
        context=context,
    )


def derive_table(
    base: LogicTable,
    delta: dict[str, Any],
    context: FamilyContext | None = None,
) -> LogicTable:
    """Build a derived family table from a base table.

    The delta is applied in order: 'remove' (attribute ids), then 'override'
    (partial rule dicts keyed by attribute_id), then 'add' (full rule dicts).
    """
    family_id = delta.get("family_id")
    if not family_id:
        raise LogicTableError(f"Derived table of {base.family_id} is missing family_id")

    base_id = delta.get("base_family_id", base.family_id)
    if base_id != base.family_id:
        raise LogicTableError(
            f"Family {family_id} derives from {base_id}, got base table {base.family_id}"
        )

    rules = list(base.rules)

    remove = set(delta.get("remove", ()))
    unknown = remove - {r.attribute_id for r in rules}
    if unknown:
        raise LogicTableError(f"Family {family_id} removes unknown attributes: {sorted(unknown)}")
    rules = [r for r in rules if r.attribute_id not in remove]

    for override in delta.get("override", ()):
        attribute_id = override.get("attribute_id")
        index = next((i for i, r in enumerate(rules) if r.attribute_id == attribute_id), None)
        if index is None:
            raise LogicTableError(f"Family {family_id} overrides unknown attribute '{attribute_id}'")
        changes = {k: v for k, v in override.items() if k != "attribute_id"}
        try:
            rules[index] = replace_rule(rules[index], **changes)
        except LogicTableError as e:
            raise LogicTableError(f"Family {family_id}: {e}") from e

    try:
        rules.extend(rule_from_dict(r) for r in delta.get("add", ()))
    except LogicTableError as e:
        raise LogicTableError(f"Family {family_id}: {e}") from e

    return LogicTable(
        family_id=family_id,
        family_name=delta.get("family_name") or family_id,
        category=delta.get("category", base.category),
        description=delta.get("description", base.description),
        rules=tuple(rules),
        context=context,
    )
