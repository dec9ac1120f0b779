"""Detect source attributes a recommendation would need but doesn't have.

The caller uses the result to ask the user for missing values before
recommending. Entries at or above CRITICAL_ATTRIBUTE_WEIGHT (or marked as
blocking by an application-context answer) should be asked for first.
"""

from dataclasses import dataclass
from typing import Mapping

from .config import CRITICAL_ATTRIBUTE_WEIGHT
from .context import apply_context, blocking_attributes
from .models import PartAttributes
from .parsers import is_missing_value
from .rules import ApplicationReviewRule, LogicTable, OperationalRule


@dataclass(frozen=True)
class MissingAttribute:
    attribute_id: str
    attribute_name: str
    weight: float
    blocking: bool = False


def detect_missing(
    source: PartAttributes,
    table: LogicTable,
    overrides: Mapping[str, str] | None = None,
    context_answers: Mapping[str, str] | None = None,
) -> list[MissingAttribute]:
    """List rule attributes absent from the source, heaviest first.

    Overrides count as present. Review and operational rules never need a
    value, so they are not listed.
    """
    effective = apply_context(table, context_answers)
    blocking = blocking_attributes(table, context_answers)
    overrides = overrides or {}

    missing = []
    for rule in effective.rules:
        if isinstance(rule, (ApplicationReviewRule, OperationalRule)):
            continue
        if source.has(rule.attribute_id) or not is_missing_value(overrides.get(rule.attribute_id)):
            continue
        missing.append(MissingAttribute(
            attribute_id=rule.attribute_id,
            attribute_name=rule.attribute_name,
            weight=rule.weight,
            blocking=rule.attribute_id in blocking,
        ))

    # Stable: equal weights keep table order
    missing.sort(key=lambda m: -m.weight)
    return missing


def critical_missing(
    missing: list[MissingAttribute],
    min_weight: float = CRITICAL_ATTRIBUTE_WEIGHT,
) -> list[MissingAttribute]:
    """Entries that should interrupt the flow: heavy enough, or blocking."""
    return [m for m in missing if m.blocking or m.weight >= min_weight]
