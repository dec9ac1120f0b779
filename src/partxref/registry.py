"""Logic table registry.

An immutable catalog of family logic tables, built once at startup and passed
to whatever needs it. Lookups are by family id or by vendor subcategory label.

Subcategory lookup is a case-insensitive substring test of each registered
pattern against the label. When several patterns are contained in the label
the longest one wins ('Current Sense Resistor' beats 'Resistor'); equal
lengths go to the pattern registered first.
"""

import logging
from types import MappingProxyType
from typing import Any, Iterable

from . import logic_tables
from .context import context_from_dict
from .logic_tables import VariantRule
from .models import PartAttributes
from .rules import LogicTable, LogicTableError, derive_table, table_from_dict

logger = logging.getLogger(__name__)


class LogicTableRegistry:
    """Read-only family table catalog."""

    def __init__(
        self,
        tables: Iterable[LogicTable],
        subcategory_patterns: Iterable[tuple[str, str]] = (),
        variant_rules: Iterable[VariantRule] = (),
    ):
        by_id: dict[str, LogicTable] = {}
        for table in tables:
            if table.family_id in by_id:
                raise LogicTableError(f"Duplicate family id: {table.family_id}")
            by_id[table.family_id] = table
        self._tables = MappingProxyType(by_id)

        patterns = []
        for pattern, family_id in subcategory_patterns:
            if family_id not in by_id:
                raise LogicTableError(f"Subcategory pattern '{pattern}' points at unknown family {family_id}")
            patterns.append((pattern.strip().lower(), family_id))
        # sorted() is stable, so equal lengths keep registration order
        self._patterns: tuple[tuple[str, str], ...] = tuple(sorted(patterns, key=lambda p: -len(p[0])))

        variants = tuple(variant_rules)
        for rule in variants:
            if rule.base_family_id not in by_id:
                raise LogicTableError(f"Variant rule for {rule.variant_family_id} has unknown base {rule.base_family_id}")
        self._variant_rules = variants

    def get_table(self, family_id: str) -> LogicTable | None:
        return self._tables.get(family_id)

    def list_all(self) -> list[LogicTable]:
        return list(self._tables.values())

    def family_id_for_subcategory(self, subcategory: str) -> str | None:
        """Base family id for a subcategory label, or None."""
        if not subcategory:
            return None
        label = subcategory.lower()
        for pattern, family_id in self._patterns:
            if pattern and pattern in label:
                return family_id
        return None

    def get_table_for_subcategory(self, subcategory: str) -> LogicTable | None:
        family_id = self.family_id_for_subcategory(subcategory)
        return self._tables.get(family_id) if family_id else None

    def classify_family(self, base_family_id: str, attributes: PartAttributes) -> str:
        """Most specific registered family for a part, or the base family."""
        for rule in self._variant_rules:
            if rule.base_family_id != base_family_id:
                continue
            if rule.variant_family_id not in self._tables:
                continue
            if rule.matches(attributes):
                return rule.variant_family_id
        return base_family_id

    def resolve_table(self, subcategory: str, attributes: PartAttributes | None = None) -> LogicTable | None:
        """Subcategory lookup followed by variant classification."""
        family_id = self.family_id_for_subcategory(subcategory)
        if family_id is None:
            return None
        if attributes is not None:
            family_id = self.classify_family(family_id, attributes)
        return self._tables[family_id]

    def is_family_supported(self, subcategory: str) -> bool:
        return self.family_id_for_subcategory(subcategory) is not None

    def supported_family_names(self) -> list[str]:
        names: list[str] = []
        for table in self._tables.values():
            if table.family_name not in names:
                names.append(table.family_name)
        return names

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, family_id: object) -> bool:
        return family_id in self._tables


def build_registry(
    base_tables: Iterable[dict[str, Any]],
    derived_tables: Iterable[dict[str, Any]] = (),
    contexts: Iterable[dict[str, Any]] = (),
    subcategory_patterns: Iterable[tuple[str, str]] = (),
    variant_rules: Iterable[VariantRule] = (),
) -> LogicTableRegistry:
    """Build a registry from dict definitions.

    Contexts attach to tables by family id. Derived tables are built in order,
    so a derived table may itself be the base of a later one.
    """
    context_by_family = {}
    for data in contexts:
        context = context_from_dict(data)
        for family_id in context.family_ids:
            context_by_family[family_id] = context

    tables: dict[str, LogicTable] = {}
    for data in base_tables:
        table = table_from_dict(data, context=context_by_family.get(data.get("family_id", "")))
        if table.family_id in tables:
            raise LogicTableError(f"Duplicate family id: {table.family_id}")
        tables[table.family_id] = table

    for delta in derived_tables:
        base = tables.get(delta.get("base_family_id", ""))
        if base is None:
            raise LogicTableError(
                f"Derived family {delta.get('family_id')} has unknown base {delta.get('base_family_id')}"
            )
        table = derive_table(base, delta, context=context_by_family.get(delta.get("family_id", "")))
        if table.family_id in tables:
            raise LogicTableError(f"Duplicate family id: {table.family_id}")
        tables[table.family_id] = table

    registry = LogicTableRegistry(tables.values(), subcategory_patterns, variant_rules)
    logger.info(f"Loaded {len(registry)} logic tables")
    return registry


def build_default_registry() -> LogicTableRegistry:
    """Registry with every shipped family table."""
    return build_registry(
        logic_tables.BASE_TABLES,
        logic_tables.DERIVED_TABLES,
        logic_tables.CONTEXTS,
        logic_tables.SUBCATEGORY_PATTERNS,
        logic_tables.VARIANT_RULES,
    )
