"""Shipped logic table definitions."""

from . import discretes, ics, passives
from .variants import VARIANT_RULES, VariantRule

# Base tables, in registration order
BASE_TABLES = [
    passives.MLCC,
    passives.CHIP_RESISTORS,
    passives.FERRITE_BEADS,
    discretes.MOSFETS,
    ics.LDO,
]

# Derived tables; each base must appear earlier in BASE_TABLES or DERIVED_TABLES
DERIVED_TABLES = [
    passives.MICA_DELTA,
    passives.THROUGH_HOLE_RESISTORS_DELTA,
    passives.CURRENT_SENSE_RESISTORS_DELTA,
    passives.CHASSIS_MOUNT_RESISTORS_DELTA,
]

CONTEXTS = [
    passives.MLCC_CONTEXT,
    passives.CHIP_RESISTORS_CONTEXT,
    passives.FERRITE_BEADS_CONTEXT,
    discretes.MOSFETS_CONTEXT,
    ics.LDO_CONTEXT,
]

SUBCATEGORY_PATTERNS = (
    passives.SUBCATEGORY_PATTERNS
    + discretes.SUBCATEGORY_PATTERNS
    + ics.SUBCATEGORY_PATTERNS
)

__all__ = [
    "BASE_TABLES",
    "DERIVED_TABLES",
    "CONTEXTS",
    "SUBCATEGORY_PATTERNS",
    "VARIANT_RULES",
    "VariantRule",
]
