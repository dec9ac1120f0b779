"""Variant classifier rules.

A subcategory label only gets a part to its base family (all resistors land
on chip resistors, all ceramic capacitors on MLCC). These rules look at the
part's attributes to move it to a more specific family. Within a base family
the rules are checked in order, most specific first.
"""

import re
from dataclasses import dataclass
from typing import Callable

from ..models import PartAttributes
from ..parsers import parse_numeric

_POWER_PACKAGE_PATTERN = re.compile(r"TO-220|TO-247|TO-263|D.?PAK", re.IGNORECASE)
_SMD_CHIP_PATTERN = re.compile(r"^(0[1-9]\d{2}|1[0-9]\d{2}|2[0-5]\d{2})$")


@dataclass(frozen=True)
class VariantRule:
    variant_family_id: str
    base_family_id: str
    matches: Callable[[PartAttributes], bool]


def _is_current_sense(attrs: PartAttributes) -> bool:
    resistance = parse_numeric(attrs.value("resistance"))
    desc = attrs.part.description.lower()
    is_low_value = resistance is not None and resistance <= 1
    is_sensing = "current sense" in desc or "4-terminal" in desc or "kelvin" in desc
    return is_low_value and is_sensing


def _is_chassis_mount(attrs: PartAttributes) -> bool:
    power = parse_numeric(attrs.value("power_rating"))
    package = attrs.value("package_case").upper()
    desc = attrs.part.description.lower()
    is_power_package = bool(_POWER_PACKAGE_PATTERN.search(package))
    is_smd_chip = bool(_SMD_CHIP_PATTERN.match(re.sub(r"\s", "", package)))
    is_high_power = power is not None and power >= 5
    is_chassis_keyword = "chassis mount" in desc or "chassis-mount" in desc
    # High power alone isn't enough: 2512 chips reach several watts
    return is_power_package or is_chassis_keyword or (is_high_power and not is_smd_chip)


def _is_through_hole(attrs: PartAttributes) -> bool:
    desc = attrs.part.description.lower()
    mount = attrs.value("mounting_type").lower()
    return any(k in text for k in ("through hole", "axial") for text in (mount, desc))


def _is_mica(attrs: PartAttributes) -> bool:
    return "mica" in attrs.part.description.lower() or "mica" in attrs.value("dielectric").lower()


VARIANT_RULES: list[VariantRule] = [
    VariantRule("54", "52", _is_current_sense),
    VariantRule("55", "52", _is_chassis_mount),
    VariantRule("53", "52", _is_through_hole),
    VariantRule("13", "12", _is_mica),
]
