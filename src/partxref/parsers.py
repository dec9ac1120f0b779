"""Attribute value parsing for rule evaluation.

Attribute values arrive as free text from the attribute-resolution layer
('100nF', '±1%', '-55°C ~ 125°C', '1/4W'). The parsers here turn them into
numbers in base units so threshold and fit rules can compare them. Every
parser returns None for anything it cannot read; callers decide what an
unreadable value means.
"""

import re

from .config import MISSING_VALUE_PLACEHOLDERS


# =============================================================================
# PRE-COMPILED REGEX PATTERNS
# =============================================================================

_VALUE_PATTERN = re.compile(r"([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)\s*([pnuµμmkKMG])?([A-Za-zΩ]*)")
_FRACTION_PATTERN = re.compile(r"(\d+)\s*/\s*(\d+)\s*([pnuµμmkKMG])?([A-Za-zΩ]*)")
_SIGNED_NUMBER_PATTERN = re.compile(r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?")
# '~', 'to', '..', dashes, or a hyphen sitting between two numbers ('-40°C-85°C')
_RANGE_SEPARATOR_PATTERN = re.compile(
    r"\s*(?:~|\bto\b|\.\.|…|–|—)\s*|(?<=[\d°CFK])\s*-\s*(?=[-+]?\.?\d)",
    re.IGNORECASE,
)
_WHITESPACE_PATTERN = re.compile(r"\s+")
_UNICODE_MINUS = "\u2212"


SI_PREFIXES: dict[str, float] = {
    "p": 1e-12,
    "n": 1e-9,
    "u": 1e-6,
    "µ": 1e-6,  # micro sign
    "μ": 1e-6,  # greek mu
    "m": 1e-3,
    "k": 1e3,
    "K": 1e3,
    "M": 1e6,
    "G": 1e9,
}

# Units a prefix may be attached to. Anything else means the prefix letter is
# part of a word ('ppm', 'min') and the number is taken as-is.
_UNITS = frozenset({
    "f", "h", "v", "a", "w", "s", "c", "j", "g", "m",
    "hz", "ω", "ohm", "ohms", "sec",
})

_TRUTHY_FLAGS = frozenset({"yes", "true", "1", "required"})


# =============================================================================
# VALUE HELPERS
# =============================================================================


def is_missing_value(value: object) -> bool:
    """True for absent, blank, or placeholder-dash values.

    Shared by the matching engine and the QC aggregator so a value counted as
    missing at match time is counted the same way in analytics.
    """
    if value is None:
        return True
    text = str(value).strip()
    return not text or text in MISSING_VALUE_PLACEHOLDERS


def normalize_label(s: str) -> str:
    """Lowercase and collapse whitespace: '  Thin  Film ' -> 'thin film'"""
    return _WHITESPACE_PATTERN.sub(" ", s).strip().lower()


def parse_flag(s: str) -> bool:
    """Parse a yes/no attribute: 'Yes' -> True, 'required' -> True, 'No' -> False"""
    if is_missing_value(s):
        return False
    return s.strip().lower() in _TRUTHY_FLAGS


def _apply_prefix(value: float, prefix: str | None, unit: str) -> float:
    if not prefix:
        return value
    if unit and unit.lower() not in _UNITS:
        return value
    return value * SI_PREFIXES[prefix]


# =============================================================================
# NUMERIC PARSERS
# =============================================================================


def parse_numeric(s: str) -> float | None:
    """Parse a value in base units.

    '100nF' -> 1e-7, '10kΩ' -> 10000, '10K' -> 10000, '1/4W' -> 0.25,
    '±1%' -> 1, '25ppm/°C' -> 25, '1.1mm' -> 0.0011
    """
    if is_missing_value(s):
        return None
    s = s.strip().replace(_UNICODE_MINUS, "-")

    # Fractions only count at the start: '1/4W', not 'Vin/Vout 3'
    match = _FRACTION_PATTERN.match(s)
    if match:
        denominator = float(match.group(2))
        if denominator == 0:
            return None
        value = float(match.group(1)) / denominator
        return _apply_prefix(value, match.group(3), match.group(4))

    match = _VALUE_PATTERN.search(s)
    if not match:
        return None
    return _apply_prefix(float(match.group(1)), match.group(2), match.group(3))


def parse_range(s: str) -> tuple[float, float] | None:
    """Parse a min/max range: '-55°C ~ 125°C' -> (-55, 125), '-40 to 85' -> (-40, 85)

    Returns (low, high) with low <= high, or None if the value is not a range.
    """
    if is_missing_value(s):
        return None
    s = s.strip().replace(_UNICODE_MINUS, "-")

    parts = _RANGE_SEPARATOR_PATTERN.split(s, maxsplit=1)
    if len(parts) == 2:
        low = parse_numeric(parts[0])
        high = parse_numeric(parts[1])
    else:
        numbers = _SIGNED_NUMBER_PATTERN.findall(s)
        if len(numbers) != 2:
            return None
        low, high = float(numbers[0]), float(numbers[1])

    if low is None or high is None:
        return None
    return (min(low, high), max(low, high))
