"""Tests for missing source attribute detection."""

from partxref.missing import MissingAttribute, critical_missing, detect_missing
from partxref.models import Part, PartAttributes
from partxref.rules import table_from_dict


TABLE = table_from_dict({
    "family_id": "T1",
    "rules": [
        {"attribute_id": "capacitance", "attribute_name": "Capacitance", "logic_type": "identity", "weight": 10},
        {"attribute_id": "package", "attribute_name": "Package", "logic_type": "identity", "weight": 10},
        {"attribute_id": "voltage", "attribute_name": "Voltage", "logic_type": "threshold", "weight": 9},
        {"attribute_id": "height", "attribute_name": "Height", "logic_type": "fit", "weight": 5},
        {"attribute_id": "esr", "attribute_name": "ESR", "logic_type": "threshold", "weight": 7},
        {"attribute_id": "dc_bias", "attribute_name": "DC Bias", "logic_type": "application_review", "weight": 7},
        {"attribute_id": "packaging", "attribute_name": "Packaging", "logic_type": "operational", "weight": 1},
    ],
})


def _source(**values):
    return PartAttributes(Part(mpn="SRC"), values)


class TestDetectMissing:
    """Tests for detect_missing function."""

    def test_nothing_missing(self):
        source = _source(capacitance="100nF", package="0603", voltage="25V", height="0.8mm", esr="10m")
        assert detect_missing(source, TABLE) == []

    def test_sorted_by_weight(self):
        source = _source(capacitance="100nF")
        missing = detect_missing(source, TABLE)
        assert [m.attribute_id for m in missing] == ["package", "voltage", "esr", "height"]

    def test_equal_weights_keep_table_order(self):
        missing = detect_missing(_source(), TABLE)
        assert [m.attribute_id for m in missing][:2] == ["capacitance", "package"]

    def test_review_and_operational_skipped(self):
        ids = {m.attribute_id for m in detect_missing(_source(), TABLE)}
        assert "dc_bias" not in ids
        assert "packaging" not in ids

    def test_placeholder_counts_as_missing(self):
        source = _source(capacitance="100nF", package="—", voltage="25V", height="0.8mm", esr="10m")
        assert [m.attribute_id for m in detect_missing(source, TABLE)] == ["package"]

    def test_overrides_count_as_present(self):
        source = _source(capacitance="100nF", voltage="25V", height="0.8mm", esr="10m")
        assert detect_missing(source, TABLE, overrides={"package": "0603"}) == []
        assert len(detect_missing(source, TABLE, overrides={"package": ""})) == 1

    def test_entry_fields(self):
        missing = detect_missing(_source(capacitance="100nF", package="0603", voltage="25V", esr="1"), TABLE)
        assert missing == [MissingAttribute("height", "Height", 5)]


class TestCriticalMissing:
    """Tests for critical_missing function."""

    def test_weight_threshold(self):
        missing = detect_missing(_source(), TABLE)
        assert [m.attribute_id for m in critical_missing(missing)] == ["capacitance", "package", "voltage", "esr"]

    def test_blocking_always_included(self):
        missing = [MissingAttribute("aec", "AEC-Q200", 2, blocking=True), MissingAttribute("msl", "MSL", 2)]
        assert [m.attribute_id for m in critical_missing(missing)] == ["aec"]

    def test_custom_threshold(self):
        missing = detect_missing(_source(), TABLE)
        assert len(critical_missing(missing, min_weight=10)) == 2
