"""Tests for domain entities."""

import pytest

from ecomcalc.domain.entities import (
    INPUT_FIELDS,
    AggregateInput,
    DailyRecord,
    DateRange,
    ImportResult,
    ParsedLine,
)


class TestDailyRecord:
    """Tests for DailyRecord entity."""

    def test_create_record(self):
        record = DailyRecord(
            date="2025-01-01",
            orders=10,
            net_value=1000.0,
            shipping_cost=50.0,
            total_value=1050.0,
        )
        assert record.date == "2025-01-01"
        assert record.orders == 10
        assert record.total_value == 1050.0

    def test_record_immutability(self):
        """Test that records cannot be changed after import."""
        record = DailyRecord("2025-01-01", 10, 1000.0, 50.0, 1050.0)
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            record.orders = 11

    def test_record_equality(self):
        record1 = DailyRecord("2025-01-01", 10, 1000.0, 50.0, 1050.0)
        record2 = DailyRecord("2025-01-01", 10, 1000.0, 50.0, 1050.0)
        record3 = DailyRecord("2025-01-02", 10, 1000.0, 50.0, 1050.0)

        assert record1 == record2
        assert record1 != record3


class TestAggregateInput:
    """Tests for AggregateInput entity."""

    def test_defaults(self):
        """Manual entry starts at zero with a single day."""
        inputs = AggregateInput()
        assert inputs.orders_count == 0
        assert inputs.net_value_with_vat == 0.0
        assert inputs.marketing_cost == 0.0
        assert inputs.days_count == 1

    def test_input_fields_match_dataclass(self):
        assert set(INPUT_FIELDS) == set(vars(AggregateInput()))


class TestDateRange:
    """Tests for DateRange entity."""

    def test_empty_range_is_not_set(self):
        assert not DateRange().is_set
        assert not DateRange(start="2025-01-01").is_set

    def test_full_range_is_set(self):
        assert DateRange("2025-01-01", "2025-01-02").is_set


class TestImportResult:
    """Tests for ImportResult entity."""

    def test_empty_result(self):
        result = ImportResult()
        assert result.is_empty
        assert result.imported == 0
        assert result.skipped_count == 0
        assert result.first_date is None
        assert result.last_date is None

    def test_counts(self):
        records = (
            DailyRecord("2025-01-01", 1, 1.0, 1.0, 2.0),
            DailyRecord("2025-01-04", 1, 1.0, 1.0, 2.0),
        )
        skipped = (ParsedLine(line_number=3, raw="x", reason="too short"),)

        result = ImportResult(records=records, skipped=skipped)

        assert result.imported == 2
        assert result.skipped_count == 1
        assert result.skipped[0].is_skipped
        assert result.first_date == "2025-01-01"
        assert result.last_date == "2025-01-04"
