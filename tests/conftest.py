"""Shared pytest fixtures for ecomcalc tests."""

from pathlib import Path
import pytest

from ecomcalc.domain.calculator import CalculatorSession
from ecomcalc.domain.entities import DailyRecord
from ecomcalc.domain.record_import import RecordImportService


def _export_line(*fields: str) -> str:
    """Build one export line in the doubled-quote style of the sales export."""
    return '"' + '""\t""'.join(fields) + '"'


@pytest.fixture
def export_header():
    """Return the header line of a sales export."""
    return "Data\tComenzi\tValoare Neta\tCost Livrare\tValoare Totala"


@pytest.fixture
def sample_records():
    """Three consecutive days of sales, in chronological order."""
    return [
        DailyRecord("2025-01-01", 10, 1000.0, 50.0, 1050.0),
        DailyRecord("2025-01-02", 7, 700.5, 35.0, 735.5),
        DailyRecord("2025-01-03", 4, 400.0, 20.0, 420.0),
    ]


@pytest.fixture
def sample_export_text(export_header):
    """Export text for sample_records, out of date order."""
    return "\n".join(
        [
            export_header,
            _export_line("2025-01-03", "4", "400,00", "20,00", "420,00"),
            _export_line("2025-01-01", "10", "1000,00", "50,00", "1050,00"),
            _export_line("2025-01-02", "7", "700,50", "35,00", "735,50"),
        ]
    )


@pytest.fixture
def session():
    """Create a CalculatorSession with the default VAT rate."""
    return CalculatorSession()


@pytest.fixture
def import_service():
    """Create a RecordImportService."""
    return RecordImportService()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def daily_sales_file(fixtures_dir):
    """Sales export with mixed quoting, one short line and one junk row.

    Rows: 2025-01-03 (4 orders), 2025-01-01 (10), 2025-01-02 (7), a
    two-field line, and 2025-01-05 with unreadable orders and net value.
    """
    return fixtures_dir / "daily_sales.txt"


@pytest.fixture
def export_line():
    """Return a builder for doubled-quote export lines."""
    return _export_line
