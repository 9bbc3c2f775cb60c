"""Sales export import domain service."""

import logging
from pathlib import Path

from ecomcalc.domain.entities import ImportResult
from ecomcalc.domain.errors import ValidationError
from ecomcalc.domain.record_parser import parse_export

logger = logging.getLogger(__name__)


class RecordImportService:
    """Service for importing daily sales exports from text files."""

    def __init__(self, encoding: str = "utf-8-sig"):
        """Initialize record import service.

        Args:
            encoding: Text encoding of export files; the default drops a
                leading byte order mark
        """
        self.encoding = encoding

    def read_text(self, file_path: str | Path) -> str:
        """Read an export file as text.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the path is not a readable text file
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Export file not found: {file_path}")
        if not path.is_file():
            raise ValidationError(f"Not a file: {file_path}")

        try:
            return path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise ValidationError(f"Export file is not valid text: {file_path} ({e.reason})")

    def import_file(self, file_path: str | Path) -> ImportResult:
        """Import daily records from an export file.

        Args:
            file_path: Path to the export file

        Returns:
            ImportResult with records sorted by date and skipped lines

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the path is not a readable text file
        """
        result = parse_export(self.read_text(file_path))
        logger.info(
            "Imported %d records from %s (%d lines skipped)",
            result.imported,
            file_path,
            result.skipped_count,
        )
        return result
