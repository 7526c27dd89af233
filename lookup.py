import re
import logging
from typing import Any, List, Optional

from models import (
    ExamRecord, StudentUser, ID_COLUMN, PHONE_COLUMN,
    STUDENT_ID_COLUMN, EXAM_NUMBER_COLUMN
)
from sheet_handler import SheetHandler

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def parse_exam_number(value: Any) -> int:
    """
    Read the leading integer of an exam number cell.

    '3' -> 3, '12b' -> 12, '4.5' -> 4; blanks and text without a leading
    number -> 0.
    """
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def _cell_text(value: Any) -> str:
    """String form of a request value or cell, with JSON numbers written as the browser does."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CredentialValidator:
    def __init__(self, sheet_handler: SheetHandler, sheet_url: str):
        self.logger = logging.getLogger(__name__)
        self.sheet_handler = sheet_handler
        self.sheet_url = sheet_url

    def validate(self, student_id: Any, phone: Any) -> Optional[StudentUser]:
        """
        Find the first database row whose ID and Phone equal the given values.

        Comparison is exact on the string form of both sides. Returns None
        when no row matches, without saying which field was wrong.
        """
        rows = self.sheet_handler.fetch_rows(self.sheet_url)
        wanted_id = _cell_text(student_id)
        wanted_phone = _cell_text(phone)

        for row in rows:
            row_id = _cell_text(row.get(ID_COLUMN))
            row_phone = _cell_text(row.get(PHONE_COLUMN))
            if not row_id or not row_phone:
                continue
            if row_id == wanted_id and row_phone == wanted_phone:
                return StudentUser.from_row(row)

        self.logger.info(f"No credential match among {len(rows)} rows")
        return None


class RecordFinder:
    def __init__(self, sheet_handler: SheetHandler, sheet_url: str):
        self.logger = logging.getLogger(__name__)
        self.sheet_handler = sheet_handler
        self.sheet_url = sheet_url

    def find(self, student_id: Any) -> List[ExamRecord]:
        """
        Return the exam records of one student ordered by exam number.

        The sort is stable, so rows sharing an exam number keep their sheet
        order. Records are numbered from 1 in the resulting order.
        """
        rows = self.sheet_handler.fetch_rows(self.sheet_url)
        wanted_id = _cell_text(student_id)

        matches = [
            row for row in rows
            if _cell_text(row.get(STUDENT_ID_COLUMN)) and
            _cell_text(row.get(STUDENT_ID_COLUMN)) == wanted_id
        ]
        matches.sort(key=lambda row: parse_exam_number(row.get(EXAM_NUMBER_COLUMN)))

        return [ExamRecord.from_row(index, row) for index, row in enumerate(matches, 1)]
