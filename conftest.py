import io
from datetime import datetime

import pytest
from openpyxl import Workbook

from app import create_app
from config import Settings

DATABASE_URL = 'https://sheets.example.com/database.xlsx'
RECORDS_URL = 'https://sheets.example.com/records.xlsx'


def workbook_bytes(header, rows, extra_sheets=None):
    """Serialize a workbook to xlsx bytes; extra_sheets maps title -> rows after the first sheet."""
    wb = Workbook()
    ws = wb.active
    ws.append(header)
    for row in rows:
        ws.append(row)
    for title, sheet_rows in (extra_sheets or {}).items():
        extra = wb.create_sheet(title)
        for row in sheet_rows:
            extra.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


class FakeSheetHandler:
    """Serves canned rows per URL and counts the fetches."""

    def __init__(self, sheets=None, error=None):
        self.sheets = sheets or {}
        self.error = error
        self.calls = []

    def fetch_rows(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.sheets.get(url, [])]


class FixedClock:
    def __init__(self, hour):
        self.hour = hour

    def __call__(self):
        return datetime(2024, 5, 1, self.hour, 30, 0)


@pytest.fixture
def settings():
    return Settings(
        active_start_hour=11,
        active_end_hour=23,
        database_sheet_url=DATABASE_URL,
        records_sheet_url=RECORDS_URL
    )


@pytest.fixture
def sheets():
    return FakeSheetHandler({
        DATABASE_URL: [
            {'ID': '123', 'Phone': '0100', 'Name': 'Ali'},
            {'ID': '456', 'Phone': '20111', 'Name': 'Mona'},
        ],
        RECORDS_URL: [
            {'Student ID': '123', 'Exam Number': '3', 'Day': 'Monday',
             'Educational Center': 'Maadi', 'Exam Grade': '18', 'Homework Status': 'Done'},
            {'Student ID': '456', 'Exam Number': '1', 'Day': 'Sunday',
             'Educational Center': 'Dokki', 'Exam Grade': '12', 'Homework Status': 'Done'},
            {'Student ID': '123', 'Exam Number': '1', 'Day': 'Saturday',
             'Educational Center': 'Maadi', 'Exam Grade': '15', 'Homework Status': 'Incomplete'},
            {'Student ID': '123', 'Exam Number': '2', 'Day': 'Sunday',
             'Educational Center': 'Maadi', 'Exam Grade': '17', 'Homework Status': ''},
        ],
    })


@pytest.fixture
def clock():
    return FixedClock(12)


@pytest.fixture
def make_client(sheets, clock):
    def _make(settings, hour=None):
        if hour is not None:
            clock.hour = hour
        app = create_app(settings, sheet_handler=sheets, clock=clock)
        app.config['TESTING'] = True
        return app.test_client()
    return _make


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)
