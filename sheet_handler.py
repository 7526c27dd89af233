import io
import logging
from typing import Dict, List

import pandas as pd
import requests


class SheetFetchError(Exception):
    """Raised when a remote sheet cannot be downloaded or parsed."""

    def __init__(self, message: str = 'Failed to fetch sheet data'):
        super().__init__(message)


class SheetHandler:
    def __init__(self, timeout: float = 30.0):
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout

    def fetch_rows(self, url: str) -> List[Dict[str, str]]:
        """
        Download a workbook and return the first sheet as a list of rows.

        Each row maps the column header to the cell text. Every cell is read
        as a string and empty cells come back as ''. Nothing is cached, so
        each call reflects the sheet as it is right now.
        """
        if not url:
            self.logger.error("Error fetching sheet data: no sheet URL configured")
            raise SheetFetchError()

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            rows = self.read_rows(response.content)
        except Exception as e:
            self.logger.error(f"Error fetching sheet data: {str(e)}")
            raise SheetFetchError() from e

        self.logger.debug(f"Fetched {len(rows)} rows from {url}")
        return rows

    def read_rows(self, content: bytes) -> List[Dict[str, str]]:
        df = pd.read_excel(io.BytesIO(content), sheet_name=0, dtype=str, engine='openpyxl')

        # Normalize header whitespace only; cell values are left untouched
        df.columns = [str(c).strip() for c in df.columns]
        df = df.fillna('')

        return df.to_dict('records')
