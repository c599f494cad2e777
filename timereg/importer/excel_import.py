"""
Time Registration CLI - Excel Import Module

This module reads the first worksheet of a spreadsheet into a list of records.
The header row provides the field names; every following row becomes one
record mapping those names to the row's cell values.

Key Features:
- pandas read_excel (openpyxl engine for .xlsx/.xlsm) for decoding
- Blank cells are left out of the record instead of being stored as NaN
- Completely blank rows are skipped
- Date, time and duration cells are converted to text so they display and export
  the way they were typed

Dependencies:
- pandas for spreadsheet decoding
- openpyxl as the pandas engine for Excel workbooks
"""

from datetime import date, datetime, time, timedelta
from typing import Any, List

import pandas as pd

from timereg.errors import IngestionError
from timereg.models import Record


def load_records_from_excel(file_path: str) -> List[Record]:
    """
    Load all rows of the first worksheet as records.

    Args:
        file_path (str): Path to the spreadsheet file

    Returns:
        List[Record]: One record per non-blank row, in sheet order. An empty
        sheet (or a sheet with only a header row) gives an empty list.

    Raises:
        IngestionError: If the file is missing or cannot be read as a spreadsheet

    Example:
        >>> records = load_records_from_excel("hours.xlsx")
        >>> records[0]
        {'date': '2024-01-01', 'startTime': '09:00', 'project': 'A'}
    """
    try:
        df = pd.read_excel(file_path, sheet_name=0, dtype=object)
    except FileNotFoundError:
        raise IngestionError(file_path, f"The file at {file_path} was not found.")
    except Exception as e:
        raise IngestionError(file_path, str(e) or type(e).__name__) from e

    # Drop rows that have no value in any column
    df = df.dropna(how="all")

    headers = [str(column) for column in df.columns]
    records = []
    for row in df.itertuples(index=False, name=None):
        record = {}
        for header, value in zip(headers, row):
            if _is_blank(value):
                continue
            record[header] = _cell_to_value(value)
        records.append(record)

    return records


def _is_blank(value: Any) -> bool:
    """Return True for cells pandas reports as missing (None, NaN, NaT)."""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _cell_to_value(value: Any):
    """
    Convert a raw cell value into a record value.

    Dates, times and durations become text; strings, numbers and booleans are kept.
    pandas Timestamps are datetime subclasses and are handled the same way.
    """
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, timedelta):
        return _duration_text(value)
    if isinstance(value, time):
        if value.second:
            return value.strftime("%H:%M:%S")
        return value.strftime("%H:%M")
    if hasattr(value, "item") and not isinstance(value, (str, bytes)):
        # numpy scalar -> plain Python value
        return value.item()
    return value


def _duration_text(value: timedelta) -> str:
    """
    Render a duration cell as total hours, "H:MM" or "H:MM:SS".

    Durations of a day or more keep counting hours (26:00, not "1 day, 2:00:00").
    """
    total = int(round(value.total_seconds()))
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    if seconds:
        return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours}:{minutes:02d}"
