from datetime import date, datetime, time, timedelta

import pytest

from timereg.errors import IngestionError
from timereg.importer.excel_import import _cell_to_value, load_records_from_excel


def test_header_row_defines_fields(make_workbook):
    path = make_workbook([
        ["date", "startTime", "endTime", "description", "project"],
        ["2024-01-01", "09:00", "17:00", "work", "A"],
        ["2024-01-02", "08:30", "12:00", "call, then email", "B"],
    ])

    records = load_records_from_excel(path)

    assert records == [
        {"date": "2024-01-01", "startTime": "09:00", "endTime": "17:00",
         "description": "work", "project": "A"},
        {"date": "2024-01-02", "startTime": "08:30", "endTime": "12:00",
         "description": "call, then email", "project": "B"},
    ]
    assert list(records[0].keys()) == ["date", "startTime", "endTime", "description", "project"]


def test_blank_cells_are_absent_and_blank_rows_skipped(make_workbook):
    path = make_workbook([
        ["date", "hours", "project"],
        ["2024-01-01", 8, None],
        [None, None, None],
        [None, 4, "B"],
    ])

    records = load_records_from_excel(path)

    assert len(records) == 2
    assert records[0] == {"date": "2024-01-01", "hours": 8}
    assert records[1] == {"hours": 4, "project": "B"}


def test_only_first_sheet_is_read(make_workbook):
    path = make_workbook(
        [["project"], ["first"]],
        extra_sheet=[["project"], ["second"], ["third"]],
    )

    assert load_records_from_excel(path) == [{"project": "first"}]


def test_date_cells_become_text(make_workbook):
    path = make_workbook([
        ["date", "project"],
        [datetime(2024, 1, 1), "A"],
    ])

    assert load_records_from_excel(path) == [{"date": "2024-01-01", "project": "A"}]


def test_header_only_sheet_gives_no_records(make_workbook):
    path = make_workbook([["date", "project"]])

    assert load_records_from_excel(path) == []


def test_missing_file(tmp_path):
    missing = str(tmp_path / "nope.xlsx")

    with pytest.raises(IngestionError) as exc_info:
        load_records_from_excel(missing)

    assert exc_info.value.path == missing
    assert "not found" in str(exc_info.value)


def test_unreadable_file(tmp_path):
    bogus = tmp_path / "bogus.xlsx"
    bogus.write_text("this is not a workbook")

    with pytest.raises(IngestionError):
        load_records_from_excel(str(bogus))


def test_cell_conversion():
    assert _cell_to_value(datetime(2024, 3, 5, 0, 0)) == "2024-03-05"
    assert _cell_to_value(datetime(2024, 3, 5, 9, 15, 0)) == "2024-03-05 09:15:00"
    assert _cell_to_value(date(2024, 3, 5)) == "2024-03-05"
    assert _cell_to_value(time(9, 0)) == "09:00"
    assert _cell_to_value(time(9, 0, 30)) == "09:00:30"
    assert _cell_to_value("text") == "text"
    assert _cell_to_value(7.5) == 7.5


def test_sheet_without_cells_gives_no_records(make_workbook):
    path = make_workbook([])

    assert load_records_from_excel(path) == []


def test_duration_cells_become_total_hours(make_workbook):
    path = make_workbook([
        ["project", "duration", "note"],
        ["A", timedelta(hours=26), "x"],
        ["B", timedelta(hours=1, minutes=30), "y"],
    ])

    records = load_records_from_excel(path)

    assert records[0] == {"project": "A", "duration": "26:00", "note": "x"}
    assert records[1]["duration"] == "1:30"


def test_duration_conversion():
    assert _cell_to_value(timedelta(hours=26)) == "26:00"
    assert _cell_to_value(timedelta(minutes=45)) == "0:45"
    assert _cell_to_value(timedelta(hours=2, seconds=5)) == "2:00:05"
    assert _cell_to_value(timedelta(hours=-1, minutes=-30)) == "-1:30"
