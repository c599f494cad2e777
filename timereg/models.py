"""
Time Registration CLI - Data Models Module

This module defines the data structures shared across the application.

Key Components:
- Record: a schema-less, insertion-ordered mapping of field name to value
- TimeEntry: the built-in five-field template used when no records exist yet
- SessionState: the state owned by the session controller for one run

Records are deliberately plain dictionaries since their field set depends on
whichever spreadsheet was loaded. Pydantic is used where the shape is known.
"""

from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel, Field

# A record maps a column header to a cell value (text, or a number read
# from the spreadsheet). Blank cells are simply absent.
Record = Dict[str, Union[str, int, float, bool]]

DEFAULT_CSV_FILE = "time_entries.csv"


class TimeEntry(BaseModel):
    """
    Fallback template for a new time entry.

    Used by interactive entry when the record set is empty. Field order is
    the prompt order; the alias is the column name written to the CSV file
    and the description is the hint shown in the prompt.

    Example:
        >>> entry = TimeEntry(date="2024-01-01", startTime="09:00",
        ...                   endTime="17:00", description="work", project="A")
        >>> entry.to_record()["startTime"]
        '09:00'
    """
    date: str = Field("", description="date (YYYY-MM-DD)")
    start_time: str = Field("", alias="startTime", description="start time (HH:MM)")
    end_time: str = Field("", alias="endTime", description="end time (HH:MM)")
    description: str = Field("", description="description")
    project: str = Field("", description="project")

    @classmethod
    def prompt_fields(cls) -> List[Tuple[str, str]]:
        """
        Return (column name, prompt hint) pairs in prompt order.

        Returns:
            List[Tuple[str, str]]: e.g. [("date", "date (YYYY-MM-DD)"), ...]
        """
        return [
            (field.alias or name, field.description or name)
            for name, field in cls.model_fields.items()
        ]

    def to_record(self) -> Record:
        """Convert the entry to a plain record keyed by column name."""
        return self.model_dump(by_alias=True)


class SessionState(BaseModel):
    """
    State of one interactive session.

    Attributes:
        excel_file (str): Path of the spreadsheet the records came from, or ""
        csv_file (str): Output path for CSV saves, constant for the run
        entries (List[Dict[str, Any]]): The in-memory record set
    """
    excel_file: str = ""
    csv_file: str = DEFAULT_CSV_FILE
    entries: List[Dict[str, Any]] = Field(default_factory=list)
