"""
Time Registration CLI - Error Types

Exceptions raised by the collaborator modules (spreadsheet ingestion and CSV
export). The session controller catches them at the call site, reports them
on the console and turns them into a boolean failure result.
"""


class TimeRegError(Exception):
    """Base class for all errors raised by the time registration tool."""


class IngestionError(TimeRegError):
    """
    Raised when a spreadsheet cannot be read.

    Covers missing files, unsupported or corrupt formats and missing
    spreadsheet engines.

    Attributes:
        path (str): The spreadsheet path that failed to load
    """

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class SerializationError(TimeRegError):
    """
    Raised when the CSV output file cannot be written.

    Attributes:
        path (str): The output path that could not be written
    """

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
