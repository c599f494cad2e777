"""
Time Registration CLI - CSV Export Module

This module turns the in-memory record set into comma-separated text and
writes it to the output file.

Format:
- The header row is the field list of the first record, in its order
- Every record becomes one row projected onto that header: absent fields
  are empty cells, fields the first record does not have are dropped
- Text values that contain a comma are wrapped in double quotes
- Rows end with a single "\\n"

Embedded double quotes and line breaks are written as-is, so such values
produce CSV that strict readers will reject.
"""

from typing import List

from timereg.errors import SerializationError
from timereg.models import Record


def cell_text(value) -> str:
    """
    Render a record value as plain text, without any CSV quoting.

    Shared by the CSV writer and the console display so both show the same
    text. Absent values are empty, booleans are "true" / "false".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_cell(value) -> str:
    """
    Render one cell value for the CSV output.

    Args:
        value: The record value, or None when the field is absent

    Returns:
        str: The cell text, quoted when it is text containing a comma

    Example:
        >>> format_cell("call, then email")
        '"call, then email"'
        >>> format_cell(7.5)
        '7.5'
    """
    if isinstance(value, str):
        return f'"{value}"' if "," in value else value
    return cell_text(value)


def build_csv_content(records: List[Record]) -> str:
    """
    Build the full CSV text for a list of records.

    Args:
        records (List[Record]): The records to serialize; must not be empty

    Returns:
        str: Header row followed by one row per record

    Raises:
        ValueError: If records is empty (there is no header to derive)
    """
    if not records:
        raise ValueError("Cannot build CSV content without records.")

    headers = list(records[0].keys())

    lines = [",".join(headers)]
    for record in records:
        lines.append(",".join(format_cell(record.get(header)) for header in headers))

    return "\n".join(lines) + "\n"


def export_to_csv(records: List[Record], output_path: str) -> None:
    """
    Serialize the records and overwrite the output file in a single write.

    Args:
        records (List[Record]): The records to save; must not be empty
        output_path (str): Destination file path

    Raises:
        SerializationError: If the content cannot be encoded or the file
            cannot be written
    """
    try:
        # Encoded before opening so an unencodable value leaves the old file intact
        data = build_csv_content(records).encode("utf-8")
        with open(output_path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise SerializationError(output_path, f"{e.strerror or e} ({output_path})") from e
    except Exception as e:
        raise SerializationError(output_path, str(e) or type(e).__name__) from e
