"""
Time Registration CLI - Export Package

This package writes the session's records to a comma-separated file.
"""

from timereg.export.csv_export import build_csv_content, cell_text, export_to_csv, format_cell

__all__ = [
    'export_to_csv',      # Main export function
    'build_csv_content',  # CSV text builder
    'format_cell',        # Single cell formatting
    'cell_text',          # Unquoted value text (CSV and display)
]
