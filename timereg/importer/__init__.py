"""
Time Registration CLI - Importer Package

This package reads spreadsheet files into records for the session.
"""

from .excel_import import load_records_from_excel

__all__ = [
    'load_records_from_excel'  # First-worksheet spreadsheet reader
]
