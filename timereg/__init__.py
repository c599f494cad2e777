"""
Time Registration CLI

Interactive tool that imports time entries from an Excel file, lets the user
view and add entries, and saves them as comma-separated text.

Packages:
- importer: spreadsheet ingestion
- export: CSV serialization
- cli: argument parsing, console output and the application runner
"""

__version__ = "1.0.0"
