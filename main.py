#!/usr/bin/env python3
"""
Time Registration - Main Entry Point

Imports time entries from an Excel file, lets you view and add entries
interactively, and saves them to a CSV file.

Usage:
    python main.py [options]

Options:
    --excel, -e     Excel file to load at start-up (skips the start-up prompt)
    --output, -o    CSV file to save entries to (default: time_entries.csv)
    --no-color      Disable colored console output
"""

from timereg.cli.app import run_app

if __name__ == "__main__":
    # Execute the main application logic and capture the exit code.
    exit_code = run_app()
    exit(exit_code)
