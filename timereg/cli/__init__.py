"""
Command-line interface package for the Time Registration tool.

This package contains the CLI components:
- Command argument parsing
- Terminal color formatting and message helpers
- Main application runner (timereg.cli.app)
"""

from timereg.cli.parsers import parse_args
from timereg.cli.utils import (
    print_header, print_message, print_error, set_color_enabled,
    ORANGE, RED, BOLD, RESET
)

__all__ = [
    # Main functions
    'parse_args',         # Command-line argument parser
    'print_header',       # Utility for printing formatted headers
    'print_message',      # Informational console output
    'print_error',        # Error console output
    'set_color_enabled',  # Turn ANSI colors on/off

    # Terminal colors and styles
    'ORANGE',             # Primary theme color
    'RED',                # Error color
    'BOLD',               # Bold text
    'RESET',              # Reset all formatting
]
