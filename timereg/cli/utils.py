"""
Time Registration CLI - CLI Utility Functions

This module provides the console output helpers used throughout the tool.
All user-facing messages, including error reports, go through these
functions so that the application has one consistent look.

Key Components:
- ANSI color code definitions for consistent styling
- Header formatting for visual organization
- Message and error printing in the application theme
- A switch to turn colors off (for --no-color and for tests)
"""

# ANSI color and formatting codes
# These codes control text appearance in compatible terminals
ORANGE = "\033[38;2;228;94;39m"  # Custom RGB orange (#e45e27) - primary theme color
RED = "\033[31m"                 # Red text for errors
BOLD = "\033[1m"                 # Bold text formatting
RESET = "\033[0m"                # Reset all formatting

_color_enabled = True


def set_color_enabled(enabled):
    """
    Turn ANSI color output on or off.

    Args:
        enabled (bool): False prints plain text without escape codes
    """
    global _color_enabled
    _color_enabled = bool(enabled)


def color_enabled():
    """Return True when ANSI color codes are emitted."""
    return _color_enabled


def styled(text, *codes):
    """
    Wrap text in the given ANSI codes, or return it unchanged when colors are off.

    Args:
        text (str): The text to style
        *codes (str): One or more ANSI codes, e.g. ORANGE, BOLD

    Returns:
        str: The styled text
    """
    if not _color_enabled or not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def print_header(text):
    """
    Print a formatted header with the orange theme.

    Creates a visually distinct section header with the application's
    orange theme color and a separator line underneath.

    Args:
        text (str): The header text to display

    Example:
        >>> print_header("Menu")

        Menu
        ----
    """
    print(f"\n{styled(text, ORANGE, BOLD)}")
    print(styled('-' * len(text), ORANGE))


def print_message(text):
    """Print an informational message in the theme color."""
    print(styled(text, ORANGE))


def print_error(text):
    """Print an error message."""
    print(styled(text, RED))
