import argparse
from typing import List

from timereg.models import DEFAULT_CSV_FILE


class Colors:
    """A class to hold ANSI color codes for terminal output."""
    OKBLUE = '\033[94m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def parse_args(args: List[str] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the Time Registration tool.

    Every option is optional; without any the tool asks for a spreadsheet
    at start-up and saves to time_entries.csv.
    """
    parser = argparse.ArgumentParser(
        description=(
            f"\n{Colors.BOLD}{Colors.OKBLUE}"
            "Time Registration"
            f"{Colors.ENDC}\n"
            f"{Colors.OKBLUE}----------------------------------------{Colors.ENDC}\n"
            "Import time entries from an Excel file, add new entries "
            "interactively and save them as CSV.\n"
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "-e", "--excel",
        type=str,
        help="Excel file to load at start-up. Skips the start-up prompt.",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=DEFAULT_CSV_FILE,
        help=f'The CSV file entries are saved to (defaults to "{DEFAULT_CSV_FILE}").',
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored console output.",
    )

    return parser.parse_args(args)
