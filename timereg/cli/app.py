"""
Time Registration CLI - Main Application Logic

This module wires the command-line options to an interactive session.

The application follows a simple workflow:
1. Parse command-line arguments
2. Create the session with the configured output file
3. Optionally import a spreadsheet (from --excel or the start-up prompt)
4. Run the menu loop until the user exits

Errors are reported on the console; the process always exits normally.
"""

from typing import List

from timereg.cli.parsers import parse_args
from timereg.cli.utils import print_error, print_message, set_color_enabled
from timereg.session import TimeRegistrationSession


def run_app(argv: List[str] = None, input_fn=input) -> int:
    """
    Main application logic.

    Args:
        argv (List[str]): Command-line arguments, defaults to sys.argv[1:]
        input_fn: Line prompt used by the session, defaults to input()

    Returns:
        int: Process exit code (always 0)
    """
    args = parse_args(argv)
    if args.no_color:
        set_color_enabled(False)

    try:
        session = TimeRegistrationSession(csv_file=args.output, input_fn=input_fn)
        session.run(excel_file=args.excel)
    except KeyboardInterrupt:
        print()
        print_message("Operation cancelled by user. Exiting.")
    except Exception as e:
        print_error(f"Application error: {e}")

    return 0


def main() -> None:
    """Console script entry point."""
    raise SystemExit(run_app())
