"""
Time Registration CLI - Session Controller

This module contains the interactive session that owns the record set and
drives the menu loop.

Key functionality:
- Optional spreadsheet import at start-up
- Menu loop with five actions: display, add, save, load, exit
- Interactive entry of a new record, templated on the first record
- CSV save after every successful add and on request

Every action reports its own failures on the console and returns a boolean,
so a failed import or save never ends the session.
"""

from typing import Callable, List, Optional

from timereg.cli.utils import print_error, print_header, print_message
from timereg.errors import IngestionError, SerializationError
from timereg.export.csv_export import cell_text, export_to_csv
from timereg.importer.excel_import import load_records_from_excel
from timereg.models import DEFAULT_CSV_FILE, Record, SessionState, TimeEntry

MENU_OPTIONS = [
    ("1", "Display all time entries"),
    ("2", "Add new time entry"),
    ("3", "Save to CSV"),
    ("4", "Load from Excel file"),
    ("5", "Exit"),
]


class TimeRegistrationSession:
    """
    Interactive time registration session.

    Attributes:
        state (SessionState): Source path, output path and the record set

    Example:
        >>> session = TimeRegistrationSession()
        >>> session.run()
    """

    def __init__(self, csv_file: str = DEFAULT_CSV_FILE, input_fn: Callable[[str], str] = input):
        """
        Create a session.

        Args:
            csv_file (str): Output path used by every save
            input_fn (Callable[[str], str]): Line prompt; defaults to the builtin input()
        """
        self.state = SessionState(csv_file=csv_file)
        self._input = input_fn

    @property
    def entries(self) -> List[Record]:
        """The current record set."""
        return self.state.entries

    def load_from_excel(self, file_path: str) -> bool:
        """
        Replace the record set with the rows of a spreadsheet.

        On failure the current record set is left as it was.

        Args:
            file_path (str): Path to the spreadsheet

        Returns:
            bool: True if the spreadsheet was loaded
        """
        print_message(f"Loading data from {file_path}...")
        try:
            records = load_records_from_excel(file_path)
        except IngestionError as e:
            print_error(f"Error loading Excel file: {e}")
            return False

        self.state.entries = records
        self.state.excel_file = file_path
        print_message(f"Successfully loaded {len(records)} entries.")
        return True

    def save_to_csv(self) -> bool:
        """
        Write the whole record set to the output CSV file.

        Returns:
            bool: True if the file was written; False when there is nothing
            to save or the write failed
        """
        if not self.entries:
            print_message("No entries to save.")
            return False

        try:
            export_to_csv(self.entries, self.state.csv_file)
        except SerializationError as e:
            print_error(f"Error saving to CSV: {e}")
            return False

        print_message(f"Data saved to {self.state.csv_file}")
        return True

    def add_new_entry(self) -> bool:
        """
        Prompt for a new record, append it and save.

        The fields asked for are those of the first record, or the built-in
        TimeEntry fields when the record set is empty. A failed save does not
        undo the append.

        Returns:
            bool: True if the record was appended
        """
        print_header("Add New Time Entry")
        try:
            if self.entries:
                new_entry = {}
                for field in self.entries[0].keys():
                    new_entry[field] = self._input(f"Enter {field}: ")
            else:
                answers = {}
                for field, hint in TimeEntry.prompt_fields():
                    answers[field] = self._input(f"Enter {hint}: ")
                new_entry = TimeEntry(**answers).to_record()
        except Exception as e:
            print_error(f"Error adding new entry: {e}")
            return False

        self.entries.append(new_entry)
        print_message("Entry added successfully!")

        self.save_to_csv()
        return True

    def display_entries(self) -> None:
        """Print every record as a numbered block of "field: value" lines."""
        if not self.entries:
            print_message("No entries to display.")
            return

        print_header("Current Time Entries")
        for index, entry in enumerate(self.entries, 1):
            print(f"\nEntry #{index}:")
            for key, value in entry.items():
                print(f"{key}: {cell_text(value)}")

    def prompt_and_load(self) -> bool:
        """
        Ask for a spreadsheet path and load it; an empty answer does nothing.

        Returns:
            bool: True if a spreadsheet was loaded
        """
        file_path = self._input("Enter the path to your Excel file: ").strip()
        if not file_path:
            return False
        return self.load_from_excel(file_path)

    def handle_choice(self, choice: str) -> bool:
        """
        Run the action for one menu choice.

        Args:
            choice (str): The raw menu input; surrounding whitespace is ignored

        Returns:
            bool: False when the user chose to exit, True otherwise
        """
        choice = choice.strip()

        if choice == "1":
            self.display_entries()
        elif choice == "2":
            self.add_new_entry()
        elif choice == "3":
            self.save_to_csv()
        elif choice == "4":
            self.prompt_and_load()
        elif choice == "5":
            print_message("Exiting application. Goodbye!")
            return False
        else:
            print_message("Invalid choice. Please try again.")

        return True

    def run(self, excel_file: Optional[str] = None) -> None:
        """
        Run the session until the user exits.

        Args:
            excel_file (Optional[str]): Spreadsheet to load first. When None,
                the user is asked for one; an empty answer starts with no data.
        """
        print_header("Time Registration Application")
        try:
            if excel_file is None:
                excel_file = self._input(
                    "Enter the path to your Excel file (or press Enter to start with empty data): "
                )
            excel_file = excel_file.strip()
            if excel_file:
                self.load_from_excel(excel_file)

            running = True
            while running:
                self._render_menu()
                choice = self._input("Enter your choice (1-5): ")
                running = self.handle_choice(choice)

        except Exception as e:
            print_error(f"Application error: {e}")

    def _render_menu(self) -> None:
        print_header("Menu")
        for key, label in MENU_OPTIONS:
            print(f"{key}. {label}")
