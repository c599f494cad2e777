import openpyxl
import pytest

from timereg.cli.utils import set_color_enabled


@pytest.fixture(autouse=True)
def plain_console():
    set_color_enabled(False)
    yield
    set_color_enabled(True)


@pytest.fixture
def make_workbook(tmp_path):
    """Write rows to the first sheet of a new .xlsx file and return its path."""

    def _make(rows, name="entries.xlsx", extra_sheet=None):
        wb = openpyxl.Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        if extra_sheet is not None:
            other = wb.create_sheet("Other")
            for row in extra_sheet:
                other.append(row)
        path = tmp_path / name
        wb.save(path)
        return str(path)

    return _make


class ScriptedInput:
    """Stands in for input(): returns queued answers and records prompts."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError("no more input")
        return self._answers.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput
