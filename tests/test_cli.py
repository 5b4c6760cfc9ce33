"""Tests for the command line interface."""

import pytest
from datetime import date
from crop_tracker.presentation.cli.main import main, render_progress_bar


def test_render_progress_bar():
    """Filled characters are percent // 2 on a 50-character bar."""
    assert render_progress_bar(0) == "[" + "-" * 50 + "]"
    assert render_progress_bar(19) == "[" + "#" * 9 + "-" * 41 + "]"
    assert render_progress_bar(99) == "[" + "#" * 49 + "-" + "]"
    assert render_progress_bar(100) == "[" + "#" * 50 + "]"


def test_crops_command(capsys):
    """The crop menu is numbered from 1 in configuration order."""
    assert main(["crops"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "1. Jute",
        "2. Mustard",
        "3. Paddy (Boro)",
        "4. Potato",
        "5. Wheat",
    ]


def test_track_command(capsys):
    """Test the status report for a crop in progress."""
    code = main(
        ["track", "--crop", "Paddy (Boro)", "--sowing-date", "2025-01-10", "--today", "2025-02-04"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "'Paddy (Boro)' was sown 25 days ago." in out
    assert "Current Stage: Tillering Stage" in out
    assert "(From Feb 04 to Mar 05)" in out
    assert "Overall Progress: 19%" in out
    assert "[" + "#" * 9 + "-" * 41 + "]" in out


def test_track_command_by_choice(capsys):
    """Test selecting the crop by menu number."""
    code = main(["track", "--choice", "5", "--sowing-date", "2025-11-15", "--today", "2025-11-15"])
    out = capsys.readouterr().out
    assert code == 0
    assert "'Wheat' was sown 0 days ago." in out
    assert "Current Stage: Germination & Seedling" in out
    assert "Overall Progress: 0%" in out


def test_track_command_cycle_complete(capsys):
    """A finished cycle shows no stage dates and a full bar."""
    code = main(["track", "--crop", "Potato", "--sowing-date", "2025-01-01", "--today", "2025-06-01"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Current Stage: Harvest Ready / Cycle Complete" in out
    assert "(From" not in out
    assert "Overall Progress: 100%" in out
    assert "[" + "#" * 50 + "]" in out


def test_track_command_future_sowing(capsys):
    """Future sowing is informational and exits 0."""
    code = main(["track", "--crop", "Jute", "--sowing-date", "2025-06-02", "--today", "2025-06-01"])
    out = capsys.readouterr().out
    assert code == 0
    assert "sowing date is in the future" in out
    assert "Overall Progress" not in out


def test_track_command_invalid_date(capsys):
    """Invalid dates exit 1 with an error message."""
    code = main(["track", "--crop", "Jute", "--sowing-date", "2025-02-30"])
    err = capsys.readouterr().err
    assert code == 1
    assert err.startswith("Error:")
    assert "YYYY-MM-DD" in err


@pytest.mark.parametrize("selection", [["--choice", "0"], ["--choice", "6"], ["--crop", "Rye"]])
def test_track_command_invalid_choice(capsys, selection):
    """Invalid crop selections exit 1."""
    code = main(["track", *selection, "--sowing-date", "2025-01-01"])
    assert code == 1
    assert "Error: Invalid choice." in capsys.readouterr().err


def test_calendar_command_export(capsys, tmp_path):
    """The stage calendar is printed and written to CSV."""
    export_file = tmp_path / "exports" / "jute.csv"
    code = main(
        [
            "calendar",
            "--crop",
            "Jute",
            "--sowing-date",
            "2025-03-01",
            "--today",
            "2025-04-01",
            "--export",
            str(export_file),
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Rapid Vegetative Growth" in out
    assert "Mar 21" in out
    assert export_file.exists()

    lines = export_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "stage_index,stage,duration_days,start_day,end_day,start_date,end_date,status"
    assert lines[1] == "0,Seedling Establishment,20,0,19,2025-03-01,2025-03-20,done"
    assert len(lines) == 5


def test_interactive_command(capsys, monkeypatch):
    """The prompt flow reads a menu choice and a sowing date."""
    answers = iter(["3", date.today().isoformat()])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert main(["interactive"]) == 0
    out = capsys.readouterr().out
    assert "3. Paddy (Boro)" in out
    assert "'Paddy (Boro)' was sown 0 days ago." in out
    assert "Current Stage: Seedling Stage" in out


def test_interactive_command_bad_choice(capsys, monkeypatch):
    """A non-numeric menu choice exits 1."""
    monkeypatch.setattr("builtins.input", lambda prompt="": "wheat")
    assert main(["interactive"]) == 1
    assert "Error: Invalid choice." in capsys.readouterr().err


def test_track_command_date_out_of_range(capsys):
    """Stage dates past the end of the calendar exit 1 without a traceback."""
    code = main(
        ["track", "--crop", "Paddy (Boro)", "--sowing-date", "9999-12-01", "--today", "9999-12-31"]
    )
    assert code == 1
    assert "out of the supported date range" in capsys.readouterr().err


def test_calendar_command_date_out_of_range(capsys):
    """A calendar running past the end of the calendar exits 1."""
    code = main(["calendar", "--crop", "Wheat", "--sowing-date", "9999-12-31"])
    assert code == 1
    assert capsys.readouterr().err.startswith("Error:")


def _raise_eof(prompt=""):
    raise EOFError


def test_interactive_command_closed_stdin(capsys, monkeypatch):
    """End of input at the menu prompt is an invalid choice."""
    monkeypatch.setattr("builtins.input", _raise_eof)
    assert main(["interactive"]) == 1
    assert "Error: Invalid choice." in capsys.readouterr().err


def test_interactive_command_closed_stdin_at_date_prompt(capsys, monkeypatch):
    """End of input at the sowing date prompt is an invalid date."""
    answers = iter(["2"])

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["interactive"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "no sowing date entered" in err


def test_interactive_command_strips_date(capsys, monkeypatch):
    """Whitespace typed around the sowing date is ignored at the prompt."""
    answers = iter([" 5 ", f"  {date.today().isoformat()}  "])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["interactive"]) == 0
    assert "'Wheat' was sown 0 days ago." in capsys.readouterr().out


def test_broken_profile_table_exits_1(capsys, monkeypatch):
    """A crop table with an empty stage list is reported as a configuration error."""
    monkeypatch.setattr(
        "crop_tracker.presentation.cli.main.CROP_GROWTH_PROFILES", {"Bad": []}
    )
    assert main(["crops"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "Bad" in err
