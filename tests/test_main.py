"""Tests for main module."""

from lazy_lists import main


def test_run_lesson_output(capsys):
    """Test the console output of the lesson."""
    main.run_lesson()
    output = capsys.readouterr().out.splitlines()

    assert output == [
        "total 10",
        "10",
        "first element: 1",
        "second element: 2",
        "third element: 3",
        "[1, 2, 3]",
    ]


def test_main_success(monkeypatch, capsys):
    """Test a full walkthrough run."""
    monkeypatch.setenv("LAZY_RANGE_START", "100")
    monkeypatch.setenv("LAZY_TAKE_COUNT", "10")
    monkeypatch.setenv("LAZY_SINK_TYPE", "list")
    monkeypatch.setenv("LAZY_VERBOSE", "false")

    assert main.main() == 0

    output = capsys.readouterr().out
    assert str(list(range(100, 110))) in output
    assert "Range elements forced: 10" in output


def test_main_invalid_config(monkeypatch):
    """Test that configuration errors map to exit code 1."""
    monkeypatch.setenv("LAZY_SINK_TYPE", "csv")
    assert main.main() == 1
