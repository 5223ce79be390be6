# tests/test_cli.py

from ethiocal import cli
from ethiocal.diagnostics.pretty_month import render_month


def test_day(capsys):
    assert cli.main(["day", "2023-09-12"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "2016-01-01  Meskerem 1, 2016  (Enkutatash (New Year))"


def test_day_shorthand_with_options(capsys):
    assert cli.main(["2024-12-25", "--locale", "am", "--weekday"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "2017-04-16  ረቡዕ፣ 16 ታኅሣሥ 2017"


def test_greg(capsys):
    assert cli.main(["greg", "2015", "13", "6"]) == 0
    assert capsys.readouterr().out.strip() == "2023-09-11"


def test_errors_exit_nonzero(capsys):
    assert cli.main(["greg", "2016", "13", "6"]) == 2
    assert "error" in capsys.readouterr().err
    assert cli.main(["day", "2023-02-30"]) == 2


def test_month(capsys):
    assert cli.main(["month", "2016", "1"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Meskerem 2016"
    assert "Meskel" in out


def test_render_month_layout():
    lines = render_month(2016, 13, "en")
    assert lines[0] == "Pagume 2016"
    assert lines[1].startswith("Su")
    # 5 blanks + 5 days fit in two weeks, two text rows per week
    assert len(lines) == 3 + 2 * 2


def test_new_years(capsys):
    assert cli.main(["new-years", "--from-year", "2015", "--to-year", "2017"]) == 0
    out = capsys.readouterr().out
    assert "2023-09-12" in out
    assert "2024-09-11" in out


def test_round_trip_diag(capsys):
    assert cli.main(["diag", "round-trip", "--N", "500"]) == 0
    assert "0 failures" in capsys.readouterr().out
