import pytest

from histcal.cli import main


def test_to_day(capsys):
    assert main(["to-day", "AD-1582-10-15"]) == 0
    out = capsys.readouterr().out
    assert "MJD -100840" in out
    assert "1582-10-15" in out

def test_to_day_gap(capsys):
    assert main(["to-day", "1582-10-10"]) == 2
    assert "cutover gap" in capsys.readouterr().err

def test_from_day(capsys):
    assert main(["from-day", "-53576", "--history", "sweden"]) == 0
    assert "AD-1712-02-30" in capsys.readouterr().out

def test_from_date(capsys):
    assert main(["from-date", "1582-10-14"]) == 0
    assert "AD-1582-10-04" in capsys.readouterr().out

def test_valid(capsys):
    assert main(["valid", "1700-02-29", "--history", "sweden"]) == 1
    assert main(["valid", "1712-02-30", "--history", "sweden"]) == 0

def test_year_length(capsys):
    assert main(["year-length", "--history", "sweden", "1712"]) == 0
    assert capsys.readouterr().out.strip() == "367"
    assert main(["year-length", "BC", "1", "--history", "proleptic-gregorian"]) == 0
    assert capsys.readouterr().out.strip() == "366"
    assert main(["year-length", "0"]) == 1

def test_unknown_history(capsys):
    assert main(["from-day", "0", "--history", "atlantis"]) == 2
    assert "Unknown history" in capsys.readouterr().err

def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "History[SWEDEN]" in out
    assert "History[1582-10-15]" in out

def test_diag_cutovers(capsys):
    assert main(["diag", "cutovers", "sweden"]) == 0
    out = capsys.readouterr().out
    assert "AD-1712-02-30" in out
    assert "swedish" in out

def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "300", "--histories", "sweden,first-gregorian-reform"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_verbose_logging(caplog):
    import logging
    with caplog.at_level(logging.DEBUG, logger="histcal"):
        assert main(["-v", "valid", "1582-10-10"]) == 1
    assert any("cutover gap" in r.getMessage() for r in caplog.records)

def test_bad_command():
    with pytest.raises(SystemExit):
        main(["nonsense"])
