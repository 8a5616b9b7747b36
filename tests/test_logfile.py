from datetime import datetime

from timelog.logfile import open_timelog
from timelog.models import Activity


def test_open_timelog_creates_missing_file(tmp_path):
    path = tmp_path / "nested" / "timelog.txt"
    with open_timelog(path) as store:
        assert store.activities == ()
    assert path.exists()
    assert path.read_text(encoding="utf-8") == ""


def test_open_timelog_appends_and_reloads(tmp_path):
    path = tmp_path / "timelog.txt"
    path.write_text("2012-01-31 09:00: Arrived\n", encoding="utf-8")

    with open_timelog(path) as store:
        store.record("Reading mail", datetime(2012, 1, 31, 9, 30))

    with open_timelog(path) as store:
        assert store.activities == (
            Activity(datetime(2012, 1, 31, 9), datetime(2012, 1, 31, 9, 30), "Reading mail"),
        )
        store.record("Arrived", datetime(2012, 2, 1, 9))

    assert path.read_text(encoding="utf-8") == (
        "2012-01-31 09:00: Arrived\n"
        "2012-01-31 09:30: Reading mail\n"
        "\n"
        "2012-02-01 09:00: Arrived\n"
    )


def test_open_timelog_uses_clock(tmp_path):
    path = tmp_path / "timelog.txt"
    with open_timelog(path, clock=lambda: datetime(2012, 1, 31, 10, 59)) as store:
        store.record("Writing a test")
    assert path.read_text(encoding="utf-8") == "2012-01-31 10:59: Writing a test\n"
