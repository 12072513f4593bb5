import sqlite3
from datetime import date

import pytest

from payroll_seed.cli import connect_db, main

SCHEMA = """
CREATE TABLE workers (id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT);
CREATE TABLE crews (id INTEGER PRIMARY KEY, name TEXT);
CREATE TABLE payrolls (id INTEGER PRIMARY KEY, pay_period TEXT, period_start TEXT,
    period_end TEXT, status TEXT DEFAULT 'draft');
CREATE TABLE earnings (id INTEGER PRIMARY KEY, amount TEXT, date_of_work TEXT,
    payroll_id INTEGER, worker_id INTEGER, crew_id INTEGER, hours_worked TEXT,
    hours_offered TEXT, piece_units TEXT);
"""


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "payroll.db"
    with sqlite3.connect(path) as conn:
        conn.executescript(SCHEMA)
    conn.close()
    return str(path)


def query(path, sql):
    conn = sqlite3.connect(path)
    try:
        return conn.execute(sql).fetchall()
    finally:
        conn.close()


def test_connect_db_answers(db_path):
    conn = connect_db(db_path)
    try:
        assert conn.execute("SELECT 1").fetchone() == (1,)
    finally:
        conn.close()


def test_connect_db_bad_path(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        connect_db(str(tmp_path / "missing" / "dir" / "x.db"))


def test_main_without_payrolls(db_path, capsys):
    code = main(["-dsn", db_path, "-num_workers", "3", "-num_crews", "2",
                 "-should_create_payrolls=false"])
    assert code == 0
    assert query(db_path, "SELECT COUNT(*) FROM workers") == [(3,)]
    assert query(db_path, "SELECT COUNT(*) FROM crews") == [(2,)]
    assert query(db_path, "SELECT COUNT(*) FROM payrolls") == [(0,)]
    out = capsys.readouterr().out
    assert "msg=Done" in out
    assert "num_workers=3" in out


def test_main_full_run(db_path):
    assert main(["--dsn", db_path, "--num_workers", "2", "--num_crews", "2"]) == 0
    periods = {row[0] for row in query(db_path, "SELECT pay_period FROM payrolls")}
    assert periods == {"weekly", "biweekly", "monthly"}
    expected = 0
    for start, end in query(db_path, "SELECT period_start, period_end FROM payrolls"):
        expected += (date.fromisoformat(end) - date.fromisoformat(start)).days * 2
    assert query(db_path, "SELECT COUNT(*) FROM earnings") == [(expected,)]
    first = query(db_path, "SELECT MIN(period_start) FROM payrolls")
    assert first == [("2024-01-01",)]


def test_main_missing_tables_fails(tmp_path, capsys):
    path = str(tmp_path / "empty.db")
    assert main(["-dsn", path, "-num_workers", "1"]) == 1
    assert "level=ERROR" in capsys.readouterr().out


def test_main_rejects_bad_bool(db_path):
    with pytest.raises(SystemExit):
        main(["-dsn", db_path, "-should_create_payrolls=maybe"])