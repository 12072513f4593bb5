"""Bulk inserts and lookups against a DB-API connection."""

from __future__ import annotations

from contextlib import closing
from dataclasses import astuple
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Sequence

from .models import (
    CreateEarningsParams,
    CreatePayrollsParams,
    CreateWorkersParams,
    GetPayrollsRow,
)

_PARAMSTYLES = ("qmark", "format", "pyformat", "numeric", "named")

_GET_CREW_IDS = "SELECT id FROM crews"
_GET_PAYROLLS = "SELECT id, period_start, period_end FROM payrolls"
_GET_WORKER_IDS = "SELECT id FROM workers"

_EARNING_COLUMNS = (
    "amount",
    "date_of_work",
    "payroll_id",
    "worker_id",
    "crew_id",
    "hours_worked",
    "hours_offered",
    "piece_units",
)


def _placeholders(paramstyle: str, columns: Sequence[str]) -> str:
    if paramstyle == "qmark":
        marks = ["?"] * len(columns)
    elif paramstyle == "format":
        marks = ["%s"] * len(columns)
    elif paramstyle == "pyformat":
        marks = [f"%({column})s" for column in columns]
    elif paramstyle == "numeric":
        marks = [f":{position}" for position in range(1, len(columns) + 1)]
    else:
        marks = [f":{column}" for column in columns]
    return ", ".join(marks)


def _adapt(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _to_date(value: Any) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode()
    return date.fromisoformat(str(value))


class Queries:
    """Typed access to the payroll tables over a DB-API 2.0 connection."""

    def __init__(self, db: Any, paramstyle: str = "format") -> None:
        if paramstyle not in _PARAMSTYLES:
            raise ValueError(f"unsupported paramstyle: {paramstyle!r}")
        self.db = db
        self.paramstyle = paramstyle

    def with_tx(self, tx: Any) -> Queries:
        """Return queries bound to a transaction or other connection."""
        return Queries(tx, self.paramstyle)

    def _copy_from(
        self, table: str, columns: Sequence[str], rows: Iterable[Sequence[Any]]
    ) -> int:
        adapted = [tuple(_adapt(value) for value in row) for row in rows]
        if not adapted:
            return 0
        sql = (
            f"INSERT INTO {table} ({', '.join(columns)}) "
            f"VALUES ({_placeholders(self.paramstyle, columns)})"
        )
        if self.paramstyle in ("named", "pyformat"):
            params: list[Any] = [dict(zip(columns, row)) for row in adapted]
        else:
            params = adapted
        with closing(self.db.cursor()) as cursor:
            cursor.executemany(sql, params)
        return len(adapted)

    def _fetch_all(self, sql: str) -> list[tuple[Any, ...]]:
        with closing(self.db.cursor()) as cursor:
            cursor.execute(sql)
            return [tuple(row) for row in cursor.fetchall()]

    def create_crews(self, names: Iterable[str]) -> int:
        """Insert crews by name; return the number inserted."""
        return self._copy_from("crews", ("name",), ((name,) for name in names))

    def create_earnings(self, rows: Iterable[CreateEarningsParams]) -> int:
        """Insert earnings; return the number inserted."""
        return self._copy_from(
            "earnings", _EARNING_COLUMNS, (astuple(row) for row in rows)
        )

    def create_payrolls(self, rows: Iterable[CreatePayrollsParams]) -> int:
        """Insert payrolls; return the number inserted."""
        return self._copy_from(
            "payrolls",
            ("pay_period", "period_start", "period_end"),
            (astuple(row) for row in rows),
        )

    def create_workers(self, rows: Iterable[CreateWorkersParams]) -> int:
        """Insert workers; return the number inserted."""
        return self._copy_from(
            "workers", ("first_name", "last_name"), (astuple(row) for row in rows)
        )

    def get_crew_ids(self) -> list[int]:
        return [row[0] for row in self._fetch_all(_GET_CREW_IDS)]

    def get_payrolls(self) -> list[GetPayrollsRow]:
        return [
            GetPayrollsRow(id=row[0], period_start=_to_date(row[1]), period_end=_to_date(row[2]))
            for row in self._fetch_all(_GET_PAYROLLS)
        ]

    def get_worker_ids(self) -> list[int]:
        return [row[0] for row in self._fetch_all(_GET_WORKER_IDS)]