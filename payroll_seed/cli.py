"""Command that fills a payroll database with random data."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from contextlib import closing
from datetime import date, datetime

from .fake import Faker
from .periods import add_months
from .repo import Queries
from .seed import (
    create_biweekly_payrolls,
    create_crews,
    create_earnings,
    create_monthly_payrolls,
    create_weekly_payrolls,
    create_workers,
)

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _quote(value: object) -> str:
    text = str(value)
    if not text or any(ch in text for ch in ' ="\t\n'):
        return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return text


class _KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).astimezone().isoformat(
            timespec="milliseconds"
        )
        parts = [f"time={stamp}", f"level={record.levelname}", f"msg={_quote(record.getMessage())}"]
        for key, value in getattr(record, "attrs", {}).items():
            parts.append(f"{key}={_quote(value)}")
        return " ".join(parts)


def _make_logger() -> logging.Logger:
    logger = logging.getLogger("payroll_seed")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_KeyValueFormatter())
    logger.handlers = [handler]
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def connect_db(dsn: str) -> sqlite3.Connection:
    """Open the database and check that it answers."""
    connection = sqlite3.connect(dsn, timeout=5, isolation_level=None)
    try:
        connection.execute("SELECT 1").fetchone()
    except sqlite3.Error:
        connection.close()
        raise
    return connection


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="payroll-seed")
    parser.add_argument("-dsn", "--dsn", default="", help="Database dsn")
    parser.add_argument(
        "-num_workers", "--num_workers", type=int, default=1000,
        help="Number of workers to add",
    )
    parser.add_argument(
        "-num_crews", "--num_crews", type=int, default=20,
        help="Number of crews to add",
    )
    parser.add_argument(
        "-should_create_payrolls", "--should_create_payrolls",
        type=_parse_bool, nargs="?", const=True, default=True,
        help="Whether or not to create new payrolls",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logger = _make_logger()

    try:
        db = connect_db(args.dsn)
    except sqlite3.Error as exc:
        logger.error(str(exc))
        return 1

    with closing(db):
        queries = Queries(db, "qmark")
        faker = Faker()
        try:
            create_workers(queries, args.num_workers, faker)
            logger.info("Workers created", extra={"attrs": {"num_workers": args.num_workers}})

            create_crews(queries, args.num_crews, faker)
            logger.info("Crews created", extra={"attrs": {"num_crews": args.num_crews}})

            if args.should_create_payrolls:
                start = date(2024, 1, 1)
                end = add_months(start, 12)
                create_monthly_payrolls(queries, start, end)
                logger.info("Monthly payrolls created")
                create_biweekly_payrolls(queries, start, end)
                logger.info("Biweekly payrolls created")
                create_weekly_payrolls(queries, start, end)
                logger.info("Weekly payrolls created")

            create_earnings(queries, logger, faker, faker.rng)
            logger.info("Earnings created")
        except (sqlite3.Error, IndexError, ValueError) as exc:
            logger.error(str(exc) or type(exc).__name__)
            return 1

    logger.info("Done")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())