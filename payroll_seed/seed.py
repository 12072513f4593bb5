"""Generation of workers, crews, payrolls and earnings."""

from __future__ import annotations

import logging
import random
import struct
from datetime import date
from decimal import Decimal

from .fake import Faker
from .models import (
    CreateEarningsParams,
    CreatePayrollsParams,
    CreateWorkersParams,
    PayPeriod,
)
from .periods import biweekly_periods, date_range, monthly_periods, weekly_periods
from .repo import Queries


def format_decimal(value: float) -> Decimal:
    """Round to single precision, then to four decimal places."""
    single = struct.unpack("f", struct.pack("f", value))[0]
    return Decimal(f"{single:.4f}")


def earning_params(
    day: date,
    payroll_id: int,
    worker_id: int,
    crew_id: int | None,
    piece_work: bool,
    faker: Faker,
) -> CreateEarningsParams:
    """Random earning for one worker on one day."""
    amount = format_decimal(faker.price(10, 500))
    hours_worked = hours_offered = piece_units = None
    if not piece_work:
        hours_worked = format_decimal(faker.float_range(4, 12))
        hours_offered = format_decimal(faker.float_range(4, 12))
    else:
        piece_units = format_decimal(faker.float_range(100, 1000))
    return CreateEarningsParams(
        amount=amount,
        date_of_work=day,
        payroll_id=payroll_id,
        worker_id=worker_id,
        crew_id=crew_id if piece_work else None,
        hours_worked=hours_worked,
        hours_offered=hours_offered,
        piece_units=piece_units,
    )


def create_workers(queries: Queries, num_workers: int, faker: Faker | None = None) -> int:
    faker = faker or Faker()
    workers = [
        CreateWorkersParams(first_name=faker.first_name(), last_name=faker.last_name())
        for _ in range(num_workers)
    ]
    return queries.create_workers(workers)


def create_crews(queries: Queries, num_crews: int, faker: Faker | None = None) -> int:
    faker = faker or Faker()
    return queries.create_crews([faker.crew_name() for _ in range(num_crews)])


def _create_payrolls(queries: Queries, period: PayPeriod, periods) -> int:
    return queries.create_payrolls(
        CreatePayrollsParams(pay_period=period, period_start=start, period_end=end)
        for start, end in periods
    )


def create_monthly_payrolls(queries: Queries, start: date, end: date) -> int:
    return _create_payrolls(queries, PayPeriod.MONTHLY, monthly_periods(start, end))


def create_biweekly_payrolls(queries: Queries, start: date, end: date) -> int:
    return _create_payrolls(queries, PayPeriod.BIWEEKLY, biweekly_periods(start, end))


def create_weekly_payrolls(queries: Queries, start: date, end: date) -> int:
    return _create_payrolls(queries, PayPeriod.WEEKLY, weekly_periods(start, end))


def create_earnings(
    queries: Queries,
    logger: logging.Logger,
    faker: Faker | None = None,
    rng: random.Random | None = None,
) -> int:
    """Insert daily earnings for every worker in every payroll, one payroll at a time.

    Returns the total number of earnings inserted.
    """
    faker = faker or Faker()
    rng = rng or random.Random()
    worker_ids = queries.get_worker_ids()
    crew_ids = queries.get_crew_ids()
    payrolls = queries.get_payrolls()

    total = 0
    for number, payroll in enumerate(payrolls, start=1):
        earnings: list[CreateEarningsParams] = []
        for worker_id in worker_ids:
            piece_work = faker.flip_a_coin() == "Heads"
            # A worker is in at most one crew per payroll.
            crew_id = rng.choice(crew_ids) if piece_work else None
            if payroll.period_start is None or payroll.period_end is None:
                continue
            earnings.extend(
                earning_params(day, payroll.id, worker_id, crew_id, piece_work, faker)
                for day in date_range(payroll.period_start, payroll.period_end)
            )
        queries.create_earnings(earnings)
        total += len(earnings)
        logger.info(
            "created earnings for payroll number %d of %d",
            number,
            len(payrolls),
            extra={"attrs": {"num_earnings": len(earnings)}},
        )
    return total