"""Row types and enumerations of the payroll schema."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import TypeVar


class PayPeriod(str, Enum):
    """Length of the period a payroll covers."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class PayrollStatus(str, Enum):
    """Processing state of a payroll."""

    DRAFT = "draft"
    PENDING = "pending"
    PAID = "paid"
    VOID = "void"


_E = TypeVar("_E", bound=Enum)


def _parse_enum(enum_type: type[_E], type_name: str, value: object) -> _E | None:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode()
    if not isinstance(value, str):
        raise TypeError(
            f"unsupported scan type for {type_name}: {type(value).__name__}"
        )
    return enum_type(value)


def parse_pay_period(value: object) -> PayPeriod | None:
    """Read a pay period from a database value; NULL becomes None."""
    return _parse_enum(PayPeriod, "PayrollPayPeriod", value)


def parse_payroll_status(value: object) -> PayrollStatus | None:
    """Read a payroll status from a database value; NULL becomes None."""
    return _parse_enum(PayrollStatus, "PayrollStatus", value)


@dataclass(frozen=True)
class Crew:
    id: int
    name: str


@dataclass(frozen=True)
class Worker:
    id: int
    first_name: str
    last_name: str


@dataclass(frozen=True)
class Payroll:
    id: int
    pay_period: PayPeriod
    period_start: date | None
    period_end: date | None
    status: PayrollStatus


@dataclass(frozen=True)
class Earning:
    id: int
    amount: Decimal | None
    date_of_work: date | None
    payroll_id: int
    worker_id: int
    crew_id: int | None = None
    hours_worked: Decimal | None = None
    hours_offered: Decimal | None = None
    piece_units: Decimal | None = None


@dataclass(frozen=True)
class CreateEarningsParams:
    amount: Decimal | None
    date_of_work: date | None
    payroll_id: int
    worker_id: int
    crew_id: int | None = None
    hours_worked: Decimal | None = None
    hours_offered: Decimal | None = None
    piece_units: Decimal | None = None


@dataclass(frozen=True)
class CreatePayrollsParams:
    pay_period: PayPeriod
    period_start: date | None
    period_end: date | None


@dataclass(frozen=True)
class CreateWorkersParams:
    first_name: str
    last_name: str


@dataclass(frozen=True)
class GetPayrollsRow:
    id: int
    period_start: date | None
    period_end: date | None