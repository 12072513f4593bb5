import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from payroll_seed.models import (
    CreateEarningsParams,
    CreatePayrollsParams,
    PayPeriod,
    PayrollStatus,
    parse_pay_period,
    parse_payroll_status,
)


@pytest.mark.parametrize("raw", ["weekly", b"weekly"])
def test_parse_pay_period_str_and_bytes(raw):
    assert parse_pay_period(raw) is PayPeriod.WEEKLY


def test_parse_pay_period_all_values_round_trip():
    for period in PayPeriod:
        assert parse_pay_period(period.value) is period


def test_parse_pay_period_null():
    assert parse_pay_period(None) is None


def test_parse_pay_period_bad_type():
    with pytest.raises(TypeError, match="PayrollPayPeriod"):
        parse_pay_period(7)


def test_parse_pay_period_unknown_value():
    with pytest.raises(ValueError):
        parse_pay_period("daily")


def test_parse_payroll_status_values():
    assert parse_payroll_status(b"paid") is PayrollStatus.PAID
    for status in PayrollStatus:
        assert parse_payroll_status(status.value) is status
    assert parse_payroll_status(None) is None


def test_parse_payroll_status_bad_type():
    with pytest.raises(TypeError, match="PayrollStatus"):
        parse_payroll_status(3.5)


def test_enum_string_values():
    assert parse_pay_period("biweekly") == "biweekly"
    assert parse_payroll_status(b"draft").value == "draft"


def test_create_earnings_params_defaults():
    params = CreateEarningsParams(Decimal("10.5000"), date(2024, 1, 1), 1, 2)
    assert params.crew_id is None
    assert params.piece_units is None
    assert dataclasses.astuple(params)[:4] == (Decimal("10.5000"), date(2024, 1, 1), 1, 2)


def test_params_are_frozen():
    params = CreatePayrollsParams(PayPeriod.MONTHLY, date(2024, 1, 1), date(2024, 1, 31))
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.pay_period = PayPeriod.WEEKLY
    assert params.pay_period is PayPeriod.MONTHLY
    assert params.period_end == date(2024, 1, 31)