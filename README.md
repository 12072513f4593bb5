# payroll-seed

`payroll-seed` fills a payroll database with fake data so that reports and
summaries can be tried against a database of a useful size. It needs nothing
beyond the Python standard library.

## What a run does

1. Adds a number of workers, each with a random first and last name.
2. Adds a number of crews, each named with an adjective and a noun
   (for example `swift otter`).
3. Optionally adds payrolls for the year 2024:
   * monthly payrolls, each starting on the first of a month and ending on
     its last day;
   * biweekly payrolls, fourteen days apart, each ending on the day the next
     one starts;
   * weekly payrolls, seven days apart, each ending on the day the next one
     starts.
4. For every payroll in the database and every worker, adds one earning for
   each day from the payroll's start up to, but not including, its end. A
   coin flip per worker and payroll decides how the worker is paid:
   * hourly earnings record hours worked and hours offered (4 to 12 each);
   * piece-work earnings record piece units (100 to 1000) and a crew chosen
     at random, the same crew for every day of that payroll.

   Every earning carries an amount between 10 and 500. Numbers are stored
   with four decimal places. Earnings are inserted one payroll at a time and
   progress is logged after each.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

The command works on an SQLite database file:

```
payroll-seed --dsn payroll.db --num_workers 1000 --num_crews 20
```

| Option                     | Default | Meaning                                  |
|----------------------------|---------|------------------------------------------|
| `--dsn`                    | empty   | Path of the SQLite database file         |
| `--num_workers`            | 1000    | Number of workers to add                 |
| `--num_crews`              | 20      | Number of crews to add                   |
| `--should_create_payrolls` | true    | Whether to add the 2024 payrolls         |

Each option may also be written with a single dash (`-dsn payroll.db`).
`--should_create_payrolls` takes `true`/`false` (also `1`/`0`, `t`/`f`);
given alone it means true.

Log lines go to standard output as `key=value` pairs, for example:

```
time=2024-05-01T10:00:00.000+00:00 level=INFO msg="Workers created" num_workers=1000
```

The command exits with status 1 and logs the error if the database cannot be
opened, or if an insert or query fails — including when a worker is put on
piece work while there are no crews to choose from. Otherwise it logs `Done`
and exits with status 0.

## From Python

`payroll_seed.models` holds the row types (`Worker`, `Crew`, `Payroll`,
`Earning`, `CreateWorkersParams`, `CreatePayrollsParams`,
`CreateEarningsParams`, `GetPayrollsRow`) and the `PayPeriod` and
`PayrollStatus` enumerations. `parse_pay_period` and `parse_payroll_status`
read them from a database value (`str` or bytes); `None` gives `None`, other
types raise `TypeError`, unknown names raise `ValueError`.

`payroll_seed.repo.Queries(db, paramstyle="format")` wraps any DB-API 2.0
connection. `paramstyle` is one of `qmark`, `format`, `pyformat`, `numeric`
or `named`, matching the driver. It offers bulk inserts (`create_workers`,
`create_crews`, `create_payrolls`, `create_earnings`, each returning the
number of rows inserted) and reads (`get_worker_ids`, `get_crew_ids`,
`get_payrolls`). `with_tx` returns a `Queries` bound to another connection or
transaction with the same paramstyle. Enumerations are stored as their
names, decimals as strings and dates in ISO form.

```python
import sqlite3
from payroll_seed.repo import Queries

queries = Queries(sqlite3.connect("payroll.db"), "qmark")
print(queries.get_worker_ids())
```

`payroll_seed.periods` builds pay periods: `monthly_periods`,
`biweekly_periods` and `weekly_periods` yield `(start, end)` pairs for every
period starting before an end date, `date_range` yields each day from a start
up to an end, and `add_months` steps a date by whole months, letting a day
that does not exist roll into the following month.

`payroll_seed.fake.Faker` produces names, crew names, prices, floats in a
range and coin flips from a `random.Random`, so a seeded generator gives
repeatable data.

`payroll_seed.seed` ties these together with `create_workers`,
`create_crews`, `create_monthly_payrolls`, `create_biweekly_payrolls`,
`create_weekly_payrolls` and `create_earnings`; `earning_params` builds a
single earning and `format_decimal` rounds a value the way stored numbers
are rounded.

## What it does not do

* It does not create the tables. The database must already hold `workers`,
  `crews`, `payrolls` and `earnings` with the columns the inserts use, and
  ids assigned by the database.
* The command only opens SQLite files. Other databases can be seeded from
  Python by passing their DB-API connection to `Queries`.
* Rows are inserted with ordinary `INSERT` statements through
  `executemany`; there is no bulk-copy path.