"""Seed a payroll database with fake workers, crews, payrolls and daily earnings."""

__version__ = "0.1.0"