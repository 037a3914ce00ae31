"""Aggregates team members' out-of-office events into a shared calendar."""

__version__ = "0.1.0"
