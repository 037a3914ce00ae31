# File: away_calendar/models/errors.py
"""
Exception types raised by Away Calendar.
"""


class AwayCalendarError(Exception):
    """Base class for application errors."""


class RosterResolutionError(AwayCalendarError):
    """The group roster could not be resolved; the cycle cannot proceed."""

    def __init__(self, group_email: str, cause: Exception):
        super().__init__(f"Could not list members of {group_email}: {cause}")
        self.group_email = group_email
        self.cause = cause


class TriggerAlreadyInstalledError(AwayCalendarError):
    """A sync trigger is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Trigger '{name}' is already set up.")
        self.name = name


class TriggerNotInstalledError(AwayCalendarError):
    """No sync trigger is registered under the given name."""

    def __init__(self, name: str):
        super().__init__(f"Trigger '{name}' is not set up.")
        self.name = name
