"""
Exceptions raised by the event store, validation and persistence layers.
"""


class CalendarError(Exception):
    """Base class for calendar core errors."""


class InvalidEventError(CalendarError, ValueError):
    """Event fields failed validation at the store boundary."""


class PersistenceError(CalendarError):
    """The backing key-value store could not be read or written."""
