"""Exception taxonomy for kalendar.

Every failure raised by the library is a contract violation rather than a
transient condition, so nothing here is retried. Each class also derives from
the closest builtin so callers can catch ``ValueError``/``LookupError`` as
usual.
"""


class KalendarError(Exception):
    """Base class for all kalendar errors."""


class UnrelatedUnitsError(KalendarError, ValueError):
    """Conversion requested between units that share no common ancestor."""


class UnitCycleError(KalendarError, ValueError):
    """A unit's base chain loops back on itself."""


class InvalidDateError(KalendarError, ValueError):
    """A calendar query was given a field outside its declared range."""


class InvalidMonthError(InvalidDateError):
    pass


class InvalidDayError(InvalidDateError):
    pass


class InvalidOrdinalError(InvalidDateError):
    pass


class DuplicateIdError(KalendarError, KeyError):
    """An id is already registered; the existing entry is left untouched."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep messages readable
        return str(self.args[0]) if self.args else ""


class NotFoundError(KalendarError, LookupError):
    """Lookup or removal of an id that is not present."""


class IntervalOrderError(KalendarError, ValueError):
    """Interval end precedes its start after normalization."""


__all__ = [
    "KalendarError",
    "UnrelatedUnitsError",
    "UnitCycleError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidOrdinalError",
    "DuplicateIdError",
    "NotFoundError",
    "IntervalOrderError",
]
