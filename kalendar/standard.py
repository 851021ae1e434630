"""Standard unit hierarchies and leap-year rule.

Two ready-made groups are provided. ``SCIENTIFIC_UNITS`` hangs every unit
directly off the canonical second using measured averages; ``CALENDAR_UNITS``
nests units (hour on minute, day on hour, month on day) so calendar-shaped
quantities convert through whole days.
"""

from kalendar.units import Unit, canonical_second

SECOND = canonical_second()

# Seconds per unit for the flat scientific hierarchy
MINUTE_SECONDS = 60
HOUR_SECONDS = 3600
DAY_SECONDS = 86400
WEEK_SECONDS = 604800
MONTH_SECONDS = 2629746  # mean Gregorian month
YEAR_SECONDS = 31556952  # mean Gregorian year

SCIENTIFIC_UNITS: dict[str, Unit] = {
    "SECOND": SECOND,
    "MINUTE": Unit("minute", "Minute", "min", SECOND, MINUTE_SECONDS),
    "HOUR": Unit("hour", "Hour", "h", SECOND, HOUR_SECONDS),
    "DAY": Unit("day", "Day", "d", SECOND, DAY_SECONDS),
    "WEEK": Unit("week", "Week", "wk", SECOND, WEEK_SECONDS),
    "MONTH": Unit("month", "Month", "mo", SECOND, MONTH_SECONDS),
    "YEAR": Unit("year", "Year", "yr", SECOND, YEAR_SECONDS),
}


def _calendar_units() -> dict[str, Unit]:
    minute = Unit("minute", "Minute", "min", SECOND, 60)
    hour = Unit("hour", "Hour", "h", minute, 60)
    day = Unit("day", "Day", "d", hour, 24)
    units = {
        "SECOND": SECOND,
        "MINUTE": minute,
        "HOUR": hour,
        "DAY": day,
        "WEEK": Unit("week", "Week", "wk", day, 7),
    }
    for days in (28, 29, 30, 31):
        units[f"MONTH_{days}"] = Unit(
            f"month_{days}", f"{days}-day month", f"mo{days}", day, days
        )
    for days in (365, 366):
        units[f"YEAR_{days}"] = Unit(
            f"year_{days}", f"{days}-day year", f"yr{days}", day, days
        )
    return units


CALENDAR_UNITS: dict[str, Unit] = _calendar_units()


def is_leap_year(year: int) -> bool:
    """Gregorian leap rule: every 4th year, except centuries not divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


__all__ = ["SECOND", "SCIENTIFIC_UNITS", "CALENDAR_UNITS", "is_leap_year"]
