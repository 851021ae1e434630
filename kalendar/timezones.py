"""Timezone and unit re-expression of instants.

Instant amounts are read as wall-clock seconds since 1970-01-01 in the
instant's own timezone once reduced to the root unit. Offsets come from the
IANA database through :mod:`zoneinfo`, evaluated at the instant's moment so
daylight-saving transitions are respected.
"""

import logging
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from kalendar.units import Unit, convert

if TYPE_CHECKING:
    from kalendar.instant import Instant

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1)
_UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Offset lookups are clamped into datetime's range, a day short of either end
# so zone conversion cannot step outside it
_MIN_LOOKUP = (datetime(1, 1, 2) - _EPOCH).total_seconds()
_MAX_LOOKUP = (datetime(9999, 12, 30) - _EPOCH).total_seconds()


def _lookup_seconds(seconds: float) -> float:
    return float(min(max(seconds, _MIN_LOOKUP), _MAX_LOOKUP))


def utc_offset(label: str, utc_seconds: float) -> float:
    """Offset in seconds of zone ``label`` at the UTC moment ``utc_seconds``.

    Moments outside years 1-9999 use the offset at the nearest supported one.
    """
    moment = _UTC_EPOCH + timedelta(seconds=_lookup_seconds(utc_seconds))
    offset = moment.astimezone(ZoneInfo(label)).utcoffset()
    return offset.total_seconds() if offset is not None else 0.0


def local_offset(label: str, wall_seconds: float) -> float:
    """Offset in seconds of zone ``label`` for a local wall-clock reading."""
    wall = _EPOCH + timedelta(seconds=_lookup_seconds(wall_seconds))
    offset = wall.replace(tzinfo=ZoneInfo(label)).utcoffset()
    return offset.total_seconds() if offset is not None else 0.0


def to_timezone(instant: "Instant", target: str) -> "Instant":
    """Return ``instant`` re-expressed as wall-clock time in ``target``."""
    if instant.timezone == target:
        return instant

    root = instant.unit.root
    wall_seconds = convert(instant.amount, instant.unit, root)
    source_offset = local_offset(instant.timezone, wall_seconds)
    target_offset = utc_offset(target, wall_seconds - source_offset)
    shift = target_offset - source_offset
    logger.debug(
        "Shifting %s from %s to %s by %ss", instant.id, instant.timezone, target, shift
    )

    return replace(
        instant,
        id=f"{instant.id}_{target}",
        amount=instant.amount + convert(shift, root, instant.unit),
        timezone=target,
        metadata=dict(instant.metadata),
    )


def to_unit(instant: "Instant", unit: Unit) -> "Instant":
    """Return ``instant`` with its amount expressed in ``unit``."""
    if instant.unit is unit:
        return instant
    return replace(
        instant,
        id=f"{instant.id}_{unit.id}",
        amount=convert(instant.amount, instant.unit, unit),
        unit=unit,
        metadata=dict(instant.metadata),
    )


__all__ = ["to_timezone", "to_unit", "utc_offset", "local_offset"]
