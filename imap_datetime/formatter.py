"""
IMAP Date-Time Formatter

Renders a timezone-aware datetime as an RFC 3501 ``date-time`` string.

The zone is written as a signed HHMM offset. Some historical zones have
offsets with a seconds component (Amsterdam was +00:19:32 until 1937), which
the zone syntax cannot express; such values are converted to UTC first, so
the string still names the same instant.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from imap_datetime.months import month_abbreviation
from imap_datetime.parser import parse_datetime
from imap_datetime.utils.logger import get_logger

logger = get_logger(__name__)

UTC_ZONE_NAMES = {'UTC', 'Etc/UTC'}


def _is_utc(zone: Optional[tzinfo]) -> bool:
    """True for zones that are UTC itself rather than some zone at offset zero."""
    if zone is timezone.utc:
        return True
    # zoneinfo.ZoneInfo and pytz zones name themselves; dateutil has tzutc
    key = getattr(zone, 'key', None) or getattr(zone, 'zone', None)
    if key in UTC_ZONE_NAMES:
        return True
    return type(zone).__name__ == 'tzutc'


def format_zone(offset: timedelta) -> str:
    """Format a whole-minute UTC offset as '+HHMM' or '-HHMM'."""
    seconds = int(offset.total_seconds())
    sign = '-' if seconds < 0 else '+'
    minutes = abs(seconds) // 60
    return f"{sign}{minutes // 60:02d}{minutes % 60:02d}"


def format_datetime(value: datetime) -> str:
    """
    Format a datetime as an IMAP date-time string.

    Args:
        value: Timezone-aware datetime

    Returns:
        String such as ' 1-Jul-2002 13:50:05 +0200'. Single-digit days are
        padded with a space. Microseconds are dropped.

    Raises:
        TypeError: If value is not a datetime
        ValueError: If value is naive
    """
    if not isinstance(value, datetime):
        raise TypeError(f"Expected datetime, not {type(value).__name__}")

    offset = value.utcoffset()
    if offset is None:
        raise ValueError("Cannot format a naive datetime as an IMAP date-time")

    if _is_utc(value.tzinfo):
        zone = '+0000'
    elif offset % timedelta(minutes=1):
        logger.debug(f"Offset {offset} of {value.isoformat()} is not whole minutes, converting to UTC")
        value = value.astimezone(timezone.utc)
        zone = '+0000'
    else:
        zone = format_zone(offset)

    return (
        f"{value.day:2d}-{month_abbreviation(value.month)}-{value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} {zone}"
    )


class ImapDateTimeFormat:
    """
    Parse and format IMAP date-time strings through a single object.

    Useful where a format object is passed around instead of functions.
    Holds no state; parsed values do not keep a reference to it.
    """

    def parse_datetime(self, text: str) -> datetime:
        return parse_datetime(text)

    def format_datetime(self, value: datetime) -> str:
        return format_datetime(value)
