"""
IMAP Date-Time Parser

Turns an RFC 3501 ``date-time`` string into a timezone-aware datetime.

    >>> parse_datetime(' 1-Jul-2002 13:50:05 +0200')
    datetime.datetime(2002, 7, 1, 13, 50, 5, tzinfo=datetime.timezone(datetime.timedelta(seconds=7200)))

Parsing is strict and all-or-nothing: the first field that does not match
raises the matching ImapDateTimeError subclass. For lenient, natural
language parsing use a general purpose parser instead.
"""

from datetime import datetime, timedelta, timezone, tzinfo

from imap_datetime.errors import InvalidCalendarDate
from imap_datetime.grammar import FieldFailure, parse_date_time
from imap_datetime.utils.logger import get_logger

logger = get_logger(__name__)


def offset_zone(offset_minutes: int) -> tzinfo:
    """Return a fixed-offset zone for ``offset_minutes`` east of UTC."""
    if offset_minutes == 0:
        return timezone.utc
    return timezone(timedelta(minutes=offset_minutes))


def parse_datetime(text: str) -> datetime:
    """
    Parse an IMAP date-time string.

    Args:
        text: The date-time string, e.g. ' 1-Jul-2002 13:50:05 +0200'

    Returns:
        Timezone-aware datetime with a fixed UTC offset

    Raises:
        TypeError: If text is not a string
        ImapDateTimeError: If text does not match the grammar or names a
            date that does not exist
    """
    if not isinstance(text, str):
        raise TypeError(f"IMAP date-time must be a string, not {type(text).__name__}")

    result = parse_date_time(text, 0)
    if isinstance(result, FieldFailure):
        logger.debug(f"Rejected IMAP date-time {text!r}: {result.error.__name__} at {result.position}")
        raise result.error(text, result.position)

    (day, month, year), (hour, minute, second), offset = result.value

    # datetime owns month lengths, leap years and field ranges
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=offset_zone(offset))
    except ValueError as e:
        logger.debug(f"Rejected IMAP date-time {text!r}: {e}")
        raise InvalidCalendarDate(text, 0, f"Invalid calendar date ({e})") from e


def is_imap_datetime(text: str) -> bool:
    """Return True if ``text`` parses as an IMAP date-time."""
    try:
        parse_datetime(text)
    except (TypeError, ValueError):
        return False
    return True
