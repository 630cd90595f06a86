"""
IMAP Date-Time

Strict parsing and formatting of RFC 3501 date-time strings:

    >>> from imap_datetime import parse_datetime, format_datetime
    >>> format_datetime(parse_datetime(' 1-Jul-2002 13:50:05 +0200'))
    ' 1-Jul-2002 13:50:05 +0200'
"""

from imap_datetime.errors import (
    ImapDateTimeError,
    MalformedDate,
    InvalidMonthName,
    MissingDateTimeSeparator,
    MalformedTime,
    MissingTimeZone,
    MalformedTimeZone,
    TrailingCharacters,
    InvalidCalendarDate,
)
from imap_datetime.formatter import ImapDateTimeFormat, format_datetime
from imap_datetime.months import MONTH_ABBREVIATIONS, month_abbreviation, month_number
from imap_datetime.parser import is_imap_datetime, parse_datetime

__all__ = [
    'parse_datetime',
    'format_datetime',
    'is_imap_datetime',
    'ImapDateTimeFormat',
    'MONTH_ABBREVIATIONS',
    'month_number',
    'month_abbreviation',
    'ImapDateTimeError',
    'MalformedDate',
    'InvalidMonthName',
    'MissingDateTimeSeparator',
    'MalformedTime',
    'MissingTimeZone',
    'MalformedTimeZone',
    'TrailingCharacters',
    'InvalidCalendarDate',
]
