"""
IMAP Date-Time Grammar

Field parsers for the RFC 3501 ``date-time`` literal:

    date-time = DQUOTE date-day-fixed "-" date-month "-" date-year
                SP time SP zone DQUOTE

Every parser takes the full input and a position and returns either a
FieldMatch (parsed value and the position after it) or a FieldFailure (the
error class to raise and the position it failed at). The input is never
sliced down or mutated, so parsers compose freely with ``sequence``.
"""

from functools import partial
from typing import Any, Callable, NamedTuple, Type, Union

from imap_datetime.errors import (
    ImapDateTimeError,
    MalformedDate,
    InvalidMonthName,
    MissingDateTimeSeparator,
    MalformedTime,
    MissingTimeZone,
    MalformedTimeZone,
    TrailingCharacters,
)
from imap_datetime.months import month_number

# str.isdigit() also accepts non-ASCII digits, which the grammar does not
DIGITS = frozenset('0123456789')

MAX_OFFSET_MINUTES = 24 * 60


class FieldMatch(NamedTuple):
    value: Any
    end: int


class FieldFailure(NamedTuple):
    error: Type[ImapDateTimeError]
    position: int


FieldResult = Union[FieldMatch, FieldFailure]
FieldParser = Callable[[str, int], FieldResult]


def _all_digits(chunk: str, width: int) -> bool:
    return len(chunk) == width and all(char in DIGITS for char in chunk)


def literal(text: str, pos: int, expected: str, error: Type[ImapDateTimeError]) -> FieldResult:
    """Match ``expected`` exactly. Literals carry no value."""
    if text.startswith(expected, pos):
        return FieldMatch(None, pos + len(expected))
    return FieldFailure(error, pos)


def number(text: str, pos: int, width: int, error: Type[ImapDateTimeError]) -> FieldResult:
    """Match exactly ``width`` ASCII digits."""
    chunk = text[pos:pos + width]
    if _all_digits(chunk, width):
        return FieldMatch(int(chunk), pos + width)
    return FieldFailure(error, pos)


def sequence(*parsers: FieldParser) -> FieldParser:
    """
    Chain field parsers left to right.

    The combined parser stops at the first failure and returns it unchanged.
    On success its value is a tuple of every non-None field value, so
    literals drop out.
    """
    def parse(text: str, pos: int) -> FieldResult:
        values = []
        for parser in parsers:
            result = parser(text, pos)
            if isinstance(result, FieldFailure):
                return result
            if result.value is not None:
                values.append(result.value)
            pos = result.end
        return FieldMatch(tuple(values), pos)

    return parse


def parse_day(text: str, pos: int) -> FieldResult:
    """
    Parse ``date-day-fixed``: a space and a digit, or two digits.

    A single digit directly followed by "-" is also accepted, as in the
    plain ``date-day`` form used by SEARCH dates.
    """
    chunk = text[pos:pos + 2]
    if len(chunk) == 2 and chunk[0] == ' ' and chunk[1] in DIGITS:
        return FieldMatch(int(chunk[1]), pos + 2)
    if _all_digits(chunk, 2):
        return FieldMatch(int(chunk), pos + 2)
    if len(chunk) == 2 and chunk[0] in DIGITS and chunk[1] == '-':
        return FieldMatch(int(chunk[0]), pos + 1)
    return FieldFailure(MalformedDate, pos)


def parse_month(text: str, pos: int) -> FieldResult:
    chunk = text[pos:pos + 3]
    month = month_number(chunk)
    if month is not None:
        return FieldMatch(month, pos + 3)
    # Right width and alphabetic, just not one of the twelve names
    if len(chunk) == 3 and chunk.isascii() and chunk.isalpha():
        return FieldFailure(InvalidMonthName, pos)
    return FieldFailure(MalformedDate, pos)


def parse_zone_separator(text: str, pos: int) -> FieldResult:
    """Match the space before the zone; input ending here means no zone at all."""
    if pos >= len(text):
        return FieldFailure(MissingTimeZone, pos)
    return literal(text, pos, ' ', MissingDateTimeSeparator)


def parse_zone(text: str, pos: int) -> FieldResult:
    """
    Parse ``zone``: a sign followed by four digits HHMM.

    The value is the signed offset from UTC in minutes.
    """
    sign = text[pos:pos + 1]
    if sign not in ('+', '-'):
        return FieldFailure(MissingTimeZone, pos)

    digits = text[pos + 1:pos + 5]
    if not _all_digits(digits, 4):
        return FieldFailure(MalformedTimeZone, pos + 1)

    hours, minutes = int(digits[:2]), int(digits[2:])
    offset = hours * 60 + minutes
    if minutes > 59 or offset >= MAX_OFFSET_MINUTES:
        return FieldFailure(MalformedTimeZone, pos + 1)

    return FieldMatch(-offset if sign == '-' else offset, pos + 5)


def parse_end(text: str, pos: int) -> FieldResult:
    if pos == len(text):
        return FieldMatch(None, pos)
    return FieldFailure(TrailingCharacters, pos)


_dash = partial(literal, expected='-', error=MalformedDate)
_colon = partial(literal, expected=':', error=MalformedTime)
_time_field = partial(number, width=2, error=MalformedTime)

# (day, month, year)
parse_date = sequence(
    parse_day, _dash, parse_month, _dash, partial(number, width=4, error=MalformedDate)
)

# (hour, minute, second)
parse_time = sequence(_time_field, _colon, _time_field, _colon, _time_field)

# ((day, month, year), (hour, minute, second), offset_minutes)
parse_date_time = sequence(
    parse_date,
    partial(literal, expected=' ', error=MissingDateTimeSeparator),
    parse_time,
    parse_zone_separator,
    parse_zone,
    parse_end,
)
