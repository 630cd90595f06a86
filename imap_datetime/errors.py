"""
IMAP Date-Time Errors

Every parse failure raises a subclass of ImapDateTimeError naming the field
that failed. The base class derives from ValueError so callers that already
catch ValueError around date parsing keep working.
"""

from typing import Optional


class ImapDateTimeError(ValueError):
    """Base class for IMAP date-time parse failures."""

    kind = "imap_datetime_error"
    default_message = "Invalid IMAP date-time"

    def __init__(self, text: str, position: int = 0, message: Optional[str] = None):
        self.text = text
        self.position = position
        self.message = message or self.default_message
        super().__init__(f"{self.message} at position {position}: {text!r}")


class MalformedDate(ImapDateTimeError):
    kind = "malformed_date"
    default_message = "Incorrectly formatted date"


class InvalidMonthName(ImapDateTimeError):
    kind = "invalid_month_name"
    default_message = "Unknown month name"


class MissingDateTimeSeparator(ImapDateTimeError):
    kind = "missing_datetime_separator"
    default_message = "Incorrectly formatted datetime"


class MalformedTime(ImapDateTimeError):
    kind = "malformed_time"
    default_message = "Incorrectly formatted time"


class MissingTimeZone(ImapDateTimeError):
    kind = "missing_time_zone"
    default_message = "Missing time zone"


class MalformedTimeZone(ImapDateTimeError):
    kind = "malformed_time_zone"
    default_message = "Incorrectly formatted time zone"


class TrailingCharacters(ImapDateTimeError):
    kind = "trailing_characters"
    default_message = "Unexpected characters after time zone"


class InvalidCalendarDate(ImapDateTimeError):
    """Raised when well-formed fields describe a date or time that does not exist."""

    kind = "invalid_calendar_date"
    default_message = "Invalid calendar date"
