"""
MCP Schemas Module

This module defines the schemas used by the IMAP date-time tools.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from imap_datetime.formatter import format_datetime
from imap_datetime.parser import offset_zone


class ParsedImapDateTime(BaseModel):
    """
    Schema for a parsed IMAP date-time.

    The fields are the wall-clock values as written in the string, plus the
    zone offset in minutes east of UTC.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    offset_minutes: int
    iso: str
    canonical: str

    @classmethod
    def from_datetime(cls, value: datetime) -> "ParsedImapDateTime":
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            offset_minutes=int(value.utcoffset().total_seconds()) // 60,
            iso=value.isoformat(),
            canonical=format_datetime(value),
        )


class ImapDateTimeFields(BaseModel):
    """
    Schema for the components of an IMAP date-time to be formatted.

    Ranges are checked here; whether the day exists in that month is left
    to datetime.
    """
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)
    offset_minutes: int = Field(default=0, gt=-24 * 60, lt=24 * 60)

    def to_datetime(self) -> datetime:
        return datetime(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second,
            tzinfo=offset_zone(self.offset_minutes),
        )
