"""
MCP Tools Module

This module defines the tools available in the IMAP date-time MCP server.
Tools are functions that an assistant can call to parse and build IMAP
INTERNALDATE / APPEND date-time strings.
"""

from typing import Any, Dict

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from imap_datetime.errors import ImapDateTimeError
from imap_datetime.formatter import format_datetime
from imap_datetime.mcp.schemas import ImapDateTimeFields, ParsedImapDateTime
from imap_datetime.parser import parse_datetime
from imap_datetime.utils.logger import get_logger

logger = get_logger(__name__)


def parse_imap_datetime(text: str) -> Dict[str, Any]:
    """
    Parse an IMAP date-time string such as ' 1-Jul-2002 13:50:05 +0200'.

    Args:
        text (str): The date-time string. Month names are case sensitive
            and the zone must be a numeric offset.

    Returns:
        Dict[str, Any]: The parsed fields including:
            - year, month, day, hour, minute, second: Wall-clock fields
            - offset_minutes: Zone offset east of UTC in minutes
            - iso: ISO 8601 rendering
            - canonical: The canonical IMAP rendering
        or error and error_kind if the string is not a valid date-time.
    """
    try:
        value = parse_datetime(text)
    except ImapDateTimeError as e:
        logger.warning(f"Failed to parse IMAP date-time: {e}")
        return {"error": f"Failed to parse IMAP date-time: {e.message}", "error_kind": e.kind}

    return ParsedImapDateTime.from_datetime(value).model_dump()


def format_imap_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    offset_minutes: int = 0,
) -> Dict[str, Any]:
    """
    Build an IMAP date-time string from its components.

    Args:
        year (int): Year, 1-9999
        month (int): Month, 1-12
        day (int): Day of month
        hour (int): Hour, 0-23. Defaults to 0.
        minute (int): Minute, 0-59. Defaults to 0.
        second (int): Second, 0-59. Defaults to 0.
        offset_minutes (int): Zone offset east of UTC in minutes,
            e.g. 120 for +0200 or -300 for -0500. Defaults to 0.

    Returns:
        Dict[str, Any]: imap_datetime with the formatted string, or error.
    """
    try:
        fields = ImapDateTimeFields(
            year=year, month=month, day=day,
            hour=hour, minute=minute, second=second,
            offset_minutes=offset_minutes,
        )
        value = fields.to_datetime()
    except ValidationError as e:
        logger.warning(f"Invalid date-time fields: {e}")
        return {"error": f"Invalid date-time fields: {e.error_count()} field(s) out of range", "details": e.errors(include_url=False)}
    except ValueError as e:
        logger.warning(f"Invalid calendar date: {e}")
        return {"error": f"Invalid calendar date: {e}"}

    return {"imap_datetime": format_datetime(value)}


def setup_tools(mcp: FastMCP) -> None:
    """
    Set up all MCP tools on the FastMCP application.

    Args:
        mcp (FastMCP): The FastMCP application.
    """
    mcp.tool()(parse_imap_datetime)
    mcp.tool()(format_imap_datetime)
