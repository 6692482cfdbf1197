"""
Time helpers for the CBSA and CBP feeds.

The time zone scan takes the first [ACEMP][DS]T abbreviation that is not part of a
longer word. A bare case-insensitive search would read "Last updated 14:30 PDT"
as AST (from "Last"); the letter lookarounds are an intentional refinement so
that text resolves to PDT. "14:30PDT" still matches.
"""
import re
from datetime import datetime, timezone
from typing import Optional

from borderwait.jobs.ingest.errors import FormatError
from borderwait.jobs.ingest.types import TimeZone

# letters on either side would make it part of a word ("last", "PASTE")
TIME_ZONE_RE = re.compile(r"(?<![A-Za-z])[ACEMP][DS]T(?![A-Za-z])", re.IGNORECASE)


def extract_time_zone(text: Optional[str]) -> Optional[TimeZone]:
    """
    First [ACEMP][DS]T abbreviation found in a human-readable time string.
    Returns None if there is none.
    """
    if not text:
        return None
    m = TIME_ZONE_RE.search(text)
    if m is None:
        return None
    return TimeZone(m.group(0).upper())


def to_announced_zone(raw: Optional[str], zone: TimeZone) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp and express it in the announced zone.
    Naive values are taken to already be in that zone.
    Returns None for blank or unparsable input.
    """
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=zone.tzinfo)
    return dt.astimezone(zone.tzinfo)


def combine_date_time(date_str: str, time_str: str) -> datetime:
    """
    Combine "M/D/YYYY" and "H:M[:S]" into an aware UTC datetime.
    """
    date_parts = date_str.strip().split("/")
    time_parts = time_str.strip().split(":")
    if len(date_parts) != 3 or not 2 <= len(time_parts) <= 3:
        raise FormatError(f"{date_str} {time_str}", "date as M/D/YYYY and time as H:M[:S]")
    if len(time_parts) == 2:
        time_parts.append("0")

    try:
        month, day, year = (int(p) for p in date_parts)
        hour, minute, second = (int(p) for p in time_parts)
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as e:
        raise FormatError(f"{date_str} {time_str}", "a valid calendar date and time of day") from e
