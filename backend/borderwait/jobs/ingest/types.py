from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Mapping, Optional, Union

from borderwait.jobs.ingest.errors import FormatError

# standard-time UTC offsets, in hours
_STANDARD_OFFSETS = {"A": -4, "E": -5, "C": -6, "M": -7, "P": -8}


class TimeZone(str, Enum):
    ADT = "ADT"
    AST = "AST"
    CDT = "CDT"
    CST = "CST"
    EDT = "EDT"
    EST = "EST"
    MDT = "MDT"
    MST = "MST"
    PDT = "PDT"
    PST = "PST"

    @classmethod
    def parse(cls, text: str) -> "TimeZone":
        code = (text or "").strip().upper()
        try:
            return cls(code)
        except ValueError:
            raise FormatError(text, "a time zone code matching [ACEMP][DS]T") from None

    @property
    def is_daylight(self) -> bool:
        return self.value[1] == "D"

    @property
    def is_pacific(self) -> bool:
        return self.value[0] == "P"

    @property
    def utc_offset(self) -> timedelta:
        hours = _STANDARD_OFFSETS[self.value[0]] + (1 if self.is_daylight else 0)
        return timedelta(hours=hours)

    @property
    def tzinfo(self) -> tzinfo:
        return timezone(self.utc_offset, self.value)


@dataclass(frozen=True)
class CanadaBorderCrossingTimes:
    cbsa_office: str                 # office name, one line per source fragment
    commercial_flow: str             # "Not Applicable" | "No Delay" | "<n> minute(s)/hour(s)"
    travellers_flow: str
    updated: datetime                # aware, in the announced zone


Part = Union[str, int]

_PART_WIDTHS = (("prefix", 2), ("port_of_entry", 4), ("suffix", 2))


@dataclass(frozen=True)
class IdentifierParts:
    """
    A port identifier split as (prefix, port_of_entry, suffix).

    Either all strings (zero-padded to widths 2/4/2) or all ints.
    The 8-digit value is prefix * 10**6 + port_of_entry * 10**2 + suffix.
    """

    prefix: Part
    port_of_entry: Part
    suffix: Part

    def __post_init__(self):
        values = (self.prefix, self.port_of_entry, self.suffix)
        if all(isinstance(v, str) for v in values):
            for (name, width), v in zip(_PART_WIDTHS, values):
                if len(v) != width or not v.isdigit():
                    raise FormatError(v, f"{name} as exactly {width} digits")
        elif all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            for (name, width), v in zip(_PART_WIDTHS, values):
                if not 0 <= v < 10 ** width:
                    raise FormatError(v, f"{name} in [0, {10 ** width - 1}]")
        else:
            raise TypeError(
                "IdentifierParts must be all str or all int, got "
                + ", ".join(type(v).__name__ for v in values)
            )

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.prefix, int)

    @property
    def value(self) -> int:
        return int(self.prefix) * 10**6 + int(self.port_of_entry) * 10**2 + int(self.suffix)

    def as_strings(self) -> "IdentifierParts":
        if not self.is_numeric:
            return self
        return IdentifierParts(f"{self.prefix:02d}", f"{self.port_of_entry:04d}", f"{self.suffix:02d}")

    def as_ints(self) -> "IdentifierParts":
        if self.is_numeric:
            return self
        return IdentifierParts(int(self.prefix), int(self.port_of_entry), int(self.suffix))


@dataclass(frozen=True)
class Lanes:
    operational_status: Optional[str]
    update_time: Optional[str]
    delay_minutes: Optional[int]
    lanes_open: Optional[int]


@dataclass(frozen=True)
class LaneGroup:
    maximum_lanes: Optional[int]
    # sub-record name as published, e.g. "standard_lanes", "NEXUS_SENTRI_lanes"
    lanes: Mapping[str, Lanes] = field(default_factory=dict)


@dataclass(frozen=True)
class BorderCrossing:
    port_number: Optional[str]
    border: Optional[str]
    port_name: Optional[str]
    crossing_name: Optional[str]
    hours: Optional[str]
    port_status: Optional[str]
    construction_notice: Optional[str]

    date: Optional[datetime]         # UTC, combined from raw date + time
    automation: Optional[bool]
    automation_enabled: Optional[bool]

    commercial_vehicle_lanes: Optional[LaneGroup]
    passenger_vehicle_lanes: Optional[LaneGroup]
    pedestrian_lanes: Optional[LaneGroup]
