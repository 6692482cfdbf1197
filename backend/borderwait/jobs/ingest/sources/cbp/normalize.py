"""CBP border wait time feed normalization.

The feed is loosely typed: every scalar is a string, blanks stand for missing
values, booleans are "0"/"1" and the crossing timestamp is split over "date" and
"time". `revive()` rewrites the raw tree with per-key rules, then
`to_border_crossing()` builds the typed records.

Only undecodable JSON is an error. A lane count that is not an integer becomes
None, and a date/time pair that cannot be combined leaves the record undated.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Iterable, Iterator, Optional

from borderwait.jobs.ingest.errors import FormatError
from borderwait.jobs.ingest.types import BorderCrossing, LaneGroup, Lanes
from borderwait.jobs.ingest.utils.time import combine_date_time

logger = logging.getLogger(__name__)

DEFAULT_REGION_PREFIX = "30"

BOOLEAN_KEYS = frozenset({"automation", "automation_enabled"})
INTEGER_KEYS = frozenset({"delay_minutes", "lanes_open"})
MAXIMUM_LANES_KEY = "maximum_lanes"
NOT_AVAILABLE = "N/A"

LANE_GROUP_KEYS = ("commercial_vehicle_lanes", "passenger_vehicle_lanes", "pedestrian_lanes")
SCALAR_KEYS = (
    "port_number",
    "border",
    "port_name",
    "crossing_name",
    "hours",
    "port_status",
    "construction_notice",
)

_BOOLEANS = {"0": False, "1": True}


def _parse_int(key: str, value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("CBP %s %r is not an integer; using None", key, value)
        return None


def _revive_object(raw: dict) -> dict:
    # first pass: children and blank strings, so every rule sees final siblings
    fields: dict[str, Any] = {}
    for key, value in raw.items():
        fields[key] = revive(value)

    # second pass: keyed rules
    out: dict[str, Any] = {}
    drop_time = False
    for key, value in fields.items():
        if key == "date" and "time" in fields:
            if isinstance(value, str) and isinstance(fields["time"], str):
                try:
                    value = combine_date_time(value, fields["time"])
                    drop_time = True
                except FormatError as e:
                    # left as text; to_border_crossing() turns it into None
                    logger.warning("CBP date/time not combined: %s", e)
        elif key in BOOLEAN_KEYS:
            if isinstance(value, str) and value in _BOOLEANS:
                value = _BOOLEANS[value]
        elif key in INTEGER_KEYS:
            if isinstance(value, str):
                value = _parse_int(key, value)
        elif key == MAXIMUM_LANES_KEY:
            if value == NOT_AVAILABLE:
                value = None
            elif isinstance(value, str):
                value = _parse_int(key, value)
        out[key] = value

    if drop_time:
        del out["time"]
    return out


def revive(tree: Any) -> Any:
    """Apply the per-key rules to every object of a decoded JSON tree, bottom-up."""
    if isinstance(tree, dict):
        return _revive_object(tree)
    if isinstance(tree, list):
        return [revive(item) for item in tree]
    if tree == "":
        return None
    return tree


def _to_lanes(data: dict) -> Lanes:
    return Lanes(
        operational_status=data.get("operational_status"),
        update_time=data.get("update_time"),
        delay_minutes=data.get("delay_minutes"),
        lanes_open=data.get("lanes_open"),
    )


def _to_lane_group(data: Optional[dict]) -> Optional[LaneGroup]:
    if not isinstance(data, dict):
        return None
    lanes = {key: _to_lanes(value) for key, value in data.items() if isinstance(value, dict)}
    return LaneGroup(maximum_lanes=data.get(MAXIMUM_LANES_KEY), lanes=lanes)


def to_border_crossing(data: dict) -> BorderCrossing:
    """Build a record from an object already passed through `revive()`."""
    if not isinstance(data, dict):
        raise FormatError(data, "a border crossing object")

    date = data.get("date")
    if not isinstance(date, datetime):
        # date without a time: cannot be placed on the timeline
        date = None

    return BorderCrossing(
        **{key: data.get(key) for key in SCALAR_KEYS},
        date=date,
        automation=data.get("automation") if isinstance(data.get("automation"), bool) else None,
        automation_enabled=(
            data.get("automation_enabled") if isinstance(data.get("automation_enabled"), bool) else None
        ),
        **{key: _to_lane_group(data.get(key)) for key in LANE_GROUP_KEYS},
    )


def normalize(json_text: str | bytes) -> list[BorderCrossing]:
    """Decode the CBP feed (an array of ports, or a single port) into typed records."""
    try:
        tree = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise FormatError(json_text[:80], "a JSON document") from e

    if isinstance(tree, dict):
        tree = [tree]
    if not isinstance(tree, list):
        raise FormatError(tree, "a JSON array of border crossings")

    return [to_border_crossing(item) for item in revive(tree)]


def select_by_region(
    records: Iterable[BorderCrossing],
    restrict_to_region: bool,
    region_prefix: str = DEFAULT_REGION_PREFIX,
) -> Iterator[BorderCrossing]:
    """Lazily yield records whose port number starts with region_prefix, or all of them."""
    for record in records:
        if not restrict_to_region or str(record.port_number or "").startswith(region_prefix):
            yield record
