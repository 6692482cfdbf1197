"""
Port identifier codec.

A full identifier is 8 digits: a 2-digit prefix, the 4-digit port of entry and a
2-digit crossing suffix, e.g. "02300401" -> ("02", "3004", "01"). CBP publishes
the 6-digit port number ("300401"); those need a prefix before they can be split.
"""
import re
from typing import Union

from borderwait.jobs.ingest.errors import FormatError
from borderwait.jobs.ingest.types import IdentifierParts

DEFAULT_PORT_PREFIX = "02"
MAX_ID_VALUE = 99_999_999

SHORT_ID_RE = re.compile(r"[0-9]{6,8}")
FULL_ID_RE = re.compile(r"[0-9]{7,8}")
PREFIX_RE = re.compile(r"[0-9]{2}")


def string_to_parts(
    id: str,
    assume_prefix_if_short: bool = False,
    *,
    as_int: bool = False,
    default_prefix: str = DEFAULT_PORT_PREFIX,
) -> IdentifierParts:
    if not isinstance(id, str):
        raise TypeError(f"Port id must be str, got {type(id).__name__}")
    if not SHORT_ID_RE.fullmatch(id):
        raise FormatError(id, f"^{SHORT_ID_RE.pattern}$")

    if len(id) == 6 and assume_prefix_if_short:
        if not isinstance(default_prefix, str) or not PREFIX_RE.fullmatch(default_prefix):
            raise FormatError(default_prefix, f"default prefix matching ^{PREFIX_RE.pattern}$")
        id = default_prefix + id

    if not FULL_ID_RE.fullmatch(id):
        raise FormatError(id, f"^{FULL_ID_RE.pattern}$")

    id = id.zfill(8)
    parts = IdentifierParts(id[0:2], id[2:6], id[6:8])
    return parts.as_ints() if as_int else parts


def number_to_parts(id: Union[int, float, str], *, as_str: bool = False) -> IdentifierParts:
    """
    Split the integer value of an id. Integral floats (2300401.0) and digit
    strings are accepted; fractional floats are a FormatError.
    """
    if isinstance(id, bool) or not isinstance(id, (int, float, str)):
        raise TypeError(f"Port id must be a number or str, got {type(id).__name__}")
    if isinstance(id, float):
        if not id.is_integer():
            raise FormatError(id, "an integral number")
        id = int(id)
    if isinstance(id, str):
        if not id.isascii() or not id.isdigit():
            raise FormatError(id, "a base-10 integer")
        id = int(id)
    if not 0 <= id <= MAX_ID_VALUE:
        raise FormatError(id, f"an integer in [0, {MAX_ID_VALUE}]")

    suffix = id % 100
    port = (id // 100) % 10_000
    prefix = (id // 100 - port) // 10_000

    parts = IdentifierParts(prefix, port, suffix)
    return parts.as_strings() if as_str else parts


def encode_id(parts: IdentifierParts, *, as_int: bool = False) -> Union[str, int]:
    """8-digit zero-padded string, or the integer value with as_int."""
    if not isinstance(parts, IdentifierParts):
        raise TypeError(f"Expected IdentifierParts, got {type(parts).__name__}")
    if as_int:
        return parts.value
    return f"{parts.value:08d}"


def decode_id(
    id: Union[int, float, str],
    *,
    assume_prefix_if_short: bool = False,
    as_int: bool = False,
    default_prefix: str = DEFAULT_PORT_PREFIX,
) -> IdentifierParts:
    if isinstance(id, str):
        return string_to_parts(
            id,
            assume_prefix_if_short,
            as_int=as_int,
            default_prefix=default_prefix,
        )
    if isinstance(id, (int, float)) and not isinstance(id, bool):
        return number_to_parts(id, as_str=not as_int)
    raise TypeError(f"Port id must be a number or str, got {type(id).__name__}")
