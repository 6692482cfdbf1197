import re
from typing import Literal

from borderwait.jobs.ingest.errors import FormatError

NOT_APPLICABLE = "Not Applicable"
NO_DELAY = "No Delay"

FLOW_VALUE_RE = re.compile(r"^\d{1,2} (minute|hour)s?$")
FLOW_VALUE_EXPECTED = f'"{NOT_APPLICABLE}", "{NO_DELAY}" or "<n> minute(s)|hour(s)"'


def is_flow_value(text: str) -> bool:
    if text in (NOT_APPLICABLE, NO_DELAY):
        return True
    m = FLOW_VALUE_RE.match(text or "")
    if m is None:
        return False
    # "1 minutes" and "5 hour" are not valid
    amount = int(text.split(" ", 1)[0])
    return text.endswith("s") == (amount != 1)


def check_flow_value(text: str, *, strict: bool = False) -> str:
    """
    Return the flow text unchanged. Only raises when strict is set;
    scraped values that miss the grammar are otherwise passed through.
    """
    if strict and not is_flow_value(text):
        raise FormatError(text, FLOW_VALUE_EXPECTED)
    return text


def format_duration(amount: int, unit: Literal["minute", "hour"]) -> str:
    if unit not in ("minute", "hour"):
        raise FormatError(unit, '"minute" or "hour"')
    if not 0 <= amount <= 99:
        raise FormatError(amount, "a duration between 0 and 99")
    return f"{amount} {unit}" if amount == 1 else f"{amount} {unit}s"
