"""Filter configuration for commit traversal."""

import math
import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, PositiveInt, field_validator

DEFAULT_MAX_COUNT = 1024

_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2}(?:\.\d+)?)([Zz]|[+-]\d{2}:\d{2})"
)


def parse_rfc3339(text: str) -> Optional[int]:
    """Parse an RFC 3339 timestamp into whole seconds since the epoch.

    Returns None for anything that is not a complete RFC 3339 timestamp with
    an explicit offset.
    """
    match = _RFC3339.fullmatch(text)
    if not match:
        return None

    date_part, time_part, offset = match.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    # fromisoformat only takes up to microsecond precision
    if "." in time_part:
        whole, fraction = time_part.split(".", 1)
        time_part = f"{whole}.{fraction[:6].ljust(6, '0')}"
    # Leap seconds count as the last second of the minute
    if time_part[6:8] == "60":
        time_part = f"{time_part[:6]}59{time_part[8:]}"

    try:
        parsed = datetime.fromisoformat(f"{date_part}T{time_part}{offset}")
    except ValueError:
        return None
    return math.floor(parsed.timestamp())


class FilterConfig(BaseModel):
    """Which commits to keep and how many.

    ``since`` and ``until`` are inclusive bounds on the author timestamp. They
    may be given as RFC 3339 strings; a string that does not parse leaves the
    bound unset rather than failing.
    """

    author: Optional[str] = None
    since: Optional[int] = None
    until: Optional[int] = None
    max_count: PositiveInt = DEFAULT_MAX_COUNT
    trim_message: bool = False

    model_config = {"frozen": True}

    @field_validator("since", "until", mode="before")
    @classmethod
    def _parse_bound(cls, value):
        if isinstance(value, str):
            return parse_rfc3339(value)
        return value
