"""
Timezone lookup for providers.

Dates are only anchored to midnight in the provider's zone; no conversion
arithmetic happens here.
"""
from __future__ import annotations

from datetime import date, datetime, time
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..exceptions import UnknownTimezoneError


@lru_cache(maxsize=256)
def resolve_timezone(name: str) -> ZoneInfo:
    """
    Resolve an IANA timezone name.

    Raises:
        UnknownTimezoneError: If the zone is not in the timezone database
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimezoneError(
            message=f"Unknown timezone '{name}'",
            details={"timezone": name, "error": str(e)},
        )


def local_midnight(d: date, timezone: str) -> datetime:
    """Midnight at the start of `d` in the given zone."""
    return datetime.combine(d, time.min, tzinfo=resolve_timezone(timezone))
