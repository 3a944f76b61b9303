"""Formatting of date/time answers.

Hides how instants are rendered for each query profile and how unknown
zone identifiers degrade to the host's default zone.
"""

from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from ..errors import TimezoneResolutionFailure
from .models import TimeProfile, TimeQuery

_PREFIXES = {
    TimeProfile.TIME: "Current time",
    TimeProfile.DATE: "Current date",
    TimeProfile.DATE_TIME: "Current date and time",
}


@lru_cache(maxsize=1)
def _zone_index() -> dict[str, str]:
    """Lowercased IANA key -> canonical key, for case-insensitive lookups."""
    return {key.lower(): key for key in available_timezones()}


def load_zone(zone: str) -> ZoneInfo:
    """Load a zone by identifier, tolerating case differences.

    Args:
        zone: IANA zone identifier such as "Asia/Tokyo" or "asia/tokyo"

    Returns:
        The loaded ZoneInfo

    Raises:
        TimezoneResolutionFailure: If no installed zone matches
    """
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        pass

    canonical = _zone_index().get(zone.strip().lower())
    if canonical is None:
        raise TimezoneResolutionFailure(zone)
    try:
        return ZoneInfo(canonical)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneResolutionFailure(zone) from e


def format_clock(moment: datetime) -> str:
    """12-hour clock with minutes, e.g. '3:07 PM'."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_long_date(moment: datetime) -> str:
    """Long month name, day and year, e.g. 'October 19, 2026'."""
    return f"{moment.strftime('%B')} {moment.day}, {moment.year}"


class DateTimeResolver:
    """Builds the response sentence for a date/time query.

    Hidden design decisions:
    - Which fields each profile shows
    - When a zone abbreviation is appended
    - Fallback to the system default zone on bad identifiers
    """

    def __init__(self) -> None:
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "DateTimeResolver", message)

    def resolve(
        self,
        query: TimeQuery,
        zone: str | None = None,
        now: datetime | None = None
    ) -> str:
        """Format the current instant for a query.

        Args:
            query: What the user asked for
            zone: Zone identifier, or None for the system default
            now: Instant to format (defaults to the current time; naive
                 values are treated as UTC)

        Returns:
            Response sentence, e.g. "Current time: 3:07 PM JST"
        """
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        explicit_zone: tzinfo | None = None
        if zone:
            try:
                explicit_zone = load_zone(zone)
            except TimezoneResolutionFailure as e:
                self._debug("debug", f"{e}; using system default zone")

        # astimezone() with no argument converts to the host's local zone
        moment = now.astimezone(explicit_zone) if explicit_zone else now.astimezone()
        profile = query.profile

        if profile == TimeProfile.DAY_NAME:
            return f"Today is {moment.strftime('%A')}."

        if profile == TimeProfile.TIME:
            formatted = format_clock(moment)
            if explicit_zone is not None:
                formatted = f"{formatted} {moment.tzname()}"
        elif profile == TimeProfile.DATE:
            formatted = format_long_date(moment)
        else:
            formatted = f"{format_long_date(moment)} at {format_clock(moment)} {moment.tzname()}"

        return f"{_PREFIXES[profile]}: {formatted}"
