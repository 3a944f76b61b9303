"""Timezone inference from free-text utterances.

Hides the lexical table of city names and abbreviations. Anything not in
the table is handed on unchanged so that a caller who typed a real IANA
identifier still gets it; the date/time resolver copes with bad ones.
"""

import re

# Best-effort mapping; abbreviations like "ist" or "cst" are ambiguous.
ZONE_ALIASES: dict[str, str] = {
    "new york": "America/New_York",
    "nyc": "America/New_York",
    "los angeles": "America/Los_Angeles",
    "la": "America/Los_Angeles",
    "san francisco": "America/Los_Angeles",
    "london": "Europe/London",
    "tokyo": "Asia/Tokyo",
    "paris": "Europe/Paris",
    "sydney": "Australia/Sydney",
    "delhi": "Asia/Kolkata",
    "india": "Asia/Kolkata",
    "utc": "UTC",
    "gmt": "UTC",
    "pst": "America/Los_Angeles",
    "est": "America/New_York",
    "cet": "Europe/Paris",
    "ist": "Asia/Kolkata",
}

_ZONE_PHRASE_PATTERN = re.compile(
    r"(?:\bin\b|\bfor\b|\bat\b)\s+([a-z0-9_\-/\s]+)",
    re.IGNORECASE,
)


class TimezoneResolver:
    """Maps a location/zone phrase to a canonical zone identifier.

    Example:
        resolver = TimezoneResolver()
        resolver.resolve_zone("what time is it in tokyo")  # "Asia/Tokyo"
        resolver.resolve_zone("what time is it")            # None
    """

    def __init__(self, aliases: dict[str, str] | None = None):
        table = ZONE_ALIASES if aliases is None else aliases
        self._aliases = {key.lower(): value for key, value in table.items()}

    def extract_phrase(self, utterance: str) -> str | None:
        """Return the lowercased, trimmed span after 'in'/'for'/'at', if any."""
        match = _ZONE_PHRASE_PATTERN.search(utterance)
        if not match:
            return None
        phrase = match.group(1).strip().lower()
        return phrase or None

    def lookup(self, phrase: str) -> str:
        """Map a phrase through the alias table, passing unknown phrases through."""
        key = phrase.strip().lower()
        return self._aliases.get(key, key)

    def resolve_zone(self, utterance: str) -> str | None:
        """Resolve the zone an utterance refers to.

        Args:
            utterance: The user's utterance (any case)

        Returns:
            A zone identifier, the raw phrase when it is not in the table,
            or None meaning "use the system default zone"
        """
        phrase = self.extract_phrase(utterance)
        if phrase is None:
            return None
        return self.lookup(phrase)

    def known_zones(self) -> dict[str, str]:
        """Get a copy of the alias table."""
        return dict(self._aliases)
