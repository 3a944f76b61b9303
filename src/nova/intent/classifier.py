"""Deterministic intent classification.

Rules live in a declarative table (name, priority, matcher, builder) and
are evaluated in ascending priority order. The first rule whose matcher
accepts the utterance wins; there is no scoring and no backtracking.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .datetime_resolver import DateTimeResolver
from .models import IntentMatch, TimeQuery
from .timezone import TimezoneResolver

IDENTITY_PHRASES = (
    "what is your name",
    "who are you",
    "what's your name",
    "whats your name",
)

PROVENANCE_PHRASES = (
    "who developed you",
    "who made you",
    "who built you",
    "who created you",
)

DATE_TIME_PATTERN = re.compile(
    r"\b(current time|what time|what's the time|what is the time|current date"
    r"|what date|what's the date|what is the date|what day is it|date and time"
    r"|time now)\b"
)

DAY_NAME_PHRASE = "what day is it"


@dataclass(frozen=True)
class IntentRule:
    """One entry of the rule table."""

    name: str
    priority: int
    matches: Callable[[str], bool]
    build: Callable[[str], IntentMatch]


def contains_any(phrases: tuple[str, ...]) -> Callable[[str], bool]:
    """Matcher accepting utterances that contain any phrase as a substring."""
    def _matches(utterance: str) -> bool:
        return any(phrase in utterance for phrase in phrases)
    return _matches


class IntentClassifier:
    """Classifies utterances against the local rule table.

    Classification is a pure function of the lowercased utterance and the
    clock passed in, so classifying the same text twice yields the same
    match.

    Example:
        classifier = IntentClassifier()
        classifier.classify("Who made you?").kind  # IntentKind.PROVENANCE
    """

    def __init__(
        self,
        timezone_resolver: TimezoneResolver | None = None,
        datetime_resolver: DateTimeResolver | None = None,
        clock: Callable[[], datetime] | None = None
    ):
        """Initialize the classifier.

        Args:
            timezone_resolver: Resolver for zone phrases (default table if None)
            datetime_resolver: Formatter for date/time answers
            clock: Callable returning the current instant (None uses the
                   resolver's default of "now")
        """
        self._zones = timezone_resolver or TimezoneResolver()
        self._datetime = datetime_resolver or DateTimeResolver()
        self._clock = clock
        self._rules: list[IntentRule] = sorted(
            [
                IntentRule("identity", 10, contains_any(IDENTITY_PHRASES),
                           lambda _: IntentMatch.identity()),
                IntentRule("provenance", 20, contains_any(PROVENANCE_PHRASES),
                           lambda _: IntentMatch.provenance()),
                IntentRule("date_time", 30, self._is_date_time_query,
                           self._answer_date_time),
            ],
            key=lambda rule: rule.priority,
        )

    @property
    def rules(self) -> list[IntentRule]:
        """Get the rule table in evaluation order."""
        return list(self._rules)

    def set_debug_callback(self, callback: Any) -> None:
        """Propagate a debug callback to the date/time resolver."""
        self._datetime.set_debug_callback(callback)

    def classify(self, utterance: str) -> IntentMatch:
        """Classify an utterance.

        Args:
            utterance: Raw user text (lowercased here)

        Returns:
            The first matching rule's IntentMatch, or a NO_MATCH result
        """
        lowered = utterance.lower()
        for rule in self._rules:
            if rule.matches(lowered):
                return rule.build(lowered)
        return IntentMatch.no_match()

    def parse_time_query(self, utterance: str) -> TimeQuery:
        """Derive which date/time fields an utterance is asking for."""
        lowered = utterance.lower()
        return TimeQuery(
            wants_time="time" in lowered or "now" in lowered,
            wants_date="date" in lowered,
            wants_day_name=DAY_NAME_PHRASE in lowered,
            raw_zone_phrase=self._zones.extract_phrase(lowered),
        )

    def _is_date_time_query(self, utterance: str) -> bool:
        return DATE_TIME_PATTERN.search(utterance) is not None

    def _answer_date_time(self, utterance: str) -> IntentMatch:
        query = self.parse_time_query(utterance)
        zone = self._zones.lookup(query.raw_zone_phrase) if query.raw_zone_phrase else None
        now = self._clock() if self._clock else None
        return IntentMatch.date_time(self._datetime.resolve(query, zone, now))
