"""Data structures produced by intent classification.

These models are transient: an IntentMatch or TimeQuery is built for one
utterance and discarded once the turn has been serviced.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IntentKind(str, Enum):
    """Kinds of intent the local rules can recognise."""

    IDENTITY = "identity"        # "what is your name"
    PROVENANCE = "provenance"    # "who made you"
    DATE_TIME = "date_time"      # "what time is it in Tokyo"
    NO_MATCH = "no_match"        # Forward to the remote generation service


class IntentMatch(BaseModel):
    """Result of classifying a single utterance.

    Only DATE_TIME matches carry text; the other kinds are answered from
    canned responses by the session.
    """

    model_config = ConfigDict(frozen=True)

    kind: IntentKind = Field(description="Which rule matched")
    rule: str | None = Field(default=None, description="Name of the rule that matched")
    text: str | None = Field(default=None, description="Resolved response text (DATE_TIME only)")

    @property
    def matched(self) -> bool:
        """True when a local rule handled the utterance."""
        return self.kind != IntentKind.NO_MATCH

    @classmethod
    def identity(cls) -> "IntentMatch":
        return cls(kind=IntentKind.IDENTITY, rule="identity")

    @classmethod
    def provenance(cls) -> "IntentMatch":
        return cls(kind=IntentKind.PROVENANCE, rule="provenance")

    @classmethod
    def date_time(cls, text: str) -> "IntentMatch":
        return cls(kind=IntentKind.DATE_TIME, rule="date_time", text=text)

    @classmethod
    def no_match(cls) -> "IntentMatch":
        return cls(kind=IntentKind.NO_MATCH)


class TimeProfile(str, Enum):
    """Which parts of the current instant a date/time answer shows."""

    DAY_NAME = "day_name"
    TIME = "time"
    DATE = "date"
    DATE_TIME = "date_time"


class TimeQuery(BaseModel):
    """What a date/time utterance is asking for."""

    model_config = ConfigDict(frozen=True)

    wants_time: bool = False
    wants_date: bool = False
    wants_day_name: bool = False
    raw_zone_phrase: str | None = Field(
        default=None,
        description="Location or zone phrase following 'in', 'for' or 'at'"
    )

    @property
    def profile(self) -> TimeProfile:
        """Formatting profile; the day-name check takes precedence."""
        if self.wants_day_name:
            return TimeProfile.DAY_NAME
        if self.wants_time and not self.wants_date:
            return TimeProfile.TIME
        if self.wants_date and not self.wants_time:
            return TimeProfile.DATE
        return TimeProfile.DATE_TIME
