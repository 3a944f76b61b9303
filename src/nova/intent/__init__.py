"""Local intent routing.

Decides whether an utterance can be answered deterministically
(identity, provenance, date/time) or must go to the remote service.
"""

from .classifier import IntentClassifier, IntentRule
from .datetime_resolver import DateTimeResolver, load_zone
from .models import IntentKind, IntentMatch, TimeProfile, TimeQuery
from .timezone import ZONE_ALIASES, TimezoneResolver

__all__ = [
    "DateTimeResolver",
    "IntentClassifier",
    "IntentKind",
    "IntentMatch",
    "IntentRule",
    "TimeProfile",
    "TimeQuery",
    "TimezoneResolver",
    "ZONE_ALIASES",
    "load_zone",
]
