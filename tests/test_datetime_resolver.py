"""Unit tests for date/time answer formatting."""
import re
import string
from datetime import datetime, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nova.errors import TimezoneResolutionFailure
from nova.intent import DateTimeResolver, TimeQuery, load_zone
from nova.intent.datetime_resolver import format_clock, format_long_date

TIME_ONLY = TimeQuery(wants_time=True)
DATE_ONLY = TimeQuery(wants_date=True)
BOTH = TimeQuery(wants_time=True, wants_date=True)
DAY_NAME = TimeQuery(wants_day_name=True, wants_time=True)

WEEKDAY_SENTENCE = re.compile(r"^Today is (Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)\.$")


class TestProfiles:
    """Tests for each formatting profile."""

    def test_time_only_with_zone_has_suffix(self, fixed_now):
        result = DateTimeResolver().resolve(TIME_ONLY, "Asia/Tokyo", fixed_now)
        assert result == "Current time: 12:07 AM JST"

    def test_time_only_without_zone_has_no_suffix(self, fixed_now):
        result = DateTimeResolver().resolve(TIME_ONLY, None, fixed_now)
        assert re.fullmatch(r"Current time: \d{1,2}:\d{2} (AM|PM)", result)

    def test_date_only(self, fixed_now):
        result = DateTimeResolver().resolve(DATE_ONLY, "UTC", fixed_now)
        assert result == "Current date: October 19, 2026"

    def test_both(self, fixed_now):
        result = DateTimeResolver().resolve(BOTH, "America/New_York", fixed_now)
        assert result == "Current date and time: October 19, 2026 at 11:07 AM EDT"

    def test_neither_flag_defaults_to_both(self, fixed_now):
        result = DateTimeResolver().resolve(TimeQuery(), "UTC", fixed_now)
        assert result == "Current date and time: October 19, 2026 at 3:07 PM UTC"

    def test_day_name_takes_precedence(self, fixed_now):
        assert DateTimeResolver().resolve(DAY_NAME, "UTC", fixed_now) == "Today is Monday."

    def test_day_name_uses_resolved_zone(self, fixed_now):
        # 15:07 UTC Monday is already Tuesday in Tokyo
        assert DateTimeResolver().resolve(DAY_NAME, "Asia/Tokyo", fixed_now) == "Today is Tuesday."

    @given(st.datetimes(
        min_value=datetime(1970, 1, 2),
        max_value=datetime(2200, 1, 1),
        timezones=st.just(timezone.utc),
    ))
    def test_day_name_sentence_shape(self, now: datetime):
        """Property test: day-name answers are always 'Today is <Weekday>.'"""
        assert WEEKDAY_SENTENCE.match(DateTimeResolver().resolve(DAY_NAME, "Asia/Kolkata", now))


class TestFallback:
    """Tests for unknown zone identifiers."""

    def test_invalid_zone_never_raises(self, fixed_now):
        resolver = DateTimeResolver()
        result = resolver.resolve(TIME_ONLY, "tokyo right now", fixed_now)
        assert result == resolver.resolve(TIME_ONLY, None, fixed_now)

    def test_invalid_zone_date_and_time_uses_system_zone(self, fixed_now):
        resolver = DateTimeResolver()
        assert resolver.resolve(BOTH, "Mars/Olympus_Mons", fixed_now) == resolver.resolve(BOTH, None, fixed_now)

    def test_path_like_zone_is_tolerated(self, fixed_now):
        resolver = DateTimeResolver()
        assert resolver.resolve(DATE_ONLY, "../../etc/passwd", fixed_now).startswith("Current date: ")

    def test_fallback_is_reported_at_debug_level(self, fixed_now, debug_log):
        resolver = DateTimeResolver()
        resolver.set_debug_callback(debug_log)
        resolver.resolve(TIME_ONLY, "atlantis", fixed_now)
        assert [entry[0] for entry in debug_log.entries] == ["debug"]

    def test_lowercase_identifier_is_canonicalised(self, fixed_now):
        result = DateTimeResolver().resolve(TIME_ONLY, "asia/tokyo", fixed_now)
        assert result == "Current time: 12:07 AM JST"

    @given(st.text(alphabet=string.ascii_letters + "/_- "))
    def test_arbitrary_zone_strings_never_raise(self, zone: str):
        """Property test: any zone string produces an answer."""
        result = DateTimeResolver().resolve(DATE_ONLY, zone, datetime(2026, 10, 19, tzinfo=timezone.utc))
        assert result.startswith("Current date: ")


class TestHelpers:
    """Tests for formatting helpers and zone loading."""

    @pytest.mark.parametrize(
        "hour,minute,expected",
        [(0, 0, "12:00 AM"), (9, 5, "9:05 AM"), (12, 0, "12:00 PM"), (23, 59, "11:59 PM")],
    )
    def test_format_clock(self, hour: int, minute: int, expected: str):
        assert format_clock(datetime(2026, 1, 1, hour, minute)) == expected

    def test_format_long_date(self):
        assert format_long_date(datetime(2026, 3, 7)) == "March 7, 2026"

    def test_naive_now_is_treated_as_utc(self):
        result = DateTimeResolver().resolve(TIME_ONLY, "UTC", datetime(2026, 10, 19, 15, 7))
        assert result == "Current time: 3:07 PM UTC"

    def test_load_zone_unknown_raises(self):
        with pytest.raises(TimezoneResolutionFailure) as exc_info:
            load_zone("Not/A_Zone")
        assert exc_info.value.zone == "Not/A_Zone"

    def test_load_zone_case_insensitive(self):
        assert load_zone("europe/london").key == "Europe/London"


class TestTimeQuery:
    """Tests for profile selection."""

    @pytest.mark.parametrize(
        "query,profile",
        [
            (TimeQuery(wants_time=True), "time"),
            (TimeQuery(wants_date=True), "date"),
            (TimeQuery(wants_time=True, wants_date=True), "date_time"),
            (TimeQuery(), "date_time"),
            (TimeQuery(wants_day_name=True, wants_date=True), "day_name"),
        ],
    )
    def test_profile(self, query: TimeQuery, profile: str):
        assert query.profile.value == profile
