"""
Tests for day and hour canonicalization.
"""

import pytest

from hoursparser.domain.canonicalizer import canonicalize_day, canonicalize_hour
from hoursparser.domain.exceptions import CanonicalizationError
from hoursparser.domain.models import CanonicalDay, Token, TokenKind
from hoursparser.domain.tokenizer import tokenize


class TestCanonicalizeDay:
    """Tests for canonicalize_day."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Monday", CanonicalDay.MONDAY),
            ("Mon", CanonicalDay.MONDAY),
            ("Mo", CanonicalDay.MONDAY),
            ("M", CanonicalDay.MONDAY),
            ("Mon.", CanonicalDay.MONDAY),
            ("Tues", CanonicalDay.TUESDAY),
            ("tu", CanonicalDay.TUESDAY),
            ("W", CanonicalDay.WEDNESDAY),
            ("thur", CanonicalDay.THURSDAY),
            ("F", CanonicalDay.FRIDAY),
            ("Sa", CanonicalDay.SATURDAY),
            ("SUN", CanonicalDay.SUNDAY),
        ],
    )
    def test_single_days(self, text, expected):
        """Test full names and abbreviations."""
        assert canonicalize_day(text) == (expected,)

    def test_weekday_and_weekend(self):
        """Test that Weekday and Weekend expand to ordered day lists."""
        assert canonicalize_day("Weekday") == (
            CanonicalDay.MONDAY,
            CanonicalDay.TUESDAY,
            CanonicalDay.WEDNESDAY,
            CanonicalDay.THURSDAY,
            CanonicalDay.FRIDAY,
        )
        assert canonicalize_day("weekend") == (CanonicalDay.SATURDAY, CanonicalDay.SUNDAY)

    def test_canonical_identifiers_are_idempotent(self):
        """Test that canonical identifiers map to themselves."""
        for day in CanonicalDay.week():
            assert canonicalize_day(day.value) == (day,)
            assert canonicalize_day(day) == (day,)

    def test_every_tokenized_day_canonicalizes(self):
        """Test that day tokens from the tokenizer always canonicalize."""
        line = "Monday Mon Mo M Mon. Tue Tu Tues W We Wed Thu Th Thur F Fr Fri Sa Sat Su Sun Weekday Weekend"
        day_tokens = [t for t in tokenize(line) if t.kind == TokenKind.DAY]

        assert len(day_tokens) == 23
        for token in day_tokens:
            days = canonicalize_day(token)
            assert days
            assert all(day in CanonicalDay.week() for day in days)

    def test_unknown_day_raises(self):
        """Test that unknown spellings raise CanonicalizationError."""
        with pytest.raises(CanonicalizationError, match="day canonicalization failed") as exc_info:
            canonicalize_day("Funday")

        assert exc_info.value.kind == "day"
        assert exc_info.value.text == "Funday"


class TestCanonicalizeHour:
    """Tests for canonicalize_hour."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("9", "9:00"),
            ("09", "09:00"),
            ("9 AM", "9:00 AM"),
            ("9am", "9:00 AM"),
            ("5PM", "5:00 PM"),
            ("Noon", "12:00"),
            ("MIDNIGHT", "24:00"),
            ("9:30 PM", "9:30 PM"),
            ("9:30pm", "9:30 PM"),
            ("9:30   pm", "9:30 PM"),
            ("17:00", "17:00"),
            ("13 PM", "13:00 PM"),
        ],
    )
    def test_hour_forms(self, text, expected):
        """Test bare hours, clock times, and named hours."""
        assert canonicalize_hour(text) == expected

    def test_accepts_tokens(self):
        """Test that Token objects are canonicalized by their text."""
        assert canonicalize_hour(Token(TokenKind.HOUR, "10")) == "10:00"

    def test_unknown_hour_raises(self):
        """Test that unknown spellings raise CanonicalizationError."""
        with pytest.raises(CanonicalizationError) as exc_info:
            canonicalize_hour("late")

        assert exc_info.value.kind == "hour"
