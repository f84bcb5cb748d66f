"""
Canonicalization of raw day and hour tokens.
"""

from typing import Tuple, Union

from .exceptions import CanonicalizationError
from .models import CanonicalDay, Token
from .patterns import BARE_HOUR, CLOCK_HOUR, DAY_RULES, MERIDIEM_SPACING, MIDNIGHT, NOON


def _raw_text(value: Union[str, Token]) -> str:
    return value.text if isinstance(value, Token) else str(value)


def canonicalize_day(value: Union[str, Token, CanonicalDay]) -> Tuple[CanonicalDay, ...]:
    """
    Map a raw day spelling to one or more canonical days.

    Single days map to a one-element tuple; "Weekday" and "Weekend" map to
    the ordered days they cover. Canonical identifiers map to themselves.

    Raises:
        CanonicalizationError: If no rule matches
    """
    if isinstance(value, CanonicalDay):
        return (value,)

    text = _raw_text(value).strip()
    for pattern, days in DAY_RULES:
        if pattern.match(text):
            return days

    raise CanonicalizationError("day", text)


def canonicalize_hour(value: Union[str, Token]) -> str:
    """
    Map a raw hour spelling to a canonical time string.

    Examples: "9" -> "9:00", "9am" -> "9:00 AM", "Noon" -> "12:00",
    "Midnight" -> "24:00", "9:30pm" -> "9:30 PM". Hours are not range
    checked, so "13 PM" becomes "13:00 PM".

    Raises:
        CanonicalizationError: If no rule matches
    """
    text = _raw_text(value).strip()

    bare = BARE_HOUR.match(text)
    if bare:
        hour, meridiem = bare.groups()
        return f"{hour}:00 {meridiem or ''}".strip().upper()

    if NOON.match(text):
        return "12:00"

    if MIDNIGHT.match(text):
        return "24:00"

    if CLOCK_HOUR.match(text):
        return MERIDIEM_SPACING.sub(r" \1", text.upper())

    raise CanonicalizationError("hour", text)
