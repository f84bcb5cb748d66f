"""
Pattern tables for segmenting and canonicalizing opening hours text.

Everything here is compiled once at import time and never mutated.
"""

import re
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import CanonicalDay, TokenKind

DAY_WORD = r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday|Weekday|Weekend)"
DAY_ABBR_1 = r"(?:Mon?|Tue?|Wed?|Thu?|Fri?|Sat?|Sun?)[.]?"
DAY_ABBR_2 = r"(?:M|W|F|Tues|Thur)"

HOUR_NUMERIC = r"(?:0?[0-9]|1[0-9]|2[0-4])(?::[0-5][0-9])?\s*(?:[AP]M)?"
HOUR_WORD = r"(?:Midnight|Noon)"

# Alternatives are tried left to right at each scan position, so the
# group order below is the tokenizer's priority order.
TOKEN_PATTERN: re.Pattern = re.compile(
    rf"(?P<day>\b(?:{DAY_WORD}|{DAY_ABBR_1}|{DAY_ABBR_2})\b)"
    rf"|(?P<hour>\b(?:{HOUR_NUMERIC}|{HOUR_WORD})\b)"
    r"|(?P<link>\bto\b|-|&)"
    r"|(?P<separator>[,;])"
    r"|(?P<closed>\bclosed\b)",
    re.IGNORECASE,
)

TOKEN_GROUPS: Mapping[str, TokenKind] = MappingProxyType({
    "day": TokenKind.DAY,
    "hour": TokenKind.HOUR,
    "link": TokenKind.LINK,
    "separator": TokenKind.SEPARATOR,
    "closed": TokenKind.CLOSED,
})

MERIDIEM_PUNCTUATION: re.Pattern = re.compile(r"(?<![A-Z])([AP])\.M\b\.?", re.IGNORECASE)


def _day_rule(alternatives: str) -> re.Pattern:
    return re.compile(rf"^(?:{alternatives})[.]?$", re.IGNORECASE)


DAY_RULES: Tuple[Tuple[re.Pattern, Tuple[CanonicalDay, ...]], ...] = (
    (_day_rule("Monday|Mon?|M"), (CanonicalDay.MONDAY,)),
    (_day_rule("Tuesday|Tue?|Tues"), (CanonicalDay.TUESDAY,)),
    (_day_rule("Wednesday|Wed?|W"), (CanonicalDay.WEDNESDAY,)),
    (_day_rule("Thursday|Thu?|Thur"), (CanonicalDay.THURSDAY,)),
    (_day_rule("Friday|Fri?|F"), (CanonicalDay.FRIDAY,)),
    (_day_rule("Saturday|Sat?"), (CanonicalDay.SATURDAY,)),
    (_day_rule("Sunday|Sun?"), (CanonicalDay.SUNDAY,)),
    (_day_rule("Weekday?"), CanonicalDay.week()[:5]),
    (_day_rule("Weekend?"), CanonicalDay.week()[5:]),
)

BARE_HOUR: re.Pattern = re.compile(r"^(0?[0-9]|1[0-9]|2[0-4])\s*([AP]M)?$", re.IGNORECASE)
NOON: re.Pattern = re.compile(r"^noon$", re.IGNORECASE)
MIDNIGHT: re.Pattern = re.compile(r"^midnight$", re.IGNORECASE)
CLOCK_HOUR: re.Pattern = re.compile(r"^\d{1,2}:\d{2}\s*(?:[AP]M)?$", re.IGNORECASE)
MERIDIEM_SPACING: re.Pattern = re.compile(r"\s*([AP]M)", re.IGNORECASE)
