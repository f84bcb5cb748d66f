"""
Builders that accumulate the day group and hour range of the current commit.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .canonicalizer import canonicalize_day, canonicalize_hour
from .models import CanonicalDay, HourRange, Token


@dataclass(frozen=True)
class PendingLink:
    """Unresolved connector waiting for the day that closes the span."""
    text: str


class DayRangeBuilder:
    """
    Assembles the group of days the next hour range applies to.

    Elements are canonical days or a trailing PendingLink. A link is
    resolved by the next add_day, which expands the span forward through
    the week.
    """

    def __init__(self):
        self._elements: List[Union[CanonicalDay, PendingLink]] = []

    def add_day(self, token: Union[str, Token]) -> None:
        days = canonicalize_day(token)

        if not self._elements:
            self._elements.extend(days)
            return

        last = self._elements.pop()
        if not isinstance(last, PendingLink):
            self._elements.append(last)
            self._elements.extend(days)
            return

        from_day = self._elements.pop() if self._elements else None
        if not isinstance(from_day, CanonicalDay):
            self._elements.extend(days)
            return

        self._elements.extend(self.expand_span(from_day, days[-1]))

    def add_link(self, token: Union[str, Token]) -> None:
        text = token.text if isinstance(token, Token) else token
        self._elements.append(PendingLink(text))

    @staticmethod
    def expand_span(from_day: CanonicalDay, to_day: CanonicalDay) -> List[CanonicalDay]:
        """
        Expand from_day..to_day inclusive in Monday-first order.

        Spans do not wrap around the end of the week: when from_day comes
        after to_day the span is empty.
        """
        start, stop = from_day.position, to_day.position
        if start > stop:
            return []
        return list(CanonicalDay.week()[start:stop + 1])

    @property
    def has_pending_link(self) -> bool:
        return bool(self._elements) and isinstance(self._elements[-1], PendingLink)

    def days(self) -> Tuple[CanonicalDay, ...]:
        """Resolved days in insertion order, without duplicates."""
        seen: List[CanonicalDay] = []
        for element in self._elements:
            if isinstance(element, CanonicalDay) and element not in seen:
                seen.append(element)
        return tuple(seen)

    def __len__(self) -> int:
        return len(self.days())


class HourRangeBuilder:
    """Collects the from/to pair of the current hour range."""

    def __init__(self):
        self.start: Optional[str] = None
        self.end: Optional[str] = None

    def set_from(self, token: Union[str, Token]) -> None:
        self.start = canonicalize_hour(token)

    def add_link(self, token: Union[str, Token]) -> None:
        # The connector carries no data.
        pass

    def set_to(self, token: Union[str, Token]) -> None:
        self.end = canonicalize_hour(token)

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def build(self) -> HourRange:
        return HourRange(start=self.start, end=self.end)

    def __str__(self) -> str:
        return str(self.build())
