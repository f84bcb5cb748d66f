"""
Domain models for tokens, hour ranges and the weekly schedule.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pendulum import Date


class CanonicalDay(str, Enum):
    """
    The seven canonical day identifiers.

    Declaration order is the fixed week order (Monday first, Sunday last)
    used for range expansion.
    """
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def week(cls) -> Tuple["CanonicalDay", ...]:
        """Return all days in Monday-first order."""
        return tuple(cls)

    @property
    def position(self) -> int:
        """Position in the week, 0=Monday, 6=Sunday."""
        return CanonicalDay.week().index(self)

    def __str__(self) -> str:
        return self.value


class TokenKind(str, Enum):
    """Lexical categories produced by the tokenizer."""
    DAY = "day"
    HOUR = "hour"
    LINK = "link"
    SEPARATOR = "separator"
    CLOSED = "closed"


@dataclass(frozen=True)
class Token:
    """A typed lexical unit and its raw text."""
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class HourRange:
    """
    An immutable opening interval in canonical time strings.

    Either side may be None while the range is still being assembled;
    it renders as an empty string in that case.
    """
    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def __str__(self) -> str:
        return f"{self.start or ''} - {self.end or ''}"


@dataclass
class Schedule:
    """
    Weekly opening hours, one ordered list of ranges per canonical day.

    All seven days are present from construction. Entries are only ever
    appended during a parse run.
    """
    days: Dict[CanonicalDay, List[HourRange]] = field(
        default_factory=lambda: {day: [] for day in CanonicalDay.week()}
    )

    def append(self, day: CanonicalDay, hour_range: HourRange) -> None:
        """Append a range to a day's entry."""
        self.days[day].append(hour_range)

    def ranges_for(self, day: CanonicalDay) -> List[HourRange]:
        return list(self.days[day])

    def ranges_on(self, date: Date) -> List[HourRange]:
        """
        Get the ranges for the weekday of a specific calendar date.

        Args:
            date: pendulum Date or DateTime

        Returns:
            The ranges committed for that weekday (possibly empty)
        """
        day = CanonicalDay.week()[int(date.day_of_week)]
        return self.ranges_for(day)

    def open_days(self) -> List[CanonicalDay]:
        """Days with at least one committed range, in week order."""
        return [day for day in CanonicalDay.week() if self.days[day]]

    def to_dict(self) -> Dict[str, List[str]]:
        """Render as {day name: ["FROM - TO", ...]} in Monday-first order."""
        return {
            day.value: [str(hour_range) for hour_range in self.days[day]]
            for day in CanonicalDay.week()
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
