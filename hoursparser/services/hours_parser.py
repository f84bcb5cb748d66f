"""
Application service for parsing opening hours lines.

The service normalizes raw text, hands it to a tokenizer, and delegates
interpretation to the domain-level ``Interpreter``. Keeping these steps
behind one object lets the CLI stay thin and lets tests plug in a stub
tokenizer via a simple protocol.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Protocol

from ..domain.interpreter import Interpreter, State
from ..domain.models import Schedule, Token
from ..domain.patterns import MERIDIEM_PUNCTUATION
from ..domain.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class TokenizerProtocol(Protocol):
    """Protocol describing the tokenizer behaviour needed by the service."""

    def tokenize(self, line: str) -> List[Token]:
        """Return the tokens of a normalized line."""


@dataclass
class ParseResult:
    """Everything produced while parsing a single input line."""
    line: str
    normalized: str
    tokens: List[Token]
    schedule: Schedule
    ignored: List[Token] = field(default_factory=list)


def _rewrite_meridiem(match: re.Match) -> str:
    return f"{match.group(1).upper()}M"


class HoursParserService:
    """
    Orchestrates normalization, tokenizing and interpretation of a line.
    """

    def __init__(
        self,
        tokenizer: Optional[TokenizerProtocol] = None,
        interpreter: Optional[Interpreter] = None,
        normalize_meridiem: bool = True,
    ) -> None:
        self._tokenizer = tokenizer or Tokenizer()
        self._interpreter = interpreter or Interpreter()
        self._normalize_meridiem = normalize_meridiem

    def normalize(self, line: str) -> str:
        """
        Strip the line and rewrite "A.M."/"P.M." spellings to "AM"/"PM".
        """
        normalized = line.strip()
        if self._normalize_meridiem:
            normalized = MERIDIEM_PUNCTUATION.sub(_rewrite_meridiem, normalized)
        return normalized

    def tokenize(self, line: str) -> List[Token]:
        """Normalize and tokenize a line."""
        return self._tokenizer.tokenize(self.normalize(line))

    def parse(self, line: str) -> ParseResult:
        """
        Parse one line into a Schedule.

        Tokens the interpreter could not use in their state are collected
        on the result rather than raised.

        Raises:
            CanonicalizationError: If a token cannot be canonicalized
        """
        normalized = self.normalize(line)
        tokens = self._tokenizer.tokenize(normalized)

        ignored: List[Token] = []
        previous_hook = self._interpreter.on_ignored

        def collect(state: State, token: Token) -> None:
            ignored.append(token)
            if previous_hook is not None:
                previous_hook(state, token)

        self._interpreter.on_ignored = collect
        try:
            schedule = self._interpreter.run(tokens)
        finally:
            self._interpreter.on_ignored = previous_hook

        logger.debug("Parsed %r with %d ignored token(s)", normalized, len(ignored))

        return ParseResult(
            line=line,
            normalized=normalized,
            tokens=tokens,
            schedule=schedule,
            ignored=ignored,
        )

    def parse_lines(self, lines: Iterable[str]) -> Iterator[ParseResult]:
        """Parse every non-blank line, in order."""
        for line in lines:
            if not line.strip():
                continue
            yield self.parse(line)
