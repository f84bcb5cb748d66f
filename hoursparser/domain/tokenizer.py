"""
Segmentation of a normalized opening hours line into typed tokens.
"""

import logging
from typing import Iterator, List

from .models import Token
from .patterns import TOKEN_GROUPS, TOKEN_PATTERN

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    Scans a line left to right for non-overlapping pattern matches.

    At each position the first alternative in priority order wins:
    day names, day abbreviations, numeric hours, Midnight/Noon, "to",
    the link and separator characters, then "closed". Text matching none
    of them is skipped.
    """

    def iter_tokens(self, line: str) -> Iterator[Token]:
        for match in TOKEN_PATTERN.finditer(line):
            yield Token(kind=TOKEN_GROUPS[match.lastgroup], text=match.group())

    def tokenize(self, line: str) -> List[Token]:
        """
        Segment a line into tokens.

        Args:
            line: Input text with meridiem punctuation already normalized

        Returns:
            Tokens in the order they appear in the line
        """
        tokens = list(self.iter_tokens(line))
        logger.debug("Segmented %r into %s", line, [token.text for token in tokens])
        return tokens


def tokenize(line: str) -> List[Token]:
    """Tokenize a line with a default Tokenizer."""
    return Tokenizer().tokenize(line)
