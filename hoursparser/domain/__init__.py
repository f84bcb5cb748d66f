"""
Domain layer - Pure parsing logic without external I/O.
"""

from .canonicalizer import canonicalize_day, canonicalize_hour
from .exceptions import CanonicalizationError, HoursParserError
from .interpreter import Interpreter, State, interpret, transition
from .models import CanonicalDay, HourRange, Schedule, Token, TokenKind
from .ranges import DayRangeBuilder, HourRangeBuilder
from .tokenizer import Tokenizer, tokenize

__all__ = [
    "CanonicalDay",
    "CanonicalizationError",
    "DayRangeBuilder",
    "HourRange",
    "HourRangeBuilder",
    "HoursParserError",
    "Interpreter",
    "Schedule",
    "State",
    "Token",
    "TokenKind",
    "Tokenizer",
    "canonicalize_day",
    "canonicalize_hour",
    "interpret",
    "tokenize",
    "transition",
]
