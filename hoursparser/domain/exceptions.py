"""
Domain-specific exception hierarchy for the hours parser.
"""


class HoursParserError(Exception):
    """Base class for all application-level errors."""


class CanonicalizationError(HoursParserError):
    """
    Raised when a day or hour token matches no canonicalization rule.

    The tokenizer only emits text that already matched a day or hour
    pattern, so this signals a mismatch between the two pattern tables
    and aborts the current parse run.
    """

    def __init__(self, kind: str, text: str):
        self.kind = kind
        self.text = text
        super().__init__(f"{kind} canonicalization failed for [{text}]")
