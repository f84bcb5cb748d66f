"""
Service layer helpers that orchestrate normalization, tokenizing and interpretation.
"""

from .hours_parser import HoursParserService, ParseResult

__all__ = ["HoursParserService", "ParseResult"]
