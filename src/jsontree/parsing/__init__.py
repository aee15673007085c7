"""
Parsing for jsontree: strict JSON with one heuristic repair.
"""

from .recovery import (
    InvalidJsonError, ParseError, ParseOutcome,
    parse, parse_with_recovery, strict_loads,
)
from .sanitizer import SpanRepair, repair_span, sanitize, sanitize_with_report

__all__ = [
    "InvalidJsonError", "ParseError", "ParseOutcome",
    "parse", "parse_with_recovery", "strict_loads",
    "SpanRepair", "repair_span", "sanitize", "sanitize_with_report",
]
