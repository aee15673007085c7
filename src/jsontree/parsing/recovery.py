"""
Recovery Parser.

Strict JSON first; on failure, one attempt at the bare-pair array repair
from the sanitizer. The repair is advisory: if the rewritten text still does
not parse, the caller sees the ORIGINAL strict-parse error, never the error
from the repaired text.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..core.result import Err, Ok, Result
from ..core.values import JsonValue, from_python
from .sanitizer import SpanRepair, sanitize_with_report

logger = logging.getLogger(__name__)


@dataclass
class ParseError:
    """Structured diagnostic from the strict parser."""
    message: str
    line: int | None = None
    column: int | None = None
    position: int | None = None
    cause: Exception | None = None

    @classmethod
    def from_exception(cls, exc: Exception) -> "ParseError":
        if isinstance(exc, json.JSONDecodeError):
            return cls(
                message=str(exc),
                line=exc.lineno,
                column=exc.colno,
                position=exc.pos,
                cause=exc,
            )
        return cls(message=str(exc), cause=exc)

    def __str__(self) -> str:
        return self.message


class InvalidJsonError(ValueError):
    """Raised by parse() when neither the strict nor the repaired text parses."""

    def __init__(self, error: ParseError):
        super().__init__(error.message)
        self.error = error


@dataclass
class ParseOutcome:
    """
    Successful parse.

    When was_sanitized is True, sanitized_text holds the rewritten input the
    value was parsed from, and repairs lists what changed.
    """
    value: JsonValue
    was_sanitized: bool = False
    sanitized_text: Optional[str] = None
    repairs: List[SpanRepair] = field(default_factory=list)

    @property
    def is_lossy(self) -> bool:
        return any(repair.is_lossy for repair in self.repairs)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def strict_loads(text: str) -> JsonValue:
    """
    Parse text as strict JSON into the value model.

    NaN/Infinity are rejected, as are numbers too large for a float (1e400).
    Duplicate keys keep their first position and take the last value.
    """
    return from_python(json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float))


def parse_with_recovery(text: str) -> Result[ParseOutcome, ParseError]:
    """
    Parse text, falling back to the bare-pair array repair.

    Returns Ok(ParseOutcome) or Err(ParseError) carrying the strict error
    from the original text.
    """
    try:
        return Ok(ParseOutcome(value=strict_loads(text)))
    except (ValueError, RecursionError) as e:
        original = ParseError.from_exception(e)

    logger.debug(f"Strict parse failed: {original.message}")

    candidate, repairs = sanitize_with_report(text)
    if candidate == text:
        logger.debug("No repairable span found")
        return Err(original)

    try:
        value = strict_loads(candidate)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Repaired text still invalid ({e}); reporting original error")
        return Err(original)

    logger.info(f"Input was auto-sanitized ({len(repairs)} span(s) rewritten)")
    return Ok(ParseOutcome(
        value=value,
        was_sanitized=True,
        sanitized_text=candidate,
        repairs=repairs,
    ))


def parse(text: str) -> ParseOutcome:
    """
    Parse text with recovery.

    Raises:
        InvalidJsonError: if both the strict and the repaired attempt fail.
    """
    result = parse_with_recovery(text)
    if result.is_err():
        raise InvalidJsonError(result.unwrap_err())
    return result.unwrap()
