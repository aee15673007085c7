"""
Generate pipeline: text -> recovery parser -> transformer -> Generation.

Either a complete Generation is produced or an error is returned; a failed
parse never yields a partial graph, so whatever generation the caller holds
stays valid until it is replaced.
"""

from dataclasses import dataclass

from .config import JsonTreeConfig
from .core.graph import Generation
from .core.result import Err, Ok, Result
from .graph.transformer import build_graph
from .parsing.recovery import ParseError, ParseOutcome, parse_with_recovery

SANITIZED_ADVISORY = "Input was auto-sanitized (heuristic)."


@dataclass
class GenerateOutcome:
    generation: Generation
    parse: ParseOutcome

    @property
    def was_sanitized(self) -> bool:
        return self.parse.was_sanitized

    @property
    def sanitized_text(self) -> str | None:
        return self.parse.sanitized_text


def generate(text: str, config: JsonTreeConfig | None = None) -> Result[GenerateOutcome, ParseError]:
    """
    Parse text and build a fresh Generation.

    Returns Ok(GenerateOutcome) or Err(ParseError) with the original
    strict-parse diagnostic.
    """
    result = parse_with_recovery(text)
    if result.is_err():
        return Err(result.unwrap_err())

    outcome = result.unwrap()
    generation = build_graph(outcome.value, config)
    return Ok(GenerateOutcome(generation=generation, parse=outcome))
