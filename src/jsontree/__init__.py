"""
jsontree - JSON text to navigable node/edge graphs.

Pipeline: recovery parser -> value model -> graph transformer -> path search.
"""

from .core.graph import Generation
from .graph.transformer import build_graph
from .parsing.recovery import InvalidJsonError, ParseError, parse, parse_with_recovery
from .parsing.sanitizer import sanitize
from .pipeline import generate
from .search.matcher import normalize, search

__version__ = "0.1.0"

__all__ = [
    "Generation",
    "InvalidJsonError",
    "ParseError",
    "build_graph",
    "generate",
    "normalize",
    "parse",
    "parse_with_recovery",
    "sanitize",
    "search",
]
