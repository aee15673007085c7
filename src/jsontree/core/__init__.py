"""
Core modules for jsontree.

This package contains the fundamental building blocks:
- values: The JSON value model (object / array / primitive)
- types: Graph nodes, edges and search results
- graph: The Generation container
- result: Ok/Err result type
"""

from .graph import Generation
from .result import Err, Ok, Result
from .types import (
    GraphEdge, GraphNode, NodeKind, Position,
    SearchResult, ViewportInstruction,
)
from .values import JsonArray, JsonObject, JsonPrimitive, JsonValue, from_python

__all__ = [
    # Values
    "JsonArray", "JsonObject", "JsonPrimitive", "JsonValue", "from_python",
    # Types
    "GraphEdge", "GraphNode", "NodeKind", "Position",
    "SearchResult", "ViewportInstruction",
    # Graph
    "Generation",
    # Result
    "Err", "Ok", "Result",
]
