"""
Graph Transformer.

Turns a parsed value tree into a positioned node/edge Generation.

Traversal is preorder depth-first: a node is emitted before its children,
object members are visited in key order and array elements by index. Every
value becomes a node, the root included, and every non-root node gets one
edge from its parent.

Layout is a single fixed rule with no collision avoidance:
- x = depth * x_spacing (root depth is 0)
- a parent's children get y = parent.y, parent.y + y_spacing, ... in order

Distant branches of a wide tree can therefore land on the same coordinates.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Tuple

from ..config import ROOT_LABEL, JsonTreeConfig
from ..core.graph import Generation
from ..core.types import GraphEdge, GraphNode, NodeKind, Position
from ..core.values import JsonArray, JsonObject, JsonPrimitive, JsonValue, from_python

logger = logging.getLogger(__name__)

ROOT_PATH = "$"


class _IdSequence:
    """Generation-scoped id source: n_1, n_2, ..."""

    def __init__(self, prefix: str = "n_", start: int = 1):
        self._prefix = prefix
        self._next = start

    def next_id(self) -> str:
        node_id = f"{self._prefix}{self._next}"
        self._next += 1
        return node_id


@dataclass
class _Visit:
    value: JsonValue
    path: str
    segment: str
    depth: int
    y: int
    parent_id: str | None


def kind_of(value: JsonValue) -> NodeKind:
    if isinstance(value, JsonArray):
        return NodeKind.ARRAY
    if isinstance(value, JsonObject):
        return NodeKind.OBJECT
    if isinstance(value, JsonPrimitive):
        return NodeKind.PRIMITIVE
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def make_label(kind: NodeKind, segment: str, value: JsonValue) -> str:
    """
    Containers show their last path segment; primitives show
    "<segment>: <value>".
    """
    if kind is NodeKind.PRIMITIVE:
        return f"{segment}: {value.as_text()}"
    return segment


def child_path(parent_path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{parent_path}[{key}]"
    return f"{parent_path}.{key}"


def _children(value: JsonValue) -> List[Tuple[str, JsonValue, str]]:
    """(segment, child, path suffix key) in visiting order."""
    if isinstance(value, JsonObject):
        return [(key, child, key) for key, child in value.members.items()]
    if isinstance(value, JsonArray):
        return [(str(index), child, index) for index, child in enumerate(value.items)]
    return []


def build_graph(value: Any, config: JsonTreeConfig | None = None) -> Generation:
    """
    Build a fresh Generation from a parsed value.

    Accepts the value model or plain json.loads output. Node ids restart at
    n_1 on every call, so the same input always yields the same ids.
    """
    if not isinstance(value, (JsonObject, JsonArray, JsonPrimitive)):
        value = from_python(value)
    config = config or JsonTreeConfig()

    ids = _IdSequence()
    generation = Generation()
    stack: List[_Visit] = [_Visit(value, ROOT_PATH, ROOT_LABEL, 0, 0, None)]

    while stack:
        visit = stack.pop()
        node_id = ids.next_id()
        kind = kind_of(visit.value)

        generation.add_node(GraphNode(
            id=node_id,
            path=visit.path,
            value=visit.value,
            kind=kind,
            label=make_label(kind, visit.segment, visit.value),
            position=Position(x=visit.depth * config.x_spacing, y=visit.y),
            depth=visit.depth,
            parent_id=visit.parent_id,
        ))
        if visit.parent_id is not None:
            generation.add_edge(GraphEdge.between(visit.parent_id, node_id))

        children = _children(visit.value)
        # Pushed in reverse so they pop in document order
        for offset in range(len(children) - 1, -1, -1):
            segment, child, key = children[offset]
            stack.append(_Visit(
                value=child,
                path=child_path(visit.path, key),
                segment=segment,
                depth=visit.depth + 1,
                y=visit.y + offset * config.y_spacing,
                parent_id=node_id,
            ))

    logger.debug(f"Built generation: {generation.node_count} nodes, {generation.edge_count} edges")
    return generation


def build_nodes_and_edges(
    value: Any, config: JsonTreeConfig | None = None
) -> Tuple[List[GraphNode], List[GraphEdge]]:
    """The (nodes, edges) pair handed to a renderer."""
    generation = build_graph(value, config)
    return generation.nodes, generation.edges
