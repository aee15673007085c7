"""
Path Matcher.

Queries look like `$.user.address.city`, `user.address.city` or
`items[0].name`. Matching is by path suffix, not anchored at the root, so a
short query can hit a nested occurrence anywhere in the tree. The first node
in stored (traversal) order wins.

The matcher itself never mutates nodes. Highlighting and viewport hints are
separate helpers for the caller to apply.
"""

import logging
from typing import Iterable, List, Optional

from ..config import JsonTreeConfig
from ..core.graph import Generation
from ..core.types import GraphNode, SearchResult, ViewportInstruction

logger = logging.getLogger(__name__)


def normalize(query: str | None) -> Optional[str]:
    """
    Canonical suffix for a query.

    Trims whitespace, then drops at most one leading "$" and at most one
    leading ".". Returns None when nothing is left to search for.
    """
    if not query:
        return None
    suffix = query.strip()
    if suffix.startswith("$"):
        suffix = suffix[1:]
    if suffix.startswith("."):
        suffix = suffix[1:]
    return suffix or None


def matches(path: str, suffix: str) -> bool:
    return path.endswith(suffix) or path == "$." + suffix


def find_node(nodes: Iterable[GraphNode], query: str | None) -> Optional[GraphNode]:
    """First node whose path matches the query, or None."""
    suffix = normalize(query)
    if suffix is None:
        return None
    return _first_match(nodes, suffix)


def _first_match(nodes: Iterable[GraphNode], suffix: str) -> Optional[GraphNode]:
    return next((node for node in nodes if matches(node.path, suffix)), None)


def search(
    nodes: Iterable[GraphNode] | Generation,
    query: str | None,
    config: JsonTreeConfig | None = None,
) -> SearchResult:
    """
    Look up a node by path query.

    Never raises for a miss: the result has found=False instead. On a hit
    the result carries a viewport instruction centered on the node.
    """
    if isinstance(nodes, Generation):
        nodes = nodes.iter_nodes()

    suffix = normalize(query)
    if suffix is None:
        return SearchResult(query=query or "")

    match = _first_match(nodes, suffix)
    if match is None:
        logger.debug(f"No node matches {suffix!r}")
        return SearchResult(query=query, normalized=suffix)

    logger.debug(f"Query {suffix!r} matched {match.path} ({match.id})")
    return SearchResult(
        query=query,
        normalized=suffix,
        found=True,
        node=match,
        viewport=center_on(match, config),
    )


def highlight(nodes: Iterable[GraphNode], node_id: str | None) -> List[GraphNode]:
    """
    Copies of nodes with `highlighted` set on exactly node_id.

    Every other node is cleared; nothing but the highlight flag changes.
    """
    return [node.model_copy(update={"highlighted": node.id == node_id}) for node in nodes]


def center_on(node: GraphNode, config: JsonTreeConfig | None = None) -> ViewportInstruction:
    """Center on the middle of the node's box, falling back to fit-view."""
    config = config or JsonTreeConfig()
    return ViewportInstruction(
        action="center",
        x=node.position.x + config.node_width / 2,
        y=node.position.y + config.node_height / 2,
        zoom=config.search_zoom,
        padding=config.fit_view_padding,
        fallback="fit_view",
    )


def fit_view(config: JsonTreeConfig | None = None) -> ViewportInstruction:
    """Whole-graph fit, used after a fresh generation."""
    config = config or JsonTreeConfig()
    return ViewportInstruction(
        action="fit_view",
        zoom=None,
        padding=config.fit_view_padding,
        fallback=None,
    )
