"""
Generation container backed by rustworkx.

A Generation holds the nodes and edges produced by one traversal. It keeps
the bimap between string node ids and rustworkx integer indices, and it
iterates nodes and edges in the order they were added, which is traversal
order. A new Generation is built for every "generate"; nothing is patched
incrementally across generations.
"""

from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Set

import rustworkx as rx

from .types import GraphEdge, GraphNode, NodeKind


class Generation:
    """
    Self-consistent node/edge set from one parse + traversal cycle.

    Features:
    - O(1) node lookup via id-to-index bimap
    - Stable iteration in insertion order
    - Tree checks backed by rustworkx
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=False)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}
        self._path_to_id: Dict[str, str] = {}
        self._nodes_by_kind: Dict[NodeKind, Set[str]] = defaultdict(set)

    def add_node(self, node: GraphNode) -> None:
        """Add a node, or replace the payload of an existing one."""
        if node.id in self._id_to_idx:
            idx = self._id_to_idx[node.id]
            self._graph[idx] = node
        else:
            idx = self._graph.add_node(node)
            self._id_to_idx[node.id] = idx
            self._idx_to_id[idx] = node.id

        self._path_to_id[node.path] = node.id
        self._nodes_by_kind[node.kind].add(node.id)

    def add_edge(self, edge: GraphEdge) -> None:
        """Add a directed edge. Edges with unknown endpoints are ignored."""
        if edge.source not in self._id_to_idx or edge.target not in self._id_to_idx:
            return

        u_idx = self._id_to_idx[edge.source]
        v_idx = self._id_to_idx[edge.target]
        self._graph.add_edge(u_idx, v_idx, edge)

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def get_node_by_path(self, path: str) -> Optional[GraphNode]:
        node_id = self._path_to_id.get(path)
        if node_id is None:
            return None
        return self.get_node(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def has_edge(self, source_id: str, target_id: str) -> bool:
        if source_id not in self._id_to_idx or target_id not in self._id_to_idx:
            return False
        return self._graph.has_edge(self._id_to_idx[source_id], self._id_to_idx[target_id])

    def get_nodes_by_kind(self, kind: NodeKind) -> List[GraphNode]:
        ids = self._nodes_by_kind.get(kind, set())
        return [node for node in self.iter_nodes() if node.id in ids]

    def get_children(self, node_id: str) -> List[GraphNode]:
        """Direct children in traversal order."""
        if node_id not in self._id_to_idx:
            return []
        idx = self._id_to_idx[node_id]
        child_indices = sorted(self._graph.successor_indices(idx))
        return [self._graph[i] for i in child_indices]

    def get_ancestors(self, node_id: str) -> Set[str]:
        """All node ids on the way from the root to node_id, excluding it."""
        if node_id not in self._id_to_idx:
            return set()
        ancestor_indices = rx.ancestors(self._graph, self._id_to_idx[node_id])
        return {self._idx_to_id[idx] for idx in ancestor_indices}

    def is_tree(self) -> bool:
        """True if the generation is a single rooted tree."""
        if self.node_count == 0:
            return True
        if self.edge_count != self.node_count - 1:
            return False
        if not rx.is_directed_acyclic_graph(self._graph):
            return False
        roots = [i for i in self._graph.node_indices() if self._graph.in_degree(i) == 0]
        if len(roots) != 1:
            return False
        return all(self._graph.in_degree(i) == 1 for i in self._graph.node_indices() if i != roots[0])

    def highlight(self, node_id: str | None) -> None:
        """
        Mark exactly one node as highlighted and clear every other node.

        Passing None clears all highlights. Only the `highlighted` attribute
        is touched.
        """
        for idx in self._graph.node_indices():
            node: GraphNode = self._graph[idx]
            wanted = node.id == node_id
            if node.highlighted != wanted:
                self._graph[idx] = node.model_copy(update={"highlighted": wanted})

    @property
    def root(self) -> Optional[GraphNode]:
        return next(self.iter_nodes(), None)

    @property
    def nodes(self) -> List[GraphNode]:
        return list(self.iter_nodes())

    @property
    def edges(self) -> List[GraphEdge]:
        return list(self.iter_edges())

    # Nodes are never removed, so index order is insertion order.
    def iter_nodes(self) -> Iterator[GraphNode]:
        return iter(self._graph.nodes())

    def iter_edges(self) -> Iterator[GraphEdge]:
        return iter(self._graph.edges())

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        depths = [node.depth for node in self.iter_nodes()]
        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "nodes_by_kind": {kind.value: len(ids) for kind, ids in self._nodes_by_kind.items()},
            "max_depth": max(depths) if depths else 0,
            "backend": "rustworkx",
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.iter_nodes()],
            "edges": [edge.model_dump() for edge in self.iter_edges()],
            "stats": self.get_stats(),
        }
