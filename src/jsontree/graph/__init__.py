"""
Graph building: parsed values to positioned nodes and edges.
"""

from .transformer import ROOT_PATH, build_graph, build_nodes_and_edges, child_path, kind_of, make_label

__all__ = ["ROOT_PATH", "build_graph", "build_nodes_and_edges", "child_path", "kind_of", "make_label"]
