"""
Path search over a generation.
"""

from .matcher import center_on, find_node, fit_view, highlight, matches, normalize, search

__all__ = ["center_on", "find_node", "fit_view", "highlight", "matches", "normalize", "search"]
