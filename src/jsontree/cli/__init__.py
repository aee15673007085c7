"""
Command-line interface for jsontree.
"""
