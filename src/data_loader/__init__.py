"""Data loading package for social graph edge lists."""

from .edge_loader import EdgeListLoader, parse_edge_line

__all__ = ['EdgeListLoader', 'parse_edge_line']
