"""Graph analysis package for the social graph store and its metrics."""

from .social_graph import SocialGraph
from .network_metrics import (
    NetworkAnalyzer,
    bfs_distances,
    average_distance,
    closeness_centrality,
    jaccard_similarity,
    most_similar_pairs,
    degree_summary
)

__all__ = [
    'SocialGraph',
    'NetworkAnalyzer',
    'bfs_distances',
    'average_distance',
    'closeness_centrality',
    'jaccard_similarity',
    'most_similar_pairs',
    'degree_summary'
]
