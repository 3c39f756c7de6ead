"""
Network analysis module for social graphs
Implements BFS distances, closeness centrality and Jaccard neighborhood similarity
"""

import numpy as np
import logging
from collections import deque
from typing import Dict, List, Tuple

from .social_graph import SocialGraph

logger = logging.getLogger(__name__)


def bfs_distances(graph: SocialGraph, start: int) -> Dict[int, int]:
    """
    Single-source shortest path lengths by breadth-first search.

    Parameters
    ----------
    graph : SocialGraph
        Graph to traverse
    start : int
        Source node

    Returns
    -------
    distances : dict
        Distance from ``start`` to every reachable node, including
        ``start`` itself at 0. Unreachable nodes are absent.
    """
    visited = {start}
    distances = {start: 0}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        current_dist = distances[current]
        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                distances[neighbor] = current_dist + 1
                queue.append(neighbor)

    return distances


def average_distance(graph: SocialGraph) -> float:
    """
    Mean shortest path length over all ordered reachable node pairs.

    Runs one BFS per node, so the cost is O(N * (N + E)).
    Returns 0.0 when no pair of distinct nodes is connected.
    """
    total_distance = 0
    count = 0

    for start in graph.nodes():
        for dist in bfs_distances(graph, start).values():
            if dist > 0:
                total_distance += dist
                count += 1

    if count == 0:
        return 0.0
    return total_distance / count


def closeness_centrality(graph: SocialGraph) -> List[Tuple[int, float]]:
    """
    Closeness centrality of every node within its own reachable component.

    closeness = (reachable nodes - 1) / sum of distances, or 0.0 when the
    node reaches nobody. Values are not normalized by the total node count.

    Returns
    -------
    result : list of (node, closeness)
        Sorted by closeness, highest first. Equal scores keep no
        particular order.
    """
    result = []
    for node in graph.nodes():
        distances = bfs_distances(graph, node)
        total = sum(distances.values())
        if total > 0:
            closeness = (len(distances) - 1) / total
        else:
            closeness = 0.0
        result.append((node, closeness))

    result.sort(key=lambda item: item[1], reverse=True)
    return result


def jaccard_similarity(graph: SocialGraph, u: int, v: int) -> float:
    """
    Jaccard similarity of the neighbor sets of two nodes.

    Returns 0.0 if either node is not in the graph or both have no neighbors.
    """
    if u not in graph or v not in graph:
        return 0.0

    neighbors_u = graph.neighbors(u)
    neighbors_v = graph.neighbors(v)
    union = len(neighbors_u | neighbors_v)
    if union == 0:
        return 0.0
    return len(neighbors_u & neighbors_v) / union


def most_similar_pairs(graph: SocialGraph,
                       top_n: int) -> List[Tuple[int, int, float]]:
    """
    Top node pairs ranked by Jaccard similarity.

    Every unordered pair is visited once. Pairs where either node has at
    most one neighbor are skipped, and only pairs with positive similarity
    are kept.

    Parameters
    ----------
    graph : SocialGraph
        Graph to scan
    top_n : int
        Maximum number of pairs to return

    Returns
    -------
    pairs : list of (node_a, node_b, similarity)
        Highest similarity first
    """
    if top_n <= 0:
        return []

    nodes = graph.nodes()
    degrees = dict(graph.all_degrees())
    results = []

    for i in range(len(nodes)):
        u = nodes[i]
        if degrees[u] <= 1:
            continue
        for j in range(i + 1, len(nodes)):
            v = nodes[j]
            if degrees[v] <= 1:
                continue
            similarity = jaccard_similarity(graph, u, v)
            if similarity > 0:
                results.append((u, v, similarity))

    results.sort(key=lambda item: item[2], reverse=True)
    return results[:top_n]


def degree_summary(graph: SocialGraph) -> Dict[str, float]:
    """Summary statistics of the degree distribution."""
    degrees = np.array([d for _, d in graph.all_degrees()], dtype=float)

    summary = {
        'n_nodes': graph.num_nodes,
        'n_edges': graph.num_edges,
    }
    if degrees.size == 0:
        summary.update({
            'mean_degree': 0.0,
            'median_degree': 0.0,
            'min_degree': 0,
            'max_degree': 0,
            'isolated_nodes': 0,
        })
        return summary

    summary.update({
        'mean_degree': float(np.mean(degrees)),
        'median_degree': float(np.median(degrees)),
        'min_degree': int(degrees.min()),
        'max_degree': int(degrees.max()),
        'isolated_nodes': int(np.sum(degrees == 0)),
    })
    return summary


class NetworkAnalyzer:
    """Run the configured set of metrics on a social graph."""

    def __init__(self, config: dict):
        """
        Initialize network analyzer.

        Parameters
        ----------
        config : dict
            Configuration dictionary
        """
        self.config = config
        analysis = config.get('analysis', {})
        self.degree_preview = analysis.get('degree_preview', 10)
        self.top_closeness = analysis.get('top_closeness', 5)
        self.top_similar_pairs = analysis.get('top_similar_pairs', 5)
        self.probe_pairs = [tuple(pair) for pair in analysis.get('probe_pairs', [])]
        self.reference_nodes = analysis.get('reference_nodes', [])

    def extract_degree_metrics(self, graph: SocialGraph) -> dict:
        """
        Degree table and distribution summary.

        Parameters
        ----------
        graph : SocialGraph
            Graph to analyze

        Returns
        -------
        metrics : dict
            'summary' statistics and 'degrees' as (node, degree) sorted by node
        """
        metrics = {
            'summary': degree_summary(graph),
            'degrees': sorted(graph.all_degrees()),
        }
        logger.info(f"Computed degrees for {len(metrics['degrees'])} nodes")
        return metrics

    def extract_distance_metrics(self, graph: SocialGraph) -> dict:
        """
        Average distance and closeness centrality ranking.

        Parameters
        ----------
        graph : SocialGraph
            Graph to analyze

        Returns
        -------
        metrics : dict
            'average_distance', full 'closeness' ranking and 'top_closeness'
        """
        avg_dist = average_distance(graph)
        logger.info(f"Average distance: {avg_dist:.4f}")

        closeness = closeness_centrality(graph)
        logger.info(f"Computed closeness centrality for {len(closeness)} nodes")

        return {
            'average_distance': avg_dist,
            'closeness': closeness,
            'top_closeness': closeness[:self.top_closeness],
        }

    def extract_similarity_metrics(self, graph: SocialGraph) -> dict:
        """Similarity of the configured probe pairs and the top similar pairs."""
        probes = [(u, v, jaccard_similarity(graph, u, v))
                  for u, v in self.probe_pairs]
        top_pairs = most_similar_pairs(graph, self.top_similar_pairs)

        logger.info(f"Found {len(top_pairs)} similar pairs "
                    f"(top_n={self.top_similar_pairs})")
        return {
            'probe_pairs': probes,
            'most_similar_pairs': top_pairs,
        }

    def inspect_reference_nodes(self, graph: SocialGraph) -> Dict[int, List[int]]:
        """Sorted neighbor lists of the configured reference nodes."""
        inspected = {}
        for node in self.reference_nodes:
            if node not in graph:
                logger.warning(f"Reference node {node} is not in the graph")
                continue
            inspected[node] = sorted(graph.neighbors(node))
        return inspected

    def analyze(self, graph: SocialGraph, include_distances: bool = True) -> dict:
        """
        Run every configured analysis.

        Parameters
        ----------
        graph : SocialGraph
            Graph to analyze
        include_distances : bool
            Skip the all-pairs BFS metrics when False

        Returns
        -------
        results : dict
            Keys 'degree', 'distance' (when computed), 'similarity', 'reference_nodes'
        """
        results = {'degree': self.extract_degree_metrics(graph)}
        if include_distances:
            results['distance'] = self.extract_distance_metrics(graph)
        results['similarity'] = self.extract_similarity_metrics(graph)
        results['reference_nodes'] = self.inspect_reference_nodes(graph)
        return results
