"""
Graph store for social connection networks
Undirected adjacency-set representation, built once and read-only afterwards
"""

import networkx as nx
import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class SocialGraph:
    """
    Undirected social graph held as an adjacency mapping.

    Nodes are non-negative integer ids. ``num_edges`` counts every edge
    insertion made while building the graph, so a repeated edge line is
    counted again even though the neighbor sets absorb it.
    """

    def __init__(self):
        """Create an empty graph."""
        self._adjacency: Dict[int, Set[int]] = {}
        self._num_nodes = 0
        self._num_edges = 0

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]]) -> 'SocialGraph':
        """
        Build a graph by folding a sequence of edges into the adjacency mapping.

        Parameters
        ----------
        edges : iterable of (int, int)
            Unordered node pairs

        Returns
        -------
        graph : SocialGraph
            Populated graph
        """
        graph = cls()
        for u, v in edges:
            graph._add_edge(u, v)
        graph._num_nodes = len(graph._adjacency)

        logger.info(f"Built graph with {graph.num_nodes} nodes "
                    f"and {graph.num_edges} edges")
        return graph

    @classmethod
    def load_from_file(cls, path, config: Optional[dict] = None) -> 'SocialGraph':
        """Load a graph from a whitespace-separated edge-list file."""
        from data_loader import EdgeListLoader

        loader = EdgeListLoader('.', config or {})
        return loader.load_graph(path)

    def _add_edge(self, u: int, v: int):
        """Record u-v in both neighbor sets. Only used during construction."""
        self._adjacency.setdefault(u, set()).add(v)
        self._adjacency.setdefault(v, set()).add(u)
        self._num_edges += 1

    @property
    def num_nodes(self) -> int:
        """Number of distinct node ids."""
        return self._num_nodes

    @property
    def num_edges(self) -> int:
        """Number of accepted edge insertions, duplicates included."""
        return self._num_edges

    def degree(self, node: int) -> Optional[int]:
        """Number of neighbors, or None for a node never seen."""
        neighbors = self._adjacency.get(node)
        if neighbors is None:
            return None
        return len(neighbors)

    def all_degrees(self) -> List[Tuple[int, int]]:
        """(node, degree) for every node. Order is not specified."""
        return [(node, len(neighbors))
                for node, neighbors in self._adjacency.items()]

    def neighbors(self, node: int) -> FrozenSet[int]:
        """Neighbor set of a node; empty for unknown nodes."""
        return frozenset(self._adjacency.get(node, ()))

    def nodes(self) -> List[int]:
        """All node ids in insertion order."""
        return list(self._adjacency)

    def has_node(self, node: int) -> bool:
        return node in self._adjacency

    def __contains__(self, node) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return f"SocialGraph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"

    def to_networkx(self, nodes: Optional[Iterable[int]] = None) -> nx.Graph:
        """
        Copy the graph (or the subgraph induced by ``nodes``) into networkx.

        Parameters
        ----------
        nodes : iterable of int, optional
            Restrict the copy to these nodes

        Returns
        -------
        G : nx.Graph
            Independent networkx graph
        """
        keep = set(self._adjacency) if nodes is None else set(nodes) & set(self._adjacency)

        G = nx.Graph()
        G.add_nodes_from(sorted(keep))
        for u in keep:
            for v in self._adjacency[u]:
                if v in keep:
                    G.add_edge(u, v)
        return G
