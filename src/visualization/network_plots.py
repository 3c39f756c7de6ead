"""
Visualization module for social graph analysis
Includes degree distributions, closeness rankings, and neighborhood drawings
"""

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
import networkx as nx
import logging
from typing import Dict, List, Optional, Tuple

from graph_analysis import SocialGraph

logger = logging.getLogger(__name__)


class NetworkVisualizer:
    """Visualize social connection networks and their metrics."""

    def __init__(self, config: dict):
        """Initialize visualizer with configuration."""
        self.config = config
        viz_config = config['visualization']

        # Set style
        plt.style.use(viz_config['figure']['style'])
        self.dpi = viz_config['figure']['dpi']
        self.format = viz_config['figure']['format']
        self.layout = viz_config.get('layout', 'spring')
        self.max_drawn_nodes = viz_config.get('max_drawn_nodes', 100)

    def _save(self, save_path, what: str):
        if save_path:
            plt.savefig(save_path, dpi=self.dpi, format=self.format, bbox_inches='tight')
            logger.info(f"Saved {what} to {save_path}")

    def plot_degree_distribution(self, degrees: List[Tuple[int, int]],
                                 title: str = "Degree Distribution",
                                 log_scale: bool = False,
                                 save_path: Optional[str] = None) -> plt.Figure:
        """
        Plot histogram of node degrees.

        Parameters
        ----------
        degrees : list of (node, degree)
            Output of ``SocialGraph.all_degrees``
        title : str
            Plot title
        log_scale : bool
            Use a logarithmic count axis (heavy-tailed social graphs)
        save_path : str, optional
            Path to save figure

        Returns
        -------
        fig : matplotlib.Figure
        """
        fig, ax = plt.subplots(figsize=(10, 6), dpi=self.dpi)

        values = np.array([d for _, d in degrees])
        if values.size > 0:
            sns.histplot(values, bins=min(50, max(1, int(values.max()))),
                         color='#2E86AB', alpha=0.8, ax=ax)
            ax.axvline(values.mean(), color='#FF6B6B', linestyle='--',
                       linewidth=2, label=f'Mean = {values.mean():.2f}')
            ax.legend()

        if log_scale:
            ax.set_yscale('log')

        ax.set_xlabel('Degree', fontsize=12)
        ax.set_ylabel('Number of Nodes', fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.grid(axis='y', alpha=0.3)

        plt.tight_layout()
        self._save(save_path, "degree distribution")

        return fig

    def plot_closeness_ranking(self, closeness: List[Tuple[int, float]],
                               top_k: int = 20,
                               save_path: Optional[str] = None) -> plt.Figure:
        """
        Plot the highest closeness centrality values as a bar chart.

        Parameters
        ----------
        closeness : list of (node, closeness)
            Ranking from ``closeness_centrality``, highest first
        top_k : int
            Number of nodes to show
        save_path : str, optional
            Path to save figure

        Returns
        -------
        fig : matplotlib.Figure
        """
        fig, ax = plt.subplots(figsize=(12, 6), dpi=self.dpi)

        top = closeness[:top_k]
        nodes = [str(node) for node, _ in top]
        values = [value for _, value in top]

        ax.bar(range(len(nodes)), values, color='#4ECDC4', alpha=0.7, edgecolor='black')

        ax.set_xticks(range(len(nodes)))
        ax.set_xticklabels(nodes, rotation=45, ha='right')
        ax.set_xlabel('Node', fontsize=12)
        ax.set_ylabel('Closeness Centrality', fontsize=12)
        ax.set_title(f'Top {len(nodes)} Nodes by Closeness Centrality',
                     fontsize=14, fontweight='bold')
        ax.grid(axis='y', alpha=0.3)

        plt.tight_layout()
        self._save(save_path, "closeness ranking")

        return fig

    def plot_network(self, graph: SocialGraph,
                     title: str = "Social Network",
                     layout: str = None,
                     save_path: Optional[str] = None,
                     node_colors: Optional[Dict] = None) -> plt.Figure:
        """
        Draw the subgraph induced by the highest-degree nodes.

        Parameters
        ----------
        graph : SocialGraph
            Social graph
        title : str
            Plot title
        layout : str, optional
            Layout algorithm
        save_path : str, optional
            Path to save figure
        node_colors : dict, optional
            Node -> scalar (e.g. closeness) used for the color map

        Returns
        -------
        fig : matplotlib.Figure
        """
        fig, ax = plt.subplots(figsize=(12, 10), dpi=self.dpi)

        # Keep the drawing readable on large graphs
        by_degree = sorted(graph.all_degrees(), key=lambda item: item[1], reverse=True)
        drawn = [node for node, _ in by_degree[:self.max_drawn_nodes]]
        G = graph.to_networkx(drawn)

        if layout is None:
            layout = self.layout

        if layout == 'spring':
            pos = nx.spring_layout(G, k=0.5, iterations=50, seed=42)
        elif layout == 'circular':
            pos = nx.circular_layout(G)
        elif layout == 'spectral':
            pos = nx.spectral_layout(G)
        else:
            raise ValueError(f"Unknown layout: {layout}")

        if node_colors is not None:
            node_color = [node_colors.get(node, 0.0) for node in G.nodes()]
            cmap = plt.cm.viridis
        else:
            node_color = '#4ECDC4'
            cmap = None

        # Node sizes based on degree in the full graph
        node_sizes = [50 + 20 * graph.degree(node) for node in G.nodes()]

        nx.draw_networkx_nodes(
            G, pos,
            node_color=node_color,
            node_size=node_sizes,
            cmap=cmap,
            alpha=0.9,
            ax=ax
        )
        nx.draw_networkx_edges(G, pos, alpha=0.3, ax=ax)

        if G.number_of_nodes() <= 30:
            nx.draw_networkx_labels(G, pos, font_size=9, font_weight='bold', ax=ax)

        ax.set_title(title, fontsize=16, fontweight='bold', pad=20)
        ax.axis('off')

        plt.tight_layout()
        self._save(save_path, "network plot")

        return fig

    def plot_metric_comparison(self, results_df,
                               metrics: List[str],
                               save_path: Optional[str] = None) -> plt.Figure:
        """
        Compare summary metrics across several graphs.

        Parameters
        ----------
        results_df : pd.DataFrame
            One row per graph with a 'graph' column
        metrics : list of str
            Columns to plot
        save_path : str, optional
            Path to save figure

        Returns
        -------
        fig : matplotlib.Figure
        """
        metrics = [m for m in metrics if m in results_df.columns]
        fig, axes = plt.subplots(1, max(1, len(metrics)),
                                 figsize=(5 * max(1, len(metrics)), 5), dpi=self.dpi,
                                 squeeze=False)

        for ax, metric in zip(axes[0], metrics):
            sns.barplot(data=results_df, x='graph', y=metric, color='#2E86AB', ax=ax)
            ax.set_title(metric.replace('_', ' ').title(), fontsize=12, fontweight='bold')
            ax.set_xlabel('')
            ax.tick_params(axis='x', rotation=45)
            ax.grid(axis='y', alpha=0.3)

        plt.suptitle('Network Metrics Comparison', fontsize=14, fontweight='bold')
        plt.tight_layout()
        self._save(save_path, "metric comparison")

        return fig
