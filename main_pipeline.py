"""
Main analysis pipeline for social graph analysis
Degree, distance, closeness and neighborhood similarity of a friendship network
"""

import sys
import time
import pandas as pd
from pathlib import Path
import matplotlib.pyplot as plt

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from utils import (
    load_config, setup_logging, create_output_directory,
    save_results, validate_config, format_time
)
from data_loader import EdgeListLoader
from graph_analysis import NetworkAnalyzer
from visualization import NetworkVisualizer


class SocialGraphPipeline:
    """Complete analysis pipeline for one or more edge-list snapshots."""

    def __init__(self, config_path='config/config.yaml', config: dict = None):
        """Initialize pipeline with configuration."""
        # Load configuration
        self.config = config if config is not None else load_config(config_path)
        validate_config(self.config)

        # Setup logging
        self.logger = setup_logging(self.config)
        self.logger.info("=" * 80)
        self.logger.info("Social Graph Analysis Pipeline Initialized")
        self.logger.info("=" * 80)

        # Create output directory
        self.output_dir = create_output_directory(
            self.config['dataset']['output_dir']
        )
        self.logger.info(f"Output directory: {self.output_dir}")

        # Initialize components
        self.data_loader = EdgeListLoader(
            self.config['dataset']['data_dir'],
            self.config
        )
        self.network_analyzer = NetworkAnalyzer(self.config)
        self.plots_enabled = self.config.get('visualization', {}).get('enabled', False)
        self.visualizer = NetworkVisualizer(self.config) if self.plots_enabled else None

    def analyze_graph(self, edge_file: str = None) -> dict:
        """
        Run complete analysis for a single edge-list file.

        Parameters
        ----------
        edge_file : str, optional
            File name in the data directory or full path.
            Defaults to dataset.edge_file from the configuration.

        Returns
        -------
        graph_results : dict
            All analysis results for the graph
        """
        if edge_file is None:
            edge_file = self.config['dataset']['edge_file']
        graph_name = Path(edge_file).stem

        self.logger.info(f"\n{'='*80}")
        self.logger.info(f"Analyzing Graph: {graph_name}")
        self.logger.info(f"{'='*80}\n")

        start_time = time.time()

        try:
            # Step 1: Load graph
            self.logger.info("Step 1/4: Loading edge list...")
            graph = self.data_loader.load_graph(edge_file)

            # Step 2: Metrics
            self.logger.info("Step 2/4: Computing network metrics...")
            graph_results = {
                'graph': graph_name,
                'num_nodes': graph.num_nodes,
                'num_edges': graph.num_edges,
                'skipped_lines': self.data_loader.last_skipped,
            }
            graph_results.update(self.network_analyzer.analyze(graph))

            # Step 3: Tables
            self.logger.info("Step 3/4: Saving result tables...")
            self.save_tables(graph_results)

            # Step 4: Figures
            if self.plots_enabled:
                self.logger.info("Step 4/4: Generating visualizations...")
                self.plot_results(graph, graph_results)
            else:
                self.logger.info("Step 4/4: Visualizations disabled")

            elapsed_time = time.time() - start_time
            graph_results['analysis_time'] = elapsed_time
            self.logger.info(f"Graph {graph_name} analyzed in {format_time(elapsed_time)}")

            save_results(graph_results, f'{graph_name}_results.json',
                         self.output_dir / 'features')

            return graph_results

        except Exception as e:
            self.logger.error(f"Error analyzing graph {graph_name}: {str(e)}")
            raise

    def save_tables(self, graph_results: dict):
        """Write degree, closeness and similar-pair tables as CSV."""
        graph_name = graph_results['graph']
        tables_dir = self.output_dir / 'tables'

        degrees_df = pd.DataFrame(graph_results['degree']['degrees'],
                                  columns=['node', 'degree'])
        save_results(degrees_df, f'{graph_name}_degrees.csv', tables_dir, format='csv')

        if 'distance' in graph_results:
            closeness_df = pd.DataFrame(graph_results['distance']['closeness'],
                                        columns=['node', 'closeness'])
            save_results(closeness_df, f'{graph_name}_closeness.csv', tables_dir, format='csv')

        pairs_df = pd.DataFrame(graph_results['similarity']['most_similar_pairs'],
                                columns=['node_a', 'node_b', 'similarity'])
        save_results(pairs_df, f'{graph_name}_similar_pairs.csv', tables_dir, format='csv')

    def plot_results(self, graph, graph_results: dict):
        """Save the degree, closeness and network figures."""
        graph_name = graph_results['graph']
        viz_dir = self.output_dir / 'figures' / graph_name
        viz_dir.mkdir(parents=True, exist_ok=True)
        fmt = self.visualizer.format

        fig = self.visualizer.plot_degree_distribution(
            graph_results['degree']['degrees'],
            title=f"Degree Distribution - {graph_name}",
            save_path=viz_dir / f'{graph_name}_degrees.{fmt}'
        )
        plt.close(fig)

        closeness = graph_results.get('distance', {}).get('closeness')
        if closeness:
            fig = self.visualizer.plot_closeness_ranking(
                closeness,
                save_path=viz_dir / f'{graph_name}_closeness.{fmt}'
            )
            plt.close(fig)

        fig = self.visualizer.plot_network(
            graph,
            title=f"Social Network - {graph_name}",
            save_path=viz_dir / f'{graph_name}_network.{fmt}',
            node_colors=dict(closeness) if closeness else None
        )
        plt.close(fig)

    def analyze_multiple_graphs(self, edge_files: list = None) -> pd.DataFrame:
        """
        Analyze several edge-list files and compile their summary metrics.

        Parameters
        ----------
        edge_files : list, optional
            Edge-list file names. If None, analyze every file in the data directory.

        Returns
        -------
        results_df : pd.DataFrame
            One row of summary metrics per graph
        """
        if edge_files is None:
            edge_files = self.data_loader.list_graph_files()

        self.logger.info(f"Analyzing {len(edge_files)} graphs...")

        all_results = []

        for edge_file in edge_files:
            try:
                results = self.analyze_graph(edge_file)
            except Exception as e:
                self.logger.error(f"Failed to analyze {edge_file}: {str(e)}")
                continue

            # Flatten results for DataFrame
            flat_results = {'graph': results['graph']}
            flat_results.update(results['degree']['summary'])
            if 'distance' in results:
                flat_results['average_distance'] = results['distance']['average_distance']
                top = results['distance']['top_closeness']
                flat_results['max_closeness'] = top[0][1] if top else 0.0
            pairs = results['similarity']['most_similar_pairs']
            flat_results['max_similarity'] = pairs[0][2] if pairs else 0.0

            all_results.append(flat_results)

        results_df = pd.DataFrame(all_results)

        csv_path = self.output_dir / 'compiled_results.csv'
        results_df.to_csv(csv_path, index=False)
        self.logger.info(f"Saved compiled results to {csv_path}")

        return results_df

    def format_report(self, graph_results: dict) -> str:
        """Render the plain-text summary for one graph."""
        degree_preview = self.network_analyzer.degree_preview
        lines = []

        lines.append("=" * 80)
        lines.append(f"SOCIAL GRAPH ANALYSIS - {graph_results['graph']}")
        lines.append("=" * 80)
        lines.append(f"Loaded {graph_results['num_nodes']} nodes and "
                     f"{graph_results['num_edges']} edges.")
        if graph_results.get('skipped_lines'):
            lines.append(f"Skipped {graph_results['skipped_lines']} malformed lines.")

        lines.append("")
        lines.append("Degree Distribution:")
        for node, degree in graph_results['degree']['degrees'][:degree_preview]:
            lines.append(f"Node {node:>4}: Degree {degree:>3}")
        lines.append("-" * 40)

        if 'distance' in graph_results:
            distance = graph_results['distance']
            lines.append("")
            lines.append(f"Average Distance (Six Degrees): {distance['average_distance']:.2f}")
            lines.append("-" * 40)

            lines.append("")
            lines.append(f"Top {len(distance['top_closeness'])} Closeness Centrality Nodes:")
            for node, centrality in distance['top_closeness']:
                lines.append(f"Node {node:>4}: Closeness Centrality {centrality:.4f}")
            lines.append("-" * 40)

        similarity = graph_results['similarity']
        lines.append("")
        lines.append("Jaccard Similarities (Friends of Friends):")
        for u, v, sim in similarity['probe_pairs']:
            lines.append(f"Nodes {u} & {v} -> Similarity: {sim:.3f}")
        lines.append("-" * 40)

        lines.append("")
        lines.append("Top Jaccard Similarities (Most Similar Friend Pairs):")
        for u, v, sim in similarity['most_similar_pairs']:
            lines.append(f"Nodes {u} & {v} -> Similarity: {sim:.3f}")

        for node, friends in graph_results.get('reference_nodes', {}).items():
            lines.append("")
            lines.append(f"Node {node} has {len(friends)} friends: {friends}")

        return "\n".join(lines) + "\n"

    def generate_report(self, graph_results: dict) -> Path:
        """Write the summary report for one graph."""
        report_path = self.output_dir / 'reports' / f"{graph_results['graph']}_summary.txt"
        report_path.parent.mkdir(parents=True, exist_ok=True)

        with open(report_path, 'w') as f:
            f.write(self.format_report(graph_results))

        self.logger.info(f"Generated report: {report_path}")
        return report_path


def main():
    """Main execution function."""
    # Optional edge list path overrides the configured one
    edge_file = sys.argv[1] if len(sys.argv) > 1 else None

    pipeline = SocialGraphPipeline()
    results = pipeline.analyze_graph(edge_file)
    report_path = pipeline.generate_report(results)

    print(pipeline.format_report(results))
    print(f"Report: {report_path}")
    print(f"Results: {pipeline.output_dir}")


if __name__ == '__main__':
    main()
