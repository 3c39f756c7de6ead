"""
Batch Analysis Script
Analyze every edge-list snapshot in the data directory and compare them
"""

import sys
from pathlib import Path
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).parent / 'src'))

from main_pipeline import SocialGraphPipeline
from visualization import NetworkVisualizer

COMPARISON_METRICS = [
    'mean_degree',
    'max_degree',
    'average_distance',
    'max_closeness',
    'max_similarity',
]


def run_batch_analysis(edge_files=None, config_path='config/config.yaml'):
    """
    Run batch analysis on multiple edge-list files.

    Parameters
    ----------
    edge_files : list, optional
        Edge-list file names; all files in the data directory when None
    config_path : str
        Path to the YAML configuration
    """
    pipeline = SocialGraphPipeline(config_path)

    results_df = pipeline.analyze_multiple_graphs(edge_files)

    print(f"\n{'='*80}")
    print(f"BATCH ANALYSIS: {len(results_df)} graphs")
    print(f"{'='*80}\n")

    if results_df.empty:
        print("No graphs were analyzed.")
        return results_df

    print(results_df.to_string(index=False))

    if 'visualization' in pipeline.config:
        visualizer = pipeline.visualizer or NetworkVisualizer(pipeline.config)
        comp_path = pipeline.output_dir / f'metric_comparison.{visualizer.format}'
        fig = visualizer.plot_metric_comparison(
            results_df,
            COMPARISON_METRICS,
            save_path=comp_path
        )
        plt.close(fig)
        print(f"\nSaved comparison plot to {comp_path}")
    else:
        print("\nNo visualization settings; skipping comparison plot.")

    print("\nBatch analysis complete!")
    print(f"Results saved to: {pipeline.output_dir}")

    return results_df


if __name__ == '__main__':
    files = sys.argv[1:] or None
    run_batch_analysis(files)
