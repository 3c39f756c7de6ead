"""
Integration tests for the analysis pipeline, configuration helpers and figures.
"""
import json

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
import yaml

from batch_analysis import run_batch_analysis
from main_pipeline import SocialGraphPipeline
from utils import load_config, validate_config, NumpyEncoder, format_time
from visualization import NetworkVisualizer
from graph_analysis import SocialGraph


class TestConfig:
    """Tests for configuration helpers."""

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("analysis:\n  top_similar_pairs: 7\n")

        assert load_config(path) == {"analysis": {"top_similar_pairs": 7}}

    def test_valid_config(self, sample_config):
        assert validate_config(sample_config) is True

    def test_missing_section(self, sample_config):
        del sample_config["analysis"]
        with pytest.raises(ValueError, match="Missing required config key"):
            validate_config(sample_config)

    def test_non_positive_top_n(self, sample_config):
        sample_config["analysis"]["top_similar_pairs"] = 0
        with pytest.raises(ValueError, match="top_similar_pairs"):
            validate_config(sample_config)

    def test_bad_probe_pair(self, sample_config):
        sample_config["analysis"]["probe_pairs"] = [[1, 2, 3]]
        with pytest.raises(ValueError, match="Probe pair"):
            validate_config(sample_config)

    def test_repository_config_is_valid(self):
        from pathlib import Path
        config = load_config(Path(__file__).parent.parent / "config" / "config.yaml")
        assert validate_config(config) is True


class TestHelpers:
    """Tests for small utility helpers."""

    def test_numpy_encoder(self):
        data = {"n": np.int64(3), "x": np.float64(0.5), "s": frozenset({2, 1})}
        assert json.loads(json.dumps(data, cls=NumpyEncoder)) == {"n": 3, "x": 0.5, "s": [1, 2]}

    def test_format_time(self):
        assert format_time(5) == "5s"
        assert format_time(125) == "2m 5s"
        assert format_time(3725) == "1h 2m 5s"


class TestSocialGraphPipeline:
    """End-to-end tests on a small edge list."""

    @pytest.fixture
    def pipeline(self, sample_config):
        return SocialGraphPipeline(config=sample_config)

    def test_analyze_graph(self, pipeline):
        results = pipeline.analyze_graph()

        assert results["graph"] == "friends"
        assert results["num_nodes"] == 4
        assert results["num_edges"] == 4
        assert results["skipped_lines"] == 1
        assert results["degree"]["degrees"] == [(0, 2), (1, 2), (2, 3), (3, 1)]
        assert results["reference_nodes"] == {2: [0, 1, 3]}
        assert len(results["distance"]["top_closeness"]) == 2
        assert results["distance"]["top_closeness"][0][0] == 2

    def test_outputs_written(self, pipeline):
        pipeline.analyze_graph()
        out = pipeline.output_dir

        assert (out / "features" / "friends_results.json").exists()
        degrees = pd.read_csv(out / "tables" / "friends_degrees.csv")
        assert list(degrees.columns) == ["node", "degree"]
        assert len(degrees) == 4

        pairs = pd.read_csv(out / "tables" / "friends_similar_pairs.csv")
        assert (pairs["similarity"] > 0).all()

        figures = out / "figures" / "friends"
        assert (figures / "friends_degrees.png").exists()
        assert (figures / "friends_closeness.png").exists()
        assert (figures / "friends_network.png").exists()

    def test_report(self, pipeline):
        results = pipeline.analyze_graph()
        report_path = pipeline.generate_report(results)
        text = report_path.read_text()

        assert "Loaded 4 nodes and 4 edges." in text
        assert "Skipped 1 malformed lines." in text
        assert "Average Distance (Six Degrees):" in text
        assert "Nodes 0 & 1 -> Similarity: 0.333" in text
        assert "Nodes 0 & 3 -> Similarity: 0.500" in text
        assert "Node 2 has 3 friends: [0, 1, 3]" in text

    def test_missing_edge_file(self, pipeline):
        with pytest.raises(FileNotFoundError):
            pipeline.analyze_graph("does_not_exist.txt")

    def test_analyze_multiple_graphs(self, pipeline, sample_config):
        from pathlib import Path
        data_dir = Path(sample_config["dataset"]["data_dir"])
        (data_dir / "pair.txt").write_text("5 6\n")

        results_df = pipeline.analyze_multiple_graphs()

        assert sorted(results_df["graph"]) == ["friends", "pair"]
        pair = results_df.set_index("graph").loc["pair"]
        assert pair["average_distance"] == pytest.approx(1.0)
        assert pair["max_similarity"] == 0.0
        assert (pipeline.output_dir / "compiled_results.csv").exists()

    def test_failed_graph_is_skipped(self, pipeline):
        results_df = pipeline.analyze_multiple_graphs(["friends.txt", "missing.txt"])
        assert list(results_df["graph"]) == ["friends"]


class TestNetworkVisualizer:
    """Tests for figure generation."""

    @pytest.fixture
    def visualizer(self, sample_config):
        return NetworkVisualizer(sample_config)

    def test_degree_distribution_saved(self, visualizer, tmp_path, triangle_graph):
        path = tmp_path / "degrees.png"
        fig = visualizer.plot_degree_distribution(triangle_graph.all_degrees(), save_path=path)
        plt.close(fig)

        assert path.exists()

    def test_network_limits_drawn_nodes(self, sample_config, tmp_path):
        sample_config["visualization"]["max_drawn_nodes"] = 3
        visualizer = NetworkVisualizer(sample_config)
        graph = SocialGraph.from_edges([(i, i + 1) for i in range(10)])

        fig = visualizer.plot_network(graph, save_path=tmp_path / "net.png")
        plt.close(fig)

        assert (tmp_path / "net.png").exists()

    def test_unknown_layout(self, visualizer, triangle_graph):
        with pytest.raises(ValueError, match="Unknown layout"):
            visualizer.plot_network(triangle_graph, layout="bogus")
        plt.close("all")


class TestBatchAnalysis:
    """Tests for the batch comparison script."""

    def write_config(self, config, tmp_path):
        path = tmp_path / "batch.yaml"
        path.write_text(yaml.safe_dump(config))
        return path

    def test_comparison_plot_saved(self, sample_config, tmp_path):
        config_path = self.write_config(sample_config, tmp_path)

        results_df = run_batch_analysis(config_path=config_path)
        plt.close("all")

        assert list(results_df["graph"]) == ["friends"]
        outputs = tmp_path / "outputs"
        assert len(list(outputs.glob("*/metric_comparison.png"))) == 1

    def test_without_visualization_section(self, sample_config, tmp_path):
        """A config with no visualization section still runs; the plot is skipped."""
        del sample_config["visualization"]
        config_path = self.write_config(sample_config, tmp_path)

        results_df = run_batch_analysis(config_path=config_path)

        assert list(results_df["graph"]) == ["friends"]
        outputs = tmp_path / "outputs"
        assert list(outputs.glob("*/metric_comparison.*")) == []
        assert len(list(outputs.glob("*/compiled_results.csv"))) == 1
