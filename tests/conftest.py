"""
Pytest configuration and fixtures.
"""
import pytest
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

# Add src and the repository root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from graph_analysis import SocialGraph


@pytest.fixture
def triangle_graph():
    """Fully connected 3-node graph."""
    return SocialGraph.from_edges([(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def path_graph():
    """Path 0-1-2-3."""
    return SocialGraph.from_edges([(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def two_component_graph():
    """Two disconnected edges: 0-1 and 2-3."""
    return SocialGraph.from_edges([(0, 1), (2, 3)])


@pytest.fixture
def star_graph():
    """Hub 0 with three leaves."""
    return SocialGraph.from_edges([(0, 1), (0, 2), (0, 3)])


@pytest.fixture
def empty_graph():
    return SocialGraph()


@pytest.fixture
def sample_config(tmp_path):
    """Pipeline configuration writing into a temporary directory."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "friends.txt").write_text(
        "# toy network\n"
        "0 1\n"
        "0 2\n"
        "1 2\n"
        "2 3\n"
        "not an edge\n"
    )
    return {
        "dataset": {
            "data_dir": str(data_dir),
            "edge_file": "friends.txt",
            "output_dir": str(tmp_path / "outputs"),
        },
        "analysis": {
            "degree_preview": 10,
            "top_closeness": 2,
            "top_similar_pairs": 3,
            "probe_pairs": [[0, 1], [0, 3]],
            "reference_nodes": [2, 99],
        },
        "visualization": {
            "enabled": True,
            "layout": "circular",
            "max_drawn_nodes": 50,
            "figure": {"style": "default", "dpi": 50, "format": "png"},
        },
        "logging": {
            "level": "INFO",
            "log_to_file": False,
            "log_file": str(tmp_path / "analysis.log"),
        },
    }
