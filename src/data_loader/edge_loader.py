"""
Data loading module for social graph edge lists
Handles whitespace-separated "u v" text files such as the SNAP ego-network dumps
"""

from pathlib import Path
import logging
from typing import Iterator, List, Optional, Tuple

from graph_analysis import SocialGraph

logger = logging.getLogger(__name__)


def parse_edge_line(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse one edge-list line.

    Parameters
    ----------
    line : str
        Raw text line

    Returns
    -------
    edge : tuple of int, or None
        (u, v) when the line holds exactly two non-negative integers,
        None for anything else (blank, comment, malformed)
    """
    stripped = line.strip()
    if not stripped or stripped.startswith('#'):
        return None

    parts = stripped.split()
    if len(parts) != 2:
        return None

    # Plain ASCII digits only: int() would also take "+5", "1_0" and other scripts
    if not all(token.isascii() and token.isdigit() for token in parts):
        return None
    return int(parts[0]), int(parts[1])


class EdgeListLoader:
    """Load social graphs from edge-list files."""

    def __init__(self, data_dir: str, config: dict):
        """
        Initialize data loader.

        Parameters
        ----------
        data_dir : str
            Path to data directory
        config : dict
            Configuration dictionary
        """
        self.data_dir = Path(data_dir)
        self.config = config
        self.last_skipped = 0

    def resolve_path(self, name_or_path) -> Path:
        """Resolve a bare file name against the data directory."""
        path = Path(name_or_path)
        if path.exists() or path.is_absolute():
            return path
        return self.data_dir / path

    def iter_edges(self, path) -> Iterator[Tuple[int, int]]:
        """
        Yield valid edges from a file, skipping malformed lines.

        The number of lines skipped is stored in ``last_skipped`` and is
        reset when a new file is opened. Undecodable bytes are replaced,
        so such lines are counted as malformed.
        """
        self.last_skipped = 0
        path = self.resolve_path(path)
        if not path.exists():
            raise FileNotFoundError(f"Edge list not found: {path}")

        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            for line in f:
                edge = parse_edge_line(line)
                if edge is None:
                    if line.strip() and not line.lstrip().startswith('#'):
                        self.last_skipped += 1
                    continue
                yield edge

        if self.last_skipped:
            logger.warning(f"Skipped {self.last_skipped} malformed lines in {path.name}")

    def load_graph(self, name_or_path) -> SocialGraph:
        """
        Load an edge-list file into a SocialGraph.

        Parameters
        ----------
        name_or_path : str or Path
            File name inside the data directory, or a full path

        Returns
        -------
        graph : SocialGraph
            Graph built from all valid edge lines
        """
        path = self.resolve_path(name_or_path)

        try:
            graph = SocialGraph.from_edges(self.iter_edges(path))
        except OSError as e:
            logger.error(f"Failed to load edge list {path}: {str(e)}")
            raise

        logger.info(f"Loaded {path.name}: {graph.num_nodes} nodes, "
                    f"{graph.num_edges} edges")
        return graph

    def list_graph_files(self) -> List[str]:
        """Sorted names of the edge-list files available in the data directory."""
        if not self.data_dir.exists():
            raise FileNotFoundError(f"Data directory not found: {self.data_dir}")

        return sorted(f.name for f in self.data_dir.glob('*.txt'))
