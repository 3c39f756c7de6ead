"""
Utility functions for social graph analysis
"""

import yaml
import logging
import json
from pathlib import Path
from datetime import datetime
import numpy as np


def load_config(config_path='config/config.yaml'):
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    return config


def setup_logging(config):
    """Setup logging configuration."""
    log_level = getattr(logging, config['logging']['level'])

    # Create logs directory
    if config['logging']['log_to_file']:
        log_dir = Path(config['logging']['log_file']).parent
        log_dir.mkdir(parents=True, exist_ok=True)

    # Configure logging
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(config['logging']['log_file'])
            if config['logging']['log_to_file'] else logging.NullHandler()
        ]
    )

    return logging.getLogger(__name__)


def create_output_directory(base_dir='outputs', run_name=None):
    """Create timestamped output directory."""
    if run_name is None:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        run_name = f"run_{timestamp}"

    output_dir = Path(base_dir) / run_name

    # Create subdirectories
    subdirs = ['tables', 'features', 'figures', 'reports']
    for subdir in subdirs:
        (output_dir / subdir).mkdir(parents=True, exist_ok=True)

    return output_dir


def save_results(data, filename, output_dir, format='json'):
    """Save analysis results to file."""
    output_path = Path(output_dir) / filename

    if format == 'json':
        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)
    elif format == 'csv':
        # data is a pandas DataFrame
        data.to_csv(output_path, index=False)
    else:
        raise ValueError(f"Unsupported format: {format}")

    return output_path


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder for numpy scalars and graph result containers."""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, (set, frozenset)):
            return sorted(obj)
        return super().default(obj)


def validate_config(config):
    """Validate configuration parameters."""
    required_keys = ['dataset', 'analysis', 'logging']

    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required config key: {key}")

    analysis = config['analysis']
    for key in ['degree_preview', 'top_closeness', 'top_similar_pairs']:
        if analysis.get(key, 1) <= 0:
            raise ValueError(f"analysis.{key} must be positive")

    # Probe pairs must be [u, v] node id pairs
    for pair in analysis.get('probe_pairs', []):
        if len(pair) != 2:
            raise ValueError(f"Probe pair must have exactly two nodes: {pair}")

    return True


def format_time(seconds):
    """Format seconds into readable time string."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    else:
        return f"{seconds}s"
