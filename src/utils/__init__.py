"""Utility functions package."""

from .helpers import (
    load_config,
    setup_logging,
    create_output_directory,
    save_results,
    validate_config,
    format_time,
    NumpyEncoder
)

__all__ = [
    'load_config',
    'setup_logging',
    'create_output_directory',
    'save_results',
    'validate_config',
    'format_time',
    'NumpyEncoder'
]
