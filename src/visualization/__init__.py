"""Visualization package for social graph figures."""

from .network_plots import NetworkVisualizer

__all__ = ['NetworkVisualizer']
