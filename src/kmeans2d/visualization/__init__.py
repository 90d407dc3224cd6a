"""Visualization utilities for clustering results."""

from .plot_clusters import (
    clusters_to_records,
    plot_clusters_2d,
    plot_dataset
)

__all__ = [
    'clusters_to_records',
    'plot_clusters_2d',
    'plot_dataset'
]
