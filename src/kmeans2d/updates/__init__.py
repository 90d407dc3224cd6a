"""Parameter update strategies for clustering algorithms."""

from .mean import MeanUpdater, add_points, sum_points, centroid, truncated_mean

__all__ = [
    'MeanUpdater',
    'add_points',
    'sum_points',
    'centroid',
    'truncated_mean'
]
