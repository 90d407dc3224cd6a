"""Distance metrics for clustering algorithms."""

from .euclidean import EuclideanDistance, distance, squared_distances

__all__ = [
    'EuclideanDistance',
    'distance',
    'squared_distances'
]
