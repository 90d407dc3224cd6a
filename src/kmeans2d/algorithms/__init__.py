"""Clustering algorithm implementations."""

from .kmeans import KMeans, KMeansObjective, clusters

__all__ = [
    'KMeans',
    'KMeansObjective',
    'clusters'
]
