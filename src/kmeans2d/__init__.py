"""
kmeans2d: Lloyd's k-means clustering for 2D points.

Points are grouped around means that are repeatedly recomputed as the
truncated centroid of their cluster, until the set of means stops changing.

Example usage:
    >>> from kmeans2d import clusters, KMeans
    >>>
    >>> points = [(0, 0), (1, 0), (0, 1), (10, 10), (11, 10), (10, 11)]
    >>>
    >>> # Functional interface
    >>> groups = clusters(2, points, random_state=0)
    >>>
    >>> # Estimator interface
    >>> kmeans = KMeans(n_clusters=2, random_state=0, verbose=1)
    >>> kmeans.fit(points)
    >>> kmeans.clusters_

Plotting lives in ``kmeans2d.visualization`` and is imported on demand.
"""

__version__ = '0.1.0'

from .algorithms.kmeans import KMeans, clusters

from .base import (
    Point,
    Cluster,
    ClusterAssignment,
    ClusterState,
    InvalidInput,
    DivisionByEmptyCluster
)

from .distances import distance
from .assignments import nearest_mean, partition
from .updates import add_points, sum_points, centroid
from .initialization import pick_distinct
from .datasets import parse_line, parse_file, load_datasets

__all__ = [
    # Algorithms
    'KMeans',
    'clusters',

    # Steps
    'distance',
    'nearest_mean',
    'partition',
    'add_points',
    'sum_points',
    'centroid',
    'pick_distinct',

    # Core data structures
    'Point',
    'Cluster',
    'ClusterAssignment',
    'ClusterState',

    # Errors
    'InvalidInput',
    'DivisionByEmptyCluster',

    # Datasets
    'parse_line',
    'parse_file',
    'load_datasets',

    # Version
    '__version__'
]
