"""
Clustering quality metrics.
"""

from typing import Sequence
from torch import Tensor

from ..distances.euclidean import distance, squared_distances


def inertia(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Compute sum of squared distances to assigned centers (inertia).

    Args:
        X: (n, 2) data points
        labels: (n,) cluster labels indexing into ``centers``
        centers: (k, 2) cluster centers

    Returns:
        Total inertia (lower is better)
    """
    total = 0.0
    n_clusters = centers.shape[0]

    for k in range(n_clusters):
        mask = labels == k
        if mask.sum() > 0:
            cluster_points = X[mask]
            total += squared_distances(cluster_points, centers[k]).sum().item()

    return total


def within_cluster_sq_distance(clusters: Sequence[Sequence], means: Sequence) -> float:
    """Sum of squared distances from each cluster's points to its mean.

    Args:
        clusters: Sequence of clusters, each a sequence of (x, y) points
        means: One mean per cluster, in the same order

    Returns:
        Total squared distance
    """
    if len(clusters) != len(means):
        raise ValueError(f"Got {len(clusters)} clusters but {len(means)} means")
    return sum(
        distance(p, mean) ** 2
        for cluster, mean in zip(clusters, means)
        for p in cluster
    )
