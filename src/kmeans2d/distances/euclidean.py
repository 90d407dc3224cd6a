"""
Euclidean distance metric for clustering.

The only metric k-means needs: straight-line distance in the plane.
"""

import math
from typing import Sequence

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric, ClusterRepresentation


def distance(p: Sequence[float], q: Sequence[float]) -> float:
    """Euclidean distance between two points.

    Args:
        p: (x, y) pair
        q: (x, y) pair

    Returns:
        sqrt((x1 - x2)^2 + (y1 - y2)^2)
    """
    (x1, y1), (x2, y2) = p, q
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def squared_distances(points: Tensor, center: Tensor) -> Tensor:
    """Squared distances from each row of ``points`` to ``center``.

    Integral inputs are promoted to float64 so large coordinates stay exact.

    Args:
        points: (n, 2) tensor of points
        center: (2,) tensor

    Returns:
        (n,) tensor of squared distances
    """
    if not points.is_floating_point():
        points = points.double()
    center = center.to(dtype=points.dtype, device=points.device)
    diff = points - center.unsqueeze(0)
    return torch.sum(diff * diff, dim=1)


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||x - μ|| (or its square) where μ is the cluster mean.
    """

    def __init__(self, squared: bool = True):
        """
        Args:
            squared: If True, return squared distances (default).
                    If False, return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, representation: ClusterRepresentation,
                **kwargs) -> Tensor:
        """Compute Euclidean distances from points to cluster mean.

        Args:
            points: (n, 2) tensor of points
            representation: Cluster representation with 'mean' parameter

        Returns:
            (n,) tensor of distances
        """
        params = representation.get_parameters()
        if 'mean' not in params:
            raise ValueError("Euclidean distance requires representation with 'mean' parameter")

        squared = squared_distances(points, params['mean'])

        if self.squared:
            return squared
        else:
            return torch.sqrt(squared)
