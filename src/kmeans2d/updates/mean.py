"""
Mean update strategy for centroid-based clustering.

Centroids are averaged per axis and truncated toward zero, so a mean always
lands on integral coordinates.
"""

import math
from functools import reduce
from typing import Iterable, Sequence
import torch
from torch import Tensor

from ..base.interfaces import ParameterUpdater, ClusterRepresentation
from ..base.data_structures import Point
from ..base.errors import DivisionByEmptyCluster


def add_points(p: Sequence, q: Sequence) -> Point:
    """Add two points coordinate-wise."""
    return Point(p[0] + q[0], p[1] + q[1])


def sum_points(points: Iterable[Sequence]) -> Point:
    """Sum a sequence of points, starting from the origin."""
    return reduce(add_points, points, Point(0, 0))


def _truncating_div(total, count: int) -> int:
    if isinstance(total, int):
        # Exact for arbitrarily large integers
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient
    return math.trunc(total / count)


def centroid(cluster: Sequence[Sequence]) -> Point:
    """Average point of a cluster, truncated toward zero on each axis.

    Args:
        cluster: Non-empty sequence of (x, y) points

    Returns:
        Point with integral coordinates

    Raises:
        DivisionByEmptyCluster: If ``cluster`` has no points
    """
    count = len(cluster)
    if count == 0:
        raise DivisionByEmptyCluster("Cannot compute the centroid of an empty cluster")
    x, y = sum_points(cluster)
    return Point(_truncating_div(x, count), _truncating_div(y, count))


def truncated_mean(points: Tensor) -> Tensor:
    """Tensor version of :func:`centroid`.

    Args:
        points: (n, 2) tensor with n > 0

    Returns:
        (2,) tensor of the same dtype as ``points``
    """
    count = points.shape[0]
    if count == 0:
        raise DivisionByEmptyCluster("Cannot compute the centroid of an empty cluster")
    total = points.sum(dim=0)
    if points.is_floating_point():
        return torch.trunc(total / count)
    return torch.div(total, count, rounding_mode='trunc')


class MeanUpdater(ParameterUpdater):
    """Updates cluster representation by computing mean of assigned points."""

    def update(self, representation: ClusterRepresentation,
               points: Tensor,
               **kwargs) -> None:
        """Update cluster mean.

        Args:
            representation: Cluster representation to update
            points: Points assigned to this cluster (already filtered)
            **kwargs: Ignored
        """
        representation.update_from_points(points, **kwargs)
