"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest mean. When several means are equally
close, the first of them in the given order wins.
"""

from typing import Dict, List, Sequence
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, ClusterRepresentation
from ..base.data_structures import Point, Cluster, to_point
from ..base.errors import InvalidInput
from ..distances.euclidean import distance


def _nearest_index(p: Sequence, means: Sequence[Sequence]) -> int:
    # min() keeps the first minimal element on ties
    return min(range(len(means)), key=lambda k: distance(p, means[k]))


def nearest_mean(p: Sequence, means: Sequence[Sequence]) -> Point:
    """Return the mean closest to ``p``.

    Args:
        p: (x, y) point
        means: Non-empty sequence of (x, y) means

    Returns:
        The closest mean; the earliest one when distances tie

    Raises:
        InvalidInput: If ``means`` is empty
    """
    means = list(means)
    if not means:
        raise InvalidInput("Cannot find the nearest mean among zero means")
    return to_point(means[_nearest_index(p, means)])


def partition(means: Sequence[Sequence], points: Sequence[Sequence]) -> List[Cluster]:
    """Group every point under its nearest mean.

    Args:
        means: Non-empty sequence of (x, y) means
        points: Sequence of (x, y) points

    Returns:
        Non-empty clusters in the order their first point appears in
        ``points``; points keep their input order. Means that attract no
        point produce no cluster.

    Raises:
        InvalidInput: If ``means`` is empty
    """
    means = list(means)
    if not means:
        raise InvalidInput("Cannot partition points among zero means")

    groups: Dict[int, List[Point]] = {}
    for p in points:
        groups.setdefault(_nearest_index(p, means), []).append(to_point(p))

    return [tuple(group) for group in groups.values()]


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance.
    """

    def compute_assignments(self, points: Tensor,
                            representations: List[ClusterRepresentation],
                            **kwargs) -> Tensor:
        """Assign each point to nearest cluster.

        Args:
            points: (n, 2) data points
            representations: List of cluster representations
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) tensor of cluster indices
        """
        if not representations:
            raise InvalidInput("Cannot assign points to zero clusters")

        n_points = points.shape[0]
        n_clusters = len(representations)

        distances = torch.zeros(n_points, n_clusters, device=points.device, dtype=torch.float64)

        for k, representation in enumerate(representations):
            distances[:, k] = representation.distance_to_point(points)

        # argmin returns the first minimal index on ties
        return torch.argmin(distances, dim=1)
