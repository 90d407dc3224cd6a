"""
Random initialization strategy for clustering algorithms.

Selects distinct random points from the dataset as initial cluster means.
"""

from typing import List, Optional, Union
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..base.data_structures import Point, to_points
from ..representations.centroid import CentroidRepresentation
from ..utils.validation import (
    validate_points, count_distinct, check_n_clusters, check_random_state
)


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Walks a random permutation of the points and keeps the first
    ``n_clusters`` distinct values. Each pick is proportional to how often a
    not-yet-chosen value occurs in the data, the same distribution as
    drawing uniformly and rejecting repeats, but it always terminates.
    """

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            random_state: Seed or generator; None uses torch's global RNG
        """
        self.generator = check_random_state(random_state)

    def select_indices(self, points: Tensor, n_clusters: int) -> Tensor:
        """Pick indices of ``n_clusters`` points with pairwise distinct values.

        Raises:
            InvalidInput: If there are fewer distinct points than n_clusters
        """
        check_n_clusters(n_clusters, count_distinct(points))

        order = torch.randperm(points.shape[0], generator=self.generator)
        rows = points.tolist()

        chosen = []
        seen = set()
        for idx in order.tolist():
            value = tuple(rows[idx])
            if value in seen:
                continue
            seen.add(value)
            chosen.append(idx)
            if len(chosen) == n_clusters:
                break

        return torch.tensor(chosen, dtype=torch.long, device=points.device)

    def initialize(self, points: Tensor, n_clusters: int,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize clusters with random distinct points.

        Args:
            points: (n, 2) data points
            n_clusters: Number of clusters

        Returns:
            List of initialized CentroidRepresentations
        """
        n_points, dimension = points.shape
        device = points.device

        indices = self.select_indices(points, n_clusters)

        representations = []
        for idx in indices:
            rep = CentroidRepresentation(dimension, device, points.dtype)
            rep.mean = points[idx].clone()
            representations.append(rep)

        return representations


def pick_distinct(n_clusters: int, points,
                  random_state: Optional[Union[int, torch.Generator]] = None) -> List[Point]:
    """Randomly pick ``n_clusters`` distinct points from ``points``.

    Args:
        n_clusters: Number of points to pick
        points: Sequence of (x, y) pairs or (n, 2) array
        random_state: Seed or generator for reproducible picks

    Returns:
        List of distinct points
    """
    X = validate_points(points)
    indices = RandomInit(random_state).select_indices(X, n_clusters)
    return to_points(X[indices])
