"""
Core data structures for 2D k-means clustering.

Points and means travel through the public API as immutable ``Point`` values,
while the refinement loop works on (n, 2) tensors. This module provides the
conversions between the two and the containers that store one iteration's
means and assignments.
"""

from typing import List, Tuple, Dict, Any, NamedTuple, Union, Sequence
import torch
from torch import Tensor
from dataclasses import dataclass, field


class Point(NamedTuple):
    """An (x, y) coordinate pair. Equality and hashing are by value."""
    x: Union[int, float]
    y: Union[int, float]


# A cluster is a non-empty, ordered group of points sharing one mean
Cluster = Tuple[Point, ...]


def to_point(values: Union[Tensor, Sequence]) -> Point:
    """Convert a length-2 tensor row or sequence into a ``Point``.

    Integral tensors yield ``int`` coordinates, everything else ``float``.
    """
    if isinstance(values, Tensor):
        if values.shape != (2,):
            raise ValueError(f"Expected a (2,) tensor, got shape {tuple(values.shape)}")
        if values.dtype.is_floating_point:
            return Point(float(values[0].item()), float(values[1].item()))
        return Point(int(values[0].item()), int(values[1].item()))
    x, y = values
    return Point(x, y)


def to_points(rows: Tensor) -> List[Point]:
    """Convert an (n, 2) tensor into a list of points."""
    return [to_point(row) for row in rows]


@dataclass
class ClusterState:
    """Means held by the algorithm at a given iteration.

    The number of means may be smaller than the requested number of clusters
    once means that own no points have been dropped.
    """

    means: Tensor  # (m, 2) cluster means
    n_clusters: int
    dimension: int = 2

    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        assert self.means.shape == (self.n_clusters, self.dimension)


class ClusterAssignment:
    """Grouping of every point under one mean for a single iteration.

    Holds the (n,) hard labels indexing into ``means`` and exposes the
    resulting clusters. Means with no assigned points produce no cluster, so
    ``len(assignment)`` may be smaller than the number of means.
    """

    def __init__(self, points: Tensor, means: Tensor, labels: Tensor):
        """
        Args:
            points: (n, 2) data points
            means: (m, 2) means the points were assigned to
            labels: (n,) index of the mean owning each point
        """
        assert labels.dim() == 1 and labels.shape[0] == points.shape[0]
        if labels.numel() > 0:
            assert labels.min() >= 0
            assert labels.max() < means.shape[0]

        self.points = points
        self.means = means
        self.labels = labels.long()

    @property
    def n_points(self) -> int:
        return self.labels.shape[0]

    @property
    def n_means(self) -> int:
        return self.means.shape[0]

    def get_cluster_indices(self, mean_idx: int) -> Tensor:
        """Indices of the points assigned to a specific mean."""
        return torch.where(self.labels == mean_idx)[0]

    def count_per_mean(self) -> Tensor:
        """Number of points owned by each mean (zero for empty means)."""
        return torch.bincount(self.labels, minlength=self.n_means)

    def occupied(self) -> List[int]:
        """Indices of the means that own at least one point.

        Ordered by where each cluster's first point sits in the input, which
        is the order grouping the points one at a time discovers them. The
        next iteration's means inherit this order, and with it the
        tie-breaking of the following assignment step.
        """
        return list(dict.fromkeys(self.labels.tolist()))

    def empty(self) -> List[int]:
        """Indices of the means that own no points."""
        counts = self.count_per_mean()
        return [k for k in range(self.n_means) if counts[k] == 0]

    @property
    def clusters(self) -> List[Cluster]:
        """Non-empty clusters ordered by their first point, points in input order."""
        return [
            tuple(to_points(self.points[self.get_cluster_indices(k)]))
            for k in self.occupied()
        ]

    def cluster_labels(self) -> Tensor:
        """Per-point position of the owning cluster within ``clusters``."""
        remap = torch.full((self.n_means,), -1, dtype=torch.long, device=self.labels.device)
        for position, k in enumerate(self.occupied()):
            remap[k] = position
        return remap[self.labels]

    def as_dict(self) -> Dict[Point, Cluster]:
        """Mapping from each occupied mean to its cluster."""
        return {
            to_point(self.means[k]): cluster
            for k, cluster in zip(self.occupied(), self.clusters)
        }

    def __len__(self) -> int:
        return len(self.occupied())

    def __iter__(self):
        return iter(self.clusters)

    def __repr__(self) -> str:
        return (f"ClusterAssignment(n_points={self.n_points}, n_means={self.n_means}, "
                f"n_clusters={len(self)})")


@dataclass
class AlgorithmState:
    """State of the refinement loop at one iteration.

    ``cluster_state`` holds the means the points were assigned to and
    ``assignments`` the resulting grouping.
    """
    iteration: int
    cluster_state: ClusterState
    assignments: ClusterAssignment
    objective_value: float

    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)
