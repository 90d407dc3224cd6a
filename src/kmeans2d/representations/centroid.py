"""
Centroid representation for k-means clustering.

A cluster represented by a single mean point in the plane.
"""

from typing import Dict, Optional
from torch import Tensor

from .base_representation import BaseRepresentation
from ..distances.euclidean import EuclideanDistance
from ..updates.mean import truncated_mean


class CentroidRepresentation(BaseRepresentation):
    """Cluster represented by a single centroid point."""

    metric = EuclideanDistance(squared=True)

    def distance_to_point(self, points: Tensor, indices: Optional[Tensor] = None) -> Tensor:
        """Compute squared Euclidean distance from points to centroid.

        Squared distances order points exactly like the plain distance, so
        nearest-mean decisions are unaffected.

        Args:
            points: (n, 2) tensor of data points
            indices: Ignored for centroid representation

        Returns:
            (n,) tensor of squared Euclidean distances
        """
        self._check_points_shape(points)
        return self.metric.compute(points, self)

    def update_from_points(self, points: Tensor, **kwargs) -> None:
        """Replace the centroid by the truncated mean of assigned points.

        Args:
            points: (n, 2) tensor of assigned points, n > 0

        Raises:
            DivisionByEmptyCluster: If no points are given
        """
        self._check_points_shape(points)
        self._mean = truncated_mean(points).to(device=self._device, dtype=self._dtype)

    def get_parameters(self) -> Dict[str, Tensor]:
        """Return parameters defining this centroid."""
        return {'mean': self._mean.clone()}

    def set_parameters(self, params: Dict[str, Tensor]) -> None:
        """Set centroid parameters."""
        if 'mean' in params:
            self.mean = params['mean']

    def __repr__(self) -> str:
        return f"CentroidRepresentation(mean={self._mean.tolist()})"
