"""
Core interfaces for the k-means components.

This module defines the abstract base classes each step of the refinement
loop implements, so the loop in ``clustering_base`` can be written once
against them.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
import torch
from torch import Tensor


class ClusterRepresentation(ABC):
    """Abstract base class for cluster representations.

    For k-means a cluster is represented by its mean alone.
    """

    @abstractmethod
    def distance_to_point(self, points: Tensor, indices: Optional[Tensor] = None) -> Tensor:
        """Compute distance from points to this cluster representation.

        Args:
            points: (n, 2) tensor of data points
            indices: Optional (n,) tensor of point indices for tracking

        Returns:
            (n,) tensor of distances
        """
        pass

    @abstractmethod
    def update_from_points(self, points: Tensor, **kwargs) -> None:
        """Update cluster parameters given assigned points.

        Args:
            points: (n, 2) tensor of assigned points
            **kwargs: Additional update-specific parameters
        """
        pass

    @abstractmethod
    def get_parameters(self) -> Dict[str, Tensor]:
        """Return all parameters defining this cluster representation."""
        pass

    @abstractmethod
    def set_parameters(self, params: Dict[str, Tensor]) -> None:
        """Set cluster parameters from dictionary."""
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        pass

    @abstractmethod
    def to(self, device: torch.device) -> 'ClusterRepresentation':
        """Move representation to specified device."""
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor,
                            representations: List[ClusterRepresentation],
                            **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, 2) tensor of data points
            representations: List of cluster representations
            **kwargs: Strategy-specific parameters

        Returns:
            (n,) tensor of indices into ``representations``
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for cluster parameter update strategies."""

    @abstractmethod
    def update(self, representation: ClusterRepresentation,
               points: Tensor,
               **kwargs) -> None:
        """Update cluster parameters from the points assigned to it.

        Args:
            representation: Cluster representation to update
            points: (n, 2) tensor of the cluster's points
            **kwargs: Update-specific parameters
        """
        pass


class DistanceMetric(ABC):
    """Abstract base class for distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, representation: ClusterRepresentation,
                **kwargs) -> Tensor:
        """Compute distances from points to cluster.

        Args:
            points: (n, 2) tensor of points
            representation: Cluster representation
            **kwargs: Metric-specific parameters

        Returns:
            (n,) tensor of distances
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster initialization strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize cluster representations.

        Args:
            points: (n, 2) tensor of data points
            n_clusters: Number of clusters to initialize
            **kwargs: Strategy-specific parameters

        Returns:
            List of initialized cluster representations
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def compute(self, points: Tensor,
                representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute objective function value.

        Args:
            points: (n, 2) tensor of data points
            representations: List of cluster representations
            assignments: (n,) hard cluster assignments

        Returns:
            Scalar objective value
        """
        pass
