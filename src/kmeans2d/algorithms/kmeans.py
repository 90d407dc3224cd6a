"""
K-means clustering algorithm.

Lloyd's k-means for 2D points implemented using the modular framework.
"""

from typing import Optional, List, Union, Sequence
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import ClusterRepresentation, ClusteringObjective
from ..base.data_structures import Cluster
from ..base.errors import InvalidInput
from ..assignments.hard import HardAssignment
from ..initialization.random import RandomInit
from ..initialization.from_previous import FromPreviousInit
from ..utils.convergence import MeanSetUnchanged
from ..updates.mean import MeanUpdater


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to means."""

    def compute(self, points: Tensor, representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute within-cluster sum of squares."""
        total = torch.zeros((), dtype=torch.float64, device=points.device)

        for k, rep in enumerate(representations):
            cluster_points_mask = (assignments == k)
            if cluster_points_mask.any():
                cluster_points = points[cluster_points_mask]
                total = total + rep.distance_to_point(cluster_points).sum()

        return total


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions 2D points into at most K clusters by alternating nearest-mean
    assignment with truncated-centroid updates until the set of means stops
    changing.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str or array-like, default='random'
        Initialization method:
        - 'random' : distinct random points from the data
        - array of shape (n_clusters, 2) : Use as initial means
    max_iter : int, optional
        Cap on refinement steps; None runs until convergence
    empty_cluster : {'drop', 'keep'}, default='drop'
        Policy for means that end up owning no points
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducible initialization
    device : torch.device, optional
        Device for computation

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (m, 2)
        Means the final clusters were built from, m <= n_clusters
    labels_ : Tensor of shape (n_samples,)
        Index into ``cluster_centers_`` for each training point
    clusters_ : list of tuple of Point
        Final non-empty clusters
    inertia_ : float
        Sum of squared distances to the owning mean
    n_iter_ : int
        Number of refinement steps run
    """

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, Sequence, Tensor] = 'random',
                 max_iter: Optional[int] = None,
                 empty_cluster: str = 'drop',
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            empty_cluster=empty_cluster,
            verbose=verbose,
            random_state=random_state,
            device=device
        )
        self.init = init

        self.labels_ = None

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()

        if isinstance(self.init, str):
            if self.init == 'random':
                self.initialization_strategy = RandomInit(self.random_state)
            else:
                raise InvalidInput(f"Unknown init method: {self.init}")
        else:
            self.initialization_strategy = FromPreviousInit(self.init)

        self.convergence_criterion = MeanSetUnchanged()
        self.objective = KMeansObjective()

    def _create_representations(self, data: Tensor) -> List[ClusterRepresentation]:
        """Create centroid representations from the initialization strategy."""
        return self.initialization_strategy.initialize(data, self.n_clusters)

    def fit(self, X, y=None) -> 'KMeans':
        """Fit K-means clustering.

        Parameters
        ----------
        X : array-like of shape (n_samples, 2)
            Training points
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        super().fit(X, y)
        self.labels_ = self.assignment_.labels
        return self

    def fit_predict(self, X, y=None) -> Tensor:
        """Fit and return labels."""
        self.fit(X, y)
        return self.labels_

    def get_params(self, deep: bool = True):
        params = super().get_params(deep)
        params['init'] = self.init
        return params


def clusters(n_clusters: int, points,
             initial_means=None,
             random_state: Optional[Union[int, torch.Generator]] = None,
             max_iter: Optional[int] = None,
             empty_cluster: str = 'drop') -> List[Cluster]:
    """Cluster ``points`` into at most ``n_clusters`` groups.

    Args:
        n_clusters: Number of clusters
        points: Sequence of (x, y) pairs or (n, 2) array
        initial_means: Optional starting means; random distinct points
            from the data otherwise
        random_state: Seed or generator for the random starting means
        max_iter: Optional cap on refinement steps
        empty_cluster: 'drop' or 'keep' for means that own no points

    Returns:
        List of clusters, each a tuple of points
    """
    model = KMeans(
        n_clusters=n_clusters,
        init='random' if initial_means is None else initial_means,
        max_iter=max_iter,
        empty_cluster=empty_cluster,
        random_state=random_state
    )
    return model.fit(points).clusters_
