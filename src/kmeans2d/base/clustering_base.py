"""
Base class for the k-means refinement loop.

Provides the algorithmic skeleton that alternates between the assignment
step (every point to its nearest mean) and the update step (every mean to
the centroid of its points) until the set of means stops changing.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Union
import torch
from torch import Tensor
import time
import warnings

from .interfaces import (
    ClusterRepresentation, AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion, ClusteringObjective
)
from .data_structures import (
    ClusterState, ClusterAssignment, AlgorithmState, Cluster
)
from ..utils.validation import validate_points, check_empty_cluster_policy
from ..utils.metrics import inertia


class BaseClusteringAlgorithm:
    """Base class implementing the assign/update refinement loop.

    Subclasses need to specify:
    - Cluster representation type
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Convergence criterion
    - Objective function

    The loop has two states. While RUNNING it recomputes every mean from its
    cluster and compares the new means with the current ones as a set; if
    they differ the points are re-partitioned and the loop goes on. Once they
    match it is CONVERGED and the clusters built from the current means are
    the result.
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: Optional[int] = None,
                 empty_cluster: str = 'drop',
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Optional cap on refinement steps (None runs until
                convergence)
            empty_cluster: What to do with a mean that owns no points:
                'drop' removes it, 'keep' carries it over unchanged
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or generator for reproducible initialization
            device: Torch device (None for CPU)
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.empty_cluster = empty_cluster
        self.verbose = verbose
        self.random_state = random_state

        if device is None:
            self.device = torch.device('cpu')
        else:
            self.device = device

        # These will be set by subclasses
        self.representations: Optional[List[ClusterRepresentation]] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None
        self.objective: Optional[ClusteringObjective] = None

        # Algorithm state
        self.fitted_ = False
        self.converged_ = False
        self.n_iter_ = 0
        self.history_: List[AlgorithmState] = []
        self.assignment_: Optional[ClusterAssignment] = None

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.convergence_criterion
        - self.objective
        """
        pass

    @abstractmethod
    def _create_representations(self, data: Tensor) -> List[ClusterRepresentation]:
        """Create the initial cluster representations.

        Args:
            data: (n, 2) data tensor

        Returns:
            List of K cluster representations
        """
        pass

    def fit(self, X, y=None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, 2) points
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        return self._fit(X)

    def fit_predict(self, X, y=None) -> Tensor:
        """Fit and return cluster assignments.

        Args:
            X: (n, 2) points
            y: Ignored

        Returns:
            (n,) tensor of indices into ``cluster_centers_``
        """
        self._fit(X)
        return self.assignment_.labels

    def predict(self, X) -> Tensor:
        """Predict cluster assignments for new data.

        Args:
            X: (n, 2) points

        Returns:
            (n,) tensor of indices into ``cluster_centers_``
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        X = self._validate_data(X)
        return self.assignment_strategy.compute_assignments(X, self.representations)

    def _assign(self, X: Tensor) -> ClusterAssignment:
        """Assignment step: group every point under its nearest mean."""
        labels = self.assignment_strategy.compute_assignments(X, self.representations)
        return ClusterAssignment(X, self._stack_means(), labels)

    def _update(self, X: Tensor, assignment: ClusterAssignment) -> List[ClusterRepresentation]:
        """Update step: new representations from the current clusters.

        The current representations are left untouched. New means follow the
        cluster order of ``assignment``; means kept under the 'keep' policy
        go last, in their previous order.
        """
        updated = []
        for k in assignment.occupied():
            new_representation = self.representations[k].clone()
            self.update_strategy.update(new_representation, X[assignment.get_cluster_indices(k)])
            updated.append(new_representation)

        empty = assignment.empty()
        if self.empty_cluster == 'keep':
            updated.extend(self.representations[k].clone() for k in empty)
        elif empty and self.verbose:
            warnings.warn(f"Dropped {len(empty)} mean(s) that own no points: "
                          f"{[assignment.means[k].tolist() for k in empty]}")

        return updated

    def _fit(self, X) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the refinement loop."""
        X = self._validate_data(X)
        check_empty_cluster_policy(self.empty_cluster)

        self._create_components()

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        start_time = time.time()
        self.representations = self._create_representations(X)

        self.n_iter_ = 0
        self.history_ = []
        self.converged_ = False
        self.convergence_criterion.reset()

        # RUNNING: clusters for the initial means
        assignment = self._assign(X)
        iteration = 0

        while self.max_iter is None or iteration < self.max_iter:
            iter_start_time = time.time()

            objective_value = self.objective.compute(
                X, self.representations, assignment.labels
            ).item()

            new_representations = self._update(X, assignment)
            new_means = torch.stack([
                rep.get_parameters()['mean'] for rep in new_representations
            ])

            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'means': assignment.means,
                'new_means': new_means,
                'objective': objective_value
            })

            self.history_.append(AlgorithmState(
                iteration=iteration,
                cluster_state=ClusterState(
                    means=assignment.means,
                    n_clusters=assignment.n_means
                ),
                assignments=assignment,
                objective_value=objective_value,
                converged=converged
            ))
            self.n_iter_ = iteration + 1

            iter_time = time.time() - iter_start_time
            if self.verbose >= 2:
                print(f"Iteration {iteration:3d}: objective = {objective_value:.6f} "
                      f"↓ {len(assignment)} clusters ({iter_time:.3f}s)")

            if converged:
                # CONVERGED: the result is built from the current means
                self.converged_ = True
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

            # Still RUNNING: re-partition against the recomputed means
            self.representations = new_representations
            assignment = self._assign(X)
            iteration += 1

        total_time = time.time() - start_time

        if not self.converged_:
            warnings.warn(f"Failed to converge after {self.max_iter} iterations")

        if self.verbose:
            print(f"Total fitting time: {total_time:.3f}s")

        self.assignment_ = assignment
        self.fitted_ = True
        return self

    def _validate_data(self, X) -> Tensor:
        """Validate and prepare input points."""
        return validate_points(X, device=self.device)

    def _stack_means(self) -> Tensor:
        return torch.stack([
            rep.get_parameters()['mean']
            for rep in self.representations
        ])

    def _extract_cluster_state(self) -> ClusterState:
        """Extract current means into a ClusterState object."""
        means = self._stack_means()
        return ClusterState(means=means, n_clusters=means.shape[0])

    @property
    def cluster_centers_(self) -> Tensor:
        """Means the final clusters were built from."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self._extract_cluster_state().means

    @property
    def clusters_(self) -> List[Cluster]:
        """Final non-empty clusters."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self.assignment_.clusters

    @property
    def inertia_(self) -> float:
        """Objective value of the final clusters."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return inertia(self.assignment_.points, self.assignment_.labels, self.cluster_centers_)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'empty_cluster': self.empty_cluster,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            setattr(self, key, value)
        return self
