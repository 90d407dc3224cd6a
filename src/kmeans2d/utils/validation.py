"""
Input validation utilities.

Provides functions for validating point data and clustering parameters before
the refinement loop runs, converting everything to tensors on the way.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import numpy as np

from ..base.errors import InvalidInput


EMPTY_CLUSTER_POLICIES = ('drop', 'keep')


def validate_points(X: Union[Tensor, np.ndarray, list, tuple],
                    device: Optional[torch.device] = None,
                    ensure_min_samples: int = 1) -> Tensor:
    """Validate and convert 2D point data to an (n, 2) tensor.

    Integral input becomes int64 so truncating centroids stay exact; any
    other numeric input becomes float64.

    Args:
        X: Points as a tensor, numpy array, or sequence of (x, y) pairs
        device: Target device
        ensure_min_samples: Minimum number of points required

    Returns:
        Validated (n, 2) tensor

    Raises:
        InvalidInput: If the data is not an (n, 2) array of finite numbers
    """
    if isinstance(X, Tensor):
        pass
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(X)
    elif isinstance(X, (list, tuple)):
        try:
            X = torch.from_numpy(np.asarray(X))
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Cannot convert points to an array: {e}") from e
    else:
        raise InvalidInput(f"Cannot convert {type(X)} to tensor")

    if X.dtype == torch.bool or X.is_complex():
        raise InvalidInput(f"Expected numeric coordinates, got {X.dtype}")
    if X.is_floating_point():
        X = X.to(dtype=torch.float64)
    else:
        X = X.to(dtype=torch.int64)

    if X.dim() != 2 or X.shape[1] != 2:
        raise InvalidInput(f"Expected an (n, 2) array of points, got shape {tuple(X.shape)}")

    n_samples = X.shape[0]
    if n_samples < ensure_min_samples:
        raise InvalidInput(f"Found {n_samples} points, but need at least "
                           f"{ensure_min_samples}")

    if X.is_floating_point():
        if torch.isnan(X).any():
            raise InvalidInput("Input contains NaN values")
        if torch.isinf(X).any():
            raise InvalidInput("Input contains infinite values")

    if device is not None:
        X = X.to(device)

    return X


def count_distinct(points: Tensor) -> int:
    """Number of distinct rows in an (n, 2) tensor."""
    if points.shape[0] == 0:
        return 0
    return torch.unique(points, dim=0).shape[0]


def check_n_clusters(n_clusters: int, n_distinct: int) -> None:
    """Check that ``n_clusters`` distinct means can be drawn from the data.

    Args:
        n_clusters: Requested number of clusters
        n_distinct: Number of distinct points available

    Raises:
        InvalidInput: If n_clusters is not a positive integer or exceeds
            the number of distinct points
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise InvalidInput(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters < 1:
        raise InvalidInput(f"n_clusters must be >= 1, got {n_clusters}")

    if n_clusters > n_distinct:
        raise InvalidInput(f"n_clusters={n_clusters} cannot be larger than the "
                           f"number of distinct points={n_distinct}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None
    """
    if random_state is None:
        return None
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def check_empty_cluster_policy(policy: str) -> str:
    """Validate the policy applied to means that own no points."""
    if policy not in EMPTY_CLUSTER_POLICIES:
        raise InvalidInput(f"empty_cluster must be one of {EMPTY_CLUSTER_POLICIES}, "
                           f"got {policy!r}")
    return policy
