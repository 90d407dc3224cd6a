"""Utility functions for k-means clustering."""

from .convergence import MeanSetUnchanged

from .metrics import (
    inertia,
    within_cluster_sq_distance
)

from .validation import (
    validate_points,
    count_distinct,
    check_n_clusters,
    check_random_state,
    check_empty_cluster_policy
)

__all__ = [
    # Convergence criteria
    'MeanSetUnchanged',

    # Metrics
    'inertia',
    'within_cluster_sq_distance',

    # Validation
    'validate_points',
    'count_distinct',
    'check_n_clusters',
    'check_random_state',
    'check_empty_cluster_policy'
]
