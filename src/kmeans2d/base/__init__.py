"""Base classes and interfaces for k-means clustering."""

from .errors import InvalidInput, DivisionByEmptyCluster

from .interfaces import (
    ClusterRepresentation,
    AssignmentStrategy,
    ParameterUpdater,
    DistanceMetric,
    InitializationStrategy,
    ConvergenceCriterion,
    ClusteringObjective
)

from .data_structures import (
    Point,
    Cluster,
    to_point,
    to_points,
    ClusterState,
    ClusterAssignment,
    AlgorithmState
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Errors
    'InvalidInput',
    'DivisionByEmptyCluster',

    # Interfaces
    'ClusterRepresentation',
    'AssignmentStrategy',
    'ParameterUpdater',
    'DistanceMetric',
    'InitializationStrategy',
    'ConvergenceCriterion',
    'ClusteringObjective',

    # Data structures
    'Point',
    'Cluster',
    'to_point',
    'to_points',
    'ClusterState',
    'ClusterAssignment',
    'AlgorithmState',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
