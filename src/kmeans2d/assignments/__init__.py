"""Assignment strategies for clustering algorithms."""

from .hard import HardAssignment, nearest_mean, partition

__all__ = [
    'HardAssignment',
    'nearest_mean',
    'partition'
]
