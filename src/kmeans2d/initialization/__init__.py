"""Initialization strategies for clustering algorithms."""

from .random import RandomInit, pick_distinct
from .from_previous import FromPreviousInit

__all__ = [
    'RandomInit',
    'FromPreviousInit',
    'pick_distinct'
]
