"""
Error types raised by the clustering components.
"""


class InvalidInput(ValueError):
    """Raised when a component is called with arguments it cannot work with.

    Covers an empty sequence of means, a number of clusters that cannot be
    drawn from the data, and malformed point data.
    """


class DivisionByEmptyCluster(ZeroDivisionError):
    """Raised when a centroid is requested for a cluster with no points."""
