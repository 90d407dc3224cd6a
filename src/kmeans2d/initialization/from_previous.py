"""
Initialization from caller-supplied means.

Useful for warm starts and for reproducing a run from known starting means.
"""

from typing import List, Union, Sequence
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..base.data_structures import ClusterState
from ..base.errors import InvalidInput
from ..representations.centroid import CentroidRepresentation
from ..utils.validation import validate_points


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous cluster means or custom starting points.

    Accepts either:
    - An (n_clusters, 2) tensor or array, or a sequence of (x, y) pairs
    - A ClusterState object from a previous run
    """

    def __init__(self, initial_state: Union[Tensor, ClusterState, Sequence]):
        """
        Args:
            initial_state: Previous solution to use for initialization
        """
        self.initial_state = initial_state

    def initialize(self, points: Tensor, n_clusters: int,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize from the stored means.

        Args:
            points: (n, 2) data points (used for dtype and device)
            n_clusters: Expected number of clusters

        Returns:
            List of initialized representations
        """
        dimension = points.shape[1]
        device = points.device

        if isinstance(self.initial_state, ClusterState):
            means = validate_points(self.initial_state.means, device=device)
        else:
            means = validate_points(self.initial_state, device=device)

        if means.shape[0] != n_clusters:
            raise InvalidInput(f"Initial means has {means.shape[0]} clusters, "
                               f"but n_clusters={n_clusters}")

        # Fractional starting means on integral data must not be truncated
        dtype = torch.promote_types(points.dtype, means.dtype)

        representations = []
        for k in range(n_clusters):
            rep = CentroidRepresentation(dimension, device, dtype)
            rep.mean = means[k].clone()
            representations.append(rep)

        return representations
