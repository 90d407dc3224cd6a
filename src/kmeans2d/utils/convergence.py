"""
Convergence criteria for the refinement loop.

k-means stops once recomputing the means reproduces the same set of means.
"""

from typing import Dict, Any
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion
from ..base.data_structures import to_points


class MeanSetUnchanged(ConvergenceCriterion):
    """Converged when the recomputed means equal the current ones as a set.

    The comparison ignores order and collapses duplicates, so two means that
    swap places or merge into an existing one still count as unchanged.
    """

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Compare ``current_state['means']`` with ``current_state['new_means']``.

        Both entries are (m, 2) tensors; the counts may differ when means
        were dropped.
        """
        means = self._as_set(current_state['means'])
        new_means = self._as_set(current_state['new_means'])

        converged = means == new_means

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_means': len(new_means),
            'n_moved': len(new_means - means),
            'converged': converged
        })

        return converged

    @staticmethod
    def _as_set(means) -> frozenset:
        if isinstance(means, Tensor):
            return frozenset(to_points(means))
        return frozenset(tuple(m) for m in means)
