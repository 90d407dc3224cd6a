# tests/test_validation.py
"""
Point validation and parameter checks.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from kmeans2d import InvalidInput
from kmeans2d.utils.validation import (
    validate_points,
    count_distinct,
    check_n_clusters,
    check_random_state,
    check_empty_cluster_policy,
)


def test_integer_lists_become_int64():
    X = validate_points([(0, 0), (1, 2)])
    assert X.dtype == torch.int64
    assert X.shape == (2, 2)


def test_float_lists_become_float64():
    X = validate_points([(0.5, 0), (1, 2)])
    assert X.dtype == torch.float64


def test_numpy_and_tensor_inputs():
    assert validate_points(np.array([[1, 2]], dtype=np.int32)).dtype == torch.int64
    assert validate_points(torch.tensor([[1.0, 2.0]], dtype=torch.float32)).dtype == torch.float64


@pytest.mark.parametrize("bad", [
    [],
    [(1, 2, 3)],
    [1, 2],
    [(1, 2), (3,)],
    [("a", "b")],
    [(float("nan"), 0.0)],
    [(float("inf"), 0.0)],
    [(True, False)],
])
def test_malformed_points_rejected(bad):
    with pytest.raises(InvalidInput):
        validate_points(bad)


def test_unsupported_type_rejected():
    with pytest.raises(InvalidInput):
        validate_points("0 0")


def test_count_distinct():
    X = validate_points([(0, 0), (0, 0), (1, 1)])
    assert count_distinct(X) == 2


def test_check_n_clusters():
    check_n_clusters(2, 2)
    with pytest.raises(InvalidInput):
        check_n_clusters(3, 2)
    with pytest.raises(InvalidInput):
        check_n_clusters(0, 2)
    with pytest.raises(InvalidInput):
        check_n_clusters(1.5, 2)


def test_check_random_state():
    assert check_random_state(None) is None
    g = torch.Generator()
    assert check_random_state(g) is g
    assert isinstance(check_random_state(3), torch.Generator)
    with pytest.raises(TypeError):
        check_random_state("seed")


def test_check_empty_cluster_policy():
    assert check_empty_cluster_policy("drop") == "drop"
    assert check_empty_cluster_policy("keep") == "keep"
    with pytest.raises(InvalidInput):
        check_empty_cluster_policy("reseed")
