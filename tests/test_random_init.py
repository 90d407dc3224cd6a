# tests/test_random_init.py
"""
Random distinct-point initialization and caller-supplied means.
"""

from __future__ import annotations

import pytest
import torch

from kmeans2d import InvalidInput
from kmeans2d.initialization import RandomInit, FromPreviousInit, pick_distinct
from kmeans2d.representations import CentroidRepresentation
from kmeans2d.utils.validation import validate_points


def test_pick_distinct_returns_distinct_members(two_groups):
    picks = pick_distinct(3, two_groups, random_state=0)
    assert len(picks) == 3
    assert len(set(picks)) == 3
    assert set(picks) <= set(two_groups)


def test_pick_distinct_skips_duplicates():
    points = [(0, 0)] * 5 + [(1, 1)] * 5
    for seed in range(10):
        assert set(pick_distinct(2, points, random_state=seed)) == {(0, 0), (1, 1)}


def test_pick_distinct_same_seed_same_picks(rng):
    points = rng.integers(0, 1000, size=(100, 2)).tolist()
    assert pick_distinct(5, points, random_state=42) == pick_distinct(5, points, random_state=42)


def test_pick_distinct_accepts_generator(two_groups):
    g1 = torch.Generator().manual_seed(7)
    g2 = torch.Generator().manual_seed(7)
    assert pick_distinct(2, two_groups, random_state=g1) == pick_distinct(2, two_groups, random_state=g2)


def test_too_many_clusters_fails_fast():
    points = [(0, 0), (0, 0), (1, 1)]
    with pytest.raises(InvalidInput, match="distinct"):
        pick_distinct(3, points, random_state=0)


@pytest.mark.parametrize("k", [0, -1])
def test_non_positive_k_rejected(two_groups, k):
    with pytest.raises(InvalidInput):
        pick_distinct(k, two_groups)


def test_k_equal_to_distinct_count_takes_every_value():
    points = [(3, 3), (1, 1), (3, 3), (2, 2)]
    assert set(pick_distinct(3, points, random_state=1)) == {(1, 1), (2, 2), (3, 3)}


def test_random_init_builds_centroids(two_groups, torch_device):
    X = validate_points(two_groups, device=torch_device)
    reps = RandomInit(random_state=0).initialize(X, 2)

    assert len(reps) == 2
    assert all(isinstance(rep, CentroidRepresentation) for rep in reps)
    assert all(rep.mean.dtype == torch.int64 for rep in reps)
    means = {tuple(rep.mean.tolist()) for rep in reps}
    assert len(means) == 2
    assert means <= set(two_groups)


def test_from_previous_init_uses_given_means(two_groups, torch_device):
    X = validate_points(two_groups, device=torch_device)
    reps = FromPreviousInit([[0, 0], [10, 10]]).initialize(X, 2)
    assert [rep.mean.tolist() for rep in reps] == [[0, 0], [10, 10]]


def test_from_previous_init_keeps_fractional_means(two_groups, torch_device):
    X = validate_points(two_groups, device=torch_device)
    reps = FromPreviousInit([[0.5, 0.5], [10, 10]]).initialize(X, 2)
    assert reps[0].mean.dtype == torch.float64
    assert reps[0].mean.tolist() == [0.5, 0.5]


def test_from_previous_init_count_mismatch(two_groups, torch_device):
    X = validate_points(two_groups, device=torch_device)
    with pytest.raises(InvalidInput):
        FromPreviousInit([[0, 0]]).initialize(X, 2)
