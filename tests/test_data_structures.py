# tests/test_data_structures.py
"""
Point conversion and the per-iteration ClusterAssignment container.
"""

from __future__ import annotations

import pytest
import torch

from kmeans2d import KMeans, Point, ClusterAssignment
from kmeans2d.base import to_point


@pytest.fixture
def assignment() -> ClusterAssignment:
    points = torch.tensor([[10, 0], [0, 0], [0, 0], [6, 0]])
    means = torch.tensor([[3, 0], [10, 0], [50, 50]])
    labels = torch.tensor([1, 0, 0, 0])
    return ClusterAssignment(points, means, labels)


def test_to_point_keeps_integral_coordinates():
    p = to_point(torch.tensor([3, -4]))
    assert p == (3, -4)
    assert isinstance(p.x, int)

    q = to_point(torch.tensor([0.5, 2.0], dtype=torch.float64))
    assert q == (0.5, 2.0)
    assert isinstance(q.y, float)


def test_to_point_rejects_wrong_shape():
    with pytest.raises(ValueError):
        to_point(torch.tensor([1, 2, 3]))


def test_clusters_follow_first_point_order(assignment):
    assert assignment.occupied() == [1, 0]
    assert assignment.empty() == [2]
    assert assignment.count_per_mean().tolist() == [3, 1, 0]
    assert assignment.clusters == [((10, 0),), ((0, 0), (0, 0), (6, 0))]
    assert len(assignment) == 2


def test_cluster_labels_index_clusters(assignment):
    assert assignment.cluster_labels().tolist() == [0, 1, 1, 1]


def test_as_dict_maps_means_to_clusters(assignment):
    mapping = assignment.as_dict()
    assert mapping == {
        Point(10, 0): ((10, 0),),
        Point(3, 0): ((0, 0), (0, 0), (6, 0)),
    }
    assert list(mapping) == [(10, 0), (3, 0)]


def test_fitted_assignment_views_agree(two_groups):
    km = KMeans(n_clusters=3, init=[[10, 10], [100, 100], [0, 0]],
                empty_cluster="keep").fit(two_groups)
    final = km.assignment_

    positions = final.cluster_labels().tolist()
    for point, position in zip(two_groups, positions):
        assert point in km.clusters_[position]

    assert list(final.as_dict().values()) == km.clusters_
    assert set(final.as_dict()) == {(0, 0), (10, 10)}
