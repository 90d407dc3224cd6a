# tests/test_visualization.py
"""
Scatter-plot helpers, rendered with the Agg backend.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import pytest

from kmeans2d import KMeans
from kmeans2d.visualization import clusters_to_records, plot_clusters_2d, plot_dataset


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_clusters_to_records():
    records = clusters_to_records([[(0, 0), (1, 0)], [(10, 10)]])
    assert records == [
        {"x": 0, "y": 0, "cluster": 0},
        {"x": 1, "y": 0, "cluster": 0},
        {"x": 10, "y": 10, "cluster": 1},
    ]


def test_plot_clusters_one_series_per_cluster(two_groups):
    km = KMeans(n_clusters=2, init=[[0, 0], [10, 10]]).fit(two_groups)

    ax = plot_clusters_2d(km.clusters_, means=km.cluster_centers_.tolist(), title="two groups")

    # two cluster series plus the means overlay
    assert len(ax.collections) == 3
    assert ax.get_title() == "two groups"
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert labels == ["Cluster 0", "Cluster 1", "Means"]


def test_plot_clusters_on_given_axes():
    fig, ax = plt.subplots()
    out = plot_clusters_2d([[(0, 0)], [(5, 5)], [(9, 1)]], ax=ax, show_legend=False)
    assert out is ax
    assert len(ax.collections) == 3
    assert ax.get_legend() is None


def test_plot_dataset(two_groups):
    ax = plot_dataset(two_groups)
    assert len(ax.collections) == 1
    assert ax.collections[0].get_offsets().shape == (6, 2)
