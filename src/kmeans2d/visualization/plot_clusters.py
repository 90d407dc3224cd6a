"""
Cluster visualization utilities.

Scatter plots of raw point sets and of clustering results. Nothing here is
needed to run the clustering itself, and no function calls ``plt.show()``.
"""

from typing import Optional, List, Dict, Any, Sequence
import matplotlib.pyplot as plt
import numpy as np


def clusters_to_records(clusters: Sequence[Sequence]) -> List[Dict[str, Any]]:
    """Flatten clusters into rows of ``{'x', 'y', 'cluster'}``.

    The cluster label is the cluster's position in ``clusters``.
    """
    return [
        {'x': x, 'y': y, 'cluster': label}
        for label, cluster in enumerate(clusters)
        for x, y in cluster
    ]


def _default_colors(n_clusters: int) -> list:
    cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
    return [cmap(i % cmap.N) for i in range(n_clusters)]


def plot_clusters_2d(clusters: Sequence[Sequence],
                     means: Optional[Sequence[Sequence]] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results, one scatter series per cluster.

    Args:
        clusters: Sequence of clusters, each a sequence of (x, y) points
        means: Optional cluster means to overlay
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for means
        center_size: Size of mean markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    n_clusters = len(clusters)

    if colors is None:
        colors = _default_colors(n_clusters)

    for label, cluster in enumerate(clusters):
        pts = np.asarray(cluster, dtype=float).reshape(-1, 2)
        ax.scatter(pts[:, 0], pts[:, 1],
                   c=[colors[label % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {label}')

    if means is not None and len(means) > 0:
        means_np = np.asarray(means, dtype=float).reshape(-1, 2)
        ax.scatter(means_np[:, 0], means_np[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Means',
                   zorder=10)

    ax.set_xlabel('x')
    ax.set_ylabel('y')

    if title:
        ax.set_title(title)

    if show_legend and n_clusters > 0:
        ax.legend()

    return ax


def plot_dataset(points: Sequence[Sequence],
                 ax: Optional[plt.Axes] = None,
                 point_size: int = 30,
                 title: Optional[str] = None) -> plt.Axes:
    """Scatter plot of an unclustered point set.

    Args:
        points: Sequence of (x, y) points
        ax: Matplotlib axes (created if None)
        point_size: Size of data points
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    ax.scatter(pts[:, 0], pts[:, 1], s=point_size, c='tab:blue',
               edgecolors='black', linewidth=0.5)

    ax.set_xlabel('x')
    ax.set_ylabel('y')

    if title:
        ax.set_title(title)

    return ax
