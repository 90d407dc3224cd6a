"""
Demo of k-means on coordinate files.

This example shows how to:
1. Load whitespace-delimited point files on demand
2. Cluster each dataset with K-means
3. Plot the raw points next to the clusters

Run without arguments to use the sample files under ``resources/``, or pass
your own files as ``path`` or ``path:k`` (k defaults to 3).
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt

from kmeans2d import KMeans, load_datasets
from kmeans2d.visualization import plot_clusters_2d, plot_dataset


RESOURCES = Path(__file__).resolve().parents[2] / 'resources'

# Dataset file -> number of clusters
DATASETS = {
    RESOURCES / 'data1.txt': 3,
    RESOURCES / 'data2.txt': 3,
    RESOURCES / 'data3.txt': 5,
}


def parse_args(args):
    """Map ``path`` / ``path:k`` arguments to a dataset table."""
    datasets = {}
    for arg in args:
        path, _, k = arg.rpartition(':')
        if path and k.isdigit():
            datasets[Path(path)] = int(k)
        else:
            datasets[Path(arg)] = 3
    return datasets


def main(args=None):
    """Run the demo."""
    print("=== K-Means Clustering Demo ===\n")

    if args is None:
        args = sys.argv[1:]
    table = parse_args(args) if args else DATASETS

    missing = [path for path in table if not path.exists()]
    if missing:
        print("Dataset files not found:")
        for path in missing:
            print(f"  {path}")
        return

    datasets = load_datasets(table)

    for path, n_clusters in table.items():
        name = path.stem
        points = datasets[name]
        print(f"{name}: {len(points)} points, {n_clusters} clusters")

        kmeans = KMeans(n_clusters=n_clusters, verbose=1, random_state=42)
        kmeans.fit(points)

        print(f"  converged in {kmeans.n_iter_} iterations, "
              f"inertia = {kmeans.inertia_:.1f}\n")

        fig, (ax_raw, ax_clusters) = plt.subplots(1, 2, figsize=(14, 6))
        plot_dataset(points, ax=ax_raw, title=f"{name}: raw points")
        plot_clusters_2d(kmeans.clusters_, means=kmeans.cluster_centers_.tolist(),
                         ax=ax_clusters, title=f"{name}: {len(kmeans.clusters_)} clusters")
        plt.tight_layout()

    plt.show()


if __name__ == "__main__":
    main()
