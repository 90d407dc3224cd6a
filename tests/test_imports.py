
import importlib
import pytest

@pytest.mark.parametrize("module", [
    "kmeans2d",
    "kmeans2d.algorithms",
    "kmeans2d.assignments",
    "kmeans2d.representations",
    "kmeans2d.updates",
    "kmeans2d.distances",
    "kmeans2d.initialization",
    "kmeans2d.utils",
    "kmeans2d.datasets",
    "kmeans2d.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None
