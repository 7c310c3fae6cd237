from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from graph import Graph


ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def espana_path() -> Path:
    return ROOT / "espana.txt"


@pytest.fixture
def triangle() -> Graph:
    return Graph(edges=[("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def tied_triangle() -> Graph:
    return Graph(edges=[("A", "B", 2), ("B", "C", 2), ("A", "C", 4)])
