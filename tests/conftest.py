import pytest

from anneal import TSPInstance


@pytest.fixture
def square():
    return TSPInstance(coords=[(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)], name="square")


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.tsp"
    path.write_text(
        "NAME : square\n"
        "TYPE : TSP\n"
        "DIMENSION : 4\n"
        "EDGE_WEIGHT_TYPE : EUC_2D\n"
        "NODE_COORD_SECTION\n"
        "1 0 0\n"
        "2 10 0\n"
        "3 10 10\n"
        "4 0 10\n"
        "EOF\n"
    )
    return path
