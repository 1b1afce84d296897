import io

import pytest

from dsakit.adjacency import AdjacencyMatrix, main


def test_render_two_vertices():
    graph = AdjacencyMatrix(2)
    graph.add_edge(0, 1)
    assert graph.render() == "\nThe adjacency matrix is:\n  0 1 \n0 0 1 \n1 1 0 \n"


def test_rows_are_symmetric():
    graph = AdjacencyMatrix(5)
    for x, y in [(0, 1), (1, 3), (4, 2), (3, 0)]:
        graph.add_edge(x, y)
    rows = graph.rows()
    assert all(rows[i][j] == rows[j][i] for i in range(5) for j in range(5))
    assert sum(map(sum, rows)) == 2 * 4


def test_self_loop_marks_diagonal():
    graph = AdjacencyMatrix(3)
    graph.add_edge(2, 2)
    assert graph.rows()[2][2] == 1
    assert sum(map(sum, graph.rows())) == 1


def test_repeated_edge_stays_one():
    graph = AdjacencyMatrix(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 0)
    assert graph.rows()[0][1] == 1


def test_rows_are_copies():
    graph = AdjacencyMatrix(2)
    graph.rows()[0][0] = 7
    assert graph.rows()[0][0] == 0


@pytest.mark.parametrize("edge", [(0, 3), (-1, 0), (5, 1)])
def test_out_of_range_edge_raises(edge):
    graph = AdjacencyMatrix(3)
    with pytest.raises(IndexError):
        graph.add_edge(*edge)


@pytest.mark.parametrize("count", [-1, 101])
def test_invalid_vertex_count_raises(count):
    with pytest.raises(ValueError):
        AdjacencyMatrix(count)


def test_main_prints_matrix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n0 1\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "0 0 1 \n1 1 0 \n" in out