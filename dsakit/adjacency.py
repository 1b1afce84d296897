"""Unweighted undirected graph stored as an adjacency matrix."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator

MAX_VERTICES = 100


class AdjacencyMatrix:
    """Adjacency matrix of an undirected graph on vertices 0..n-1."""

    def __init__(self, vertices: int) -> None:
        if not 0 <= vertices <= MAX_VERTICES:
            raise ValueError(f"vertex count must be between 0 and {MAX_VERTICES}")
        self.vertices = vertices
        self._cells = [[0] * vertices for _ in range(vertices)]

    def add_edge(self, x: int, y: int) -> None:
        for vertex in (x, y):
            if not 0 <= vertex < self.vertices:
                raise IndexError(f"vertex {vertex} out of range")
        self._cells[x][y] = 1
        self._cells[y][x] = 1

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._cells]

    def render(self) -> str:
        lines = ["\nThe adjacency matrix is:\n", "  " + "".join(f"{i} " for i in range(self.vertices)) + "\n"]
        for i, row in enumerate(self._cells):
            lines.append(f"{i} " + "".join(f"{cell} " for cell in row) + "\n")
        return "".join(lines)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Read a graph from standard input and print its adjacency matrix."""
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of vertices: ", end="")
        graph = AdjacencyMatrix(int(next(tokens)))
        print("Enter number of edges: ", end="")
        edges = int(next(tokens))
        print("Enter the vertices and edges")
        for _ in range(edges):
            graph.add_edge(int(next(tokens)), int(next(tokens)))
    except StopIteration:
        print("Unexpected end of input.")
        return 1
    except (ValueError, IndexError) as error:
        print(f"Invalid input: {error}")
        return 1
    print(graph.render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())