"""Minimum spanning tree over interview cities by Prim's algorithm."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence

MAX_CITIES = 10
NO_ROAD = 999


class CityNetwork:
    """Undirected road network; distance 999 stands for no road."""

    def __init__(self, cities: Sequence[str]) -> None:
        if len(cities) > MAX_CITIES:
            raise ValueError(f"at most {MAX_CITIES} cities are supported")
        self.cities = tuple(cities)
        count = len(self.cities)
        self._distance = [
            [0 if i == j else NO_ROAD for j in range(count)] for i in range(count)
        ]

    def _index(self, name: str) -> int:
        matches = [i for i, city in enumerate(self.cities) if city == name]
        if not matches:
            raise KeyError(name)
        return matches[-1]

    def add_road(self, city1: str, city2: str, weight: int) -> None:
        first = self._index(city1)
        second = self._index(city2)
        self._distance[first][second] = weight
        self._distance[second][first] = weight

    def matrix(self) -> list[list[int]]:
        return [list(row) for row in self._distance]

    def minimum_spanning_tree(self) -> list[tuple[str, str, int]]:
        """(parent, city, weight) for every city after the first, in city order.

        Raises ValueError if some city cannot be reached from the first.
        """
        count = len(self.cities)
        if count == 0:
            return []
        weight = [NO_ROAD] * count
        parent: list[Optional[int]] = [None] * count
        visited = [False] * count
        weight[0] = 0
        for _ in range(count - 1):
            candidates = [
                (w, v) for v, w in enumerate(weight) if not visited[v] and w < NO_ROAD
            ]
            if not candidates:
                raise ValueError("not all cities are connected")
            _, u = min(candidates)
            visited[u] = True
            for v, distance in enumerate(self._distance[u]):
                if not visited[v] and distance and distance < weight[v]:
                    parent[v] = u
                    weight[v] = distance
        edges = []
        for city, source in enumerate(parent[1:], start=1):
            if source is None:
                raise ValueError("not all cities are connected")
            edges.append((self.cities[source], self.cities[city], self._distance[city][source]))
        return edges

    def total_distance(self) -> int:
        return sum(weight for _, _, weight in self.minimum_spanning_tree())

    def render(self) -> str:
        lines = ["\nAdjacency Matrix (Distances between Cities):\n"]
        for row in self._distance:
            lines.append("".join(f"{distance}\t" for distance in row) + "\n")
        return "".join(lines)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Read cities and roads from standard input and print the spanning tree."""
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="")
        return next(tokens)

    try:
        count = int(ask("Enter Total Cities: "))
        network = CityNetwork([ask("Enter City Name: ") for _ in range(count)])
        edges = int(ask("Enter Total Edges: "))
        added = 0
        while added < edges:
            city1 = ask(f"Enter Edge {added + 1} (City1, City2, Weight): ")
            city2 = next(tokens)
            weight = int(next(tokens))
            try:
                network.add_road(city1, city2, weight)
            except KeyError:
                print("Invalid cities entered. Please try again.")
                continue
            added += 1
    except StopIteration:
        print("Unexpected end of input.")
        return 1
    except ValueError as error:
        print(f"Invalid input: {error}")
        return 1

    print(network.render(), end="")
    try:
        tree = network.minimum_spanning_tree()
    except ValueError as error:
        print(f"\n{error}")
        return 1
    print("\nEdge \tWeight")
    for source, city, weight in tree:
        print(f"{source} -> {city} \t{weight} ")
    print(f"Total Distance of MST is : {sum(weight for _, _, weight in tree)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())