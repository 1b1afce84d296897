"""Flight network between cities, as an adjacency matrix and adjacency lists."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Iterator, Sequence

MAX_CITIES = 10


class FlightNetwork:
    """Undirected weighted graph of cities connected by flights."""

    def __init__(self, cities: Sequence[str]) -> None:
        if len(cities) > MAX_CITIES:
            raise ValueError(f"at most {MAX_CITIES} cities are supported")
        self.cities = tuple(cities)
        size = len(self.cities)
        self._matrix = [[0] * size for _ in range(size)]
        self._adjacency: list[deque[tuple[int, int]]] = [deque() for _ in range(size)]

    def index_of(self, name: str) -> int:
        """Position of the first city with this name; KeyError if absent."""
        try:
            return self.cities.index(name)
        except ValueError:
            raise KeyError(name) from None

    def add_flight(self, source: str, destination: str, cost: int) -> None:
        """Add a flight in both directions; the newest flight is listed first."""
        x = self.index_of(source)
        y = self.index_of(destination)
        self._matrix[x][y] = cost
        self._matrix[y][x] = cost
        self._adjacency[x].appendleft((y, cost))
        self._adjacency[y].appendleft((x, cost))

    def matrix(self) -> list[list[int]]:
        return [list(row) for row in self._matrix]

    def neighbours(self, name: str) -> list[tuple[str, int]]:
        return [(self.cities[i], cost) for i, cost in self._adjacency[self.index_of(name)]]

    def render_matrix(self) -> str:
        lines = ["\nAdjacency Matrix Representation:\n    "]
        lines.append("".join(f"{city} " for city in self.cities) + "\n")
        for city, row in zip(self.cities, self._matrix):
            lines.append(f"{city} " + "".join(f"{cost} " for cost in row) + "\n")
        return "".join(lines)

    def render_list(self) -> str:
        lines = ["\nAdjacency List Representation:\n"]
        for city in self.cities:
            links = "".join(f"({other}, Cost: {cost}) -> " for other, cost in self.neighbours(city))
            lines.append(f"{city} -> {links}NULL\n")
        return "".join(lines)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Read cities and flights from standard input and print both views."""
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="")
        return next(tokens)

    try:
        count = int(ask("Enter number of cities (airports): "))
        print("Enter city names:")
        names = [ask(f"City {number}: ") for number in range(1, count + 1)]
        network = FlightNetwork(names)
        flights = int(ask("Enter number of flights: "))
        print("Enter the source city, destination city, and flight cost:")
        added = 0
        while added < flights:
            source = ask("Source City: ")
            destination = ask("Destination City: ")
            cost = int(ask("Flight Cost (time/fuel): "))
            try:
                network.add_flight(source, destination, cost)
            except KeyError:
                print("Invalid city name! Try again.")
                continue
            added += 1
    except StopIteration:
        print("Unexpected end of input.")
        return 1
    except ValueError as error:
        print(f"Invalid input: {error}")
        return 1
    print(network.render_matrix(), end="")
    print(network.render_list(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())