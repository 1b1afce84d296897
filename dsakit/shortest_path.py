"""Shortest road distances from home to wedding halls."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence

MAX_PLACES = 100
UNREACHABLE = 2**31 - 1


class WeddingPlanner:
    """Road network where place 0 is home and places 1.. are halls.

    A road of distance 0 counts as no road.
    """

    def __init__(self, halls: Sequence[str]) -> None:
        names = ("Home", *halls)
        if len(names) > MAX_PLACES:
            raise ValueError(f"at most {MAX_PLACES - 1} halls are supported")
        self.names = names
        self._graph = [[0] * len(names) for _ in names]

    def add_road(self, u: int, v: int, distance: int) -> None:
        for place in (u, v):
            if not 0 <= place < len(self.names):
                raise IndexError(f"place {place} out of range")
        self._graph[u][v] = distance
        self._graph[v][u] = distance

    def _from_home(self) -> list[Optional[int]]:
        count = len(self.names)
        dist: list[Optional[int]] = [None] * count
        dist[0] = 0
        visited = [False] * count
        for _ in range(count - 1):
            candidates = [
                (d, i) for i, d in enumerate(dist) if not visited[i] and d is not None
            ]
            if not candidates:
                break
            base, u = min(candidates)
            visited[u] = True
            for v, length in enumerate(self._graph[u]):
                if visited[v] or not length:
                    continue
                if dist[v] is None or base + length < dist[v]:
                    dist[v] = base + length
        return dist

    def distances(self) -> list[Optional[int]]:
        """Shortest distance to each hall, in hall order; None if unreachable."""
        return self._from_home()[1:]

    def nearest_hall(self) -> Optional[tuple[str, int]]:
        """(name, distance) of the closest reachable hall, first on ties."""
        reachable = [(d, i) for i, d in enumerate(self.distances()) if d is not None]
        if not reachable:
            return None
        distance, index = min(reachable)
        return self.names[index + 1], distance


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Read halls and roads from standard input and report the nearest hall."""
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of marriage halls: ", end="")
        total = int(next(tokens))
        print("Enter names of marriage halls:")
        planner = WeddingPlanner([next(tokens) for _ in range(total)])
        print("Enter number of roads: ", end="")
        roads = int(next(tokens))
        print("Enter each road as: <from_index> <to_index> <distance>")
        print("(Use 0 for your home)")
        for _ in range(roads):
            u, v, distance = (int(next(tokens)) for _ in range(3))
            planner.add_road(u, v, distance)
    except StopIteration:
        print("Unexpected end of input.")
        return 1
    except (ValueError, IndexError) as error:
        print(f"Invalid input: {error}")
        return 1

    print("\nShortest distance from your home to each marriage hall:")
    for name, distance in zip(planner.names[1:], planner.distances()):
        shown = UNREACHABLE if distance is None else distance
        print(f"To {name} : {shown} units")
    nearest = planner.nearest_hall()
    if nearest is None:
        print("\nNo reachable marriage hall from your home.")
    else:
        name, distance = nearest
        print(f"\nBest option: {name} is the nearest hall with a distance of {distance} units.")
    return 0


if __name__ == "__main__":
    sys.exit(main())