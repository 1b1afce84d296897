"""Optimal binary search tree by dynamic programming."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence

MAX_KEYS = 10


class OptimalBST:
    """Weight, cost and root tables for an optimal binary search tree.

    ``p[k]`` is the probability of a successful search for ``keys[k]``;
    ``q[k]`` is the probability of an unsuccessful search in gap ``k``.
    """

    def __init__(self, keys: Sequence[str], p: Sequence[float], q: Sequence[float]) -> None:
        n = len(keys)
        if n > MAX_KEYS:
            raise ValueError(f"at most {MAX_KEYS} keys are supported")
        if len(p) != n:
            raise ValueError("p must have one probability per key")
        if len(q) != n + 1:
            raise ValueError("q must have one more probability than there are keys")
        self.keys = list(keys)
        self.p = [float(x) for x in p]
        self.q = [float(x) for x in q]
        size = n + 1
        self.weights = [[0.0] * size for _ in range(size)]
        self.costs = [[0.0] * size for _ in range(size)]
        self.roots = [[0] * size for _ in range(size)]
        self._calculate()

    def _calculate(self) -> None:
        n = len(self.keys)
        for i in range(n + 1):
            self.weights[i][i] = self.q[i]
        for gap in range(1, n + 1):
            for i in range(n - gap + 1):
                j = i + gap
                self.weights[i][j] = self.weights[i][j - 1] + self.p[j - 1] + self.q[j]
                best_cost, best_root = min(
                    ((self.costs[i][k - 1] + self.costs[k][j], k) for k in range(i + 1, j + 1)),
                    key=lambda pair: pair[0],
                )
                self.costs[i][j] = self.weights[i][j] + best_cost
                self.roots[i][j] = best_root

    def cost(self) -> float:
        """Minimum expected cost of the whole tree."""
        return self.costs[0][len(self.keys)]

    def structure(self) -> list[tuple[str, str, Optional[str]]]:
        """(key, side, parent) triples, root first; side is Root, Left or Right."""
        result: list[tuple[str, str, Optional[str]]] = []

        def visit(i: int, j: int, parent: Optional[str], side: str) -> None:
            root = self.roots[i][j]
            if root <= 0:
                return
            key = self.keys[root - 1]
            result.append((key, side, parent))
            visit(i, root - 1, key, "Left")
            visit(root, j, key, "Right")

        visit(0, len(self.keys), None, "Root")
        return result

    def _table(self, title: str, name: str, table: list, fmt: str) -> list[str]:
        n = len(self.keys)
        lines = [f"\n{title}:\n"]
        for gap in range(n + 1):
            cells = (
                f"{name}[{i}][{i + gap}] = {table[i][i + gap]:{fmt}}\t"
                for i in range(n - gap + 1)
            )
            lines.append("".join(cells) + "\n")
        return lines

    def render(self) -> str:
        parts = self._table("Matrix W (Weights)", "W", self.weights, ".2f")
        parts += self._table("Matrix C (Costs)", "C", self.costs, ".2f")
        parts += self._table("Matrix R (Roots)", "R", self.roots, "d")
        parts.append(f"\nMinimum cost of Optimal BST = {self.cost():.2f}\n")
        parts.append("\nOptimal Binary Search Tree Structure:\n")
        for key, side, parent in self.structure():
            parts.append(f"{key} is the {side} of {parent if parent is not None else 'None'}\n")
        return "".join(parts)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Read keys and probabilities from standard input and print the tables."""
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of keys: ", end="")
        n = int(next(tokens))
        print("Enter keys in sorted order:")
        keys = [next(tokens) for _ in range(n)]
        print("Enter successful search probabilities (p):")
        p = [float(next(tokens)) for _ in range(n)]
        print("Enter unsuccessful search probabilities (q):")
        q = [float(next(tokens)) for _ in range(n + 1)]
        tree = OptimalBST(keys, p, q)
    except StopIteration:
        print("Unexpected end of input.")
        return 1
    except ValueError as error:
        print(f"Invalid input: {error}")
        return 1
    print(tree.render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())