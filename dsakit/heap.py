"""A bounded array-based min-heap."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator

DEFAULT_CAPACITY = 10


class MinHeap:
    """Min-heap stored in level order, holding at most ``capacity`` keys."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._keys: list[int] = []

    def push(self, key: int) -> None:
        if len(self._keys) >= self.capacity:
            raise IndexError("heap is full")
        self._keys.append(key)
        loc = len(self._keys) - 1
        while loc > 0:
            parent = (loc - 1) // 2
            if self._keys[parent] <= self._keys[loc]:
                break
            self._keys[parent], self._keys[loc] = self._keys[loc], self._keys[parent]
            loc = parent

    def extend(self, keys: Iterable[int]) -> None:
        for key in keys:
            self.push(key)

    def __iter__(self) -> Iterator[int]:
        """Yield keys in array (level) order."""
        return iter(list(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def render(self) -> str:
        if not self._keys:
            return "Heap is empty!"
        return "Heap Tree: " + "".join(f"{key} " for key in self._keys)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Run the interactive heap menu on standard input."""
    heap = MinHeap()
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="")
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    try:
        while True:
            print("1. Accept Data \t 2. Display Heap \t 0. Exit Program")
            try:
                choice = int(ask("Enter the Choice: "))
            except ValueError:
                choice = None
            if choice == 1:
                heap = MinHeap()
                try:
                    total = int(ask("Enter total number of keys: "))
                    for _ in range(total):
                        heap.push(int(ask("Enter key: ")))
                except (ValueError, IndexError) as error:
                    print(f"Cannot accept data: {error}")
            elif choice == 2:
                print(heap.render())
            elif choice == 0:
                print("Exiting program...")
                return 0
            else:
                print("Invalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())