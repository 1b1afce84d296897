"""A binary tree whose insertion position is chosen by a left/right path."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    value: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinaryTree:
    """Binary tree built by walking a path of 'l'/'r' choices."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: int, path: Iterable[str] = ()) -> None:
        """Insert ``value`` at the first free slot along ``path``.

        The path is consumed lazily, one direction per level, so steps past
        the free slot are never read. A step beginning with 'l' or 'r' (in
        either case) picks the side; anything else raises ValueError, as does
        a path that runs out before a free slot is reached.
        """
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        for step in path:
            side = str(step)[:1].lower()
            if side == "l":
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            elif side == "r":
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                raise ValueError(f"invalid direction: {step!r}")
        raise ValueError("path ends before reaching a free position")

    def _walk(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> list[int]:
        return [node.value for node in self._walk()]

    def __len__(self) -> int:
        return sum(1 for _ in self._walk())

    def leaves(self) -> list[int]:
        """Values of nodes with no children, in preorder."""
        return [
            node.value
            for node in self._walk()
            if node.left is None and node.right is None
        ]

    def height(self) -> int:
        def measure(node: Optional[_Node]) -> int:
            if node is None:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self._root)


_MENU = (
    "TREES OPERATION:",
    "1.insert:",
    "2.preorder:",
    "3.total nodes:",
    "4.leaf nodes:",
    "5.heigth of tree:",
    "6.invalid choice:",
)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Run the interactive tree menu on standard input."""
    tree = BinaryTree()
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="")
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    def directions() -> Iterator[str]:
        while True:
            yield ask("enter the choice[left or right]:")

    try:
        while True:
            for line in _MENU:
                print(line)
            try:
                choice = int(ask("enter choice:"))
            except ValueError:
                continue
            if choice == 1:
                try:
                    value = int(ask("enter the data:"))
                    tree.insert(value, directions())
                except ValueError:
                    print("invalid choice:", end="")
            elif choice == 2:
                print("".join(f"{value} " for value in tree.preorder()), end="")
            elif choice == 3:
                print(f"total node present in tree is :{len(tree)}")
            elif choice == 4:
                for value in tree.leaves():
                    print(f"{value} ")
            elif choice == 5:
                print(f"height of tree is{tree.height()}")
                print("invalid..", end="")
            elif choice == 6:
                print("invalid..", end="")
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())