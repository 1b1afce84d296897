"""Music track library stored in a hash table with linear probing."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional


@dataclass(frozen=True)
class Track:
    """One music track."""

    track_id: str
    name: str
    kind: str


class TableFullError(Exception):
    """Raised when no free slot is left in the table."""


def id_hash(track_id: str, size: int) -> int:
    """Sum of the character codes of ``track_id``, modulo ``size``."""
    return sum(ord(char) for char in track_id) % size


class MusicLibrary:
    """Fixed-size open-addressing table of tracks keyed by ID.

    Collisions are resolved by linear probing; lookups scan every slot along
    the probe sequence, and deleted slots become free for new tracks.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self._slots: list[Optional[Track]] = [None] * size

    def _probe(self, track_id: str) -> Iterator[int]:
        size = len(self._slots)
        home = id_hash(track_id, size)
        for step in range(size):
            yield (home + step) % size

    def _locate(self, track_id: str) -> int:
        for slot in self._probe(track_id):
            track = self._slots[slot]
            if track is not None and track.track_id == track_id:
                return slot
        raise KeyError(track_id)

    def insert(self, track: Track) -> int:
        """Store ``track`` in the first free slot and return its index."""
        for slot in self._probe(track.track_id):
            if self._slots[slot] is None:
                self._slots[slot] = track
                return slot
        raise TableFullError("hash table is full")

    def find(self, track_id: str) -> Track:
        return self._slots[self._locate(track_id)]

    def update(self, track_id: str, track: Track) -> None:
        """Replace the track with ``track_id`` by ``track``, in the same slot."""
        self._slots[self._locate(track_id)] = track

    def delete(self, track_id: str) -> None:
        self._slots[self._locate(track_id)] = None

    def __iter__(self) -> Iterator[Track]:
        """Yield stored tracks in slot order."""
        return iter([track for track in self._slots if track is not None])

    def by_type(self, kind: str) -> list[Track]:
        return [track for track in self if track.kind == kind]


_MENU = (
    "1.Insert\n2.search\n3.update\n4.delete\n5.display\n"
    "6.display by type\n7.Exit\nEnter your choice: "
)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _as_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def _show(track: Track) -> None:
    print(f"Name: {track.name}")
    print(f"id: {track.track_id}")
    print(f"type: {track.kind}")


def _insert(library: MusicLibrary, track: Track) -> None:
    probe = list(library._probe(track.track_id))
    try:
        slot = library.insert(track)
    except TableFullError:
        for occupied in probe[:-1]:
            print(f"collision occur at:{occupied}")
        print("Hashtable table is full!!!", end="")
        return
    for occupied in probe[: probe.index(slot)]:
        print(f"collision occur at:{occupied}")
    print(f"inserted at:{slot}")


def _run(library: MusicLibrary, choice: Optional[int], ask: Callable[[str], str]) -> None:
    if choice == 1:
        track_id = ask("Enter the music id: ")
        name = ask("Enter the music name: ")
        kind = ask("Enter the music type: ")
        _insert(library, Track(track_id, name, kind))
    elif choice == 2:
        track_id = ask("Enter the id which you want search: ")
        try:
            _show(library.find(track_id))
        except KeyError:
            print("Record is not found!!", end="")
    elif choice == 3:
        track_id = ask("Enter the id which you want update: ")
        try:
            library.find(track_id)
        except KeyError:
            print("Track not found")
            return
        new_id = ask("Enter the new music id: ")
        name = ask("Enter the new music name: ")
        kind = ask("Enter the new music type: ")
        library.update(track_id, Track(new_id, name, kind))
    elif choice == 4:
        track_id = ask("Enter the id which you want delete: ")
        try:
            library.delete(track_id)
        except KeyError:
            print("Track not found")
        else:
            print("Record deleted!!!", end="")
    elif choice == 5:
        for track in library:
            _show(track)
    elif choice == 6:
        kind = ask("Enter the type which you want display: ")
        matches = library.by_type(kind)
        for track in matches:
            _show(track)
        if not matches:
            print(f"{kind} is not present in record!!!", end="")
    else:
        print("Wrong choice! try again!!!", end="")


def main(argv=None) -> int:
    """Run the interactive music library menu on standard input."""
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="")
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    try:
        try:
            library = MusicLibrary(
                int(ask("Enter number of music track you want to insert(Hashtable table size): "))
            )
        except ValueError as error:
            print(f"Invalid input: {error}")
            return 1
        while True:
            choice = _as_int(ask(_MENU))
            if choice == 7:
                print("Exiting!!", end="")
                return 0
            _run(library, choice, ask)
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())