"""Patient records stored in a hash table with quadratic probing and rehashing."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional


@dataclass(frozen=True)
class Patient:
    """One patient's medical record."""

    patient_id: str
    name: str
    history: str
    treatment: str


def id_hash(patient_id: str, size: int) -> int:
    """Sum of the character codes of ``patient_id``, modulo ``size``."""
    return sum(ord(char) for char in patient_id) % size


class MedicalRecords:
    """Open-addressing table of patients keyed by ID.

    Probing adds 1, 4, 9, ... to the slot in turn. When a probe sequence of
    table-size positions finds no free slot, the table doubles in size and
    every record is inserted again.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self._slots: list[Optional[Patient]] = [None] * size

    def size(self) -> int:
        return len(self._slots)

    def _probe(self, patient_id: str) -> Iterator[int]:
        size = len(self._slots)
        slot = id_hash(patient_id, size)
        yield slot
        for step in range(1, size):
            slot = (slot + step * step) % size
            yield slot

    def _locate(self, patient_id: str) -> int:
        for slot in self._probe(patient_id):
            patient = self._slots[slot]
            if patient is not None and patient.patient_id == patient_id:
                return slot
        raise KeyError(patient_id)

    def _rehash(self) -> None:
        old = self._slots
        self._slots = [None] * (2 * len(old))
        for patient in old:
            if patient is not None:
                self.insert(patient)

    def insert(self, patient: Patient) -> int:
        """Store ``patient`` and return its slot, growing the table if needed."""
        for slot in self._probe(patient.patient_id):
            if self._slots[slot] is None:
                self._slots[slot] = patient
                return slot
        self._rehash()
        return self.insert(patient)

    def find(self, patient_id: str) -> Patient:
        return self._slots[self._locate(patient_id)]

    def update(self, patient_id: str, patient: Patient) -> None:
        """Replace the record with ``patient_id`` by ``patient``, in the same slot."""
        self._slots[self._locate(patient_id)] = patient

    def delete(self, patient_id: str) -> None:
        self._slots[self._locate(patient_id)] = None

    def __iter__(self) -> Iterator[Patient]:
        """Yield stored records in slot order."""
        return iter([patient for patient in self._slots if patient is not None])

    def by_history(self, history: str) -> list[Patient]:
        return [patient for patient in self if patient.history == history]


_MENU = (
    "\n1. Insert\n2. Search\n3. Update\n4. Delete\n5. Display All\n"
    "6. Display by History\n7. Exit\nEnter your choice: "
)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _as_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def _show(patient: Patient) -> None:
    print(f"\nName: {patient.name}", end="")
    print(f"\nID: {patient.patient_id}", end="")
    print(f"\nHistory: {patient.history}", end="")
    print(f"\nTreatment: {patient.treatment}")


def _ask_patient(ask: Callable[[str], str], prefix: str) -> Patient:
    patient_id = ask(f"Enter {prefix}patient ID: ")
    name = ask(f"Enter {prefix}patient Name: ")
    history = ask(f"Enter {prefix}patient History: ")
    treatment = ask(f"Enter {prefix}patient Treatment: ")
    return Patient(patient_id, name, history, treatment)


def _run(records: MedicalRecords, choice: Optional[int], ask: Callable[[str], str]) -> None:
    if choice == 1:
        patient = _ask_patient(ask, "")
        before = records.size()
        slot = records.insert(patient)
        for _ in range((records.size() // before).bit_length() - 1):
            print("Hashtable is full! Rehashing...")
        print(f"Inserted at: {slot}")
    elif choice == 2:
        patient_id = ask("Enter ID to search: ")
        try:
            _show(records.find(patient_id))
        except KeyError:
            print("Record not found!")
    elif choice == 3:
        patient_id = ask("Enter ID to update: ")
        try:
            records.find(patient_id)
        except KeyError:
            print("Record not found!")
            return
        records.update(patient_id, _ask_patient(ask, "new "))
    elif choice == 4:
        patient_id = ask("Enter ID to delete: ")
        try:
            records.delete(patient_id)
        except KeyError:
            print("Record not found!")
        else:
            print("Record deleted!")
    elif choice == 5:
        for patient in records:
            _show(patient)
    elif choice == 6:
        history = ask("Enter History to search: ")
        matches = records.by_history(history)
        for patient in matches:
            _show(patient)
        if not matches:
            print(f"{history} is not present in records!")
    else:
        print("Invalid choice! Try again.")


def main(argv=None) -> int:
    """Run the interactive medical records menu on standard input."""
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="")
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    try:
        try:
            records = MedicalRecords(int(ask("Enter initial size of hashtable: ")))
        except ValueError as error:
            print(f"Invalid input: {error}")
            return 1
        while True:
            choice = _as_int(ask(_MENU))
            if choice == 7:
                print("Exiting...")
                return 0
            _run(records, choice, ask)
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())