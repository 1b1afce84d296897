"""Employee records kept in a binary search tree ordered by salary."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Optional


@dataclass(frozen=True)
class Employee:
    """One employee record."""

    name: str
    emp_id: str
    salary: float


@dataclass
class _Node:
    employee: Employee
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class EmployeeTree:
    """Binary search tree of employees keyed by salary.

    Lower salaries go to the left; equal or higher salaries go to the right.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, name: str, emp_id: str, salary: float) -> Employee:
        """Add an employee and return the stored record."""
        employee = Employee(name, emp_id, float(salary))
        node = _Node(employee)
        if self._root is None:
            self._root = node
            return employee
        current = self._root
        while True:
            if employee.salary < current.employee.salary:
                if current.left is None:
                    current.left = node
                    return employee
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return employee
                current = current.right

    def __iter__(self) -> Iterator[Employee]:
        """Yield employees in ascending salary order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.employee
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def _find_node(self, salary: float) -> _Node:
        node = self._root
        while node is not None:
            if salary == node.employee.salary:
                return node
            node = node.right if salary > node.employee.salary else node.left
        raise KeyError(salary)

    def find(self, salary: float) -> Employee:
        """Return the first employee found with this salary; KeyError if none."""
        return self._find_node(salary).employee

    def _require_root(self) -> _Node:
        if self._root is None:
            raise ValueError("no employees in the tree")
        return self._root

    def min_salary(self) -> float:
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.employee.salary

    def max_salary(self) -> float:
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.employee.salary

    def total_salary(self) -> float:
        return sum(employee.salary for employee in self)

    def average_salary(self) -> float:
        count = len(self)
        if count == 0:
            raise ValueError("no employees to calculate average salary")
        return self.total_salary() / count

    def delete(self, salary: float) -> bool:
        """Remove one employee with this salary; return whether one existed."""
        try:
            self._find_node(salary)
        except KeyError:
            return False
        self._root = self._delete(self._root, salary)
        return True

    @classmethod
    def _delete(cls, node: Optional[_Node], salary: float) -> Optional[_Node]:
        if node is None:
            return None
        if salary < node.employee.salary:
            node.left = cls._delete(node.left, salary)
        elif salary > node.employee.salary:
            node.right = cls._delete(node.right, salary)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.employee = successor.employee
            node.right = cls._delete(node.right, successor.employee.salary)
        return node

    def update(self, salary: float, name: str, emp_id: str) -> Employee:
        """Change the name and ID of the employee with this salary."""
        node = self._find_node(salary)
        node.employee = replace(node.employee, name=name, emp_id=emp_id)
        return node.employee


_MENU = (
    "1. Insert",
    "2. Display",
    "3. Search",
    "4. Total Employees",
    "5. Minimum Salary",
    "6. Maximum Salary",
    "7. Average Salary",
    "8. Delete",
    "9. Update",
    "10. Exit",
)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _as_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def _describe(employee: Employee) -> str:
    return f"Name: {employee.name}, ID: {employee.emp_id}, Salary: {employee.salary:g}"


def _show_all(tree: EmployeeTree) -> None:
    for employee in tree:
        print(_describe(employee))


def _or_minus_one(extreme: Callable[[], float]) -> str:
    try:
        return f"{extreme():g}"
    except ValueError:
        return "-1"


def _run(tree: EmployeeTree, choice: Optional[int], ask: Callable[[str], str]) -> None:
    if choice == 1:
        name = ask("Enter the name: ")
        emp_id = ask("Enter the employee ID: ")
        salary = float(ask("Enter the salary: "))
        tree.insert(name, emp_id, salary)
    elif choice == 2:
        _show_all(tree)
    elif choice == 3:
        key = float(ask("Enter salary to search: "))
        try:
            found = tree.find(key)
        except KeyError:
            print("Key not found!")
        else:
            print(f"Key found: {found.name}, ID: {found.emp_id}, Salary: {found.salary:g}")
    elif choice == 4:
        _show_all(tree)
        print(f"Total employees: {len(tree)}")
    elif choice == 5:
        print(f"Minimum salary: {_or_minus_one(tree.min_salary)}")
    elif choice == 6:
        print(f"Maximum salary: {_or_minus_one(tree.max_salary)}")
    elif choice == 7:
        _show_all(tree)
        if len(tree) == 0:
            print("No employees to calculate average salary.")
        else:
            print(f"Average salary: {tree.average_salary():g}")
    elif choice == 8:
        key = float(ask("Enter salary of employee to delete: "))
        tree.delete(key)
        print("Deleted (if existed).")
    elif choice == 9:
        key = float(ask("Enter salary of employee to update: "))
        try:
            current = tree.find(key)
        except KeyError:
            print("Employee not found!")
            return
        print("Current details:")
        print(_describe(current))
        name = ask("Enter new name: ")
        emp_id = ask("Enter new ID: ")
        tree.update(key, name, emp_id)
        print("Salary cannot be updated here. To change salary, delete and re-insert the employee.")
    else:
        print("Invalid choice!")


def main(argv=None) -> int:
    """Run the interactive employee menu on standard input."""
    tree = EmployeeTree()
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="")
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    try:
        while True:
            print("\nMENU:")
            for line in _MENU:
                print(line)
            choice = _as_int(ask("Enter choice: "))
            if choice == 10:
                print("Exiting...")
                return 0
            try:
                _run(tree, choice, ask)
            except ValueError:
                print("Invalid input!")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())