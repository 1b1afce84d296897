import io

import pytest

from dsakit.employees import Employee, EmployeeTree, main

SALARIES = [5000.0, 3000.0, 8000.0, 2000.0, 4000.0, 7000.0, 9000.0]


@pytest.fixture
def tree():
    result = EmployeeTree()
    for number, salary in enumerate(SALARIES):
        result.insert(f"emp{number}", f"E{number}", salary)
    return result


def _is_sorted(values):
    return all(a <= b for a, b in zip(values, values[1:]))


def test_iteration_is_in_salary_order(tree):
    assert [e.salary for e in tree] == sorted(SALARIES)


def test_len_counts_all(tree):
    assert len(tree) == len(SALARIES)


def test_empty_tree_has_no_length():
    assert len(EmployeeTree()) == 0
    assert list(EmployeeTree()) == []


def test_insert_returns_record():
    tree = EmployeeTree()
    record = tree.insert("ann", "A1", 1200)
    assert record == Employee("ann", "A1", 1200.0)


def test_find_returns_matching_employee(tree):
    found = tree.find(8000.0)
    assert found.name == "emp2"
    assert found.emp_id == "E2"


def test_find_missing_raises(tree):
    with pytest.raises(KeyError):
        tree.find(1234.0)


def test_min_and_max(tree):
    assert tree.min_salary() == min(SALARIES)
    assert tree.max_salary() == max(SALARIES)


def test_min_max_on_empty_raise():
    tree = EmployeeTree()
    with pytest.raises(ValueError):
        tree.min_salary()
    with pytest.raises(ValueError):
        tree.max_salary()


def test_total_and_average(tree):
    assert tree.total_salary() == pytest.approx(sum(SALARIES))
    assert tree.average_salary() == pytest.approx(sum(SALARIES) / len(SALARIES))


def test_average_on_empty_raises():
    with pytest.raises(ValueError):
        EmployeeTree().average_salary()


@pytest.mark.parametrize("salary", [2000.0, 4000.0, 3000.0, 5000.0, 9000.0])
def test_delete_keeps_order(tree, salary):
    assert tree.delete(salary) is True
    expected = sorted(SALARIES)
    expected.remove(salary)
    assert [e.salary for e in tree] == expected
    with pytest.raises(KeyError):
        tree.find(salary)


def test_delete_root_with_two_children_moves_successor(tree):
    tree.delete(5000.0)
    names = {e.salary: e.name for e in tree}
    assert names[7000.0] == "emp5"
    assert len(tree) == len(SALARIES) - 1


def test_delete_missing_is_noop(tree):
    assert tree.delete(1.0) is False
    assert [e.salary for e in tree] == sorted(SALARIES)


def test_duplicate_salaries_are_kept():
    tree = EmployeeTree()
    tree.insert("a", "1", 100)
    tree.insert("b", "2", 100)
    tree.insert("c", "3", 50)
    assert len(tree) == 3
    tree.delete(100)
    assert [e.salary for e in tree] == [50.0, 100.0]


def test_update_changes_name_and_id(tree):
    updated = tree.update(3000.0, "zed", "Z9")
    assert updated == Employee("zed", "Z9", 3000.0)
    assert tree.find(3000.0).name == "zed"
    assert _is_sorted([e.salary for e in tree])


def test_update_missing_raises(tree):
    with pytest.raises(KeyError):
        tree.update(1.0, "x", "y")


def test_main_inserts_and_displays(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nalice\nE1\n5000\n2\n10\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Name: alice, ID: E1, Salary: 5000" in out
    assert "Exiting..." in out


def test_main_reports_missing_search(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 100\n5\n10\n"))
    main()
    out = capsys.readouterr().out
    assert "Key not found!" in out
    assert "Minimum salary: -1" in out