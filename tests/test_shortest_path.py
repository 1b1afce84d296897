import io

import pytest

from dsakit.shortest_path import WeddingPlanner, main


def test_names_start_with_home():
    planner = WeddingPlanner(["A", "B"])
    assert planner.names == ("Home", "A", "B")


def test_direct_roads():
    planner = WeddingPlanner(["A", "B"])
    planner.add_road(0, 1, 5)
    planner.add_road(0, 2, 7)
    assert planner.distances() == [5, 7]
    assert planner.nearest_hall() == ("A", 5)


def test_indirect_path_is_shorter():
    planner = WeddingPlanner(["A", "B"])
    planner.add_road(0, 1, 4)
    planner.add_road(1, 2, 4)
    planner.add_road(0, 2, 10)
    assert planner.distances() == [4, 8]


def test_unreachable_hall_is_none():
    planner = WeddingPlanner(["A", "B"])
    planner.add_road(0, 1, 3)
    assert planner.distances() == [3, None]
    assert planner.nearest_hall() == ("A", 3)


def test_no_reachable_hall():
    planner = WeddingPlanner(["A"])
    assert planner.distances() == [None]
    assert planner.nearest_hall() is None


def test_zero_distance_means_no_road():
    planner = WeddingPlanner(["A"])
    planner.add_road(0, 1, 0)
    assert planner.distances() == [None]


def test_tie_picks_first_hall():
    planner = WeddingPlanner(["A", "B"])
    planner.add_road(0, 2, 6)
    planner.add_road(0, 1, 6)
    assert planner.nearest_hall() == ("A", 6)


def test_road_out_of_range():
    planner = WeddingPlanner(["A"])
    with pytest.raises(IndexError):
        planner.add_road(0, 2, 1)


def test_too_many_halls():
    with pytest.raises(ValueError):
        WeddingPlanner([f"h{n}" for n in range(100)])


def test_main_reports_best_option(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nA B\n2\n0 1 5\n0 2 9\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "To A : 5 units" in out
    assert "Best option: A is the nearest hall with a distance of 5 units." in out