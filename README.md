# dsakit

A small collection of classic data structures and graph algorithms. Each
module offers a library class and an interactive menu program that reads its
input from standard input.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Main names | What it does |
| --- | --- | --- |
| `dsakit.employees` | `EmployeeTree`, `Employee` | Binary search tree of employees keyed by salary (equal salaries go right): `insert`, `find`, `delete`, `update`, `min_salary`, `max_salary`, `total_salary`, `average_salary`; iteration yields employees in salary order |
| `dsakit.binary_tree` | `BinaryTree` | Binary tree where each new value is placed by following a path of `l`/`r` steps: `preorder`, `leaves`, `height`, `len()` |
| `dsakit.heap` | `MinHeap` | Array min-heap with a fixed capacity (10 by default) built by sift-up: `push`, `extend`, `render` |
| `dsakit.obst` | `OptimalBST` | Optimal binary search tree by dynamic programming, with `weights`, `costs` and `roots` tables, `cost()`, `structure()` and `render()`; at most 10 keys |
| `dsakit.flights` | `FlightNetwork` | Undirected weighted graph of up to 10 cities: `add_flight`, `matrix`, `neighbours` (newest flight first), `render_matrix`, `render_list` |
| `dsakit.adjacency` | `AdjacencyMatrix` | Unweighted undirected graph on vertices `0..n-1` (at most 100): `add_edge`, `rows`, `render` |
| `dsakit.music_library` | `MusicLibrary`, `Track`, `TableFullError`, `id_hash` | Fixed-size hash table with linear probing keyed by track id; deleted slots are reused |
| `dsakit.medical_records` | `MedicalRecords`, `Patient`, `id_hash` | Hash table with quadratic probing that doubles its size and reinserts every record when a probe finds no free slot |
| `dsakit.shortest_path` | `WeddingPlanner` | Dijkstra's algorithm from home (place 0) to each hall: `add_road`, `distances`, `nearest_hall` |
| `dsakit.prims` | `CityNetwork` | Prim's minimum spanning tree over named cities (at most 10; 999 means no road): `add_road`, `matrix`, `minimum_spanning_tree`, `total_distance`, `render` |

Lookups that find nothing raise `KeyError`; asking for the minimum, maximum or
average of an empty `EmployeeTree` raises `ValueError`, as does a spanning tree
over cities that are not all connected.

## Library use

```python
from dsakit.employees import EmployeeTree

tree = EmployeeTree()
tree.insert("alice", "E1", 50000)
tree.insert("bob", "E2", 42000)
print(len(tree), tree.min_salary(), tree.average_salary())
for employee in tree:          # in salary order
    print(employee)
```

```python
from dsakit.prims import CityNetwork

network = CityNetwork(["pune", "mumbai", "nashik"])
network.add_road("pune", "mumbai", 150)
network.add_road("mumbai", "nashik", 170)
network.add_road("pune", "nashik", 210)
print(network.minimum_spanning_tree())
print(network.total_distance())
```

```python
from dsakit.music_library import MusicLibrary, Track

library = MusicLibrary(10)
library.insert(Track(name="song", track_id="T1", kind="pop"))
print(library.find("T1"))
print(library.by_type("pop"))
```

## Interactive programs

Every module also has a menu program that reads whitespace-separated input
from standard input:

```
dsakit-employees
dsakit-binary-tree
dsakit-heap
dsakit-obst
dsakit-flights
dsakit-adjacency
dsakit-music-library
dsakit-medical-records
dsakit-shortest-path
dsakit-prims
```

## Limits

All data lives in memory only: nothing is saved to or loaded from a file, and
each program starts empty every time it runs.