"""Trees, heaps, hash tables and graph algorithms, each with an interactive menu program."""

__version__ = "0.1.0"