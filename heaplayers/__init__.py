"""Building blocks for memory-allocator experiments: bins, lists, a simulated heap, region layers and utilities."""

__version__ = "0.1.0"

__all__ = [
    "bins",
    "dynarray",
    "heapsim",
    "lists",
    "mathutil",
    "reaplayers",
    "regionsimulator",
    "singleton",
    "threads",
    "timer",
    "tprintf",
]