"""Classic graph, grid, linked-list and sorting algorithms with a small command line."""

__version__ = "0.1.0"

__all__ = ["cli", "graphs", "grid", "linked_list", "sorting"]