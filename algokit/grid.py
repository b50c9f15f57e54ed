"""Room counting on a grid map."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["count_rooms"]

WALL = "#"


def count_rooms(grid: Sequence[str]) -> int:
    """Count the rooms of a map: groups of non-wall cells joined side by side."""
    if not grid:
        return 0
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows of the grid must have the same length")

    height = len(grid)
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for start_row, row in enumerate(grid):
        for start_col, cell in enumerate(row):
            if cell == WALL or (start_row, start_col) in seen:
                continue
            rooms += 1
            seen.add((start_row, start_col))
            stack = [(start_row, start_col)]
            while stack:
                r, c = stack.pop()
                for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                    if (
                        0 <= nr < height
                        and 0 <= nc < width
                        and grid[nr][nc] != WALL
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms