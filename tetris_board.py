"""Board: collide, lock, sweep"""
from typing import List, Tuple
from tetris_piece import mask_cells

Snapshot = Tuple[Tuple[bool, ...], ...]


class Board:
    """rows x cols grid of cells, True where a block has been locked."""

    def __init__(self, cols: int, rows: int):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"board must be at least 1x1, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        self.grid: List[List[bool]] = [[False] * cols for _ in range(rows)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_cell_empty(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y): return False
        return not self.grid[y][x]

    def set_cell(self, x: int, y: int, filled: bool = True):
        self.grid[y][x] = filled

    def fill_row(self, y: int):
        self.grid[y] = [True] * self.cols

    def can_place(self, kind: str, rotation: int, x: int, y: int) -> bool:
        for mx, my in mask_cells(kind, rotation):
            if not self.is_cell_empty(x + mx, y + my):
                return False
        return True

    def lock(self, kind: str, rotation: int, x: int, y: int):
        """Write the piece into the grid. Caller has checked can_place."""
        for mx, my in mask_cells(kind, rotation):
            self.grid[y + my][x + mx] = True

    def clear_completed_rows(self) -> int:
        """Clear full rows bottom-up and return how many went.

        The same row index is tested again after a clear, since the row above
        has just dropped into it.
        """
        cleared = 0
        y = self.rows - 1
        while y >= 0:
            if all(self.grid[y]):
                del self.grid[y]
                self.grid.insert(0, [False] * self.cols)
                cleared += 1
            else:
                y -= 1
        return cleared

    def top_row_has_filled_cell(self) -> bool:
        return any(self.grid[0])

    def snapshot(self) -> Snapshot:
        return tuple(tuple(row) for row in self.grid)
