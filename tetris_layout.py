# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

@dataclass
class Dims:
    cols: int
    rows: int
    cell: int
    margin: int
    border: int
    status_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    status_x: int
    status_y: int

def compute_dims(cols: int, rows: int, cell: int = None) -> Dims:
    cell = int(cell or CONFIG["CELL_SIZE"])
    margin = 16
    border = 3
    status_h = 28

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin
    total_h = margin + status_h + board_h + margin

    status_x = margin
    status_y = margin
    board_x = margin
    board_y = margin + status_h

    return Dims(
        cols=cols, rows=rows, cell=cell, margin=margin, border=border,
        status_h=status_h, board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        status_x=status_x, status_y=status_y
    )
