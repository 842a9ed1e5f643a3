"""Piece model, shape catalog, naive in-place rotation"""
from dataclasses import dataclass
from typing import Iterator, Tuple

PIECES = ("I", "O", "T", "J", "L", "S", "Z")

Mask = Tuple[Tuple[int, ...], ...]

# Four rotation states per kind, top-left of the 4x4 box is the piece origin.
SHAPES = {
    "I": (
        ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)),
        ((0,0,1,0),(0,0,1,0),(0,0,1,0),(0,0,1,0)),
        ((0,0,0,0),(0,0,0,0),(1,1,1,1),(0,0,0,0)),
        ((0,1,0,0),(0,1,0,0),(0,1,0,0),(0,1,0,0)),
    ),
    "O": (
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
    ),
    "T": (
        ((0,0,0,0),(0,1,0,0),(1,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,0,0),(0,1,1,0),(0,1,0,0)),
        ((0,0,0,0),(0,0,0,0),(1,1,1,0),(0,1,0,0)),
        ((0,0,0,0),(0,1,0,0),(1,1,0,0),(0,1,0,0)),
    ),
    "J": (
        ((0,0,0,0),(1,0,0,0),(1,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,1,0),(0,1,0,0),(0,1,0,0)),
        ((0,0,0,0),(0,0,0,0),(1,1,1,0),(0,0,1,0)),
        ((0,0,0,0),(0,1,0,0),(0,1,0,0),(1,1,0,0)),
    ),
    "L": (
        ((0,0,0,0),(0,0,1,0),(1,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,0,0),(0,1,0,0),(0,1,1,0)),
        ((0,0,0,0),(0,0,0,0),(1,1,1,0),(1,0,0,0)),
        ((0,0,0,0),(1,1,0,0),(0,1,0,0),(0,1,0,0)),
    ),
    "S": (
        ((0,0,0,0),(0,1,1,0),(1,1,0,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,0,0),(0,1,1,0),(0,0,1,0)),
        ((0,0,0,0),(0,0,0,0),(0,1,1,0),(1,1,0,0)),
        ((0,0,0,0),(1,0,0,0),(1,1,0,0),(0,1,0,0)),
    ),
    "Z": (
        ((0,0,0,0),(1,1,0,0),(0,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,0,1,0),(0,1,1,0),(0,1,0,0)),
        ((0,0,0,0),(0,0,0,0),(1,1,0,0),(0,1,1,0)),
        ((0,0,0,0),(0,1,0,0),(1,1,0,0),(1,0,0,0)),
    ),
}


def mask(kind: str, rotation: int) -> Mask:
    return SHAPES[kind][rotation % 4]


def mask_cells(kind: str, rotation: int) -> Iterator[Tuple[int, int]]:
    """Yield (mx, my) offsets of the occupied cells of a shape."""
    for my, row in enumerate(mask(kind, rotation)):
        for mx, v in enumerate(row):
            if v:
                yield mx, my


@dataclass
class Piece:
    t: str
    state: int
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int) -> "Piece":
        return Piece(t, 0, cols // 2 - 2, 0)

    @property
    def shape(self) -> Mask:
        return mask(self.t, self.state)

    def cells(self) -> Iterator[Tuple[int, int]]:
        for mx, my in mask_cells(self.t, self.state):
            yield self.x + mx, self.y + my

    def fits(self, board) -> bool:
        return board.can_place(self.t, self.state, self.x, self.y)

    # Every move is tried in place and rolled back when the board rejects it.

    def move_left(self, board) -> bool:
        self.x -= 1
        if not self.fits(board):
            self.x += 1
            return False
        return True

    def move_right(self, board) -> bool:
        self.x += 1
        if not self.fits(board):
            self.x -= 1
            return False
        return True

    def move_down(self, board) -> bool:
        """Step one row down; False means the piece has come to rest."""
        self.y += 1
        if not self.fits(board):
            self.y -= 1
            return False
        return True

    def rotate(self, board) -> bool:
        """Rotate clockwise about the same origin; no kicks are tried."""
        old = self.state
        self.state = (old + 1) % 4
        if not self.fits(board):
            self.state = old
            return False
        return True
