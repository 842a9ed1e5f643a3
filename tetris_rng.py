"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import PIECES


class PieceRandom:
    PIECES = PIECES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        # No bag and no repeat rejection: every kind is equally likely each draw.
        return self._rng.choice(self.PIECES)
