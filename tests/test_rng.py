from collections import Counter

from tetris_piece import PIECES
from tetris_rng import PieceRandom


def test_same_seed_same_sequence():
    a, b = PieceRandom(7), PieceRandom(7)
    assert [a.next_piece() for _ in range(50)] == [b.next_piece() for _ in range(50)]


def test_draws_every_kind():
    rng = PieceRandom(0)
    counts = Counter(rng.next_piece() for _ in range(7000))
    assert set(counts) == set(PIECES)
    assert all(600 < n < 1400 for n in counts.values())
