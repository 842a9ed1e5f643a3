"""Session tick protocol, scoring, leveling and game over"""
import itertools

import pytest

from tetris_clock import DropClock
from tetris_session import (GAME_OVER, PLAYING, QUIT, InputEvent, Session,
                            new_session, tick)

BASE = 500_000


class FixedRandom:
    def __init__(self, *kinds):
        self._it = itertools.cycle(kinds)

    def next_piece(self):
        return next(self._it)


class FakeClock:
    def __init__(self):
        self.t = 0

    def __call__(self):
        return self.t


def make(*kinds, cols=10, rows=20):
    clock = FakeClock()
    s = Session(cols, rows, BASE, FixedRandom(*kinds), DropClock(clock))
    return s, clock


def drop(s):
    """Soft-drop the active piece to the floor and lock it; return the tick result."""
    while s.piece.move_down(s.board):
        pass
    return s.tick(InputEvent.SOFT_DROP)


def fill_except(s, y, *cols):
    for x in range(s.board.cols):
        s.board.set_cell(x, y, x not in cols)


def test_new_session_defaults():
    s = new_session(10, 20, BASE, seed=1, clock=lambda: 0)
    r = s.result()
    assert (r.score, r.level, r.lines, r.game_over, r.state) == (0, 1, 0, False, PLAYING)
    assert s.drop_interval_us == BASE
    assert (r.piece.x, r.piece.y, r.piece.state) == (3, 0, 0)
    assert len(r.board) == 20 and all(len(row) == 10 for row in r.board)


def test_seeded_sessions_spawn_the_same_pieces():
    a = new_session(10, 20, BASE, seed=42, clock=lambda: 0)
    b = new_session(10, 20, BASE, seed=42, clock=lambda: 0)
    assert [a.rng.next_piece() for _ in range(20)] == [b.rng.next_piece() for _ in range(20)]


@pytest.mark.parametrize("cols,rows,interval", [(0, 20, BASE), (10, 0, BASE), (-3, 20, BASE), (10, 20, 0)])
def test_construction_rejects_bad_input(cols, rows, interval):
    with pytest.raises(ValueError):
        new_session(cols, rows, interval)


def test_board_too_narrow_for_spawn_starts_over():
    s, _ = make("I", cols=2)
    assert s.game_over and s.state == GAME_OVER


def test_input_moves_and_rotates():
    s, _ = make("T")
    r = tick(s, InputEvent.MOVE_LEFT)
    assert r.piece.x == 2
    r = tick(s, InputEvent.MOVE_RIGHT)
    assert r.piece.x == 3
    r = tick(s, InputEvent.ROTATE)
    assert r.piece.state == 1
    r = tick(s, InputEvent.SOFT_DROP)
    assert r.piece.y == 1
    r = tick(s, InputEvent.NONE)
    assert (r.piece.x, r.piece.y, r.piece.state) == (3, 1, 1)
    assert not any(any(row) for row in r.board)


def test_blocked_input_is_ignored():
    s, _ = make("I")
    for _ in range(5):
        s.tick(InputEvent.MOVE_LEFT)
    assert s.piece.x == 0
    r = s.tick(InputEvent.MOVE_LEFT)
    assert r.piece.x == 0 and not r.game_over


def test_gravity_waits_for_the_drop_interval():
    s, clock = make("T")
    clock.t = BASE - 1
    assert s.tick().piece.y == 0
    assert s.time_to_next_drop_us() == 1
    clock.t = BASE
    assert s.tick().piece.y == 1
    # the reference point moved to the drop
    assert s.tick().piece.y == 1
    assert s.time_to_next_drop_us() == BASE
    clock.t = 2 * BASE
    assert s.tick().piece.y == 2


def test_gravity_locks_a_resting_piece():
    s, clock = make("O")
    while s.piece.move_down(s.board):
        pass
    clock.t = BASE
    r = s.tick()
    assert r.board[18][4] and r.board[19][5]
    assert (r.piece.x, r.piece.y) == (3, 0)
    assert s.clock.elapsed_us() == 0


def test_soft_drop_on_rest_locks_immediately():
    s, _ = make("I")
    r = drop(s)
    assert r.board[19][3:7] == (True, True, True, True)
    assert r.lines_cleared == 0 and r.score == 0
    assert r.piece.y == 0


def test_single_line_scores_100():
    s, _ = make("I")
    fill_except(s, 19, 3, 4, 5, 6)
    r = drop(s)
    assert (r.lines_cleared, r.score, r.lines, r.level) == (1, 100, 1, 1)
    assert not any(any(row) for row in r.board)


def test_tetris_at_level_one_scores_400():
    s, _ = make("I")
    for y in range(16, 20):
        fill_except(s, y, 5)
    s.tick(InputEvent.ROTATE)
    r = drop(s)
    assert (r.lines_cleared, r.score, r.lines, r.level) == (4, 400, 4, 1)


def test_two_lines_at_level_three_scores_600():
    s, _ = make("O")
    s.lines, s.level = 20, 3
    fill_except(s, 18, 4, 5)
    fill_except(s, 19, 4, 5)
    r = drop(s)
    assert (r.lines_cleared, r.score, r.lines, r.level) == (2, 600, 22, 3)
    assert s.drop_interval_us == BASE // 3


def test_score_uses_level_before_the_update():
    s, _ = make("I")
    s.lines = 8
    for y in range(16, 20):
        fill_except(s, y, 5)
    s.tick(InputEvent.ROTATE)
    r = drop(s)
    assert r.score == 400
    assert (r.lines, r.level) == (12, 2)
    assert s.drop_interval_us == BASE // 2


def test_level_follows_total_lines():
    s, _ = make("I")
    last = s.level
    for n in range(1, 26):
        fill_except(s, 19, 3, 4, 5, 6)
        r = drop(s)
        assert r.lines == n
        assert r.level == n // 10 + 1
        assert r.level >= last
        assert s.drop_interval_us == BASE // r.level
        last = r.level
    assert last == 3


def test_blocked_spawn_ends_the_game():
    s, clock = make("I")
    while s.piece.move_down(s.board):
        pass
    s.board.set_cell(4, 1)
    s.board.set_cell(5, 1)
    r = s.tick(InputEvent.SOFT_DROP)
    assert r.game_over and r.state == GAME_OVER
    frozen = r.board
    for ev in (InputEvent.SOFT_DROP, InputEvent.MOVE_LEFT, InputEvent.ROTATE, None):
        clock.t += 10 * BASE
        r = s.tick(ev)
        assert r.board == frozen and r.game_over


def test_quit_is_terminal_and_distinct_from_loss():
    s, clock = make("T")
    r = s.tick(InputEvent.QUIT)
    assert r.game_over and r.state == QUIT
    clock.t = 5 * BASE
    r = s.tick(InputEvent.SOFT_DROP)
    assert r.state == QUIT and r.piece.y == 0


def test_bottom_row_built_from_moves():
    s, _ = make("I", "I", "O")
    for _ in range(3):
        s.tick(InputEvent.MOVE_LEFT)
    assert drop(s).lines_cleared == 0
    s.tick(InputEvent.MOVE_RIGHT)
    assert drop(s).lines_cleared == 0
    for _ in range(6):
        s.tick(InputEvent.MOVE_RIGHT)
    assert s.piece.x == 7
    r = drop(s)
    assert (r.lines_cleared, r.score) == (1, 100)
    assert r.board[19] == (False,) * 8 + (True, True)


def test_tick_result_piece_is_a_copy():
    s, _ = make("T")
    r = s.tick()
    s.tick(InputEvent.MOVE_LEFT)
    assert r.piece.x == 3
