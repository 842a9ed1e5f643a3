"""Game session: input dispatch, gravity, locking, scoring, game over"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from tetris_board import Board, Snapshot
from tetris_clock import DropClock, Now
from tetris_config import CONFIG
from tetris_piece import Piece
from tetris_rng import PieceRandom

log = logging.getLogger(__name__)

PLAYING = "playing"
GAME_OVER = "game_over"
QUIT = "quit"


class InputEvent(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    SOFT_DROP = "soft_drop"
    QUIT = "quit"
    NONE = "none"


@dataclass(frozen=True)
class TickResult:
    board: Snapshot
    piece: Piece
    score: int
    level: int
    lines: int
    lines_cleared: int
    game_over: bool
    state: str


class Session:
    def __init__(self, cols: int, rows: int, base_interval_us: int,
                 rng: Optional[PieceRandom] = None, clock: Optional[DropClock] = None):
        if base_interval_us <= 0:
            raise ValueError(f"drop interval must be positive, got {base_interval_us}")
        self.board = Board(cols, rows)
        self.base_interval_us = base_interval_us
        self.rng = rng or PieceRandom()
        self.clock = clock or DropClock()
        self.lines_per_level = CONFIG["LINES_PER_LEVEL"]
        self.points_per_line = CONFIG["POINTS_PER_LINE"]

        self.score = 0
        self.level = 1
        self.lines = 0
        self.drop_interval_us = base_interval_us
        self.state = PLAYING
        self.piece = self._spawn()

    @property
    def game_over(self) -> bool:
        return self.state != PLAYING

    def _spawn(self) -> Piece:
        piece = Piece.spawn(self.rng.next_piece(), self.board.cols)
        if not piece.fits(self.board):
            self.state = GAME_OVER
            log.info("game over: %s cannot spawn at (%d, %d), score %d",
                     piece.t, piece.x, piece.y, self.score)
        else:
            log.debug("spawned %s at (%d, %d)", piece.t, piece.x, piece.y)
        return piece

    def _lock(self) -> int:
        p = self.piece
        self.board.lock(p.t, p.state, p.x, p.y)
        cleared = self.board.clear_completed_rows()
        log.debug("locked %s r%d at (%d, %d), cleared %d", p.t, p.state, p.x, p.y, cleared)
        if cleared:
            self.lines += cleared
            # Scored at the level in force before this clear.
            self.score += cleared * self.points_per_line * self.level
            level = self.lines // self.lines_per_level + 1
            if level != self.level:
                log.info("level %d -> %d after %d lines", self.level, level, self.lines)
            self.level = level
            self.drop_interval_us = self.base_interval_us // self.level
        self.piece = self._spawn()
        return cleared

    def _dispatch(self, event: InputEvent) -> int:
        p, board = self.piece, self.board
        if event is InputEvent.MOVE_LEFT:
            p.move_left(board)
        elif event is InputEvent.MOVE_RIGHT:
            p.move_right(board)
        elif event is InputEvent.ROTATE:
            p.rotate(board)
        elif event is InputEvent.SOFT_DROP:
            if not p.move_down(board):
                return self._lock()
        elif event is InputEvent.QUIT:
            self.state = QUIT
            log.info("quit with score %d", self.score)
        return 0

    def tick(self, event: Optional[InputEvent] = None) -> TickResult:
        """Advance one scheduler tick with at most one input event."""
        cleared = 0
        if not self.game_over:
            if event is not None:
                cleared += self._dispatch(event)
            if not self.game_over and self.clock.elapsed_us() >= self.drop_interval_us:
                if not self.piece.move_down(self.board):
                    cleared += self._lock()
                self.clock.reset()
        return self.result(cleared)

    def time_to_next_drop_us(self) -> int:
        return self.clock.time_to_next_us(self.drop_interval_us)

    def result(self, lines_cleared: int = 0) -> TickResult:
        p = self.piece
        return TickResult(
            board=self.board.snapshot(),
            piece=Piece(p.t, p.state, p.x, p.y),
            score=self.score,
            level=self.level,
            lines=self.lines,
            lines_cleared=lines_cleared,
            game_over=self.game_over,
            state=self.state,
        )


def new_session(cols: int, rows: int, base_interval_us: int,
                seed: Optional[int] = None, clock: Optional[Now] = None) -> Session:
    return Session(cols, rows, base_interval_us, PieceRandom(seed), DropClock(clock))


def tick(session: Session, event: Optional[InputEvent] = None) -> TickResult:
    return session.tick(event)
