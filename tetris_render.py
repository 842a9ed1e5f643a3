"""
Rendering helpers for the Tetris project.

- Pre-render the static background (frame + grid) and the cell sprites once per Dims.
- Cache the status line surface; re-render only when score/level/lines change.
- compose() overlays the falling piece on a board snapshot and is pure data.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from tetris_layout import Dims
from tetris_piece import Piece, PIECES

# Colors per tetromino type (falling piece only, locked cells do not keep their kind)
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
LOCKED = (150,160,190)
TEXT = (200,210,240)


def compose(board, piece: Optional[Piece]) -> List[List[bool]]:
    """Board snapshot with the active piece's in-bounds cells set."""
    grid = [list(row) for row in board]
    if piece is not None:
        for x, y in piece.cells():
            if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
                grid[y][x] = True
    return grid


def status_line(score: int, level: int, lines: int) -> str:
    return f"Score: {score} Level: {level} Lines: {lines}"


@dataclass
class HudCache:
    text: str = ""
    surf: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (border + grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        self.board_rect = pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)
        frame = self.board_rect.inflate(2*d.border, 2*d.border)
        pygame.draw.rect(self.bg, (120,130,170), frame, d.border)

    # ---------- Small cell sprites ----------
    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for t in PIECES:
            s = pygame.Surface((c-2, c-2))
            s.fill(COLORS[t])
            self.cell_surf[t] = s
        self.locked_surf = pygame.Surface((c-2, c-2))
        self.locked_surf.fill(LOCKED)

    def cell_pos(self, bx: int, by: int) -> Tuple[int, int]:
        return (self.dims.board_x + bx*self.dims.cell + 1,
                self.dims.board_y + by*self.dims.cell + 1)

    # ---------- HUD ----------
    def draw_status(self, screen: pygame.Surface, score: int, level: int, lines: int):
        text = status_line(score, level, lines)
        if text != self.hud.text or self.hud.surf is None:
            self.hud.text = text
            self.hud.surf = self.font.render(text, True, TEXT)
        screen.blit(self.hud.surf, (self.dims.status_x, self.dims.status_y))

    def draw_banner(self, screen: pygame.Surface, msg: str):
        surf = self.big_font.render(msg, True, (255,220,220))
        screen.blit(surf, surf.get_rect(center=self.board_rect.center))

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, result):
        screen.blit(self.bg, (0,0))
        # A piece that failed to spawn overlaps the stack, so it is not drawn.
        piece = None if result.game_over else result.piece
        moving = set(piece.cells()) if piece else set()
        for y, row in enumerate(compose(result.board, piece)):
            for x, v in enumerate(row):
                if v:
                    surf = self.cell_surf[piece.t] if (x, y) in moving else self.locked_surf
                    screen.blit(surf, self.cell_pos(x, y))
        self.draw_status(screen, result.score, result.level, result.lines)
