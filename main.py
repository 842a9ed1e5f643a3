import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_input import poll
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_session import new_session, QUIT

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def wait_for_exit(clock):
    while True:
        for e in pygame.event.get():
            if e.type in (pygame.QUIT, pygame.KEYDOWN):
                return
        clock.tick(30)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    cols, rows = CONFIG["BOARD_COLS"], CONFIG["BOARD_ROWS"]
    dims = compute_dims(cols, rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    session = new_session(cols, rows, CONFIG["BASE_DROP_INTERVAL_US"], seed=CONFIG["SEED"])
    log.info("new %dx%d session, drop interval %dus", cols, rows, session.drop_interval_us)

    result = session.result()
    while not result.game_over:
        # Clock.tick sleeps out the rest of the frame so the loop does not spin.
        clock.tick(1000 // CONFIG["TICK_MS"])
        result = session.tick(poll())
        render.draw(screen, result)
        pygame.display.flip()

    if result.state != QUIT:
        render.draw(screen, result)
        render.draw_banner(screen, "GAME OVER")
        pygame.display.flip()
        wait_for_exit(clock)
    pygame.quit()
    print(f"Game over! Final score: {result.score} (level {result.level}, {result.lines} lines)")
    sys.exit()


if __name__ == '__main__':
    main()
