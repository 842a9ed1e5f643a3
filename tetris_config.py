
CONFIG = {
    "BOARD_COLS": 10,
    "BOARD_ROWS": 20,
    "BASE_DROP_INTERVAL_US": 500_000,
    "LINES_PER_LEVEL": 10,
    "POINTS_PER_LINE": 100,
    "TICK_MS": 16,
    "CELL_SIZE": 28,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
