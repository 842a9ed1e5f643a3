"""Gravity timer over an injectable microsecond clock"""
import time
from typing import Callable, Optional

Now = Callable[[], int]


def monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class DropClock:
    def __init__(self, now: Optional[Now] = None):
        self.now = now or monotonic_us
        self.last = self.now()

    def reset(self):
        self.last = self.now()

    def elapsed_us(self) -> int:
        return self.now() - self.last

    def time_to_next_us(self, interval_us: int) -> int:
        return max(0, interval_us - self.elapsed_us())
