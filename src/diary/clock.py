"""Wall clock in the diary's timestamp unit."""

import time


def now_micros() -> int:
    """Microseconds since the Unix epoch."""
    return time.time_ns() // 1000
