#stopwatch.py

import time
import constants as C


class Stopwatch:
    """Measures elapsed wall time for log stamps and benchmark timings."""
    def __init__(self, clock=time.perf_counter):
        self.clock = clock
        self.start_time = None
        self.stop_time = None

    def start(self):
        self.start_time = self.clock()
        self.stop_time = None
        return self

    def stop(self):
        if self.start_time is not None and self.stop_time is None:
            self.stop_time = self.clock()
        return self.elapsed_seconds

    @property
    def is_running(self):
        return self.start_time is not None and self.stop_time is None

    @property
    def elapsed_seconds(self):
        if self.start_time is None:
            return 0.0
        end = self.stop_time if self.stop_time is not None else self.clock()
        return end - self.start_time

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def get_display_string(self):
        return format_duration(self.elapsed_seconds)


def format_duration(seconds):
    """Formats a duration as 'Xs Yms Zus'."""
    total_us = int(round(seconds * C.MICROSECONDS_PER_SECOND))
    whole_seconds, remainder_us = divmod(total_us, C.MICROSECONDS_PER_SECOND)
    millis, micros = divmod(remainder_us, 1000)
    return f"{whole_seconds}s {millis}ms {micros}us"
