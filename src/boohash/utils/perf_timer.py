import logging
import time


class PerfTimer:
    def __init__(self, label, logger=None, enabled=True):
        self.label = label
        self.logger = logger or logging.getLogger(__name__)
        self.enabled = enabled
        self.start = None
        self.elapsed = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.elapsed = time.perf_counter() - self.start
        if self.enabled and exc_type is None:
            self.logger.info("[%s] computed in %.3f milliseconds", self.label, self.elapsed * 1000)
