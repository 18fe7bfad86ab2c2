# coding=utf-8

import time
import logging

log = logging.getLogger('ipqueue.benchmarks')


def log_time(name):
    """
    Log the wall time of every call of the decorated benchmark.
    """

    def wrapper(func):
        def run(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                log.info('%s: %.3fs', name, time.perf_counter() - start)

        return run

    return wrapper
