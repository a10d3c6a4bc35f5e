import io
import sys
import time
import logging
import contextlib
import cProfile
import pstats

from functools import wraps


@contextlib.contextmanager
def profile():
    profile = cProfile.Profile()
    profile.enable()
    try:
        yield profile
    finally:
        profile.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profile, stream=stream).sort_stats("cumulative")
        stats.print_stats()
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.debug(stream.getvalue())
        else:
            print(stream.getvalue(), file=sys.stderr)


def timeit(f):
    @wraps(f)
    def wrap(*args, **kw):
        start = time.perf_counter()
        result = f(*args, **kw)
        elapsed = time.perf_counter() - start
        logging.debug(f"func: {f.__name__}, time: {elapsed:.6f}s")
        return result
    return wrap
