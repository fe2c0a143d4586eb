import functools
import numpy as np


def ieee754(nargs):
    '''
    Decorator for the numerical entry points.

    The first nargs positional arguments are coerced to numpy.float64 and
    the function body runs with numpy floating point errors ignored, so
    that arithmetic follows C double semantics (x/0 = Inf, log(0) = -Inf,
    0/0 = NaN) instead of raising ZeroDivisionError or OverflowError.

    '''
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            args = tuple(np.float64(v) for v in args[:nargs]) + tuple(args[nargs:])
            with np.errstate(all="ignore"):
                return func(*args, **kwargs)
        return wrapper
    return decorator
