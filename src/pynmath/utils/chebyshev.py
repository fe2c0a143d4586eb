import math
from .diagnostics import ML_WARN_return_NAN


def chebyshev_init(dos, nos, eta):
    '''
    Determine the number of terms of the Chebyshev series dos needed
    for an error of at most eta.

    Adapted from the RMath function written by Ross Ihaka

    '''
    if nos < 1:
        return 0

    err = 0.0
    i = 0
    for ii in range(1, nos + 1):
        i = nos - ii
        err += math.fabs(dos[i])
        if err > eta:
            return i
    return i


def chebyshev_eval(x, a, n):
    '''
    evaluates the n-term Chebyshev series
    a at x

    '''
    if n < 1 or n > 1000:
        return ML_WARN_return_NAN("chebyshev_eval")

    if x < -1.1 or x > 1.1:
        return ML_WARN_return_NAN("chebyshev_eval")

    twox = x * 2
    b2 = b1 = 0.
    b0 = 0.
    for i in range(1, n + 1):
        b2 = b1
        b1 = b0
        b0 = twox * b1 - b2 + a[n - i]
    return (b0 - b2) * 0.5
