import math
import numpy
from .ebd0_table import BD0_SCALE
from ..special.log1pmx import log1pmx
from ..utils.constants import DBL_MIN, DBL_MAX, ML_POSINF, M_LN2
from ..utils.diagnostics import ML_WARN_return_NAN, MATHLIB_WARNING
from ..utils.ieee import ieee754


@ieee754(2)
def bd0(x, np):
    """
    Evaluates the "deviance part"
    bd0(x,M) :=  M * D0(x/M) = M*[ x/M * log(x/M) + 1 - (x/M) ] =
            =  x * log(x/M) + M - x
    where M = E[X] = n*p (or = lambda), for	  x, M > 0

    in a manner that should be stable (with small relative error)
    for all x and M=np. In particular for x/np close to 1, direct
    evaluation fails, and evaluation is based on the Taylor series
    of log((1+v)/(1-v)) with v = (x-np)/(x+np).

        Adapted from R code written by Catherine Loader

    """
    if not math.isfinite(x) or not math.isfinite(np) or np == 0.0:
        return ML_WARN_return_NAN("bd0")

    if math.fabs(x - np) < 0.1 * (x + np):
        v = (x - np) / (x + np)  # might underflow to 0
        s = (x - np) * v
        if math.fabs(s) < DBL_MIN:
            return s
        ej = 2 * x * v
        v = v * v
        # |v| < 0.1, so v^2000 is "zero"
        for j in range(1, 1000):
            ej = ej * v
            s_ = s
            s = s + ej / ((j << 1) + 1)
            if s == s_:
                # last term was effectively 0
                return s
        MATHLIB_WARNING(
            "bd0({0}, {1}): T.series failed to converge in 1000 it.; s={2}, ej/(2j+1)={3}".format(
                x, np, s, ej / ((1000 << 1) + 1)))

    # |x - np| is not too small
    return x * numpy.log(x / np) + np - x


def _add1(d, yh, yl):
    # split d into an integer part for yh and a rest in [-0.5, 0.5) for yl
    d1 = numpy.floor(d + 0.5)
    d2 = d - d1
    return yh + d1, yl + d2


@ieee754(2)
def ebd0(x, M):
    """
    Compute x * log (x / M) + (M - x)
    aka -x * log1pmx ((M - x) / x)

    Returns the pair (yh, yl) whose sum is the result; yh carries the
    integer part so that the total survives further cancellation
    (see dpois_raw()).

    Adapted from R code written by Morten Welinder

    """
    Sb = 10
    S = float(1 << Sb)  # 2^10 = 1024
    N = len(BD0_SCALE) - 1  # 128

    if math.isnan(x) or math.isnan(M):
        return x + M, 0.

    yh = yl = 0.

    if x == M:
        return yh, yl
    if x == 0:
        return M, yl
    if M == 0:
        return ML_POSINF, yl

    # as when (x == 0)
    if M / x == ML_POSINF:
        return M, yl

    # M/x = r * 2^e with r in [0.5, 1); underflow is handled by fg = Inf
    r, e = numpy.frexp(M / x)
    e = int(e)

    # prevent later overflow
    if M_LN2 * (-e) > 1. + DBL_MAX / x:
        return ML_POSINF, yl

    i = int(numpy.floor((r - 0.5) * (2 * N) + 0.5))
    # now, 0 <= i <= N
    f = numpy.floor(S / (0.5 + i / (2.0 * N)) + 0.5)
    fg = numpy.ldexp(f, -(e + Sb))  # f * 2^-(e+Sb)
    if fg == ML_POSINF:
        return fg, yl

    # We now have (M * fg / x) close to 1. Since
    #   log((x/M)^x * exp(M-x))
    #     = -x*log1pmx((M*fg-x)/x) + x*log(fg) + M - M*fg
    # and fg has at most 10 bits, x * log(fg) is accumulated exactly from
    # the float32 parts of the table when x is "nice".
    yh, yl = _add1(-x * log1pmx((M * fg - x) / x), yh, yl)
    if fg == 1:
        return yh, yl

    for j in range(4):
        yh, yl = _add1(x * float(BD0_SCALE[i][j]), yh, yl)  # x*log(fg*2^e)
        yh, yl = _add1(-x * e * float(BD0_SCALE[0][j]), yh, yl)  # x*log(1/2^e)
        if not math.isfinite(yh):
            return ML_POSINF, 0.

    yh, yl = _add1(M, yh, yl)
    yh, yl = _add1(-M * fg, yh, yl)
    return yh, yl
