import math
import numpy
from .beta import pbeta
from ..deviance import bd0, stirlerr
from ..special import lgamma1p
from ..utils.constants import DBL_MAX, M_LN_2PI
from ..utils.diagnostics import ML_WARN_return_NAN, MATHLIB_WARNING
from ..utils.dpq_handling import (R_D__0, R_D__1, R_D_exp, R_DT_0, R_DT_1,
                                  R_nonint, R_forceint)
from ..utils.ieee import ieee754


@ieee754(4)
def dbinom_raw(x, n, p, q, give_log=False):
    '''
    Binomial probability of x successes out of n with success
    probability p and q = 1 - p, written as

        exp(stirlerr terms - bd0(x, n*p) - bd0(n-x, n*q)) / sqrt(2 pi x (n-x)/n)

    so that it is accurate for large n. x and n are not checked to be
    integers; the callers do that.

    Adapted from R code written by Catherine Loader

    '''
    if p == 0:
        return R_D__1(give_log) if x == 0 else R_D__0(give_log)
    if q == 0:
        return R_D__1(give_log) if x == n else R_D__0(give_log)

    if x == 0:
        if n == 0:
            return R_D__1(give_log)
        lc = -bd0(n, n * q) - n * p if p < 0.1 else n * numpy.log(q)
        return R_D_exp(lc, give_log)

    if x == n:
        lc = -bd0(n, n * p) - n * q if q < 0.1 else n * numpy.log(p)
        return R_D_exp(lc, give_log)

    if x < 0 or x > n:
        return R_D__0(give_log)

    # n*p or n*q can underflow to zero if n and p or q are small
    lc = (stirlerr(n) - stirlerr(x) - stirlerr(n - x) -
          bd0(x, n * p) - bd0(n - x, n * q))

    # f = (M_2PI*x*(n-x))/n could overflow or underflow
    lf = M_LN_2PI + numpy.log(x) + numpy.log1p(-x / n)
    return R_D_exp(lc - 0.5 * lf, give_log)


@ieee754(3)
def dbinom(x, n, p, give_log=False):
    '''
    The binomial distribution returning the density

    @param x: the number of successes

    @param n: the number of trials

    @param p: Probability of success in each trial

    @param give_log: Probabilities are given as log(p)

    '''
    if math.isnan(x) or math.isnan(n) or math.isnan(p):
        return x + n + p

    if p < 0 or p > 1 or n < 0 or R_nonint(n):
        return ML_WARN_return_NAN("dbinom")
    if R_nonint(x):
        MATHLIB_WARNING("non-integer x = {0:f}".format(x))
        return R_D__0(give_log)
    if x < 0 or not math.isfinite(x):
        return R_D__0(give_log)

    n = R_forceint(n)
    x = R_forceint(x)
    return dbinom_raw(x, n, p, 1 - p, give_log)


@ieee754(3)
def pbinom(x, n, p, lower_tail=True, log_p=False):
    '''
    The binomial function returning the distribution

    @param x: the quantile

    @param n: the number of trials

    @param p: Probability of success in each trial

    @param lower_tail: probabilities are P[X <= x], otherwise, P[X > x]

    @param log_p: Probabilities are given as log(p)

    '''
    if math.isnan(x) or math.isnan(n) or math.isnan(p):
        return x + n + p
    if not math.isfinite(n) or not math.isfinite(p):
        return ML_WARN_return_NAN("pbinom")

    if R_nonint(n):
        MATHLIB_WARNING("non-integer n = {0:f}".format(n))
        return ML_WARN_return_NAN("pbinom")
    n = R_forceint(n)
    # n=0 is a valid value
    if n < 0 or p < 0 or p > 1:
        return ML_WARN_return_NAN("pbinom")

    if x < 0:
        return R_DT_0(lower_tail, log_p)
    x = numpy.floor(x + 1e-7)
    if n <= x:
        return R_DT_1(lower_tail, log_p)
    return pbeta(p, x + 1, n - x, not lower_tail, log_p)


@ieee754(3)
def dnbinom(x, size, prob, give_log=False):
    '''
    The negative binomial distribution returning the density

    @param x: the number of failures before the size-th success

    @param size: target for number of successful trials,
                 or dispersion parameter

    @param prob: Probability of success in each trial

    @param give_log: Probabilities are given as log(p)

    '''
    if math.isnan(x) or math.isnan(size) or math.isnan(prob):
        return x + size + prob

    if prob <= 0 or prob > 1 or size < 0:
        return ML_WARN_return_NAN("dnbinom")
    if R_nonint(x):
        MATHLIB_WARNING("non-integer x = {0:f}".format(x))
        return R_D__0(give_log)
    if x < 0 or not math.isfinite(x):
        return R_D__0(give_log)

    # limiting case as size approaches zero is point mass at zero
    if x == 0 and size == 0:
        return R_D__1(give_log)
    x = R_forceint(x)
    if not math.isfinite(size):
        size = DBL_MAX

    if x < 1e-10 * size:
        # instead of dbinom_raw(), use 2 terms of Abramowitz & Stegun (6.1.47)
        if x == 0:
            # prob^size; x * log1p(-prob) is 0 * -Inf for prob = 1
            return R_D_exp(size * numpy.log(prob), give_log)
        return R_D_exp(size * numpy.log(prob) + x * (numpy.log(size) + numpy.log1p(-prob))
                       - lgamma1p(x) + numpy.log1p(x * (x - 1) / (2 * size)), give_log)

    # no unnecessary cancellation inside dbinom_raw, when
    # x_ = size and n_ = x+size are so close that n_ - x_ loses accuracy
    p = size / (size + x)
    ans = dbinom_raw(size, x + size, prob, 1 - prob, give_log)
    return (numpy.log(p) + ans) if give_log else (p * ans)


@ieee754(3)
def pnbinom(x, size, prob, lower_tail=True, log_p=False):
    '''
    The negative binomial function returning the distribution

    @param x: the quantile

    @param size: target for number of successful trials,
                 or dispersion parameter

    @param prob: Probability of success in each trial

    @param lower_tail: probabilities are P[X <= x], otherwise, P[X > x]

    @param log_p: Probabilities are given as log(p)

    '''
    if math.isnan(x) or math.isnan(size) or math.isnan(prob):
        return x + size + prob
    if not math.isfinite(size) or not math.isfinite(prob):
        return ML_WARN_return_NAN("pnbinom")
    if size < 0 or prob <= 0 or prob > 1:
        return ML_WARN_return_NAN("pnbinom")

    # limiting case: point mass at zero
    if size == 0:
        return R_DT_1(lower_tail, log_p) if x >= 0 else R_DT_0(lower_tail, log_p)

    if x < 0:
        return R_DT_0(lower_tail, log_p)
    if not math.isfinite(x):
        return R_DT_1(lower_tail, log_p)
    x = numpy.floor(x + 1e-7)
    return pbeta(prob, size, x + 1, lower_tail, log_p)
