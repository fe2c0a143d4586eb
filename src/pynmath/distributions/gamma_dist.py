import math
import numpy as np
from .normal import dnorm, pnorm
from .poisson import dpois_raw, dpois_wrap
from ..special import lgamma1p, log1pmx
from ..utils.constants import ML_POSINF, DBL_EPSILON, DBL_MIN, SCALEFACTOR
from ..utils.diagnostics import ML_WARN_return_NAN, MATHLIB_WARNING
from ..utils.dpq_handling import R_D__0, R_D__1, R_DT_0, R_DT_1, R_Log1_Exp
from ..utils.ieee import ieee754

'''
The gamma distribution. pgamma() follows Morten Welinder's algorithm
(R bug 7307): a small-x series, the Poisson sums on either side of the
mode, and a normal-based asymptotic expansion near it.
'''

MAX_IT = 200000


@ieee754(3)
def dgamma(x, shape, scale=1., give_log=False):
    '''
    Computes the density of the gamma distribution,

                   1/s (x/s)^{a-1} exp(-x/s)
        p(x;a,s) = -----------------------
                            (a-1)!

    where 's' is the scale (= 1/lambda in other parametrizations)
    and 'a' is the shape parameter ( = alpha in other contexts).

    The old (R 1.1.1) version of the code is available via '#define D_non_pois'

    '''
    if math.isnan(x) or math.isnan(shape) or math.isnan(scale):
        return x + shape + scale
    if shape < 0 or scale <= 0:
        return ML_WARN_return_NAN("dgamma")
    if x < 0:
        return R_D__0(give_log)
    if shape == 0:
        # point mass at 0
        return ML_POSINF if x == 0 else R_D__0(give_log)
    if x == 0:
        if shape < 1:
            return ML_POSINF
        if shape > 1:
            return R_D__0(give_log)
        # else
        return -np.log(scale) if give_log else 1 / scale

    if shape < 1:
        pr = dpois_raw(shape, x / scale, give_log)
        if give_log:
            # NB: currently *always*  shape/x > 0  if shape < 1:
            # -- overflow to Inf happens, but underflow to 0 does NOT
            return pr + (np.log(shape / x) if math.isfinite(shape / x)
                         else np.log(shape) - np.log(x))
        return pr * shape / x

    # else  shape >= 1
    pr = dpois_raw(shape - 1, x / scale, give_log)
    return pr - np.log(scale) if give_log else pr / scale


def pgamma_smallx(x, alph, lower_tail, log_p):
    '''
    Abramowitz and Stegun 6.5.29 [right]
    '''
    total = 0
    c = alph
    n = 0

    # Relative to 6.5.29 all terms have been multiplied by alph
    # and the first, thus being 1, is omitted.
    while True:
        n += 1
        c *= -x / n
        term = c / (alph + n)
        total += term
        if not math.fabs(term) > DBL_EPSILON * math.fabs(total):
            break

    if lower_tail:
        f1 = np.log1p(total) if log_p else 1 + total
        if alph > 1:
            f2 = dpois_raw(alph, x, log_p)
            f2 = f2 + x if log_p else f2 * np.exp(x)
        else:
            f2 = alph * np.log(x) - lgamma1p(alph)
            f2 = f2 if log_p else np.exp(f2)
        return f1 + f2 if log_p else f1 * f2

    lf2 = alph * np.log(x) - lgamma1p(alph)
    if log_p:
        return R_Log1_Exp(np.log1p(total) + lf2)
    f1m1 = total
    f2m1 = np.expm1(lf2)
    return -(f1m1 + f2m1 + f1m1 * f2m1)


def pd_upper_series(x, y, log_p):
    term = x / y
    total = term

    while True:
        y += 1
        term *= x / y
        total += term
        if not term > total * DBL_EPSILON:
            break

    # sum =  \sum_{n=1}^ oo  x^n     / (y*(y+1)*...*(y+n-1))
    #     =  \sum_{n=0}^ oo  x^(n+1) / (y*(y+1)*...*(y+n))
    #     =  x/y * (1 + \sum_{n=1}^oo  x^n / ((y+1)*...*(y+n)))
    #     ~  x/y +  o(x/y)   {which happens when alph -> Inf}
    return np.log(total) if log_p else total


def pd_lower_cf(y, d):
    '''
    Continued fraction for calculation of
    scaled upper-tail F_{gamma}
     ~=  (y / d) * [1 +  (1-y)/d +  O( ((1-y)/d)^2 ) ]

    '''
    f = 0.0

    if y == 0:
        return 0

    f0 = y / d
    # Needed, e.g. for  pgamma(10^c(100,295), shape= 1.1, log=TRUE)
    if math.fabs(y - 1) < math.fabs(d) * DBL_EPSILON:
        # includes y < d = Inf
        return f0

    if f0 > 1.:
        f0 = 1.
    c2 = y
    c4 = d  # original (y,d), *not* potentially scaled ones!

    a1 = 0
    b1 = 1
    a2 = y
    b2 = d

    while b2 > SCALEFACTOR:
        a1 /= SCALEFACTOR
        b1 /= SCALEFACTOR
        a2 /= SCALEFACTOR
        b2 /= SCALEFACTOR

    i = 0
    of = -1.  # far away
    while i < MAX_IT:
        i += 1
        c2 -= 1
        c3 = i * c2
        c4 += 2
        # c2 = y - i,  c3 = i(y - i),  c4 = d + 2i,  for i odd
        a1 = c4 * a2 + c3 * a1
        b1 = c4 * b2 + c3 * b1

        i += 1
        c2 -= 1
        c3 = i * c2
        c4 += 2
        # c2 = y - i,  c3 = i(y - i),  c4 = d + 2i,  for i even
        a2 = c4 * a1 + c3 * a2
        b2 = c4 * b1 + c3 * b2

        if b2 > SCALEFACTOR:
            a1 /= SCALEFACTOR
            b1 /= SCALEFACTOR
            a2 /= SCALEFACTOR
            b2 /= SCALEFACTOR

        if b2 != 0:
            f = a2 / b2
            # convergence check: relative; "absolute" for very small f
            if math.fabs(f - of) <= DBL_EPSILON * max(f0, math.fabs(f)):
                return f
            of = f

    MATHLIB_WARNING(" ** NON-convergence in pgamma()'s pd_lower_cf() f= {0:g}.".format(f))
    return f  # should not happen ...


def pd_lower_series(lambda_, y):
    term = 1
    total = 0

    while y >= 1 and term > total * DBL_EPSILON:
        term *= y / lambda_
        total += term
        y -= 1

    # sum =  \sum_{n=0}^ oo  y*(y-1)*...*(y - n) / lambda^(n+1)
    #     =  y/lambda * (1 + \sum_{n=1}^Inf  (y-1)*...*(y-n) / lambda^n)
    #     ~  y/lambda + o(y/lambda)
    if y != np.floor(y):
        # The series does not converge as the terms start getting
        # bigger (besides flipping sign) for y < -lambda.
        # FIXME: in quite few cases, adding  term*f  has no effect (f too small)
        #        and is unnecessary e.g. for pgamma(4e12, 121.1)
        f = pd_lower_cf(y, lambda_ + 1 - y)
        total += term * f

    return total


def dpnorm(x, lower_tail, lp):
    '''
    Compute the following ratio with higher accuracy that would be had
    from doing it directly.

                 dnorm (x, 0, 1, FALSE)
           ----------------------------------
           pnorm (x, 0, 1, lower_tail, FALSE)

    Abramowitz & Stegun 26.2.12

    So as not to repeat a pnorm call, we expect

         lp == pnorm (x, 0, 1, lower_tail, TRUE)

    but use it only in the non-critical case where either x is small
    or p==exp(lp) is close to 1.

    '''
    if x < 0:
        x = -x
        lower_tail = not lower_tail

    if x > 10 and not lower_tail:
        term = 1 / x
        total = term
        x2 = x * x
        i = 1

        while True:
            term *= -i / x2
            total += term
            i += 2
            if not math.fabs(term) > DBL_EPSILON * total:
                break

        return 1 / total

    d = dnorm(x, 0., 1., False)
    return d / np.exp(lp)


# placeholders at [0] keep the coefficients 1-indexed
COEFS_A = [-1e99, 2 / 3., -4 / 135., 8 / 2835., 16 / 8505., -8992 / 12629925.,
           -334144 / 492567075., 698752 / 1477701225.]

COEFS_B = [-1e99, 1 / 12., 1 / 288., -139 / 51840., -571 / 2488320.,
           163879 / 209018880., 5246819 / 75246796800., -534703531 / 902961561600.]


def ppois_asymp(x, lambda_, lower_tail, log_p):
    '''
    Asymptotic expansion to calculate the probability that Poisson variate
    has value <= x.
    Various assertions about this are made (without proof) at
    http://members.aol.com/iandjmsmith/PoissonApprox.htm

    '''
    dfm = lambda_ - x
    # If lambda is large, the distribution is highly concentrated
    # about lambda.  So representation error in x or lambda can lead
    # to arbitrarily large values of pt_ and hence divergence of the
    # coefficients of this approximation.
    pt_ = -log1pmx(dfm / x)
    s2pt = np.sqrt(2 * x * pt_)
    if dfm < 0:
        s2pt = -s2pt

    res12 = 0
    res1_ig = res1_term = np.sqrt(x)
    res2_ig = res2_term = s2pt
    for i in range(1, 8):
        res12 += res1_ig * COEFS_A[i]
        res12 += res2_ig * COEFS_B[i]
        res1_term *= pt_ / i
        res2_term *= 2 * pt_ / (2 * i + 1)
        res1_ig = res1_ig / x + res1_term
        res2_ig = res2_ig / x + res2_term

    elfb = x
    elfb_term = 1
    for i in range(1, 8):
        elfb += elfb_term * COEFS_B[i]
        elfb_term /= x
    if not lower_tail:
        elfb = -elfb

    f = res12 / elfb

    np_ = pnorm(s2pt, 0.0, 1.0, not lower_tail, log_p)

    if log_p:
        n_d_over_p = dpnorm(s2pt, not lower_tail, np_)
        return np_ + np.log1p(f * n_d_over_p)
    nd = dnorm(s2pt, 0., 1., log_p)
    return np_ + f * nd


@ieee754(2)
def pgamma_raw(x, alph, lower_tail=True, log_p=False):
    '''
    Here, assume that  (x,alph) are not NA  &  alph > 0 .
    '''
    if x <= 0.:
        return R_DT_0(lower_tail, log_p)
    if x >= ML_POSINF:
        return R_DT_1(lower_tail, log_p)

    if x < 1:
        res = pgamma_smallx(x, alph, lower_tail, log_p)
    elif x <= alph - 1 and x < 0.8 * (alph + 50):
        # incl. large alph compared to x
        total = pd_upper_series(x, alph, log_p)  # = x/alph + o(x/alph)
        d = dpois_wrap(alph, x, log_p)
        if not lower_tail:
            res = R_Log1_Exp(d + total) if log_p else 1 - d * total
        else:
            res = total + d if log_p else total * d
    elif alph - 1 < x and alph < 0.8 * (x + 50):
        # incl. large x compared to alph
        d = dpois_wrap(alph, x, log_p)
        if alph < 1:
            if x * DBL_EPSILON > 1 - alph:
                total = R_D__1(log_p)
            else:
                f = pd_lower_cf(alph, x - (alph - 1)) * x / alph
                # = [alph/(x - alph+1) + o(alph/(x-alph+1))] * x/alph = 1 + o(1)
                total = np.log(f) if log_p else f
        else:
            total = pd_lower_series(x, alph - 1)  # = (alph-1)/x + o((alph-1)/x)
            total = np.log1p(total) if log_p else 1 + total
        if not lower_tail:
            res = total + d if log_p else total * d
        else:
            res = R_Log1_Exp(d + total) if log_p else 1 - d * total
    else:
        # x >= 1 and x fairly near alph
        res = ppois_asymp(alph - 1, x, not lower_tail, log_p)

    # We lose a fair amount of accuracy to underflow in the cases
    # where the final result is very close to DBL_MIN.  In those
    # cases, simply redo via log space.
    if not log_p and res < DBL_MIN / DBL_EPSILON:
        # with(.Machine, double.xmin / double.eps) #|-> 1.002084e-292
        return np.exp(pgamma_raw(x, alph, lower_tail, True))
    return res


@ieee754(3)
def pgamma(x, alph, scale=1., lower_tail=True, log_p=False):
    '''
    This function computes the distribution function for the
    gamma distribution with shape parameter alph and scale parameter
    scale.  This is also known as the incomplete gamma function.

    Parameters:
    -----------
        x (float): the quantile
        alph (float): shape, alph >= 0
        scale (float): scale, scale > 0
        lower_tail (bool): P[X <= x] when True, P[X > x] otherwise
        log_p (bool): return the natural log of the probability

    '''
    if math.isnan(x) or math.isnan(alph) or math.isnan(scale):
        return x + alph + scale
    if alph < 0. or scale <= 0.:
        return ML_WARN_return_NAN("pgamma")
    x /= scale
    if math.isnan(x):
        # eg. original x = scale = +Inf
        return x
    if alph == 0.:
        # limit case; useful e.g. in pnchisq()
        return R_DT_0(lower_tail, log_p) if x <= 0 else R_DT_1(lower_tail, log_p)
    return pgamma_raw(x, alph, lower_tail, log_p)
