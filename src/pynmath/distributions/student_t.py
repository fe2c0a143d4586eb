import math
import numpy as np
from .beta import pbeta
from .normal import dnorm, pnorm
from ..deviance import bd0, stirlerr
from ..special import lbeta
from ..utils.constants import DBL_EPSILON, M_LN2, M_1_SQRT_2PI, M_LN_SQRT_2PI
from ..utils.diagnostics import ML_WARN_return_NAN
from ..utils.dpq_handling import R_D__0, R_DT_0, R_DT_1, R_D_Cval
from ..utils.ieee import ieee754


@ieee754(2)
def pt(x, n, lower_tail=True, log_p=False):
    '''
    return  P[ T <= x ]  where
    T ~ t_{n}  (t distrib. with n degrees of freedom).

        --> pnt() for NON-central

    '''
    if math.isnan(x) or math.isnan(n):
        return x + n
    if n <= 0.0:
        return ML_WARN_return_NAN("pt")

    if not math.isfinite(x):
        return R_DT_0(lower_tail, log_p) if x < 0 else R_DT_1(lower_tail, log_p)
    if not math.isfinite(n):
        return pnorm(x, 0.0, 1.0, lower_tail, log_p)

    nx = 1 + (x / n) * x
    # FIXME: This test is probably losing rather than gaining precision,
    # now that pbeta(*, log_p = TRUE) is much better.
    # Note however that a version of this test *is* needed for x*x > D_MAX
    if nx > 1e100:
        # <==>  x*x > 1e100 * n
        # Danger of underflow. So use Abramowitz & Stegun 26.5.4
        #   pbeta(z, a, b) ~ z^a(1-z)^b / aB(a,b) ~ z^a / aB(a,b),
        #   with z = 1/nx,  a = n/2,  b= 1/2 :
        lval = -0.5 * n * (2 * np.log(math.fabs(x)) - np.log(n)) \
            - lbeta(0.5 * n, 0.5) - np.log(0.5 * n)
        val = lval if log_p else np.exp(lval)
    else:
        if n > x * x:
            val = pbeta(x * x / (n + x * x), 0.5, n / 2., False, log_p)
        else:
            val = pbeta(1. / nx, n / 2., 0.5, True, log_p)

    # use "1 - v"  if  lower_tail  and  x > 0 (but not both)
    if x <= 0.:
        lower_tail = not lower_tail

    if log_p:
        if lower_tail:
            return np.log1p(-0.5 * np.exp(val))
        return val - M_LN2  # = log(.5* pt(....))
    val /= 2.
    return R_D_Cval(val, lower_tail)


@ieee754(2)
def dt(x, n, give_log=False):
    '''
    The t density is evaluated as
          sqrt(n/2) / ((n+1)/2) * Gamma((n+3)/2) / Gamma((n+2)/2).
              * (1+x^2/n)^(-n/2)
              / sqrt( 2 pi (1+x^2/n) )

    This form leads to a stable computation for all
    values of n, including n -> 0 and n -> infinity.

    '''
    if math.isnan(x) or math.isnan(n):
        return x + n
    if n <= 0:
        return ML_WARN_return_NAN("dt")
    if not math.isfinite(x):
        return R_D__0(give_log)
    if not math.isfinite(n):
        return dnorm(x, 0., 1., give_log)

    t = -bd0(n / 2., (n + 1) / 2.) + stirlerr((n + 1) / 2.) - stirlerr(n / 2.)
    x2n = x * x / n  # in  [0, Inf]
    ax = 0.
    lrg_x2n = x2n > 1. / DBL_EPSILON
    if lrg_x2n:
        # large x^2/n
        ax = math.fabs(x)
        l_x2n = np.log(ax) - np.log(n) / 2.  # = log(x2n)/2 = 1/2 * log(x^2 / n)
        u = n * l_x2n  # log(1 + x2n) * n/2 =  n * log(1 + x2n)/2
    elif x2n > 0.2:
        l_x2n = np.log(1 + x2n) / 2.
        u = n * l_x2n
    else:
        l_x2n = np.log1p(x2n) / 2.
        u = -bd0(n / 2., (n + x * x) / 2.) + x * x / 2.

    # f = 2pi*(1+x2n)
    #  ==> 0.5*log(f) = log(2pi)/2 + log(1+x2n)/2 = log(2pi)/2 + l_x2n
    #        1/sqrt(f) = 1/sqrt(2pi * (1+ x^2 / n))
    #                  = M_1_SQRT_2PI * sqrt(n)/ (|x|*sqrt(1+1/x2n))
    if give_log:
        return t - u - (M_LN_SQRT_2PI + l_x2n)

    # else :  if(lrg_x2n) : sqrt(1 + 1/x2n) ='= sqrt(1) = 1
    i_sqrt_ = np.sqrt(n) / ax if lrg_x2n else np.exp(-l_x2n)
    return np.exp(t - u) * M_1_SQRT_2PI * i_sqrt_
