import math
import numpy as np
from ..deviance import ebd0, stirlerr
from ..special import lgammafn
from ..utils.constants import DBL_MIN, DBL_EPSILON, DBL_MAX_EXP, M_LN2, M_2PI, M_SQRT_2PI
from ..utils.diagnostics import ML_WARN_return_NAN, MATHLIB_WARNING
from ..utils.dpq_handling import R_D__0, R_D__1, R_D_exp, R_nonint, R_forceint
from ..utils.ieee import ieee754

# If |x| > |k| * M_cutoff,  then  log[ exp(-x) * k^x ]  =~=  -x
M_cutoff = M_LN2 * DBL_MAX_EXP / DBL_EPSILON  # = 3.196577e18

# 2^1023 / pi: beyond it 2*pi*x overflows
X_LRG = 2.86111748575702815380240589208115399625e+307


@ieee754(2)
def dpois_raw(x, lambda_, give_log=False):
    '''
    dpois_raw() computes the Poisson probability  lb^x exp(-lb) / x!.
      This does not check that x is an integer, since dgamma() may
      call this with a fractional x argument. Any necessary argument
      checks should be done in the calling function.

    The deviance lambda - x + x log(x / lambda) is taken from ebd0() in
    two parts, so the density keeps full relative accuracy far in the tails.

    '''
    if lambda_ == 0:
        return R_D__1(give_log) if x == 0 else R_D__0(give_log)
    if not math.isfinite(lambda_):
        return R_D__0(give_log)  # including for the case where  x = lambda = +Inf
    if x < 0:
        return R_D__0(give_log)
    if x <= lambda_ * DBL_MIN:
        return R_D_exp(-lambda_, give_log)
    if lambda_ < x * DBL_MIN:
        if not math.isfinite(x):
            # lambda < x = +Inf
            return R_D__0(give_log)
        return R_D_exp(-lambda_ + x * np.log(lambda_) - lgammafn(x + 1), give_log)

    yh, yl = ebd0(x, lambda_)
    yl += stirlerr(x)
    lrg_x = x >= X_LRG  # really large x  <==>  2*pi*x  overflows
    # sqrt(.): avoid overflow for very large x
    r = M_SQRT_2PI * np.sqrt(x) if lrg_x else M_2PI * x
    if give_log:
        return -yl - yh - (np.log(r) if lrg_x else 0.5 * np.log(r))
    return np.exp(-yl) * np.exp(-yh) / (r if lrg_x else np.sqrt(r))


@ieee754(2)
def dpois_wrap(x_plus_1, lambda_, give_log=False):
    '''
    dpois_wrap (x__1, lambda) := dpois(x__1 - 1, lambda);  where
    dpois(k, L) := L^k * exp(-L) / k!
    '''
    if not math.isfinite(lambda_):
        return R_D__0(give_log)
    if x_plus_1 > 1:
        return dpois_raw(x_plus_1 - 1, lambda_, give_log)
    if lambda_ > math.fabs(x_plus_1 - 1) * M_cutoff:
        return R_D_exp(-lambda_ - lgammafn(x_plus_1), give_log)
    d = dpois_raw(x_plus_1, lambda_, give_log)
    return d + np.log(x_plus_1 / lambda_) if give_log else d * (x_plus_1 / lambda_)


@ieee754(2)
def dpois(x, lambda_, give_log=False):
    '''
    Compute the density of the Poisson distribution.

    Parameters:
    -----------
        x (float): the count; non-integer x gives 0 with a warning
        lambda_ (float): the mean, lambda_ >= 0
        give_log (bool): return the log density

    '''
    if math.isnan(x) or math.isnan(lambda_):
        return x + lambda_

    if lambda_ < 0:
        return ML_WARN_return_NAN("dpois")
    if R_nonint(x):
        MATHLIB_WARNING("non-integer x = {0:f}".format(x))
        return R_D__0(give_log)
    if x < 0 or not math.isfinite(x):
        return R_D__0(give_log)

    x = R_forceint(x)
    return dpois_raw(x, lambda_, give_log)
