import math
from ..toms708 import bratio
from ..utils.constants import M_LN2
from ..utils.diagnostics import ML_WARN_return_NAN, MATHLIB_WARNING
from ..utils.dpq_handling import R_DT_0, R_DT_1
from ..utils.ieee import ieee754


@ieee754(3)
def pbeta_raw(x, a, b, lower_tail=True, log_p=False):
    '''
    Returns distribution function of the beta distribution.
    ( = The incomplete beta ratio I_x(p,q) ).

    The degenerate shapes are point masses: a = 0 (or a/b = 0) at 0,
    b = 0 (or b/a = 0) at 1, a = b = 0 half at each end and
    a = b = Inf at 1/2.

    '''
    if x >= 1:
        # may happen when called from qbeta()
        return R_DT_1(lower_tail, log_p)

    # treat limit cases correctly here
    if a == 0 or b == 0 or not math.isfinite(a) or not math.isfinite(b):
        # NB:  0 < x < 1 :
        if a == 0 and b == 0:
            # point mass 1/2 at each of {0,1}
            return -M_LN2 if log_p else 0.5
        if a == 0 or a / b == 0:
            # point mass 1 at 0 ==> P(X <= x) = 1, all x > 0
            return R_DT_1(lower_tail, log_p)
        if b == 0 or b / a == 0:
            # point mass 1 at 1 ==> P(X <= x) = 0, all x < 1
            return R_DT_0(lower_tail, log_p)
        # else, remaining case:  a = b = Inf : point mass 1 at 1/2
        if x < 0.5:
            return R_DT_0(lower_tail, log_p)
        return R_DT_1(lower_tail, log_p)

    if x <= 0:
        return R_DT_0(lower_tail, log_p)

    # Now:  0 < a < Inf;  0 < b < Inf
    x1 = 0.5 - x + 0.5
    w, wc, ierr = bratio(a, b, x, x1, log_p)

    # ierr in 11..14 <==> bgrat() error code ierr-10 in 1:4; for 1 and 4, warned *there*
    if ierr and ierr != 11 and ierr != 14:
        MATHLIB_WARNING(
            "pbeta_raw({0:g}, a={1:g}, b={2:g}, ..) -> bratio() gave error code {3:d}".format(
                x, a, b, ierr))
    return w if lower_tail else wc


@ieee754(3)
def pbeta(x, a, b, lower_tail=True, log_p=False):
    '''
    Compute the distribution function of the beta distribution.

    Parameters:
    -----------
        x (float): the quantile
        a, b (float): shape parameters, a, b >= 0
        lower_tail (bool): P[X <= x] when True, P[X > x] otherwise
        log_p (bool): return the natural log of the probability

    '''
    if math.isnan(x) or math.isnan(a) or math.isnan(b):
        return x + a + b

    if a < 0 or b < 0:
        return ML_WARN_return_NAN("pbeta")
    # allowing a==0 and b==0  <==> treat as one- or two-point mass

    return pbeta_raw(x, a, b, lower_tail, log_p)
