import math
import numpy as np
from .gammafn import gammafn
from .lgammacor import lgammacor
from ..utils.constants import Rf_d1mach as d1mach
from ..utils.constants import ML_POSINF, M_LN_SQRT_2PI, M_LN_SQRT_PId2
from ..utils.diagnostics import ML_WARNING, ML_WARN_return_NAN, MathError, MATHLIB_WARNING
from ..utils.trig_pi import sinpi
from ..utils.ieee import ieee754

XMAX = d1mach(2) / math.log(d1mach(2))
DXREL = math.sqrt(d1mach(4))


@ieee754(1)
def lgammafn_sign(x):
    """
    See description of lgammafn() below. Returns the pair
    (log|gamma(x)|, sign(gamma(x))).

    """
    sgn = 1

    if math.isnan(x):
        return x, sgn

    if x < 0 and np.fmod(np.floor(-x), 2.0) == 0:
        sgn = -1

    if x <= 0 and x == np.trunc(x):
        # negative integer argument, lgamma(x) = log|gamma(x)| = +Inf
        return ML_POSINF, sgn

    y = math.fabs(x)

    if y < 1e-306:
        # denormalized range
        return -np.log(y), sgn
    if y <= 10:
        return np.log(math.fabs(gammafn(x))), sgn

    if y > XMAX:
        return ML_POSINF, sgn

    if x > 0:
        if x > 1e17:
            return x * (np.log(x) - 1.0), sgn
        elif x > 4934720.0:
            return M_LN_SQRT_2PI + (x - 0.5) * np.log(x) - x, sgn
        else:
            return M_LN_SQRT_2PI + (x - 0.5) * np.log(x) - x + lgammacor(x), sgn

    # x < -10; y = -x
    sinpiy = math.fabs(sinpi(y))

    if sinpiy == 0:
        # negative integers are caught above
        MATHLIB_WARNING(" ** should NEVER happen! *** [lgammafn: Neg.int, y={0}]".format(y))
        return ML_WARN_return_NAN("lgammafn"), sgn

    ans = M_LN_SQRT_PId2 + (x - 0.5) * np.log(y) - x - np.log(sinpiy) - lgammacor(y)

    if math.fabs((x - np.trunc(x - 0.5)) * ans / x) < DXREL:
        # too near a negative integer, e.g. lgamma(1 - 1e-7)
        ML_WARNING(MathError.PRECISION, "lgammafn")

    return ans, sgn


@ieee754(1)
def lgammafn(x):
    """
    The function lgammafn computes log|gamma(x)|.  The function
    lgammafn_sign in addition returns the sign of the gamma function.

    Adapted from RMath code written by Ross Ihaka

    """
    return lgammafn_sign(x)[0]
