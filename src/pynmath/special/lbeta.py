import math
import numpy as np
from .gammafn import gammafn
from .lgammacor import lgammacor
from .lgammafn import lgammafn
from ..utils.constants import ML_POSINF, ML_NEGINF, M_LN_SQRT_2PI
from ..utils.diagnostics import ML_WARN_return_NAN
from ..utils.ieee import ieee754


@ieee754(2)
def lbeta(a, b):
    '''
    This function returns the value of the log beta function

        log B(a,b) = log G(a) + log G(b) - log G(a+b)

    NOTES

    This routine is a translation into C of a Fortran subroutine
    by W. Fullerton of Los Alamos Scientific Laboratory.

    Adapted from the RMath function written by Ross Ihaka

    '''
    if math.isnan(a) or math.isnan(b):
        return a + b

    p = q = a
    if b < p:
        p = b  # := min(a,b)
    if b > q:
        q = b  # := max(a,b)

    # both arguments must be >= 0
    if p < 0:
        return ML_WARN_return_NAN("lbeta")
    elif p == 0:
        return ML_POSINF
    elif not math.isfinite(q):
        return ML_NEGINF

    if p >= 10:
        # p and q are big.
        corr = lgammacor(p) + lgammacor(q) - lgammacor(p + q)
        return (np.log(q) * -0.5 + M_LN_SQRT_2PI + corr + (p - 0.5) * np.log(p / (p + q))
                + q * np.log1p(-p / (p + q)))
    elif q >= 10:
        # p is small, but q is big.
        corr = lgammacor(q) - lgammacor(p + q)
        return lgammafn(p) + corr + p - p * np.log(p + q) + (q - 0.5) * np.log1p(-p / (p + q))
    else:
        # p and q are small: p <= q < 10.
        if p < 1e-306:
            return lgammafn(p) + (lgammafn(q) - lgammafn(p + q))
        return np.log(gammafn(p) * (gammafn(q) / gammafn(p + q)))
