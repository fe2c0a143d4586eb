import math
import numpy as np
from .constants import ML_NEGINF, M_LN2
from .diagnostics import ML_WARN_return_NAN
from .ieee import ieee754
'''
A series of short functions used to handle difference in d/p/q functions.
d - The density function
p - The distribution function
q - The quantile function

log_p and lower_tail are the usual flags; give_log is passed as log_p
by the density functions.
'''


def R_D__0(log_p):
    return ML_NEGINF if log_p else 0.0


def R_D__1(log_p):
    return 0. if log_p else 1.0


def R_DT_0(lower_tail, log_p):
    return R_D__0(log_p) if lower_tail else R_D__1(log_p)


def R_DT_1(lower_tail, log_p):
    return R_D__1(log_p) if lower_tail else R_D__0(log_p)


def R_D_half(log_p):
    return -M_LN2 if log_p else 0.5


def R_D_Lval(p, lower_tail):
    return p if lower_tail else (0.5 - p + 0.5)


def R_D_Cval(p, lower_tail):
    return (0.5 - p + 0.5) if lower_tail else p


def R_D_val(x, log_p):
    return np.log(x) if log_p else x


def R_D_exp(x, log_p):
    return x if log_p else np.exp(x)


def R_D_Clog(p, log_p):
    return np.log1p(-p) if log_p else (0.5 - p + 0.5)


def R_DT_val(x, lower_tail, log_p):
    return R_D_val(x, log_p) if lower_tail else R_D_Clog(x, log_p)


def R_Log1_Exp(x):
    # log(1 - exp(x)) for x <= 0
    return np.log(-np.expm1(x)) if x > -M_LN2 else np.log1p(-np.exp(x))


def R_D_LExp(x, log_p):
    return R_Log1_Exp(x) if log_p else np.log1p(-x)


def R_DT_qIv(p, lower_tail, log_p):
    if log_p:
        return np.exp(p) if lower_tail else -np.expm1(p)
    return R_D_Lval(p, lower_tail)


def R_DT_CIv(p, lower_tail, log_p):
    if log_p:
        return -np.expm1(p) if lower_tail else np.exp(p)
    return R_D_Cval(p, lower_tail)


def R_Q_P01_boundaries(p, left, right, lower_tail, log_p, where=""):
    '''
    Boundary handling for the quantile functions.

    Returns None when p is an interior probability, otherwise the value
    the quantile function should return (NaN for an invalid p).

    '''
    if log_p:
        if p > 0:
            return ML_WARN_return_NAN(where)
        if p == 0:
            return right if lower_tail else left
        if p == ML_NEGINF:
            return left if lower_tail else right
    else:
        if p < 0 or p > 1:
            return ML_WARN_return_NAN(where)
        if p == 0:
            return left if lower_tail else right
        if p == 1:
            return right if lower_tail else left
    return None


def R_nonint(x):
    return math.fabs(x - R_forceint(x)) > 1e-7 * max(1., math.fabs(x))


def R_forceint(x):
    # nearbyint(): halves go to the even neighbour
    return np.rint(x)


@ieee754(2)
def logspace_add(logx, logy):
    '''
    Compute the log of a sum from logs of terms, i.e.,

        log (exp (logx) + exp (logy))

    without causing overflows and without throwing away large handfuls
    of accuracy.

    '''
    return max(logx, logy) + np.log1p(np.exp(-math.fabs(logx - logy)))


@ieee754(2)
def logspace_sub(logx, logy):
    '''
    log (exp (logx) - exp (logy)), for logx >= logy
    '''
    return logx + R_Log1_Exp(logy - logx)
