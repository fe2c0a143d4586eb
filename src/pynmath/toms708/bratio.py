import enum
import math
from collections import namedtuple
import numpy as np
from .series import fpser, apser, bpser, bup, bfrac, bgrat, basym
from ..utils.constants import DBL_MIN, ML_NEGINF, Rf_d1mach
from ..utils.dpq_handling import R_D__0, R_D__1, R_Log1_Exp
from ..utils.ieee import ieee754

'''
ALGORITHM 708, COLLECTED ALGORITHMS FROM ACM.
Evaluation of the Incomplete Beta function I_x(a,b)

bratio() validates its arguments, maps (a, b, x, y) onto a reduced
problem (a0, b0, x0, y0) with x0 on the "easy" side, picks exactly one
Branch for it and evaluates that branch. Only the two final outputs
are swapped back when the reduction swapped the roles of a and b.
'''

BratioResult = namedtuple("BratioResult", ["w", "w1", "ierr"])

# reduced problem handed to the branch evaluators
_Reduced = namedtuple("_Reduced", ["a0", "b0", "x0", "y0", "lambda_", "do_swap"])


class Branch(enum.Enum):
    FPSER = "fpser"                        # b0 negligible
    APSER = "apser"                        # a0 negligible
    BPSER = "bpser"                        # w := bpser(a0, b0, x0)
    BPSER_COMPLEMENT = "bpser_complement"  # w1 := bpser(b0, a0, y0)
    BGRAT = "bgrat"                        # w1 := bgrat(b0, a0, y0, x0), b0 > 15
    BUP_BGRAT = "bup_bgrat"                # w1 := bup(n = 20) + bgrat
    BUP_BPSER = "bup_bpser"                # w := bup + bpser, or + bup + bgrat
    BFRAC = "bfrac"
    BASYM = "basym"


def _end_from_w(w, log_p):
    if log_p:
        return np.log(w), np.log1p(-w)
    return w, 0.5 - w + 0.5


def _end_from_w1(w1, log_p):
    if log_p:
        return np.log1p(-w1), np.log(w1)
    return 0.5 - w1 + 0.5, w1


def _end_from_w1_log(w1, log_p):
    # w1 = log(w1) already; w = 1 - w1  ==> log(w) = log(1 - exp(w1))
    if log_p:
        return R_Log1_Exp(w1), w1
    return -np.expm1(w1), np.exp(w1)


def _complement(v, log_p):
    return R_Log1_Exp(v) if log_p else 0.5 - v + 0.5


def _fpser(r, eps, log_p):
    w = fpser(r.a0, r.b0, r.x0, eps, log_p)
    return w, _complement(w, log_p), 0


def _apser(r, eps, log_p):
    w, w1 = _end_from_w1(apser(r.a0, r.b0, r.x0, eps), log_p)
    return w, w1, 0


def _bpser(r, eps, log_p):
    w = bpser(r.a0, r.b0, r.x0, eps, log_p)
    return w, _complement(w, log_p), 0


def _bpser_complement(r, eps, log_p):
    w1 = bpser(r.b0, r.a0, r.y0, eps, log_p)
    return _complement(w1, log_p), w1, 0


def _bgrat_w1(a0, b0, x0, y0, w1, n, did_bup, eps, log_p):
    '''
    Adds the bgrat() expansion for I_{y0}(b0, a0) to w1. When that is
    zero or subnormal it is "almost surely" from underflow, and the
    whole complement is recomputed on the log scale.

    '''
    ierr = 0
    w1, ierr1 = bgrat(b0, a0, y0, x0, w1, 15 * eps, False)
    if w1 == 0 or (0 < w1 < DBL_MIN):
        if did_bup:
            # re-do that part on log scale
            w1 = bup(b0 - n, a0, y0, x0, n, eps, True)
        else:
            w1 = ML_NEGINF  # = 0 on log-scale
        w1, ierr1 = bgrat(b0, a0, y0, x0, w1, 15 * eps, True)
        if ierr1:
            ierr = 10 + ierr1
        w, w1 = _end_from_w1_log(w1, log_p)
        return w, w1, ierr

    if ierr1:
        ierr = 10 + ierr1
    w, w1 = _end_from_w1(w1, log_p)
    return w, w1, ierr


def _bgrat(r, eps, log_p):
    return _bgrat_w1(r.a0, r.b0, r.x0, r.y0, 0., 0, False, eps, log_p)


def _bup_bgrat(r, eps, log_p):
    n = 20
    w1 = bup(r.b0, r.a0, r.y0, r.x0, n, eps, False)
    return _bgrat_w1(r.a0, r.b0 + n, r.x0, r.y0, w1, n, True, eps, log_p)


def _bup_bpser(r, eps, log_p):
    a0, b0, x0, y0 = r.a0, r.b0, r.x0, r.y0

    # b0 := fractional_part( b0 )  in (0, 1]
    n = int(b0)
    b0 -= n
    if b0 == 0.:
        n -= 1
        b0 = 1.

    w = bup(b0, a0, y0, x0, n, eps, False)

    if w < DBL_MIN and log_p:
        # do not believe it; try bpser() on the original b0,
        # which is only valid if b0 <= 1 || b0*x0 <= 0.7
        return _bpser(r, eps, log_p)

    if x0 <= 0.7:
        # summed on the linear scale; bup() + bpser() has no log-scale form here
        w += bpser(a0, b0, x0, eps, False)
        w, w1 = _end_from_w(w, log_p)
        return w, w1, 0

    ierr = 0
    if a0 <= 15.:
        n = 20
        w += bup(a0, b0, x0, y0, n, eps, False)
        a0 += n
    w, ierr1 = bgrat(a0, b0, x0, y0, w, 15 * eps, False)
    if ierr1:
        ierr = 10 + ierr1
    w, w1 = _end_from_w(w, log_p)
    return w, w1, ierr


def _bfrac(r, eps, log_p):
    w = bfrac(r.a0, r.b0, r.x0, r.y0, r.lambda_, eps * 15., log_p)
    return w, _complement(w, log_p), 0


def _basym(r, eps, log_p):
    w = basym(r.a0, r.b0, r.lambda_, eps * 100., log_p)
    return w, _complement(w, log_p), 0


_BRANCHES = {
    Branch.FPSER: _fpser,
    Branch.APSER: _apser,
    Branch.BPSER: _bpser,
    Branch.BPSER_COMPLEMENT: _bpser_complement,
    Branch.BGRAT: _bgrat,
    Branch.BUP_BGRAT: _bup_bgrat,
    Branch.BUP_BPSER: _bup_bpser,
    Branch.BFRAC: _bfrac,
    Branch.BASYM: _basym,
}


def _select_small(a, b, x, y, eps):
    '''
    Branch for min(a, b) <= 1. The problem is swapped so that x0 <= 1/2 <= y0.
    '''
    do_swap = x > 0.5
    if do_swap:
        a0, b0, x0, y0 = b, a, y, x
    else:
        a0, b0, x0, y0 = a, b, x, y
    reduced = _Reduced(a0, b0, x0, y0, None, do_swap)

    if b0 < min(eps, eps * a0):
        return Branch.FPSER, reduced

    if a0 < min(eps, eps * b0) and b0 * x0 <= 1.:
        return Branch.APSER, reduced

    if max(a0, b0) > 1.:
        # min(a,b) <= 1 < max(a,b)
        if b0 <= 1.:
            return Branch.BPSER, reduced
        if x0 >= 0.29:  # was 0.3, PR#13786
            return Branch.BPSER_COMPLEMENT, reduced
        if x0 < 0.1 and np.power(x0 * b0, a0) <= 0.7:
            return Branch.BPSER, reduced
        if b0 > 15.:
            return Branch.BGRAT, reduced
    else:
        # a, b <= 1
        if a0 >= min(0.2, b0):
            return Branch.BPSER, reduced
        if np.power(x0, a0) <= 0.9:
            return Branch.BPSER, reduced
        if x0 >= 0.3:
            return Branch.BPSER_COMPLEMENT, reduced

    return Branch.BUP_BGRAT, reduced


def _select_large(a, b, x, y, log_p):
    '''
    Branch for a, b > 1. The problem is swapped so that lambda >= 0.
    '''
    # lambda := a y - b x  =  (a + b)y  =  a - (a+b)x    {using x + y == 1},
    # using the numerically best version
    if math.isfinite(a + b):
        lambda_ = (a + b) * y - b if a > b else a - (a + b) * x
    else:
        lambda_ = a * y - b * x

    do_swap = lambda_ < 0.
    if do_swap:
        lambda_ = -lambda_
        a0, b0, x0, y0 = b, a, y, x
    else:
        a0, b0, x0, y0 = a, b, x, y
    reduced = _Reduced(a0, b0, x0, y0, lambda_, do_swap)

    if b0 < 40.:
        if b0 * x0 <= 0.7 or (log_p and lambda_ > 650.):
            return Branch.BPSER, reduced
        return Branch.BUP_BPSER, reduced
    elif a0 > b0:
        # a0 > b0 >= 40
        if b0 <= 100. or lambda_ > b0 * 0.03:
            return Branch.BFRAC, reduced
    elif a0 <= 100.:
        return Branch.BFRAC, reduced
    elif lambda_ > a0 * 0.03:
        return Branch.BFRAC, reduced

    return Branch.BASYM, reduced


def select_branch(a, b, x, y, log_p=False):
    '''
    Returns the (Branch, reduced problem) bratio() evaluates for valid,
    non-degenerate arguments (0 < x < 1, a, b > 0, max(a, b) >= 1e-18).
    '''
    eps = max(2. * Rf_d1mach(3), 1e-15)
    if min(a, b) <= 1.:
        return _select_small(a, b, x, y, eps)
    return _select_large(a, b, x, y, log_p)


@ieee754(4)
def bratio(a, b, x, y, log_p=False):
    '''
    Evaluation of the Incomplete Beta function I_x(a,b)

    It is assumed that a and b are nonnegative, and that x <= 1
    and y = 1 - x.  Bratio returns BratioResult(w, w1, ierr) with

              w  = I_x(a,b)
              w1 = 1 - I_x(a,b)

    (or their logarithms when log_p). ierr is a variable that reports
    the status of the results. If no input errors are detected then
    ierr is set to 0 and w and w1 are computed. Otherwise, if an error
    is detected, then w and w1 are both R_D__0 and ierr is set to one
    of the following values ...

       ierr = 1  if a or b is negative
       ierr = 2  if a = b = 0
       ierr = 3  if x < 0 or x > 1
       ierr = 4  if y < 0 or y > 1
       ierr = 5  if x + y != 1
       ierr = 6  if x = a = 0
       ierr = 7  if y = b = 0
       ierr = 9  NaN in a, b, x, or y
       ierr = 11..14  bgrat() error code 1..4, added to 10

    Written by Alfred H. Morris, Jr.
       Naval Surface Warfare Center
       Dahlgren, Virginia
       Revised ... Nov 1991

    '''
    zero = R_D__0(log_p)
    one = R_D__1(log_p)

    # eps is a machine dependent constant: the smallest
    # floating point number for which   1. + eps > 1.
    # NOTE: for almost all purposes it is replaced by 1e-15 (~= 4.5 times larger) below
    eps = 2. * Rf_d1mach(3)  # == DBL_EPSILON

    # safeguard, preventing infinite loops further down
    if math.isnan(x) or math.isnan(y) or math.isnan(a) or math.isnan(b):
        return BratioResult(zero, zero, 9)

    if a < 0. or b < 0.:
        return BratioResult(zero, zero, 1)
    if a == 0. and b == 0.:
        return BratioResult(zero, zero, 2)
    if x < 0. or x > 1.:
        return BratioResult(zero, zero, 3)
    if y < 0. or y > 1.:
        return BratioResult(zero, zero, 4)

    # check that  'y == 1 - x'
    z = x + y - 0.5 - 0.5
    if math.fabs(z) > eps * 3.:
        return BratioResult(zero, zero, 5)

    if x == 0.:
        if a == 0.:
            return BratioResult(zero, zero, 6)
        return BratioResult(zero, one, 0)

    if y == 0.:
        if b == 0.:
            return BratioResult(zero, zero, 7)
        return BratioResult(one, zero, 0)

    if a == 0.:
        return BratioResult(one, zero, 0)
    if b == 0.:
        return BratioResult(zero, one, 0)

    eps = max(eps, 1e-15)
    a_lt_b = a < b
    if (b if a_lt_b else a) < eps * .001:
        # procedure for a and b < 0.001 * eps
        # -- result *independent* of x (!)
        # w  = a/(a+b)  and  w1 = b/(a+b)
        if log_p:
            if a_lt_b:
                w = np.log1p(-a / (a + b))  # notably if a << b
                w1 = np.log(a / (a + b))
            else:
                # b <= a
                w = np.log(b / (a + b))
                w1 = np.log1p(-b / (a + b))
        else:
            w = b / (a + b)
            w1 = a / (a + b)
        return BratioResult(w, w1, 0)

    branch, reduced = select_branch(a, b, x, y, log_p)
    w, w1, ierr = _BRANCHES[branch](reduced, eps, log_p)
    if reduced.do_swap:
        w, w1 = w1, w
    return BratioResult(w, w1, ierr)


def incomplete_beta(a, b, x, y=None, lower_tail=True, log_p=False):
    '''
    Regularized incomplete beta function I_x(a, b).

    Parameters:
    -----------
        a, b (float): shape parameters, a, b >= 0 and not both 0
        x (float): the point, 0 <= x <= 1
        y (float): 1 - x; pass it when it is known more accurately than
            the rounded 1 - x (defaults to 0.5 - x + 0.5)
        lower_tail (bool): report I_x(a, b) when True, 1 - I_x(a, b) otherwise
        log_p (bool): report natural logarithms

    Returns:
    --------
        (value, complement, status): value is the requested tail, complement
        the other one and status the bratio() error code (0 on success).

    '''
    if y is None:
        y = 0.5 - x + 0.5
    w, w1, ierr = bratio(a, b, x, y, log_p)
    if lower_tail:
        return w, w1, ierr
    return w1, w, ierr
