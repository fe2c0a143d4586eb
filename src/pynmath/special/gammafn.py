import math
import numpy as np
from ..deviance.stirlerr import stirlerr
from ..utils.chebyshev import chebyshev_eval
from ..utils.constants import ML_NAN, ML_POSINF, ML_NEGINF, M_PI, M_LN_SQRT_2PI
from ..utils.diagnostics import ML_WARNING, MathError
from ..utils.trig_pi import sinpi
from ..utils.ieee import ieee754

# Chebyshev coefficients for gamma(x) on 0 <= x <= 1
GAMCS = [
    8.57119559098933e-3,
    4.415381324841007e-3,
    5.685043681599363e-2,
    -4.21983539641856e-3,
    1.3268081812124603e-3,
    -1.8930245297988805e-4,
    3.606925327441245e-5,
    -6.056761904460864e-6,
    1.0558295463022833e-6,
    -1.811967365542384e-7,
    3.117724964715322e-8,
    -5.354219639019687e-9,
    9.193275519859589e-10,
    -1.5779412802883398e-10,
    2.7079806229349544e-11,
    -4.64681865382573e-12,
    7.97335019200742e-13,
    -1.368078209830916e-13,
    2.3473194865638007e-14,
    -4.027432614949067e-15,
    6.910051747372101e-16,
    -1.185584500221993e-16,
    2.034148542496374e-17,
    -3.490054341717406e-18,
    5.987993856485306e-19,
    -1.027378057872228e-19,
    1.7627028160605298e-20,
    -3.024320653735306e-21,
    5.188914660218398e-22,
    -8.902770842456576e-23,
    1.5274740684933426e-23,
    -2.620731256187363e-24,
    4.496464047830539e-25,
    -7.714712731336878e-26,
    1.323635453126044e-26,
    -2.2709994129429287e-27,
    3.8964189980039913e-28,
    -6.685198115125953e-29,
    1.1469986631400244e-29,
    -1.9679385863451348e-30,
    3.376448816585338e-31,
    -5.793070335782136e-32,
]

# number of GAMCS terms needed for DBL_EPSILON / 20, see chebyshev_init()
NGAM = 22
XMIN = -170.5674972726612
XMAX = 171.61447887182298
XSML = 2.2474362225598545e-308
DXREL = 1.490116119384765625e-8


@ieee754(1)
def gammafn(x):
    '''
    This function computes the value of the gamma function.

    The Chebyshev series and the tail correction are those of the
    SLATEC routine dgamma; values of |x| <= 10 are reduced to
    gamma(1 + y), 0 <= y < 1, by the recursion gamma(x+1) = x gamma(x).
    Larger values use Stirling's formula with the stirlerr() error term,
    and the reflection formula for negative x.

    Adapted from the RMath function written by Ross Ihaka

    '''
    if math.isnan(x):
        return x

    # exactly zero or a negative integer
    if x == 0 or (x < 0 and x == np.rint(x)):
        ML_WARNING(MathError.DOMAIN, "gammafn")
        return ML_NAN

    y = math.fabs(x)

    if y <= 10:
        n = int(x)
        if x < 0:
            n -= 1
        y = x - n  # n = floor(x)  ==>  y in [0, 1)
        n -= 1
        value = chebyshev_eval(y * 2 - 1, GAMCS, NGAM) + .9375
        if n == 0:
            return value  # x = 1.dddd = 1+y

        if n < 0:
            # gamma(x) for -10 <= x < 1

            # too near a negative integer
            if x < -0.5 and math.fabs((x - int(x - 0.5)) / x) < DXREL:
                ML_WARNING(MathError.PRECISION, "gammafn")

            # so close to 0 that the result would overflow
            if y < XSML:
                ML_WARNING(MathError.RANGE, "gammafn")
                return ML_POSINF if x > 0 else ML_NEGINF

            n = -n
            for i in range(n):
                value /= (x + i)
            return value

        # gamma(x) for 2 <= x <= 10
        for i in range(1, n + 1):
            value *= (y + i)
        return value

    # gamma(x) for y = |x| > 10
    if x > XMAX:
        return ML_POSINF

    if x < XMIN:
        return 0.

    if y <= 50 and y == int(y):
        # (n - 1)!
        value = 1.
        for i in range(2, int(y)):
            value *= i
    else:
        value = np.exp((y - 0.5) * np.log(y) - y + M_LN_SQRT_2PI + stirlerr(y))

    if x > 0:
        return value

    if math.fabs((x - int(x - 0.5)) / x) < DXREL:
        # too near a negative integer
        ML_WARNING(MathError.PRECISION, "gammafn")

    sinpiy = sinpi(y)
    if sinpiy == 0:
        ML_WARNING(MathError.RANGE, "gammafn")
        return ML_POSINF

    return -M_PI / (y * sinpiy * value)
