import math
import numpy as np
from ..utils.constants import SCALEFACTOR
from ..utils.ieee import ieee754


def logcf(x, i, d, eps):
    '''
    Continued fraction for calculation of
        1/i + x/(i+d) + x^2/(i+2*d) + x^3/(i+3*d) + ... = sum_{k=0}^Inf x^k/(i+k*d)

    auxiliary in log1pmx() and lgamma1p()

    '''
    c1 = 2 * d
    c2 = i + d
    c4 = c2 + d
    a1 = c2
    b1 = i * (c2 - i * x)
    b2 = d * d * x
    a2 = c4 * c2 - b2

    b2 = c4 * b1 - i * b2

    while math.fabs(a2 * b1 - a1 * b2) > math.fabs(eps * b1 * b2):
        c3 = c2 * c2 * x
        c2 += d
        c4 += d
        a1 = c4 * a2 - c3 * a1
        b1 = c4 * b2 - c3 * b1

        c3 = c1 * c1 * x
        c1 += d
        c4 += d
        a2 = c4 * a1 - c3 * a2
        b2 = c4 * b1 - c3 * b2

        if math.fabs(b2) > SCALEFACTOR:
            a1 /= SCALEFACTOR
            b1 /= SCALEFACTOR
            a2 /= SCALEFACTOR
            b2 /= SCALEFACTOR
        elif math.fabs(b2) < 1 / SCALEFACTOR:
            a1 *= SCALEFACTOR
            b1 *= SCALEFACTOR
            a2 *= SCALEFACTOR
            b2 *= SCALEFACTOR

    return a2 / b2


@ieee754(1)
def log1pmx(x):
    '''
    Accurate calculation of log(1+x)-x, particularly for small x.
    '''
    min_log1_value = -0.79149064

    if x > 1 or x < min_log1_value:
        return np.log1p(x) - x

    # -.791 <=  x <= 1  -- expand in  [x/(2+x)]^2 =: y :
    # log(1+x) - x =  x/(2+x) * [ 2 * y * S(y) - x],  with
    # S(y) = 1/3 + y/5 + y^2/7 + ... = \sum_{k=0}^\infty  y^k / (2k + 3)
    r = x / (2 + x)
    y = r * r
    if math.fabs(x) < 1e-2:
        two = 2.
        return r * ((((two / 9 * y + two / 7) * y + two / 5) * y + two / 3) * y - x)
    tol_logcf = 1e-14
    return r * (2 * y * logcf(y, 3, 2, tol_logcf) - x)
