import math
import numpy as np
from .constants import M_PI, ML_NAN
from .diagnostics import ML_WARN_return_NAN
from .ieee import ieee754

'''
cospi(x) = cos(pi * x), sinpi(x) = sin(pi * x), tanpi(x) = tan(pi * x),
exact for the multiples of 1/2 (and 1/4 for tanpi) where the plain
formula is not.
'''


@ieee754(1)
def cospi(x):
    if math.isnan(x):
        return x
    if not math.isfinite(x):
        return ML_WARN_return_NAN("cospi")

    # cos() symmetric; cos(pi(x + 2k)) == cos(pi x) for all integer k
    x = np.fmod(math.fabs(x), 2.)
    if np.fmod(x, 1.) == 0.5:
        return 0.
    if x == 1.:
        return -1.
    if x == 0.:
        return 1.
    return np.cos(M_PI * x)


@ieee754(1)
def sinpi(x):
    if math.isnan(x):
        return x
    if not math.isfinite(x):
        return ML_WARN_return_NAN("sinpi")

    x = np.fmod(x, 2.)
    # map (-2,2) --> (-1,1]
    if x <= -1:
        x += 2.
    elif x > 1.:
        x -= 2.
    if x == 0. or x == 1.:
        return 0.
    if x == 0.5:
        return 1.
    if x == -0.5:
        return -1.
    return np.sin(M_PI * x)


@ieee754(1)
def tanpi(x):
    if math.isnan(x):
        return x
    if not math.isfinite(x):
        return ML_WARN_return_NAN("tanpi")

    x = np.fmod(x, 1.)
    # map (-1,1) --> (-1/2, 1/2]
    if x <= -0.5:
        x += 1.
    elif x > 0.5:
        x -= 1.
    if x == 0.:
        return 0.
    if x == 0.5:
        return ML_NAN
    if x == 0.25:
        return 1.
    if x == -0.25:
        return -1.
    return np.tan(M_PI * x)
