import math
import numpy

'''
Machine and mathematical constants shared by the nmath routines.
The DBL_* values follow the C <float.h> conventions.
'''

_finfo = numpy.finfo(float)

DBL_EPSILON = float(_finfo.eps)
DBL_MIN = float(_finfo.tiny)
DBL_MAX = float(_finfo.max)
DBL_MANT_DIG = _finfo.nmant + 1
# numpy counts the minimum exponent from 1.0, C counts it from 0.5
DBL_MIN_EXP = _finfo.minexp + 1
DBL_MAX_EXP = _finfo.maxexp
INT_MAX = 2147483647

ML_NAN = numpy.nan
ML_POSINF = numpy.inf
ML_NEGINF = -numpy.inf

M_PI = math.pi
M_2PI = 6.283185307179586476925286766559
M_LN2 = 0.693147180559945309417232121458
M_LN10 = 2.302585092994045684017991454684
M_LOG10_2 = 0.301029995663981195213738894724
M_1_PI = 0.318309886183790671537767526745
M_SQRT_PI = 1.772453850905516027298167483341
M_1_SQRT_2PI = 0.398942280401432677939946059934
M_SQRT_2dPI = 0.797884560802865355879892119869
M_SQRT2 = 1.414213562373095048801688724210
M_SQRT_32 = 5.656854249492380195206754896838
M_SQRT_2PI = 2.506628274631000502415765284811
M_LN_2PI = 1.837877066409345483560659472811
M_LN_SQRT_PI = 0.572364942924700087071713675677
M_LN_SQRT_2PI = 0.918938533204672741780329736406
M_LN_SQRT_PId2 = 0.225791352644727432363097614947

# 2^256, rescaling factor for the continued fraction recurrences
SCALEFACTOR = math.ldexp(1.0, 256)


def Rf_d1mach(i):
    '''
    Function that returns constants defined in R

    '''
    if i == 1:
        return DBL_MIN
    elif i == 2:
        return DBL_MAX
    elif i == 3:
        return 0.5 * DBL_EPSILON
    elif i == 4:
        return DBL_EPSILON
    elif i == 5:
        return M_LOG10_2
    else:
        return 0.0


def Rf_i1mach(i):
    '''
    Integer machine constants, as in the PORT library.
    Only the floating point entries are meaningful here.

    '''
    table = {
        1: 5,
        2: 6,
        3: 0,
        4: 0,
        5: 32,
        6: 4,
        7: 2,
        8: 31,
        9: INT_MAX,
        10: 2,
        11: 24,
        12: -125,
        13: 128,
        14: DBL_MANT_DIG,
        15: DBL_MIN_EXP,
        16: DBL_MAX_EXP,
    }
    return table.get(i, 0)
