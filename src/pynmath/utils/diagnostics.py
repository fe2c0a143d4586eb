import enum
import warnings
from .constants import ML_NAN

'''
Non-fatal diagnostics for the nmath routines. Domain violations and
convergence problems never raise: the routine returns its best answer
(often NaN) and a NMathWarning is issued. Callers that do not care can
silence them with warnings.catch_warnings() / simplefilter("ignore").
'''


class NMathWarning(RuntimeWarning):
    pass


class MathError(enum.IntEnum):
    NONE = 0
    DOMAIN = 1
    RANGE = 2
    NOCONV = 4
    PRECISION = 8
    UNDERFLOW = 16


_MESSAGES = {
    MathError.DOMAIN: "argument out of domain in '{0}'",
    MathError.RANGE: "value out of range in '{0}'",
    MathError.NOCONV: "convergence failed in '{0}'",
    MathError.PRECISION: "full precision may not have been achieved in '{0}'",
    MathError.UNDERFLOW: "underflow occurred in '{0}'",
}


def MATHLIB_WARNING(message):
    warnings.warn(message, NMathWarning, stacklevel=3)


def ML_WARNING(kind, where):
    if kind in _MESSAGES:
        warnings.warn(_MESSAGES[kind].format(where), NMathWarning, stacklevel=3)


def ML_WARN_return_NAN(where=""):
    ML_WARNING(MathError.DOMAIN, where)
    return ML_NAN
