from .chebyshev import chebyshev_eval, chebyshev_init
from .diagnostics import NMathWarning, MathError
from .dpq_handling import logspace_add, logspace_sub
from .trig_pi import cospi, sinpi, tanpi

__all__ = ["chebyshev_eval", "chebyshev_init", "NMathWarning", "MathError",
           "logspace_add", "logspace_sub", "cospi", "sinpi", "tanpi"]
