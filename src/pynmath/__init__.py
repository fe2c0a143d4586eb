from .toms708 import bratio, incomplete_beta
from .special import gammafn, lgammafn, lgammafn_sign, lbeta, lgamma1p, log1pmx
from .deviance import bd0, ebd0, stirlerr
from .distributions import (dnorm, pnorm, qnorm, dpois, dgamma, pgamma, pbeta,
                            pt, dt, pnt, dbinom, pbinom, dnbinom, pnbinom)
from .utils import NMathWarning, MathError, cospi, sinpi, tanpi, logspace_add, logspace_sub

# descriptive names for the R entry points
gamma = gammafn
log_gamma = lgammafn
log_gamma_signed = lgammafn_sign
log_beta = lbeta
deviance_part = bd0
deviance_part_extended = ebd0
stirling_error = stirlerr
normal_density = dnorm
normal_cdf = pnorm
normal_quantile = qnorm
poisson_density = dpois
gamma_density = dgamma
gamma_cdf = pgamma
beta_cdf = pbeta
student_t_density = dt
student_t_cdf = pt
noncentral_t_cdf = pnt
binomial_density = dbinom
binomial_cdf = pbinom
negative_binomial_density = dnbinom
negative_binomial_cdf = pnbinom

__all__ = ["bratio", "incomplete_beta", "gammafn", "lgammafn", "lgammafn_sign", "lbeta",
           "lgamma1p", "log1pmx", "bd0", "ebd0", "stirlerr", "dnorm", "pnorm", "qnorm",
           "dpois", "dgamma", "pgamma", "pbeta", "pt", "dt", "pnt", "dbinom", "pbinom",
           "dnbinom", "pnbinom", "NMathWarning", "MathError", "cospi", "sinpi", "tanpi",
           "logspace_add", "logspace_sub", "gamma", "log_gamma", "log_gamma_signed",
           "log_beta", "deviance_part", "deviance_part_extended", "stirling_error",
           "normal_density", "normal_cdf", "normal_quantile", "poisson_density",
           "gamma_density", "gamma_cdf", "beta_cdf", "student_t_density", "student_t_cdf",
           "noncentral_t_cdf", "binomial_density", "binomial_cdf",
           "negative_binomial_density", "negative_binomial_cdf"]
