from .normal import dnorm, pnorm, pnorm_both, qnorm
from .poisson import dpois, dpois_raw, dpois_wrap
from .gamma_dist import (dgamma, pgamma, pgamma_raw, pgamma_smallx, pd_upper_series,
                         pd_lower_cf, pd_lower_series, dpnorm, ppois_asymp)
from .beta import pbeta, pbeta_raw
from .student_t import pt, dt
from .noncentral_t import pnt
from .binomial import dbinom_raw, dbinom, pbinom, dnbinom, pnbinom

__all__ = ["dnorm", "pnorm", "pnorm_both", "qnorm", "dpois", "dpois_raw",
           "dpois_wrap", "dgamma", "pgamma", "pgamma_raw", "pgamma_smallx",
           "pd_upper_series", "pd_lower_cf", "pd_lower_series", "dpnorm",
           "ppois_asymp", "pbeta", "pbeta_raw", "pt", "dt", "pnt", "dbinom_raw",
           "dbinom", "pbinom", "dnbinom", "pnbinom"]
