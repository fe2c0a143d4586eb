import math
import numpy as np
from .beta import pbeta
from .normal import pnorm
from .student_t import pt
from ..special import lgammafn
from ..utils.constants import DBL_EPSILON, DBL_MIN_EXP, M_LN2, M_SQRT_2dPI, M_LN_SQRT_PI
from ..utils.diagnostics import ML_WARNING, ML_WARN_return_NAN, MathError
from ..utils.dpq_handling import R_DT_0, R_DT_1, R_DT_val
from ..utils.ieee import ieee754

ITRMAX = 1000
ERRMAX = 1.e-12


@ieee754(3)
def pnt(t, df, ncp, lower_tail=True, log_p=False):
    '''
    Algorithm AS 243  Lenth,R.V. (1989). Appl. Statist., Vol.38, 185-189.
    ----------------
    Cumulative probability at t of the non-central t-distribution
    with df degrees of freedom (may be fractional) and non-centrality
    parameter delta.

    NOTE

      Requires the following auxiliary routines:

        lgammafn(x)     - log gamma function
        pbeta(x, a, b)  - incomplete beta function
        pnorm(x)        - normal distribution function

    '''
    if math.isnan(t) or math.isnan(df) or math.isnan(ncp):
        return t + df + ncp
    if df <= 0.0:
        return ML_WARN_return_NAN("pnt")
    if ncp == 0.0:
        return pt(t, df, lower_tail, log_p)

    if not math.isfinite(t):
        return R_DT_0(lower_tail, log_p) if t < 0 else R_DT_1(lower_tail, log_p)
    if t >= 0.:
        negdel = False
        tt = t
        dl = ncp
    else:
        # We deal quickly with left tail if extreme,
        # since pt(q, df, ncp) <= pt(0, df, ncp) = \Phi(-ncp)
        if ncp > 40 and (not log_p or not lower_tail):
            return R_DT_0(lower_tail, log_p)
        negdel = True
        tt = -t
        dl = -ncp

    if df > 4e5 or dl * dl > 2 * M_LN2 * (-DBL_MIN_EXP):
        # 2nd part: if del > 37.62, then p=0 below
        # FIXME: test should depend on `df', `tt' AND `del' !
        # Approx. from  Abramowitz & Stegun 26.7.10 (p.949)
        s = 1. / (4. * df)
        return pnorm(tt * (1. - s), dl, np.sqrt(1. + tt * tt * 2. * s),
                     lower_tail != negdel, log_p)

    # initialize twin series
    # Guenther, J. (1978). Statist. Computn. Simuln. vol.6, 199.
    x = t * t
    rxb = df / (x + df)  # := (1 - x) {x below} -- but more accurately
    x = x / (x + df)  # in [0,1)
    if x > 0.:
        # <==>  t != 0
        lambda_ = dl * dl
        p = .5 * np.exp(-.5 * lambda_)
        if p == 0.:
            # underflow!
            ML_WARNING(MathError.UNDERFLOW, "pnt")
            ML_WARNING(MathError.RANGE, "pnt")
            return R_DT_0(lower_tail, log_p)

        q = M_SQRT_2dPI * p * dl
        s = .5 - p
        # s = 0.5 - p = 0.5*(1 - exp(-.5 L)) =  -0.5*expm1(-.5 L))
        if s < 1e-7:
            s = -0.5 * np.expm1(-0.5 * lambda_)
        a = .5
        b = .5 * df
        # rxb = (1 - x)^b  ~= 1 - b*x  for tiny x --> see 'xeven' below
        rxb = np.power(rxb, b)
        albeta = M_LN_SQRT_PI + lgammafn(b) - lgammafn(.5 + b)
        xodd = pbeta(x, a, b, True, False)
        godd = 2. * rxb * np.exp(a * np.log(x) - albeta)
        tnc = b * x
        xeven = tnc if tnc < DBL_EPSILON else 1. - rxb
        geven = tnc * rxb
        tnc = p * xodd + q * xeven

        # repeat until convergence or iteration limit
        for it in range(1, ITRMAX + 1):
            a += 1.
            xodd -= godd
            xeven -= geven
            godd *= x * (a + b - 1.) / a
            geven *= x * (a + b - .5) / (a + .5)
            p *= lambda_ / (2 * it)
            q *= lambda_ / (2 * it + 1)
            tnc += p * xodd + q * xeven
            s -= p
            # R 2.4.0 added test for rounding error here.
            if s < -1.e-10:
                # happens e.g. for (t,df,ncp)=(40,10,38.5), after 799 it.
                ML_WARNING(MathError.PRECISION, "pnt")
                break
            if s <= 0 and it > 1:
                break
            errbd = 2. * s * (xodd - godd)
            if math.fabs(errbd) < ERRMAX:
                break  # convergence
        else:
            # non-convergence
            ML_WARNING(MathError.NOCONV, "pnt")
    else:
        # x = t = 0
        tnc = 0.

    tnc += pnorm(-dl, 0., 1., True, False)

    lower_tail = lower_tail != negdel  # xor
    if tnc > 1 - 1e-10 and lower_tail:
        ML_WARNING(MathError.PRECISION, "pnt{final}")

    return R_DT_val(min(tnc, 1.), lower_tail, log_p)
