import math
import numpy as np
from ..utils.constants import (ML_NAN, ML_POSINF, ML_NEGINF, DBL_MAX, DBL_EPSILON,
                               DBL_MIN_EXP, DBL_MANT_DIG, M_LN2, M_2PI, M_SQRT2,
                               M_SQRT_32, M_1_SQRT_2PI, M_LN_SQRT_2PI)
from ..utils.diagnostics import ML_WARN_return_NAN
from ..utils.dpq_handling import (R_D__0, R_D__1, R_DT_0, R_DT_1, R_DT_qIv,
                                  R_DT_CIv, R_Q_P01_boundaries, R_forceint)
from ..utils.ieee import ieee754


@ieee754(3)
def dnorm(x, mu=0., sigma=1., give_log=False):
    '''
    Compute the density of the normal distribution.

    Adapted from RMath code written by Ross Ihaka & Martin Maechler

    '''
    if math.isnan(x) or math.isnan(mu) or math.isnan(sigma):
        return x + mu + sigma
    if sigma < 0:
        return ML_WARN_return_NAN("dnorm")
    if not math.isfinite(sigma):
        return R_D__0(give_log)
    if not math.isfinite(x) and mu == x:
        return ML_NAN  # x-mu is NaN
    if sigma == 0:
        return ML_POSINF if x == mu else R_D__0(give_log)

    x = (x - mu) / sigma
    if not math.isfinite(x):
        return R_D__0(give_log)

    x = math.fabs(x)
    if x >= 2 * np.sqrt(DBL_MAX):
        return R_D__0(give_log)
    if give_log:
        return -(M_LN_SQRT_2PI + 0.5 * x * x + np.log(sigma))

    if x < 5:
        return M_1_SQRT_2PI * np.exp(-0.5 * x * x) / sigma

    # ELSE: x >= 5; underflow boundary is sqrt(-2 log(2) (DBL_MIN_EXP + 1 - DBL_MANT_DIG))
    if x > np.sqrt(-2 * M_LN2 * (DBL_MIN_EXP + 1 - DBL_MANT_DIG)):
        return 0.

    # split x = x1 + x2 with x1 exact in 16 bits, so x1^2 is exact
    x1 = np.ldexp(R_forceint(np.ldexp(x, 16)), -16)
    x2 = x - x1
    return M_1_SQRT_2PI / sigma * (np.exp(-0.5 * x1 * x1) * np.exp((-0.5 * x2 - x1) * x2))


# coefficients of Cody's algorithm 715, used by pnorm_both
_A = [2.2352520354606839287, 161.02823106855587881, 1067.6894854603709582,
      18154.981253343561249, 0.065682337918207449113]
_B = [47.20258190468824187, 976.09855173777669322, 10260.932208618978205,
      45507.789335026729956]
_C = [0.39894151208813466764, 8.8831497943883759412, 93.506656132177855979,
      597.27027639480026226, 2494.5375852903726711, 6848.1904505362823326,
      11602.651437647350124, 9842.7148383839780218, 1.0765576773720192317e-8]
_D = [22.266688044328115691, 235.38790178262499861, 1519.377599407554805,
      6485.558298266760755, 18615.571640885098091, 34900.952721145977266,
      38912.003286093271411, 19685.429676859990727]
_P = [0.21589853405795699, 0.1274011611602473639, 0.022235277870649807,
      0.001421619193227893466, 2.9112874951168792e-5, 0.02307344176494017303]
_Q = [1.28426009614491121, 0.468238212480865118, 0.0659881378689285515,
      0.00378239633202758244, 7.29751555083966205e-5]


def _do_del(X, x, temp, lower, upper, log_p):
    '''
    The factor exp(-X^2/2) split as exp(-xsq^2/2) * exp(-del/2), with xsq
    X rounded to a multiple of 1/16. Returns (cum, ccum).
    '''
    xsq = np.trunc(X * 16) / 16
    dl = (X - xsq) * (X + xsq)
    ccum = ML_NAN
    if log_p:
        cum = (-xsq * np.ldexp(xsq, -1)) - np.ldexp(dl, -1) + np.log(temp)
        if (lower and x > 0.) or (upper and x <= 0.):
            ccum = np.log1p(-np.exp(-xsq * np.ldexp(xsq, -1)) * np.exp(-np.ldexp(dl, -1)) * temp)
    else:
        cum = np.exp(-xsq * np.ldexp(xsq, -1)) * np.exp(-np.ldexp(dl, -1)) * temp
        ccum = 1.0 - cum
    return cum, ccum


def _swap_tail(x, cum, ccum, lower):
    if x > 0.:
        # swap  ccum <--> cum
        temp = cum
        if lower:
            cum = ccum
        ccum = temp
    return cum, ccum


@ieee754(1)
def pnorm_both(x, i_tail=0, log_p=False):
    '''
    Returns (cum, ccum) = (P[X <= x], P[X > x]) for the standard normal.

    i_tail in {0,1,2} means: "lower", "upper", or "both" :
       if(lower) return  cum := P[X <= x]
       if(upper) return ccum := P[X >  x] = 1 - P[X <= x]
    The tail not asked for may be returned as NaN.

    The main computation evaluates near-minimax approximations derived
    from those in "Rational Chebyshev approximations for the error
    function" by W. J. Cody, Math. Comp., 1969, 631-637. This
    transportable program uses rational functions that theoretically
    approximate the normal distribution function to at least 18
    significant decimal digits.

    '''
    a, b, c, d, p, q = _A, _B, _C, _D, _P, _Q

    if math.isnan(x):
        return x, x

    # consider changing these
    eps = DBL_EPSILON * 0.5

    lower = i_tail != 1
    upper = i_tail != 0
    cum = ccum = ML_NAN

    y = math.fabs(x)
    if y <= 0.67448975:
        # qnorm(3/4) = .6744.... -- earlier had 0.66291
        if y > eps:
            xsq = x * x
            xnum = a[4] * xsq
            xden = xsq
            for i in range(3):
                xnum = (xnum + a[i]) * xsq
                xden = (xden + b[i]) * xsq
        else:
            xnum = xden = 0.0

        temp = x * (xnum + a[3]) / (xden + b[3])
        if lower:
            cum = 0.5 + temp
        if upper:
            ccum = 0.5 - temp
        if log_p:
            if lower:
                cum = np.log(cum)
            if upper:
                ccum = np.log(ccum)

    elif y <= M_SQRT_32:
        # evaluate pnorm for 0.674.. = qnorm(3/4) < |x| <= sqrt(32) ~= 5.657
        xnum = c[8] * y
        xden = y
        for i in range(7):
            xnum = (xnum + c[i]) * y
            xden = (xden + d[i]) * y
        temp = (xnum + c[7]) / (xden + d[7])

        cum, ccum = _do_del(y, x, temp, lower, upper, log_p)
        cum, ccum = _swap_tail(x, cum, ccum, lower)

    # else	  |x| > sqrt(32) = 5.657 :
    # the next two case differentiations were really for lower=T, log=F
    # Particularly	 *not*	for  log_p !
    #
    # Cody had (-37.5193 < x  &&  x < 8.2924) ; R originally had y < 50
    #
    # Note that we do want symmetry(0), lower/upper -> hence use y
    elif (log_p and y < 1e170) or (lower and -37.5193 < x < 8.2924) \
            or (upper and -8.2924 < x < 37.5193):
        # evaluate pnorm for x in (-37.5, -5.657) union (5.657, 37.5)
        xsq = 1.0 / (x * x)  # (1./x)*(1./x) might be better
        xnum = p[5] * xsq
        xden = xsq
        for i in range(4):
            xnum = (xnum + p[i]) * xsq
            xden = (xden + q[i]) * xsq
        temp = xsq * (xnum + p[4]) / (xden + q[4])
        temp = (M_1_SQRT_2PI - temp) / y

        cum, ccum = _do_del(x, x, temp, lower, upper, log_p)
        cum, ccum = _swap_tail(x, cum, ccum, lower)

    else:
        # large x such that probs are 0 or 1
        if x > 0:
            cum, ccum = R_D__1(log_p), R_D__0(log_p)
        else:
            cum, ccum = R_D__0(log_p), R_D__1(log_p)

    return cum, ccum


@ieee754(3)
def pnorm(x, mu=0., sigma=1., lower_tail=True, log_p=False):
    '''
    The main computation evaluates near-minimax approximations
    derived from those in "Rational Chebyshev approximations for
    the error function" by W. J. Cody, Math. Comp., 1969, 631-637.

    Parameters:
    -----------
        x (float): the quantile
        mu, sigma (float): mean and standard deviation
        lower_tail (bool): P[X <= x] when True, P[X > x] otherwise
        log_p (bool): return the natural log of the probability

    '''
    if math.isnan(x) or math.isnan(mu) or math.isnan(sigma):
        return x + mu + sigma
    if not math.isfinite(x) and mu == x:
        return ML_NAN  # x-mu is NaN
    if sigma <= 0:
        if sigma < 0:
            return ML_WARN_return_NAN("pnorm")
        # sigma = 0
        return R_DT_0(lower_tail, log_p) if x < mu else R_DT_1(lower_tail, log_p)

    p = (x - mu) / sigma
    if not math.isfinite(p):
        return R_DT_0(lower_tail, log_p) if x < mu else R_DT_1(lower_tail, log_p)
    x = p

    cum, ccum = pnorm_both(x, 0 if lower_tail else 1, log_p)
    return cum if lower_tail else ccum


@ieee754(3)
def qnorm(p, mu=0., sigma=1., lower_tail=True, log_p=False):
    '''
    Compute the quantile function for the normal distribution.

    Rational approximations of Wichura accurate to about 1 part in 10^16,
    and for log-scale p beyond exp(-27^2) an asymptotic expansion in
    s = -log(p~) whose order grows as p~ approaches 0 or 1.

    REFERENCE

    Wichura, M.J. (1988).
    Algorithm AS 241: The Percentage Points of the Normal Distribution.
    Applied Statistics, 37, 477-484.

    '''
    if math.isnan(p) or math.isnan(mu) or math.isnan(sigma):
        return p + mu + sigma

    boundary = R_Q_P01_boundaries(p, ML_NEGINF, ML_POSINF, lower_tail, log_p, "qnorm")
    if boundary is not None:
        return boundary

    if sigma < 0:
        return ML_WARN_return_NAN("qnorm")
    if sigma == 0:
        return mu

    p_ = R_DT_qIv(p, lower_tail, log_p)  # real lower_tail prob. p
    q = p_ - 0.5

    if math.fabs(q) <= .425:
        # 0.075 <= p <= 0.925
        r = .180625 - q * q
        val = q * (((((((r * 2509.0809287301226727 +
                         33430.575583588128105) * r + 67265.770927008700853) * r +
                       45921.953931549871457) * r + 13731.693765509461125) * r +
                     1971.5909503065514427) * r + 133.14166789178437745) * r +
                   3.387132872796366608) \
            / (((((((r * 5226.495278852545925 +
                     28729.085735721942674) * r + 39307.89580009271061) * r +
                   21213.794301586595867) * r + 5394.1960214247511077) * r +
                 687.1870074920579083) * r + 42.313330701600911252) * r + 1.)
        return mu + sigma * val

    # closer than 0.075 from {0,1} boundary :
    #  r := log(p~);  p~ = min(p, 1-p) < 0.075
    if log_p and ((lower_tail and q <= 0) or (not lower_tail and q > 0)):
        lp = p
    else:
        lp = np.log(R_DT_CIv(p, lower_tail, log_p) if q > 0 else p_)
    # r = sqrt( - log(min(p~, 1-p~)) )  <==>  min(p~, 1-p~) = exp( - r^2 )
    r = np.sqrt(-lp)

    if r <= 5.:
        # <==> min(p,1-p) >= exp(-25) ~= 1.3888e-11
        r += -1.6
        val = (((((((r * 7.7454501427834140764e-4 +
                     .0227238449892691845833) * r + .24178072517745061177) *
                   r + 1.27045825245236838258) * r +
                  3.64784832476320460504) * r + 5.7694972214606914055) *
                r + 4.6303378461565452959) * r +
               1.42343711074968357734) \
            / (((((((r *
                     1.05075007164441684324e-9 + 5.475938084995344946e-4) *
                    r + .0151986665636164571966) * r +
                   .14810397642748007459) * r + .68976733498510000455) *
                 r + 1.6763848301838038494) * r +
                2.05319162663775882187) * r + 1.)

    elif log_p and r >= 27:
        # p is *really* close to 0 or 1; practically only when log_p
        if r >= 6.4e8:
            # p is *very extremely* close to 0 or 1;
            # the asymptotical formula ("0-th order"): qn = sqrt(2*s)
            val = r * M_SQRT2
        else:
            s2 = -np.ldexp(lp, 1)  # = -2*lp = 2s
            x2 = s2 - np.log(M_2PI * s2)  # = xs_1
            # if(r >= 36000.)  # <==> s >= 36000^2   use x2 = xs_1  above
            if r < 36000.:
                x2 = s2 - np.log(M_2PI * x2) - 2. / (2. + x2)  # == xs_2
                if r < 840.:
                    # 27 < r < 840
                    x2 = s2 - np.log(M_2PI * x2) + \
                        2 * np.log1p(-(1 - 1 / (4 + x2)) / (2. + x2))  # == xs_3
                    if r < 109.:
                        # 27 < r < 109
                        x2 = s2 - np.log(M_2PI * x2) + \
                            2 * np.log1p(-(1 - (1 - 5 / (6 + x2)) / (4. + x2)) / (2. + x2))  # == xs_4
                        if r < 55.:
                            # 27 < r < 55
                            x2 = s2 - np.log(M_2PI * x2) + \
                                2 * np.log1p(-(1 - (1 - (5 - 9 / (8. + x2)) / (6. + x2)) /
                                               (4. + x2)) / (2. + x2))  # == xs_5
            val = np.sqrt(x2)

    else:
        # 5 < r < 27
        r += -5.
        val = (((((((r * 2.01033439929228813265e-7 +
                     2.71155556874348757815e-5) * r +
                    .0012426609473880784386) * r + .026532189526576123093) *
                  r + .29656057182850489123) * r +
                 1.7848265399172913358) * r + 5.4637849111641143699) *
               r + 6.6579046435011037772) \
            / (((((((r *
                     2.04426310338993978564e-15 + 1.4215117583164458887e-7) *
                    r + 1.8463183175100546818e-5) * r +
                   7.868691311456132591e-4) * r + .0148753612908506148525)
                 * r + .13692988092273580531) * r +
                .59983220655588793769) * r + 1.)

    if q < 0.0:
        val = -val
    return mu + sigma * val
