import math
import numpy as np
from .primitives import (exparg, esum, rexpm1, alnrel, rlog1, erf_, erfc1,
                         gam1, gamln1, psi, betaln, bcorr, algdiv)
from ..utils.constants import ML_NAN, ML_NEGINF, M_SQRT_PI, M_LN_SQRT_2PI
from ..utils.diagnostics import MATHLIB_WARNING, ML_WARN_return_NAN
from ..utils.dpq_handling import R_D__0, R_D_exp, logspace_add

'''
Series, continued fractions and asymptotic expansions used by bratio().
Every routine assumes it is only reached from the bratio() decision tree,
so the region conditions in the docstrings are not re-checked.
'''


def fpser(a, b, x, eps, log_p):
    '''
    EVALUATION OF I (A,B)
                    X

    FOR B < MIN(EPS, EPS*A) AND X <= 0.5

    '''
    # set  ans := x^a
    if log_p:
        ans = a * np.log(x)
    elif a > eps * 0.001:
        t = a * np.log(x)
        if t < exparg(1):
            # exp(t) would underflow
            return 0.
        ans = np.exp(t)
    else:
        ans = 1.

    # note that 1/b(a,b) = b
    if log_p:
        ans += np.log(b) - np.log(a)
    else:
        ans *= b / a

    tol = eps / a
    an = a + 1.
    t = x
    s = t / an
    while True:
        an += 1.
        t = x * t
        c = t / an
        s += c
        if math.fabs(c) <= tol:
            break

    if log_p:
        ans += np.log1p(a * s)
    else:
        ans *= a * s + 1.
    return ans


def apser(a, b, x, eps):
    '''
    apser() yields the incomplete beta ratio  I_{1-x}(b,a)  for
    a <= min(eps,eps*b), b*x <= 1, and x <= 0.5,  i.e., a is very small.
    Use only if above inequalities are satisfied.

    '''
    g = .577215664901533

    bx = b * x

    t = x - bx
    if b * eps <= 0.02:
        c = np.log(x) + psi(b) + g + t
    else:
        # b > 2e13 : psi(b) ~= log(b)
        c = np.log(bx) + g + t

    tol = eps * 5. * math.fabs(c)
    j = 1.
    s = 0.
    while True:
        j += 1.
        t *= x - bx / j
        aj = t / j
        s += aj
        if math.fabs(aj) <= tol:
            break

    return -a * (c + s)


def bpser(a, b, x, eps, log_p):
    '''
    Power SERies expansion for evaluating I_x(a,b) when
    b <= 1 or b*x <= 0.7.   eps is the tolerance used.
    NB: if log_p is TRUE, also use it if   (b < 40  & lambda > 650)

    '''
    if x == 0.:
        return R_D__0(log_p)

    # compute the factor  x^a/(a*Beta(a,b))
    a0 = min(a, b)
    if a0 >= 1.:
        # 1 <= a0 <= b0
        z = a * np.log(x) - betaln(a, b)
        ans = z - np.log(a) if log_p else np.exp(z) / a
    else:
        b0 = max(a, b)

        if b0 < 8.:
            if b0 <= 1.:
                # a0 < 1 and b0 <= 1
                if log_p:
                    ans = a * np.log(x)
                else:
                    ans = np.power(x, a)
                    if ans == 0.:
                        # once underflow, always underflow ..
                        return ans
                apb = a + b
                if apb > 1.:
                    u = a + b - 1.
                    z = (gam1(u) + 1.) / apb
                else:
                    z = gam1(apb) + 1.
                c = (gam1(a) + 1.) * (gam1(b) + 1.) / z

                if log_p:
                    ans += np.log(c * (b / apb))
                else:
                    ans *= c * (b / apb)

            else:
                # a0 < 1 < b0 < 8
                u = gamln1(a0)
                m = int(b0 - 1.)
                if m >= 1:
                    c = 1.
                    for i in range(m):
                        b0 += -1.
                        c *= b0 / (a0 + b0)
                    u += np.log(c)

                z = a * np.log(x) - u
                b0 += -1.  # => b0 in (0, 7)
                apb = a0 + b0
                if apb > 1.:
                    u = a0 + b0 - 1.
                    t = (gam1(u) + 1.) / apb
                else:
                    t = gam1(apb) + 1.

                if log_p:
                    ans = z + np.log(a0 / a) + np.log1p(gam1(b0)) - np.log(t)
                else:
                    ans = np.exp(z) * (a0 / a) * (gam1(b0) + 1.) / t

        else:
            # a0 < 1 < 8 <= b0
            u = gamln1(a0) + algdiv(a0, b0)
            z = a * np.log(x) - u

            if log_p:
                ans = z + np.log(a0 / a)
            else:
                ans = a0 / a * np.exp(z)

    if ans == R_D__0(log_p) or (not log_p and a <= eps * 0.1):
        return ans

    # compute the series
    tol = eps / a
    n = 0.
    total = 0.
    c = 1.
    while True:
        # sum is alternating as long as n < b (<==> 1 - b/n < 0)
        n += 1.
        c *= (0.5 - b / n + 0.5) * x
        w = c / (a + n)
        total += w
        if not (n < 1e7 and math.fabs(w) > tol):
            break

    if math.fabs(w) > tol:
        # the series did not converge (in time);
        # warn only when the result seems to matter
        if (log_p and not (a * total > -1. and math.fabs(np.log1p(a * total)) < eps * math.fabs(ans))) or \
                (not log_p and math.fabs(a * total + 1.) != 1.):
            MATHLIB_WARNING(
                " bpser(a={0:g}, b={1:g}, x={2:g},...) did not converge (n=1e7, |w|/tol={3:g} > 1; A={4:g})".format(
                    a, b, x, math.fabs(w) / tol, ans))

    if log_p:
        if a * total > -1.:
            ans += np.log1p(a * total)
        else:
            if ans > ML_NEGINF:
                MATHLIB_WARNING(
                    "pbeta(*, log.p=TRUE) -> bpser(a={0:g}, b={1:g}, x={2:g},...) underflow to -Inf".format(a, b, x))
            ans = ML_NEGINF
    elif a * total > -1.:
        ans *= a * total + 1.
    else:
        # underflow to
        ans = 0.
    return ans


def bup(a, b, x, y, n, eps, give_log):
    '''
    EVALUATION OF I_x(A,B) - I_x(A+N,B) WHERE N IS A POSITIVE INT.
    EPS IS THE TOLERANCE USED.

    '''
    apb = a + b
    ap1 = a + 1.
    if n > 1 and a >= 1. and apb >= ap1 * 1.1:
        mu = int(math.fabs(exparg(1)))
        k = int(exparg(0))
        if mu > k:
            mu = k
        d = np.exp(-float(mu))
    else:
        mu = 0
        d = 1.

    # L10
    if give_log:
        ret_val = brcmp1(mu, a, b, x, y, True) - np.log(a)
    else:
        ret_val = brcmp1(mu, a, b, x, y, False) / a
    if n == 1 or (give_log and ret_val == ML_NEGINF) or (not give_log and ret_val == 0.):
        return ret_val

    nm1 = n - 1
    w = d

    # let k be the index of the maximum term
    k = 0
    if b > 1.:
        if y > 1e-4:
            r = (b - 1.) * x / y - a
            if r >= 1.:
                k = int(r) if r < nm1 else nm1
        else:
            k = nm1

        # add the increasing terms of the series - if k > 0
        for i in range(k):
            d *= (apb + i) / (ap1 + i) * x
            w += d

    # add the remaining terms of the series
    for i in range(k, nm1):
        d *= (apb + i) / (ap1 + i) * x
        w += d
        if d <= eps * w:
            # relativ convergence (eps)
            break

    # terminate the procedure
    if give_log:
        ret_val += np.log(w)
    else:
        ret_val *= w
    return ret_val


def bfrac(a, b, x, y, lambda_, eps, log_p):
    '''
    Continued fraction expansion for I_x(a,b) when a, b > 1.
    It is assumed that  lambda = (a + b)*y - b.

    '''
    if not math.isfinite(lambda_):
        return ML_NAN

    brc = brcomp(a, b, x, y, log_p)
    if math.isnan(brc):
        # e.g. from   L <- 1e308; pnbinom(L, L, mu = 5)
        return ML_WARN_return_NAN("bfrac")
    if not log_p and brc == 0.:
        return 0.

    c = lambda_ + 1.
    c0 = b / a
    c1 = 1. / a + 1.
    yp1 = y + 1.

    n = 0.
    p = 1.
    s = a + 1.
    an = 0.
    bn = 1.
    anp1 = 1.
    bnp1 = c / c1
    r = c1 / c

    # continued fraction calculation
    while True:
        n += 1.
        t = n / a
        w = n * (b - n) * x
        e = a / s
        alpha = p * (p + c0) * e * e * (w * x)
        e = (t + 1.) / (c1 + t + t)
        beta = n + w / s + e * (c + n * yp1)
        p = t + 1.
        s += 2.

        # update an, bn, anp1, and bnp1
        t = alpha * an + beta * anp1
        an = anp1
        anp1 = t
        t = alpha * bn + beta * bnp1
        bn = bnp1
        bnp1 = t

        r0 = r
        r = anp1 / bnp1
        if math.fabs(r - r0) <= eps * r:
            break

        # rescale an, bn, anp1, and bnp1
        an /= bnp1
        bn /= bnp1
        anp1 = r
        bnp1 = 1.
        if n >= 10000:
            break

    if n >= 10000 and math.fabs(r - r0) > eps * r:
        MATHLIB_WARNING(
            " bfrac(a={0:g}, b={1:g}, x={2:g}, y={3:g}, lambda={4:g}) did *not* converge (in 10000 steps)".format(
                a, b, x, y, lambda_))
    return brc + np.log(r) if log_p else brc * r


def brcomp(a, b, x, y, log_p):
    '''
    Evaluation of x^a * y^b / Beta(a,b)
    '''
    const = .398942280401433  # == 1/sqrt(2*pi)

    if x == 0. or y == 0.:
        return R_D__0(log_p)

    a0 = min(a, b)
    if a0 < 8.:
        if x <= .375:
            lnx = np.log(x)
            lny = alnrel(-x)
        elif y > .375:
            lnx = np.log(x)
            lny = np.log(y)
        else:
            lnx = alnrel(-y)
            lny = np.log(y)

        z = a * lnx + b * lny
        if a0 >= 1.:
            z -= betaln(a, b)
            return R_D_exp(z, log_p)

        # procedure for a < 1 OR b < 1
        b0 = max(a, b)
        if b0 >= 8.:
            u = gamln1(a0) + algdiv(a0, b0)
            return np.log(a0) + (z - u) if log_p else a0 * np.exp(z - u)

        if b0 <= 1.:
            # algorithm for max(a,b) = b0 <= 1
            e_z = R_D_exp(z, log_p)

            if not log_p and e_z == 0.:
                # exp() underflow
                return 0.

            apb = a + b
            if apb > 1.:
                u = a + b - 1.
                z = (gam1(u) + 1.) / apb
            else:
                z = gam1(apb) + 1.

            c = (gam1(a) + 1.) * (gam1(b) + 1.) / z
            if log_p:
                return e_z + np.log(a0 * c) - np.log1p(a0 / b0)
            return e_z * (a0 * c) / (a0 / b0 + 1.)

        # else: algorithm for 1 < b0 < 8
        u = gamln1(a0)
        n = int(b0 - 1.)
        if n >= 1:
            c = 1.
            for i in range(n):
                b0 += -1.
                c *= b0 / (a0 + b0)
            u = np.log(c) + u
        z -= u
        b0 += -1.
        apb = a0 + b0
        if apb > 1.:
            u = a0 + b0 - 1.
            t = (gam1(u) + 1.) / apb
        else:
            t = gam1(apb) + 1.

        if log_p:
            return np.log(a0) + z + np.log1p(gam1(b0)) - np.log(t)
        return a0 * np.exp(z) * (gam1(b0) + 1.) / t

    # procedure for a >= 8 and b >= 8
    if a <= b:
        h = a / b
        x0 = h / (h + 1.)
        y0 = 1. / (h + 1.)
        lambda_ = a - (a + b) * x
    else:
        h = b / a
        x0 = 1. / (h + 1.)
        y0 = h / (h + 1.)
        lambda_ = (a + b) * y - b

    e = -lambda_ / a
    if math.fabs(e) > .6:
        u = e - np.log(x / x0)
    else:
        u = rlog1(e)

    e = lambda_ / b
    if math.fabs(e) <= .6:
        v = rlog1(e)
    else:
        v = e - np.log(y / y0)

    if log_p:
        z = -(a * u + b * v)
        return -M_LN_SQRT_2PI + .5 * np.log(b * x0) + z - bcorr(a, b)
    z = np.exp(-(a * u + b * v))
    return const * np.sqrt(b * x0) * z * np.exp(-bcorr(a, b))


def brcmp1(mu, a, b, x, y, give_log):
    '''
    Evaluation of    exp(mu) * x^a * y^b / beta(a,b)
    '''
    const = .398942280401433  # == 1/sqrt(2*pi)

    a0 = min(a, b)
    if a0 < 8.:
        if x <= .375:
            lnx = np.log(x)
            lny = alnrel(-x)
        elif y > .375:
            lnx = np.log(x)
            lny = np.log(y)
        else:
            lnx = alnrel(-y)
            lny = np.log(y)

        z = a * lnx + b * lny
        if a0 >= 1.:
            z -= betaln(a, b)
            return esum(mu, z, give_log)

        # procedure for a < 1 OR b < 1
        b0 = max(a, b)
        if b0 >= 8.:
            u = gamln1(a0) + algdiv(a0, b0)
            if give_log:
                return np.log(a0) + esum(mu, z - u, True)
            return a0 * esum(mu, z - u, False)

        elif b0 <= 1.:
            # a0 < 1, b0 <= 1
            ans = esum(mu, z, give_log)
            if ans == (ML_NEGINF if give_log else 0.):
                return ans

            apb = a + b
            if apb > 1.:
                u = a + b - 1.
                z = (gam1(u) + 1.) / apb
            else:
                z = gam1(apb) + 1.

            if give_log:
                c = np.log1p(gam1(a)) + np.log1p(gam1(b)) - np.log(z)
                return ans + np.log(a0) + c - np.log1p(a0 / b0)
            c = (gam1(a) + 1.) * (gam1(b) + 1.) / z
            return ans * (a0 * c) / (a0 / b0 + 1.)

        # else: algorithm for a0 < 1 < b0 < 8
        u = gamln1(a0)
        n = int(b0 - 1.)
        if n >= 1:
            c = 1.
            for i in range(n):
                b0 += -1.
                c *= b0 / (a0 + b0)
            u += np.log(c)
        z -= u
        b0 += -1.
        apb = a0 + b0
        if apb > 1.:
            t = (gam1(apb - 1.) + 1.) / apb
        else:
            t = gam1(apb) + 1.

        if give_log:
            return np.log(a0) + esum(mu, z, True) + np.log1p(gam1(b0)) - np.log(t)
        return a0 * esum(mu, z, False) * (gam1(b0) + 1.) / t

    # procedure for a >= 8 and b >= 8
    if a > b:
        h = b / a
        x0 = 1. / (h + 1.)  # => lx0 := log(x0) = 0 - log1p(h)
        y0 = h / (h + 1.)
        lambda_ = (a + b) * y - b
    else:
        h = a / b
        x0 = h / (h + 1.)  # => lx0 := log(x0) = - log1p(1/h)
        y0 = 1. / (h + 1.)
        lambda_ = a - (a + b) * x
    lx0 = -np.log1p(b / a)  # in both cases

    e = -lambda_ / a
    if math.fabs(e) > 0.6:
        u = e - np.log(x / x0)
    else:
        u = rlog1(e)

    e = lambda_ / b
    if math.fabs(e) > 0.6:
        v = e - np.log(y / y0)
    else:
        v = rlog1(e)

    z = esum(mu, -(a * u + b * v), give_log)
    if give_log:
        return np.log(const) + (np.log(b) + lx0) / 2. + z - bcorr(a, b)
    return const * np.sqrt(b * x0) * z * np.exp(-bcorr(a, b))


N_TERMS_BGRAT = 30


def bgrat(a, b, x, y, w, eps, log_w):
    '''
    Asymptotic Expansion for I_x(a,b)  when a is larger than b.
    Compute   w := w + I_x(a,b)
    It is assumed a >= 15 and b <= 1.
    eps is the tolerance used.

    if log_w, w itself must be in log-space;
    compute   w := w + I_x(a,b)  but return  log(w):
      log(w) := log(exp(w) + I_x(a,b)) = logspace_add(w, log( I_x(a,b) ))

    Returns (w, ierr), ierr = 0 when the expansion converged. On error
    codes 1, 2 and 3 the expansion could not be computed and w is
    returned unchanged; 4 flags non-convergence within N_TERMS_BGRAT terms.

    '''
    c = [0.] * N_TERMS_BGRAT
    d = [0.] * N_TERMS_BGRAT
    bm1 = b - 0.5 - 0.5
    nu = a + bm1 * 0.5  # nu = a + (b-1)/2 =: T, in (9.1) of Didonato & Morris(1992), p.362
    lnx = np.log(x) if y > 0.375 else alnrel(-y)
    z = -nu * lnx  # z =: u in (9.1) of D.&M.(1992)

    if b * z == 0.:
        # should not happen, but does, e.g., for  pbeta(1e-320, 1e-5, 0.5)
        # i.e., _subnormal_ x
        MATHLIB_WARNING(
            "bgrat(a={0:g}, b={1:g}, x={2:g}, y={3:g}): z={4:g}, b*z == 0 underflow, hence inaccurate pbeta()".format(
                a, b, x, y, z))
        # the expansion cannot be computed
        return w, 1

    # computation of the expansion;
    # log_r := log(r),  r := exp(-z) * z^b / gamma(b)
    log_r = np.log(b) + np.log1p(gam1(b)) + b * np.log(z) + nu * lnx
    # u is 'factored out' from the expansion {and multiplied back, at the end}:
    # algdiv(b,a) = log(gamma(a)/gamma(a+b))
    log_u = log_r - (algdiv(b, a) + b * np.log(nu))
    u = np.exp(log_u)

    if log_u == ML_NEGINF:
        return w, 2

    u_0 = (u == 0.)  # underflow --> do work with log(u) == log_u !
    # l := w/u, such that it also works when u underflows to 0
    if log_w:
        l = 0. if w == ML_NEGINF else np.exp(w - log_u)
    else:
        l = 0. if w == 0. else np.exp(np.log(w) - log_u)

    q_r = grat_r(b, z, log_r, eps)  # = q/r of former grat1(b,z, r, &p, &q)
    v = 0.25 / (nu * nu)
    t2 = lnx * 0.25 * lnx
    j = q_r
    total = j
    t = 1.
    cn = 1.
    n2 = 0.
    ierr = 0
    for n in range(1, N_TERMS_BGRAT + 1):
        bp2n = b + n2
        j = (bp2n * (bp2n + 1.) * j + (z + bp2n + 1.) * t) * v
        n2 += 2.
        t *= t2
        cn /= n2 * (n2 + 1.)
        nm1 = n - 1
        c[nm1] = cn
        s = 0.
        if n > 1:
            coef = b - n
            for i in range(1, nm1 + 1):
                s += coef * c[i - 1] * d[nm1 - i]
                coef += b
        d[nm1] = bm1 * cn + s / n
        dj = d[nm1] * j
        total += dj
        if total <= 0.:
            return w, 3
        if math.fabs(dj) <= eps * (total + l):
            ierr = 0
            break
        elif n == N_TERMS_BGRAT:
            ierr = 4
            MATHLIB_WARNING(
                "bgrat(a={0:g}, b={1:g}, x={2:g}) *no* convergence\n dj={3:g}, rel.err={4:g}".format(
                    a, b, x, dj, math.fabs(dj) / (total + l)))

    # add the results to w
    if log_w:
        # w is in log space already
        w = logspace_add(w, log_u + np.log(total))
    else:
        w += np.exp(log_u + np.log(total)) if u_0 else u * total
    return w, ierr


def grat_r(a, x, log_r, eps):
    '''
    Scaled complement of incomplete gamma ratio function
                   grat_r(a,x,r) :=  Q(a,x) / r
    where
                   Q(a,x) = pgamma(x,a, lower.tail=FALSE)
         and r = e^(-x)* x^a / Gamma(a) ==  exp(log_r)

    It is assumed that a <= 1.  eps is the tolerance to be used.

    '''
    if a * x == 0.:
        if x <= a:
            # L100
            return np.exp(-log_r)
        # L110
        return 0.
    elif a == 0.5:
        # e.g. when called from pt()
        if x < 0.25:
            p = erf_(np.sqrt(x))
            return (0.5 - p + 0.5) * np.exp(-log_r)
        sx = np.sqrt(x)
        return erfc1(1, sx) / sx * M_SQRT_PI

    elif x < 1.1:
        # Taylor series for  P(a,x)/x^a
        an = 3.
        c = x
        total = x / (a + 3.)
        tol = eps * 0.1 / (a + 1.)
        while True:
            an += 1.
            c *= -(x / an)
            t = c / (a + an)
            total += t
            if math.fabs(t) <= tol:
                break

        j = a * x * ((total / 6. - 0.5 / (a + 2.)) * x + 1. / (a + 1.))
        z = a * np.log(x)
        h = gam1(a)
        g = h + 1.

        if (x >= 0.25 and (a < x / 2.59)) or (z > -0.13394):
            l = rexpm1(z)
            q = ((l + 0.5 + 0.5) * j - l) * g - h
            if q <= 0.:
                return 0.
            return q * np.exp(-log_r)
        p = np.exp(z) * g * (0.5 - j + 0.5)
        return (0.5 - p + 0.5) * np.exp(-log_r)

    # (x >= 1.1)  ---- Continued Fraction Expansion
    a2n_1 = 1.
    a2n = 1.
    b2n_1 = x
    b2n = x + (1. - a)
    c = 1.
    while True:
        a2n_1 = x * a2n + c * a2n_1
        b2n_1 = x * b2n + c * b2n_1
        am0 = a2n_1 / b2n_1
        c += 1.
        c_a = c - a
        a2n = a2n_1 + c_a * a2n
        b2n = b2n_1 + c_a * b2n
        an0 = a2n / b2n
        if not math.fabs(an0 - am0) >= eps * an0:
            break

    # q/r = (r * an0)/r
    return an0


# NUM_IT is the maximum value that n can take in the loop of basym();
# it is required to be even
NUM_IT = 20


def basym(a, b, lambda_, eps, log_p):
    '''
    ASYMPTOTIC EXPANSION FOR I_x(A,B) FOR LARGE A AND B.
    LAMBDA = (A + B)*Y - B  AND EPS IS THE TOLERANCE USED.
    IT IS ASSUMED THAT LAMBDA IS NONNEGATIVE AND THAT
    A AND B ARE GREATER THAN OR EQUAL TO 15.

    '''
    e0 = 1.12837916709551  # e0 == 2/sqrt(pi)
    e1 = .353553390593274  # e1 == 2^(-3/2)
    ln_e0 = .120782237635245  # == ln(e0)

    a0 = [0.] * (NUM_IT + 1)
    b0 = [0.] * (NUM_IT + 1)
    c = [0.] * (NUM_IT + 1)
    d = [0.] * (NUM_IT + 1)

    f = a * rlog1(-lambda_ / a) + b * rlog1(lambda_ / b)
    if log_p:
        t = -f
    else:
        t = np.exp(-f)
        if t == 0.:
            # once underflow, always underflow ..
            return 0.

    z0 = np.sqrt(f)
    z = z0 / e1 * 0.5
    z2 = f + f

    if a < b:
        h = a / b
        r0 = 1. / (h + 1.)
        r1 = (b - a) / b
        w0 = 1. / np.sqrt(a * (h + 1.))
    else:
        h = b / a
        r0 = 1. / (h + 1.)
        r1 = (b - a) / a
        w0 = 1. / np.sqrt(b * (h + 1.))

    a0[0] = r1 * .66666666666666663
    c[0] = a0[0] * -0.5
    d[0] = -c[0]
    j0 = 0.5 / e0 * erfc1(1, z0)
    j1 = e1
    total = j0 + d[0] * w0 * j1

    s = 1.
    h2 = h * h
    hn = 1.
    w = w0
    znm1 = z
    zn = z2
    for n in range(2, NUM_IT + 1, 2):
        hn = h2 * hn
        a0[n - 1] = r0 * 2. * (h * hn + 1.) / (n + 2.)
        np1 = n + 1
        s += hn
        a0[np1 - 1] = r1 * 2. * s / (n + 3.)

        for i in range(n, np1 + 1):
            r = (i + 1.) * -0.5
            b0[0] = r * a0[0]
            for m in range(2, i + 1):
                bsum = 0.
                for j in range(1, m):
                    mmj = m - j
                    bsum += (j * r - mmj) * a0[j - 1] * b0[mmj - 1]
                b0[m - 1] = r * a0[m - 1] + bsum / m
            c[i - 1] = b0[i - 1] / (i + 1.)

            dsum = 0.
            for j in range(1, i):
                dsum += d[i - j - 1] * c[j - 1]
            d[i - 1] = -(dsum + c[i - 1])

        j0 = e1 * znm1 + (n - 1.) * j0
        j1 = e1 * zn + n * j1
        znm1 = z2 * znm1
        zn = z2 * zn
        w *= w0
        t0 = d[n - 1] * w * j0
        w *= w0
        t1 = d[np1 - 1] * w * j1
        total += t0 + t1
        if math.fabs(t0) + math.fabs(t1) <= eps * total:
            break

    if log_p:
        return ln_e0 + t - bcorr(a, b) + np.log(total)
    u = np.exp(-bcorr(a, b))
    return e0 * t * u * total
