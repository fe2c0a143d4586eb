import math
import unittest

import numpy as np
from scipy import stats

from pynmath import pt, dt, pnt, pnorm, dnorm, NMathWarning

INF = float("inf")
NAN = float("nan")


def close(actual, expected, rtol):
    return bool(np.isclose(actual, expected, rtol=rtol, atol=0))


class PtTest(unittest.TestCase):
    def test_against_scipy(self):
        for n in (0.5, 1., 3.7, 30., 1e6):
            for x in (-50., -3., -0.4, 1.2, 8.):
                # for huge n both sides lose about n * eps to the rounding of 1 - x^2/(n + x^2)
                rtol = 1e-9 if n > 1e5 else 1e-11
                self.assertTrue(close(pt(x, n), stats.t.cdf(x, n), rtol), (x, n))
                self.assertTrue(close(pt(x, n, lower_tail=False), stats.t.sf(x, n), rtol), (x, n))

    def test_center_and_symmetry(self):
        for n in (1., 4.5, 100.):
            self.assertEqual(pt(0., n), 0.5)
            for x in (0.3, 2., 17.):
                self.assertEqual(pt(-x, n), pt(x, n, lower_tail=False))
                self.assertEqual(pt(-x, n, log_p=True), pt(x, n, False, True))

    def test_log_scale(self):
        self.assertTrue(close(pt(-40., 3., log_p=True), stats.t.logcdf(-40., 3.), 1e-12))
        self.assertTrue(close(math.exp(pt(1.5, 7., log_p=True)), pt(1.5, 7.), 1e-14))
        # x^2 > 1e100 * n switches to the asymptotic tail
        lp = pt(-1e60, 2., log_p=True)
        self.assertTrue(math.isfinite(lp))
        self.assertTrue(close(lp, math.log(1 / (2. * 1e120)), 1e-10))

    def test_limits(self):
        self.assertEqual(pt(INF, 3.), 1.)
        self.assertEqual(pt(-INF, 3.), 0.)
        self.assertEqual(pt(1.3, INF), pnorm(1.3))
        self.assertTrue(math.isnan(pt(NAN, 3.)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(pt(1., 0.)))


class DtTest(unittest.TestCase):
    def test_against_scipy(self):
        for n in (0.5, 1., 3.7, 30.):
            for x in (-50., -3., -0.4, 0., 1.2, 8.):
                self.assertTrue(close(dt(x, n), stats.t.pdf(x, n), 1e-11), (x, n))
                self.assertTrue(close(dt(x, n, True), stats.t.logpdf(x, n), 1e-11), (x, n))

    def test_large_df(self):
        # the t density tends to the normal one as n grows
        for x in (-0.4, 0., 1.2):
            self.assertTrue(close(dt(x, 1e6), dnorm(x), 1e-5), x)
            self.assertTrue(math.fabs(dt(x, 1e12) - dnorm(x)) < 1e-11)

    def test_large_x(self):
        self.assertTrue(close(dt(1e10, 3., True), stats.t.logpdf(1e10, 3.), 1e-12))
        self.assertEqual(dt(1e200, 3.), 0.)

    def test_limits(self):
        self.assertEqual(dt(INF, 3.), 0.)
        self.assertEqual(dt(0.7, INF), dnorm(0.7))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dt(1., -1.)))


class PntTest(unittest.TestCase):
    def test_central(self):
        for t, df in ((1.5, 7.), (-2., 3.), (0., 12.)):
            self.assertEqual(pnt(t, df, 0.), pt(t, df))

    def test_at_zero(self):
        self.assertEqual(pnt(0., 5., 2.), pnorm(-2.))

    def test_against_scipy(self):
        for t, df, ncp in ((1., 10., 1.), (2.5, 4.3, 1.5), (-1., 8., 0.5), (6., 20., 4.), (3., 1.5, 2.)):
            expected = stats.nct.cdf(t, df, ncp)
            self.assertAlmostEqual(pnt(t, df, ncp), expected, delta=1e-7)
            self.assertAlmostEqual(pnt(t, df, ncp, lower_tail=False), 1 - expected, delta=1e-7)

    def test_log_consistency(self):
        p = pnt(2., 6., 1.)
        self.assertTrue(close(math.exp(pnt(2., 6., 1., log_p=True)), p, 1e-12))

    def test_normal_approximation(self):
        # large df: Abramowitz & Stegun 26.7.10
        s = 1. / (4. * 5e5)
        expected = pnorm(1.7 * (1. - s), 0.8, math.sqrt(1. + 1.7 * 1.7 * 2. * s))
        self.assertEqual(pnt(1.7, 5e5, 0.8), expected)

    def test_extremes(self):
        self.assertEqual(pnt(-50., 10., 45.), 0.)
        self.assertEqual(pnt(INF, 10., 3.), 1.)
        self.assertEqual(pnt(-INF, 10., 3.), 0.)
        self.assertTrue(math.isnan(pnt(1., NAN, 1.)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(pnt(1., -1., 1.)))


if __name__ == "__main__":
    unittest.main()
