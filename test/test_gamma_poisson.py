import math
import unittest

import numpy as np
from scipy import special, stats

from pynmath import dgamma, pgamma, dpois, NMathWarning
from pynmath.distributions.poisson import dpois_raw, dpois_wrap

INF = float("inf")
NAN = float("nan")


def close(actual, expected, rtol):
    return bool(np.isclose(actual, expected, rtol=rtol, atol=0))


class PgammaTest(unittest.TestCase):
    def test_invalid(self):
        for args in ((0., -1., 1.), (0., 1., -1.), (0., -1., -1.)):
            with self.assertWarns(NMathWarning):
                self.assertTrue(math.isnan(pgamma(*args, lower_tail=True, log_p=False)))
        self.assertTrue(math.isnan(pgamma(NAN, 1.)))

    def test_regressions(self):
        self.assertTrue(close(pgamma(0.1, 0.1, 1., False, False), special.gammaincc(0.1, 0.1), 1e-13))
        self.assertTrue(close(pgamma(0.65, 0.2, 0.34, False, False),
                              stats.gamma.sf(0.65, 0.2, scale=0.34), 1e-12))
        self.assertTrue(close(pgamma(3.21, 0.2, 0.34, False, False),
                              stats.gamma.sf(3.21, 0.2, scale=0.34), 1e-12))
        self.assertTrue(close(pgamma(3.21, 0.2, 0.34, False, True),
                              math.log(special.gammaincc(0.2, 3.21 / 0.34)), 1e-12))
        self.assertTrue(close(pgamma(123., 0.2, 0.34, False, True),
                              math.log(special.gammaincc(0.2, 123. / 0.34)), 1e-12))

    def test_against_scipy(self):
        for alph in (0.5, 1., 3.3, 20., 150., 1e4):
            for x in (0.1, 1., 5., 19., 160., 9900., 10100.):
                lower = special.gammainc(alph, x)
                upper = special.gammaincc(alph, x)
                self.assertTrue(close(pgamma(x, alph), lower, 1e-11), (x, alph))
                self.assertTrue(close(pgamma(x, alph, lower_tail=False), upper, 1e-11), (x, alph))

    def test_log_linear(self):
        for alph in (0.3, 2., 50.):
            for x in (0.05, 1.5, 40., 70.):
                for lower_tail in (True, False):
                    p = pgamma(x, alph, 1., lower_tail, False)
                    lp = pgamma(x, alph, 1., lower_tail, True)
                    if p > 1e-300:
                        self.assertTrue(close(math.exp(lp), p, 1e-11), (x, alph, lower_tail))

    def test_far_tail_in_log_scale(self):
        # the linear value underflows, the log value stays finite
        self.assertEqual(pgamma(1e4, 2., lower_tail=False), 0.)
        lp = pgamma(1e4, 2., lower_tail=False, log_p=True)
        self.assertTrue(close(lp, -1e4 + math.log1p(1e4), 1e-13))

    def test_boundaries(self):
        self.assertEqual(pgamma(0., 2.), 0.)
        self.assertEqual(pgamma(-1., 2.), 0.)
        self.assertEqual(pgamma(INF, 2.), 1.)
        self.assertEqual(pgamma(1., 0.), 1.)
        self.assertEqual(pgamma(0., 0.), 0.)
        self.assertEqual(pgamma(0., 2., lower_tail=False, log_p=True), 0.)


class DgammaTest(unittest.TestCase):
    def test_against_scipy(self):
        for shape in (0.3, 1., 2.5, 40.):
            for x in (0.01, 0.7, 3., 45.):
                for scale in (1., 0.25, 7.):
                    expected = stats.gamma.pdf(x, shape, scale=scale)
                    self.assertTrue(close(dgamma(x, shape, scale), expected, 1e-12), (x, shape, scale))
                    expected = stats.gamma.logpdf(x, shape, scale=scale)
                    self.assertAlmostEqual(dgamma(x, shape, scale, True), expected,
                                           delta=1e-12 * max(1., math.fabs(expected)))

    def test_at_zero(self):
        self.assertEqual(dgamma(0., 1., 2.), 0.5)
        self.assertAlmostEqual(dgamma(0., 1., 2., True), -math.log(2.), delta=1e-16)
        self.assertEqual(dgamma(0., 0.5), INF)
        self.assertEqual(dgamma(0., 2.), 0.)
        self.assertEqual(dgamma(-1., 2.), 0.)
        self.assertEqual(dgamma(0., 0.), INF)
        self.assertEqual(dgamma(1., 0.), 0.)

    def test_invalid(self):
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dgamma(1., -1.)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dgamma(1., 1., 0.)))


class DpoisTest(unittest.TestCase):
    def test_invalid(self):
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dpois(-1., -1.)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dpois(1., -1.)))

    def test_simple(self):
        self.assertTrue(close(dpois(1., 1.), math.exp(-1.), 1e-14))
        self.assertAlmostEqual(dpois(1., 1., True), -1., delta=1e-15)
        self.assertEqual(dpois(0., 0.), 1.)
        self.assertEqual(dpois(1., 0.), 0.)
        self.assertEqual(dpois(-1., 2.), 0.)
        self.assertEqual(dpois(INF, 2.), 0.)

    def test_non_integer(self):
        with self.assertWarns(NMathWarning):
            self.assertEqual(dpois(2.5, 3.), 0.)
        with self.assertWarns(NMathWarning):
            self.assertEqual(dpois(2.5, 3., True), -INF)

    def test_against_scipy(self):
        for k, lam in ((0., 3.), (5., 3.2), (100., 80.), (1000., 1000.), (3., 1e-5), (20., 2.)):
            self.assertTrue(close(dpois(k, lam), stats.poisson.pmf(k, lam), 1e-11), (k, lam))
            self.assertTrue(close(dpois(k, lam, True), stats.poisson.logpmf(k, lam), 1e-12), (k, lam))

    def test_raw_accepts_fractional_x(self):
        x, lam = 2.5, 3.
        expected = math.exp(x * math.log(lam) - lam - math.lgamma(x + 1))
        self.assertTrue(close(dpois_raw(x, lam), expected, 1e-13))
        self.assertTrue(close(dpois_wrap(x + 1, lam), expected, 1e-13))
        self.assertTrue(close(dpois_wrap(0.5, lam),
                              math.exp(-0.5 * math.log(lam) - lam - math.lgamma(0.5)), 1e-13))


if __name__ == "__main__":
    unittest.main()
