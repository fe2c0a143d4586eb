import math
import unittest

import numpy as np
from scipy import stats

from pynmath import dbinom, pbinom, dnbinom, pnbinom, NMathWarning
from pynmath.distributions.binomial import dbinom_raw

INF = float("inf")
NAN = float("nan")


def close(actual, expected, rtol):
    return bool(np.isclose(actual, expected, rtol=rtol, atol=0))


class DbinomTest(unittest.TestCase):
    def test_against_scipy(self):
        for k, n, p in ((0., 10., .3), (3., 10., .3), (10., 10., .3), (10., 10., .95),
                        (0., 10., .05), (500., 1000., .5), (2., 1e6, 1e-6), (37., 40., .9)):
            self.assertTrue(close(dbinom(k, n, p), stats.binom.pmf(k, n, p), 1e-11), (k, n, p))
            self.assertTrue(close(dbinom(k, n, p, True), stats.binom.logpmf(k, n, p), 1e-11), (k, n, p))

    def test_degenerate_probabilities(self):
        self.assertEqual(dbinom(3., 10., 0.), 0.)
        self.assertEqual(dbinom(0., 10., 0.), 1.)
        self.assertEqual(dbinom(10., 10., 1.), 1.)
        self.assertEqual(dbinom(9., 10., 1.), 0.)
        self.assertEqual(dbinom(0., 0., .4), 1.)
        self.assertEqual(dbinom(11., 10., .3), 0.)
        self.assertEqual(dbinom(-1., 10., .3), 0.)
        self.assertEqual(dbinom(3., 10., 0., True), -INF)

    def test_raw_edges(self):
        # x == n with q < 0.1 goes through bd0()
        n, p = 10., .97
        self.assertTrue(close(dbinom_raw(n, n, p, 1 - p), p ** n, 1e-13))
        n, p = 10., .03
        self.assertTrue(close(dbinom_raw(0., n, p, 1 - p), (1 - p) ** n, 1e-13))

    def test_invalid(self):
        with self.assertWarns(NMathWarning):
            self.assertEqual(dbinom(2.5, 10., .3), 0.)
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dbinom(3., 10.5, .3)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dbinom(3., 10., 1.5)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dbinom(3., -1., .5)))
        self.assertTrue(math.isnan(dbinom(NAN, 10., .3)))


class PbinomTest(unittest.TestCase):
    def test_against_scipy(self):
        for k, n, p in ((0., 10., .3), (3., 10., .3), (9., 10., .3), (500., 1000., .5),
                        (20., 1000., .05), (7., 12., .8)):
            self.assertTrue(close(pbinom(k, n, p), stats.binom.cdf(k, n, p), 1e-11), (k, n, p))
            self.assertTrue(close(pbinom(k, n, p, False), stats.binom.sf(k, n, p), 1e-11), (k, n, p))

    def test_step_function(self):
        self.assertEqual(pbinom(3.5, 10., .3), pbinom(3., 10., .3))
        self.assertEqual(pbinom(10., 10., .3), 1.)
        self.assertEqual(pbinom(11., 10., .3), 1.)
        self.assertEqual(pbinom(-1., 10., .3), 0.)
        self.assertEqual(pbinom(-1., 10., .3, False, True), 0.)
        self.assertEqual(pbinom(0., 0., .3), 1.)

    def test_matches_density_sum(self):
        n, p = 25., .37
        total = math.fsum(dbinom(float(k), n, p) for k in range(9))
        self.assertTrue(close(pbinom(8., n, p), total, 1e-13))

    def test_invalid(self):
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(pbinom(3., 10.5, .3)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(pbinom(3., INF, .3)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(pbinom(3., 10., -.3)))


class DnbinomTest(unittest.TestCase):
    def test_against_scipy(self):
        for k, size, prob in ((0., 3., .4), (5., 3., .4), (5., 2.5, .7), (100., 50., .3), (12., 1., .2)):
            self.assertTrue(close(dnbinom(k, size, prob), stats.nbinom.pmf(k, size, prob), 1e-11),
                            (k, size, prob))
            self.assertTrue(close(dnbinom(k, size, prob, True), stats.nbinom.logpmf(k, size, prob), 1e-11),
                            (k, size, prob))

    def test_huge_size(self):
        # x < 1e-10 * size: two terms of Abramowitz & Stegun 6.1.47
        size, prob = 1e11, 1 - 1e-11
        expected = math.log(size * (size + 1) / 2) + size * math.log(prob) + 2 * math.log1p(-prob)
        self.assertTrue(close(dnbinom(2., size, prob, True), expected, 1e-12))
        mean = size * (1 - prob) / prob
        self.assertTrue(close(dnbinom(2., size, prob), stats.poisson.pmf(2, mean), 1e-6))

    def test_limits(self):
        self.assertEqual(dnbinom(0., 0., .5), 1.)
        self.assertEqual(dnbinom(1., 0., .5), 0.)
        self.assertEqual(dnbinom(-1., 3., .5), 0.)
        self.assertEqual(dnbinom(0., 3., 1.), 1.)

    def test_invalid(self):
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dnbinom(1., 3., 0.)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(dnbinom(1., -3., .5)))
        with self.assertWarns(NMathWarning):
            self.assertEqual(dnbinom(1.5, 3., .4), 0.)


class PnbinomTest(unittest.TestCase):
    def test_against_scipy(self):
        for k, size, prob in ((0., 3., .4), (5., 3., .4), (5., 2.5, .7), (100., 50., .3)):
            self.assertTrue(close(pnbinom(k, size, prob), stats.nbinom.cdf(k, size, prob), 1e-11),
                            (k, size, prob))
            self.assertTrue(close(pnbinom(k, size, prob, False), stats.nbinom.sf(k, size, prob), 1e-11),
                            (k, size, prob))

    def test_limits(self):
        self.assertEqual(pnbinom(0., 0., .5), 1.)
        self.assertEqual(pnbinom(-1., 0., .5), 0.)
        self.assertEqual(pnbinom(-1., 3., .4), 0.)
        self.assertEqual(pnbinom(INF, 3., .4), 1.)
        self.assertEqual(pnbinom(5.5, 3., .4), pnbinom(5., 3., .4))

    def test_invalid(self):
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(pnbinom(1., 3., 0.)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(pnbinom(1., INF, .5)))


if __name__ == "__main__":
    unittest.main()
